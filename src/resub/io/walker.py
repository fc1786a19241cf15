from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import Iterator, Optional, Set, Tuple

from resub.constants import UNBOUNDED_DEPTH
from resub.core.interfaces import EntrySelectorProtocol
from resub.core.models import CandidateEntry
from resub.logging.helpers import get_logger
from resub.processing.patterns import GlobMatcher, compile_glob
from resub.utils.paths import file_identity, is_hidden_name


class EntrySelector(EntrySelectorProtocol):
    """Lazy tree traversal plus the selection filter chain.

    Depth is counted from the root's immediate contents (depth 0). A root that
    is a regular file is a one-entry tree at depth 0. Symlinked directories are
    reported as directories but never descended into.
    """

    def __init__(
        self,
        *,
        glob: Optional[GlobMatcher] = None,
        max_depth: int = UNBOUNDED_DEPTH,
        include_hidden: bool = False,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._glob = glob or compile_glob(None)
        self._max_depth = int(max_depth)
        self._include_hidden = bool(include_hidden)
        self._log = logger or get_logger('io.walker')

    @property
    def bounded(self) -> bool:
        return self._max_depth >= 0

    def _on_walk_error(self, exc: OSError) -> None:
        # Unreadable directories are dropped from the traversal.
        self._log.debug('traversal error skipped: %s', exc)

    @staticmethod
    def _depth_of(dirpath: str, top: str) -> int:
        if dirpath == top:
            return 0
        return len(os.path.relpath(dirpath, top).split(os.sep))

    def iter_entries(self, root: Path) -> Iterator[CandidateEntry]:
        """Yield entries under *root* in pre-order.

        Hidden entries are pruned here (never descended into), and descent
        stops once the depth limit is reached.
        """
        top = os.fspath(root)
        if not os.path.isdir(top):
            if os.path.lexists(top):
                yield CandidateEntry(path=top, depth=0, is_dir=False)
            else:
                self._log.debug('%s does not exist – skipped', top)
            return

        for dirpath, dirnames, filenames in os.walk(top, onerror=self._on_walk_error):
            depth = self._depth_of(dirpath, top)
            if not self._include_hidden:
                dirnames[:] = [d for d in dirnames if not is_hidden_name(d)]
                filenames = [f for f in filenames if not is_hidden_name(f)]

            for d in dirnames:
                yield CandidateEntry(path=os.path.join(dirpath, d), depth=depth, is_dir=True)
            for f in filenames:
                yield CandidateEntry(path=os.path.join(dirpath, f), depth=depth, is_dir=False)

            if self.bounded and depth >= self._max_depth:
                dirnames[:] = []

    def _keep(self, entry: CandidateEntry) -> bool:
        if not self._glob.matches(entry.path):
            return False
        if self.bounded and entry.depth > self._max_depth:
            return False
        return not entry.is_dir

    def select(self, root: Path) -> Iterator[Path]:
        """Yield file paths that pass glob, depth and directory filters.

        Entries whose target cannot be stat'ed are dropped silently, and a file
        reachable through several names is yielded only once.
        """
        seen: Set[Tuple[int, int]] = set()
        for entry in self.iter_entries(root):
            if not self._keep(entry):
                continue
            ident = file_identity(entry.path)
            if ident is None:
                self._log.debug('unreadable entry skipped: %s', entry.path)
                continue
            if ident in seen:
                self._log.debug('already selected under another name: %s', entry.path)
                continue
            seen.add(ident)
            yield Path(entry.path)

from __future__ import annotations

import argparse
import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal, Optional, Union

from resub.constants import STDIN_SENTINEL, UNBOUNDED_DEPTH


@dataclass(frozen=True)
class StreamMode:
    """Read stdin, write stdout; no traversal."""


@dataclass(frozen=True)
class TreeMode:
    """Discover files under *root* and rewrite them."""
    root: Path


RunMode = Union[StreamMode, TreeMode]

# Result of rewriting a single file.
FileOutcome = Literal['modified', 'printed', 'read_error', 'write_error']


@dataclass(frozen=True)
class RunConfig:
    """Immutable per-invocation configuration resolved from the CLI."""
    pattern: str
    replacement: str
    root: str
    glob: Optional[str] = None
    to_stdout: bool = False
    verbose: bool = False
    max_depth: int = UNBOUNDED_DEPTH
    include_hidden: bool = False
    jobs: Optional[int] = None
    json_logs: bool = False

    @property
    def mode(self) -> RunMode:
        if self.root == STDIN_SENTINEL:
            return StreamMode()
        return TreeMode(root=Path(self.root))

    @classmethod
    def from_namespace(cls, ns: argparse.Namespace) -> 'RunConfig':
        return cls(
            pattern=ns.pattern,
            replacement=ns.replacement,
            root=ns.path,
            glob=ns.glob,
            to_stdout=bool(ns.to_stdout),
            verbose=bool(ns.verbose),
            max_depth=int(ns.level),
            include_hidden=bool(ns.include_hidden),
            jobs=ns.jobs,
            json_logs=bool(ns.json_logs),
        )


@dataclass(frozen=True)
class CandidateEntry:
    """An entry found during traversal; *path* is the joined path string."""
    path: str
    depth: int
    is_dir: bool


@dataclass
class RunReport:
    """Outcome counters for one run; safe to update from worker threads."""
    files_total: int = 0
    files_modified: int = 0
    files_printed: int = 0
    read_errors: int = 0
    write_errors: int = 0
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    def record(self, outcome: FileOutcome) -> None:
        with self._lock:
            self.files_total += 1
            if outcome == 'modified':
                self.files_modified += 1
            elif outcome == 'printed':
                self.files_printed += 1
            elif outcome == 'read_error':
                self.read_errors += 1
            elif outcome == 'write_error':
                self.write_errors += 1

    @property
    def errors(self) -> int:
        return self.read_errors + self.write_errors

from __future__ import annotations
from pathlib import Path
from typing import Iterator, Protocol, runtime_checkable

from resub.core.models import CandidateEntry


@runtime_checkable
class EntrySelectorProtocol(Protocol):
    """Abstract candidate-file producer for tree mode."""

    def iter_entries(self, root: Path) -> Iterator[CandidateEntry]:
        """Yield every entry reachable under *root*, before filtering."""
        ...

    def select(self, root: Path) -> Iterator[Path]:
        """Yield the file paths that pass every selection filter."""
        ...

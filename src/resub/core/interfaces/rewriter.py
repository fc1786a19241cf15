from __future__ import annotations
from pathlib import Path
from typing import Optional, Protocol, runtime_checkable

from resub.core.models import FileOutcome


@runtime_checkable
class RewriterProtocol(Protocol):
    """Rewrites one file (tree mode)."""

    def rewrite(self, path: Path) -> FileOutcome:
        ...


@runtime_checkable
class StreamRewriterProtocol(Protocol):
    """Rewrites the process standard input onto standard output."""

    def rewrite_stream(self) -> Optional[str]:
        ...

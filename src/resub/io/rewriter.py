from __future__ import annotations
"""Per-file and stdin rewriting.

A file is always read completely, and its read handle closed, before the same
path is reopened for writing; a failed read therefore never truncates the
file. The new text is encoded before the file is opened for writing, so an
encoding failure leaves it untouched too. Line endings are preserved (no
newline translation in either direction).
"""
import logging
import sys
import threading
from pathlib import Path
from typing import Optional, TextIO

from resub.constants import TEXT_ENCODING
from resub.core.interfaces import RewriterProtocol, StreamRewriterProtocol, TextTransformerProtocol
from resub.core.models import FileOutcome, RunReport
from resub.logging.helpers import get_logger


class OutputSink:
    """Serialized writes to standard output.

    One call to `write` is emitted as a whole; the order of calls coming from
    different threads is unspecified. The stream is looked up on each write
    when none was injected, so redirections of ``sys.stdout`` are honored.
    """

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream
        self._lock = threading.Lock()

    def write(self, text: str) -> None:
        with self._lock:
            out = self._stream or sys.stdout
            out.write(text)
            out.flush()


class FileRewriter(RewriterProtocol):
    def __init__(
        self,
        transformer: TextTransformerProtocol,
        *,
        to_stdout: bool = False,
        verbose: bool = False,
        sink: Optional[OutputSink] = None,
        report: Optional[RunReport] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._tx = transformer
        self._to_stdout = bool(to_stdout)
        self._verbose = bool(verbose)
        self._sink = sink or OutputSink()
        self._report = report
        self._log = logger or get_logger('io.rewriter')

    def _read(self, path: Path) -> Optional[str]:
        try:
            with open(path, 'r', encoding=TEXT_ENCODING, newline='') as fh:
                return fh.read()
        except (OSError, UnicodeDecodeError) as exc:
            if self._verbose:
                self._log.error('failed to read file %s: %s', path, exc)
            return None

    def _write(self, path: Path, text: str) -> bool:
        # Encode first: opening for write truncates the file.
        try:
            data = text.encode(TEXT_ENCODING)
        except UnicodeEncodeError as exc:
            self._log.error('failed to write to file %s: %s', path, exc)
            return False
        try:
            fh = open(path, 'wb')
        except OSError as exc:
            self._log.error('could not override file %s: %s', path, exc)
            return False
        try:
            with fh as out:
                out.write(data)
        except OSError as exc:
            self._log.error('failed to write to file %s: %s', path, exc)
            return False
        return True

    def _finish(self, outcome: FileOutcome) -> FileOutcome:
        if self._report is not None:
            self._report.record(outcome)
        return outcome

    def rewrite(self, path: Path) -> FileOutcome:
        """Substitute every match in *path*, in place or onto stdout."""
        content = self._read(path)
        if content is None:
            return self._finish('read_error')

        modified = self._tx.apply(content)

        if self._to_stdout:
            self._sink.write(modified + '\n')
            return self._finish('printed')

        if not self._write(path, modified):
            return self._finish('write_error')
        if self._verbose:
            self._sink.write(f'{path} modified\n')
        return self._finish('modified')


class StreamRewriter(StreamRewriterProtocol):
    def __init__(
        self,
        transformer: TextTransformerProtocol,
        *,
        stdin: Optional[TextIO] = None,
        sink: Optional[OutputSink] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._tx = transformer
        self._stdin = stdin
        self._sink = sink or OutputSink()
        self._log = logger or get_logger('io.rewriter')

    def _read_all(self) -> str:
        src = self._stdin or sys.stdin
        raw = getattr(src, 'buffer', None)
        if raw is not None:
            return raw.read().decode(TEXT_ENCODING)
        return src.read()

    def rewrite_stream(self) -> Optional[str]:
        """Rewrite all of stdin onto stdout; return the text written, or None."""
        try:
            content = self._read_all()
        except (OSError, UnicodeDecodeError) as exc:
            self._log.error('failed to read stdin: %s', exc)
            return None
        modified = self._tx.apply(content)
        self._sink.write(modified)
        return modified

from __future__ import annotations
import logging
import os
from concurrent.futures import FIRST_COMPLETED, Future, ThreadPoolExecutor, wait
from pathlib import Path
from typing import Iterable, Optional, Set, TextIO

from resub.core.models import RunConfig, RunReport, StreamMode, TreeMode
from resub.io.rewriter import FileRewriter, OutputSink, StreamRewriter
from resub.io.walker import EntrySelector
from resub.logging.helpers import get_logger
from resub.processing.patterns import GlobMatcher, ReplacementTemplate, compile_glob, compile_pattern
from resub.processing.text_ops import TextTransformer


class ReplaceRunner:
    """Compile once, then rewrite stdin or every selected file.

    Construction compiles the pattern and the glob, so an invalid one raises
    `PatternError` before any file is touched. Per-file failures are reported
    by the rewriter and counted in the returned `RunReport`; they never raise.
    """

    # Submitted but unfinished rewrites allowed per worker thread.
    IN_FLIGHT_PER_WORKER = 2

    def __init__(
        self,
        cfg: RunConfig,
        *,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._cfg = cfg
        self._log = logger or get_logger('runner')
        self._stdin = stdin
        self._sink = OutputSink(stdout)

        matcher = compile_pattern(cfg.pattern)
        template = ReplacementTemplate.parse(cfg.replacement)
        self._transformer = TextTransformer(matcher, template)
        self._glob: Optional[GlobMatcher] = None
        if isinstance(cfg.mode, TreeMode):
            self._glob = compile_glob(cfg.glob)

    @property
    def transformer(self) -> TextTransformer:
        return self._transformer

    def run(self) -> RunReport:
        mode = self._cfg.mode
        if isinstance(mode, StreamMode):
            return self._run_stream()
        return self._run_tree(mode.root)

    def _run_stream(self) -> RunReport:
        report = RunReport()
        rewriter = StreamRewriter(self._transformer, stdin=self._stdin, sink=self._sink)
        if rewriter.rewrite_stream() is None:
            report.record('read_error')
        else:
            report.record('printed')
        return report

    def _workers(self) -> int:
        if self._cfg.jobs:
            return self._cfg.jobs
        # ThreadPoolExecutor's own default.
        return min(32, (os.cpu_count() or 1) + 4)

    @staticmethod
    def _collect(done: Iterable[Future]) -> None:
        for fut in done:
            # Rewriters report their own I/O errors; anything else is a bug.
            fut.result()

    def _run_tree(self, root: Path) -> RunReport:
        report = RunReport()
        selector = EntrySelector(
            glob=self._glob,
            max_depth=self._cfg.max_depth,
            include_hidden=self._cfg.include_hidden,
            logger=get_logger('io.walker'),
        )
        rewriter = FileRewriter(
            self._transformer,
            to_stdout=self._cfg.to_stdout,
            verbose=self._cfg.verbose,
            sink=self._sink,
            report=report,
        )

        workers = self._workers()
        limit = workers * self.IN_FLIGHT_PER_WORKER
        pending: Set[Future] = set()
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix='resub') as pool:
            for path in selector.select(root):
                pending.add(pool.submit(rewriter.rewrite, path))
                if len(pending) >= limit:
                    done, pending = wait(pending, return_when=FIRST_COMPLETED)
                    self._collect(done)
            self._collect(pending)

        self._log.debug(
            'processed %d file(s): %d modified, %d printed, %d error(s)',
            report.files_total, report.files_modified, report.files_printed, report.errors,
        )
        return report

from __future__ import annotations

import argparse
import logging
import sys
from typing import NoReturn, Optional, Sequence, TextIO

from resub.core.models import RunConfig, RunReport
from resub.logging.factory import DefaultLoggerFactory
from resub.logging.helpers import get_logger
from resub.parsing.parser import _build_parser
from resub.processing.patterns import PatternError
from resub.runtime.runner import ReplaceRunner


logger = get_logger('resub')

EXIT_OK = 0
EXIT_SETUP_ERROR = 1
EXIT_INTERRUPTED = 130


def _configure_logging(enable_json: bool, stream: Optional[TextIO] = None) -> None:
    """Configure process-wide logging, either JSON or plain text."""
    factory = DefaultLoggerFactory(json_logs=enable_json, level=logging.INFO, stream=stream)
    global logger
    logger = factory.get_logger('resub')


def _fatal(msg: str, code: int = EXIT_SETUP_ERROR) -> NoReturn:
    """Exit the process with a logged error."""
    logger.error(msg)
    sys.exit(code)


class Resub:
    """Top-level façade for command-style execution."""

    @staticmethod
    def parse(argv: Sequence[str]) -> RunConfig:
        ns: argparse.Namespace = _build_parser().parse_args(list(argv))
        return RunConfig.from_namespace(ns)

    @staticmethod
    def run(
        argv: Sequence[str],
        *,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
    ) -> RunReport:
        """Run the tool with an argv-like sequence and return the run report.

        Raises SystemExit for invalid arguments, patterns or globs.
        """
        cfg = Resub.parse(argv)
        _configure_logging(cfg.json_logs, stderr)
        try:
            runner = ReplaceRunner(cfg, stdin=stdin, stdout=stdout)
        except PatternError as exc:
            _fatal(str(exc))
        return runner.run()


def main(argv: Optional[Sequence[str]] = None) -> NoReturn:
    """Entry point for `resub` and `python -m resub`."""
    try:
        Resub.run(sys.argv[1:] if argv is None else argv)
        raise SystemExit(EXIT_OK)
    except KeyboardInterrupt:
        logger.error('Interrupted by user.')
        raise SystemExit(EXIT_INTERRUPTED)
    except BrokenPipeError:
        raise SystemExit(EXIT_OK)
    except Exception as exc:
        logger.error('Unexpected error: %s', exc)
        raise SystemExit(EXIT_SETUP_ERROR)


if __name__ == '__main__':
    main()

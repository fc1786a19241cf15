from __future__ import annotations

from resub.cli import Resub, main
from resub.constants import STDIN_SENTINEL
from resub.core.models import RunConfig, RunReport, StreamMode, TreeMode
from resub.io.rewriter import FileRewriter, OutputSink, StreamRewriter
from resub.io.walker import EntrySelector
from resub.processing.patterns import (
    GlobMatcher,
    PatternError,
    ReplacementTemplate,
    compile_glob,
    compile_pattern,
)
from resub.processing.text_ops import TextTransformer
from resub.runtime.runner import ReplaceRunner

__version__ = '1.0.0'

__all__ = [
    'Resub',
    'main',
    'STDIN_SENTINEL',
    'RunConfig',
    'RunReport',
    'StreamMode',
    'TreeMode',
    'FileRewriter',
    'OutputSink',
    'StreamRewriter',
    'EntrySelector',
    'GlobMatcher',
    'PatternError',
    'ReplacementTemplate',
    'compile_glob',
    'compile_pattern',
    'TextTransformer',
    'ReplaceRunner',
]

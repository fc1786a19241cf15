from .patterns import GlobMatcher, PatternError, ReplacementTemplate, compile_glob, compile_pattern
from .text_ops import TextTransformer

__all__ = [
    'GlobMatcher',
    'PatternError',
    'ReplacementTemplate',
    'TextTransformer',
    'compile_glob',
    'compile_pattern',
]

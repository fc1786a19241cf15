from .logging import LoggerFactoryProtocol, LoggerLikeProtocol
from .rewriter import RewriterProtocol, StreamRewriterProtocol
from .text import TextTransformerProtocol
from .walker import EntrySelectorProtocol

__all__ = [
    'EntrySelectorProtocol',
    'LoggerFactoryProtocol',
    'LoggerLikeProtocol',
    'RewriterProtocol',
    'StreamRewriterProtocol',
    'TextTransformerProtocol',
]

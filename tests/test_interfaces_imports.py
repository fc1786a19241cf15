import sys
from pathlib import Path

_SRC = Path(__file__).resolve().parents[1] / "src"
if str(_SRC) not in sys.path:
    sys.path.insert(0, str(_SRC))


def test_can_import_all_protocols():
    # Import must succeed and expose the expected names
    import resub.core.interfaces as I

    assert hasattr(I, "EntrySelectorProtocol")
    assert hasattr(I, "LoggerFactoryProtocol")
    assert hasattr(I, "LoggerLikeProtocol")
    assert hasattr(I, "RewriterProtocol")
    assert hasattr(I, "StreamRewriterProtocol")
    assert hasattr(I, "TextTransformerProtocol")


def test_concrete_classes_satisfy_protocols():
    import io

    import resub.core.interfaces as I
    from resub.io.rewriter import FileRewriter, StreamRewriter
    from resub.io.walker import EntrySelector
    from resub.logging.factory import DefaultLoggerFactory
    from resub.processing.patterns import ReplacementTemplate, compile_pattern
    from resub.processing.text_ops import TextTransformer

    tx = TextTransformer(compile_pattern("a"), ReplacementTemplate.parse("b"))
    assert isinstance(tx, I.TextTransformerProtocol)
    assert isinstance(EntrySelector(), I.EntrySelectorProtocol)
    assert isinstance(FileRewriter(tx), I.RewriterProtocol)
    assert isinstance(StreamRewriter(tx), I.StreamRewriterProtocol)

    factory = DefaultLoggerFactory(stream=io.StringIO())
    assert isinstance(factory, I.LoggerFactoryProtocol)
    assert isinstance(factory.get_logger("walker"), I.LoggerLikeProtocol)
    assert factory.get_logger("walker").name == "resub.walker"

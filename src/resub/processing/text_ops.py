import re

from resub.processing.patterns import ReplacementTemplate


class TextTransformer:
    def __init__(self, matcher: re.Pattern, template: ReplacementTemplate) -> None:
        """Global regex substitution shared by every rewriter."""
        self._rx = matcher
        self._template = template
        self._literal = ''.join(template.parts) if template.is_literal else None

    @property
    def matcher(self) -> re.Pattern:
        return self._rx

    @property
    def template(self) -> ReplacementTemplate:
        return self._template

    def _expand(self, match: 're.Match[str]') -> str:
        if self._literal is not None:
            return self._literal
        return self._template.expand(match)

    def apply(self, text: str) -> str:
        """Replace every non-overlapping match in *text*."""
        return self._rx.sub(self._expand, text)

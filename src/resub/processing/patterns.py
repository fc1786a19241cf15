from __future__ import annotations

"""Compilation of the user-supplied regex, replacement template and glob.

Everything built here is immutable and safe to share between worker threads.

Replacement syntax
------------------
    $N  / ${N}       numbered capture group (``$0`` is the whole match)
    $name / ${name}  named capture group; a bare name is the longest run of
                     ``[A-Za-z0-9_]`` after the dollar
    $$               a literal dollar sign

A reference to a group that does not exist, or that did not take part in the
match, expands to the empty string. A ``$`` that does not start a reference is
kept literally, and backslashes carry no special meaning.
"""

import fnmatch
import re
from dataclasses import dataclass
from typing import Optional, Tuple, Union

from resub.constants import MATCH_ALL_GLOB, TEXT_ENCODING

GroupRef = Union[int, str]

_BRACED_REF = re.compile(r'\{([A-Za-z0-9_]+)\}')
_BARE_REF = re.compile(r'[A-Za-z0-9_]+')


class PatternError(ValueError):
    """Raised when a regex or glob supplied by the user does not compile."""


def ensure_encodable(value: str, what: str) -> None:
    """Reject arguments that cannot be written back as UTF-8.

    Undecodable bytes on the command line reach Python as lone surrogates;
    such text could never be encoded into a rewritten file.
    """
    try:
        value.encode(TEXT_ENCODING)
    except UnicodeEncodeError as exc:
        raise PatternError(f'invalid {what} {value!r}: not valid UTF-8 ({exc.reason})') from exc


def compile_pattern(source: str) -> re.Pattern[str]:
    """Compile *source* with Python's ``re`` engine.

    Raises:
        PatternError: when the regex syntax is invalid or *source* is not
            valid UTF-8.
    """
    ensure_encodable(source, 'regex')
    try:
        return re.compile(source)
    except re.error as exc:
        raise PatternError(f'invalid regex {source!r}: {exc}') from exc


def _as_group_ref(token: str) -> GroupRef:
    return int(token) if token.isdigit() else token


@dataclass(frozen=True)
class GroupToken:
    ref: GroupRef

    def resolve(self, match: re.Match[str]) -> str:
        try:
            value = match.group(self.ref)
        except IndexError:
            return ''
        return value if value is not None else ''


@dataclass(frozen=True)
class ReplacementTemplate:
    """Parsed replacement template: literal strings and group references."""

    source: str
    parts: Tuple[Union[str, GroupToken], ...]

    @classmethod
    def parse(cls, text: str) -> 'ReplacementTemplate':
        ensure_encodable(text, 'replacement')
        parts: list[Union[str, GroupToken]] = []
        buf: list[str] = []
        i = 0
        n = len(text)
        while i < n:
            ch = text[i]
            if ch != '$':
                buf.append(ch)
                i += 1
                continue
            if text.startswith('$$', i):
                buf.append('$')
                i += 2
                continue
            m = _BRACED_REF.match(text, i + 1) or _BARE_REF.match(text, i + 1)
            if m is None:
                buf.append('$')
                i += 1
                continue
            if buf:
                parts.append(''.join(buf))
                buf = []
            parts.append(GroupToken(_as_group_ref(m.group(1) if m.re is _BRACED_REF else m.group(0))))
            i = m.end()
        if buf:
            parts.append(''.join(buf))
        return cls(source=text, parts=tuple(parts))

    @property
    def is_literal(self) -> bool:
        """True when the template contains no group reference."""
        return all(isinstance(p, str) for p in self.parts)

    def expand(self, match: re.Match[str]) -> str:
        """Render the template for one match."""
        out: list[str] = []
        for part in self.parts:
            if isinstance(part, str):
                out.append(part)
            else:
                out.append(part.resolve(match))
        return ''.join(out)


_RECURSIVE_DIR = re.compile(r'(?:^|(?<=/))\*\*/')


def _zero_dir_variants(glob: str) -> list[str]:
    """Return *glob* plus every variant with some ``**/`` components removed.

    ``fnmatch`` needs at least one separator for ``**/``; dropping the
    component lets it also stand for zero directories.
    """
    seen = {glob}
    pending = [glob]
    while pending:
        current = pending.pop()
        for m in _RECURSIVE_DIR.finditer(current):
            variant = current[:m.start()] + current[m.end():]
            if variant not in seen:
                seen.add(variant)
                pending.append(variant)
    return sorted(seen)


class GlobMatcher:
    """Case-sensitive full-path glob test backed by ``fnmatch``.

    ``*`` and ``?`` match any character, path separators included. A ``**/``
    component also matches zero directories, so ``**/a.txt`` accepts a bare
    ``a.txt``.
    """

    def __init__(self, glob: str) -> None:
        self._glob = glob
        self._rx = re.compile('|'.join(f'(?:{fnmatch.translate(g)})' for g in _zero_dir_variants(glob)))

    @property
    def glob(self) -> str:
        return self._glob

    def matches(self, path: str) -> bool:
        return self._rx.match(path) is not None

    def __repr__(self) -> str:
        return f'GlobMatcher({self._glob!r})'


def _validate_glob(glob: str) -> None:
    """Reject globs that cannot be interpreted unambiguously."""
    i = 0
    n = len(glob)
    while i < n:
        ch = glob[i]
        if ch == '[':
            j = i + 1
            if j < n and glob[j] in '!^':
                j += 1
            if j < n and glob[j] == ']':
                j += 1
            while j < n and glob[j] != ']':
                j += 1
            if j >= n:
                raise PatternError(f'invalid glob {glob!r}: unclosed character class at position {i}')
            i = j + 1
            continue
        if ch == '*':
            j = i
            while j < n and glob[j] == '*':
                j += 1
            run = j - i
            if run > 2:
                raise PatternError(f'invalid glob {glob!r}: wildcards are either regular `*` or recursive `**`')
            if run == 2:
                before_ok = i == 0 or glob[i - 1] == '/'
                after_ok = j == n or glob[j] == '/'
                if not (before_ok and after_ok):
                    raise PatternError(
                        f'invalid glob {glob!r}: recursive wildcards must form a single path component'
                    )
            i = j
            continue
        i += 1


def compile_glob(glob: Optional[str]) -> GlobMatcher:
    """Compile the optional -g/--glob value; None matches every path.

    Raises:
        PatternError: when the glob syntax is invalid.
    """
    if glob is None:
        return GlobMatcher(MATCH_ALL_GLOB)
    _validate_glob(glob)
    try:
        return GlobMatcher(glob)
    except re.error as exc:
        raise PatternError(f'invalid glob {glob!r}: {exc}') from exc

"""Glob patterns over forward-slash separated relative paths.

Supported wildcards:
  ?   one character that is not a separator
  *   any run of characters that does not contain a separator
  **  any run of characters, separators included

Patterns are anchored: they must match the whole path.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum

from license_checker.constants import PATH_SEPARATOR
from license_checker.errors import PatternSyntaxError


class TokenKind(str, Enum):
    LITERAL = "literal"
    ANY_CHAR = "?"
    SEGMENT = "*"
    RECURSIVE = "**"


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    text: str = ""


_SEP = re.escape(PATH_SEPARATOR)

_TOKEN_REGEX = {
    TokenKind.ANY_CHAR: f"[^{_SEP}]",
    TokenKind.SEGMENT: f"[^{_SEP}]*",
    TokenKind.RECURSIVE: ".*",
}


def tokenize(pattern: str) -> list[Token]:
    if not isinstance(pattern, str):
        raise PatternSyntaxError(repr(pattern), "pattern must be a string")
    if "\\" in pattern:
        raise PatternSyntaxError(pattern, "use '/' as the path separator")

    tokens: list[Token] = []
    literal: list[str] = []
    index = 0
    while index < len(pattern):
        char = pattern[index]
        if char not in "*?":
            literal.append(char)
            index += 1
            continue

        if literal:
            tokens.append(Token(TokenKind.LITERAL, "".join(literal)))
            literal = []

        if char == "?":
            tokens.append(Token(TokenKind.ANY_CHAR))
            index += 1
            continue

        run = len(pattern) - index - len(pattern[index:].lstrip("*"))
        if run > 2:
            raise PatternSyntaxError(
                pattern, f"'{'*' * run}' at offset {index}, at most two '*' may appear in a row"
            )
        tokens.append(Token(TokenKind.RECURSIVE if run == 2 else TokenKind.SEGMENT))
        index += run

    if literal:
        tokens.append(Token(TokenKind.LITERAL, "".join(literal)))
    return tokens


def _to_regex(tokens: list[Token]) -> str:
    parts: list[str] = []
    for token in tokens:
        if token.kind == TokenKind.LITERAL:
            parts.append(re.escape(token.text))
        else:
            parts.append(_TOKEN_REGEX[token.kind])
    return "".join(parts)


@dataclass(frozen=True)
class Pattern:
    source: str
    tokens: tuple[Token, ...] = field(repr=False)
    _regex: re.Pattern[str] = field(repr=False, compare=False)

    def test(self, path: str) -> bool:
        return self._regex.fullmatch(path) is not None


def compile_pattern(pattern: str) -> Pattern:
    tokens = tokenize(pattern)
    regex = re.compile(_to_regex(tokens), re.DOTALL)
    return Pattern(source=pattern, tokens=tuple(tokens), _regex=regex)

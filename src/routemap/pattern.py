"""Path pattern parsing, formatting, and joining.

Patterns are plain strings with three kinds of placeholder::

    "/books/:id"            -> variable ``id``
    "/files/*path"          -> wildcard ``path`` (may contain slashes)
    "/books(/:format)"      -> optional group, dropped unless ``format`` is given

Route maps only store and concatenate patterns. Parsing happens here,
lazily, when a link is generated.
"""

import re
from collections.abc import Mapping
from dataclasses import dataclass
from functools import lru_cache
from typing import Any

from routemap.errors import InvalidParams, InvalidPattern

_NAME = re.compile(r"[A-Za-z_]\w*")


@dataclass(frozen=True, slots=True)
class Text:
    """Literal text copied to the output unchanged."""

    value: str


@dataclass(frozen=True, slots=True)
class Variable:
    """A ``:name`` placeholder."""

    name: str


@dataclass(frozen=True, slots=True)
class Wildcard:
    """A ``*name`` placeholder. A bare ``*`` is named ``"*"``."""

    name: str


@dataclass(frozen=True, slots=True)
class OptionalGroup:
    """A parenthesized part of the pattern that may be omitted."""

    tokens: tuple["Token", ...]


type Token = Text | Variable | Wildcard | OptionalGroup


def _flush(text: list[str], tokens: list[Token]) -> None:
    if text:
        tokens.append(Text("".join(text)))
        text.clear()


@lru_cache(maxsize=1024)
def parse_pattern(pattern: str) -> tuple[Token, ...]:
    """Parse a pattern string into tokens.

    Examples::

        "/books/:id"     -> (Text("/books/"), Variable("id"))
        "/a(/:b)"        -> (Text("/a"), OptionalGroup((Text("/"), Variable("b"))))

    A ``:`` that is not followed by a name is literal text, so schemes and
    ports (``https://host:8080``) parse as text.

    Raises ``InvalidPattern`` on unbalanced parentheses.
    """
    stack: list[list[Token]] = [[]]
    text: list[str] = []
    i = 0
    while i < len(pattern):
        char = pattern[i]
        if char in ":*":
            match = _NAME.match(pattern, i + 1)
            if char == ":" and match is None:
                text.append(char)
                i += 1
                continue
            _flush(text, stack[-1])
            if char == ":":
                stack[-1].append(Variable(match.group()))
            else:
                stack[-1].append(Wildcard(match.group() if match else "*"))
            i = match.end() if match else i + 1
            continue

        if char == "(":
            _flush(text, stack[-1])
            stack.append([])
        elif char == ")":
            if len(stack) == 1:
                raise InvalidPattern(pattern, "unmatched ')'")
            _flush(text, stack[-1])
            group = stack.pop()
            stack[-1].append(OptionalGroup(tuple(group)))
        else:
            text.append(char)
        i += 1

    if len(stack) > 1:
        raise InvalidPattern(pattern, "unclosed '('")
    _flush(text, stack[0])
    return tuple(stack[0])


def _render(
    tokens: tuple[Token, ...],
    values: dict[str, str],
    missing: list[str],
) -> tuple[list[str], int]:
    """Render tokens, returning the output parts and the number of placeholders used."""
    parts: list[str] = []
    used = 0
    for token in tokens:
        if isinstance(token, Text):
            parts.append(token.value)
        elif isinstance(token, OptionalGroup):
            group_missing: list[str] = []
            group_parts, group_used = _render(token.tokens, values, group_missing)
            # Emitted only when it substitutes something and lacks nothing
            if group_used and not group_missing:
                parts.extend(group_parts)
                used += group_used
        elif token.name in values:
            parts.append(values[token.name])
            used += 1
        else:
            missing.append(token.name)
    return parts, used


def format_pattern(pattern: str, params: Mapping[str, Any] | None = None) -> str:
    """Substitute *params* into *pattern*.

    Values are converted with ``str()`` and inserted verbatim; ``None``
    counts as missing. Raises ``InvalidParams`` listing every required
    placeholder that has no value.
    """
    tokens = parse_pattern(pattern)
    values = {key: str(value) for key, value in (params or {}).items() if value is not None}
    missing: list[str] = []
    parts, _ = _render(tokens, values, missing)
    if missing:
        raise InvalidParams(pattern, tuple(dict.fromkeys(missing)))
    return "".join(parts)


def join_patterns(base: str, pattern: str) -> str:
    """Join *pattern* onto *base* with a single ``/`` separator.

    The result always starts with ``/`` unless *base* carries a scheme::

        join_patterns("books", "new")          -> "/books/new"
        join_patterns("/books/", "/")          -> "/books"
        join_patterns("", "about")             -> "/about"
        join_patterns("https://x.io/api", "v1") -> "https://x.io/api/v1"
    """
    tail = pattern.lstrip("/")
    if "://" in base:
        head = base.rstrip("/")
        return f"{head}/{tail}" if tail else head
    return "/" + "/".join(part for part in (base.strip("/"), tail) if part)

"""Parsing of canonical interval notation back into domains.

Grammar (``;`` is the default separator, whitespace between tokens is
ignored)::

    domain   := piece ("⋃" piece)*
    piece    := "∅" | lower SEP upper
    lower    := "[" INT | "(" INT | "(-∞"
    upper    := INT "]" | INT ")" | "∞)"

``inf`` is accepted as an ASCII spelling of ``∞``. A single piece parses to
that piece; several pieces parse to a ``Union``.
"""

from __future__ import annotations

import re

from dyndomain.domain.algebra import (
    DEFAULT_SEPARATOR,
    EMPTY_SET,
    UNION_GLYPH,
    Domain,
    Empty,
    Interval,
    Union,
)
from dyndomain.domain.bounds import INFINITY, Bound, Excluded, Included, Unbounded

_INF = rf"(?:{INFINITY}|inf)"
_RESERVED = frozenset(f"{UNION_GLYPH}{EMPTY_SET}{INFINITY}[]()+-0123456789")
_LOWER = rf"(?P<lower>\[\s*-?\d+|\(\s*-?\d+|\(\s*-\s*{_INF})"
_UPPER = rf"(?P<upper>-?\d+\s*\]|-?\d+\s*\)|\+?{_INF}\s*\))"


class NotationError(ValueError):
    """Raised when text is not valid interval notation."""

    def __init__(self, text: str, position: int, reason: str) -> None:
        self.text = text
        self.position = position
        self.reason = reason
        super().__init__(f"{reason} at position {position} in {text!r}")


def check_separator(separator: str) -> str:
    """Return *separator* if notation using it can be parsed back.

    Raises:
        ValueError: If *separator* is blank or contains a glyph or digit
            that interval notation already uses.
    """
    if not separator.strip():
        raise ValueError("Separator must contain a non-whitespace character")
    clash = sorted(set(separator) & _RESERVED)
    if clash:
        raise ValueError(f"Separator {separator!r} uses reserved characters: {''.join(clash)}")
    return separator


def _piece_pattern(separator: str) -> re.Pattern[str]:
    return re.compile(rf"\s*{_LOWER}\s*{re.escape(separator)}\s*{_UPPER}\s*")


def _lower_bound(token: str) -> Bound:
    body = re.sub(r"\s+", "", token)
    if body.startswith("[") and body[1:].lstrip("-").isdigit():
        return Included(int(body[1:]))
    if body[1:].lstrip("-").isdigit():
        return Excluded(int(body[1:]))
    return Unbounded()


def _upper_bound(token: str) -> Bound:
    body = re.sub(r"\s+", "", token)
    value = body[:-1]
    if not value.lstrip("-").isdigit():
        return Unbounded()
    if body.endswith("]"):
        return Included(int(value))
    return Excluded(int(value))


def parse_notation(text: str, separator: str = DEFAULT_SEPARATOR) -> Domain:
    """Parse *text* produced by ``Domain.notation(separator)``.

    Raises:
        NotationError: If *text* is empty or any piece is malformed.
        ValueError: If *separator* is not usable, see ``check_separator``.
    """
    check_separator(separator)
    if not text.strip():
        raise NotationError(text, 0, "Empty notation")

    pattern = _piece_pattern(separator)
    pieces: list[Domain] = []
    offset = 0
    for chunk in text.split(UNION_GLYPH):
        if chunk.strip() == EMPTY_SET:
            pieces.append(Empty())
        else:
            match = pattern.fullmatch(chunk)
            if match is None:
                raise NotationError(text, offset, f"Malformed interval {chunk.strip()!r}")
            pieces.append(
                Interval(_lower_bound(match["lower"]), _upper_bound(match["upper"]))
            )
        offset += len(chunk) + len(UNION_GLYPH)

    if len(pieces) == 1:
        return pieces[0]
    return Union(items=tuple(pieces))

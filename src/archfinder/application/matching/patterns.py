"""Glob patterns over dotted type names.

A pattern is a dot separated list of segments:
    **          zero or more whole segments
    other       one segment; inside it `*` is any run of characters
                and `?` is one character, neither crosses a dot

Examples:
    app.**          app itself and everything below it
    **.Service      Service at any depth, top level included
    app.*.models.*  exactly two levels between app and a model class
"""

from __future__ import annotations

import re
from dataclasses import dataclass

_ANY_SEGMENTS = "**"


@dataclass(frozen=True, slots=True)
class TypePattern:
    """Compiled type name pattern.

    Attributes:
        original: Pattern as given
        regex: Regex matched against the whole name
    """

    original: str
    regex: re.Pattern[str]

    def match(self, fqn: str) -> bool:
        """Check if a fully qualified name matches.

        Raises:
            TypeError: If fqn is None
        """
        if fqn is None:
            raise TypeError("fqn must not be None")
        return self.regex.fullmatch(fqn) is not None

    def __str__(self) -> str:
        return self.original

    def __repr__(self) -> str:
        return f"TypePattern({self.original!r})"


def compile_type_pattern(pattern: str) -> TypePattern:
    """Compile a dotted glob into a TypePattern.

    Args:
        pattern: Glob pattern string

    Returns:
        TypePattern

    Raises:
        ValueError: If pattern is empty or has an empty segment
    """
    if not pattern:
        raise ValueError("pattern must not be empty")

    segments = pattern.split(".")
    if not all(segments):
        raise ValueError(f"invalid pattern '{pattern}': empty segment")

    if segments == [_ANY_SEGMENTS]:
        return TypePattern(original=pattern, regex=re.compile(r".*"))

    pieces: list[str] = []
    # leading ** carries its own trailing dot, the next segment must not add one
    needs_dot = False

    for index, segment in enumerate(segments):
        if segment == _ANY_SEGMENTS:
            if index == 0:
                pieces.append(r"(?:[^.]+\.)*")
                needs_dot = False
            else:
                pieces.append(r"(?:\.[^.]+)*")
            continue

        if needs_dot:
            pieces.append(r"\.")
        pieces.append(_translate_segment(segment))
        needs_dot = True

    return TypePattern(original=pattern, regex=re.compile("".join(pieces)))


def _translate_segment(segment: str) -> str:
    out: list[str] = []
    for char in segment:
        match char:
            case "*":
                out.append(r"[^.]*")
            case "?":
                out.append(r"[^.]")
            case _:
                out.append(re.escape(char))
    return "".join(out)

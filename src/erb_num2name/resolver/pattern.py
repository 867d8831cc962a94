"""Lexical pattern for ERB variable references.

A reference is BASE[:SCOPE]:INDEX, for example:
- ABL:3          (implicit current character)
- ABL:TARGET:3   (explicit scope)
- TALENT:2:0     (numeric scope, character #2)

The delimiter sets are tuned so that function-call argument lists such as
"@BASERATIO(ARG, ARG:1, ARG:2)" never produce a BASE spanning the call.
"""

import re
from collections.abc import Iterator
from dataclasses import dataclass

__all__ = ["VAR_PATTERN", "VariableReference", "find_references"]

# BASE excludes ( ) { } [ % : and whitespace; SCOPE excludes ( ) { : and whitespace
VAR_PATTERN = re.compile(r"([^(){}\[%: \t\r\n]+)(?::([^ \t\r(){\n:]+))?:([0-9]+)")


@dataclass(frozen=True)
class VariableReference:
    """One matched variable reference.

    Attributes:
        raw_text: The full matched substring.
        base_name: Leading identifier, possibly carrying a NAME suffix.
        scope: Scope qualifier without its leading ":" or None.
        index_text: Trailing digits exactly as written (e.g. "01").
        start: Start offset of the match in the source text.
        end: End offset of the match in the source text.

    """

    raw_text: str
    base_name: str
    scope: str | None
    index_text: str
    start: int
    end: int


def find_references(text: str) -> Iterator[VariableReference]:
    """Yield references left to right, non-overlapping, leftmost-first."""
    for match in VAR_PATTERN.finditer(text):
        yield VariableReference(
            raw_text=match.group(0),
            base_name=match.group(1),
            scope=match.group(2),
            index_text=match.group(3),
            start=match.start(),
            end=match.end(),
        )

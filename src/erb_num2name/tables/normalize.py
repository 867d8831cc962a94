"""Display-name normalization for table entries.

Turns names into identifier-safe text for ERB contexts that forbid
parentheses and spaces:
- full-width forms become half-width (Ａ -> A, ア -> ｱ, ideographic space -> space)
- spaces are dropped or replaced with underscores (SpacePolicy)
- "(" becomes "__" and ")" is dropped
"""

import unicodedata

from erb_num2name.core.config import SpacePolicy

__all__ = ["to_halfwidth", "normalize_name"]


def _narrow_forms() -> dict[str, str]:
    """Build the reverse of the <narrow> decompositions (ア -> ｱ, ㄱ -> ﾡ)."""
    forms: dict[str, str] = {}
    for code in range(0xFF61, 0xFFEF):
        char = chr(code)
        decomposition = unicodedata.decomposition(char)
        if decomposition.startswith("<narrow> "):
            forms[chr(int(decomposition.split()[1], 16))] = char
    return forms


_NARROW_FORMS = _narrow_forms()


def to_halfwidth(char: str) -> str:
    """Map a full-width character to its half-width form, or return it unchanged.

    Covers full-width ASCII (<wide> forms) and characters that have a
    half-width variant in the Halfwidth and Fullwidth Forms block, such as
    katakana. Composed kana like ガ have no single-character form and stay.
    """
    decomposition = unicodedata.decomposition(char)
    if decomposition.startswith("<wide> "):
        return chr(int(decomposition.split()[1], 16))
    return _NARROW_FORMS.get(char, char)


def normalize_name(name: str, space_policy: SpacePolicy = SpacePolicy.DROP) -> str:
    """Normalize a table display name.

    Example:
        >>> normalize_name("쾌Ａ")
        '쾌A'
        >>> normalize_name("Big (Red) Sword", SpacePolicy.UNDERSCORE)
        'Big___Red_Sword'

    """
    space = "_" if space_policy == SpacePolicy.UNDERSCORE else ""
    parts: list[str] = []
    for char in name:
        char = to_halfwidth(char)
        if char == " ":
            parts.append(space)
        elif char == "(":
            parts.append("__")
        elif char == ")":
            continue
        else:
            parts.append(char)
    return "".join(parts)

"""Family selection policy for CSV tables.

A family is the uppercased stem of a CSV file (ABL.CSV -> "ABL"). Only
families that are selected get loaded into the TableStore; unselected
families behave exactly like missing ones during resolution.
"""

from collections.abc import Iterable

__all__ = [
    "CHARA_FAMILIES",
    "GLOBAL_FAMILIES",
    "DEFAULT_FAMILIES",
    "is_chara_family",
    "TableSelection",
]

# Families whose indices are scoped to one character (ABL:TARGET:3)
CHARA_FAMILIES = frozenset(
    {
        "ABL",
        "BASE",
        "CFLAG",
        "EX",
        "EXP",
        "JUEL",
        "MARK",
        "SOURCE",
        "STAIN",
        "TALENT",
        "CSTR",
        "EQUIP",
        "PALAM",
        "UP",
        "DOWN",
        "UPBASE",
        "DOWNBASE",
        "NOWEX",
        "TCVAR",
    }
)

# Families whose indices are scoped to the whole game state
GLOBAL_FAMILIES = frozenset({"STR", "FLAG", "CFLAG", "TFLAG", "TEQUIP"})

DEFAULT_FAMILIES = CHARA_FAMILIES | GLOBAL_FAMILIES


def is_chara_family(name: str) -> bool:
    return name in CHARA_FAMILIES


class TableSelection:
    """Decides which candidate families are loaded.

    Evaluation order: includes win, then excludes, then the default
    allow-list. Names are compared uppercased.

    Example:
        >>> selection = TableSelection(includes=["item"], excludes=["ABL"])
        >>> selection.is_needed("ITEM"), selection.is_needed("ABL")
        (True, False)

    """

    def __init__(
        self,
        includes: Iterable[str] = (),
        excludes: Iterable[str] = (),
    ) -> None:
        self.includes = frozenset(name.upper() for name in includes)
        self.excludes = frozenset(name.upper() for name in excludes)

    def is_needed(self, family: str) -> bool:
        family = family.upper()
        if family in self.includes:
            return True
        if family in self.excludes:
            return False
        return family in DEFAULT_FAMILIES

    def __repr__(self) -> str:
        return (
            f"TableSelection(includes={sorted(self.includes)!r}, "
            f"excludes={sorted(self.excludes)!r})"
        )

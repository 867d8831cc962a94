"""Static alias rules mapping reference base names to table families.

Several reference forms share one backing table: PALAM/UP/DOWN values are
indexed like JUEL, NOWEX like EX, UPBASE/DOWNBASE like BASE. A base name
ending in NAME (ABLNAME, TALENTNAME) asks for the label of an index and
uses the table of the stripped name.
"""

__all__ = ["NAME_SUFFIX", "FAMILY_ALIASES", "strip_name_suffix", "resolve_family"]

NAME_SUFFIX = "NAME"

FAMILY_ALIASES: dict[str, str] = {
    "PALAM": "JUEL",
    "UP": "JUEL",
    "DOWN": "JUEL",
    "NOWEX": "EX",
    "UPBASE": "BASE",
    "DOWNBASE": "BASE",
}


def strip_name_suffix(base_name: str) -> str:
    """Strip a trailing NAME, leaving the name alone if nothing would remain."""
    if base_name.endswith(NAME_SUFFIX) and len(base_name) > len(NAME_SUFFIX):
        return base_name[: -len(NAME_SUFFIX)]
    return base_name


def resolve_family(base_name: str) -> str:
    """Return the table family that backs a reference base name.

    Example:
        >>> resolve_family("ABLNAME"), resolve_family("PALAM"), resolve_family("FLAG")
        ('ABL', 'JUEL', 'FLAG')

    """
    family = strip_name_suffix(base_name)
    return FAMILY_ALIASES.get(family, family)

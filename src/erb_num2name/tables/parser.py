"""CSV table parsing.

Table files map an integer index to a display name, one row per line:

    ;comment line
    0,C-sense
    1,V-sense,unused column ;trailing comment

Parsing is lexical, not CSV-quote-aware: the first ";" starts a comment,
the first "," separates the index from the name and a second "," ends the
name. Comments are stripped after the line has been trimmed, and the
whitespace left in front of the ";" is trimmed too, so "0,Name ;note"
yields "Name" rather than "Name ".
"""

import logging
import re
from pathlib import Path

from erb_num2name.core.config import SpacePolicy
from erb_num2name.core.exceptions import TableParseError
from erb_num2name.core.textio import read_bom_text
from erb_num2name.tables.normalize import normalize_name

logger = logging.getLogger(__name__)

__all__ = ["MAX_INDEX", "parse_index", "parse_table_text", "parse_table_file"]

# Indices are unsigned 32-bit in the script engine
MAX_INDEX = 0xFFFFFFFF
_MAX_INDEX_DIGITS = len(str(MAX_INDEX))

_INDEX_PATTERN = re.compile(r"[0-9]+")


def parse_index(text: str) -> int | None:
    """Parse an ASCII-digit index, or return None if invalid or out of range.

    The digit count is checked before int() so arbitrarily long digit runs
    never reach the interpreter's integer conversion limit.
    """
    text = text.strip()
    if not _INDEX_PATTERN.fullmatch(text):
        return None
    if len(text.lstrip("0")) > _MAX_INDEX_DIGITS:
        return None
    value = int(text)
    if value > MAX_INDEX:
        return None
    return value


def parse_table_text(
    text: str,
    *,
    family: str = "",
    path: Path | None = None,
    normalize: bool = False,
    space_policy: SpacePolicy = SpacePolicy.DROP,
) -> dict[int, str]:
    """Parse table content (BOM already removed) into an index->name mapping.

    Later rows with a duplicate index overwrite earlier ones.

    Args:
        text: Table file content.
        family: Family name, for error reporting.
        path: Source path, for error reporting.
        normalize: Apply normalize_name() to every name.
        space_policy: Space handling used by normalization.

    Returns:
        Mapping of index to display name.

    Raises:
        TableParseError: If a row has no "," separator or a non-numeric index.

    """
    entries: dict[int, str] = {}

    for line_number, raw_line in enumerate(text.split("\n"), start=1):
        line = raw_line.strip()
        comment = line.find(";")
        if comment != -1:
            line = line[:comment].rstrip()

        if not line:
            continue

        index_text, sep, name = line.partition(",")
        if not sep:
            raise TableParseError(
                f"{path or family}:{line_number}: missing ',' separator in row {line!r}",
                family=family,
                path=path,
                line_number=line_number,
            )

        index = parse_index(index_text)
        if index is None:
            raise TableParseError(
                f"{path or family}:{line_number}: invalid index {index_text!r}",
                family=family,
                path=path,
                line_number=line_number,
            )

        name = name.split(",", 1)[0]
        entries[index] = normalize_name(name, space_policy) if normalize else name

    return entries


def parse_table_file(
    path: Path,
    family: str,
    *,
    normalize: bool = False,
    space_policy: SpacePolicy = SpacePolicy.DROP,
) -> dict[int, str]:
    """Read and parse one CSV table file.

    A file without the UTF-8 BOM is skipped with a warning and yields an
    empty mapping.

    Raises:
        TableParseError: On a malformed row.
        OSError: If the file cannot be read.
        UnicodeDecodeError: If the file is not valid UTF-8.

    """
    text = read_bom_text(path)
    if text is None:
        return {}

    entries = parse_table_text(
        text,
        family=family,
        path=path,
        normalize=normalize,
        space_policy=space_policy,
    )
    logger.debug("Parsed %d entries for %s from %s", len(entries), family, path)
    return entries

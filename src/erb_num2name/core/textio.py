"""BOM-aware text I/O and case-insensitive file discovery.

Both CSV tables and ERB scripts are UTF-8 files that must start with a
byte-order mark. Files without the mark are skipped, never rewritten.

Text is decoded from raw bytes (not via text-mode open) so that CRLF line
endings survive a read/rewrite cycle verbatim.
"""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

BOM = b"\xef\xbb\xbf"

__all__ = [
    "BOM",
    "has_bom",
    "read_bom_text",
    "write_bom_text",
    "find_subdir",
    "list_files",
]


def has_bom(data: bytes) -> bool:
    """Check whether raw file content starts with the UTF-8 BOM."""
    return data[: len(BOM)] == BOM


def read_bom_text(path: Path) -> str | None:
    """Read a UTF-8 file that must start with a BOM.

    Args:
        path: File to read.

    Returns:
        Decoded text without the BOM, or None if the BOM is missing
        (a warning is logged).

    Raises:
        OSError: If the file cannot be read.
        UnicodeDecodeError: If the content is not valid UTF-8.

    """
    data = path.read_bytes()
    if not has_bom(data):
        logger.warning("Can't find BOM in %s, skipping it", path)
        return None
    return data[len(BOM) :].decode("utf-8")


def write_bom_text(path: Path, text: str) -> None:
    """Overwrite a file with the BOM followed by UTF-8 encoded text.

    Raises:
        OSError: If the file cannot be written.

    """
    path.write_bytes(BOM + text.encode("utf-8"))


def find_subdir(root: Path, name: str) -> Path | None:
    """Find a direct child directory of root, matching name case-insensitively.

    An exact match wins over a case-insensitive one.

    Returns:
        The directory path, or None if no such directory exists.

    """
    exact = root / name
    if exact.is_dir():
        return exact

    wanted = name.upper()
    for child in sorted(root.iterdir()):
        if child.is_dir() and child.name.upper() == wanted:
            return child
    return None


def list_files(directory: Path, suffix: str, *, recursive: bool = False) -> list[Path]:
    """List files under directory whose extension matches suffix case-insensitively.

    Args:
        directory: Directory to search.
        suffix: Extension including the dot (e.g. ".ERB").
        recursive: Descend into subdirectories.

    Returns:
        Sorted list of matching file paths. Empty if directory is missing.

    """
    if not directory.is_dir():
        logger.debug("Directory not found: %s", directory)
        return []

    wanted = suffix.upper()
    candidates = directory.rglob("*") if recursive else directory.iterdir()
    return sorted(p for p in candidates if p.is_file() and p.suffix.upper() == wanted)

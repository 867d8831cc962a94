"""Exception hierarchy for erb-num2name.

All errors raised by the package derive from Num2NameError so callers can
catch everything with a single handler. Failures that are local to one
table or one ERB file (TableError, ConversionError) are caught by the
pipeline, logged and recorded in the run report. ConfigError is fatal and
aborts the run before any parallel work starts.
"""

from pathlib import Path

__all__ = [
    "Num2NameError",
    "ConfigError",
    "TableError",
    "TableParseError",
    "ConversionError",
]


class Num2NameError(Exception):
    """Base exception for all erb-num2name errors."""

    pass


class ConfigError(Num2NameError):
    """Configuration is invalid or cannot be loaded.

    Raised when:
    - Target directory does not exist or is not a directory
    - Config file has invalid YAML or fails schema validation
    - Auxiliary rewrite pattern file is malformed
    """

    pass


class TableError(Num2NameError):
    """A CSV table could not be loaded.

    Attributes:
        family: Uppercased family name derived from the file stem.
        path: Path of the table file.

    """

    def __init__(
        self,
        message: str,
        *,
        family: str = "",
        path: Path | None = None,
    ) -> None:
        super().__init__(message)
        self.family = family
        self.path = path


class TableParseError(TableError):
    """A CSV row is malformed (no separator, non-numeric index).

    Attributes:
        line_number: 1-based line number of the offending row.

    """

    def __init__(
        self,
        message: str,
        *,
        family: str = "",
        path: Path | None = None,
        line_number: int = 0,
    ) -> None:
        super().__init__(message, family=family, path=path)
        self.line_number = line_number


class ConversionError(Num2NameError):
    """An ERB file could not be read, decoded or written back.

    Attributes:
        path: Path of the ERB file.

    """

    def __init__(self, message: str, *, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path

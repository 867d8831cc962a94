"""Tests for the exception hierarchy."""

from pathlib import Path

from erb_num2name.core.exceptions import (
    ConfigError,
    ConversionError,
    Num2NameError,
    TableError,
    TableParseError,
)


class TestExceptionHierarchy:
    def test_all_derive_from_base(self) -> None:
        for exc in (ConfigError, TableError, TableParseError, ConversionError):
            assert issubclass(exc, Num2NameError)

    def test_parse_error_is_table_error(self) -> None:
        assert issubclass(TableParseError, TableError)

    def test_table_parse_error_attributes(self) -> None:
        err = TableParseError("bad row", family="ABL", path=Path("ABL.CSV"), line_number=4)
        assert str(err) == "bad row"
        assert err.family == "ABL"
        assert err.path == Path("ABL.CSV")
        assert err.line_number == 4

    def test_default_attributes(self) -> None:
        err = TableError("oops")
        assert err.family == ""
        assert err.path is None
        assert ConversionError("oops").path is None

    def test_in_all_exports(self) -> None:
        from erb_num2name.core import exceptions

        assert set(exceptions.__all__) == {
            "Num2NameError",
            "ConfigError",
            "TableError",
            "TableParseError",
            "ConversionError",
        }

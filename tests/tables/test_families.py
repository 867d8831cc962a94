"""Tests for the family selection policy."""

import pytest

from erb_num2name.tables.families import (
    CHARA_FAMILIES,
    DEFAULT_FAMILIES,
    GLOBAL_FAMILIES,
    TableSelection,
    is_chara_family,
)


class TestFamilyGroups:
    def test_default_is_union_of_groups(self) -> None:
        assert DEFAULT_FAMILIES == CHARA_FAMILIES | GLOBAL_FAMILIES

    @pytest.mark.parametrize("name", ["ABL", "TALENT", "PALAM", "NOWEX", "TCVAR"])
    def test_chara_families(self, name: str) -> None:
        assert is_chara_family(name)
        assert name not in GLOBAL_FAMILIES

    @pytest.mark.parametrize("name", ["STR", "FLAG", "TFLAG", "TEQUIP"])
    def test_global_families(self, name: str) -> None:
        assert name in GLOBAL_FAMILIES
        assert not is_chara_family(name)

    def test_cflag_in_both_groups(self) -> None:
        assert is_chara_family("CFLAG")
        assert "CFLAG" in GLOBAL_FAMILIES


class TestTableSelection:
    """Tests for TableSelection.is_needed()."""

    def test_defaults_selected(self) -> None:
        selection = TableSelection()
        assert selection.is_needed("ABL")
        assert selection.is_needed("FLAG")
        assert not selection.is_needed("ITEM")

    def test_include_adds_family(self) -> None:
        assert TableSelection(includes=["ITEM"]).is_needed("ITEM")

    def test_exclude_removes_default(self) -> None:
        assert not TableSelection(excludes=["ABL"]).is_needed("ABL")

    def test_include_wins_over_exclude(self) -> None:
        selection = TableSelection(includes=["ABL"], excludes=["ABL"])
        assert selection.is_needed("ABL")

    def test_case_insensitive(self) -> None:
        selection = TableSelection(includes=["item"], excludes=["abl"])
        assert selection.is_needed("Item")
        assert not selection.is_needed("abl")
        assert selection.is_needed("talent")

"""Pytest configuration and fixtures for erb-num2name tests."""

import logging
from collections.abc import Callable
from pathlib import Path

import pytest

from erb_num2name.core.textio import BOM
from erb_num2name.tables.store import TableStore


@pytest.fixture(autouse=True)
def restore_root_logging():
    """Undo logging changes made by CLI invocations (_setup_logging uses force=True)."""
    root = logging.getLogger()
    level = root.level
    handlers = list(root.handlers)
    yield
    root.setLevel(level)
    root.handlers[:] = handlers


@pytest.fixture
def sample_store() -> TableStore:
    """Store with the ABL/BASE/TALENT families used across resolver tests."""
    return TableStore(
        {
            "ABL": {0: "C-sense", 1: "V-sense"},
            "BASE": {0: "HP", 1: "MP"},
            "TALENT": {0: "Virgin"},
        }
    )


@pytest.fixture
def write_bom_file() -> Callable[[Path, str], Path]:
    """Write text to a file with a UTF-8 BOM, creating parent directories."""

    def _write(path: Path, text: str) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(BOM + text.encode("utf-8"))
        return path

    return _write


@pytest.fixture
def game_dir(tmp_path: Path, write_bom_file: Callable[[Path, str], Path]) -> Path:
    """Minimal game tree with CSV tables and ERB scripts."""
    root = tmp_path / "game"
    write_bom_file(root / "CSV" / "Abl.csv", "0,C-sense\n1,V-sense ;comment\n")
    write_bom_file(root / "CSV" / "BASE.CSV", "; base stats\n0,HP,100\n1,MP,50\n")
    write_bom_file(root / "CSV" / "TALENT.CSV", "0,Virgin\n")
    write_bom_file(root / "CSV" / "ITEM.CSV", "0,Potion\n")
    write_bom_file(
        root / "ERB" / "SYSTEM.ERB",
        "@EVENTFIRST\nABL:0 += 1\nSIF BASE:MASTER:1 > 0\n\tPRINTV TALENT:2:0\n",
    )
    write_bom_file(root / "ERB" / "sub" / "train.erb", "ITEM:0\r\nABLNAME:1\r\n")
    return root

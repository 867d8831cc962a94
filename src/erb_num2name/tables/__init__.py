"""Table Store: selection, parsing and loading of CSV index->name tables.

Public API:
- TableSelection: include/exclude/default family policy
- parse_table_text() / parse_table_file(): single table parsing
- normalize_name(): identifier-safe display names
- TableStore / load_table_store(): the frozen, shared store
"""

from erb_num2name.tables.families import (
    CHARA_FAMILIES,
    DEFAULT_FAMILIES,
    GLOBAL_FAMILIES,
    TableSelection,
    is_chara_family,
)
from erb_num2name.tables.normalize import normalize_name, to_halfwidth
from erb_num2name.tables.parser import (
    MAX_INDEX,
    parse_index,
    parse_table_file,
    parse_table_text,
)
from erb_num2name.tables.store import TableLoadResult, TableStore, load_table_store

__all__ = [
    "CHARA_FAMILIES",
    "GLOBAL_FAMILIES",
    "DEFAULT_FAMILIES",
    "TableSelection",
    "is_chara_family",
    "normalize_name",
    "to_halfwidth",
    "MAX_INDEX",
    "parse_index",
    "parse_table_text",
    "parse_table_file",
    "TableStore",
    "TableLoadResult",
    "load_table_store",
]

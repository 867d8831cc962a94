"""In-memory store of index->name tables, keyed by family.

The store is built once per run by load_table_store(): every selected CSV
file is parsed in a thread pool, results are merged only after all
workers finish, and the merged mapping is frozen. Rewrite workers then
share the store read-only without locking.

Usage:
    from erb_num2name.tables import TableSelection, load_table_store

    store = load_table_store(Path("game/CSV"), TableSelection(), workers=8)
    store.lookup("ABL", 3)  # "STRENGTH" or None
"""

import logging
from collections.abc import Iterator, Mapping
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType

from erb_num2name.core.config import SpacePolicy
from erb_num2name.core.exceptions import TableError
from erb_num2name.core.textio import list_files
from erb_num2name.tables.families import TableSelection
from erb_num2name.tables.parser import parse_table_file

logger = logging.getLogger(__name__)

__all__ = ["TABLE_SUFFIX", "TableStore", "TableLoadResult", "load_table_store"]

TABLE_SUFFIX = ".CSV"


class TableStore(Mapping[str, Mapping[int, str]]):
    """Immutable family -> (index -> name) mapping.

    Absent families simply fail every lookup.
    """

    def __init__(self, tables: Mapping[str, Mapping[int, str]] | None = None) -> None:
        frozen = {
            family.upper(): MappingProxyType(dict(entries))
            for family, entries in (tables or {}).items()
        }
        self._tables: Mapping[str, Mapping[int, str]] = MappingProxyType(frozen)

    def __getitem__(self, family: str) -> Mapping[int, str]:
        return self._tables[family]

    def __iter__(self) -> Iterator[str]:
        return iter(self._tables)

    def __len__(self) -> int:
        return len(self._tables)

    @property
    def families(self) -> frozenset[str]:
        return frozenset(self._tables)

    def lookup(self, family: str, index: int) -> str | None:
        """Return the display name for family/index, or None on any miss."""
        entries = self._tables.get(family)
        if entries is None:
            return None
        return entries.get(index)

    def __repr__(self) -> str:
        return f"TableStore(families={sorted(self._tables)!r})"


@dataclass
class TableLoadResult:
    """Outcome of loading the tables directory.

    Attributes:
        store: The frozen store of successfully loaded families.
        skipped: Families found on disk but not selected.
        failed: Families whose file failed to load, with the error message.

    """

    store: TableStore
    skipped: list[str] = field(default_factory=list)
    failed: dict[str, str] = field(default_factory=dict)


def _load_one(
    path: Path,
    family: str,
    normalize: bool,
    space_policy: SpacePolicy,
) -> tuple[str, dict[int, str]]:
    try:
        entries = parse_table_file(
            path, family, normalize=normalize, space_policy=space_policy
        )
    except (OSError, UnicodeDecodeError) as e:
        raise TableError(f"Cannot read table {path}: {e}", family=family, path=path) from e
    return family, entries


def load_table_store(
    csv_dir: Path,
    selection: TableSelection,
    *,
    normalize: bool = False,
    space_policy: SpacePolicy = SpacePolicy.DROP,
    workers: int = 1,
) -> TableLoadResult:
    """Load every selected table under csv_dir into a TableStore.

    One bad file never aborts the others: its family is left out of the
    store and the failure is logged and recorded in the result.

    Args:
        csv_dir: Directory holding *.CSV files (matched case-insensitively).
        selection: Include/exclude policy.
        normalize: Normalize display names.
        space_policy: Space handling used by normalization.
        workers: Thread pool size.

    Returns:
        TableLoadResult with the frozen store and per-family outcomes.

    """
    candidates: list[tuple[Path, str]] = []
    skipped: list[str] = []
    for path in list_files(csv_dir, TABLE_SUFFIX):
        family = path.stem.upper()
        if selection.is_needed(family):
            candidates.append((path, family))
        else:
            skipped.append(family)

    logger.debug(
        "Loading %d tables from %s (%d not selected)", len(candidates), csv_dir, len(skipped)
    )

    tables: dict[str, dict[int, str]] = {}
    failed: dict[str, str] = {}

    if candidates:
        with ThreadPoolExecutor(max_workers=max(1, workers)) as executor:
            futures = {
                executor.submit(_load_one, path, family, normalize, space_policy): family
                for path, family in candidates
            }
            for future in as_completed(futures):
                family = futures[future]
                try:
                    _, entries = future.result()
                except TableError as e:
                    logger.error("Loading table %s failed: %s", family, e)
                    failed[family] = str(e)
                    continue
                except Exception as e:
                    logger.exception("Unexpected error loading table %s", family)
                    failed[family] = f"Unexpected error: {e}"
                    continue
                tables[family] = entries

    store = TableStore(tables)
    logger.info("Loaded %d tables: %s", len(store), ", ".join(sorted(store)))
    return TableLoadResult(store=store, skipped=sorted(skipped), failed=failed)

"""Batch conversion of a game directory.

Run order:
1. Validate the target and load the auxiliary rewrite rules (fatal on error)
2. Load the TableStore from <target>/CSV (parallel, barrier, frozen)
3. Rewrite every <target>/ERB/**/*.ERB in a thread pool

Failures local to one table or one ERB file are logged and recorded in
the ConversionReport; they never abort sibling work.
"""

import logging
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from erb_num2name.core.config import ConvertConfig
from erb_num2name.core.exceptions import ConfigError, ConversionError
from erb_num2name.core.textio import find_subdir, list_files, read_bom_text, write_bom_text
from erb_num2name.resolver.resolver import ReferenceResolver
from erb_num2name.resolver.rewrite_rules import (
    RewriteRule,
    apply_rewrite_rules,
    load_rewrite_rules,
)
from erb_num2name.tables.families import TableSelection
from erb_num2name.tables.store import load_table_store

logger = logging.getLogger(__name__)

__all__ = [
    "CSV_DIR",
    "ERB_DIR",
    "ERB_SUFFIX",
    "FileStatus",
    "ConversionReport",
    "convert_text",
    "convert_erb",
    "convert",
]

CSV_DIR = "CSV"
ERB_DIR = "ERB"
ERB_SUFFIX = ".ERB"


class FileStatus(str, Enum):
    """Outcome of converting one ERB file."""

    CONVERTED = "converted"
    SKIPPED = "skipped"


@dataclass
class ConversionReport:
    """Summary of one conversion run.

    Attributes:
        tables_loaded: Families present in the store.
        tables_failed: Family -> error message for tables that failed to load.
        converted: ERB files rewritten.
        skipped: ERB files left untouched (missing BOM).
        failed: ERB file -> error message.

    """

    tables_loaded: list[str] = field(default_factory=list)
    tables_failed: dict[str, str] = field(default_factory=dict)
    converted: list[Path] = field(default_factory=list)
    skipped: list[Path] = field(default_factory=list)
    failed: dict[Path, str] = field(default_factory=dict)

    @property
    def has_failures(self) -> bool:
        return bool(self.tables_failed or self.failed)


def convert_text(
    text: str,
    resolver: ReferenceResolver,
    rules: Sequence[RewriteRule] = (),
) -> str:
    """Resolve references in text, then run the auxiliary rewrite rules."""
    return apply_rewrite_rules(resolver.rewrite(text), rules)


def convert_erb(
    path: Path,
    resolver: ReferenceResolver,
    rules: Sequence[RewriteRule] = (),
) -> FileStatus:
    """Rewrite one ERB file in place.

    Returns:
        FileStatus.SKIPPED if the file has no BOM (left untouched),
        FileStatus.CONVERTED otherwise.

    Raises:
        ConversionError: If the file cannot be read, decoded or written.

    """
    try:
        text = read_bom_text(path)
    except OSError as e:
        raise ConversionError(f"Cannot read {path}: {e}", path=path) from e
    except UnicodeDecodeError as e:
        raise ConversionError(f"Cannot decode {path} as UTF-8: {e}", path=path) from e

    if text is None:
        return FileStatus.SKIPPED

    converted = convert_text(text, resolver, rules)

    try:
        write_bom_text(path, converted)
    except OSError as e:
        raise ConversionError(f"Cannot write {path}: {e}", path=path) from e

    return FileStatus.CONVERTED


def _validate_target(target: Path) -> Path:
    if not target.exists():
        raise ConfigError(f"Target directory does not exist: {target}")
    if not target.is_dir():
        raise ConfigError(f"Target is not a directory: {target}")
    return target


def convert(config: ConvertConfig) -> ConversionReport:
    """Convert every ERB file under config.target.

    Raises:
        ConfigError: If the target is invalid or the rewrite rules file is
            malformed. Raised before any file is touched.

    """
    target = _validate_target(config.target)
    logger.debug("Start in %s", target)

    rules: list[RewriteRule] = []
    if config.erb_regex_path is not None:
        rules = load_rewrite_rules(config.erb_regex_path)

    report = ConversionReport()

    csv_dir = find_subdir(target, CSV_DIR)
    if csv_dir is None:
        logger.warning("No %s directory under %s, no tables loaded", CSV_DIR, target)
        csv_dir = target / CSV_DIR

    loaded = load_table_store(
        csv_dir,
        TableSelection(config.includes, config.excludes),
        normalize=config.normalize,
        space_policy=config.space_policy,
        workers=config.workers,
    )
    report.tables_loaded = sorted(loaded.store.families)
    report.tables_failed = dict(loaded.failed)

    resolver = ReferenceResolver(loaded.store, explicit_target=config.explicit_target)

    erb_dir = find_subdir(target, ERB_DIR)
    if erb_dir is None:
        logger.warning("No %s directory under %s, nothing to convert", ERB_DIR, target)
        return report

    erb_files = list_files(erb_dir, ERB_SUFFIX, recursive=True)
    logger.info("Converting %d ERB files", len(erb_files))

    with ThreadPoolExecutor(max_workers=config.workers) as executor:
        futures = {executor.submit(convert_erb, path, resolver, rules): path for path in erb_files}
        for future in as_completed(futures):
            path = futures[future]
            try:
                status = future.result()
            except ConversionError as e:
                logger.error("convert erb %s failed: %s", path, e)
                report.failed[path] = str(e)
                continue
            except Exception as e:
                logger.exception("Unexpected error converting %s", path)
                report.failed[path] = f"Unexpected error: {e}"
                continue

            if status == FileStatus.SKIPPED:
                report.skipped.append(path)
            else:
                report.converted.append(path)

    report.converted.sort()
    report.skipped.sort()
    return report

"""erb-num2name: rewrite numeric ERB variable references into CSV names.

Public API:
- load_table_store(): build the shared TableStore from a CSV directory
- ReferenceResolver: rewrite references in one text blob
- convert(): batch-convert a game directory
"""

__version__ = "0.3.0"

from erb_num2name.core.config import ConvertConfig, SpacePolicy  # noqa: E402
from erb_num2name.pipeline import ConversionReport, convert, convert_text  # noqa: E402
from erb_num2name.resolver import ReferenceResolver  # noqa: E402
from erb_num2name.tables import TableSelection, TableStore, load_table_store  # noqa: E402

__all__ = [
    "__version__",
    "ConvertConfig",
    "SpacePolicy",
    "ConversionReport",
    "convert",
    "convert_text",
    "ReferenceResolver",
    "TableSelection",
    "TableStore",
    "load_table_store",
]

"""Reference Resolver: rewrites numeric ERB variable references into names.

Rewriting is a two-step pipeline:
1. find_references() produces ordered, non-overlapping token spans
2. resolve_reference() turns each token into its replacement (pure)

rewrite() stitches untouched text and replacements together in a single
pass; replacement text is never scanned again.

Resolution per token:
- strip the NAME suffix, apply the alias table -> family
- family not in the store -> token unchanged
- index beyond the 32-bit range -> token unchanged
- otherwise BASE[:SCOPE]:<name>, or BASE[:SCOPE]:<digits> when the index
  has no entry
"""

import logging

from erb_num2name.resolver.aliases import resolve_family
from erb_num2name.resolver.pattern import VariableReference, find_references
from erb_num2name.tables.families import is_chara_family
from erb_num2name.tables.parser import parse_index
from erb_num2name.tables.store import TableStore

logger = logging.getLogger(__name__)

__all__ = ["TARGET_SCOPE", "ReferenceResolver"]

# Scope keyword meaning "the current target character"
TARGET_SCOPE = "TARGET"


class ReferenceResolver:
    """Resolves variable references against a shared, read-only TableStore.

    Args:
        store: Loaded tables. Never mutated.
        explicit_target: When set, an unscoped reference whose base name is a
            per-character variable gets ":TARGET" inserted before its index.
            Name arrays such as ABLNAME are never scoped.

    """

    def __init__(self, store: TableStore, *, explicit_target: bool = False) -> None:
        self.store = store
        self.explicit_target = explicit_target

    def resolve_reference(self, ref: VariableReference) -> str:
        """Return the replacement text for one reference."""
        family = resolve_family(ref.base_name)
        if family not in self.store:
            return ref.raw_text

        index = parse_index(ref.index_text)
        if index is None:
            return ref.raw_text

        parts = [ref.base_name]
        if ref.scope is not None:
            parts.append(f":{ref.scope}")
        elif self.explicit_target and is_chara_family(ref.base_name):
            parts.append(f":{TARGET_SCOPE}")

        parts.append(":")
        name = self.store.lookup(family, index)
        parts.append(ref.index_text if name is None else name)
        return "".join(parts)

    def rewrite(self, text: str) -> str:
        """Rewrite every recognized reference in text; copy the rest verbatim."""
        chunks: list[str] = []
        position = 0
        replaced = 0

        for ref in find_references(text):
            chunks.append(text[position : ref.start])
            replacement = self.resolve_reference(ref)
            if replacement != ref.raw_text:
                replaced += 1
            chunks.append(replacement)
            position = ref.end

        if not chunks:
            return text

        chunks.append(text[position:])
        logger.debug("Rewrote %d references", replaced)
        return "".join(chunks)

"""Reference Resolver: pattern matching, alias rules and text rewriting.

Public API:
- find_references(): ordered token spans in a text blob
- resolve_family(): alias and NAME-suffix rules
- ReferenceResolver: pure per-token resolution and whole-text rewrite
- load_rewrite_rules() / apply_rewrite_rules(): auxiliary regex pass
"""

from erb_num2name.resolver.aliases import (
    FAMILY_ALIASES,
    NAME_SUFFIX,
    resolve_family,
    strip_name_suffix,
)
from erb_num2name.resolver.pattern import VAR_PATTERN, VariableReference, find_references
from erb_num2name.resolver.resolver import TARGET_SCOPE, ReferenceResolver
from erb_num2name.resolver.rewrite_rules import (
    RewriteRule,
    apply_rewrite_rules,
    load_rewrite_rules,
    parse_rewrite_rules,
    translate_replacement,
)

__all__ = [
    "FAMILY_ALIASES",
    "NAME_SUFFIX",
    "resolve_family",
    "strip_name_suffix",
    "VAR_PATTERN",
    "VariableReference",
    "find_references",
    "TARGET_SCOPE",
    "ReferenceResolver",
    "RewriteRule",
    "apply_rewrite_rules",
    "load_rewrite_rules",
    "parse_rewrite_rules",
    "translate_replacement",
]

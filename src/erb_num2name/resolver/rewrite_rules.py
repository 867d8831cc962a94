"""Auxiliary regex rewrite pass applied after reference resolution.

Rules come from an ordered YAML list:

    - regex: 'CALL SHOW_(\\w+)'
      replace: 'CALL DISPLAY_$1'
    - regex: '(?P<var>FLAG):TARGET'
      replace: '\\g<var>'

Each rule runs over the output of the previous one, so order matters.
Replacement templates accept Python back-references (\\1, \\g<name>) as
well as $1, ${1}, ${name} and $name; "$$" is a literal dollar sign.

The file is loaded once, before any parallel work; a malformed file is a
ConfigError and aborts the run.
"""

import logging
import re
from collections.abc import Sequence
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from erb_num2name.core.exceptions import ConfigError

logger = logging.getLogger(__name__)

__all__ = [
    "RewriteRule",
    "translate_replacement",
    "load_rewrite_rules",
    "parse_rewrite_rules",
    "apply_rewrite_rules",
]

_DOLLAR_REF = re.compile(r"\$(?:(\$)|\{(\w+)\}|(\d+)|([A-Za-z_]\w*))")


def translate_replacement(template: str) -> str:
    """Convert $-style group references into Python re.sub syntax.

    Example:
        >>> translate_replacement("X_$1_${name}_$$")
        'X_\\\\g<1>_\\\\g<name>_$'

    """

    def _convert(match: re.Match[str]) -> str:
        if match.group(1):
            return "$"
        group = match.group(2) or match.group(3) or match.group(4)
        return f"\\g<{group}>"

    return _DOLLAR_REF.sub(_convert, template)


class RewriteRule(BaseModel):
    """One regex/replacement pair.

    Attributes:
        regex: Compiled pattern (compiled from the YAML string).
        replace: Replacement template in Python re.sub syntax.

    """

    model_config = ConfigDict(frozen=True)

    regex: re.Pattern[str]
    replace: str

    @field_validator("replace", mode="after")
    @classmethod
    def normalize_template(cls, v: str) -> str:
        return translate_replacement(v)

    def apply(self, text: str) -> str:
        return self.regex.sub(self.replace, text)


def parse_rewrite_rules(data: Any, source: str = "<rules>") -> list[RewriteRule]:
    """Validate already-parsed YAML data into an ordered rule list.

    Raises:
        ConfigError: If data is not a list of {regex, replace} mappings, a
            regex does not compile, or a template is invalid (bad escape or
            missing group).

    """
    if data is None:
        return []
    if not isinstance(data, list):
        raise ConfigError(
            f"Invalid rewrite rules in {source}: expected a list, got {type(data).__name__}"
        )

    rules: list[RewriteRule] = []
    for position, item in enumerate(data, start=1):
        try:
            rule = RewriteRule.model_validate(item)
        except ValidationError as e:
            raise ConfigError(f"Invalid rewrite rule #{position} in {source}: {e}") from e

        # Surface bad templates now instead of inside a worker thread
        try:
            _check_template(rule)
        except re.error as e:
            raise ConfigError(
                f"Invalid replacement in rewrite rule #{position} in {source}: {e}"
            ) from e
        rules.append(rule)

    return rules


def _check_template(rule: RewriteRule) -> None:
    for ref in re.findall(r"\\g<(\w+)>|\\(\d+)", rule.replace):
        name = ref[0] or ref[1]
        if name.isdigit():
            if int(name) > rule.regex.groups:
                raise re.error(f"invalid group reference {name}")
        elif name not in rule.regex.groupindex:
            raise re.error(f"unknown group name {name!r}")

    # re.sub parses the whole template before searching, so bad escapes
    # such as "\q" fail here even without a match
    rule.regex.sub(rule.replace, "")


def load_rewrite_rules(path: Path) -> list[RewriteRule]:
    """Load the ordered rewrite rule list from a YAML file.

    Raises:
        ConfigError: If the file cannot be read or is malformed.

    """
    try:
        content = path.read_text(encoding="utf-8-sig")
    except OSError as e:
        raise ConfigError(f"Cannot read rewrite rules file {path}: {e}") from e

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in rewrite rules file {path}: {e}") from e

    rules = parse_rewrite_rules(data, source=str(path))
    logger.info("Loaded %d rewrite rules from %s", len(rules), path)
    return rules


def apply_rewrite_rules(text: str, rules: Sequence[RewriteRule]) -> str:
    """Apply rules in order, each over the previous rule's output."""
    for rule in rules:
        text = rule.apply(text)
    return text

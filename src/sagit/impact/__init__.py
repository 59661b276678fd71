"""Test impact resolution."""

from sagit.impact.resolver import default_test_path, resolve, resolve_impacted
from sagit.impact.rules import (
    NO_MATCH,
    ImpactRule,
    Matched,
    NoMatch,
    RuleResult,
    apply_rules,
    load_rules,
    parse_rules,
    translate_template,
)

__all__ = [
    "ImpactRule",
    "Matched",
    "NoMatch",
    "NO_MATCH",
    "RuleResult",
    "apply_rules",
    "default_test_path",
    "load_rules",
    "parse_rules",
    "resolve",
    "resolve_impacted",
    "translate_template",
]

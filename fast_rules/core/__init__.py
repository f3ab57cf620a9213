"""Validation engine: rule vocabulary, per-rule evaluator, field orchestrator and message catalogs."""

from .rules import FIELD_TOKEN, RuleDescriptor, RuleName, RuleOutcome, parse_rule
from .localization import CatalogLocalizer, get_locale, set_locale, set_locale_path, trans
from .rule_evaluator import RuleEvaluator, is_blank, is_undefined
from .validator import ErrorMap, ValidationResult, Validator, validate

__all__ = [
    "FIELD_TOKEN",
    "RuleDescriptor",
    "RuleName",
    "RuleOutcome",
    "parse_rule",
    "CatalogLocalizer",
    "get_locale",
    "set_locale",
    "set_locale_path",
    "trans",
    "RuleEvaluator",
    "is_blank",
    "is_undefined",
    "ErrorMap",
    "ValidationResult",
    "Validator",
    "validate",
]

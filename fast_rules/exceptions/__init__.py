"""Custom exceptions for fast_rules."""

from .common_exceptions import (
    DatabaseNotInitializedException,
    EnvMissingException,
    EnvInvalidException,
)
from .validation_exceptions import (
    RuleException,
    UnknownRuleException,
    InvalidRuleParamsException,
    MissingRecordFinderException,
    ValidationFailedException,
)


__all__ = [
    # common
    "DatabaseNotInitializedException",
    "EnvMissingException",
    "EnvInvalidException",
    # validation
    "RuleException",
    "UnknownRuleException",
    "InvalidRuleParamsException",
    "MissingRecordFinderException",
    "ValidationFailedException",
]

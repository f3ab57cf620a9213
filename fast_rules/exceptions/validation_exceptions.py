from typing import Any, Optional

from fast_rules.utils.serialisation import serialise


class RuleException(ValueError):
    """Base class for misconfigured rule descriptors."""

    def __init__(self, message: str, *, rule: Optional[str] = None, field: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.rule = rule
        self.field = field


class UnknownRuleException(RuleException):
    def __init__(self, rule: str, *, field: Optional[str] = None):
        message = f"[Rule] Unknown rule `{rule}`"
        if field:
            message += f" declared for field `{field}`"
        super().__init__(message, rule=rule, field=field)


class InvalidRuleParamsException(RuleException):
    def __init__(self, rule: str, params: str, *, expected: str):
        super().__init__(
            f"[Rule] Invalid parameters `{params}` for rule `{rule}` (expected: {expected})",
            rule=rule,
        )
        self.params = params


class MissingRecordFinderException(RuleException):
    def __init__(self, rule: str):
        super().__init__(f"[Rule] Rule `{rule}` needs a record finder", rule=rule)


class ValidationFailedException(ValueError):
    """
    Raised on request by `Validator.ensure_valid()` when any field failed.

    Rule failures themselves are never raised; this only converts a finished
    error map into an exception for callers that prefer control flow.
    """

    def __init__(self, errors: dict[str, list[str]], *, message: str = "validation failed", input: Any = None):
        super().__init__(message)
        self.message = message
        self.errors = errors
        self.input = input

    def dict(self) -> dict:
        return {
            "error_type": "validation_failed",
            "message": self.message,
            "data": serialise(self.errors),
            "input": serialise(self.input),
        }

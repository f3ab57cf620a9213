from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Mapping, Optional, Union

from fast_rules import config
from fast_rules.contracts.field_spec import FieldSpec
from fast_rules.contracts.localizer import Localizer
from fast_rules.contracts.record_finder import RecordFinder
from fast_rules.core.localization import CatalogLocalizer, get_locale
from fast_rules.core.rule_evaluator import RuleEvaluator, is_blank
from fast_rules.core.rules import RuleDescriptor, RuleName, RuleOutcome
from fast_rules.exceptions import UnknownRuleException, ValidationFailedException
from fast_rules.utils.path_resolver import field_to_key, get_path

FieldSpecLike = Union[FieldSpec, Mapping[str, Any]]
ErrorMap = dict[str, list[str]]


@dataclass(frozen=True)
class ValidationResult:
    errors: ErrorMap = field(default_factory=dict)
    has_errors: bool = False


class Validator:
    """
    Validates one input object against a list of field specs.

    Every (field, rule) pair is evaluated in its own task. A rule that is not
    `required` runs as declared when the field has a value (or when the rule is
    `optional`); otherwise `required` is evaluated in its place. Failures are
    collected per field, de-duplicated, in the order the tasks were declared.

    Example:
        validator = Validator({"email": ""}, "en")
        await validator.validate([{"field": "email", "rules": ["required", "isEmail"]}])
        validator.has_errors()   # True
        validator.errors         # {"email": ["Email is required"]}

    Create a new instance per input; the error map is never reset.
    """

    def __init__(
        self,
        data: Any,
        locale: Optional[str] = None,
        actor: Any = None,
        *,
        record_finder: Optional[RecordFinder] = None,
        localizer: Optional[Localizer] = None,
        key_transformer: Callable[[str], str] = field_to_key,
        enforce_only: Optional[bool] = None,
        strict_rules: Optional[bool] = None,
    ) -> None:
        self.data = data
        self.locale = locale or get_locale()
        self.actor = actor
        self.localizer = localizer or CatalogLocalizer()
        self.key_transformer = key_transformer
        self.enforce_only = config.VALIDATION_ENFORCE_ONLY if enforce_only is None else enforce_only
        self.strict_rules = config.VALIDATION_STRICT_RULES if strict_rules is None else strict_rules
        self._record_finder = record_finder
        self._errors: ErrorMap = {}

    @property
    def errors(self) -> ErrorMap:
        return self._errors

    @property
    def record_finder(self) -> RecordFinder:
        if self._record_finder is None:
            from fast_rules.database.mongo_record_finder import MongoRecordFinder  # local import to avoid cycles
            self._record_finder = MongoRecordFinder()
        return self._record_finder

    async def validate(self, specs: Iterable[FieldSpecLike]) -> "Validator":
        """
        Run every rule of every spec and collect failures.

        Raises:
            UnknownRuleException: With `strict_rules`, before any rule runs.
            Exception: Whatever the record finder raises is propagated as-is.
        """
        field_specs = [spec if isinstance(spec, FieldSpec) else FieldSpec.model_validate(spec) for spec in specs]

        jobs: list[tuple[FieldSpec, RuleDescriptor]] = []
        for spec in field_specs:
            for descriptor in spec.descriptors():
                if self.strict_rules and descriptor.rule is None:
                    raise UnknownRuleException(descriptor.name, field=spec.field)
                jobs.append((spec, descriptor))

        tasks = [asyncio.ensure_future(self._evaluate(spec, descriptor)) for spec, descriptor in jobs]
        try:
            results = await asyncio.gather(*tasks)
        except Exception:
            # First failure wins; stop the rest and collect their outcomes so nothing runs detached
            for task in tasks:
                if not task.done():
                    task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise

        for error_key, outcome in results:
            if outcome.failed:
                self._add_error(error_key, outcome)

        return self

    async def _evaluate(self, spec: FieldSpec, descriptor: RuleDescriptor) -> tuple[str, RuleOutcome]:
        value = get_path(self.data, spec.field)

        evaluator = RuleEvaluator(
            key=self.key_transformer(spec.field),
            value=value,
            params=descriptor.params,
            locale=self.locale,
            localizer=self.localizer,
            record_finder=self.record_finder if descriptor.rule is RuleName.UNIQUE else None,
            actor=self.actor,
            enforce_only=self.enforce_only,
        )

        if (descriptor.raw != RuleName.REQUIRED.value and not is_blank(value)) or descriptor.raw == RuleName.OPTIONAL.value:
            await evaluator.check(descriptor.name)
            error_key = spec.field
        else:
            await evaluator.check(RuleName.REQUIRED)
            error_key = self.key_transformer(spec.field)

        outcome = evaluator.result()
        if outcome.failed:
            logging.debug(f"[Validator] `{spec.field}` failed ({outcome.phrase}) while checking `{descriptor.raw}`")
        return error_key, outcome

    def _add_error(self, field_key: str, outcome: RuleOutcome) -> None:
        message = outcome.render(self.localizer.field_name(field_key, self.locale))
        messages = self._errors.setdefault(field_key, [])
        if message not in messages:
            messages.append(message)

    def has_errors(self) -> bool:
        return len(self._errors) > 0

    def result(self) -> ValidationResult:
        return ValidationResult(
            errors={key: list(messages) for key, messages in self._errors.items()},
            has_errors=self.has_errors(),
        )

    def dict(self) -> dict:
        return {"errors": self.result().errors, "has_errors": self.has_errors()}

    def ensure_valid(self) -> None:
        """Raise `ValidationFailedException` carrying the error map when any field failed."""
        if self.has_errors():
            raise ValidationFailedException(self.result().errors, input=self.data)


async def validate(
    data: Any,
    specs: Iterable[FieldSpecLike],
    locale: Optional[str] = None,
    actor: Any = None,
    **options: Any,
) -> ValidationResult:
    """
    Validate `data` against `specs` and return the collected errors.

    `options` are passed to `Validator` (record_finder, localizer, key_transformer,
    enforce_only, strict_rules).
    """
    validator = Validator(data, locale, actor, **options)
    await validator.validate(specs)
    return validator.result()


__all__ = [
    "ErrorMap",
    "ValidationResult",
    "Validator",
    "validate",
]

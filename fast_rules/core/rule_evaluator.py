from __future__ import annotations

import logging
from typing import Any, Awaitable, Callable, Optional

from fast_rules.contracts.localizer import Localizer
from fast_rules.contracts.record_finder import RecordFinder
from fast_rules.core.rules import RuleName, RuleOutcome
from fast_rules.exceptions import InvalidRuleParamsException, MissingRecordFinderException
from fast_rules.utils.format_checks import is_email, is_numeric, is_url
from fast_rules.utils.path_resolver import MISSING, get_path
from fast_rules.utils.serialisation import to_identity


def is_blank(value: Any) -> bool:
    """
    Presence check shared by `required` and rule dispatch.

    Blank: missing, None, "", False, numeric zero and NaN. Empty containers count as present.
    """
    if value is MISSING or value is None or value is False:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, (int, float)):
        return value == 0 or value != value
    return False


def is_undefined(value: Any) -> bool:
    """Presence check of the `optional` rule: only missing or None values are undefined."""
    return value is MISSING or value is None


class RuleEvaluator:
    """
    Evaluates exactly one rule for one field value.

    A fresh instance is created per (field, rule) pair. `check()` records the
    outcome on the instance and `result()` hands it back; nothing is raised for
    a failed rule.
    """

    def __init__(
        self,
        *,
        key: str,
        value: Any,
        params: str,
        locale: str,
        localizer: Localizer,
        record_finder: Optional[RecordFinder] = None,
        actor: Any = None,
        enforce_only: bool = False,
    ) -> None:
        self.key = key
        self.value = value
        self.params = params
        self.locale = locale
        self.localizer = localizer
        self.record_finder = record_finder
        self.actor = actor
        self.enforce_only = enforce_only
        self._outcome = RuleOutcome.passed()

    async def check(self, rule_name: RuleName | str) -> None:
        rule = rule_name if isinstance(rule_name, RuleName) else RuleName.lookup(rule_name)
        if rule is None:
            logging.debug(f"[Rule] Skipping unknown rule `{rule_name}` for `{self.key}`")
            return

        handlers: dict[RuleName, Callable[[], Awaitable[Optional[RuleOutcome]]]] = {
            RuleName.REQUIRED: self.required,
            RuleName.OPTIONAL: self.optional,
            RuleName.IS_NUMERIC: self.is_numeric,
            RuleName.IS_EMAIL: self.is_email,
            RuleName.ONLY: self.only,
            RuleName.UNIQUE: self.unique,
            RuleName.LINK: self.link,
        }
        outcome = await handlers[rule]()

        # `only` reports its outcome without recording it unless enforcement is on
        if rule is RuleName.ONLY and self.enforce_only and outcome is not None:
            self._outcome = outcome

    def result(self) -> RuleOutcome:
        return self._outcome

    def _fail(self, phrase: str) -> None:
        self._outcome = RuleOutcome.failure(phrase, self.localizer.message(phrase, self.locale))

    async def required(self) -> None:
        """rules: ['required']"""
        if is_blank(self.value):
            self._fail("is_required")

    async def optional(self) -> None:
        """rules: ['optional'] - "" and 0 are accepted, only a missing value fails."""
        if is_undefined(self.value):
            self._fail("is_undefined")

    async def is_numeric(self) -> None:
        """rules: ['isNumeric']"""
        if not is_numeric(self.value):
            self._fail("is_not_numberic")

    async def is_email(self) -> None:
        """rules: ['isEmail']"""
        if not is_email(self.value):
            self._fail("is_not_email_format")

    async def link(self) -> None:
        """rules: ['link']"""
        if not is_url(self.value):
            self._fail("is_not_formatted")

    async def only(self) -> RuleOutcome:
        """
        rules: ['only:draft,published']

        Returns the outcome instead of recording it; `check()` applies it only
        when `enforce_only` is set.
        """
        allowed = self.params.split(",")
        if not isinstance(self.value, str) or self.value not in allowed:
            return RuleOutcome.failure("is_not_exist", self.localizer.message("is_not_exist", self.locale))
        return RuleOutcome.passed()

    async def unique(self) -> None:
        """
        rules: ['unique:User,email'] or ['unique:User,email,_id'] (ignore the actor's own record)
        """
        params = self.params.split(",")
        if len(params) < 2 or not params[0] or not params[1]:
            raise InvalidRuleParamsException("unique", self.params, expected="table,column[,ignoreField]")

        table, column = params[0], params[1]
        ignore_field = params[2] if len(params) > 2 and params[2] else None

        if self.record_finder is None:
            raise MissingRecordFinderException(RuleName.UNIQUE.value)

        record = await self.record_finder.find_one(table, column, self.value)
        if record is None:
            return

        if ignore_field is None:
            self._fail("is_exists")
            return

        record_value = get_path(record, ignore_field)
        actor_value = get_path(self.actor, ignore_field) if self.actor is not None else MISSING
        if ignore_field == "_id":
            record_value = to_identity(record_value)
            actor_value = to_identity(actor_value)

        if actor_value != record_value:
            self._fail("is_exists")

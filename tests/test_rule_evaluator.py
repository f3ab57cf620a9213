import pytest

from fast_rules.core.localization import CatalogLocalizer
from fast_rules.core.rule_evaluator import RuleEvaluator, is_blank, is_undefined
from fast_rules.core.rules import RuleName
from fast_rules.utils.path_resolver import MISSING


def make_evaluator(value, params="", **kwargs):
    return RuleEvaluator(
        key="field",
        value=value,
        params=params,
        locale="en",
        localizer=CatalogLocalizer(),
        **kwargs,
    )


async def run(rule, value, params="", **kwargs):
    evaluator = make_evaluator(value, params, **kwargs)
    await evaluator.check(rule)
    return evaluator.result()


@pytest.mark.parametrize("value", [MISSING, None, "", 0, 0.0, False, float("nan")])
def test_blank_values(value):
    assert is_blank(value)


@pytest.mark.parametrize("value", ["0", " ", 1, -1, True, [], {}, "text"])
def test_present_values(value):
    assert not is_blank(value)


def test_undefined_is_narrower_than_blank():
    assert is_undefined(MISSING)
    assert is_undefined(None)
    assert not is_undefined("")
    assert not is_undefined(0)


@pytest.mark.asyncio
async def test_required():
    outcome = await run("required", "")
    assert outcome.failed
    assert outcome.phrase == "is_required"
    assert outcome.template == ":field is required"

    assert not (await run("required", "john")).failed
    assert (await run(RuleName.REQUIRED, 0)).failed


@pytest.mark.asyncio
async def test_optional_accepts_empty_and_zero():
    assert not (await run("optional", "")).failed
    assert not (await run("optional", 0)).failed

    outcome = await run("optional", MISSING)
    assert outcome.failed
    assert outcome.template == ":field is undefined"


@pytest.mark.asyncio
async def test_is_numeric():
    assert (await run("isNumeric", "abc")).phrase == "is_not_numberic"
    assert not (await run("isNumeric", "12345")).failed


@pytest.mark.asyncio
async def test_is_email():
    assert (await run("isEmail", "not-an-email")).phrase == "is_not_email_format"
    assert not (await run("isEmail", "user@example.com")).failed


@pytest.mark.asyncio
async def test_link():
    assert (await run("link", "not a link")).phrase == "is_not_formatted"
    assert not (await run("link", "https://example.com/a")).failed


@pytest.mark.asyncio
async def test_only_is_inert_by_default():
    assert not (await run("only", "z", "a,b,c")).failed


@pytest.mark.asyncio
async def test_only_outcome_is_reported_by_the_handler():
    evaluator = make_evaluator("z", "a,b,c")
    outcome = await evaluator.only()
    assert outcome.failed
    assert outcome.phrase == "is_not_exist"
    assert not evaluator.result().failed


@pytest.mark.asyncio
async def test_only_when_enforced():
    outcome = await run("only", "z", "a,b,c", enforce_only=True)
    assert outcome.failed
    assert outcome.template == ":field is not an allowed value"
    assert not (await run("only", "b", "a,b,c", enforce_only=True)).failed


@pytest.mark.asyncio
async def test_unknown_rule_is_noop():
    outcome = await run("isUppercase", "abc")
    assert not outcome.failed
    assert outcome.template == ""


@pytest.mark.asyncio
async def test_messages_follow_locale():
    evaluator = RuleEvaluator(key="email", value="", params="", locale="es", localizer=CatalogLocalizer())
    await evaluator.check("required")
    assert evaluator.result().template == ":field es obligatorio"

"""
Validation rule compiler.

Turns a declarative ValidationRuleSet into a validator callable:

    validator = compile_rules(field.rules)
    result = validator(value, all_values)   # -> CheckResult

Rules run in a fixed order and stop at the first failure:
required -> pattern -> minLength/maxLength -> min/max -> validate.
Only the first failing rule's message is reported.
"""

import logging
from types import MappingProxyType
from typing import Any, Callable, Mapping

from schema_forms.models.schema import BoundRule, ValidationRuleSet
from schema_forms.models.validation_result import CheckResult

logger = logging.getLogger("schema-forms")

Validator = Callable[[Any, Mapping[str, Any]], CheckResult]

DEFAULT_FALLBACK_MESSAGE = "Invalid value"

DEFAULT_MESSAGES = {
    "pattern": "Invalid format",
    "minLength": "Must be at least {value} characters",
    "maxLength": "Must be at most {value} characters",
    "min": "Must be at least {value}",
    "max": "Must be at most {value}",
}


def is_empty(value: Any) -> bool:
    """None, empty strings and empty collections count as absent."""
    if value is None:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, (list, tuple, set, frozenset, dict)):
        return len(value) == 0
    return False


def _as_number(value: Any) -> float | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError:
            return None
    return None


def _message(rule: BoundRule, kind: str) -> str:
    if rule.message:
        return rule.message
    return DEFAULT_MESSAGES[kind].format(value=rule.value)


def _run_custom(
    func: Callable[[Any, Mapping[str, Any]], Any],
    value: Any,
    all_values: Mapping[str, Any],
    fallback_message: str,
) -> CheckResult:
    try:
        outcome = func(value, MappingProxyType(dict(all_values)))
    except Exception:
        logger.warning("Custom validator raised; reporting fallback message", exc_info=True)
        return CheckResult.fail("validate", fallback_message)

    if outcome is True or outcome is None:
        return CheckResult.ok()
    if isinstance(outcome, str):
        return CheckResult.fail("validate", outcome or fallback_message)
    if outcome is False:
        return CheckResult.fail("validate", fallback_message)
    logger.warning(f"Custom validator returned {type(outcome).__name__}; treating it as a failure")
    return CheckResult.fail("validate", fallback_message)


def compile_rules(
    rules: ValidationRuleSet | None,
    *,
    boolean: bool = False,
    fallback_message: str = DEFAULT_FALLBACK_MESSAGE,
) -> Validator:
    """
    Compile a rule set into a validator.

    Args:
        rules: The field's rule set. ``None`` compiles to an always-valid check.
        boolean: True for checkbox/switch fields, where ``required`` means
            the value must be ``True``.
        fallback_message: Message used when a custom validator returns
            ``False`` or raises.

    Returns:
        A callable ``(value, all_values) -> CheckResult``. The callable
        never raises for a failing rule and never mutates ``all_values``.
    """
    if rules is None:
        return lambda value, all_values: CheckResult.ok()

    def validate(value: Any, all_values: Mapping[str, Any]) -> CheckResult:
        empty = is_empty(value)

        if rules.required is not None:
            missing = value is not True if boolean else empty
            if missing:
                return CheckResult.fail("required", rules.required)

        if not empty and isinstance(value, str):
            if rules.pattern is not None and not rules.pattern.value.search(value):
                return CheckResult.fail("pattern", rules.pattern.message or DEFAULT_MESSAGES["pattern"])
            if rules.min_length is not None and len(value) < rules.min_length.value:
                return CheckResult.fail("minLength", _message(rules.min_length, "minLength"))
            if rules.max_length is not None and len(value) > rules.max_length.value:
                return CheckResult.fail("maxLength", _message(rules.max_length, "maxLength"))

        number = None if empty else _as_number(value)
        if number is not None:
            if rules.minimum is not None and number < rules.minimum.value:
                return CheckResult.fail("min", _message(rules.minimum, "min"))
            if rules.maximum is not None and number > rules.maximum.value:
                return CheckResult.fail("max", _message(rules.maximum, "max"))

        if rules.validator is not None:
            return _run_custom(rules.validator, value, all_values, fallback_message)

        return CheckResult.ok()

    return validate

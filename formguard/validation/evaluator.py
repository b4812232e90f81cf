"""Property Evaluator

Runs a normalized rule set against one candidate string.

Optionality short-circuit: without an ``is_required`` rule, an empty or
whitespace-only value is valid and no other rule runs. Rules other than
required-ness only apply once a value is present.

Otherwise rules run in insertion order. A validator that returns a string
fails with that message; any other falsy return fails with the rule's
configured message; a truthy return passes. With ``abort_early`` the first
failure stops evaluation and later rules are neither run nor recorded.
"""
from __future__ import annotations

from typing import Any

from formguard.errors import missing_matching_property
from formguard.logging import schema_logger

from .guards import ensure_string, is_empty_string
from .normalizer import NormalizedSchema
from .options import EvaluationResult, ValidationOptions
from .rules import Rule, RuleKind

log = schema_logger()


def format_message(label: str | None, message: str, include_label: bool) -> str:
    return f"{label} {message}" if include_label and label else message


def _run_rule(rule: Rule, value: str, schema: NormalizedSchema, match_value: str | None) -> bool | str:
    if rule.kind is RuleKind.MATCHING:
        if match_value is None and rule.input is None:
            raise missing_matching_property(schema.matching_property or rule.name)
        return rule.run(value, input=match_value)
    return rule.run(value)


def _failure_message(rule: Rule, outcome: Any) -> str | None:
    """Return the failure message for ``outcome``, or None if the rule passed."""
    if isinstance(outcome, str):
        return outcome
    return None if outcome else rule.message


def evaluate(
    value: Any,
    schema: NormalizedSchema,
    options: ValidationOptions,
    match_value: str | None = None,
) -> EvaluationResult:
    """Validate ``value`` against ``schema``.

    Args:
        value: Candidate string; anything else raises InvalidTypeError
        schema: Output of ``normalize``
        options: Parsed validation options
        match_value: Resolved sibling value for the ``matching`` rule

    Returns:
        EvaluationResult with ``rules`` attached only if requested
    """
    ensure_string(value)

    if not schema.is_required and is_empty_string(value):
        log.debug("property_evaluated", short_circuit=True, is_valid=True)
        return EvaluationResult(
            is_valid=True,
            errors=[],
            rules={RuleKind.IS_REQUIRED.value: False} if options.include_rules else None,
        )

    rules: dict[str, bool] = {}
    errors: list[str] = []
    for rule in schema.rules:
        message = _failure_message(rule, _run_rule(rule, value, schema, match_value))
        rules[rule.name] = message is None
        if message is None:
            continue
        errors.append(format_message(schema.label, message, options.include_label))
        if options.abort_early:
            break

    log.debug(
        "property_evaluated",
        is_valid=not errors,
        error_count=len(errors),
        failed=[name for name, passed in rules.items() if not passed],
    )
    return EvaluationResult(
        is_valid=not errors,
        errors=errors,
        rules=rules if options.include_rules else None,
    )

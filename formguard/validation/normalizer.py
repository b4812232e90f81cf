"""Schema Normalizer

Enforces cross-rule coherence before evaluation:

- A ``matching`` rule is an exclusive validation mode: every other rule is
  dropped except ``is_required``, which stays independently enforceable.
- Otherwise, when both ``minimum`` and ``maximum`` are set, the minimum must
  not exceed the maximum.

Runs on every validate call and never mutates the schema.
"""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from formguard.errors import min_over_max
from formguard.logging import schema_logger

from .rules import Rule, RuleKind

log = schema_logger()


@dataclass(frozen=True, slots=True)
class NormalizedSchema:
    """Evaluation-time view of a schema: label plus ordered rules."""
    label: str | None
    rules: tuple[Rule, ...]
    matching_property: str | None = None

    @property
    def is_required(self) -> bool:
        return any(rule.kind is RuleKind.IS_REQUIRED for rule in self.rules)


def _find(rules: Mapping[str, Rule], kind: RuleKind) -> Rule | None:
    rule = rules.get(kind.value)
    return rule if rule is not None and rule.kind is kind else None


def normalize(
    rules: Mapping[str, Rule],
    label: str | None = None,
    matching_property: str | None = None,
) -> NormalizedSchema:
    """Produce the rule set to evaluate, or raise InvalidRangeError."""
    if (matching := _find(rules, RuleKind.MATCHING)) is not None:
        selected = (matching,)
        if (required := _find(rules, RuleKind.IS_REQUIRED)) is not None:
            selected += (required,)
        log.debug("schema_normalized", mode="matching", rule_count=len(selected), dropped=len(rules) - len(selected))
        return NormalizedSchema(label=label, rules=selected, matching_property=matching_property)

    minimum = _find(rules, RuleKind.MINIMUM)
    maximum = _find(rules, RuleKind.MAXIMUM)
    if minimum is not None and maximum is not None and minimum.input > maximum.input:
        raise min_over_max(minimum.input, maximum.input)

    log.debug("schema_normalized", mode="full", rule_count=len(rules))
    return NormalizedSchema(label=label, rules=tuple(rules.values()), matching_property=matching_property)

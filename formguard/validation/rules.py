"""Rule Descriptors

A rule is one named, independently-evaluable check: a leaf validator, an
optional input passed before the value, and the message surfaced on failure.
Built-in rules are tagged with their RuleKind and keyed by its value; custom
rules carry a caller-supplied key (falling back to the validator's
``__name__``). A leaf validator registered through add_validator keeps its
built-in kind and key.
"""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable

from formguard.errors import missing_validator

from . import messages
from . import validators as leaf

LeafValidator = Callable[..., "bool | str"]


class RuleKind(str, Enum):
    """Built-in rule kinds plus the custom variant."""
    IS_REQUIRED = "is_required"
    MINIMUM = "minimum"
    MAXIMUM = "maximum"
    HAS_DIGIT = "has_digit"
    HAS_SYMBOL = "has_symbol"
    HAS_LOWERCASE = "has_lowercase"
    HAS_UPPERCASE = "has_uppercase"
    HAS_PATTERN = "has_pattern"
    MATCHING = "matching"
    CUSTOM = "custom"


# Leaf validators keep their built-in kind when registered via add_validator
_LEAF_KINDS: tuple[tuple[LeafValidator, RuleKind], ...] = (
    (leaf.is_required, RuleKind.IS_REQUIRED),
    (leaf.has_minimum, RuleKind.MINIMUM),
    (leaf.has_maximum, RuleKind.MAXIMUM),
    (leaf.has_digit, RuleKind.HAS_DIGIT),
    (leaf.has_symbol, RuleKind.HAS_SYMBOL),
    (leaf.has_lowercase, RuleKind.HAS_LOWERCASE),
    (leaf.has_uppercase, RuleKind.HAS_UPPERCASE),
    (leaf.has_pattern, RuleKind.HAS_PATTERN),
    (leaf.matching, RuleKind.MATCHING),
)


@dataclass(frozen=True, slots=True)
class Rule:
    """A registered rule within a field schema."""
    name: str
    kind: RuleKind
    validator: LeafValidator
    message: str
    input: Any = None

    def run(self, value: str, input: Any = None) -> bool | str:
        """Call the validator with ``input`` (or the stored input) before the value."""
        resolved = input if input is not None else self.input
        if resolved is None:
            return self.validator(value, self.message)
        return self.validator(resolved, value, self.message)


@dataclass(frozen=True, slots=True)
class ValidatorSpec:
    """Caller-facing description of a custom validator.

    Usage:
        ValidatorSpec(validator=is_even, message="must be even")
        ValidatorSpec(validator=lambda v, m: ..., name="no_spaces")
    """
    validator: LeafValidator | None = None
    input: Any = None
    message: str | None = None
    name: str | None = None

    @classmethod
    def coerce(cls, spec: ValidatorSpec | Mapping[str, Any] | Any) -> ValidatorSpec:
        """Accept a ValidatorSpec or a mapping with the same keys."""
        if isinstance(spec, cls):
            return spec
        if isinstance(spec, Mapping):
            return cls(
                validator=spec.get("validator"),
                input=spec.get("input"),
                message=spec.get("message"),
                name=spec.get("name"),
            )
        raise missing_validator(spec)

    @property
    def builtin_kind(self) -> RuleKind | None:
        """The RuleKind of a built-in leaf validator registered under its own key."""
        kind = next((k for fn, k in _LEAF_KINDS if fn is self.validator), None)
        if kind is None or (self.name and self.name != kind.value):
            return None
        return kind

    @property
    def key(self) -> str:
        if self.name:
            return self.name
        if (kind := self.builtin_kind) is not None:
            return kind.value
        return getattr(self.validator, "__name__", None) or type(self.validator).__name__

    def to_rule(self) -> Rule:
        if not callable(self.validator):
            raise missing_validator(self)
        return Rule(
            name=self.key,
            kind=self.builtin_kind or RuleKind.CUSTOM,
            validator=self.validator,
            message=self.message or messages.CUSTOM_VALIDATOR,
            input=self.input,
        )

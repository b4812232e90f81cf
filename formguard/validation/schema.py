"""Field Schema: the rule registry for one string-valued field.

Configuration is fluent; every method returns the schema itself:

    password = (
        Schema()
        .label("Password")
        .is_required()
        .min(8)
        .has_digit()
        .has_symbol("needs a symbol")
    )
    password.validate("hunter2", {"include_label": True})

Rules are kept in insertion order. Registering a rule under an existing name
replaces it in place (last write wins). Schema state is only reachable
through the configuration methods and read-only accessors, and ``validate``
never mutates it.
"""
from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import Any

from formguard.errors import missing_validator

from . import messages
from . import validators as leaf
from .evaluator import evaluate
from .guards import ensure_label, ensure_length
from .normalizer import NormalizedSchema, normalize
from .options import EvaluationResult, ValidationOptions
from .rules import LeafValidator, Rule, RuleKind, ValidatorSpec

SpecLike = ValidatorSpec | Mapping[str, Any]


class Schema:
    """Validation rules for one form field."""

    __slots__ = ("_label", "_matching_property", "_rules")

    def __init__(self, custom_validator: SpecLike | Iterable[SpecLike] | None = None):
        self._label: str | None = None
        self._matching_property: str | None = None
        self._rules: dict[str, Rule] = {}
        if custom_validator is not None:
            self.add_validator(custom_validator)

    def __repr__(self) -> str:
        return f"Schema(label={self._label!r}, rules={list(self._rules)})"

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def rules(self) -> Mapping[str, Rule]:
        """Read-only view of the registered rules."""
        return MappingProxyType(self._rules)

    @property
    def rule_names(self) -> list[str]: return list(self._rules)

    @property
    def matching_property(self) -> str | None: return self._matching_property

    def get_matching_property(self) -> str | None:
        return self._matching_property

    def get_label(self) -> str | None:
        return self._label

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def _register(
        self,
        kind: RuleKind,
        validator: LeafValidator,
        message: str,
        input: Any = None,
    ) -> Schema:
        self._rules[kind.value] = Rule(name=kind.value, kind=kind, validator=validator, message=message, input=input)
        return self

    def label(self, value: str) -> Schema:
        """Set the label used to prefix error messages (``include_label``)."""
        self._label = ensure_label(value)
        return self

    def min(self, length: int, message: str | None = None) -> Schema:
        length = ensure_length(length)
        return self._register(
            RuleKind.MINIMUM, leaf.has_minimum, message or messages.MINIMUM.format(length=length), input=length
        )

    def max(self, length: int, message: str | None = None) -> Schema:
        length = ensure_length(length)
        return self._register(
            RuleKind.MAXIMUM, leaf.has_maximum, message or messages.MAXIMUM.format(length=length), input=length
        )

    def is_required(self, message: str | None = None) -> Schema:
        return self._register(RuleKind.IS_REQUIRED, leaf.is_required, message or messages.REQUIRED)

    def has_digit(self, message: str | None = None) -> Schema:
        return self._register(RuleKind.HAS_DIGIT, leaf.has_digit, message or messages.DIGIT)

    def has_symbol(self, message: str | None = None) -> Schema:
        return self._register(RuleKind.HAS_SYMBOL, leaf.has_symbol, message or messages.SYMBOL)

    def has_lowercase(self, message: str | None = None) -> Schema:
        return self._register(RuleKind.HAS_LOWERCASE, leaf.has_lowercase, message or messages.LOWERCASE)

    def has_uppercase(self, message: str | None = None) -> Schema:
        return self._register(RuleKind.HAS_UPPERCASE, leaf.has_uppercase, message or messages.UPPERCASE)

    def has_pattern(self, pattern: str | re.Pattern, message: str | None = None) -> Schema:
        """Require ``pattern`` (string or compiled regex) to be found in the value."""
        return self._register(RuleKind.HAS_PATTERN, leaf.has_pattern, message or messages.PATTERN, input=pattern)

    def has_matching_property(self, name: str, message: str | None = None) -> Schema:
        """Require the value to equal the sibling field ``name``.

        The expected value is resolved per call by ``validate_form`` (or
        passed as ``match_value``). While a matching rule is registered, every
        other rule except ``is_required`` is ignored at evaluation time.
        """
        self._matching_property = name
        return self._register(RuleKind.MATCHING, leaf.matching, message or messages.MATCHING.format(property=name))

    def add_validator(self, custom_validator: SpecLike | Iterable[SpecLike]) -> Schema:
        """Register one custom validator spec or a sequence of them.

        Each spec is a ValidatorSpec or a mapping with ``validator`` and
        optional ``input``, ``message`` and ``name``. The rule is keyed by
        ``name`` or the validator's ``__name__``. Specs are checked before any
        is registered, so a bad spec leaves the schema unchanged.
        """
        if isinstance(custom_validator, (ValidatorSpec, Mapping)):
            specs = [custom_validator]
        elif isinstance(custom_validator, Iterable) and not isinstance(custom_validator, str):
            specs = list(custom_validator)
        else:
            raise missing_validator(custom_validator)
        new_rules = [ValidatorSpec.coerce(spec).to_rule() for spec in specs]
        for rule in new_rules:
            self._rules[rule.name] = rule
        return self

    # ------------------------------------------------------------------
    # Evaluation
    # ------------------------------------------------------------------

    def normalized(self) -> NormalizedSchema:
        return normalize(self._rules, label=self._label, matching_property=self._matching_property)

    def validate(
        self,
        value: str,
        options: ValidationOptions | Mapping[str, Any] | None = None,
        *,
        match_value: str | None = None,
    ) -> EvaluationResult:
        """Validate ``value`` against the configured rules.

        Args:
            value: Candidate string
            options: ValidationOptions, a mapping of its flags, or None for
                the configured defaults
            match_value: Current value of the matching property, required
                when a matching rule is evaluated

        Raises:
            InvalidTypeError: ``value`` is not a string or options are malformed
            InvalidRangeError: minimum exceeds maximum
            ConfigurationError: a matching rule runs without ``match_value``
        """
        return evaluate(value, self.normalized(), ValidationOptions.parse(options), match_value=match_value)

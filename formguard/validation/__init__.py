"""Declarative String Validation

A Schema collects rules for one string-valued field; validate_form applies a
mapping of schemas across a flat form.

Key Features:
- Fluent rule registry (length bounds, character classes, patterns,
  required-ness, custom validators)
- Optionality short-circuit: rules other than required-ness only apply once a
  value is present
- Matching properties resolved per call from sibling form fields
- Fail-fast (abort_early) or collect-all evaluation
- Per-rule pass/fail diagnostics and label-prefixed messages

Usage:
    from formguard.validation import Schema, validate_form

    schemas = {
        "email": Schema().label("Email").is_required().add_validator({"validator": is_email}),
        "password": Schema().label("Password").is_required().min(8).has_digit(),
        "confirm": Schema().has_matching_property("password"),
    }
    result = validate_form(form, schemas, {"include_label": True, "include_rules": True})
"""

from . import messages, validators
from .evaluator import evaluate
from .form import validate_form
from .normalizer import NormalizedSchema, normalize
from .options import EvaluationResult, FormResult, ValidationOptions
from .password import PasswordSchema, PasswordStrength
from .rules import Rule, RuleKind, ValidatorSpec
from .schema import Schema
from .validators import (
    has_digit,
    has_lowercase,
    has_maximum,
    has_minimum,
    has_pattern,
    has_symbol,
    has_uppercase,
    is_email,
    is_required,
    matching,
)

__all__ = [
    # Schema construction
    "Schema",
    "PasswordSchema",
    "PasswordStrength",
    "Rule",
    "RuleKind",
    "ValidatorSpec",
    # Evaluation
    "validate_form",
    "normalize",
    "evaluate",
    "NormalizedSchema",
    "ValidationOptions",
    "EvaluationResult",
    "FormResult",
    # Leaf validators
    "validators",
    "messages",
    "has_digit",
    "has_lowercase",
    "has_maximum",
    "has_minimum",
    "has_pattern",
    "has_symbol",
    "has_uppercase",
    "is_email",
    "is_required",
    "matching",
]

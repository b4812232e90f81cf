"""Error Handling System

Typed errors for schema configuration and validation input.

Key components:
- ErrorCode: Error code taxonomy
- AppError: Error payload with code, message and metadata
- FormguardError and subclasses: raised exceptions, each also a built-in
  (TypeError / ValueError) so callers can catch them idiomatically
- Builder functions: Ergonomic error construction

Usage:
    from formguard.errors import InvalidRangeError, negative_length

    if length < 0:
        raise negative_length(length)
"""
from .types import (
    AppError,
    ConfigurationError,
    ErrorCode,
    FormguardError,
    InvalidRangeError,
    InvalidTypeError,
    MissingValidatorError,
)

from .builders import (
    empty_label,
    invalid_form,
    invalid_strength,
    invalid_type,
    min_over_max,
    missing_matching_property,
    missing_schema,
    missing_validator,
    negative_length,
    not_a_string,
)

__all__ = [
    # Core types
    "AppError",
    "ErrorCode",
    "FormguardError",
    "InvalidTypeError",
    "InvalidRangeError",
    "ConfigurationError",
    "MissingValidatorError",
    # Input (E20xx)
    "invalid_type",
    "not_a_string",
    "invalid_form",
    "negative_length",
    "min_over_max",
    # Configuration (E21xx)
    "empty_label",
    "missing_validator",
    "missing_matching_property",
    "missing_schema",
    "invalid_strength",
]

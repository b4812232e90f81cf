"""Error Builders

Ergonomic constructors for typed errors. Each builder creates the exception
with the appropriate code, message and metadata; call sites raise the result:

    raise negative_length(length)
"""
from typing import Any

from .types import (
    AppError,
    ConfigurationError,
    ErrorCode,
    InvalidRangeError,
    InvalidTypeError,
    MissingValidatorError,
)


# =============================================================================
# Input Errors (E20xx)
# =============================================================================

def invalid_type(expected: str, actual: Any = None, *, message: str | None = None) -> InvalidTypeError:
    """Create wrong-type error for an argument or validated value."""
    meta = {"expected": expected}
    if actual is not None:
        meta["actual"] = type(actual).__name__
    return InvalidTypeError(AppError(
        code=ErrorCode.E2004_INVALID_TYPE,
        message=message or f"Value must be of type {expected}.",
        metadata=meta,
    ))


def not_a_string(value: Any) -> InvalidTypeError:
    return invalid_type("str", value, message="Input must be a string.")


def invalid_form(form: Any, schemas: Any) -> InvalidTypeError:
    return InvalidTypeError(AppError(
        code=ErrorCode.E2004_INVALID_TYPE,
        message="Form and schema must be mappings.",
        metadata={"form": type(form).__name__, "schemas": type(schemas).__name__},
    ))


def negative_length(length: int) -> InvalidRangeError:
    return InvalidRangeError(AppError(
        code=ErrorCode.E2003_OUT_OF_RANGE,
        message="Length cannot be negative.",
        metadata={"length": length},
    ))


def min_over_max(minimum: int, maximum: int) -> InvalidRangeError:
    return InvalidRangeError(AppError(
        code=ErrorCode.E2003_OUT_OF_RANGE,
        message="Minimum length cannot be greater than the maximum length.",
        metadata={"minimum": minimum, "maximum": maximum},
    ))


# =============================================================================
# Configuration Errors (E21xx)
# =============================================================================

def empty_label() -> ConfigurationError:
    return ConfigurationError(AppError(
        code=ErrorCode.E2100_INVALID_LABEL,
        message="Label cannot be an empty string.",
    ))


def missing_validator(spec: Any = None) -> MissingValidatorError:
    meta = {"spec": type(spec).__name__} if spec is not None else {}
    return MissingValidatorError(AppError(
        code=ErrorCode.E2101_MISSING_VALIDATOR,
        message="Must include validator function.",
        metadata=meta,
    ))


def missing_matching_property(name: str) -> ConfigurationError:
    return ConfigurationError(AppError(
        code=ErrorCode.E2102_MISSING_MATCHING_PROPERTY,
        message=f"No property {name} to match",
        metadata={"property": name},
    ))


def missing_schema(name: str) -> ConfigurationError:
    return ConfigurationError(AppError(
        code=ErrorCode.E2103_MISSING_SCHEMA,
        message=f"No schema for property {name}",
        metadata={"property": name},
    ))


def invalid_strength(strength: Any, allowed: list[str]) -> ConfigurationError:
    return ConfigurationError(AppError(
        code=ErrorCode.E2104_INVALID_STRENGTH,
        message=f"Invalid password strength: {strength!r}. Valid options: {', '.join(allowed)}",
        metadata={"strength": repr(strength), "allowed": allowed},
    ))

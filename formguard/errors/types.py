"""Typed Error Taxonomy

Every error raised by formguard carries an AppError: a typed code from the
taxonomy below, a human-readable message and structured metadata. The
exception classes also derive from the matching built-in exception so callers
can catch them idiomatically (``except TypeError``).

Validation failures are never raised. A rule that is not satisfied is
ordinary data in the result's error list; only malformed configuration or
malformed input raises.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ErrorCode(Enum):
    """Hierarchical error code taxonomy.

    E20xx: Input errors (wrong type, out of range)
    E21xx: Schema configuration errors
    """
    # Input (E20xx)
    E2000_VALIDATION_GENERIC = 2000
    E2003_OUT_OF_RANGE = 2003
    E2004_INVALID_TYPE = 2004

    # Configuration (E21xx)
    E2100_INVALID_LABEL = 2100
    E2101_MISSING_VALIDATOR = 2101
    E2102_MISSING_MATCHING_PROPERTY = 2102
    E2103_MISSING_SCHEMA = 2103
    E2104_INVALID_STRENGTH = 2104

    @property
    def category(self) -> str:
        """Human-readable error category."""
        return "configuration" if 2100 <= self.value < 2200 else "input"


@dataclass(frozen=True, slots=True)
class AppError:
    """Error payload with code, message and metadata."""
    code: ErrorCode
    message: str
    metadata: dict[str, Any] = field(default_factory=dict)

    def with_metadata(self, **kwargs) -> AppError:
        """Create new error with additional metadata."""
        return AppError(code=self.code, message=self.message, metadata={**self.metadata, **kwargs})

    def to_dict(self) -> dict:
        """Serialize error for structured reporting."""
        return {
            "error": {
                "code": self.code.name,
                "code_num": self.code.value,
                "message": self.message,
                "category": self.code.category,
                "metadata": self.metadata,
            }
        }

    def __str__(self) -> str:
        return f"[{self.code.name}] {self.message}"


class FormguardError(Exception):
    """Exception wrapper for AppError.

    The exception message is the plain error message; the typed payload is
    available as ``.error``.
    """

    def __init__(self, error: AppError):
        self.error = error
        super().__init__(error.message)

    @property
    def code(self) -> ErrorCode: return self.error.code

    @property
    def metadata(self) -> dict[str, Any]: return self.error.metadata

    def to_dict(self) -> dict: return self.error.to_dict()


class InvalidTypeError(FormguardError, TypeError):
    """An argument or validated value has the wrong type."""


class InvalidRangeError(FormguardError, ValueError):
    """A numeric argument is outside its allowed range."""


class ConfigurationError(FormguardError, ValueError):
    """A schema, form or preset is configured inconsistently."""


class MissingValidatorError(ConfigurationError, TypeError):
    """A custom validator spec has no callable validator."""

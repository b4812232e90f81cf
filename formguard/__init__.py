"""formguard: declarative validation for flat, string-valued forms."""
import logging

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

from formguard.errors import (  # noqa: E402
    ConfigurationError,
    FormguardError,
    InvalidRangeError,
    InvalidTypeError,
    MissingValidatorError,
)
from formguard.validation import (  # noqa: E402
    EvaluationResult,
    FormResult,
    PasswordSchema,
    PasswordStrength,
    Schema,
    ValidationOptions,
    ValidatorSpec,
    validate_form,
    validators,
)

__all__ = [
    "__version__",
    "Schema",
    "PasswordSchema",
    "PasswordStrength",
    "ValidatorSpec",
    "ValidationOptions",
    "EvaluationResult",
    "FormResult",
    "validate_form",
    "validators",
    "FormguardError",
    "InvalidTypeError",
    "InvalidRangeError",
    "ConfigurationError",
    "MissingValidatorError",
]

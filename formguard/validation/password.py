"""Password presets."""
from __future__ import annotations

from collections.abc import Mapping
from enum import IntEnum
from typing import Any

from formguard.errors import invalid_strength

from .options import EvaluationResult, ValidationOptions
from .schema import Schema

PASSWORD_LABEL = "Password"


class PasswordStrength(IntEnum):
    WEAK = 1
    MEDIUM = 2
    STRONG = 3

    @classmethod
    def coerce(cls, strength: Any) -> PasswordStrength:
        """Accept a member, its integer value or its (case-insensitive) name."""
        if isinstance(strength, cls):
            return strength
        if isinstance(strength, int) and not isinstance(strength, bool) and strength in cls._value2member_map_:
            return cls(strength)
        if isinstance(strength, str) and strength.upper() in cls.__members__:
            return cls[strength.upper()]
        raise invalid_strength(strength, [m.name.lower() for m in cls])


def build_password_schema(strength: PasswordStrength) -> Schema:
    """Fixed rule presets, all labeled "Password".

    - weak: at least 4 characters
    - medium: at least 6 characters and a digit
    - strong: at least 8 characters, a digit, a symbol and a lowercase letter
    """
    schema = Schema().label(PASSWORD_LABEL)
    if strength is PasswordStrength.WEAK:
        return schema.min(4)
    if strength is PasswordStrength.MEDIUM:
        return schema.min(6).has_digit()
    return schema.min(8).has_digit().has_symbol().has_lowercase()


class PasswordSchema:
    """Password validation with a preset strength (medium by default).

    Usage:
        PasswordSchema("strong").validate("Ab3!defg").is_valid  # True
    """

    __slots__ = ("strength", "_schema")

    def __init__(self, strength: PasswordStrength | int | str = PasswordStrength.MEDIUM):
        self.strength = PasswordStrength.coerce(strength)
        self._schema = build_password_schema(self.strength)

    def __repr__(self) -> str:
        return f"PasswordSchema(strength={self.strength.name.lower()!r})"

    @property
    def schema(self) -> Schema: return self._schema

    def validate(
        self,
        value: str,
        options: ValidationOptions | Mapping[str, Any] | None = None,
    ) -> EvaluationResult:
        return self._schema.validate(value, options)

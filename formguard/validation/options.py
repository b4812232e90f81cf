"""Validation options and result types."""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel

from formguard.config import get_settings
from formguard.errors import invalid_type


class ValidationOptions(BaseModel):
    """Flags recognised everywhere validation occurs.

    Attributes:
        abort_early: Stop at the first failing rule.
        include_rules: Attach the per-rule pass/fail map to the result.
        include_label: Prefix each error message with the schema's label.
    """

    model_config = ConfigDict(
        strict=True,
        frozen=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    abort_early: bool = False
    include_rules: bool = False
    include_label: bool = False

    @classmethod
    def parse(cls, options: ValidationOptions | Mapping[str, Any] | None) -> ValidationOptions:
        """Build options from an instance, a mapping or the configured defaults.

        Mapping keys may be snake_case or camelCase. Unknown keys and
        non-boolean values raise InvalidTypeError.
        """
        if options is None:
            settings = get_settings()
            return cls(
                abort_early=settings.DEFAULT_ABORT_EARLY,
                include_rules=settings.DEFAULT_INCLUDE_RULES,
                include_label=settings.DEFAULT_INCLUDE_LABEL,
            )
        if isinstance(options, cls):
            return options
        if not isinstance(options, Mapping):
            raise invalid_type("ValidationOptions or mapping", options)
        try:
            return cls.model_validate(dict(options))
        except ValidationError as e:
            raise invalid_type(
                "ValidationOptions or mapping",
                options,
                message=f"Invalid validation options: {e.errors()[0].get('msg', 'invalid value')}",
            ) from e


@dataclass(frozen=True, slots=True)
class EvaluationResult:
    """Outcome of validating one value against one schema."""
    is_valid: bool
    errors: list[str]
    rules: dict[str, bool] | None = None

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"is_valid": self.is_valid, "errors": list(self.errors)}
        if self.rules is not None: result["rules"] = dict(self.rules)
        return result


@dataclass(frozen=True, slots=True)
class FormResult:
    """Outcome of validating a whole form.

    ``errors`` only holds fields that failed; ``rules`` holds every field's
    rule map when requested.
    """
    is_valid: bool
    errors: dict[str, list[str]]
    rules: dict[str, dict[str, bool]] | None = None

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "is_valid": self.is_valid,
            "errors": {name: list(errs) for name, errs in self.errors.items()},
        }
        if self.rules is not None: result["rules"] = {name: dict(r) for name, r in self.rules.items()}
        return result

"""Form Evaluator

Applies a mapping of field name -> Schema across a form (field name ->
string), in the form's own key order.

Matching properties are resolved from the form for each call and handed to
the field's schema as ``match_value``; nothing is written back into the
schema, so schemas can be shared between forms and callers.

Usage:
    schemas = {
        "password": Schema().is_required().min(8),
        "confirm": Schema().is_required().has_matching_property("password"),
    }
    result = validate_form(request_data, schemas, {"include_label": True})
    if not result.is_valid:
        return result.errors  # {"confirm": ["does not match password"]}
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from formguard.errors import missing_matching_property, missing_schema
from formguard.logging import form_logger

from .guards import ensure_mappings, ensure_string
from .options import FormResult, ValidationOptions
from .schema import Schema

log = form_logger()


def _lookup_schema(name: str, schemas: Mapping[str, Schema]) -> Schema:
    if name not in schemas:
        log.warning("schema_missing", field=name, available=list(schemas))
        raise missing_schema(name)
    return schemas[name]


def _resolve_match_value(schema: Schema, form: Mapping[str, Any]) -> str | None:
    if (target := schema.get_matching_property()) is None:
        return None
    if target not in form:
        log.warning("matching_property_missing", property=target)
        raise missing_matching_property(target)
    return ensure_string(form[target])


def validate_form(
    form: Mapping[str, str],
    schemas: Mapping[str, Schema],
    options: ValidationOptions | Mapping[str, Any] | None = None,
) -> FormResult:
    """Validate every field of ``form`` against its schema.

    Args:
        form: Field name -> candidate string
        schemas: Field name -> Schema; every form field needs one
        options: Applied to every field

    Returns:
        FormResult; ``errors`` only lists invalid fields

    Raises:
        InvalidTypeError: ``form`` or ``schemas`` is not a mapping, or a field
            value is not a string
        ConfigurationError: a field has no schema, or a matching property is
            absent from the form
    """
    ensure_mappings(form, schemas)
    opts = ValidationOptions.parse(options)

    form_rules: dict[str, dict[str, bool]] = {}
    form_errors: dict[str, list[str]] = {}
    for name, value in form.items():
        schema = _lookup_schema(name, schemas)
        result = schema.validate(value, opts, match_value=_resolve_match_value(schema, form))
        if result.rules is not None:
            form_rules[name] = result.rules
        if not result.is_valid:
            form_errors[name] = result.errors

    log.debug("form_evaluated", field_count=len(form), invalid_fields=list(form_errors))
    return FormResult(
        is_valid=not form_errors,
        errors=form_errors,
        rules=form_rules if opts.include_rules else None,
    )

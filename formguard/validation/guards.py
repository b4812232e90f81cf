"""Boundary guards for untyped input at the public entry points."""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from formguard.errors import empty_label, invalid_form, invalid_type, negative_length, not_a_string


def is_empty_string(value: str) -> bool:
    return value.strip() == ""


def ensure_length(length: Any) -> int:
    """Return ``length`` if it is a non-negative integer, raise otherwise."""
    # bool is an int subclass but never a meaningful length
    if isinstance(length, bool) or not isinstance(length, int):
        raise invalid_type("int", length, message="Length must be a non-negative integer.")
    if length < 0:
        raise negative_length(length)
    return length


def ensure_label(value: Any) -> str:
    if not isinstance(value, str):
        raise invalid_type("str", value, message="Label must be a string.")
    if is_empty_string(value):
        raise empty_label()
    return value


def ensure_string(value: Any) -> str:
    if not isinstance(value, str):
        raise not_a_string(value)
    return value


def ensure_mappings(form: Any, schemas: Any) -> None:
    if not isinstance(form, Mapping) or not isinstance(schemas, Mapping):
        raise invalid_form(form, schemas)

"""Leaf Validators

Pure predicate functions over a single string value. Every validator follows
the same call contract:

    validator(*params, value, error_message=None) -> True | error_message | False

It returns ``True`` when the value passes, otherwise the ``error_message`` it
was given, or ``False`` when no message was requested. Parameterised
validators (length bounds, patterns, expected match values) take their
parameter before the value.

Usage:
    has_digit("a1")                    # True
    has_digit("a")                     # False
    has_minimum(3, "ab", "too short")  # "too short"
"""
from __future__ import annotations

import re
from functools import lru_cache

_DIGIT = re.compile(r"[0-9]")
_SYMBOL = re.compile(r"""[!@#$%^&*(),.?":{}|<>]""")
_LOWERCASE = re.compile(r"[a-z]")
_UPPERCASE = re.compile(r"[A-Z]")
_EMAIL = re.compile(r"\w+(?:-\w+)*@\w+(?:-\w+)*(?:\.\w{2,3})+", re.ASCII)


@lru_cache(maxsize=256)
def _compile(pattern: str) -> re.Pattern:
    return re.compile(pattern)


def _outcome(passed: bool, error_message: str | None) -> bool | str:
    return True if passed else (error_message or False)


# ============================================================================
# Character Classes
# ============================================================================

def has_digit(value: str, error_message: str | None = None) -> bool | str:
    """Check that the value contains at least one ASCII digit."""
    return _outcome(_DIGIT.search(value) is not None, error_message)


def has_symbol(value: str, error_message: str | None = None) -> bool | str:
    """Check that the value contains at least one special character."""
    return _outcome(_SYMBOL.search(value) is not None, error_message)


def has_lowercase(value: str, error_message: str | None = None) -> bool | str:
    return _outcome(_LOWERCASE.search(value) is not None, error_message)


def has_uppercase(value: str, error_message: str | None = None) -> bool | str:
    return _outcome(_UPPERCASE.search(value) is not None, error_message)


# ============================================================================
# Length, Presence and Equality
# ============================================================================

def has_minimum(length: int, value: str, error_message: str | None = None) -> bool | str:
    """Check that the value is at least ``length`` characters long."""
    return _outcome(len(value) >= length, error_message)


def has_maximum(length: int, value: str, error_message: str | None = None) -> bool | str:
    """Check that the value is at most ``length`` characters long."""
    return _outcome(len(value) <= length, error_message)


def is_required(value: str, error_message: str | None = None) -> bool | str:
    """Check that the value is neither empty nor whitespace-only."""
    return _outcome(bool(value.strip()), error_message)


def matching(matching_value: str, value: str, error_message: str | None = None) -> bool | str:
    """Check that the value is exactly equal to ``matching_value``."""
    return _outcome(value == matching_value, error_message)


# ============================================================================
# Format
# ============================================================================

def has_pattern(pattern: str | re.Pattern, value: str, error_message: str | None = None) -> bool | str:
    """Check that ``pattern`` is found anywhere in the value.

    ``pattern`` may be a string or a compiled regular expression. Anchor it
    explicitly (``^...$``) to require a full match. Compiled string patterns
    are cached.
    """
    compiled = pattern if isinstance(pattern, re.Pattern) else _compile(pattern)
    return _outcome(compiled.search(value) is not None, error_message)


def is_email(value: str, error_message: str | None = None) -> bool | str:
    """Check that the value looks like an email address.

    Accepts word characters with single inner hyphens in the local part and
    domain, followed by one or more 2-3 character dotted suffixes.
    """
    return _outcome(_EMAIL.fullmatch(value) is not None, error_message)

"""Tests for formguard.validation.schema - the fluent rule registry."""

from __future__ import annotations

import re

import pytest

from formguard.errors import (
    ConfigurationError,
    ErrorCode,
    InvalidRangeError,
    InvalidTypeError,
    MissingValidatorError,
)
from formguard.validation import RuleKind, Schema, ValidatorSpec
from formguard.validation import validators as v

# =============================================================================
# Tests: configuration guards
# =============================================================================


class TestLengthBounds:
    """min/max accept non-negative integers only."""

    @pytest.mark.parametrize("length", [0, 1, 8, 255])
    def test_accepts_non_negative_integers(self, length):
        schema = Schema().min(length).max(length)
        assert schema.rules["minimum"].input == length
        assert schema.rules["maximum"].input == length

    @pytest.mark.parametrize("length", ["a", 1.5, None, True])
    def test_non_integer_raises_type_error(self, length):
        with pytest.raises(TypeError):
            Schema().min(length)
        with pytest.raises(InvalidTypeError):
            Schema().max(length)

    def test_negative_raises_range_error(self):
        with pytest.raises(InvalidRangeError) as exc:
            Schema().min(-1)
        assert exc.value.code is ErrorCode.E2003_OUT_OF_RANGE
        with pytest.raises(ValueError):
            Schema().max(-1)

    def test_default_messages_interpolate_length(self):
        schema = Schema().min(3).max(9)
        assert schema.rules["minimum"].message == "must be at least 3 character(s) long"
        assert schema.rules["maximum"].message == "must not be longer than 9 character(s)"

    def test_failed_configuration_leaves_schema_unchanged(self):
        schema = Schema().min(2)
        with pytest.raises(InvalidRangeError):
            schema.min(-5)
        assert schema.rules["minimum"].input == 2


class TestLabel:
    def test_sets_label(self):
        assert Schema().label("Name").get_label() == "Name"

    def test_non_string_raises_type_error(self):
        with pytest.raises(TypeError):
            Schema().label(42)

    @pytest.mark.parametrize("label", ["", "   "])
    def test_empty_raises_configuration_error(self, label):
        with pytest.raises(ConfigurationError) as exc:
            Schema().label(label)
        assert exc.value.code is ErrorCode.E2100_INVALID_LABEL


# =============================================================================
# Tests: rule registration
# =============================================================================


class TestRegistration:
    def test_methods_chain_and_keep_insertion_order(self):
        schema = (
            Schema()
            .min(4)
            .max(8)
            .has_digit()
            .has_lowercase()
            .has_uppercase()
            .has_symbol()
            .is_required()
            .has_pattern(re.compile("abc"))
        )
        assert schema.rule_names == [
            "minimum",
            "maximum",
            "has_digit",
            "has_lowercase",
            "has_uppercase",
            "has_symbol",
            "is_required",
            "has_pattern",
        ]

    def test_all_rules_with_empty_value_do_not_raise(self):
        result = (
            Schema()
            .min(4)
            .max(8)
            .has_digit()
            .has_lowercase()
            .has_uppercase()
            .has_symbol()
            .is_required()
            .has_pattern(re.compile("abc"))
            .add_validator({"validator": lambda value, message: True})
            .validate("")
        )
        assert result.is_valid is False

    def test_reregistration_replaces_in_place(self):
        schema = Schema().min(2).has_digit().min(5, "longer please")
        assert schema.rule_names == ["minimum", "has_digit"]
        assert schema.rules["minimum"].input == 5
        assert schema.rules["minimum"].message == "longer please"

    def test_custom_message_overrides_default(self):
        schema = Schema().has_digit("needs a number")
        assert schema.rules["has_digit"].message == "needs a number"

    def test_rules_view_is_read_only(self):
        schema = Schema().has_digit()
        with pytest.raises(TypeError):
            schema.rules["has_digit"] = None

    def test_matching_property_is_recorded(self):
        schema = Schema().has_matching_property("abc")
        assert schema.get_matching_property() == "abc"
        assert schema.matching_property == "abc"
        assert schema.rules["matching"].kind is RuleKind.MATCHING
        assert schema.rules["matching"].input is None
        assert schema.rules["matching"].message == "does not match abc"

    def test_no_matching_property_by_default(self):
        assert Schema().get_matching_property() is None


# =============================================================================
# Tests: custom validators
# =============================================================================


def echo_message(input, value, message):
    return message


def always_true(value, message):
    return True


class TestAddValidator:
    """add_validator accepts one spec or a sequence of specs."""

    def test_missing_validator_raises(self):
        with pytest.raises(MissingValidatorError, match="validator"):
            Schema({})

    def test_non_callable_validator_raises(self):
        with pytest.raises(TypeError, match="validator"):
            Schema().add_validator({"validator": "not callable"})

    def test_non_spec_raises(self):
        with pytest.raises(ConfigurationError, match="validator"):
            Schema().add_validator(42)

    def test_bad_spec_in_sequence_registers_nothing(self):
        schema = Schema()
        with pytest.raises(MissingValidatorError):
            schema.add_validator([{"validator": always_true}, {}])
        assert schema.rule_names == []

    def test_sets_custom_validator(self):
        result = Schema({"input": 1, "message": "ERROR", "validator": echo_message}).validate(
            "abc", {"include_rules": True}
        )
        assert list(result.rules) == ["echo_message"]
        assert result.errors == ["ERROR"]

    def test_sets_multiple_validators(self):
        def a(value, message):
            return message

        def b(value, message):
            return message

        def c(value, message):
            return message

        result = Schema([{"validator": a}, {"validator": b}, {"validator": c}]).validate(
            "abc", {"include_rules": True}
        )
        assert list(result.rules) == ["a", "b", "c"]

    def test_calls_validator_with_input_value_and_message(self):
        calls = []

        def recorder(input, value, message):
            calls.append((input, value, message))
            return True

        Schema({"input": 1, "message": "ERROR", "validator": recorder}).validate("abc")
        assert calls == [(1, "abc", "ERROR")]

    def test_calls_validator_without_input(self):
        calls = []

        def recorder(value, message):
            calls.append((value, message))
            return True

        Schema({"validator": recorder}).validate("abc")
        assert calls == [("abc", "must match given validator")]

    def test_same_name_overwrites(self):
        schema = Schema().add_validator(
            [
                ValidatorSpec(validator=lambda value, message: True),
                ValidatorSpec(validator=lambda value, message: message),
            ]
        )
        assert schema.rule_names == ["<lambda>"]
        assert schema.validate("x").is_valid is False

    def test_explicit_name_keeps_lambdas_apart(self):
        schema = Schema().add_validator(
            [
                ValidatorSpec(validator=lambda value, message: True, name="first"),
                ValidatorSpec(validator=lambda value, message: True, name="second"),
            ]
        )
        assert schema.rule_names == ["first", "second"]
        assert schema.rules["first"].kind is RuleKind.CUSTOM


class TestLeafValidatorsAsCustom:
    """Leaf validators passed to add_validator keep their built-in behaviour."""

    def test_is_required_stays_required(self):
        schema = Schema().is_required().add_validator({"validator": v.is_required})
        assert schema.rules["is_required"].kind is RuleKind.IS_REQUIRED
        result = schema.validate("", {"include_rules": True})
        assert result.is_valid is False
        assert result.rules == {"is_required": False}

    def test_is_required_alone_disables_optional_short_circuit(self):
        result = Schema({"validator": v.is_required, "message": "must not be empty"}).min(3).validate("")
        assert result.errors == ["must not be empty", "must be at least 3 character(s) long"]

    def test_matching_stays_exclusive(self):
        schema = Schema().min(10).has_digit().add_validator({"validator": v.matching, "input": "abc"})
        assert schema.rules["matching"].kind is RuleKind.MATCHING
        result = schema.validate("abc", {"include_rules": True})
        assert result.is_valid is True
        assert result.rules == {"matching": True}

    def test_minimum_takes_part_in_bounds_check(self):
        schema = Schema().max(2).add_validator({"validator": v.has_minimum, "input": 5})
        with pytest.raises(InvalidRangeError):
            schema.validate("abc")

    def test_explicit_name_keeps_leaf_validator_custom(self):
        schema = Schema().is_required().add_validator({"validator": v.is_required, "name": "present"})
        assert schema.rule_names == ["is_required", "present"]
        assert schema.rules["present"].kind is RuleKind.CUSTOM

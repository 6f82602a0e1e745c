# tests/core_tests/test_value_conversions.py
# This file is part of Kleene - Three-Valued Logic
#
# Test suite for the truth domain and its conversions

"""Display strings, integer encoding, boolean projection, parsing of text
and integers, ordering, and the protocol behaviour of members."""

import pytest
from kleene import Value, FALSE, UNKNOWN, TRUE, VALUES
from kleene.exceptions import (
    ConversionError,
    InvalidIntegerValue,
    InvalidLiteral,
    KleeneError,
)


class TestDisplayAndEncoding:
    """Outgoing representations of each member."""

    @pytest.mark.parametrize(
        "value, text",
        [(FALSE, "FALSE"), (UNKNOWN, "UNKNOWN"), (TRUE, "TRUE")],
    )
    def test_display_string(self, value, text):
        assert value.to_display_string() == text
        assert str(value) == text

    @pytest.mark.parametrize("value, number", [(FALSE, -1), (UNKNOWN, 0), (TRUE, 1)])
    def test_integer_encoding(self, value, number):
        assert value.to_int() == number
        assert int(value) == number

    @pytest.mark.parametrize(
        "value, flag", [(FALSE, False), (UNKNOWN, False), (TRUE, True)]
    )
    def test_boolean_projection(self, value, flag):
        assert value.to_bool() is flag

    def test_boolean_projection_is_lossy(self):
        assert Value.from_bool(UNKNOWN.to_bool()) is FALSE

    def test_known_values(self):
        assert FALSE.is_known()
        assert TRUE.is_known()
        assert not UNKNOWN.is_known()

    def test_module_constants_alias_members(self):
        assert FALSE is Value.FALSE
        assert UNKNOWN is Value.UNKNOWN
        assert TRUE is Value.TRUE
        assert VALUES == (FALSE, UNKNOWN, TRUE)

    def test_domain_is_closed(self):
        assert len(Value) == 3
        assert [v.to_int() for v in Value] == [-1, 0, 1]


class TestFromText:
    """Parsing of literals."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("false", FALSE),
            ("FALSE", FALSE),
            ("False", FALSE),
            ("-1", FALSE),
            ("unknown", UNKNOWN),
            ("UNKNOWN", UNKNOWN),
            ("uNkNoWn", UNKNOWN),
            ("0", UNKNOWN),
            ("true", TRUE),
            ("TRUE", TRUE),
            ("tRUE", TRUE),
            ("1", TRUE),
        ],
    )
    def test_accepted_literals(self, text, expected):
        assert Value.from_text(text) is expected

    @pytest.mark.parametrize("value", list(Value))
    def test_display_string_round_trip(self, value):
        assert Value.from_text(value.to_display_string()) is value

    def test_invalid_literal_carries_input(self):
        with pytest.raises(InvalidLiteral) as exc_info:
            Value.from_text("ParseError")

        assert exc_info.value.text == "ParseError"
        assert "ParseError" in str(exc_info.value)
        assert str(exc_info.value) == "convert from 'ParseError': invalid value"

    @pytest.mark.parametrize(
        "text", ["", " TRUE", "TRUE ", "yes", "2", "+1", "-0", "T", "none"]
    )
    def test_rejected_literals(self, text):
        with pytest.raises(InvalidLiteral) as exc_info:
            Value.from_text(text)
        assert exc_info.value.text == text

    def test_non_string_input_rejected(self):
        with pytest.raises(InvalidLiteral) as exc_info:
            Value.from_text(1)
        assert exc_info.value.text == 1

    def test_error_hierarchy(self):
        with pytest.raises(ValueError):
            Value.from_text("maybe")
        with pytest.raises(ConversionError):
            Value.from_text("maybe")
        with pytest.raises(KleeneError):
            Value.from_text("maybe")


class TestFromInteger:
    """Parsing of integer encodings."""

    @pytest.mark.parametrize("number, expected", [(-1, FALSE), (0, UNKNOWN), (1, TRUE)])
    def test_accepted_integers(self, number, expected):
        assert Value.from_int(number) is expected

    @pytest.mark.parametrize("value", list(Value))
    def test_integer_round_trip(self, value):
        assert Value.from_int(value.to_int()) is value

    def test_invalid_integer_carries_input(self):
        with pytest.raises(InvalidIntegerValue) as exc_info:
            Value.from_int(12345)

        assert exc_info.value.value == 12345
        assert str(exc_info.value) == "convert from 12345: invalid value"

    @pytest.mark.parametrize("number", [-2, 2, 12345, -12345])
    def test_out_of_range_integers(self, number):
        with pytest.raises(InvalidIntegerValue):
            Value.from_int(number)

    @pytest.mark.parametrize("bad", [True, False, 1.0, "1", None])
    def test_non_integer_input_rejected(self, bad):
        with pytest.raises(InvalidIntegerValue) as exc_info:
            Value.from_int(bad)
        assert exc_info.value.value is bad


class TestFromBoolean:
    def test_true_maps_to_true(self):
        assert Value.from_bool(True) is TRUE

    def test_false_maps_to_false(self):
        assert Value.from_bool(False) is FALSE


class TestProtocol:
    """Ordering, hashing and truthiness."""

    def test_total_order(self):
        assert FALSE < UNKNOWN < TRUE
        assert TRUE > UNKNOWN > FALSE
        assert FALSE <= FALSE
        assert TRUE >= UNKNOWN
        assert sorted([TRUE, FALSE, UNKNOWN]) == [FALSE, UNKNOWN, TRUE]
        assert min(VALUES) is FALSE
        assert max(VALUES) is TRUE

    def test_comparison_with_other_types(self):
        assert FALSE != -1
        with pytest.raises(TypeError):
            FALSE < 0

    def test_hashable(self):
        lookup = {FALSE: "f", UNKNOWN: "u", TRUE: "t"}
        assert lookup[Value.from_text("0")] == "u"

    @pytest.mark.parametrize("value", list(Value))
    def test_implicit_truthiness_rejected(self, value):
        with pytest.raises(TypeError):
            bool(value)

    def test_repr(self):
        assert repr(UNKNOWN) == "<Value.UNKNOWN: 0>"

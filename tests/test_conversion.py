"""
Tests for ConversionValidator.
"""

import pytest

from dataknobs_shapes import (
    ConversionValidator,
    ShapeValidationError,
    array_of,
    conversion,
    number_validator,
    object_of,
    parse_number,
    string_validator,
    union,
    unsnake,
)


@pytest.fixture
def numeric_string():
    return conversion(string_validator, parse_number, number_validator)


class TestConversionValidator:
    """Test ConversionValidator."""

    def test_materialize_converts(self, numeric_string):
        """Test that an input value is converted."""
        result = numeric_string.materialize("3.5")
        assert result == 3.5
        assert isinstance(result, float)

    def test_materialize_rejects_output_values(self, numeric_string):
        """Test that a value already of the output kind is rejected."""
        with pytest.raises(ShapeValidationError) as exc_info:
            numeric_string.materialize(3.5)
        assert exc_info.value.value == 3.5
        assert exc_info.value.validator is numeric_string

    def test_canonicalize_converts_raw_input(self, numeric_string):
        """Test that canonicalize converts recognized input values."""
        assert numeric_string.canonicalize("2") == 2.0

    def test_canonicalize_passes_other_values(self, numeric_string):
        """Test that other values are returned unchanged."""
        candidate = ["2"]
        assert numeric_string.canonicalize(candidate) is candidate

    def test_recognizes_delegates_to_output(self, numeric_string):
        """Test that recognition is the output validator's."""
        assert numeric_string.recognizes(3.5)
        assert not numeric_string.recognizes("3.5")

    def test_accepts_output_values(self, numeric_string):
        """Test that accepts passes values the output validator recognizes.

        Unlike materialize, the generic accepts check only looks at the
        canonicalized value.
        """
        assert numeric_string.accepts("3.5")
        assert numeric_string.accepts(3.5)

    def test_input_is_not_canonicalized_first(self):
        """Test that the raw value must be recognized by the input validator."""
        record_size = conversion(
            unsnake(object_of({"itemList": array_of(string_validator)})),
            lambda record: len(record["itemList"]),
            number_validator,
        )
        raw = {"item_list": ["a", "b"]}

        assert record_size.input_validator.accepts(raw)
        assert record_size.canonicalize(raw) is raw
        with pytest.raises(ShapeValidationError):
            record_size.materialize(raw)
        assert record_size.materialize({"itemList": ["a", "b"]}) == 2

    def test_materialize_skips_output_check(self):
        """Test the known sharp edge: converter output is returned unchecked."""
        mislabeled = conversion(string_validator, str.upper, number_validator)

        assert mislabeled.materialize("abc") == "ABC"
        assert not mislabeled.accepts("abc")

    def test_generic_materialize_inside_composites(self, numeric_string):
        """Test that a parent uses canonicalize/recognizes, not materialize."""
        validator = object_of({"price": numeric_string})
        assert validator.materialize({"price": "9.5"}) == {"price": 9.5}
        assert validator.materialize({"price": 9.5}) == {"price": 9.5}

    def test_inside_union(self, numeric_string):
        """Test a conversion as a union alternative."""
        validator = union(numeric_string, number_validator)
        assert validator.materialize("1") == 1.0
        assert validator.materialize(2) == 2

    def test_rejects_non_callable_converter(self):
        """Test that construction checks the converter."""
        with pytest.raises(TypeError):
            ConversionValidator(string_validator, "float", number_validator)

    def test_rejects_non_validators(self):
        """Test that construction checks both validators."""
        with pytest.raises(TypeError):
            ConversionValidator(str, float, number_validator)
        with pytest.raises(TypeError):
            ConversionValidator(string_validator, float, float)

    def test_repr(self, numeric_string):
        """Test the readable identity used in errors."""
        assert repr(numeric_string) == (
            "ConversionValidator(StringValidator(), parse_number, NumberValidator())"
        )

    def test_children_are_read_only(self, numeric_string):
        """Test that the conversion parts cannot be replaced."""
        with pytest.raises(AttributeError):
            numeric_string.converter = str.upper
        with pytest.raises(AttributeError):
            numeric_string.input_validator = number_validator
        with pytest.raises(AttributeError):
            numeric_string.output_validator = string_validator


class TestBadNumericStrings:
    """Test conversions of strings that do not hold a number."""

    def test_not_accepted(self, numeric_string):
        """Test that a bad numeric string is rejected without raising."""
        assert numeric_string.accepts("abc") is False
        assert numeric_string.accepts("") is False

    def test_rejected_inside_record(self, numeric_string):
        """Test that a bad total fails the whole record with a shape error."""
        order = unsnake(object_of({"total": numeric_string | number_validator}))

        assert order.accepts({"total": "19.90"}) is True
        assert order.accepts({"total": "abc"}) is False
        with pytest.raises(ShapeValidationError) as exc_info:
            order.materialize({"total": "abc"})
        assert exc_info.value.validator is order


class TestParseNumber:
    """Test parse_number."""

    @pytest.mark.parametrize("text,expected", [
        ("3.5", 3.5),
        ("-2", -2.0),
        (" 10 ", 10.0),
        ("1e3", 1000.0),
    ])
    def test_parses_numbers(self, text, expected):
        """Test that numeric strings are parsed as floats."""
        assert parse_number(text) == expected

    @pytest.mark.parametrize("text", ["abc", "", "1.2.3", "12px"])
    def test_returns_none_for_other_strings(self, text):
        """Test that other strings give None instead of raising."""
        assert parse_number(text) is None

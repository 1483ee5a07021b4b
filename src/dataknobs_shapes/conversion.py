"""Conversion validator: recognize one shape, convert it into another.

Example:
    ```python
    from dataknobs_shapes import (
        conversion, number_validator, parse_number, string_validator,
    )

    numeric_string = conversion(string_validator, parse_number, number_validator)
    numeric_string.materialize("3.5")  # 3.5
    numeric_string.accepts("abc")      # False, parses to None
    numeric_string.materialize(3.5)    # raises, 3.5 is not a string
    ```
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, Generic, TypeVar

from .base import Validator, ensure_validator

logger = logging.getLogger(__name__)

In = TypeVar("In")
Out = TypeVar("Out")


def parse_number(text: str) -> float | None:
    """Parse a numeric string, or return None if it does not hold a number.

    Never raises, so it can be used as a conversion's converter: a string
    that is not a number becomes ``None``, which the number validator does
    not recognize.
    """
    try:
        return float(text)
    except ValueError:
        return None


class ConversionValidator(Validator[Out], Generic[In, Out]):
    """Accepts values that the input validator recognizes, converted.

    The converter must be pure and total over the input validator's values.
    A conversion that can fail should express failure as a result the output
    validator does not recognize.

    ``materialize`` is stricter than the generic one: it only takes raw values
    recognized by the input validator, and returns the converter's result
    without consulting the output validator.
    """

    def __init__(
        self,
        input_validator: Validator[In],
        converter: Callable[[In], Out],
        output_validator: Validator[Out],
    ):
        """Initialize the conversion.

        Args:
            input_validator: Recognizes raw values that can be converted
            converter: Pure function from input values to output values
            output_validator: Recognizes converted values

        Raises:
            TypeError: If a validator is not a Validator or the converter is
                not callable
        """
        self._input_validator = ensure_validator(input_validator, "input_validator")
        if not callable(converter):
            raise TypeError(f"converter must be callable, got {type(converter).__name__}")
        self._converter = converter
        self._output_validator = ensure_validator(output_validator, "output_validator")

    @property
    def input_validator(self) -> Validator[In]:
        """Get the validator for raw values."""
        return self._input_validator

    @property
    def converter(self) -> Callable[[In], Out]:
        """Get the conversion function."""
        return self._converter

    @property
    def output_validator(self) -> Validator[Out]:
        """Get the validator for converted values."""
        return self._output_validator

    def canonicalize(self, candidate: Any) -> Any:
        # The raw value is checked without canonicalizing it first
        if not self.input_validator.recognizes(candidate):
            return candidate
        return self.converter(candidate)

    def recognizes(self, candidate: Any) -> bool:
        return self.output_validator.recognizes(candidate)

    def materialize(self, candidate: Any) -> Out:
        if not self.input_validator.recognizes(candidate):
            raise self._rejection(candidate)
        converted = self.converter(candidate)
        logger.debug("Converted %s value with %r", type(candidate).__name__, self)
        return converted

    def __repr__(self) -> str:
        name = getattr(self.converter, "__name__", repr(self.converter))
        return (
            f"ConversionValidator({self.input_validator!r}, {name}, "
            f"{self.output_validator!r})"
        )


def conversion(
    input_validator: Validator[In],
    converter: Callable[[In], Out],
    output_validator: Validator[Out],
) -> ConversionValidator[In, Out]:
    """Create a validator converting ``input_validator`` values with ``converter``."""
    return ConversionValidator(input_validator, converter, output_validator)

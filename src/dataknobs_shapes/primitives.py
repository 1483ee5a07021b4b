"""Primitive validators for JSON scalar kinds.

These only check the fundamental kind of a value; there are no range or
format checks. ``float("nan")`` is a number, and ``True``/``False`` are
booleans only, even though ``bool`` subclasses ``int``.
"""

from __future__ import annotations

from numbers import Real
from typing import Any

from .base import Validator


def is_number(value: Any) -> bool:
    """True for ints and floats (any real number), never for booleans."""
    return isinstance(value, Real) and not isinstance(value, bool)


class StringValidator(Validator[str]):
    """Recognizes ``str`` values."""

    def recognizes(self, candidate: Any) -> bool:
        return isinstance(candidate, str)


class NumberValidator(Validator[float]):
    """Recognizes ints and floats, including NaN and infinities."""

    def recognizes(self, candidate: Any) -> bool:
        return is_number(candidate)


class BooleanValidator(Validator[bool]):
    """Recognizes ``True`` and ``False``."""

    def recognizes(self, candidate: Any) -> bool:
        return isinstance(candidate, bool)


class NullValidator(Validator[None]):
    """Recognizes ``None`` only."""

    def recognizes(self, candidate: Any) -> bool:
        return candidate is None


string_validator = StringValidator()
number_validator = NumberValidator()
boolean_validator = BooleanValidator()
null_validator = NullValidator()

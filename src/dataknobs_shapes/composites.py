"""Union, array and enum validators.
"""

from __future__ import annotations

import enum
from collections.abc import Iterable, Mapping
from typing import Any, TypeVar

from .base import Validator, ensure_validator
from .primitives import is_number, null_validator

T = TypeVar("T")
U = TypeVar("U")


class UnionValidator(Validator[T | U]):
    """Accepts values accepted by either of exactly two validators.

    The left validator is always tried first, so when both could accept a
    value the left one decides how it is canonicalized.
    """

    def __init__(self, left: Validator[T], right: Validator[U]):
        """Initialize with the two alternatives.

        Args:
            left: Validator tried first
            right: Validator tried when the left one does not accept
        """
        self._left = ensure_validator(left, "left")
        self._right = ensure_validator(right, "right")

    @property
    def left(self) -> Validator[T]:
        """Get the validator tried first."""
        return self._left

    @property
    def right(self) -> Validator[U]:
        """Get the validator tried second."""
        return self._right

    def canonicalize(self, candidate: Any) -> Any:
        if self.left.accepts(candidate):
            return self.left.canonicalize(candidate)
        if self.right.accepts(candidate):
            return self.right.canonicalize(candidate)
        return candidate

    def recognizes(self, candidate: Any) -> bool:
        return self.left.recognizes(candidate) or self.right.recognizes(candidate)

    def __repr__(self) -> str:
        return f"UnionValidator({self.left!r}, {self.right!r})"


def union(left: Validator[T], right: Validator[U]) -> UnionValidator[T, U]:
    """Create a validator accepting either ``left`` or ``right``."""
    return UnionValidator(left, right)


def nullable(validator: Validator[T]) -> UnionValidator[None, T]:
    """Create a validator accepting ``None`` or whatever ``validator`` accepts."""
    return UnionValidator(null_validator, validator)


def is_sequence(value: Any) -> bool:
    """True for lists and tuples, the Python shapes of a JSON array."""
    return isinstance(value, (list, tuple))


class ArrayValidator(Validator[list[T]]):
    """Accepts a sequence whose every item is accepted by the item validator."""

    def __init__(self, item_validator: Validator[T]):
        self._item_validator = ensure_validator(item_validator, "item_validator")

    @property
    def item_validator(self) -> Validator[T]:
        """Get the validator applied to every item."""
        return self._item_validator

    def canonicalize(self, candidate: Any) -> Any:
        if not is_sequence(candidate):
            # Rejected later by recognizes
            return candidate
        items = [self.item_validator.canonicalize(item) for item in candidate]
        return tuple(items) if isinstance(candidate, tuple) else items

    def recognizes(self, candidate: Any) -> bool:
        if not is_sequence(candidate):
            return False
        return all(self.item_validator.recognizes(item) for item in candidate)

    def __repr__(self) -> str:
        return f"ArrayValidator({self.item_validator!r})"


def array_of(item_validator: Validator[T]) -> ArrayValidator[T]:
    """Create a validator for sequences of ``item_validator`` values."""
    return ArrayValidator(item_validator)


def literal_kind(value: Any) -> str | None:
    """Name the JSON kind of a primitive literal, or None if not primitive."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if is_number(value):
        return "number"
    if isinstance(value, str):
        return "string"
    return None


class EnumValidator(Validator[Any]):
    """Accepts values strictly equal to a member of a closed set of literals.

    Strict equality means equal and of the same kind: ``1`` matches ``1.0``
    but ``True`` does not match ``1``.
    """

    def __init__(self, values: type[enum.Enum] | Mapping[Any, Any] | Iterable[Any]):
        """Initialize with the enum domain.

        Args:
            values: An ``enum.Enum`` subclass (member values are used), a
                mapping (its values are used, never its keys) or an iterable
                of literal values

        Raises:
            TypeError: If the domain holds a non-primitive value
            ValueError: If the domain is empty
        """
        if isinstance(values, type) and issubclass(values, enum.Enum):
            domain = [member.value for member in values]
        elif isinstance(values, Mapping):
            domain = list(values.values())
        elif isinstance(values, (str, bytes)):
            raise TypeError("Enum domain must be a collection of values, not a string")
        else:
            domain = list(values)

        if not domain:
            raise ValueError("Enum domain requires at least one value")
        for value in domain:
            if literal_kind(value) is None:
                raise TypeError(
                    f"Enum domain values must be primitive literals, got {type(value).__name__}"
                )

        self._values: tuple[Any, ...] = tuple(domain)

    @property
    def values(self) -> tuple[Any, ...]:
        """Get the enum domain in declaration order."""
        return self._values

    def recognizes(self, candidate: Any) -> bool:
        kind = literal_kind(candidate)
        if kind is None:
            return False
        return any(
            literal_kind(value) == kind and value == candidate
            for value in self.values
        )

    def __repr__(self) -> str:
        return f"EnumValidator({list(self.values)!r})"


def enum_of(values: type[enum.Enum] | Mapping[Any, Any] | Iterable[Any]) -> EnumValidator:
    """Create a validator for the given enum domain."""
    return EnumValidator(values)

"""Base validator with the shared recognize/canonicalize contract.

Every validator answers two questions about a candidate value:

- ``recognizes``: is this exact value already a valid ``T``?
- ``canonicalize``: what does this value look like after nested values have
  been normalized (array items, object fields, converted values)?

``accepts`` and ``materialize`` are built from those two, so composites only
override the pieces that differ.

Example:
    ```python
    from dataknobs_shapes import array_of, object_of, string_validator

    article = object_of({
        "title": string_validator,
        "tags": array_of(string_validator),
    })

    article.accepts({"title": "t", "tags": ["a", "b"]})  # True
    article.materialize({"title": "t", "tags": ["a", 5]})  # raises
    ```
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from .exceptions import ShapeValidationError

if TYPE_CHECKING:
    from .composites import UnionValidator

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")


class Validator(ABC, Generic[T]):
    """Base class for all validators.

    Validators hold no per-call state and are never modified after
    construction, so a single instance can be shared freely between threads.
    """

    @abstractmethod
    def recognizes(self, candidate: Any) -> bool:
        """Check whether the candidate already is a valid ``T``.

        Args:
            candidate: Value to inspect

        Returns:
            True if the value is a ``T`` as-is, without any coercion
        """

    def canonicalize(self, candidate: Any) -> Any:
        """Normalize nested values before recognition.

        The default is the identity. Implementations must not mutate the
        candidate and must not raise.

        Args:
            candidate: Value to normalize

        Returns:
            The normalized value (or the candidate itself)
        """
        return candidate

    def accepts(self, candidate: Any) -> bool:
        """Check whether the candidate can be materialized as a ``T``."""
        return self.recognizes(self.canonicalize(candidate))

    def materialize(self, candidate: Any) -> T:
        """Return the candidate as a ``T`` or raise.

        Args:
            candidate: Value to materialize

        Returns:
            The canonicalized value, known to be a ``T``

        Raises:
            ShapeValidationError: If the canonicalized value is not recognized
        """
        canonical = self.canonicalize(candidate)
        if self.recognizes(canonical):
            return canonical
        raise self._rejection(candidate)

    def _rejection(self, candidate: Any) -> ShapeValidationError:
        logger.debug(
            "Rejected %s value with %r", type(candidate).__name__, self
        )
        return ShapeValidationError(candidate, self)

    def __or__(self, other: Validator[U]) -> UnionValidator[T, U]:
        """Combine with OR: either validator may accept the value."""
        from .composites import UnionValidator

        return UnionValidator(self, other)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


def ensure_validator(candidate: Any, role: str) -> Validator:
    """Check a constructor argument is a validator.

    Args:
        candidate: Constructor argument to check
        role: Name of the argument, used in the error message

    Returns:
        The candidate, unchanged

    Raises:
        TypeError: If the candidate is not a Validator
    """
    if not isinstance(candidate, Validator):
        raise TypeError(
            f"{role} must be a Validator, got {type(candidate).__name__}"
        )
    return candidate

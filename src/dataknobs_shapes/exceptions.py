"""Custom exceptions for the dataknobs_shapes package.

This module defines exception types for the shapes package,
built on the common exception framework from dataknobs_common.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from dataknobs_common import DataknobsError, ValidationError

if TYPE_CHECKING:
    from dataknobs_shapes.base import Validator

# Alias so callers can catch everything from this package by one name
DataknobsShapesError = DataknobsError


class ShapeValidationError(ValidationError):
    """Raised when a validator refuses to materialize a value.

    The error is raised at the root of the validator tree; it identifies the
    validator that was asked, not the nested field that failed.
    """

    def __init__(self, value: Any, validator: Validator):
        self.value = value
        self.validator = validator
        super().__init__(
            f"{value!r} cannot be materialized by {validator!r}",
            context={"value": repr(value), "validator": repr(validator)},
        )

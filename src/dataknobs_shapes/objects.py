"""Object validators: records with named fields, and key normalization.

A record is any mapping. Only a mapping's own keys count as its properties;
for a ``ChainMap`` that is the first map, and keys reachable only through the
parent maps are treated as inherited.
"""

from __future__ import annotations

import logging
from collections import ChainMap
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from .base import Validator, ensure_validator
from .composites import nullable
from .naming import camel_case

logger = logging.getLogger(__name__)


def _own_mapping(data: Mapping[Any, Any]) -> Mapping[Any, Any]:
    if isinstance(data, ChainMap):
        return data.maps[0]
    return data


def has_own_property(data: Any, name: Any) -> bool:
    """Check whether a record has its own property called ``name``.

    This is a plain structural check, independent of any validator.

    Args:
        data: Candidate record
        name: Property name

    Returns:
        True if ``data`` is a mapping holding ``name`` as one of its own keys
    """
    if not isinstance(data, Mapping):
        return False
    try:
        return name in _own_mapping(data)
    except TypeError:
        # Unhashable names can never be keys
        return False


def own_keys(data: Mapping[Any, Any]) -> list[Any]:
    """List the own keys of a record in iteration order."""
    return list(_own_mapping(data).keys())


class ObjectValidator(Validator[dict[str, Any]]):
    """Accepts a record whose declared fields are present and valid.

    Every declared field must be an own key of the record and its value must
    be recognized by the field's validator. Undeclared keys are ignored during
    recognition and passed through unchanged during canonicalization.
    """

    def __init__(self, fields: Mapping[str, Validator]):
        """Initialize with the record shape.

        Args:
            fields: Mapping of field name to the validator for that field

        Raises:
            TypeError: If a field is not mapped to a Validator
        """
        self._fields: Mapping[str, Validator] = MappingProxyType({
            name: ensure_validator(validator, f"Field '{name}'")
            for name, validator in fields.items()
        })

    @property
    def fields(self) -> Mapping[str, Validator]:
        """Get the read-only record shape."""
        return self._fields

    def canonicalize(self, candidate: Any) -> Any:
        if not isinstance(candidate, Mapping):
            return candidate
        canonical = {}
        for key in own_keys(candidate):
            value = candidate[key]
            field_validator = self.fields.get(key)
            canonical[key] = (
                value if field_validator is None else field_validator.canonicalize(value)
            )
        return canonical

    def recognizes(self, candidate: Any) -> bool:
        if not isinstance(candidate, Mapping):
            return False
        return all(
            has_own_property(candidate, name) and validator.recognizes(candidate[name])
            for name, validator in self.fields.items()
        )

    def nullable(self) -> ObjectValidator:
        """Create a validator for the same shape where every field may be None."""
        return ObjectValidator({
            name: nullable(validator) for name, validator in self.fields.items()
        })

    def __repr__(self) -> str:
        return f"ObjectValidator(fields={list(self.fields)!r})"


def object_of(fields: Mapping[str, Validator]) -> ObjectValidator:
    """Create a validator for records with the given fields."""
    return ObjectValidator(fields)


class KeyNormalizingValidator(Validator[dict[str, Any]]):
    """Rewrites a record's top-level keys to camelCase before validating it.

    Recognition is delegated unchanged to the wrapped object validator, so a
    snake_case record is accepted (via ``accepts``/``materialize``) but not
    recognized as-is.

    When several keys rewrite to the same name, a key that is already in
    camelCase form wins; otherwise the first key in iteration order wins. The
    losing keys are dropped with a warning.
    """

    def __init__(self, object_validator: ObjectValidator):
        """Initialize with the validator for the normalized record.

        Args:
            object_validator: Validator applied after key rewriting

        Raises:
            TypeError: If ``object_validator`` is not an ObjectValidator
        """
        if not isinstance(object_validator, ObjectValidator):
            raise TypeError(
                f"object_validator must be an ObjectValidator, got {type(object_validator).__name__}"
            )
        self._object_validator = object_validator

    @property
    def object_validator(self) -> ObjectValidator:
        """Get the validator applied after key rewriting."""
        return self._object_validator

    def canonicalize(self, candidate: Any) -> Any:
        if isinstance(candidate, Mapping):
            candidate = self.normalize_keys(candidate)
        return self.object_validator.canonicalize(candidate)

    def recognizes(self, candidate: Any) -> bool:
        return self.object_validator.recognizes(candidate)

    def normalize_keys(self, record: Mapping[Any, Any]) -> dict[Any, Any]:
        """Shallow-copy a record with its own string keys rewritten in camelCase.

        Args:
            record: Record to rewrite

        Returns:
            New dict with rewritten keys; values are shared with ``record``
        """
        normalized: dict[Any, Any] = {}
        sources: dict[Any, Any] = {}
        for key in own_keys(record):
            target = camel_case(key) if isinstance(key, str) else key
            if target in normalized:
                previous = sources[target]
                replaces = key == target and previous != target
                logger.warning(
                    "Dropped key %r: normalizes to %r, already provided by %r",
                    previous if replaces else key,
                    target,
                    key if replaces else previous,
                )
                if not replaces:
                    continue
            normalized[target] = record[key]
            sources[target] = key
        return normalized

    def __repr__(self) -> str:
        return f"KeyNormalizingValidator({self.object_validator!r})"


def unsnake(object_validator: ObjectValidator) -> KeyNormalizingValidator:
    """Create a validator accepting snake_case keys for a camelCase record shape."""
    return KeyNormalizingValidator(object_validator)

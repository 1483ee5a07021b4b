"""DataKnobs Shapes package.

Composable validators that check untyped data (parsed JSON, config files,
user input) against a declared shape and return it as a value known to
conform, or raise.

- **Primitives**: string, number, boolean and null singletons
- **Structures**: unions, arrays, enums and objects built from child validators
- **Derived**: snake_case to camelCase key normalization, value conversion

Example:
    ```python
    from dataknobs_shapes import (
        array_of, nullable, number_validator, object_of, string_validator, unsnake,
    )

    user = unsnake(object_of({
        "firstName": string_validator,
        "age": nullable(number_validator),
        "tags": array_of(string_validator),
    }))

    user.materialize({"first_name": "Al", "age": None, "tags": []})
    # {'firstName': 'Al', 'age': None, 'tags': []}
    ```
"""

from dataknobs_shapes.base import Validator
from dataknobs_shapes.composites import (
    ArrayValidator,
    EnumValidator,
    UnionValidator,
    array_of,
    enum_of,
    nullable,
    union,
)
from dataknobs_shapes.conversion import ConversionValidator, conversion, parse_number
from dataknobs_shapes.exceptions import DataknobsShapesError, ShapeValidationError
from dataknobs_shapes.naming import camel_case
from dataknobs_shapes.objects import (
    KeyNormalizingValidator,
    ObjectValidator,
    has_own_property,
    object_of,
    own_keys,
    unsnake,
)
from dataknobs_shapes.primitives import (
    BooleanValidator,
    NullValidator,
    NumberValidator,
    StringValidator,
    boolean_validator,
    null_validator,
    number_validator,
    string_validator,
)

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Base
    "Validator",
    # Primitives
    "StringValidator",
    "NumberValidator",
    "BooleanValidator",
    "NullValidator",
    "string_validator",
    "number_validator",
    "boolean_validator",
    "null_validator",
    # Structures
    "UnionValidator",
    "ArrayValidator",
    "EnumValidator",
    "ObjectValidator",
    "union",
    "nullable",
    "array_of",
    "enum_of",
    "object_of",
    # Derived
    "KeyNormalizingValidator",
    "ConversionValidator",
    "unsnake",
    "conversion",
    # Helpers
    "parse_number",
    "has_own_property",
    "own_keys",
    "camel_case",
    # Exceptions
    "DataknobsShapesError",
    "ShapeValidationError",
]

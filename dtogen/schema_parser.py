"""Resolve OpenAPI schemas to Java type names.

Each schema is first classified into a ``TypeCategory``; the rule table
below is checked top to bottom and the first match wins:

- integer       -> Long (int64) / Integer
- number        -> Float (float) / Double
- boolean       -> Boolean
- array         -> List<item type>, items resolved without the array rule
- $ref          -> the referenced schema name
- string/date   -> LocalDate
- string/date-time -> LocalDateTime
- anything else -> String

Resolution never fails: unknown shapes fall back to String, references
outside ``#/components/schemas/`` fall back to Object.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable

from .document import SchemaNode
from .models import ResolvedType

logger = logging.getLogger(__name__)

SCHEMA_REF_PREFIX = "#/components/schemas/"

OBJECT_TYPE = "Object"
LIST_IMPORT = "java.util.List"


class TypeCategory(Enum):
    LONG = "Long"
    INTEGER = "Integer"
    FLOAT = "Float"
    DOUBLE = "Double"
    BOOLEAN = "Boolean"
    LIST = "List"
    REFERENCE = "Reference"
    DATE = "LocalDate"
    DATE_TIME = "LocalDateTime"
    STRING = "String"


_Rule = tuple[Callable[[SchemaNode], bool], TypeCategory]

_RULES: tuple[_Rule, ...] = (
    (lambda n: n.type == "integer" and n.format == "int64", TypeCategory.LONG),
    (lambda n: n.type == "integer", TypeCategory.INTEGER),
    (lambda n: n.type == "number" and n.format == "float", TypeCategory.FLOAT),
    (lambda n: n.type == "number", TypeCategory.DOUBLE),
    (lambda n: n.type == "boolean", TypeCategory.BOOLEAN),
    (lambda n: n.type == "array", TypeCategory.LIST),
    (lambda n: n.reference is not None, TypeCategory.REFERENCE),
    (lambda n: n.type == "string" and n.format == "date", TypeCategory.DATE),
    (lambda n: n.type == "string" and n.format == "date-time", TypeCategory.DATE_TIME),
)

# Imports needed by scalar categories
_IMPORTS: dict[TypeCategory, str] = {
    TypeCategory.DATE: "java.time.LocalDate",
    TypeCategory.DATE_TIME: "java.time.LocalDateTime",
}


def classify(node: SchemaNode, allow_array: bool = True) -> TypeCategory:
    """Return the category of the first rule matching ``node``."""
    for matches, category in _RULES:
        if category is TypeCategory.LIST and not allow_array:
            continue
        if matches(node):
            return category
    return TypeCategory.STRING


def reference_type_name(ref: str) -> str:
    """Strip the schema registry prefix from a $ref."""
    if ref.startswith(SCHEMA_REF_PREFIX):
        return ref[len(SCHEMA_REF_PREFIX):]
    logger.debug("Reference %r is outside %s; using %s", ref, SCHEMA_REF_PREFIX, OBJECT_TYPE)
    return OBJECT_TYPE


def _resolve_scalar(node: SchemaNode, category: TypeCategory) -> ResolvedType:
    if category is TypeCategory.REFERENCE:
        return ResolvedType(type_name=reference_type_name(node.reference))
    imports = frozenset({_IMPORTS[category]}) if category in _IMPORTS else frozenset()
    return ResolvedType(type_name=category.value, required_imports=imports)


def _resolve_list(items: SchemaNode | None) -> ResolvedType:
    if items is None:
        element = ResolvedType(type_name=OBJECT_TYPE)
    else:
        # Nested arrays are not unwrapped; the inner node resolves as a scalar.
        element = _resolve_scalar(items, classify(items, allow_array=False))
    return ResolvedType(
        type_name=f"List<{element.type_name}>",
        required_imports=element.required_imports | {LIST_IMPORT},
    )


def resolve_schema_type(node: SchemaNode) -> ResolvedType:
    """Resolve a schema node to a Java type and the imports it needs."""
    category = classify(node)
    if category is TypeCategory.LIST:
        return _resolve_list(node.items)
    return _resolve_scalar(node, category)

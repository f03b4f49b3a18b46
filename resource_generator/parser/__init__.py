"""Attribute parser for the resource generator.

Turns the ``name:type,prop|other`` command-line grammar into structured,
immutable request models.

Key functions:
    parse_attributes     - string -> ordered ``{name: properties}`` mapping
    parse_request        - resource name + string -> ``ParsedRequest``
    serialize_attributes - inverse of ``parse_attributes``
    select_by_tag        - fillable/hidden name selection
"""

from .attributes import (
    parse_attributes,
    parse_request,
    select_by_tag,
    serialize_attributes,
    to_attribute_specs,
)
from .models import (
    AttributeSpec,
    ColumnSpec,
    ColumnTrait,
    FieldType,
    ModelTag,
    ParsedRequest,
)

__all__ = [
    # Parsing
    "parse_attributes",
    "parse_request",
    "serialize_attributes",
    "select_by_tag",
    "to_attribute_specs",
    # Models
    "AttributeSpec",
    "ColumnSpec",
    "ColumnTrait",
    "FieldType",
    "ModelTag",
    "ParsedRequest",
]

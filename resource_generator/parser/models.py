"""Pydantic v2 models for the attribute mini-language.

Defines the structured form of a ``make-resource`` request (attribute specs
and the parsed request) and the derived column description used when
building migration columns.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class FieldType(str, Enum):
    """Schema builder column types recognised in a property list."""
    STRING = "string"
    INTEGER = "integer"
    BOOLEAN = "boolean"
    BIG_INCREMENTS = "bigIncrements"
    BIG_INTEGER = "bigInteger"
    BINARY = "binary"
    CHAR = "char"
    DATE = "date"
    DATE_TIME = "dateTime"
    FLOAT = "float"
    INCREMENTS = "increments"
    JSON = "json"
    JSONB = "jsonb"
    LONG_TEXT = "longText"
    MEDIUM_INTEGER = "mediumInteger"
    MEDIUM_TEXT = "mediumText"
    NULLABLE_TIMESTAMPS = "nullableTimestamps"
    SMALL_INTEGER = "smallInteger"
    TINY_INTEGER = "tinyInteger"
    SOFT_DELETES = "softDeletes"
    TEXT = "text"
    TIME = "time"
    TIMESTAMP = "timestamp"
    TIMESTAMPS = "timestamps"
    REMEMBER_TOKEN = "rememberToken"

    @classmethod
    def lookup(cls, token: str) -> Optional["FieldType"]:
        """Return the member whose value equals *token*, or ``None``."""
        try:
            return cls(token)
        except ValueError:
            return None


class ColumnTrait(str, Enum):
    """Column modifiers that are chained onto a column declaration."""
    UNSIGNED = "unsigned"
    INDEX = "index"
    NULLABLE = "nullable"


class ModelTag(str, Enum):
    """Model-level tags controlling mass assignment and serialisation."""
    FILLABLE = "fillable"
    HIDDEN = "hidden"


#: Field types that accept an explicit length argument.
LENGTH_TYPES: frozenset[FieldType] = frozenset({FieldType.STRING, FieldType.CHAR})


# ---------------------------------------------------------------------------
# Request models
# ---------------------------------------------------------------------------

class AttributeSpec(BaseModel):
    """A single attribute supplied on the command line."""
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Attribute (column) name, case-sensitive")
    properties: list[str] = Field(
        default_factory=list,
        description="Property tokens in input order: types, traits, tags or anything else",
    )

    def has_property(self, token: str) -> bool:
        """Return ``True`` if *token* appears verbatim in the property list."""
        return token in self.properties


class ParsedRequest(BaseModel):
    """The complete, immutable input of one generator run."""
    model_config = ConfigDict(frozen=True)

    resource_name: str = Field(..., description="Resource name as typed, e.g. 'animal'")
    attributes: list[AttributeSpec] = Field(
        default_factory=list, description="Attributes in input order"
    )


# ---------------------------------------------------------------------------
# Derived models
# ---------------------------------------------------------------------------

class ColumnSpec(BaseModel):
    """A resolved migration column."""
    model_config = ConfigDict(frozen=True)

    field_type: FieldType = Field(default=FieldType.STRING, description="Schema builder method")
    name: str = Field(..., description="Column name")
    length: Optional[int] = Field(
        default=None, description="Explicit length, only for string/char columns"
    )
    traits: list[ColumnTrait] = Field(
        default_factory=list, description="Chained modifiers in input order"
    )

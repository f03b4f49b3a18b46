"""Model factory generation.

Builds the field list of a ``$factory->define(...)`` block so that seeders
and tests can create valid model instances.  Each column gets a Faker
expression chosen from its name first (``email``, ``password``, ...) and its
resolved column type second.
"""

from __future__ import annotations

from collections.abc import Sequence

from ..parser.models import AttributeSpec, FieldType
from .columns import resolve_column

#: Column types that are schema helpers rather than model attributes.
_SKIPPED_TYPES: frozenset[FieldType] = frozenset({
    FieldType.INCREMENTS,
    FieldType.BIG_INCREMENTS,
    FieldType.TIMESTAMPS,
    FieldType.NULLABLE_TIMESTAMPS,
    FieldType.SOFT_DELETES,
    FieldType.REMEMBER_TOKEN,
})


# ---------------------------------------------------------------------------
# Type-to-Faker mapping
# ---------------------------------------------------------------------------

_FAKER_TYPE_MAP: dict[FieldType, str] = {
    FieldType.STRING: "$faker->word",
    FieldType.CHAR: "$faker->randomLetter",
    FieldType.TEXT: "$faker->paragraph",
    FieldType.MEDIUM_TEXT: "$faker->paragraph",
    FieldType.LONG_TEXT: "$faker->text",
    FieldType.INTEGER: "$faker->randomNumber()",
    FieldType.BIG_INTEGER: "$faker->randomNumber()",
    FieldType.MEDIUM_INTEGER: "$faker->randomNumber()",
    FieldType.SMALL_INTEGER: "$faker->numberBetween(0, 32767)",
    FieldType.TINY_INTEGER: "$faker->numberBetween(0, 127)",
    FieldType.FLOAT: "$faker->randomFloat(2, 0, 1000)",
    FieldType.BOOLEAN: "$faker->boolean",
    FieldType.DATE: "$faker->date()",
    FieldType.DATE_TIME: "$faker->dateTime()",
    FieldType.TIMESTAMP: "$faker->dateTime()",
    FieldType.TIME: "$faker->time()",
    FieldType.JSON: "json_encode([])",
    FieldType.JSONB: "json_encode([])",
    FieldType.BINARY: "$faker->sha256",
}


def faker_expression(attribute: AttributeSpec) -> str:
    """Return a PHP expression producing a sample value for *attribute*."""
    column = resolve_column(attribute)
    lower_name = attribute.name.lower()

    if column.field_type in (FieldType.STRING, FieldType.CHAR):
        if "email" in lower_name:
            return "$faker->safeEmail"
        if "password" in lower_name:
            return "bcrypt(str_random(10))"
        if lower_name in ("name", "full_name", "fullname"):
            return "$faker->name"
        if lower_name in ("first_name", "firstname"):
            return "$faker->firstName"
        if lower_name in ("last_name", "lastname", "surname"):
            return "$faker->lastName"
        if lower_name in ("url", "link", "website"):
            return "$faker->url"
        if "colour" in lower_name or "color" in lower_name:
            return "$faker->colorName"
        if column.length:
            return f"$faker->text({max(column.length, 5)})"

    return _FAKER_TYPE_MAP.get(column.field_type, "$faker->word")


def build_factory_fields(attributes: Sequence[AttributeSpec], indent: str = "") -> str:
    """Build the ``'column' => <faker>,`` lines of a factory definition.

    Schema helper columns (timestamps, soft deletes, ...) are skipped.
    Trailing whitespace of the block is trimmed.
    """
    block = ""
    for attribute in attributes:
        if resolve_column(attribute).field_type in _SKIPPED_TYPES:
            continue
        name = attribute.name.replace("\\", "\\\\").replace("'", "\\'")
        block += f"{indent}'{name}' => {faker_expression(attribute)},\n"
    return block.rstrip()

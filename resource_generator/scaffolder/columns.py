"""Migration column building.

Resolves each attribute's property tokens into a schema builder column and
renders the ``$table->...;`` declarations that fill the migration template.
"""

from __future__ import annotations

from collections.abc import Sequence

from ..parser.models import LENGTH_TYPES, AttributeSpec, ColumnSpec, ColumnTrait, FieldType

_TRAITS: dict[str, ColumnTrait] = {trait.value: trait for trait in ColumnTrait}


def resolve_column(attribute: AttributeSpec) -> ColumnSpec:
    """Resolve the field type, length and traits of a single attribute.

    * Field type: the first property naming a known type, else ``string``.
    * Length: the first all-digit property, only for ``string``/``char``.
    * Traits: ``unsigned``/``index``/``nullable`` in property order, once each.

    Any other token (``fillable``, ``hidden``, typos) is ignored here.
    """
    field_type = FieldType.STRING
    for token in attribute.properties:
        matched = FieldType.lookup(token)
        if matched is not None:
            field_type = matched
            break

    length: int | None = None
    if field_type in LENGTH_TYPES:
        for token in attribute.properties:
            if token.isascii() and token.isdigit():
                length = int(token) or None
                break

    traits: list[ColumnTrait] = []
    for token in attribute.properties:
        trait = _TRAITS.get(token)
        if trait is not None and trait not in traits:
            traits.append(trait)

    return ColumnSpec(
        field_type=field_type,
        name=attribute.name,
        length=length,
        traits=traits,
    )


def render_column(column: ColumnSpec) -> str:
    """Render one column declaration, e.g. ``$table->string('name', 100)->nullable();``."""
    arguments = f"'{_escape_php(column.name)}'"
    if column.length:
        arguments += f", {column.length}"
    modifiers = "".join(f"->{trait.value}()" for trait in column.traits)
    return f"$table->{column.field_type.value}({arguments}){modifiers};"


def build_columns(attributes: Sequence[AttributeSpec], indent: str = "") -> str:
    """Build the column declaration block for a migration.

    One line per attribute, in input order, each prefixed with *indent*.
    Trailing whitespace of the block is trimmed.
    """
    block = ""
    for attribute in attributes:
        block += f"{indent}{render_column(resolve_column(attribute))}\n"
    return block.rstrip()


def _escape_php(value: str) -> str:
    """Escape a value for use inside a single-quoted PHP string."""
    return value.replace("\\", "\\\\").replace("'", "\\'")

"""Attribute mini-language parsing.

The generator accepts a compact attribute string on the command line::

    name:string,100,fillable|age:integer,unsigned,index|nickname

Attributes are separated by ``|``.  Each attribute is a name, optionally
followed by ``:`` and a comma-separated list of property tokens.  Property
tokens are kept verbatim; it is up to the consumers (column builder, model
tag selector, factory generator) to decide which tokens they understand.

Parsing never fails.  Empty input, empty segments and empty tokens are
skipped, so ``""`` parses to an empty mapping.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Union

from .models import AttributeSpec, ModelTag, ParsedRequest

ATTRIBUTE_SEPARATOR = "|"
NAME_SEPARATOR = ":"
PROPERTY_SEPARATOR = ","

AttributeSource = Union[Mapping[str, Sequence[str]], Sequence[AttributeSpec]]


def parse_attributes(text: str | None) -> dict[str, list[str]]:
    """Parse an attribute string into an ordered ``{name: properties}`` mapping.

    Only the first ``:`` separates a name from its properties.  When a name
    is repeated, the entry keeps its first position and the last
    occurrence's properties win.

    Examples::

        parse_attributes("name:string,100|nickname")
        -> {"name": ["string", "100"], "nickname": []}

        parse_attributes("") -> {}
    """
    attributes: dict[str, list[str]] = {}
    if not text or not text.strip():
        return attributes

    for segment in text.split(ATTRIBUTE_SEPARATOR):
        name, _, raw_properties = segment.partition(NAME_SEPARATOR)
        name = name.strip()
        if not name:
            continue
        attributes[name] = [
            token.strip()
            for token in raw_properties.split(PROPERTY_SEPARATOR)
            if token.strip()
        ]

    return attributes


def to_attribute_specs(attributes: AttributeSource) -> list[AttributeSpec]:
    """Normalise a parsed mapping (or an existing spec list) into ``AttributeSpec`` objects."""
    if isinstance(attributes, Mapping):
        return [
            AttributeSpec(name=name, properties=list(properties))
            for name, properties in attributes.items()
        ]
    return [
        spec if isinstance(spec, AttributeSpec) else AttributeSpec.model_validate(spec)
        for spec in attributes
    ]


def parse_request(resource_name: str, text: str | None = None) -> ParsedRequest:
    """Parse the full command input into an immutable ``ParsedRequest``."""
    return ParsedRequest(
        resource_name=resource_name.strip(),
        attributes=to_attribute_specs(parse_attributes(text)),
    )


def serialize_attributes(attributes: AttributeSource) -> str:
    """Render attributes back into the command-line grammar.

    The inverse of :func:`parse_attributes` for well-formed input: an
    attribute without properties is written as its bare name.
    """
    segments: list[str] = []
    for spec in to_attribute_specs(attributes):
        if spec.properties:
            segments.append(
                f"{spec.name}{NAME_SEPARATOR}{PROPERTY_SEPARATOR.join(spec.properties)}"
            )
        else:
            segments.append(spec.name)
    return ATTRIBUTE_SEPARATOR.join(segments)


def select_by_tag(tag: ModelTag | str, attributes: AttributeSource) -> list[str]:
    """Return, in input order, the names of attributes tagged with *tag*.

    Used to fill the generated model's ``$fillable`` and ``$hidden`` lists.
    The input is never modified.
    """
    token = tag.value if isinstance(tag, ModelTag) else str(tag)
    return [spec.name for spec in to_attribute_specs(attributes) if spec.has_property(token)]

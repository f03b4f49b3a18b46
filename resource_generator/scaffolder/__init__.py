"""Resource scaffolder -- renders model, migration, controller, routes and factory.

Quick usage::

    from resource_generator.parser import parse_request
    from resource_generator.scaffolder import ResourceGenerator

    request = parse_request("animal", "name:string,100,fillable|age:integer")
    generator = ResourceGenerator()
    model_php = generator.render_model(request)
"""

from .columns import build_columns, render_column, resolve_column
from .factory_gen import build_factory_fields, faker_expression
from .generator import ResourceGenerator, ResourceNames, derive_names
from .templates import Slot, TemplateRenderer, render_slots

__all__ = [
    "ResourceGenerator",
    "ResourceNames",
    "derive_names",
    "build_columns",
    "render_column",
    "resolve_column",
    "build_factory_fields",
    "faker_expression",
    "Slot",
    "TemplateRenderer",
    "render_slots",
]

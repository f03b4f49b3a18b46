"""Resource file content generation.

Takes a ``ParsedRequest`` and produces the text of every file the
``make-resource`` command writes: model, migration, controller, route block
and factory block.  Nothing here touches the filesystem; the command decides
where (and whether) the rendered content is written.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from ..config import GeneratorConfig
from ..naming import EnglishNamer, Namer
from ..parser.attributes import select_by_tag
from ..parser.models import AttributeSpec, ModelTag, ParsedRequest
from .columns import build_columns
from .factory_gen import build_factory_fields
from .templates import Slot, TemplateRenderer

MIGRATION_TIMESTAMP_FORMAT = "%Y_%m_%d_%H%M%S"

COLUMN_INDENT = " " * 12
FACTORY_INDENT = " " * 8


# ---------------------------------------------------------------------------
# Derived names
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ResourceNames:
    """Every name derived from the resource name typed on the command line."""

    class_name: str
    table: str
    migration_class: str
    instance: str
    controller: str
    route: str


def derive_names(resource_name: str, namer: Namer) -> ResourceNames:
    """Derive class, table, controller and route names.

    ``zooKeeper`` -> ``ZooKeeper``, ``zookeepers``, ``CreateZooKeepersTable``,
    ``zooKeeper``, ``ZooKeeperController``, ``zookeeper``.
    """
    class_name = namer.ucfirst(resource_name)
    plural_class = namer.pluralize(class_name)
    return ResourceNames(
        class_name=class_name,
        table=plural_class.lower(),
        migration_class=f"Create{plural_class}Table",
        instance=namer.to_camel_case(class_name),
        controller=f"{class_name}Controller",
        route=class_name.lower(),
    )


# ---------------------------------------------------------------------------
# PHP literal helpers
# ---------------------------------------------------------------------------

def php_string(value: str) -> str:
    """Quote *value* as a single-quoted PHP string."""
    return "'" + value.replace("\\", "\\\\").replace("'", "\\'") + "'"


def php_list(values: Sequence[str]) -> str:
    """``["name", "age"]`` -> ``['name', 'age']``."""
    return "[" + ", ".join(php_string(v) for v in values) + "]"


def php_attribute_array(attributes: Sequence[AttributeSpec]) -> str:
    """Render attribute metadata as the array returned by ``migrationAttributes()``.

    Example::

        [['name' => 'name','properties' => ['string', '100']],['name' => 'nickname','properties' => []]]
    """
    entries = [
        f"['name' => {php_string(attr.name)},'properties' => {php_list(attr.properties)}]"
        for attr in attributes
    ]
    return "[" + ",".join(entries) + "]"


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------


class ResourceGenerator:
    """Renders the content of every generated resource file."""

    MODEL_TEMPLATE = "model.php.j2"
    MIGRATION_TEMPLATE = "migration.php.j2"
    CONTROLLER_TEMPLATE = "controller.php.j2"
    ROUTES_TEMPLATE = "routes.php.j2"
    FACTORY_TEMPLATE = "factory.php.j2"

    def __init__(
        self,
        config: GeneratorConfig | None = None,
        namer: Namer | None = None,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.config = config or GeneratorConfig()
        self.namer = namer or EnglishNamer()
        self.renderer = renderer or TemplateRenderer(stubs_dir=self.config.stubs_dir)

    # -- Names & paths -----------------------------------------------------

    def names(self, request: ParsedRequest) -> ResourceNames:
        return derive_names(request.resource_name, self.namer)

    def migration_filename(self, request: ParsedRequest, now: datetime) -> str:
        """``<Y_m_d_His>_create_<table>_table.php``."""
        table = self.names(request).table
        return f"{now.strftime(MIGRATION_TIMESTAMP_FORMAT)}_create_{table}_table.php"

    def migration_glob(self, request: ParsedRequest) -> str:
        """Glob matching any existing create-table migration for the resource."""
        table = self.names(request).table
        return self.config.migration_path(f"*_create_{table}_table.php")

    # -- Context building --------------------------------------------------

    def _build_context(self) -> dict[str, Any]:
        """Build the Jinja2 template context from the config."""
        return {"namespace": self.config.namespace}

    def substitutions(self, request: ParsedRequest) -> dict[Slot, str]:
        """Compute the value of every template slot for *request*."""
        names = self.names(request)
        attributes = request.attributes
        return {
            Slot.CLASS: names.class_name,
            Slot.MIGRATION: names.migration_class,
            Slot.TABLE: names.table,
            Slot.COLUMNS: build_columns(attributes, indent=COLUMN_INDENT),
            Slot.FILLABLE: php_list(select_by_tag(ModelTag.FILLABLE, attributes)),
            Slot.HIDDEN: php_list(select_by_tag(ModelTag.HIDDEN, attributes)),
            Slot.ATTRIBUTES: php_attribute_array(attributes),
            Slot.INSTANCE: names.instance,
            Slot.CONTROLLER: names.controller,
            Slot.ROUTE: names.route,
            Slot.FACTORY_FIELDS: build_factory_fields(attributes, indent=FACTORY_INDENT),
        }

    # -- Rendering ---------------------------------------------------------

    def _render(self, template_name: str, request: ParsedRequest) -> str:
        return self.renderer.render_stub(
            template_name, self._build_context(), self.substitutions(request)
        )

    def render_model(self, request: ParsedRequest) -> str:
        return self._render(self.MODEL_TEMPLATE, request)

    def render_migration(self, request: ParsedRequest) -> str:
        return self._render(self.MIGRATION_TEMPLATE, request)

    def render_controller(self, request: ParsedRequest) -> str:
        return self._render(self.CONTROLLER_TEMPLATE, request)

    def render_routes(self, request: ParsedRequest) -> str:
        return self._render(self.ROUTES_TEMPLATE, request)

    def render_factory(self, request: ParsedRequest) -> str:
        return self._render(self.FACTORY_TEMPLATE, request)

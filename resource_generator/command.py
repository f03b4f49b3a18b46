"""The ``make-resource`` command.

Scaffolds a CRUD resource in a Laravel project in four strictly sequential
steps, plus an optional fifth:

1. create-model      -- ``app/<Class>.php``
2. create-migration  -- ``database/migrations/<timestamp>_create_<table>_table.php``
3. create-controller -- ``app/Http/Controllers/<Class>Controller.php``
4. append-routes     -- route block appended to ``app/Http/routes.php``
5. append-factory    -- factory block appended to ``database/factories/ModelFactory.php``

The first three steps refuse to overwrite existing files.  A failing step
stops the run; files written by earlier steps are left in place.

Usage::

    make-resource Animal "name:string,100,fillable|age:integer,unsigned,index|nickname"
    python -m resource_generator Animal --base-path ./my-laravel-app
"""

from __future__ import annotations

import re
import sys
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

from jinja2 import TemplateError
from rich.console import Console
from rich.markup import escape

from .config import GeneratorConfig
from .exceptions import AlreadyExistsError, InvalidResourceNameError, ResourceGeneratorError
from .hooks import AutoloadHook, ComposerAutoloadHook, NullAutoloadHook
from .naming import Namer
from .parser.attributes import parse_request
from .parser.models import ParsedRequest
from .scaffolder.generator import ResourceGenerator
from .storage import FileStore, LocalFileStore
from .utils import (
    console,
    print_error,
    print_header,
    print_success,
    print_summary_table,
    print_warning,
)

_RESOURCE_NAME = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


# ---------------------------------------------------------------------------
# Result
# ---------------------------------------------------------------------------


@dataclass
class GenerationResult:
    """Outcome of a single ``make-resource`` run."""

    resource: str
    success: bool = False
    created: list[str] = field(default_factory=list)
    appended: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    error: str | None = None

    def summary(self) -> dict[str, str]:
        """Return a label -> value mapping suitable for a summary table.

        Values are escaped for Rich; only the status carries markup.
        """
        data = {
            "Resource": escape(self.resource),
            "Status": "[green]SUCCESS[/green]" if self.success else "[red]FAILED[/red]",
            "Created": escape(", ".join(self.created)) or "-",
            "Appended": escape(", ".join(self.appended)) or "-",
        }
        if self.skipped:
            data["Skipped"] = escape(", ".join(self.skipped))
        if self.error:
            data["Error"] = escape(self.error)
        return data


# ---------------------------------------------------------------------------
# Command
# ---------------------------------------------------------------------------


class ResourceCommand:
    """Orchestrates the creation of a resource.

    Attributes:
        config: Generator configuration (paths, namespace, flags).
        files: File store rooted at the Laravel project.
        generator: Renders the content of each file.
        autoload_hook: Called after the migration is written.
        clock: Returns the time used to stamp the migration filename.
    """

    def __init__(
        self,
        config: GeneratorConfig | None = None,
        files: FileStore | None = None,
        namer: Namer | None = None,
        generator: ResourceGenerator | None = None,
        autoload_hook: AutoloadHook | None = None,
        clock: Callable[[], datetime] = datetime.now,
        out: Console | None = None,
    ) -> None:
        self.config = config or GeneratorConfig()
        self.files = files or LocalFileStore(self.config.base_path)
        self.generator = generator or ResourceGenerator(self.config, namer=namer)
        self.autoload_hook = autoload_hook or NullAutoloadHook()
        self.clock = clock
        self.console = out or console

    # -- Public API --------------------------------------------------------

    def run(self, name: str, attributes: str | None = None) -> GenerationResult:
        """Generate the resource *name* with the given attribute string.

        Never raises for operator errors: the returned result carries
        ``success=False`` and the message that was printed.
        """
        result = GenerationResult(resource=name)
        try:
            request = parse_request(name, attributes)
            if not _RESOURCE_NAME.match(request.resource_name):
                raise InvalidResourceNameError(name)
            result.resource = request.resource_name

            self.create_model(request, result)
            self.create_migration(request, result)
            self.create_controller(request, result)
            self.append_routes(request, result)
            if self.config.with_factory:
                self.append_factory(request, result)
        except ResourceGeneratorError as exc:
            return self._fail(result, str(exc))
        except TemplateError as exc:
            return self._fail(result, f"Template error: {exc}")
        except OSError as exc:
            return self._fail(result, f"File operation failed: {exc}")

        result.success = True
        return result

    # -- Steps -------------------------------------------------------------

    def create_model(self, request: ParsedRequest, result: GenerationResult) -> str:
        """Write the model file unless it already exists."""
        names = self.generator.names(request)
        path = self.config.model_path(names.class_name)
        if self.files.exists(path):
            raise AlreadyExistsError("Model", path)

        self.files.write(path, self.generator.render_model(request))
        result.created.append(path)
        print_success(f"Created model {names.class_name}.php", out=self.console)
        return path

    def create_migration(self, request: ParsedRequest, result: GenerationResult) -> str:
        """Write a timestamped create-table migration unless one already exists."""
        existing = self.files.glob(self.generator.migration_glob(request))
        if existing:
            raise AlreadyExistsError("Migration", existing[0])

        filename = self.generator.migration_filename(request, self.clock())
        path = self.config.migration_path(filename)
        self.files.write(path, self.generator.render_migration(request))
        result.created.append(path)
        print_success(f"Created migration {filename}", out=self.console)

        self.autoload_hook(path)
        return path

    def create_controller(self, request: ParsedRequest, result: GenerationResult) -> str:
        """Write the resource controller unless it already exists."""
        names = self.generator.names(request)
        path = self.config.controller_path(names.controller)
        if self.files.exists(path):
            raise AlreadyExistsError("Controller", path)

        self.files.write(path, self.generator.render_controller(request))
        result.created.append(path)
        print_success(f"Created controller {names.controller}.php", out=self.console)
        return path

    def append_routes(self, request: ParsedRequest, result: GenerationResult) -> str:
        """Append the route block to the routes file.

        A missing routes file is created with an opening ``<?php`` tag.
        Repeated runs append the block again unless ``guard_routes`` is set.
        """
        path = self.config.routes_path
        block = self.generator.render_routes(request)
        if self.config.guard_routes and self._contains(path, block):
            result.skipped.append(path)
            print_warning(f"Routes already present in {path}", out=self.console)
            return path

        if not self.files.exists(path):
            self.files.write(path, "<?php\n")
        self.files.append(path, block)
        result.appended.append(path)
        print_success(f"Added routes to {path}", out=self.console)
        return path

    def append_factory(self, request: ParsedRequest, result: GenerationResult) -> str:
        """Append a model factory definition to the factory file."""
        path = self.config.factories_path
        if not self.files.exists(path):
            self.files.write(path, "<?php\n")

        self.files.append(path, self.generator.render_factory(request))
        result.appended.append(path)
        print_success(f"Added factory to {path}", out=self.console)
        return path

    # -- Helpers -----------------------------------------------------------

    def _contains(self, path: str, block: str) -> bool:
        return self.files.exists(path) and block.strip() in self.files.read(path)

    def _fail(self, result: GenerationResult, message: str) -> GenerationResult:
        result.success = False
        result.error = message
        print_error(message, out=self.console)
        return result


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def build_config(args) -> GeneratorConfig:
    """Load the configuration (JSON file or environment) and apply CLI overrides."""
    config = GeneratorConfig.load(Path(args.config)) if args.config else GeneratorConfig.from_env()

    overrides: dict = {}
    if args.base_path:
        overrides["base_path"] = Path(args.base_path)
    if args.namespace:
        overrides["namespace"] = args.namespace
    if args.stubs:
        overrides["stubs_dir"] = Path(args.stubs)
    if args.no_factory:
        overrides["with_factory"] = False
    if args.guard_routes:
        overrides["guard_routes"] = True
    if args.composer:
        overrides["run_composer"] = True
    return config.model_copy(update=overrides)


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``make-resource`` / ``python -m resource_generator``."""
    import argparse

    parser = argparse.ArgumentParser(
        prog="make-resource",
        description="Create a new model, migration, controller and add routes",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Attribute grammar:\n"
            "  name[:property,property,...]|name[:...]|...\n"
            "\n"
            "Examples:\n"
            "  make-resource Animal\n"
            "  make-resource Animal 'name:string,100,fillable|age:integer,unsigned,index|nickname'\n"
            "  make-resource Animal --base-path ./my-app --guard-routes\n"
        ),
    )

    parser.add_argument("name", help="The model name")
    parser.add_argument(
        "attributes",
        nargs="?",
        default=None,
        help="Pipe-separated attribute list (default: none)",
    )
    parser.add_argument(
        "--base-path", "-p",
        default=None,
        help="Laravel project root (default: current directory)",
    )
    parser.add_argument("--namespace", default=None, help="Application namespace (default: App)")
    parser.add_argument("--stubs", default=None, help="Directory with template overrides")
    parser.add_argument("--config", default=None, help="JSON configuration file")
    parser.add_argument(
        "--no-factory",
        action="store_true",
        help="Do not append a model factory definition",
    )
    parser.add_argument(
        "--guard-routes",
        action="store_true",
        help="Do not append routes that are already present",
    )
    parser.add_argument(
        "--composer",
        action="store_true",
        help="Run 'composer dump-autoload' after creating the migration",
    )
    parser.add_argument(
        "--save-config",
        default=None,
        help="Write the resolved configuration to this JSON file before generating",
    )

    args = parser.parse_args(argv)

    try:
        config = build_config(args)
    except (OSError, ValueError) as exc:
        print_error(f"Invalid configuration: {exc}")
        sys.exit(1)

    if args.save_config:
        try:
            saved = config.save(Path(args.save_config))
        except OSError as exc:
            print_error(f"Could not save configuration: {exc}")
            sys.exit(1)
        print_success(f"Saved configuration to {saved}")

    hook: AutoloadHook = NullAutoloadHook()
    if config.run_composer:
        hook = ComposerAutoloadHook(config.base_path, timeout=config.composer_timeout)

    print_header(f"make-resource {args.name}")
    command = ResourceCommand(config, autoload_hook=hook)
    result = command.run(args.name, args.attributes)
    print_summary_table(result.summary(), title="make-resource")

    if not result.success:
        sys.exit(1)

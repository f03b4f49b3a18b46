"""Resource generator configuration.

Typed configuration for a generator run.  All settings use Pydantic v2
models so they can be validated at construction time and serialised to/from
JSON or environment variables without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field

_TRUTHY = {"1", "true", "yes", "on"}


class PathConfig(BaseModel):
    """Locations of generated files, relative to the project root."""

    models_dir: str = Field(default="app")
    controllers_dir: str = Field(default="app/Http/Controllers")
    migrations_dir: str = Field(default="database/migrations")
    routes_file: str = Field(default="app/Http/routes.php")
    factories_file: str = Field(default="database/factories/ModelFactory.php")


class GeneratorConfig(BaseModel):
    """Global resource generator configuration.

    Instances are typically created once by the CLI entry point (from a JSON
    file or the environment, then overridden by flags) and handed to
    ``ResourceCommand``.
    """

    base_path: Path = Field(default=Path("."), description="Laravel project root")
    namespace: str = Field(default="App", description="Application root namespace")
    paths: PathConfig = Field(default_factory=PathConfig)
    stubs_dir: Optional[Path] = Field(
        default=None, description="Directory with templates overriding the packaged ones"
    )
    with_factory: bool = Field(default=True, description="Append a model factory definition")
    guard_routes: bool = Field(
        default=False, description="Skip appending routes that are already present"
    )
    run_composer: bool = Field(
        default=False, description="Run 'composer dump-autoload' after writing the migration"
    )
    composer_timeout: int = Field(default=120, ge=1, description="Composer timeout in seconds")

    # ------------------------------------------------------------------
    # Derived paths
    # ------------------------------------------------------------------

    def model_path(self, class_name: str) -> str:
        """Relative path of the model file for *class_name*."""
        return _join(self.paths.models_dir, f"{class_name}.php")

    def controller_path(self, controller_name: str) -> str:
        """Relative path of the controller file for *controller_name*."""
        return _join(self.paths.controllers_dir, f"{controller_name}.php")

    def migration_path(self, filename: str) -> str:
        """Relative path of a migration file."""
        return _join(self.paths.migrations_dir, filename)

    @property
    def routes_path(self) -> str:
        """Relative path of the routes file."""
        return self.paths.routes_file

    @property
    def factories_path(self) -> str:
        """Relative path of the model factory file."""
        return self.paths.factories_file

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file.

        Returns:
            The path where the file was written.
        """
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "GeneratorConfig":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "GeneratorConfig":
        """Build a ``GeneratorConfig`` from environment variables.

        Recognised variables (all optional):
            RESOURCE_GEN_BASE_PATH, RESOURCE_GEN_NAMESPACE, RESOURCE_GEN_STUBS_DIR,
            RESOURCE_GEN_WITH_FACTORY, RESOURCE_GEN_GUARD_ROUTES,
            RESOURCE_GEN_RUN_COMPOSER, RESOURCE_GEN_COMPOSER_TIMEOUT.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("RESOURCE_GEN_BASE_PATH"):
            kwargs["base_path"] = Path(os.environ["RESOURCE_GEN_BASE_PATH"])
        if os.environ.get("RESOURCE_GEN_NAMESPACE"):
            kwargs["namespace"] = os.environ["RESOURCE_GEN_NAMESPACE"]
        if os.environ.get("RESOURCE_GEN_STUBS_DIR"):
            kwargs["stubs_dir"] = Path(os.environ["RESOURCE_GEN_STUBS_DIR"])
        if os.environ.get("RESOURCE_GEN_WITH_FACTORY"):
            kwargs["with_factory"] = _env_flag("RESOURCE_GEN_WITH_FACTORY")
        if os.environ.get("RESOURCE_GEN_GUARD_ROUTES"):
            kwargs["guard_routes"] = _env_flag("RESOURCE_GEN_GUARD_ROUTES")
        if os.environ.get("RESOURCE_GEN_RUN_COMPOSER"):
            kwargs["run_composer"] = _env_flag("RESOURCE_GEN_RUN_COMPOSER")
        if os.environ.get("RESOURCE_GEN_COMPOSER_TIMEOUT"):
            kwargs["composer_timeout"] = int(os.environ["RESOURCE_GEN_COMPOSER_TIMEOUT"])
        return cls(**kwargs)


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in _TRUTHY


def _join(directory: str, filename: str) -> str:
    directory = directory.strip("/")
    return f"{directory}/{filename}" if directory else filename

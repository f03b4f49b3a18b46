"""Shared pytest fixtures for the resource generator test suite.

Provides reusable fixtures for:
- In-memory and on-disk Laravel project layouts
- A fixed clock for deterministic migration filenames
- A recording Rich console for asserting operator output
- Pre-wired ResourceCommand instances
"""

from __future__ import annotations

import io
from datetime import datetime
from pathlib import Path

import pytest
from rich.console import Console

from resource_generator.command import ResourceCommand
from resource_generator.config import GeneratorConfig
from resource_generator.storage import LocalFileStore, MemoryFileStore


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

FIXED_NOW = datetime(2016, 3, 1, 12, 30, 45)

ROUTES_HEADER = "<?php\n\nRoute::get('/', function () {\n    return view('welcome');\n});\n"


# ---------------------------------------------------------------------------
# Clock & console
# ---------------------------------------------------------------------------

@pytest.fixture
def fixed_clock():
    """Clock returning ``FIXED_NOW`` (migration prefix ``2016_03_01_123045``)."""
    return lambda: FIXED_NOW


@pytest.fixture
def out() -> Console:
    """A wide, recording Rich console; read it with ``out.export_text()``."""
    return Console(file=io.StringIO(), width=200, record=True)


# ---------------------------------------------------------------------------
# Stores & projects
# ---------------------------------------------------------------------------

@pytest.fixture
def memory_store() -> MemoryFileStore:
    """In-memory Laravel project containing only a routes file."""
    return MemoryFileStore({"app/Http/routes.php": ROUTES_HEADER})


@pytest.fixture
def laravel_project(tmp_path: Path) -> Path:
    """Temporary on-disk Laravel skeleton (auto-cleanup).

    Contains ``app/Http/routes.php`` and an empty model factory file.
    """
    project = tmp_path / "laravel"
    (project / "app" / "Http" / "Controllers").mkdir(parents=True)
    (project / "database" / "migrations").mkdir(parents=True)
    (project / "database" / "factories").mkdir(parents=True)
    (project / "app" / "Http" / "routes.php").write_text(ROUTES_HEADER, encoding="utf-8")
    (project / "database" / "factories" / "ModelFactory.php").write_text(
        "<?php\n", encoding="utf-8"
    )
    yield project


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

@pytest.fixture
def command(memory_store, fixed_clock, out) -> ResourceCommand:
    """ResourceCommand over the in-memory store with default configuration."""
    return ResourceCommand(
        GeneratorConfig(),
        files=memory_store,
        clock=fixed_clock,
        out=out,
    )


@pytest.fixture
def disk_command(laravel_project, fixed_clock, out) -> ResourceCommand:
    """ResourceCommand writing into the temporary Laravel project."""
    config = GeneratorConfig(base_path=laravel_project)
    return ResourceCommand(
        config,
        files=LocalFileStore(laravel_project),
        clock=fixed_clock,
        out=out,
    )

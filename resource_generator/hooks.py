"""Post-migration autoload hooks.

Laravel 5 migrations are plain classes loaded through Composer's classmap,
so a freshly generated migration is only picked up after
``composer dump-autoload``.  The command calls an ``AutoloadHook`` after
writing the migration; the default does nothing.
"""

from __future__ import annotations

import subprocess
from abc import ABC, abstractmethod
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from .utils import console


class AutoloadHook(ABC):
    """Called once after a migration file has been written."""

    @abstractmethod
    def __call__(self, migration_path: str) -> None:
        ...


class NullAutoloadHook(AutoloadHook):
    """Hook that does nothing (tests, CI, projects without Composer)."""

    def __call__(self, migration_path: str) -> None:
        return None


class ComposerAutoloadHook(AutoloadHook):
    """Regenerates the Composer classmap with ``composer dump-autoload``.

    A missing ``composer`` binary or a non-zero exit is reported as a warning;
    the migration has already been written at that point.
    """

    def __init__(
        self,
        project_dir: str | Path,
        timeout: int = 120,
        out: Console | None = None,
    ) -> None:
        self.project_dir = Path(project_dir)
        self.timeout = timeout
        self.console = out or console

    def __call__(self, migration_path: str) -> None:
        cmd = ["composer", "dump-autoload"]
        try:
            completed = subprocess.run(
                cmd,
                cwd=self.project_dir,
                capture_output=True,
                text=True,
                timeout=self.timeout,
                check=False,
            )
        except FileNotFoundError:
            self.console.print(
                "[bold yellow]composer not found; run 'composer dump-autoload' manually.[/bold yellow]"
            )
            return
        except subprocess.TimeoutExpired:
            self.console.print(
                f"[bold yellow]composer dump-autoload timed out after {self.timeout}s[/bold yellow]"
            )
            return

        if completed.returncode != 0:
            stderr = escape(completed.stderr.strip())
            self.console.print(
                f"[bold yellow]composer dump-autoload failed (exit {completed.returncode})"
                f"[/bold yellow] {stderr}",
                highlight=False,
            )
        else:
            self.console.print("  [dim]Regenerated Composer autoload files[/dim]")

"""Template rendering for resource scaffolding.

Templates are ``.j2`` files rendered in two stages:

1. Jinja2 fills the configuration-driven parts (the application namespace).
2. Slot substitution replaces the fixed ``Dummy*`` placeholder tokens with
   the values computed for the resource being generated.

The placeholder vocabulary is part of the output contract: user stubs copied
from the package templates keep working as long as they use the same tokens.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from enum import Enum
from pathlib import Path
from typing import Any

from jinja2 import ChoiceLoader, Environment, FileSystemLoader, select_autoescape

from ..exceptions import MissingSlotError


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


# ---------------------------------------------------------------------------
# Slots
# ---------------------------------------------------------------------------

class Slot(str, Enum):
    """Placeholder tokens understood by the resource templates.

    No token may be a substring of another one.
    """
    CLASS = "DummyClass"
    MIGRATION = "DummyMigration"
    TABLE = "DummyTable"
    COLUMNS = "DummyColumns"
    FILLABLE = "DummyFillable"
    HIDDEN = "DummyHidden"
    ATTRIBUTES = "DummyAttributes"
    INSTANCE = "DummyInstance"
    CONTROLLER = "DummyController"
    ROUTE = "DummyRoute"
    FACTORY_FIELDS = "DummyFactoryFields"


_SLOT_PATTERN = re.compile(
    "|".join(re.escape(slot.value) for slot in sorted(Slot, key=lambda s: -len(s.value)))
)


def render_slots(template_text: str, substitutions: Mapping[Slot, str]) -> str:
    """Replace every slot token in *template_text* with its substitution.

    All tokens are replaced in one pass, so a replacement value that happens
    to contain a token is left untouched and the order of *substitutions* is
    irrelevant.

    Raises:
        MissingSlotError: If the template uses a token with no substitution.
    """
    values = {Slot(slot).value: value for slot, value in substitutions.items()}

    missing = sorted({m.group(0) for m in _SLOT_PATTERN.finditer(template_text)} - set(values))
    if missing:
        raise MissingSlotError(missing)

    return _SLOT_PATTERN.sub(lambda m: values[m.group(0)], template_text)


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders the resource templates.

    Templates are looked up in *stubs_dir* first (when given) and then in the
    packaged ``templates/`` directory, so a project can override any single
    template by dropping a file with the same name into its stubs directory.
    """

    def __init__(
        self,
        template_dir: str | Path | None = None,
        stubs_dir: str | Path | None = None,
    ) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.stubs_dir = Path(stubs_dir) if stubs_dir is not None else None

        search_path = [str(self.template_dir)]
        if self.stubs_dir is not None:
            search_path.insert(0, str(self.stubs_dir))

        self.env = Environment(
            loader=ChoiceLoader([FileSystemLoader(path) for path in search_path]),
            autoescape=select_autoescape([]),
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    # -- Rendering ---------------------------------------------------------

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render the Jinja2 stage of a template with the provided context."""
        template = self.env.get_template(template_path)
        return template.render(**context)

    def render_stub(
        self,
        template_path: str,
        context: dict[str, Any],
        substitutions: Mapping[Slot, str],
    ) -> str:
        """Render a template fully: Jinja2 context first, then slot tokens."""
        return render_slots(self.render(template_path, context), substitutions)

"""Exceptions raised by the resource generator."""

from __future__ import annotations

from collections.abc import Iterable


class ResourceGeneratorError(Exception):
    """Base class for every error the generator reports to the operator."""


class AlreadyExistsError(ResourceGeneratorError):
    """Raised when a file the generator would create is already present."""

    def __init__(self, kind: str, path: str = ""):
        self.kind = kind
        self.path = path
        super().__init__(f"{kind} already exists!")


class MissingSlotError(ResourceGeneratorError):
    """Raised when a template uses a placeholder that has no substitution."""

    def __init__(self, slots: Iterable[str]):
        self.slots = list(slots)
        super().__init__(f"No substitution for template placeholder(s): {', '.join(self.slots)}")


class InvalidResourceNameError(ResourceGeneratorError):
    """Raised when the resource name is not a valid PHP class name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Invalid resource name: '{name}'")

"""Resource generator -- scaffolds Laravel CRUD resources from one command.

Key classes:
    ResourceCommand   - Runs the model/migration/controller/routes/factory steps
    ResourceGenerator - Renders the content of each generated file
    GeneratorConfig   - Paths, namespace and feature flags
"""

from .command import GenerationResult, ResourceCommand, main
from .config import GeneratorConfig, PathConfig
from .exceptions import (
    AlreadyExistsError,
    InvalidResourceNameError,
    MissingSlotError,
    ResourceGeneratorError,
)
from .scaffolder.generator import ResourceGenerator

__version__ = "0.1.0"

__all__ = [
    "GenerationResult",
    "ResourceCommand",
    "main",
    "GeneratorConfig",
    "PathConfig",
    "AlreadyExistsError",
    "InvalidResourceNameError",
    "MissingSlotError",
    "ResourceGeneratorError",
    "ResourceGenerator",
]

"""Discovery of generator projects in the template store.

A generator project is a directory under ``GeneratorSettings.projects_dir``
that contains the entry-point module (``index.py``). Directories without it
are left out of the catalogue silently. Every call re-scans the disk; there
is no cached listing.
"""

from __future__ import annotations

import importlib.util
from pathlib import Path
from types import ModuleType

from pydantic import BaseModel, ConfigDict

from ..config import GeneratorSettings
from .errors import CatalogueReadError, UnknownProjectError


class CatalogueEntry(BaseModel):
    """One directory of the template store."""

    model_config = ConfigDict(frozen=True)

    name: str
    root_path: Path
    has_entry_point: bool


def valid_generator_project(path: str | Path, settings: GeneratorSettings | None = None) -> bool:
    """Return ``True`` if *path* contains the generator entry-point file."""
    settings = settings or GeneratorSettings()
    return (Path(path) / settings.entry_point).is_file()


def list_entries(settings: GeneratorSettings | None = None) -> list[CatalogueEntry]:
    """Describe every directory in the template store, sorted by name.

    Raises:
        CatalogueReadError: If the store root cannot be read.
    """
    settings = settings or GeneratorSettings()
    root = settings.projects_dir.resolve()
    try:
        children = sorted(root.iterdir(), key=lambda p: p.name)
    except OSError as exc:
        raise CatalogueReadError(root) from exc

    return [
        CatalogueEntry(
            name=child.name,
            root_path=child,
            has_entry_point=valid_generator_project(child, settings),
        )
        for child in children
        if child.is_dir()
    ]


def list_projects(settings: GeneratorSettings | None = None) -> list[str]:
    """Return the names of all valid generator projects, sorted."""
    return [entry.name for entry in list_entries(settings) if entry.has_entry_point]


def load_entry_point(project_type: str, settings: GeneratorSettings | None = None) -> ModuleType:
    """Import the entry-point module of the generator project *project_type*.

    Raises:
        UnknownProjectError: If *project_type* is not in the catalogue.
    """
    settings = settings or GeneratorSettings()
    available = list_projects(settings)
    if project_type not in available:
        raise UnknownProjectError(project_type, available)

    module_path = settings.projects_dir.resolve() / project_type / settings.entry_point
    module_name = "angularity_project_" + project_type.replace("-", "_")
    spec = importlib.util.spec_from_file_location(module_name, module_path)
    if spec is None or spec.loader is None:
        raise ImportError(f"Cannot load generator entry point {module_path}")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module

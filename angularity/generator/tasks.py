"""Build pipeline: runs a generator project's own build routine.

Each generator project's entry-point module (``index.py``) exposes::

    def build(project: GeneratorProject) -> None: ...

The pipeline imports that module and calls ``build`` with the project. What
the routine does (copying files, writing the config, installing packages) is
up to the generator project.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from ..config import GeneratorSettings
from .catalogue import load_entry_point

if TYPE_CHECKING:
    from .project import GeneratorProject


class Pipeline(Protocol):
    """Anything that can build a generator project."""

    def start(self, project: GeneratorProject) -> None: ...


class BuildPipeline:
    """Runs the ``build`` function of the project's entry-point module."""

    def __init__(self, settings: GeneratorSettings | None = None) -> None:
        self.settings = settings or GeneratorSettings()

    def start(self, project: GeneratorProject) -> None:
        module = load_entry_point(project.project_type, self.settings)
        build = getattr(module, "build", None)
        if not callable(build):
            raise AttributeError(
                f"Generator project {project.project_type!r} has no build(project) function"
            )
        build(project)

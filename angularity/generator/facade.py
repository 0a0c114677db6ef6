"""Top-level entry point for non-interactive project generation."""

from __future__ import annotations

from ..config import GeneratorSettings
from ..utils import print_error, print_project_list
from .catalogue import list_projects
from .project import GeneratorProject, create_project
from .tasks import BuildPipeline, Pipeline


class Generator:
    """Looks projects up in the catalogue and hands them to the build pipeline.

    Attributes:
        settings: Store locations and fixed names.
        pipeline: Collaborator that builds a created project.
        current_project: The project most recently started by
            :meth:`generate_project`, or ``None``.
    """

    def __init__(
        self,
        settings: GeneratorSettings | None = None,
        pipeline: Pipeline | None = None,
    ) -> None:
        self.settings = settings or GeneratorSettings()
        self.pipeline = pipeline or BuildPipeline(self.settings)
        self.current_project: GeneratorProject | None = None

    def projects(self) -> list[str]:
        """Re-scan the store and return the valid generator project names."""
        return list_projects(self.settings)

    def generate_project(self, name: str) -> GeneratorProject | None:
        """Create the generator project *name* without prompting and build it.

        The project is named after its type. When *name* is not in the
        catalogue the failure and the valid names are reported and ``None`` is
        returned; nothing else happens.
        """
        available = self.projects()

        if name not in available:
            print_error(f"There are no projects with name {name}")
            print_project_list(available)
            return None

        project = create_project(name, self.settings)
        self.current_project = project
        project.set_project_name(name)
        self.pipeline.start(project)
        return project

"""The generator project: one scaffolding request and its materialisation."""

from __future__ import annotations

import copy
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from ..config import GeneratorSettings, ProjectConfigDefaults
from .catalogue import list_projects, valid_generator_project
from .errors import UnknownProjectError
from .filesystem import copy_tree
from .resolver import create_project_config, deep_merge


class GeneratorProject:
    """A single project being generated from a template in the store.

    Attributes:
        project_config: Values rendered into the project's ``angularity.json``.
            Seeded from ``ProjectConfigDefaults`` and updated by
            :meth:`create_angularity_project_config`.
        settings: Store locations and fixed names.
    """

    def __init__(
        self,
        project_type: str,
        settings: GeneratorSettings | None = None,
        project_config: Mapping[str, Any] | None = None,
    ) -> None:
        self.settings = settings or GeneratorSettings()
        self._project_type = project_type
        self._project_type_path = self.settings.projects_dir.resolve() / project_type
        self._template_path = self._project_type_path / self.settings.template_folder
        if project_config is None:
            project_config = ProjectConfigDefaults().as_context()
        self.project_config: dict[str, Any] = copy.deepcopy(dict(project_config))
        self.set_project_name(self.settings.default_project_name)

    def __repr__(self) -> str:
        return (
            f"GeneratorProject(project_type={self._project_type!r}, "
            f"project_name={self._project_name!r}, destination={str(self.destination)!r})"
        )

    # -- Derived, read-only ------------------------------------------------

    @property
    def project_type(self) -> str:
        """Folder name of the generator project, e.g. ``es5-minimal``."""
        return self._project_type

    @property
    def project_type_path(self) -> Path:
        """Absolute path to the generator project in the store."""
        return self._project_type_path

    @property
    def template_path(self) -> Path:
        """Absolute path to the folder whose contents are copied."""
        return self._template_path

    # -- Name and destination ----------------------------------------------

    @property
    def project_name(self) -> str:
        return self._project_name

    @project_name.setter
    def project_name(self, name: str) -> None:
        self.set_project_name(name)

    @property
    def destination(self) -> Path:
        """Absolute output directory: the cwd at read time plus the project name."""
        return Path.cwd() / self._project_name

    def set_project_name(self, name: str) -> None:
        """Set the project name; the destination follows it."""
        self._project_name = name

    # -- Materialisation ---------------------------------------------------

    def copy_project_template_files(self) -> Path:
        """Copy the contents of the template folder into the destination."""
        return copy_tree(self.template_path, self.destination, copy_root_folder=True)

    def create_angularity_project_config(
        self, overrides: Mapping[str, Any] | None = None
    ) -> Path:
        """Merge *overrides* into the project config and write ``angularity.json``."""
        if overrides is not None:
            self.project_config = deep_merge(self.project_config, overrides)
        return create_project_config(
            self.destination,
            defaults=self.project_config,
            settings=self.settings,
        )


def create_project(
    project_type: str,
    settings: GeneratorSettings | None = None,
) -> GeneratorProject:
    """Create a :class:`GeneratorProject` for a catalogue project.

    The same admission rule as the catalogue applies: the type must be a
    directory in the store that holds the entry-point file.

    Raises:
        UnknownProjectError: If *project_type* is not a valid generator project.
    """
    settings = settings or GeneratorSettings()
    project_type_path = settings.projects_dir.resolve() / project_type
    # Only plain directory names can be catalogue entries.
    is_plain_name = project_type not in ("", ".", "..") and Path(project_type).name == project_type
    if not is_plain_name or not valid_generator_project(project_type_path, settings):
        raise UnknownProjectError(project_type, list_projects(settings))
    return GeneratorProject(project_type, settings)

"""Angularity generator configuration.

Centralised, typed configuration for the generator. All settings use
Pydantic v2 models so they can be validated at construction time and built
from environment variables without boiler-plate.

Two kinds of model live here:

* ``GeneratorSettings`` -- where the template store lives and the fixed
  file/folder names the generator relies on.
* ``GlobalConfigDefaults`` / ``ProjectConfigDefaults`` -- the default values
  rendered into ``~/.angularity`` and ``angularity.json``.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

_PACKAGE_DIR = Path(__file__).parent / "generator"


class GeneratorSettings(BaseModel):
    """Paths and fixed names used by the generator.

    Instances are typically created once by the CLI entry point (or the
    ``Generator`` facade) and then passed through the rest of the system.
    """

    projects_dir: Path = Field(
        default=_PACKAGE_DIR / "projects",
        description="Template store root: one directory per generator project",
    )
    templates_dir: Path = Field(
        default=_PACKAGE_DIR / "templates",
        description="Shared config templates (.angularity, angularity.json)",
    )
    home_dir: Path = Field(default_factory=Path.home)
    default_project_name: str = Field(default="angularity-project", min_length=1)
    entry_point: str = Field(default="index.py", min_length=1)
    template_folder: str = Field(default="template", min_length=1)
    project_config_filename: str = Field(default="angularity.json", min_length=1)
    global_config_filename: str = Field(default=".angularity", min_length=1)
    npm_command: list[str] = Field(default=["npm", "install"])

    # ------------------------------------------------------------------
    # Derived paths (read-only properties)
    # ------------------------------------------------------------------

    @property
    def global_config_path(self) -> Path:
        """Where the per-user global config is written."""
        return self.home_dir / self.global_config_filename

    @property
    def global_config_template(self) -> Path:
        return self.templates_dir / self.global_config_filename

    @property
    def project_config_template(self) -> Path:
        return self.templates_dir / self.project_config_filename

    @classmethod
    def from_env(cls) -> "GeneratorSettings":
        """Build ``GeneratorSettings`` from environment variables.

        Recognised variables (all optional):
            ANGULARITY_HOME, ANGULARITY_PROJECTS_DIR,
            ANGULARITY_TEMPLATES_DIR, ANGULARITY_PROJECT_NAME.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("ANGULARITY_HOME"):
            kwargs["home_dir"] = Path(os.environ["ANGULARITY_HOME"])
        if os.environ.get("ANGULARITY_PROJECTS_DIR"):
            kwargs["projects_dir"] = Path(os.environ["ANGULARITY_PROJECTS_DIR"])
        if os.environ.get("ANGULARITY_TEMPLATES_DIR"):
            kwargs["templates_dir"] = Path(os.environ["ANGULARITY_TEMPLATES_DIR"])
        if os.environ.get("ANGULARITY_PROJECT_NAME"):
            kwargs["default_project_name"] = os.environ["ANGULARITY_PROJECT_NAME"]
        return cls(**kwargs)


class GlobalConfigDefaults(BaseModel):
    """Default values rendered into the global ``~/.angularity`` file."""

    model_config = ConfigDict(extra="allow")

    webstormExecutable: str = Field(default="webstorm")
    serverHttpPort: int = Field(default=55555, ge=1, le=65535)
    browser: str = Field(default="chrome")

    def as_context(self) -> dict[str, Any]:
        """Return a plain, independent mapping for template rendering."""
        return self.model_dump(mode="json")


class ProjectConfigDefaults(BaseModel):
    """Default values rendered into a project's ``angularity.json``."""

    model_config = ConfigDict(extra="allow")

    name: str = Field(default="angularity-project")
    version: str = Field(default="0.0.0")
    javascriptVersion: str = Field(default="es5")
    serverHttpPort: int = Field(default=55555, ge=1, le=65535)
    minify: bool = Field(default=False)
    sourceMaps: bool = Field(default=True)

    def as_context(self) -> dict[str, Any]:
        """Return a plain, independent mapping for template rendering."""
        return self.model_dump(mode="json")

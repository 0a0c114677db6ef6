"""Angularity generator -- scaffolds new projects from generator projects.

A generator project is a folder in the template store holding an ``index.py``
entry point and a ``template/`` tree. Generating one copies the tree into
``<cwd>/<project name>`` and renders ``angularity.json`` from the shared
config template.

Quick usage::

    from angularity.generator import Generator, create_project

    Generator().generate_project("es5-minimal")

    project = create_project("es5-minimal")
    project.set_project_name("my-app")
    project.copy_project_template_files()
    project.create_angularity_project_config({"serverHttpPort": 9000})
"""

from angularity.generator.catalogue import (
    CatalogueEntry,
    list_entries,
    list_projects,
    valid_generator_project,
)
from angularity.generator.errors import (
    CatalogueReadError,
    ExternalProcessError,
    FileSystemWriteError,
    GeneratorError,
    TemplateRenderError,
    UnknownProjectError,
)
from angularity.generator.facade import Generator
from angularity.generator.project import GeneratorProject, create_project
from angularity.generator.renderer import render
from angularity.generator.resolver import (
    create_global_config,
    create_project_config,
    deep_merge,
)

__all__ = [
    "CatalogueEntry",
    "CatalogueReadError",
    "ExternalProcessError",
    "FileSystemWriteError",
    "Generator",
    "GeneratorError",
    "GeneratorProject",
    "TemplateRenderError",
    "UnknownProjectError",
    "create_global_config",
    "create_project",
    "create_project_config",
    "deep_merge",
    "list_entries",
    "list_projects",
    "render",
    "valid_generator_project",
]

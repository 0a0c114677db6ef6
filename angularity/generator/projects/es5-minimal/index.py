"""es5-minimal: the smallest ES5 Angularity project.

Copies the template tree, writes ``angularity.json`` named after the project
and installs its npm dependencies.
"""

from __future__ import annotations

from angularity.generator.filesystem import npm_install
from angularity.utils import print_success


def build(project) -> None:
    project.copy_project_template_files()
    project.create_angularity_project_config(
        {"name": project.project_name, "javascriptVersion": "es5"}
    )
    npm_install(project.destination, project.settings)
    print_success(f"Generated {project.project_type} project at {project.destination}")

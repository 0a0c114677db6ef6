"""Shared pytest fixtures for the Angularity generator test suite.

Provides reusable fixtures for:
- An isolated template store (projects + config templates)
- Generator settings pointing at that store and a temporary home directory
- A temporary working directory for generated projects
"""

from __future__ import annotations

import shutil
import textwrap
from pathlib import Path

import pytest

from angularity.config import GeneratorSettings

BUNDLED = GeneratorSettings()


# ---------------------------------------------------------------------------
# Template store
# ---------------------------------------------------------------------------


def make_generator_project(
    projects_dir: Path,
    name: str,
    *,
    entry_point: bool = True,
    files: dict[str, str] | None = None,
) -> Path:
    """Create a generator project folder in *projects_dir*.

    Args:
        projects_dir: Template store root.
        name: Folder name of the generator project.
        entry_point: Whether to write ``index.py``.
        files: Template files (relative path -> content) under ``template/``.
    """
    root = projects_dir / name
    template = root / "template"
    template.mkdir(parents=True)
    if entry_point:
        (root / "index.py").write_text(
            textwrap.dedent(
                """\
                def build(project):
                    project.copy_project_template_files()
                    project.create_angularity_project_config()
                """
            ),
            encoding="utf-8",
        )
    for rel, content in (files or {}).items():
        path = template / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    return root


@pytest.fixture
def template_store(tmp_path: Path) -> Path:
    """Template store with one valid and one broken generator project."""
    store = tmp_path / "store"
    projects = store / "projects"
    projects.mkdir(parents=True)
    make_generator_project(
        projects,
        "es5-minimal",
        files={
            "package.json": '{"name": "angularity-project"}\n',
            "src/css-lib/app.scss": "body {}\n",
            "src/js-lib/app.js": "'use strict';\n",
            "src/target/index.html": "<!DOCTYPE html>\n",
        },
    )
    make_generator_project(projects, "broken-template", entry_point=False)
    shutil.copytree(BUNDLED.templates_dir, store / "templates")
    return store


@pytest.fixture
def settings(template_store: Path, tmp_path: Path) -> GeneratorSettings:
    """Settings pointing at the temporary store and a temporary home."""
    home = tmp_path / "home"
    home.mkdir()
    return GeneratorSettings(
        projects_dir=template_store / "projects",
        templates_dir=template_store / "templates",
        home_dir=home,
    )


# ---------------------------------------------------------------------------
# Working directory
# ---------------------------------------------------------------------------


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Temporary current working directory for generated projects."""
    cwd = tmp_path / "work"
    cwd.mkdir()
    monkeypatch.chdir(cwd)
    return Path.cwd()


@pytest.fixture
def add_generator_project(settings: GeneratorSettings):
    """Factory that adds a generator project to the temporary store."""

    def _add(name: str, **kwargs) -> Path:
        return make_generator_project(settings.projects_dir, name, **kwargs)

    return _add

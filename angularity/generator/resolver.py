"""Config resolution: merge overrides onto defaults, render, write.

Two config files are produced the same way:

* the global ``~/.angularity`` file (``create_global_config``), and
* a project's ``angularity.json`` (``create_project_config``).

Each call reads its template from disk, builds a fresh context from the
defaults plus any overrides, renders it, and only then writes the target, so
a render failure never leaves a partial file behind.
"""

from __future__ import annotations

import copy
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from ..config import GeneratorSettings, GlobalConfigDefaults, ProjectConfigDefaults
from ..utils import print_error
from .errors import FileSystemWriteError, TemplateRenderError
from .renderer import render


def deep_merge(defaults: Mapping[str, Any], overrides: Mapping[str, Any]) -> dict[str, Any]:
    """Return a new mapping with *overrides* merged onto *defaults*.

    Keys present in both take the override value, except when both values are
    mappings, which are merged recursively. Lists and scalars are replaced
    wholesale. Neither input is modified.
    """
    merged = copy.deepcopy(dict(defaults))
    for key, value in overrides.items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


def resolve_context(
    defaults: Mapping[str, Any],
    overrides: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Build a rendering context; defaults are used verbatim without overrides."""
    if overrides is None:
        return copy.deepcopy(dict(defaults))
    return deep_merge(defaults, overrides)


def create_global_config(
    overrides: Mapping[str, Any] | None = None,
    *,
    defaults: Mapping[str, Any] | None = None,
    settings: GeneratorSettings | None = None,
) -> Path:
    """Render the global config template and write it to the user's home.

    Any existing file is overwritten without a backup.

    Returns:
        The path that was written.
    """
    settings = settings or GeneratorSettings()
    if defaults is None:
        defaults = GlobalConfigDefaults().as_context()
    return _render_config(
        step="create_global_config()",
        template_path=settings.global_config_template,
        target=settings.global_config_path,
        context=resolve_context(defaults, overrides),
    )


def create_project_config(
    destination: str | Path,
    overrides: Mapping[str, Any] | None = None,
    *,
    defaults: Mapping[str, Any] | None = None,
    settings: GeneratorSettings | None = None,
) -> Path:
    """Render the project config template into ``<destination>/angularity.json``.

    Returns:
        The path that was written.
    """
    settings = settings or GeneratorSettings()
    if defaults is None:
        defaults = ProjectConfigDefaults().as_context()
    return _render_config(
        step="create_project_config()",
        template_path=settings.project_config_template,
        target=Path(destination) / settings.project_config_filename,
        context=resolve_context(defaults, overrides),
    )


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _render_config(
    step: str,
    template_path: Path,
    target: Path,
    context: dict[str, Any],
) -> Path:
    template = template_path.read_text(encoding="utf-8")

    try:
        content = render(template, context)
    except TemplateRenderError as exc:
        print_error(f"{step} failed to render {template_path.name}: {exc}")
        raise

    try:
        target.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise FileSystemWriteError(target, "Cannot write config file") from exc
    return target

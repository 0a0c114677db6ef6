"""Filesystem and process helpers used while materialising a project.

None of these helpers change the process working directory: copies take
explicit source and destination paths, and child processes are started with
an explicit ``cwd``.
"""

from __future__ import annotations

import shutil
import subprocess
from pathlib import Path

from ..config import GeneratorSettings
from .errors import ExternalProcessError, FileSystemWriteError

#: Folders every Angularity project must have, relative to its root.
REQUIRED_PROJECT_DIRECTORIES: tuple[tuple[str, ...], ...] = (
    ("src", "css-lib"),
    ("src", "js-lib"),
    ("src", "target"),
)


# ---------------------------------------------------------------------------
# Copy
# ---------------------------------------------------------------------------


def copy_tree(
    source: str | Path,
    destination: str | Path,
    copy_root_folder: bool = False,
) -> Path:
    """Copy a directory recursively to *destination*.

    Args:
        source: Directory to copy.
        destination: Target directory; created (with parents) if absent.
        copy_root_folder: When ``True`` only the *contents* of *source* are
            copied into *destination*. When ``False`` the source folder itself
            is copied, ending up at ``destination/<source name>``.

    Returns:
        The directory the files were copied into.

    Raises:
        FileSystemWriteError: If *source* does not exist or the copy fails.
            Existing files in the target are overwritten.
    """
    source = Path(source)
    destination = Path(destination)
    if not source.is_dir():
        raise FileSystemWriteError(source, "Template path does not exist")

    target = destination if copy_root_folder else destination / source.name
    try:
        destination.mkdir(parents=True, exist_ok=True)
        shutil.copytree(source, target, dirs_exist_ok=True)
    except (OSError, shutil.Error) as exc:
        raise FileSystemWriteError(target, "Cannot copy template files") from exc
    return target


# ---------------------------------------------------------------------------
# Package install
# ---------------------------------------------------------------------------


def npm_install(destination: str | Path, settings: GeneratorSettings | None = None) -> None:
    """Run ``npm install`` inside *destination*.

    Raises:
        ExternalProcessError: If the command exits with a non-zero code.
    """
    settings = settings or GeneratorSettings()
    command = list(settings.npm_command)
    try:
        result = subprocess.run(command, cwd=str(destination), check=False)
    except FileNotFoundError as exc:
        # Same code a shell reports for a missing executable.
        raise ExternalProcessError(command, 127) from exc
    if result.returncode != 0:
        raise ExternalProcessError(command, result.returncode)


# ---------------------------------------------------------------------------
# Existing-project validation
# ---------------------------------------------------------------------------


def validate_existing_project(
    directory: str | Path,
    settings: GeneratorSettings | None = None,
) -> bool:
    """Return ``True`` if *directory* looks like an Angularity project.

    Basic check only: the required ``src/`` folders and the config file.
    """
    return validate_project_directories(directory) and validate_config_exists(
        directory, settings
    )


def validate_project_directories(directory: str | Path) -> bool:
    root = Path(directory)
    return all(root.joinpath(*parts).is_dir() for parts in REQUIRED_PROJECT_DIRECTORIES)


def validate_config_exists(
    directory: str | Path,
    settings: GeneratorSettings | None = None,
) -> bool:
    settings = settings or GeneratorSettings()
    return (Path(directory) / settings.project_config_filename).is_file()

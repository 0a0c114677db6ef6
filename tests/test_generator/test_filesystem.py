"""Tests for filesystem and process helpers (angularity.generator.filesystem).

Covers:
- copy_tree with and without copy_root_folder
- npm_install success, failure, missing executable (subprocess mocked)
- Existing-project validation
"""

from __future__ import annotations

import subprocess
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from angularity.config import GeneratorSettings
from angularity.generator.errors import ExternalProcessError, FileSystemWriteError
from angularity.generator.filesystem import (
    copy_tree,
    npm_install,
    validate_config_exists,
    validate_existing_project,
    validate_project_directories,
)


@pytest.fixture
def source_tree(tmp_path: Path) -> Path:
    source = tmp_path / "template"
    (source / "src" / "js-lib").mkdir(parents=True)
    (source / "src" / "js-lib" / "app.js").write_text("js", encoding="utf-8")
    (source / "package.json").write_text("{}", encoding="utf-8")
    return source


# ---------------------------------------------------------------------------
# copy_tree
# ---------------------------------------------------------------------------


class TestCopyTree:
    @pytest.mark.unit
    def test_copy_root_folder_copies_contents(self, source_tree: Path, tmp_path: Path):
        destination = tmp_path / "out"
        target = copy_tree(source_tree, destination, copy_root_folder=True)
        assert target == destination
        assert sorted(p.name for p in destination.iterdir()) == ["package.json", "src"]

    @pytest.mark.unit
    def test_without_copy_root_folder_nests_source(self, source_tree: Path, tmp_path: Path):
        destination = tmp_path / "out"
        target = copy_tree(source_tree, destination)
        assert target == destination / "template"
        assert [p.name for p in destination.iterdir()] == ["template"]
        assert (destination / "template" / "src" / "js-lib" / "app.js").is_file()

    @pytest.mark.unit
    def test_creates_missing_parents(self, source_tree: Path, tmp_path: Path):
        destination = tmp_path / "a" / "b" / "c"
        copy_tree(source_tree, destination, copy_root_folder=True)
        assert (destination / "package.json").is_file()

    @pytest.mark.unit
    def test_overwrites_conflicts(self, source_tree: Path, tmp_path: Path):
        destination = tmp_path / "out"
        destination.mkdir()
        (destination / "package.json").write_text("old", encoding="utf-8")
        copy_tree(source_tree, destination, copy_root_folder=True)
        assert (destination / "package.json").read_text(encoding="utf-8") == "{}"

    @pytest.mark.unit
    def test_missing_source(self, tmp_path: Path):
        with pytest.raises(FileSystemWriteError):
            copy_tree(tmp_path / "missing", tmp_path / "out", copy_root_folder=True)
        assert not (tmp_path / "out").exists()

    @pytest.mark.unit
    def test_destination_is_a_file(self, source_tree: Path, tmp_path: Path):
        blocker = tmp_path / "out"
        blocker.write_text("not a directory", encoding="utf-8")
        with pytest.raises(FileSystemWriteError) as exc_info:
            copy_tree(source_tree, blocker, copy_root_folder=True)
        assert isinstance(exc_info.value.__cause__, OSError)


# ---------------------------------------------------------------------------
# npm_install
# ---------------------------------------------------------------------------


class TestNpmInstall:
    @pytest.mark.unit
    def test_runs_in_destination(self, tmp_path: Path):
        with patch("angularity.generator.filesystem.subprocess.run") as run:
            run.return_value = MagicMock(returncode=0)
            npm_install(tmp_path)
        run.assert_called_once_with(["npm", "install"], cwd=str(tmp_path), check=False)

    @pytest.mark.unit
    def test_uses_configured_command(self, tmp_path: Path):
        settings = GeneratorSettings(npm_command=["pnpm", "install"])
        with patch("angularity.generator.filesystem.subprocess.run") as run:
            run.return_value = MagicMock(returncode=0)
            npm_install(tmp_path, settings)
        assert run.call_args.args[0] == ["pnpm", "install"]

    @pytest.mark.unit
    def test_non_zero_exit_raises(self, tmp_path: Path):
        with patch("angularity.generator.filesystem.subprocess.run") as run:
            run.return_value = subprocess.CompletedProcess(["npm", "install"], 3)
            with pytest.raises(ExternalProcessError) as exc_info:
                npm_install(tmp_path)
        assert exc_info.value.returncode == 3
        assert exc_info.value.command == ["npm", "install"]

    @pytest.mark.unit
    def test_missing_executable(self, tmp_path: Path):
        settings = GeneratorSettings(npm_command=["definitely-not-a-real-npm-binary"])
        with pytest.raises(ExternalProcessError) as exc_info:
            npm_install(tmp_path, settings)
        assert exc_info.value.returncode == 127

    @pytest.mark.unit
    def test_cwd_unchanged(self, tmp_path: Path):
        before = Path.cwd()
        with patch("angularity.generator.filesystem.subprocess.run") as run:
            run.return_value = MagicMock(returncode=1)
            with pytest.raises(ExternalProcessError):
                npm_install(tmp_path)
        assert Path.cwd() == before


# ---------------------------------------------------------------------------
# Existing-project validation
# ---------------------------------------------------------------------------


def _make_existing_project(root: Path, *, config: bool = True, skip: str | None = None) -> Path:
    for folder in ("css-lib", "js-lib", "target"):
        if folder != skip:
            (root / "src" / folder).mkdir(parents=True)
    if config:
        (root / "angularity.json").write_text("{}", encoding="utf-8")
    return root


class TestValidateExistingProject:
    @pytest.mark.unit
    def test_valid_project(self, tmp_path: Path):
        assert validate_existing_project(_make_existing_project(tmp_path))

    @pytest.mark.unit
    def test_missing_config(self, tmp_path: Path):
        root = _make_existing_project(tmp_path, config=False)
        assert validate_project_directories(root)
        assert not validate_config_exists(root)
        assert not validate_existing_project(root)

    @pytest.mark.unit
    @pytest.mark.parametrize("folder", ["css-lib", "js-lib", "target"])
    def test_missing_required_folder(self, tmp_path: Path, folder: str):
        root = _make_existing_project(tmp_path, skip=folder)
        assert not validate_project_directories(root)
        assert not validate_existing_project(root)

    @pytest.mark.unit
    def test_empty_directory(self, tmp_path: Path):
        assert not validate_existing_project(tmp_path)

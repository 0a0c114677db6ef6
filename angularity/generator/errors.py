"""Exceptions raised by the generator."""

from __future__ import annotations

from pathlib import Path


class GeneratorError(Exception):
    """Base class for every generator failure."""


class CatalogueReadError(GeneratorError):
    """Raised when the template store root cannot be read."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        super().__init__(f"Cannot read generator project catalogue at {self.path}")


class UnknownProjectError(GeneratorError):
    """Raised when a generator project name is not in the catalogue."""

    def __init__(self, name: str, available: list[str]) -> None:
        self.name = name
        self.available = list(available)
        listing = ", ".join(self.available) if self.available else "(none)"
        super().__init__(
            f"There are no projects with name {name!r}; available projects: {listing}"
        )


class TemplateRenderError(GeneratorError):
    """Raised when placeholder substitution fails."""

    def __init__(self, message: str, key: str | None = None) -> None:
        self.key = key
        super().__init__(message)


class FileSystemWriteError(GeneratorError):
    """Raised when a copy or write target is missing or not writable."""

    def __init__(self, path: str | Path, message: str) -> None:
        self.path = Path(path)
        super().__init__(f"{message}: {self.path}")


class ExternalProcessError(GeneratorError):
    """Raised when an external command (e.g. ``npm install``) exits non-zero."""

    def __init__(self, command: list[str], returncode: int) -> None:
        self.command = list(command)
        self.returncode = returncode
        super().__init__(
            f"Command {' '.join(self.command)!r} failed with exit code {returncode}"
        )

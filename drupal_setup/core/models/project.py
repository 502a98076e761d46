"""
Project model — the Drupal project directory being built.

The directory name is derived from what the user typed: trimmed,
lower-cased, spaces turned into hyphens. Every external command after
scaffolding runs inside this directory.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel

SETTINGS_FILE = Path("sites") / "default" / "settings.ddev.php"
CONFIG_SYNC_DIR = Path("config") / "sync"
DDEV_DIR = ".ddev"

_SEPARATORS = ("/", "\\")
_RESERVED_NAMES = (".", "..")


class ProjectNameError(ValueError):
    """Raised when user text cannot be used as a project directory name."""


def normalize_project_name(raw: str) -> str:
    """Turn free text into a directory name.

    ``"  My Site  "`` becomes ``"my-site"``.

    Raises:
        ProjectNameError: If nothing is left after trimming, or the name
            is not a single directory name (``/``, ``\\``, ``.``, ``..``).
    """
    name = raw.strip()
    if not name:
        raise ProjectNameError("Project name cannot be empty")
    name = name.lower().replace(" ", "-")
    if name in _RESERVED_NAMES or any(sep in name for sep in _SEPARATORS):
        raise ProjectNameError(f"Project name must be a plain directory name: {raw.strip()!r}")
    return name


class DrupalProject(BaseModel):
    """A scaffolded Drupal project on disk."""

    name: str
    path: Path

    @classmethod
    def from_input(cls, raw: str, parent: Path) -> DrupalProject:
        name = normalize_project_name(raw)
        return cls(name=name, path=parent / name)

    def settings_file(self, docroot: str = "web") -> Path:
        """DDEV-generated settings file under the docroot."""
        return self.path / docroot / SETTINGS_FILE

    @property
    def config_sync_dir(self) -> Path:
        return self.path / CONFIG_SYNC_DIR

    @property
    def ddev_dir(self) -> Path:
        return self.path / DDEV_DIR

"""
Settings configurator — point config sync at ``config/sync`` and seed it.

DDEV generates ``settings.ddev.php`` with the sync directory under
``sites/default/files/sync``. The installer moves it to the project-level
``config/sync`` (outside the docroot) and drops the bundled config
payloads there so ``drush config:import`` picks them up.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path

from drupal_setup.core.data import get_registry
from drupal_setup.core.engine.executor import InstallContext
from drupal_setup.core.models.step import StepResult

logger = logging.getLogger(__name__)

DEFAULT_SYNC_FRAGMENT = "sites/default/files/sync"
PROJECT_SYNC_FRAGMENT = "../config/sync"


class SettingsError(Exception):
    """Raised when the settings file or sync directory cannot be written."""


def reroute_sync_directory(content: str) -> str:
    """Swap the first default sync path for the project-level one.

    Pure string replacement; content without the fragment comes back
    unchanged.
    """
    return content.replace(DEFAULT_SYNC_FRAGMENT, PROJECT_SYNC_FRAGMENT, 1)


def rewrite_settings_file(path: Path) -> bool:
    """Read-modify-write ``path``. Returns whether anything changed.

    Raises:
        SettingsError: If the file cannot be read or written.
    """
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise SettingsError(f"Failed to read {path.name}: {e}") from e

    updated = reroute_sync_directory(content)
    if updated == content:
        logger.info("%s has no %s reference", path, DEFAULT_SYNC_FRAGMENT)
        return False

    try:
        path.write_text(updated, encoding="utf-8")
    except OSError as e:
        raise SettingsError(f"Failed to write {path.name}: {e}") from e
    return True


def write_sync_payloads(sync_dir: Path, payloads: Mapping[str, str]) -> list[Path]:
    """Write each payload verbatim into ``sync_dir``.

    Raises:
        SettingsError: If any file cannot be written.
    """
    written: list[Path] = []
    for filename, text in payloads.items():
        target = sync_dir / filename
        try:
            target.write_text(text, encoding="utf-8")
        except OSError as e:
            raise SettingsError(f"Failed to write config files: {e}") from e
        written.append(target)
        logger.debug("Wrote %s", target)
    return written


def setup_settings(ctx: InstallContext) -> StepResult:
    """Create config/sync, rewrite settings.ddev.php, seed config payloads."""
    ctx.reporter.info("Setting up Drupal settings...")

    assert ctx.project is not None  # set by create_project
    sync_dir = ctx.project.config_sync_dir
    settings_file = ctx.project.settings_file(ctx.config.docroot)

    try:
        sync_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        return StepResult.failure(f"Failed to create config directory: {e}")

    try:
        rewrite_settings_file(settings_file)
        write_sync_payloads(sync_dir, get_registry().sync_payloads)
    except SettingsError as e:
        return StepResult.failure(str(e))

    ctx.reporter.success("✓ Drupal settings setup completed")
    return StepResult.success()

"""
Central data registry for the static configuration payloads.

The installer ships Drupal config files under
``drupal_setup/core/data/config_sync/``. They are read once on first
access, cached for the process lifetime, and written verbatim into the
new project's ``config/sync`` directory.

Usage::

    from drupal_setup.core.data import get_registry

    payloads = get_registry().sync_payloads   # {filename: text}
"""

from __future__ import annotations

import logging
from functools import cached_property
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

logger = logging.getLogger(__name__)

_DATA_DIR = Path(__file__).parent

# Written in this order into config/sync
SYNC_PAYLOAD_FILES: tuple[str, ...] = (
    "environment_indicator.indicator.yml",
    "environment_indicator.settings.yml",
)


def _load_text(relative_path: str) -> str:
    """Load a text file relative to the data directory."""
    path = _DATA_DIR / relative_path
    return path.read_text(encoding="utf-8")


class DataRegistry:
    """Read-only registry for the bundled configuration payloads.

    Create one instance per process; ``get_registry()`` does that.
    """

    @cached_property
    def sync_payloads(self) -> Mapping[str, str]:
        """Filename → file content for everything written to config/sync."""
        data = {
            name: _load_text(f"config_sync/{name}") for name in SYNC_PAYLOAD_FILES
        }
        logger.debug("Loaded %d config sync payloads", len(data))
        return MappingProxyType(data)


# ── Module-level singleton ───────────────────────────────────────

_registry: DataRegistry | None = None


def get_registry() -> DataRegistry:
    """Return the process-level DataRegistry singleton."""
    global _registry  # noqa: PLW0603
    if _registry is None:
        _registry = DataRegistry()
    return _registry

"""
Site URL discovery — read the HTTPS URL out of ``ddev describe``.

``ddev describe --json-output`` prints a document shaped like::

    {"raw": [{"https_url": "https://my-site.ddev.site", ...}], ...}

Extraction is a chain of lookups that each yield None on a missing
key, wrong type or empty list, so any input produces either the URL
or None and nothing raises.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from drupal_setup.adapters.registry import AdapterRegistry
from drupal_setup.core.engine.executor import InstallContext
from drupal_setup.core.models.step import StepResult

logger = logging.getLogger(__name__)

URL_HINT = "Could not determine site URL. Try running 'ddev describe'"


def _parse(raw: str | bytes) -> Any:
    try:
        return json.loads(raw)
    except (TypeError, ValueError, RecursionError):
        return None


def _key(value: Any, key: str) -> Any:
    return value.get(key) if isinstance(value, dict) else None


def _index(value: Any, index: int) -> Any:
    if isinstance(value, list) and -len(value) <= index < len(value):
        return value[index]
    return None


def _string(value: Any) -> str | None:
    return value if isinstance(value, str) else None


def extract_site_url(raw: str | bytes) -> str | None:
    """``raw[0].https_url`` from a describe document, or None."""
    return _string(_key(_index(_key(_parse(raw), "raw"), 0), "https_url"))


def describe_site_url(registry: AdapterRegistry, project_dir: str | Path) -> str | None:
    """Run ``ddev describe --json-output`` in ``project_dir`` and extract the URL."""
    receipt = registry.run(
        "ddev", "describe", "--json-output", cwd=str(project_dir), capture=True
    )
    if receipt.failed:
        logger.info("ddev describe failed: %s", receipt.error)
        return None

    url = extract_site_url(receipt.output)
    if not url:
        logger.info("No https_url in ddev describe output")
    return url or None


def discover_site_url(ctx: InstallContext) -> StepResult:
    """Record the site URL on the context. Failure is advisory."""
    ctx.reporter.info("Getting site URL...")

    url = describe_site_url(ctx.registry, ctx.project_dir)
    if not url:
        return StepResult.failure(URL_HINT)

    ctx.site_url = url
    ctx.reporter.success(f"Site URL: {url}")
    return StepResult.success(url)

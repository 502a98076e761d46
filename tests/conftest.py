"""
Shared test fixtures and configuration.

External tools are replaced by MockAdapters registered under their
real names (brew, docker, colima, ddev, composer).
"""

from __future__ import annotations

from pathlib import Path

import pytest

from drupal_setup.adapters.mock import MockAdapter
from drupal_setup.adapters.registry import AdapterRegistry
from drupal_setup.core.engine.executor import InstallContext
from drupal_setup.core.models.config import InstallerConfig
from drupal_setup.core.models.project import DrupalProject
from drupal_setup.core.models.step import Provider

from tests.helpers import RecordingReporter, ScriptedPrompt, Toolbox


@pytest.fixture
def tools() -> Toolbox:
    """Every tool present, every command succeeding."""
    registry = AdapterRegistry()
    box = Toolbox(
        registry=registry,
        brew=MockAdapter("brew"),
        docker=MockAdapter("docker"),
        colima=MockAdapter("colima"),
        ddev=MockAdapter("ddev"),
        composer=MockAdapter("composer"),
    )
    for adapter in (box.brew, box.docker, box.colima, box.ddev, box.composer):
        registry.register(adapter)
    return box


@pytest.fixture
def reporter() -> RecordingReporter:
    return RecordingReporter()


@pytest.fixture
def make_context(tools: Toolbox, reporter: RecordingReporter, tmp_path: Path):
    """Factory for an InstallContext wired to the mock tools."""

    def _make(
        *answers: str,
        provider: Provider = Provider.DOCKER,
        config: InstallerConfig | None = None,
        project: str | None = None,
        **kwargs,
    ) -> InstallContext:
        ctx = InstallContext(
            registry=tools.registry,
            reporter=reporter,
            prompt=ScriptedPrompt(*answers),
            config=config or InstallerConfig(),
            provider=provider,
            workdir=tmp_path,
            **kwargs,
        )
        if project is not None:
            ctx.project = DrupalProject(name=project, path=tmp_path / project)
        return ctx

    return _make

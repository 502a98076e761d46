"""
Prerequisite detection — what is installed, without changing anything.

Two probes: PATH lookup for a binary and ``brew list <pkg>`` for a
Homebrew package. Both are read-only.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from drupal_setup.adapters.registry import AdapterRegistry
from drupal_setup.core.engine.executor import InstallContext
from drupal_setup.core.models.step import Provider, StepResult

logger = logging.getLogger(__name__)

BANNER = "=========================================="

# brew formula that provides Docker Desktop
DOCKER_FORMULA = "docker"


def command_exists(registry: AdapterRegistry, name: str) -> bool:
    """Whether ``name`` resolves on PATH."""
    return registry.is_available(name)


def brew_package_installed(registry: AdapterRegistry, package: str) -> bool:
    """Whether Homebrew considers ``package`` installed."""
    return registry.run("brew", "list", package, capture=True).ok


@dataclass
class ToolStatus:
    """Presence of one prerequisite."""

    name: str
    label: str
    installed: bool
    required: bool = False

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "label": self.label,
            "installed": self.installed,
            "required": self.required,
        }


@dataclass
class PrerequisiteReport:
    """Presence of every prerequisite for one provider choice."""

    provider: Provider
    tools: list[ToolStatus] = field(default_factory=list)

    @property
    def all_present(self) -> bool:
        return all(t.installed for t in self.tools)

    @property
    def missing_required(self) -> list[ToolStatus]:
        return [t for t in self.tools if t.required and not t.installed]

    def get(self, name: str) -> ToolStatus | None:
        for tool in self.tools:
            if tool.name == name:
                return tool
        return None

    def to_dict(self) -> dict:
        return {
            "provider": self.provider.value,
            "all_present": self.all_present,
            "tools": [t.to_dict() for t in self.tools],
        }


def check_prerequisites(registry: AdapterRegistry, provider: Provider) -> PrerequisiteReport:
    """Probe Homebrew, the chosen container backend and DDEV.

    Docker Desktop is detected through Homebrew since its CLI may be on
    PATH from another source; Colima and DDEV by PATH lookup.
    """
    report = PrerequisiteReport(provider=provider)

    has_brew = command_exists(registry, "brew")
    report.tools.append(ToolStatus("brew", "Homebrew", has_brew, required=True))

    if provider is Provider.DOCKER:
        installed = has_brew and brew_package_installed(registry, DOCKER_FORMULA)
        report.tools.append(ToolStatus("docker", "Docker Desktop", installed))
    else:
        report.tools.append(
            ToolStatus("colima", "Colima", command_exists(registry, "colima"))
        )

    report.tools.append(ToolStatus("ddev", "DDEV", command_exists(registry, "ddev")))

    logger.debug("Prerequisites: %s", report.to_dict())
    return report


def report_prerequisites(ctx: InstallContext) -> StepResult:
    """Print the prerequisite table. Advisory only, always succeeds."""
    reporter = ctx.reporter
    report = check_prerequisites(ctx.registry, ctx.provider)

    reporter.echo(BANNER)
    reporter.info("Checking Prerequisites")
    reporter.echo(BANNER)

    for tool in report.tools:
        if tool.installed:
            reporter.success(f"✓ {tool.label} is installed")
        elif tool.required:
            reporter.error(f"✗ {tool.label} is not installed")
        else:
            reporter.warning(f"✗ {tool.label} is not installed")

    reporter.echo()
    return StepResult.success()

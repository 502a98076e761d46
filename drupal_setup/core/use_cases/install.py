"""
Install use case — the full Drupal-on-DDEV run, top to bottom.

Builds the step list for the chosen container provider, runs it through
the pipeline and, if nothing fatal failed, prints the closing
instructions.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from drupal_setup.core.engine.executor import (
    InstallContext,
    PipelineReport,
    Step,
    run_pipeline,
)
from drupal_setup.core.models.config import InstallerConfig
from drupal_setup.core.models.step import Provider
from drupal_setup.core.services import (
    prerequisites,
    scaffold,
    settings,
    site_install,
    site_url,
    toolchain,
)
from drupal_setup.core.services.prerequisites import BANNER

logger = logging.getLogger(__name__)

DDEV_DOCS = "https://ddev.readthedocs.io/"

CONTENT_WARNING = "Content generation failed, but continuing..."


def build_install_steps(provider: Provider) -> list[Step]:
    """The fixed step order for one provider."""
    steps = [
        Step("prerequisites", prerequisites.report_prerequisites, fatal=False),
        Step("homebrew", toolchain.ensure_homebrew),
    ]

    if provider is Provider.DOCKER:
        steps += [
            Step("docker-desktop", toolchain.ensure_docker_desktop),
            Step("docker-running", toolchain.check_docker_running),
        ]
    else:
        steps += [
            Step("colima", toolchain.ensure_colima),
            Step("colima-running", toolchain.ensure_colima_running),
        ]

    steps += [
        Step("ddev", toolchain.ensure_ddev),
        Step("ddev-version", toolchain.report_ddev_version, fatal=False),
        Step("create-project", scaffold.create_project),
        Step("ddev-config", scaffold.init_ddev_project),
        Step("ddev-start", scaffold.start_ddev),
        Step("dependencies", site_install.install_dependencies),
        Step("settings", settings.setup_settings),
        Step("site-install", site_install.install_site),
        Step("modules", site_install.enable_modules),
        Step("config-import", site_install.import_config),
        Step(
            "content",
            site_install.generate_content,
            fatal=False,
            warning=CONTENT_WARNING,
            failure_level="error",
        ),
        Step("site-url", site_url.discover_site_url, fatal=False),
    ]
    return steps


def final_instructions(url: str | None, config: InstallerConfig) -> list[str]:
    """Closing lines printed after a successful run."""
    visit = (
        f"1. Visit your site: {url}"
        if url
        else "1. Run 'ddev describe' to get your site URL"
    )
    return [
        "Next steps:",
        visit,
        f"2. Login with: username={config.account_name}, password={config.account_pass}",
        "3. Useful DDEV commands:",
        "   - ddev describe    # Show project info",
        "   - ddev drush       # Run Drush commands",
        "   - ddev ssh         # SSH into container",
        "   - ddev stop        # Stop the project",
        "   - ddev start       # Start the project",
        "",
        f"For more information, visit: {DDEV_DOCS}",
    ]


@dataclass
class InstallResult:
    """Result of a full installation run."""

    report: PipelineReport
    context: InstallContext

    @property
    def exit_code(self) -> int:
        return self.report.exit_code

    def to_dict(self) -> dict:
        ctx = self.context
        return {
            "provider": ctx.provider.value,
            "project": ctx.project.name if ctx.project else None,
            "project_path": str(ctx.project.path) if ctx.project else None,
            "site_url": ctx.site_url,
            **self.report.to_dict(),
        }


def run_install(context: InstallContext) -> InstallResult:
    """Run every step; print the closing instructions if nothing fatal failed."""
    reporter = context.reporter
    logger.info("Installing with provider %s", context.provider.value)

    report = run_pipeline(build_install_steps(context.provider), context)

    if report.ok:
        reporter.echo()
        reporter.echo(BANNER)
        reporter.success("Drupal 11 installation completed!")
        reporter.echo(BANNER)
        reporter.echo()
        for line in final_instructions(context.site_url, context.config):
            reporter.echo(line)

    return InstallResult(report=report, context=context)

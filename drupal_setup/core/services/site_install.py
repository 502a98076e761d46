"""
Drupal site installation — Composer packages, Drush install, modules,
config import and optional sample content.

Every command runs through ``ddev`` inside the project directory and
streams its output to the terminal. A sequence stops at the first
non-zero exit.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from drupal_setup.core.engine.executor import InstallContext
from drupal_setup.core.models.config import InstallerConfig
from drupal_setup.core.models.step import StepResult

logger = logging.getLogger(__name__)

CONTENT_PROMPT = "Do you want to generate content? (y/N)"
AFFIRMATIVE = "y"


def dependency_commands(config: InstallerConfig) -> list[list[str]]:
    """``ddev`` argument lists for the Composer phase, in order."""
    commands: list[list[str]] = [["composer", "install"]]
    for package in config.dev_packages:
        commands.append(["composer", "require", package, "--dev", "-W"])
    for package in config.packages:
        commands.append(["composer", "require", package])
    return commands


def site_install_command(config: InstallerConfig) -> list[str]:
    return [
        "drush",
        "site:install",
        config.install_profile,
        "--yes",
        f"--account-name={config.account_name}",
        f"--account-pass={config.account_pass}",
        f"--site-name={config.site_name}",
    ]


def content_commands(config: InstallerConfig) -> list[list[str]]:
    content = config.content
    roles = ",".join(content.roles)
    users = ["drush", "genu", str(content.users), "--kill"]
    nodes = ["drush", "genc", str(content.nodes), "-y", "--kill"]
    if roles:
        users.append(f"--roles={roles}")
        nodes.append(f"--roles={roles}")
    if content.skip_fields:
        nodes.append(f"--skip-fields={','.join(content.skip_fields)}")
    return [users, nodes]


def _run_ddev_sequence(
    ctx: InstallContext,
    commands: Iterable[list[str]],
) -> tuple[list[str], str | None]:
    """Run each ``ddev <args>`` in order.

    Returns the command lines that ran and the failing one (or None).
    """
    ran: list[str] = []
    for args in commands:
        receipt = ctx.registry.run("ddev", *args, cwd=ctx.project_dir)
        ran.append(receipt.action_id)
        if receipt.failed:
            logger.info("%s failed: %s", receipt.action_id, receipt.error)
            return ran, receipt.action_id
    return ran, None


def install_dependencies(ctx: InstallContext) -> StepResult:
    ctx.reporter.info("Installing Drupal dependencies with Composer...")

    ran, failed = _run_ddev_sequence(ctx, dependency_commands(ctx.config))
    if failed:
        return StepResult.failure(f"Failed to install: {failed}", commands=ran)

    ctx.reporter.success("✓ Drupal dependencies installed")
    return StepResult.success(commands=ran)


def install_site(ctx: InstallContext) -> StepResult:
    ctx.reporter.info("Installing Drupal site...")

    ran, failed = _run_ddev_sequence(ctx, [site_install_command(ctx.config)])
    if failed:
        return StepResult.failure("Failed to install Drupal site", commands=ran)

    ctx.reporter.success("Drupal site installed")
    ctx.reporter.info(
        f"Admin credentials: username={ctx.config.account_name}, "
        f"password={ctx.config.account_pass}"
    )
    return StepResult.success(commands=ran)


def enable_modules(ctx: InstallContext) -> StepResult:
    """Enable every configured module with a single ``drush en``."""
    ctx.reporter.info("Enabling Drupal modules...")
    if not ctx.config.modules:
        return StepResult.skipped("No modules configured")

    ran, failed = _run_ddev_sequence(ctx, [["drush", "en", "-y", *ctx.config.modules]])
    if failed:
        return StepResult.failure("Failed to enable modules", commands=ran)

    ctx.reporter.success("✓ Drupal modules enabled")
    return StepResult.success(commands=ran)


def import_config(ctx: InstallContext) -> StepResult:
    """Partial config import from config/sync, skipped if it is missing."""
    ctx.reporter.info("Importing Drupal config...")

    assert ctx.project is not None  # set by create_project
    if not ctx.project.config_sync_dir.is_dir():
        ctx.reporter.warning("Config directory not found at config/sync. Skipping config import.")
        return StepResult.skipped("config/sync not found")

    ran, failed = _run_ddev_sequence(ctx, [["drush", "config:import", "--partial", "--yes"]])
    if failed:
        return StepResult.failure("Failed to import config", commands=ran)

    ctx.reporter.success("✓ Drupal config imported")
    return StepResult.success(commands=ran)


def wants_content(answer: str) -> bool:
    """Only ``y`` (any case, surrounding whitespace ignored) means yes."""
    return answer.strip().lower() == AFFIRMATIVE


def generate_content(ctx: InstallContext) -> StepResult:
    """Generate users and nodes if the user opts in (default: no)."""
    if ctx.generate_content is None:
        confirmed = wants_content(ctx.prompt(CONTENT_PROMPT, "N"))
    else:
        confirmed = ctx.generate_content

    if not confirmed:
        ctx.reporter.success("✓ Drupal content generation skipped")
        return StepResult.skipped("Content generation skipped")

    ctx.reporter.info("Generating Drupal content...")
    users_cmd, nodes_cmd = content_commands(ctx.config)

    ran, failed = _run_ddev_sequence(ctx, [users_cmd])
    if failed:
        return StepResult.failure("Failed to generate users", commands=ran)

    more, failed = _run_ddev_sequence(ctx, [nodes_cmd])
    ran.extend(more)
    if failed:
        return StepResult.failure("Failed to generate content", commands=ran)

    ctx.reporter.success("✓ Drupal content generated")
    return StepResult.success(commands=ran)

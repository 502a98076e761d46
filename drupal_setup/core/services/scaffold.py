"""
Project scaffolding — Composer create-project, then DDEV config/start.

The scaffold step fixes the project directory; every step after it
runs inside that directory.
"""

from __future__ import annotations

import logging

from drupal_setup.core.engine.executor import InstallContext
from drupal_setup.core.models.project import DrupalProject, ProjectNameError
from drupal_setup.core.models.step import StepResult

logger = logging.getLogger(__name__)

PROJECT_NAME_PROMPT = "Enter your Drupal project name (e.g., 'my-drupal-site')"


def create_project(ctx: InstallContext) -> StepResult:
    """Ask for a project name and scaffold it with Composer.

    The name is validated before anything touches the filesystem or
    spawns a process.
    """
    ctx.reporter.info("Initializing Drupal project...")

    raw = ctx.project_name
    if raw is None:
        ctx.reporter.echo()
        raw = ctx.prompt(PROJECT_NAME_PROMPT, "")

    try:
        project = DrupalProject.from_input(raw, ctx.workdir)
    except ProjectNameError as e:
        return StepResult.failure(str(e))

    ctx.reporter.info(f"Creating Drupal project: {project.name}")
    receipt = ctx.registry.run(
        "composer",
        "create-project",
        ctx.config.recipe_spec,
        str(project.path),
    )
    if receipt.failed:
        return StepResult.failure("Failed to create Drupal project", commands=[receipt.action_id])

    ctx.project = project
    logger.info("Project directory: %s", project.path)
    ctx.reporter.success(f"✓ Drupal project '{project.name}' initialized")
    return StepResult.success(commands=[receipt.action_id])


def init_ddev_project(ctx: InstallContext) -> StepResult:
    """Write the DDEV config unless the project already has one."""
    ctx.reporter.info("Initializing DDEV project...")

    assert ctx.project is not None  # set by create_project
    if ctx.project.ddev_dir.is_dir():
        ctx.reporter.warning(".ddev directory already exists. Skipping DDEV init.")
        return StepResult.skipped(".ddev directory already exists")

    config = ctx.config
    receipt = ctx.registry.run(
        "ddev",
        "config",
        f"--project-type={config.project_type}",
        f"--docroot={config.docroot}",
        "--create-docroot",
        cwd=ctx.project_dir,
    )
    if receipt.failed:
        return StepResult.failure("Failed to initialize DDEV project", commands=[receipt.action_id])

    ctx.reporter.success("DDEV project initialized")
    return StepResult.success(commands=[receipt.action_id])


def start_ddev(ctx: InstallContext) -> StepResult:
    ctx.reporter.info("Starting DDEV...")
    receipt = ctx.registry.run("ddev", "start", cwd=ctx.project_dir)
    if receipt.failed:
        return StepResult.failure("Failed to start DDEV", commands=[receipt.action_id])

    ctx.reporter.success("DDEV started")
    return StepResult.success(commands=[receipt.action_id])

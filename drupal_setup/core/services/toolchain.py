"""
Toolchain steps — ensure Homebrew, the container backend and DDEV.

Each "ensure" step is idempotent: if the tool is already there it
reports success and runs nothing; otherwise it runs exactly one
``brew install``. Nothing is retried.
"""

from __future__ import annotations

import logging

from drupal_setup.core.engine.executor import InstallContext
from drupal_setup.core.models.step import StepResult
from drupal_setup.core.services.prerequisites import (
    DOCKER_FORMULA,
    brew_package_installed,
    command_exists,
)

logger = logging.getLogger(__name__)

HOMEBREW_DOCS = "https://docs.brew.sh/Installation"
DDEV_FORMULA = "ddev/ddev/ddev"
COLIMA_FORMULA = "colima"


def _brew_install(ctx: InstallContext, formula: str) -> bool:
    receipt = ctx.registry.run("brew", "install", formula)
    if receipt.failed:
        logger.info("brew install %s failed: %s", formula, receipt.error)
    return receipt.ok


# ── Homebrew ────────────────────────────────────────────────────


def ensure_homebrew(ctx: InstallContext) -> StepResult:
    """Homebrew is the one prerequisite the installer cannot install."""
    if not command_exists(ctx.registry, "brew"):
        ctx.reporter.error("Homebrew is not installed. Please install Homebrew first:")
        ctx.reporter.echo(f"See {HOMEBREW_DOCS} for instructions.")
        return StepResult.failure("Homebrew is required to continue")

    ctx.reporter.success("Homebrew is installed")
    ctx.reporter.echo()
    return StepResult.success()


# ── Docker Desktop ──────────────────────────────────────────────


def ensure_docker_desktop(ctx: InstallContext) -> StepResult:
    ctx.reporter.info("Checking Docker Desktop installation...")
    if brew_package_installed(ctx.registry, DOCKER_FORMULA):
        ctx.reporter.success("Docker Desktop is already installed")
        return StepResult.success()

    ctx.reporter.info("Docker Desktop not found. Installing via Homebrew...")
    if not _brew_install(ctx, DOCKER_FORMULA):
        return StepResult.failure(
            "Failed to install Docker Desktop",
            commands=[f"brew install {DOCKER_FORMULA}"],
        )

    ctx.reporter.success("Docker Desktop installed. Please start Docker Desktop from Applications.")
    ctx.reporter.warning("You may need to restart your terminal after starting Docker Desktop.")
    return StepResult.success(commands=[f"brew install {DOCKER_FORMULA}"])


def check_docker_running(ctx: InstallContext) -> StepResult:
    """``docker info`` exits non-zero while the daemon is down."""
    if ctx.registry.run("docker", "info", capture=True).ok:
        ctx.reporter.success("Docker is running")
        return StepResult.success()

    ctx.reporter.warning("Docker is not running. Please start Docker Desktop.")
    return StepResult.failure("Please start Docker Desktop and run this script again.")


# ── Colima ──────────────────────────────────────────────────────


def ensure_colima(ctx: InstallContext) -> StepResult:
    ctx.reporter.info("Checking Colima installation...")
    if command_exists(ctx.registry, "colima"):
        ctx.reporter.success("Colima is already installed")
        return StepResult.success()

    ctx.reporter.info("Colima not found. Installing via Homebrew...")
    if not _brew_install(ctx, COLIMA_FORMULA):
        return StepResult.failure(
            "Failed to install Colima",
            commands=[f"brew install {COLIMA_FORMULA}"],
        )

    ctx.reporter.success("Colima installed")
    return StepResult.success(commands=[f"brew install {COLIMA_FORMULA}"])


def _colima_running(ctx: InstallContext) -> bool:
    return ctx.registry.run("colima", "status", capture=True).ok


def ensure_colima_running(ctx: InstallContext) -> StepResult:
    """Start Colima if ``colima status`` says it is stopped, then re-check."""
    if _colima_running(ctx):
        ctx.reporter.success("Colima is running")
        return StepResult.success()

    ctx.reporter.warning("Colima is not running.")
    ctx.reporter.info("Starting Colima...")
    started = ctx.registry.run("colima", "start")
    if started.failed:
        ctx.reporter.error("Failed to start Colima")
    elif _colima_running(ctx):
        ctx.reporter.success("Colima started")
        return StepResult.success(commands=["colima start"])

    return StepResult.failure(
        "Failed to start Colima. Please start it manually and run this script again.",
        commands=["colima start"],
    )


# ── DDEV ────────────────────────────────────────────────────────


def ensure_ddev(ctx: InstallContext) -> StepResult:
    ctx.reporter.info("Checking DDEV installation...")
    if command_exists(ctx.registry, "ddev"):
        ctx.reporter.success("DDEV is already installed")
        return StepResult.success()

    ctx.reporter.info("DDEV not found. Installing via Homebrew...")
    if not _brew_install(ctx, DDEV_FORMULA):
        return StepResult.failure(
            "Failed to install DDEV",
            commands=[f"brew install {DDEV_FORMULA}"],
        )

    ctx.reporter.success("DDEV installed")
    return StepResult.success(commands=[f"brew install {DDEV_FORMULA}"])


def report_ddev_version(ctx: InstallContext) -> StepResult:
    """Print ``ddev version``. Informational; never fails the run."""
    if not command_exists(ctx.registry, "ddev"):
        return StepResult.skipped("ddev not on PATH")

    receipt = ctx.registry.run("ddev", "version", capture=True)
    if receipt.ok:
        ctx.reporter.success(f"DDEV version: {receipt.output.strip()}")
    else:
        logger.info("ddev version failed: %s", receipt.error)
    return StepResult.success()

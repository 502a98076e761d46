"""
CLI commands for installing and inspecting a Drupal project.

Thin wrappers over ``drupal_setup.core.use_cases.install`` and the
prerequisite / site URL services.
"""

from __future__ import annotations

import json
import sys
from functools import partial
from pathlib import Path

import click

from drupal_setup.adapters.registry import AdapterRegistry, build_default_registry
from drupal_setup.core.models.step import Provider
from drupal_setup.ui.cli.console import ClickReporter, click_prompt

PROVIDER_CHOICE = click.Choice([p.value for p in Provider], case_sensitive=False)


def _registry(ctx: click.Context, stdout_to_stderr: bool = False) -> AdapterRegistry:
    """Registry from the context (tests inject one) or the real tools."""
    registry = ctx.obj.get("registry")
    if registry is None:
        registry = build_default_registry(stdout_to_stderr=stdout_to_stderr)
        ctx.obj["registry"] = registry
    return registry


def _load_config(ctx: click.Context):
    from drupal_setup.core.config.loader import ConfigError, load_config

    try:
        return load_config(ctx.obj.get("config_path"))
    except ConfigError as e:
        click.secho(f"❌ {e}", fg="red", err=True)
        sys.exit(1)


# ── Install ─────────────────────────────────────────────────────


@click.command()
@click.option(
    "--provider",
    type=PROVIDER_CHOICE,
    default=None,
    help="Container backend (default: ask).",
)
@click.option("--project-name", default=None, help="Project name (default: ask).")
@click.option(
    "--generate-content/--no-generate-content",
    default=None,
    help="Generate sample users and nodes (default: ask).",
)
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Print a JSON summary at the end.")
@click.pass_context
def install(
    ctx: click.Context,
    provider: str | None,
    project_name: str | None,
    generate_content: bool | None,
    as_json: bool,
) -> None:
    """Install prerequisites and scaffold a Drupal 11 site on DDEV."""
    from drupal_setup.core.engine.executor import InstallContext
    from drupal_setup.core.services.prerequisites import BANNER
    from drupal_setup.core.services.provider import select_provider
    from drupal_setup.core.use_cases.install import run_install

    config = _load_config(ctx)
    # --json keeps stdout for the summary
    reporter = ClickReporter(quiet=ctx.obj.get("quiet", False), err=as_json)
    prompt = partial(click_prompt, err=as_json)

    reporter.echo(BANNER)
    reporter.echo("Drupal 11 Installation Script")
    reporter.echo(BANNER)
    reporter.echo()

    if provider is None:
        chosen = select_provider(prompt, reporter)
    else:
        chosen = Provider(provider.lower())

    context = InstallContext(
        registry=_registry(ctx, stdout_to_stderr=as_json),
        reporter=reporter,
        prompt=prompt,
        config=config,
        provider=chosen,
        workdir=Path.cwd(),
        project_name=project_name,
        generate_content=generate_content,
    )
    result = run_install(context)

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))

    sys.exit(result.exit_code)


# ── Check ───────────────────────────────────────────────────────


@click.command()
@click.option(
    "--provider",
    type=PROVIDER_CHOICE,
    default=Provider.DOCKER.value,
    show_default=True,
    help="Container backend to check for.",
)
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def check(ctx: click.Context, provider: str, as_json: bool) -> None:
    """Report which prerequisites are installed. Changes nothing."""
    from drupal_setup.core.services.prerequisites import check_prerequisites

    report = check_prerequisites(_registry(ctx), Provider(provider.lower()))

    if as_json:
        click.echo(json.dumps(report.to_dict(), indent=2))
        return

    click.secho("🧰 Prerequisites", fg="cyan", bold=True)
    for tool in report.tools:
        if tool.installed:
            click.secho(f"   ✓ {tool.label}", fg="green")
        else:
            colour = "red" if tool.required else "yellow"
            click.secho(f"   ✗ {tool.label} is not installed", fg=colour)
    click.echo()


# ── Site URL ────────────────────────────────────────────────────


@click.command("site-url")
@click.argument(
    "project_dir",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=".",
)
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def site_url(ctx: click.Context, project_dir: Path, as_json: bool) -> None:
    """Print the HTTPS URL of an existing DDEV project."""
    from drupal_setup.core.services.site_url import URL_HINT, describe_site_url

    url = describe_site_url(_registry(ctx), project_dir.resolve())

    if as_json:
        click.echo(json.dumps({"project_dir": str(project_dir), "site_url": url}, indent=2))
        if not url:
            sys.exit(1)
        return

    if not url:
        click.secho(f"❌ {URL_HINT}", fg="red")
        sys.exit(1)

    click.echo(url)

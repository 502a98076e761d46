"""
drupal-setup — CLI entrypoint.

Usage:
    drupal-setup install
    drupal-setup install --provider colima --project-name "My Site"
    drupal-setup check --json
    drupal-setup site-url ./my-site
"""

from __future__ import annotations

import os
from pathlib import Path

import click

from drupal_setup import __version__
from drupal_setup.core.observability.logging_config import resolve_level, setup_logging
from drupal_setup.ui.cli.install import check, install, site_url


@click.group()
@click.version_option(version=__version__, prog_name="drupal-setup")
@click.option("--verbose", "-v", is_flag=True, help="Log each command and step outcome (INFO).")
@click.option("--quiet", "-q", is_flag=True, help="Only print warnings, errors and the final result.")
@click.option("--debug", is_flag=True, help="Log at DEBUG, including every command line run.")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False, dir_okay=False),
    default=None,
    help="Path to drupal-setup.yml (default: ./drupal-setup.yml if present).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
) -> None:
    """drupal-setup — a local Drupal 11 site on DDEV, from zero."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["debug"] = debug
    ctx.obj["config_path"] = Path(config_path) if config_path else None

    setup_logging(
        level=resolve_level(
            debug=debug,
            verbose=verbose,
            quiet=quiet,
            env_level=os.environ.get("DRUPAL_SETUP_LOG_LEVEL"),
        ),
        log_file=os.environ.get("DRUPAL_SETUP_LOG_FILE"),
        log_file_level=os.environ.get("DRUPAL_SETUP_LOG_FILE_LEVEL"),
    )


cli.add_command(install)
cli.add_command(check)
cli.add_command(site_url)


if __name__ == "__main__":
    cli()

"""Allow ``python -m drupal_setup``."""

from drupal_setup.main import cli

cli()

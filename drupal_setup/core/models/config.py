"""
Installer configuration model.

Every field has a default, so an absent drupal-setup.yml yields the
stock Drupal 11 + DDEV setup. A config file only needs the keys it
wants to change.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

DEFAULT_DEV_PACKAGES: list[str] = ["drupal/core-dev"]

DEFAULT_PACKAGES: list[str] = [
    "drush/drush",
    "drupal/admin_toolbar",
    "drupal/token",
    "drupal/pathauto",
    "drupal/config_ignore",
    "drupal/config_split",
    "drupal/devel",
    "drupal/environment_indicator",
    "drupal/better_exposed_filters",
    "drupal/key",
    "drupal/webprofiler",
    "drupal/diff:^2.0@beta",
    "drupal/ultimate_cron:^2.0@beta",
]

DEFAULT_MODULES: list[str] = [
    "admin_toolbar",
    "config_split",
    "devel",
    "environment_indicator",
    "environment_indicator_ui",
    "environment_indicator_toolbar",
    "token",
    "pathauto",
    "config_ignore",
    "better_exposed_filters",
    "key",
    "webprofiler",
    "diff",
    "ultimate_cron",
    "devel_generate",
]


class ContentSettings(BaseModel):
    """Sample content generated by devel_generate."""

    users: int = Field(default=10, ge=0)
    nodes: int = Field(default=25, ge=0)
    roles: list[str] = Field(default_factory=lambda: ["content_editor"])
    skip_fields: list[str] = Field(default_factory=lambda: ["field_tags"])


class InstallerConfig(BaseModel):
    """What gets scaffolded, installed and enabled."""

    # Composer scaffold
    recipe: str = "drupal/recommended-project"
    core_constraint: str = "^11"

    # DDEV project
    project_type: str = "drupal11"
    docroot: str = "web"

    # drush site:install
    install_profile: str = "standard"
    site_name: str = "Super Awesome Site"
    account_name: str = "admin"
    account_pass: str = "admin"

    dev_packages: list[str] = Field(default_factory=lambda: list(DEFAULT_DEV_PACKAGES))
    packages: list[str] = Field(default_factory=lambda: list(DEFAULT_PACKAGES))
    modules: list[str] = Field(default_factory=lambda: list(DEFAULT_MODULES))

    content: ContentSettings = Field(default_factory=ContentSettings)

    @field_validator("account_name", "site_name", "recipe", "project_type", "docroot")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value

    @property
    def recipe_spec(self) -> str:
        """Composer package spec for create-project, e.g. ``drupal/recommended-project:^11``."""
        if not self.core_constraint:
            return self.recipe
        return f"{self.recipe}:{self.core_constraint}"

"""
Tests for the Drupal install phase — composer requires, drush, config, content.
"""

import shlex
from pathlib import Path

import pytest

from drupal_setup.core.models.config import (
    DEFAULT_DEV_PACKAGES,
    DEFAULT_MODULES,
    DEFAULT_PACKAGES,
    ContentSettings,
    InstallerConfig,
)
from drupal_setup.core.services.site_install import (
    CONTENT_PROMPT,
    content_commands,
    dependency_commands,
    enable_modules,
    generate_content,
    import_config,
    install_dependencies,
    install_site,
    site_install_command,
    wants_content,
)


def _ddev(*args: str) -> str:
    return shlex.join(["ddev", *args])


# ── Command builders ─────────────────────────────────────────────────


class TestDependencyCommands:
    def test_order(self):
        commands = dependency_commands(InstallerConfig())
        assert commands[0] == ["composer", "install"]
        assert commands[1] == ["composer", "require", "drupal/core-dev", "--dev", "-W"]
        assert [c[2] for c in commands[2:]] == DEFAULT_PACKAGES
        assert len(commands) == 1 + len(DEFAULT_DEV_PACKAGES) + len(DEFAULT_PACKAGES)

    def test_no_extra_packages(self):
        config = InstallerConfig(dev_packages=[], packages=[])
        assert dependency_commands(config) == [["composer", "install"]]


class TestSiteInstallCommand:
    def test_defaults(self):
        assert site_install_command(InstallerConfig()) == [
            "drush",
            "site:install",
            "standard",
            "--yes",
            "--account-name=admin",
            "--account-pass=admin",
            "--site-name=Super Awesome Site",
        ]

    def test_site_name_stays_one_argument(self):
        config = InstallerConfig(site_name="My Team's Site")
        assert site_install_command(config)[-1] == "--site-name=My Team's Site"


class TestContentCommands:
    def test_defaults(self):
        users, nodes = content_commands(InstallerConfig())
        assert users == ["drush", "genu", "10", "--kill", "--roles=content_editor"]
        assert nodes == [
            "drush",
            "genc",
            "25",
            "-y",
            "--kill",
            "--roles=content_editor",
            "--skip-fields=field_tags",
        ]

    def test_without_roles_or_skips(self):
        config = InstallerConfig(content=ContentSettings(users=2, nodes=3, roles=[], skip_fields=[]))
        users, nodes = content_commands(config)
        assert users == ["drush", "genu", "2", "--kill"]
        assert nodes == ["drush", "genc", "3", "-y", "--kill"]


# ── Steps ────────────────────────────────────────────────────────────


class TestInstallDependencies:
    def test_runs_all_in_project_dir(self, make_context, tools, tmp_path: Path):
        result = install_dependencies(make_context(project="site"))
        assert result.ok
        assert tools.ddev.commands[0] == "ddev composer install"
        assert tools.ddev.commands[1] == "ddev composer require drupal/core-dev --dev -W"
        assert len(tools.ddev.commands) == 1 + len(DEFAULT_DEV_PACKAGES) + len(DEFAULT_PACKAGES)
        assert {c.working_dir for c in tools.ddev.call_log} == {str(tmp_path / "site")}
        assert result.commands == tools.ddev.commands

    def test_stops_at_first_failure(self, make_context, tools):
        failing = "ddev composer require drupal/token"
        tools.ddev.set_failure(failing)
        result = install_dependencies(make_context(project="site"))
        assert result.failed
        assert result.message == f"Failed to install: {failing}"
        assert tools.ddev.commands[-1] == failing
        assert "ddev composer require drupal/pathauto" not in tools.ddev.commands

    def test_streams_output(self, make_context, tools):
        install_dependencies(make_context(project="site"))
        assert not any(c.action.capture for c in tools.ddev.call_log)


class TestInstallSite:
    def test_install(self, make_context, tools, reporter):
        result = install_site(make_context(project="site"))
        assert result.ok
        assert tools.ddev.commands == [
            _ddev(*site_install_command(InstallerConfig())),
        ]
        assert "Admin credentials: username=admin, password=admin" in reporter.messages("info")

    def test_failure(self, make_context, tools):
        tools.ddev.set_failure(_ddev(*site_install_command(InstallerConfig())))
        result = install_site(make_context(project="site"))
        assert result.failed
        assert result.message == "Failed to install Drupal site"


class TestEnableModules:
    def test_single_drush_en(self, make_context, tools):
        result = enable_modules(make_context(project="site"))
        assert result.ok
        assert tools.ddev.commands == [_ddev("drush", "en", "-y", *DEFAULT_MODULES)]

    def test_no_modules_skipped(self, make_context, tools):
        result = enable_modules(make_context(project="site", config=InstallerConfig(modules=[])))
        assert result.status == "skipped"
        assert tools.ddev.call_count == 0

    def test_failure(self, make_context, tools):
        tools.ddev.set_failure(_ddev("drush", "en", "-y", *DEFAULT_MODULES))
        assert enable_modules(make_context(project="site")).failed


class TestImportConfig:
    def test_imports_when_sync_dir_exists(self, make_context, tools, tmp_path: Path):
        (tmp_path / "site" / "config" / "sync").mkdir(parents=True)
        result = import_config(make_context(project="site"))
        assert result.ok
        assert tools.ddev.commands == ["ddev drush config:import --partial --yes"]

    def test_skipped_without_sync_dir(self, make_context, tools, reporter):
        result = import_config(make_context(project="site"))
        assert result.status == "skipped"
        assert tools.ddev.call_count == 0
        assert reporter.messages("warning") == [
            "Config directory not found at config/sync. Skipping config import."
        ]

    def test_failure(self, make_context, tools, tmp_path: Path):
        (tmp_path / "site" / "config" / "sync").mkdir(parents=True)
        tools.ddev.set_failure("ddev drush config:import --partial --yes")
        assert import_config(make_context(project="site")).failed


# ── Content ──────────────────────────────────────────────────────────


@pytest.mark.parametrize(
    ("answer", "expected"),
    [("y", True), ("Y", True), ("  y\n", True), ("", False), ("n", False), ("yes", False)],
)
def test_wants_content(answer: str, expected: bool):
    assert wants_content(answer) is expected


class TestGenerateContent:
    def test_default_answer_is_no(self, make_context, tools, reporter):
        ctx = make_context(project="site")
        result = generate_content(ctx)
        assert result.status == "skipped"
        assert ctx.prompt.questions == [CONTENT_PROMPT]
        assert tools.ddev.call_count == 0
        assert "✓ Drupal content generation skipped" in reporter.messages("success")

    def test_explicit_no(self, make_context, tools):
        assert generate_content(make_context("n", project="site")).status == "skipped"
        assert tools.ddev.call_count == 0

    def test_yes_generates_users_then_nodes(self, make_context, tools):
        result = generate_content(make_context("y", project="site"))
        assert result.ok
        users, nodes = content_commands(InstallerConfig())
        assert tools.ddev.commands == [_ddev(*users), _ddev(*nodes)]

    def test_flag_skips_prompt(self, make_context, tools):
        ctx = make_context(project="site", generate_content=True)
        assert generate_content(ctx).ok
        assert ctx.prompt.questions == []
        assert tools.ddev.call_count == 2

    def test_users_failure(self, make_context, tools):
        users, _ = content_commands(InstallerConfig())
        tools.ddev.set_failure(_ddev(*users))
        result = generate_content(make_context("y", project="site"))
        assert result.failed
        assert result.message == "Failed to generate users"
        assert tools.ddev.call_count == 1

    def test_nodes_failure(self, make_context, tools):
        _, nodes = content_commands(InstallerConfig())
        tools.ddev.set_failure(_ddev(*nodes))
        result = generate_content(make_context("y", project="site"))
        assert result.failed
        assert result.message == "Failed to generate content"
        assert len(result.commands) == 2

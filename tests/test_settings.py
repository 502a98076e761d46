"""
Tests for the settings rewrite and config sync payloads.
"""

from pathlib import Path

import pytest
import yaml

from drupal_setup.core.data import SYNC_PAYLOAD_FILES, DataRegistry, get_registry
from drupal_setup.core.services.settings import (
    DEFAULT_SYNC_FRAGMENT,
    PROJECT_SYNC_FRAGMENT,
    SettingsError,
    reroute_sync_directory,
    rewrite_settings_file,
    setup_settings,
    write_sync_payloads,
)

from tests.helpers import SETTINGS_PHP, make_project_tree


class TestRerouteSyncDirectory:
    def test_replaces_fragment(self):
        content = "$settings['config_sync_directory'] = 'sites/default/files/sync';\n"
        assert reroute_sync_directory(content) == (
            "$settings['config_sync_directory'] = '../config/sync';\n"
        )

    @pytest.mark.parametrize(
        ("prefix", "suffix"),
        [("", ""), ("<?php\n", "\n// end\n"), ("a" * 500, "ü€\r\n")],
    )
    def test_only_fragment_changes(self, prefix: str, suffix: str):
        content = prefix + DEFAULT_SYNC_FRAGMENT + suffix
        assert reroute_sync_directory(content) == prefix + PROJECT_SYNC_FRAGMENT + suffix

    def test_replaces_exactly_once(self):
        content = f"{DEFAULT_SYNC_FRAGMENT}\n{DEFAULT_SYNC_FRAGMENT}\n"
        result = reroute_sync_directory(content)
        assert result == f"{PROJECT_SYNC_FRAGMENT}\n{DEFAULT_SYNC_FRAGMENT}\n"

    def test_without_fragment_unchanged(self):
        content = "<?php\n$settings['hash_salt'] = 'x';\n"
        assert reroute_sync_directory(content) == content


class TestRewriteSettingsFile:
    def test_rewrites_in_place(self, tmp_path: Path):
        path = tmp_path / "settings.ddev.php"
        path.write_text(SETTINGS_PHP)
        assert rewrite_settings_file(path) is True
        text = path.read_text()
        assert "'../config/sync'" in text
        assert DEFAULT_SYNC_FRAGMENT not in text

    def test_no_change(self, tmp_path: Path):
        path = tmp_path / "settings.ddev.php"
        path.write_text("<?php\n")
        assert rewrite_settings_file(path) is False
        assert path.read_text() == "<?php\n"

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(SettingsError, match="Failed to read"):
            rewrite_settings_file(tmp_path / "missing.php")


class TestSyncPayloads:
    def test_registry_loads_both_files(self):
        payloads = DataRegistry().sync_payloads
        assert tuple(payloads) == SYNC_PAYLOAD_FILES

    def test_payloads_are_yaml(self):
        for name, text in get_registry().sync_payloads.items():
            assert isinstance(yaml.safe_load(text), dict), name

    def test_registry_is_singleton_and_read_only(self):
        assert get_registry() is get_registry()
        with pytest.raises(TypeError):
            get_registry().sync_payloads["x.yml"] = ""  # type: ignore[index]

    def test_write_verbatim(self, tmp_path: Path):
        written = write_sync_payloads(tmp_path, {"a.yml": "k: v\n", "b.yml": "x: 1\n"})
        assert [p.name for p in written] == ["a.yml", "b.yml"]
        assert (tmp_path / "a.yml").read_text() == "k: v\n"

    def test_write_failure(self, tmp_path: Path):
        with pytest.raises(SettingsError):
            write_sync_payloads(tmp_path / "missing", {"a.yml": "k: v\n"})


class TestSetupSettingsStep:
    def test_full_setup(self, make_context, tmp_path: Path):
        root = make_project_tree(tmp_path, "site")
        result = setup_settings(make_context(project="site"))
        assert result.ok

        settings = (root / "web/sites/default/settings.ddev.php").read_text()
        assert settings == SETTINGS_PHP.replace(DEFAULT_SYNC_FRAGMENT, PROJECT_SYNC_FRAGMENT)

        sync = root / "config" / "sync"
        payloads = get_registry().sync_payloads
        for name in SYNC_PAYLOAD_FILES:
            assert (sync / name).read_text(encoding="utf-8") == payloads[name]

    def test_missing_settings_is_fatal(self, make_context, tmp_path: Path):
        (tmp_path / "site").mkdir()
        result = setup_settings(make_context(project="site"))
        assert result.failed
        assert "settings.ddev.php" in result.message

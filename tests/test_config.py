"""Tests for the JSON-backed settings and profiles store."""

import json

from devapps_installer.domain.catalog import DEFAULT_APPS, AppEntry
from devapps_installer.domain.config import DEFAULTS, ConfigStore


def test_fresh_store_has_defaults(tmp_path):
    cfg = ConfigStore(base_dir=tmp_path / "cfg")
    assert cfg.get_defaults() == DEFAULTS
    assert cfg.get_catalog() == DEFAULT_APPS
    assert cfg.list_profiles() == []


def test_set_defaults_persists(tmp_path):
    ConfigStore(base_dir=tmp_path).set_defaults({"skip_updates": True, "pause_seconds": 0})
    d = ConfigStore(base_dir=tmp_path).get_defaults()
    assert d["skip_updates"] is True
    assert d["pause_seconds"] == 0
    assert d["yes"] is False


def test_catalog_override(tmp_path):
    (tmp_path / "settings.json").write_text(
        json.dumps({"catalog": {"7-Zip": "7zip.7zip", "Git": "Git.Git"}}), encoding="utf-8"
    )
    cfg = ConfigStore(base_dir=tmp_path)
    assert cfg.get_catalog() == (AppEntry("7-Zip", "7zip.7zip"), AppEntry("Git", "Git.Git"))


def test_profiles_round_trip_in_order(tmp_path):
    cfg = ConfigStore(base_dir=tmp_path)
    cfg.set_profile("web", ["OpenJS.NodeJS.LTS,Git.Git", "Git.Git"])
    again = ConfigStore(base_dir=tmp_path)
    assert again.list_profiles() == ["web"]
    assert again.get_profile("web") == ["OpenJS.NodeJS.LTS", "Git.Git"]
    assert again.get_profile("missing") is None
    assert not (tmp_path / "config.json.tmp").exists()


def test_corrupt_files_are_ignored(tmp_path):
    (tmp_path / "config.json").write_text("{not json", encoding="utf-8")
    (tmp_path / "settings.json").write_text("[1, 2]", encoding="utf-8")
    cfg = ConfigStore(base_dir=tmp_path)
    assert cfg.list_profiles() == []
    assert cfg.get_defaults()["pause_seconds"] == DEFAULTS["pause_seconds"]

"""Tests for configuration discovery and merging."""

import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import pytest
import yaml

from transdep.core.config_manager import USER_CONFIG_FILE, ConfigManager


class TestConfigManager:
    """Test the ConfigManager class."""

    def test_package_default(self):
        config = ConfigManager().load_package_default_config()

        assert config["analysis"]["collate_all"] is False
        assert config["analysis"]["filter"] is None
        assert config["analysis"]["ignored_references"] == ["NETStandard.Library"]
        assert config["assets"]["file_name"] == "project.assets.json"
        assert config["dotnet"]["executable"] == "dotnet"
        assert config["logging"]["level"] == "WARNING"

    def test_deep_merge(self):
        merged = ConfigManager().deep_merge(
            {"analysis": {"collate_all": False, "filter": None}, "logging": {"level": "WARNING"}},
            {"analysis": {"filter": "^Microsoft\\."}},
        )

        assert merged == {
            "analysis": {"collate_all": False, "filter": "^Microsoft\\."},
            "logging": {"level": "WARNING"},
        }

    def test_explicit_config_is_merged_onto_default(self, tmp_path):
        config_file = tmp_path / "custom.yaml"
        config_file.write_text(yaml.safe_dump({"dotnet": {"timeout": 60}}))

        config = ConfigManager().discover_and_load_config(str(config_file))

        assert config["dotnet"]["timeout"] == 60
        assert config["dotnet"]["executable"] == "dotnet"
        assert config["analysis"]["ignored_references"] == ["NETStandard.Library"]

    def test_missing_explicit_config_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError, match="Config file not found"):
            ConfigManager().discover_and_load_config(str(tmp_path / "missing.yaml"))

    def test_discovers_config_in_working_directory(self, tmp_path, monkeypatch):
        (tmp_path / USER_CONFIG_FILE).write_text(yaml.safe_dump({"analysis": {"collate_all": True}}))
        monkeypatch.chdir(tmp_path)

        config = ConfigManager().discover_and_load_config(None)

        assert config["analysis"]["collate_all"] is True

    def test_falls_back_to_package_default(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        config = ConfigManager().discover_and_load_config(None)

        assert config == ConfigManager().load_package_default_config()

    def test_empty_config_file(self, tmp_path):
        config_file = tmp_path / "empty.yaml"
        config_file.write_text("")

        assert ConfigManager().load_config(str(config_file)) == {}

    def test_arguments_override_config(self):
        manager = ConfigManager()
        config = manager.load_package_default_config()

        config = manager.merge_config_and_args(
            config,
            collate_all=True,
            name_filter="Serilog",
            output="report.json",
            restore=True,
            verbose=True,
        )

        assert config["analysis"]["collate_all"] is True
        assert config["analysis"]["filter"] == "Serilog"
        assert config["output"]["report_file"] == "report.json"
        assert config["dotnet"]["restore"] is True
        assert config["logging"]["level"] == "DEBUG"

    def test_unset_arguments_keep_config(self):
        manager = ConfigManager()
        config = manager.load_package_default_config()
        config["analysis"]["collate_all"] = True

        config = manager.merge_config_and_args(config)

        assert config["analysis"]["collate_all"] is True
        assert config["analysis"]["filter"] is None
        assert config["logging"]["level"] == "WARNING"

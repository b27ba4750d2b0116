"""
Тесты загрузки и валидации конфигурации.
"""

import pytest

from mac_detector.config import load_config
from mac_detector.core.config_schema import AppConfig, get_default_config, validate_config
from mac_detector.core.exceptions import ConfigError


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Пустая рабочая директория и чистое окружение."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("mac_detector.config.SEARCH_PATHS", ["mac_detector.yaml"])
    monkeypatch.delenv("MAC_DETECTOR_PLATFORM", raising=False)
    monkeypatch.delenv("MAC_DETECTOR_LOG_LEVEL", raising=False)


class TestConfigSchema:
    """Pydantic схемы."""

    def test_defaults(self):
        config = get_default_config()

        assert config.platform == "auto"
        assert config.linux.net_glob == "/sys/class/net/*"
        assert config.linux.alias_prefix == "bosh-interface-"
        assert config.windows.adapter_query == [
            "powershell",
            "-Command",
            "Get-NetAdapter | Select MacAddress,Name | ConvertTo-Json",
        ]
        assert config.windows.command_timeout is None
        assert config.windows.output_encoding == "oem"
        assert config.logging.level == "INFO"

    def test_invalid_platform(self):
        with pytest.raises(ConfigError) as exc_info:
            validate_config({"platform": "darwin"})

        assert exc_info.value.key == "platform"

    def test_glob_without_wildcard(self):
        with pytest.raises(ConfigError, match="linux.net_glob"):
            validate_config({"linux": {"net_glob": "/sys/class/net"}})

    @pytest.mark.parametrize("timeout", [0, -1, 601])
    def test_invalid_timeout(self, timeout):
        with pytest.raises(ConfigError):
            validate_config({"windows": {"command_timeout": timeout}})

    def test_empty_adapter_query(self):
        with pytest.raises(ConfigError):
            validate_config({"windows": {"adapter_query": []}})


class TestLoadConfig:
    """YAML + окружение."""

    def test_no_file_gives_defaults(self):
        assert load_config() == AppConfig()

    def test_yaml_merged_over_defaults(self, tmp_path):
        (tmp_path / "mac_detector.yaml").write_text(
            "platform: linux\n"
            "linux:\n"
            "  alias_prefix: agent-\n"
            "logging:\n"
            "  level: DEBUG\n",
            encoding="utf-8",
        )

        config = load_config()

        assert config.platform == "linux"
        assert config.linux.alias_prefix == "agent-"
        assert config.linux.net_glob == "/sys/class/net/*"
        assert config.logging.level == "DEBUG"

    def test_env_overrides_yaml(self, tmp_path, monkeypatch):
        (tmp_path / "mac_detector.yaml").write_text("platform: linux\n", encoding="utf-8")
        monkeypatch.setenv("MAC_DETECTOR_PLATFORM", "Windows")
        monkeypatch.setenv("MAC_DETECTOR_LOG_LEVEL", "warning")

        config = load_config()

        assert config.platform == "windows"
        assert config.logging.level == "WARNING"

    def test_env_level_with_empty_logging_section(self, tmp_path, monkeypatch):
        """Пустая секция logging: в YAML не ломает переопределение уровня."""
        (tmp_path / "mac_detector.yaml").write_text("logging:\n", encoding="utf-8")
        monkeypatch.setenv("MAC_DETECTOR_LOG_LEVEL", "debug")

        config = load_config()

        assert config.logging.level == "DEBUG"
        assert config.logging.console is True

    def test_explicit_override_wins(self, monkeypatch):
        monkeypatch.setenv("MAC_DETECTOR_PLATFORM", "windows")

        assert load_config(platform="linux").platform == "linux"

    def test_none_override_ignored(self):
        assert load_config(platform=None).platform == "auto"

    def test_missing_explicit_file(self, tmp_path):
        with pytest.raises(ConfigError) as exc_info:
            load_config(str(tmp_path / "missing.yaml"))

        assert exc_info.value.config_file.endswith("missing.yaml")

    def test_broken_yaml(self, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("linux: [unclosed\n", encoding="utf-8")

        with pytest.raises(ConfigError, match="YAML"):
            load_config(str(path))

    def test_non_mapping_root(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- linux\n- windows\n", encoding="utf-8")

        with pytest.raises(ConfigError):
            load_config(str(path))

    def test_invalid_value_reports_file(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("platform: solaris\n", encoding="utf-8")

        with pytest.raises(ConfigError) as exc_info:
            load_config(str(path))

        assert exc_info.value.config_file == str(path)

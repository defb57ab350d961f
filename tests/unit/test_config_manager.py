"""Tests for config manager."""

from pathlib import Path

import pytest

from bamboo_client.client.errors import ConfigurationError
from bamboo_client.config.manager import ConfigManager

CONFIG = """\
default_profile = "prod"

[profiles.prod]
url = "https://bamboo.example.com/"
token = "prod-token"

[profiles.staging]
url = "https://staging.example.com"
username = "admin"
password = "pass"
verify_ssl = false
timeout = 5.0
"""


@pytest.fixture
def loaded_manager(tmp_config: Path) -> ConfigManager:
    tmp_config.write_text(CONFIG)
    return ConfigManager(config_path=tmp_config)


class TestConfigManager:
    def test_load_missing_file(self, config_manager: ConfigManager):
        assert config_manager.config.profiles == {}
        assert config_manager.config.default_profile is None

    def test_load_profiles(self, loaded_manager: ConfigManager):
        assert set(loaded_manager.config.profiles) == {"prod", "staging"}
        assert loaded_manager.config.default_profile == "prod"
        staging = loaded_manager.config.profiles["staging"]
        assert staging.verify_ssl is False
        assert staging.timeout == 5.0

    def test_get_profile(self, loaded_manager: ConfigManager):
        p = loaded_manager.get_profile("staging")
        assert p is not None
        assert p.username == "admin"

    def test_get_default_profile(self, loaded_manager: ConfigManager):
        p = loaded_manager.get_profile()
        assert p is not None
        assert p.name == "prod"
        assert p.url == "https://bamboo.example.com"

    def test_get_unknown_profile(self, loaded_manager: ConfigManager):
        assert loaded_manager.get_profile("nope") is None

    def test_resolve_server_from_profile(self, loaded_manager: ConfigManager):
        resolved = loaded_manager.resolve_server()
        assert resolved.url == "https://bamboo.example.com"
        assert resolved.token == "prod-token"

    def test_resolve_server_keeps_profile_settings(self, loaded_manager: ConfigManager):
        resolved = loaded_manager.resolve_server("staging")
        assert resolved.name == "staging"
        assert resolved.password == "pass"
        assert resolved.verify_ssl is False
        assert resolved.timeout == 5.0

    def test_resolve_server_explicit_overrides(self, loaded_manager: ConfigManager):
        resolved = loaded_manager.resolve_server(url="https://other:8085/", token="new")
        assert resolved.url == "https://other:8085"
        assert resolved.token == "new"

    def test_resolve_server_env_vars(
        self, config_manager: ConfigManager, monkeypatch: pytest.MonkeyPatch,
    ):
        monkeypatch.setenv("BAMBOO_URL", "https://env-ci:8085")
        monkeypatch.setenv("BAMBOO_TOKEN", "env-token")
        resolved = config_manager.resolve_server()
        assert resolved.url == "https://env-ci:8085"
        assert resolved.token == "env-token"

    def test_resolve_server_env_profile(
        self, loaded_manager: ConfigManager, monkeypatch: pytest.MonkeyPatch,
    ):
        monkeypatch.setenv("BAMBOO_PROFILE", "staging")
        assert loaded_manager.resolve_server().url == "https://staging.example.com"

    def test_resolve_server_no_url_raises(self, config_manager: ConfigManager):
        with pytest.raises(ConfigurationError, match="No Bamboo server URL configured"):
            config_manager.resolve_server()

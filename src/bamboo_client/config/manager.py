"""Configuration manager: read TOML config, resolve server profiles."""

from __future__ import annotations

import os
from pathlib import Path

from bamboo_client.client.errors import ConfigurationError
from bamboo_client.config.constants import (
    CONFIG_FILE,
    DEFAULT_TIMEOUT,
    ENV_API_TOKEN,
    ENV_SERVER_PROFILE,
    ENV_SERVER_URL,
)
from bamboo_client.config.models import ClientConfig, ServerProfile

try:
    import tomllib
except ModuleNotFoundError:
    import tomli as tomllib


class ConfigManager:
    """Loads client configuration from disk and resolves server profiles."""

    def __init__(self, config_path: Path | None = None) -> None:
        self.config_path = config_path or CONFIG_FILE
        self._config: ClientConfig | None = None

    @property
    def config(self) -> ClientConfig:
        if self._config is None:
            self._config = self._load()
        return self._config

    def _load(self) -> ClientConfig:
        if not self.config_path.exists():
            return ClientConfig()
        raw = self.config_path.read_bytes()
        data = tomllib.loads(raw.decode())
        profiles: dict[str, ServerProfile] = {}
        for name, prof_data in data.get("profiles", {}).items():
            profiles[name] = ServerProfile(name=name, **prof_data)
        return ClientConfig(
            default_profile=data.get("default_profile"),
            profiles=profiles,
        )

    def get_profile(self, name: str | None = None) -> ServerProfile | None:
        if name:
            return self.config.profiles.get(name)
        default = self.config.default_profile
        if default:
            return self.config.profiles.get(default)
        return None

    def resolve_server(
        self,
        profile_name: str | None = None,
        url: str | None = None,
        token: str | None = None,
    ) -> ServerProfile:
        """Resolve the server connection.

        Precedence: explicit arguments > env vars > config profile.
        """
        env_profile = os.environ.get(ENV_SERVER_PROFILE)
        profile = self.get_profile(profile_name or env_profile)

        env_url = os.environ.get(ENV_SERVER_URL)
        env_token = os.environ.get(ENV_API_TOKEN)

        resolved_url = url or env_url or (profile.url if profile else None)
        resolved_token = token or env_token or (profile.token if profile else None)

        if not resolved_url:
            raise ConfigurationError(
                "No Bamboo server URL configured. Add a profile to "
                f"{self.config_path}, set {ENV_SERVER_URL} or pass url."
            )

        return ServerProfile(
            name=profile.name if profile else "default",
            url=resolved_url.rstrip("/"),
            token=resolved_token,
            username=profile.username if profile else None,
            password=profile.password if profile else None,
            verify_ssl=profile.verify_ssl if profile else True,
            timeout=profile.timeout if profile else DEFAULT_TIMEOUT,
        )

"""Default paths, environment variable names, and constants."""

from __future__ import annotations

import platformdirs

APP_NAME = "bamboo-client"
APP_AUTHOR = "bamboo-client"

CONFIG_DIR = platformdirs.user_config_path(APP_NAME, APP_AUTHOR)
CONFIG_FILE = CONFIG_DIR / "config.toml"

# Environment variable names
ENV_SERVER_URL = "BAMBOO_URL"
ENV_API_TOKEN = "BAMBOO_TOKEN"
ENV_SERVER_PROFILE = "BAMBOO_PROFILE"

# API defaults
DEFAULT_API_BASE = "/rest/api/latest/"
DEFAULT_TIMEOUT = 30.0

# ProjectPlans asks for at most this many plans in the expanded project
PROJECT_PLANS_MAX_RESULT = 1000

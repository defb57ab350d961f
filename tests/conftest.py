"""Shared test fixtures."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from bamboo_client.client.bamboo import BambooClient
from bamboo_client.config.manager import ConfigManager
from bamboo_client.config.models import ServerProfile

SERVER = "https://bamboo:8085"
BASE = f"{SERVER}/rest/api/latest"


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's own BAMBOO_* settings out of the tests."""
    for var in ("BAMBOO_URL", "BAMBOO_TOKEN", "BAMBOO_PROFILE"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def tmp_config(tmp_path: Path) -> Path:
    """Return a temporary config file path."""
    return tmp_path / "config.toml"


@pytest.fixture
def config_manager(tmp_config: Path) -> ConfigManager:
    """Return a ConfigManager pointed at a temp config file."""
    return ConfigManager(config_path=tmp_config)


@pytest.fixture
def sample_profile() -> ServerProfile:
    """Return a sample server profile for testing."""
    return ServerProfile(
        name="test-ci",
        url=SERVER,
        token="test-token",
    )


@pytest.fixture
def client(sample_profile: ServerProfile) -> Iterator[BambooClient]:
    with BambooClient(sample_profile) as c:
        yield c


@pytest.fixture
def mock_plans() -> list[dict]:
    """Sample plan entries as returned inside ``plans.plan``."""
    return [
        {
            "shortName": "Build",
            "shortKey": "BLD",
            "type": "chain",
            "enabled": True,
            "link": {"href": f"{BASE}/plan/PROJ-BLD", "rel": "self"},
            "key": "PROJ-BLD",
            "name": "Project - Build",
            "planKey": {"key": "PROJ-BLD"},
        },
        {
            "shortName": "Deploy",
            "shortKey": "DEP",
            "type": "chain",
            "enabled": False,
            "key": "PROJ-DEP",
            "name": "Project - Deploy",
            "planKey": {"key": "PROJ-DEP"},
        },
        {
            "shortName": "Nightly",
            "shortKey": "NIT",
            "type": "chain",
            "enabled": True,
            "key": "OPS-NIT",
            "name": "Ops - Nightly",
            "planKey": {"key": "OPS-NIT"},
        },
    ]


@pytest.fixture
def mock_projects() -> dict:
    """Sample ``GET project.json`` body."""
    return {
        "expand": "projects",
        "link": {"href": f"{BASE}/project", "rel": "self"},
        "projects": {
            "size": 2,
            "expand": "project",
            "start-index": 0,
            "max-result": 2,
            "project": [
                {
                    "key": "PROJ",
                    "name": "Project",
                    "description": "Main product",
                    "link": {"href": f"{BASE}/project/PROJ", "rel": "self"},
                },
                {"key": "OPS", "name": "Operations"},
            ],
        },
    }

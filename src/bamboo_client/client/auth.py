"""Authentication strategies for the Bamboo server."""

from __future__ import annotations

import logging
from collections.abc import Generator

import httpx

from bamboo_client.config.models import ServerProfile

logger = logging.getLogger(__name__)


class BearerTokenAuth(httpx.Auth):
    """Authenticate using a Bamboo personal access token."""

    def __init__(self, token: str) -> None:
        self.token = token

    def auth_flow(
        self, request: httpx.Request,
    ) -> Generator[httpx.Request, httpx.Response, None]:
        request.headers["Authorization"] = f"Bearer {self.token}"
        yield request


class BasicAuth(httpx.BasicAuth):
    """HTTP Basic auth wrapper."""


def resolve_auth(profile: ServerProfile) -> httpx.Auth | None:
    """Resolve authentication from a server profile.

    A personal access token wins over username/password. Both are sent in
    the ``Authorization`` header, so only one can be used per request.
    """
    if profile.token:
        if profile.username or profile.password:
            logger.warning(
                "Profile '%s' has both a token and basic credentials;"
                " using the token and ignoring username/password.",
                profile.name,
            )
        return BearerTokenAuth(profile.token)
    if profile.username and profile.password:
        logger.debug("Profile '%s' uses HTTP Basic auth", profile.name)
        return BasicAuth(profile.username, profile.password)
    return None

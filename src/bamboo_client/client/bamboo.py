"""Bamboo HTTP client."""

from __future__ import annotations

import logging
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel

from bamboo_client.client.auth import resolve_auth
from bamboo_client.config.constants import DEFAULT_API_BASE
from bamboo_client.config.manager import ConfigManager
from bamboo_client.config.models import ServerProfile

M = TypeVar("M", bound=BaseModel)

logger = logging.getLogger(__name__)


class BambooClient:
    """Synchronous HTTP transport for the Bamboo REST API.

    Accessors build requests with :meth:`new_request` and execute them with
    :meth:`do`. Status codes are not interpreted here; that is left to the
    caller.
    """

    def __init__(
        self,
        profile: ServerProfile,
        *,
        http: httpx.Client | None = None,
    ) -> None:
        self.profile = profile
        self.base_url = f"{profile.url}{DEFAULT_API_BASE}"
        # An injected client keeps its own auth, timeout and TLS settings;
        # requests still target base_url.
        self._owns_http = http is None
        self._client = http or httpx.Client(
            base_url=self.base_url,
            auth=resolve_auth(profile),
            verify=profile.verify_ssl,
            timeout=profile.timeout,
            headers={"Accept": "application/json"},
        )

    @classmethod
    def from_config(
        cls,
        profile_name: str | None = None,
        *,
        url: str | None = None,
        token: str | None = None,
        manager: ConfigManager | None = None,
    ) -> BambooClient:
        """Create a client from explicit options, env vars, or a config profile."""
        mgr = manager or ConfigManager()
        profile = mgr.resolve_server(profile_name=profile_name, url=url, token=token)
        return cls(profile)

    def close(self) -> None:
        if self._owns_http:
            self._client.close()

    def __enter__(self) -> BambooClient:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def new_request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: Any = None,
    ) -> httpx.Request:
        """Build a request for *path*, relative to the REST API base URL.

        A query string already present in *path* is merged with *params*.
        """
        return self._client.build_request(
            method, f"{self.base_url}{path}", params=params, json=json,
        )

    def do(
        self,
        request: httpx.Request,
        model: type[M] | None = None,
    ) -> tuple[httpx.Response, M | None]:
        """Send *request* and decode a 200 body into *model* when one is given.

        Network failures and malformed JSON propagate unchanged.
        """
        response = self._client.send(request)
        logger.debug(
            "%s %s -> %s", request.method, request.url, response.status_code,
        )
        if model is None or response.status_code != httpx.codes.OK:
            return response, None
        if not response.content:
            return response, model()
        return response, model.model_validate(response.json())

"""Request/response conventions shared by the accessors."""

from __future__ import annotations

import httpx

from bamboo_client.client.bamboo import BambooClient
from bamboo_client.client.errors import UnexpectedStatusError, ValidationError


class Service:
    """Base for resource accessors; holds the injected transport."""

    def __init__(self, client: BambooClient) -> None:
        self.client = client


def require(**arguments: str) -> None:
    """Raise ValidationError naming every empty argument."""
    empty = [name for name, value in arguments.items() if not value]
    if empty:
        raise ValidationError(*empty)


def expect_ok(response: httpx.Response, context: str) -> None:
    """Raise UnexpectedStatusError unless the server answered 200."""
    if response.status_code != httpx.codes.OK:
        raise UnexpectedStatusError(context, response)

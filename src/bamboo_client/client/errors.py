"""Typed exceptions raised by the accessors."""

from __future__ import annotations

import json

import httpx
import pydantic


class BambooClientError(Exception):
    """Base exception for bamboo-client."""


class ConfigurationError(BambooClientError):
    """No usable server configuration could be resolved."""


class ValidationError(BambooClientError):
    """A required argument was empty; no request was sent."""

    def __init__(self, *parameters: str) -> None:
        self.parameters = parameters
        names = " and ".join(parameters) or "argument"
        super().__init__(f"{names} cannot be empty")


class UnexpectedStatusError(BambooClientError):
    """The server answered with a status the operation does not accept."""

    def __init__(self, context: str, response: httpx.Response) -> None:
        self.context = context
        self.response = response
        self.status_code = response.status_code
        self.status = f"{response.status_code} {response.reason_phrase}".rstrip()
        super().__init__(f"{context} returned {self.status}")


# Failures of the transport or of decoding the body are not wrapped.
# pydantic.ValidationError is a body of the wrong shape, unrelated to the
# ValidationError above.
TRANSPORT_ERRORS: tuple[type[Exception], ...] = (
    httpx.TransportError,
    httpx.DecodingError,
    json.JSONDecodeError,
    pydantic.ValidationError,
)

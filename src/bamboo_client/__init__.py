"""Python client for the Bamboo CI server REST API."""

from bamboo_client.client.bamboo import BambooClient
from bamboo_client.client.errors import (
    TRANSPORT_ERRORS,
    BambooClientError,
    ConfigurationError,
    UnexpectedStatusError,
    ValidationError,
)
from bamboo_client.services.plan import PlanService
from bamboo_client.services.project import ProjectService

__version__ = "0.1.0"

__all__ = [
    "TRANSPORT_ERRORS",
    "BambooClient",
    "BambooClientError",
    "ConfigurationError",
    "PlanService",
    "ProjectService",
    "UnexpectedStatusError",
    "ValidationError",
]

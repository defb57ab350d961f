"""Pydantic data models for the Bamboo REST API."""

from bamboo_client.models.common import (
    BambooModel,
    CollectionMetadata,
    Index,
    Link,
    ResourceMetadata,
)
from bamboo_client.models.plan import (
    Plan,
    PlanCreateBranchOptions,
    PlanKey,
    PlanResponse,
    Plans,
    SpecDetail,
    SpecResponse,
)
from bamboo_client.models.project import (
    Project,
    ProjectInformation,
    ProjectPlansInformation,
    ProjectRepos,
    ProjectRepositoryResult,
    ProjectResponse,
    Projects,
)

__all__ = [
    "BambooModel",
    "CollectionMetadata",
    "Index",
    "Link",
    "Plan",
    "PlanCreateBranchOptions",
    "PlanKey",
    "PlanResponse",
    "Plans",
    "Project",
    "ProjectInformation",
    "ProjectPlansInformation",
    "ProjectRepos",
    "ProjectRepositoryResult",
    "ProjectResponse",
    "Projects",
    "ResourceMetadata",
    "SpecDetail",
    "SpecResponse",
]

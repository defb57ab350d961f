"""Project-related data models."""

from __future__ import annotations

from pydantic import Field

from bamboo_client.models.common import (
    BambooModel,
    CollectionMetadata,
    Index,
    Link,
    ResourceMetadata,
)


class Project(BambooModel):
    """A single project definition."""

    key: str = ""
    name: str = ""
    description: str = ""
    link: Link | None = None


class Projects(CollectionMetadata):
    """A collection of projects."""

    project_list: list[Project] = Field(default_factory=list, alias="project")


class ProjectResponse(ResourceMetadata):
    """Body of ``GET project.json``."""

    projects: Projects | None = None


class ProjectPlansInformation(BambooModel):
    """Number of plans in a project."""

    size: int = 0


class ProjectInformation(BambooModel):
    """Information on a single project."""

    key: str = ""
    name: str = ""
    description: str = ""
    num_plans: ProjectPlansInformation | None = Field(default=None, alias="plans")


class ProjectRepos(BambooModel):
    """A repository linked to a project."""

    id: int = 0
    name: str = ""
    url: str = ""
    location: str = ""
    icon: str = ""
    type: str = ""
    is_admin: bool = False


class ProjectRepositoryResult(Index):
    """Body of ``GET project/{key}/repositories``."""

    repositories: list[ProjectRepos] = Field(default_factory=list, alias="results")

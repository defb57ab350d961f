"""Plan-related data models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from bamboo_client.models.common import (
    BambooModel,
    CollectionMetadata,
    Link,
    ResourceMetadata,
)


class PlanKey(BambooModel):
    """The nested plan-key object of a plan."""

    key: str = ""


class Plan(BambooModel):
    """A single build plan."""

    short_name: str = ""
    short_key: str = ""
    type: str = ""
    enabled: bool = False
    link: Link | None = None
    key: str = ""
    name: str = ""
    plan_key: PlanKey | None = None


class Plans(CollectionMetadata):
    """A collection of plans."""

    plan_list: list[Plan] = Field(default_factory=list, alias="plan")


class PlanResponse(ResourceMetadata):
    """Body of ``GET plan.json`` and of an expanded project."""

    plans: Plans | None = None


class SpecDetail(BambooModel):
    """Specification code of a plan."""

    project_key: str = ""
    build_key: str = ""
    code: str = ""


class SpecResponse(BambooModel):
    """Body of ``GET plan/{key}/specs``."""

    spec: SpecDetail | None = None


class PlanCreateBranchOptions(BaseModel):
    """Optional parameters for creating a plan branch."""

    model_config = ConfigDict(frozen=True)

    vcs_branch: str | None = None

"""Common response models shared by the project and plan resources."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class BambooModel(BaseModel):
    """Immutable snapshot of a server record.

    Attributes are snake_case; the server's camelCase names are aliases and
    either form is accepted on construction.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    @model_validator(mode="before")
    @classmethod
    def drop_nulls(cls, data: Any) -> Any:
        # JSON null decodes to the field's zero value, like an absent field.
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data

    def to_wire(self) -> dict[str, Any]:
        """Dump using server field names, omitting fields left at their zero value."""
        return self.model_dump(by_alias=True, exclude_defaults=True)


class Link(BambooModel):
    """Hyperlink reference attached to a resource."""

    href: str = ""
    rel: str = ""


class ResourceMetadata(BambooModel):
    """Envelope fields present on every top-level resource."""

    expand: str = ""
    link: Link | None = None


class CollectionMetadata(BambooModel):
    """Envelope fields of a collection, e.g. its total size."""

    size: int = 0
    expand: str = ""
    start_index: int = Field(default=0, alias="start-index")
    max_result: int = Field(default=0, alias="max-result")


class Index(BambooModel):
    """Paging envelope used by the newer list endpoints."""

    size: int = 0
    start: int = 0
    limit: int = 0
    is_last_page: bool = False

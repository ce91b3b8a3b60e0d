from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Snake_case attributes, camelCase on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
    )


class CategoryRef(CamelModel):
    id: str
    name: str
    image: str | None = None
    description: str | None = None

    model_config = ConfigDict(from_attributes=True)


class SubCategoryRef(CamelModel):
    id: str
    name: str
    description: str | None = None

    model_config = ConfigDict(from_attributes=True)

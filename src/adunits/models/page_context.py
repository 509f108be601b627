"""Page facts supplied by the hosting render pipeline."""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator


class PageContext(BaseModel):
    """Conditional facts about the page being rendered."""

    model_config = {"frozen": True}

    is_home: bool = Field(default=False, description="Blog posts index")
    is_front_page: bool = Field(default=False, description="Site front page")
    is_admin: bool = Field(default=False, description="Admin screen")
    is_admin_bar_showing: bool = Field(default=False, description="Admin toolbar visible")
    is_singular: bool = Field(default=False, description="Any single post, page or attachment")
    is_single: bool = Field(default=False, description="Single post (implies singular)")
    is_post_type_archive: bool = Field(default=False, description="Post type archive")
    is_author: bool = Field(default=False, description="Author archive")
    is_date: bool = Field(default=False, description="Date archive")
    is_search: bool = Field(default=False, description="Search results")
    is_category: bool = Field(default=False, description="Category archive")
    is_tag: bool = Field(default=False, description="Tag archive")
    categories: list[str] = Field(default_factory=list, description="Category slugs of the current post")
    tags: list[str] = Field(default_factory=list, description="Tag slugs of the current post")
    queried_category: str | None = Field(default=None, description="Slug of the archived category")
    queried_tag: str | None = Field(default=None, description="Slug of the archived tag")

    @model_validator(mode="before")
    @classmethod
    def _single_is_singular(cls, data):
        if isinstance(data, dict) and data.get("is_single"):
            data = {**data, "is_singular": True}
        return data

"""Listing schemas - posts of one page plus pagination state (render contract)."""

from datetime import datetime

from pydantic import BaseModel, Field, computed_field

from bloglist.schemas.blog import BlogSummary


class PostSummary(BaseModel):
    id: int
    title: str
    url_name: str
    excerpt: str | None = None
    published_at: datetime | None = None
    tags: list[str] = Field(default_factory=list)
    categories: list[str] = Field(default_factory=list)



class Pager(BaseModel):
    """Page descriptor. current_page_index is zero-based: skip index * page_size items."""

    page_size: int
    current_page_index: int
    total_items: int
    total_pages: int
    next_url: str | None = None
    previous_url: str | None = None

    @computed_field
    @property
    def has_next(self) -> bool:
        return self.next_url is not None

    @computed_field
    @property
    def has_previous(self) -> bool:
        return self.previous_url is not None


class ListingPage(BaseModel):
    blog: BlogSummary
    kind: str
    name: str
    url: str
    term: str | None = None
    posts: list[PostSummary]
    pager: Pager

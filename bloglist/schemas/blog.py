"""Blog schemas - the listing root as seen by the API and the services."""

from pydantic import BaseModel, Field


class BlogSummary(BaseModel):
    id: int
    slug: str
    title: str
    page_size: int = Field(..., gt=0)

    model_config = {"from_attributes": True, "frozen": True}


class BlogResponse(BlogSummary):
    search_url: str
    tags_url: str
    categories_url: str

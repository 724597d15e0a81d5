"""
Backend ports the listing service depends on (Dependency Inversion).
Challenge: No process-wide index manager; backends are injected per request.
"""

from dataclasses import dataclass, field
from typing import Protocol

from bloglist.db.models.tag import TagGroup
from bloglist.schemas.blog import BlogSummary
from bloglist.schemas.listing import PostSummary


class UnknownSearchProviderError(LookupError):
    """Raised when a search provider name is not configured."""

    def __init__(self, provider: str):
        super().__init__(f"Unknown search provider: {provider!r}")
        self.provider = provider


@dataclass
class SearchCriteria:
    """Query against one index. raw_query() returns self so calls chain."""

    index: str
    provider: str | None = None
    query: str | None = None

    def raw_query(self, query: str) -> "SearchCriteria":
        self.query = query
        return self


@dataclass(frozen=True)
class SearchResult:
    """Matched posts for the requested window plus the total match count."""

    total: int
    posts: list[PostSummary] = field(default_factory=list)


@dataclass(frozen=True)
class TaggedContent:
    name: str
    url: str
    post_count: int
    posts: list[PostSummary] = field(default_factory=list)


class SearchBackend(Protocol):
    def create_criteria(self, provider: str | None = None) -> SearchCriteria: ...

    async def execute(self, criteria: SearchCriteria, skip: int = 0, limit: int = 10) -> SearchResult: ...


class TagLookup(Protocol):
    async def get_content_by_tag(
        self,
        root: BlogSummary,
        name: str,
        group: TagGroup,
        base_url: str,
        skip: int = 0,
        limit: int = 10,
    ) -> TaggedContent | None:
        """Posts of root carrying the named grouping; None when the grouping does not exist."""
        ...

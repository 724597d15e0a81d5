"""
Listing context - which virtual page (search, tag or category) is being rendered.
Built once at the HTTP boundary; services trust its kind afterwards.
"""

import enum
from dataclasses import dataclass

from bloglist.db.models.tag import TagGroup
from bloglist.schemas.blog import BlogSummary


class InvalidListingContextError(ValueError):
    """Programmer error: a listing was asked to render from an unusable context."""


class ListingKind(str, enum.Enum):
    SEARCH = "search"
    TAGS = "tags"
    CATEGORIES = "categories"

    @property
    def group(self) -> TagGroup | None:
        if self is ListingKind.TAGS:
            return TagGroup.TAGS
        if self is ListingKind.CATEGORIES:
            return TagGroup.CATEGORIES
        return None


@dataclass(frozen=True)
class ListingContext:
    kind: ListingKind
    name: str
    url: str
    root: BlogSummary

    def __post_init__(self):
        if not self.name or not self.name.strip():
            raise InvalidListingContextError(f"{self.kind.value} listing needs a name")
        if not self.url:
            raise InvalidListingContextError(f"{self.kind.value} listing needs a url")
        if self.root.page_size <= 0:
            raise InvalidListingContextError(f"blog {self.root.slug!r} has no usable page size")

    @classmethod
    def for_search(cls, root: BlogSummary, url: str) -> "ListingContext":
        return cls(ListingKind.SEARCH, "search", url, root)

    @classmethod
    def for_tag(cls, root: BlogSummary, name: str, url: str) -> "ListingContext":
        return cls(ListingKind.TAGS, name, url, root)

    @classmethod
    def for_category(cls, root: BlogSummary, name: str, url: str) -> "ListingContext":
        return cls(ListingKind.CATEGORIES, name, url, root)

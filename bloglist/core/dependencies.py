"""
FastAPI dependencies - injection for the content store, the search index and
the listing service (SOLID: Dependency Inversion).
"""

from typing import Annotated

from fastapi import Depends, HTTPException, status

from bloglist.config import get_settings
from bloglist.core.interfaces import SearchBackend, TagLookup
from bloglist.db.repositories.blog_repository import BlogRepository
from bloglist.db.repositories.post_repository import PostRepository
from bloglist.db.repositories.tag_repository import TagRepository
from bloglist.db.session import DbSession
from bloglist.schemas.blog import BlogSummary
from bloglist.search.elasticsearch_client import ElasticsearchSearchBackend, get_elasticsearch
from bloglist.services.content_service import ContentService
from bloglist.services.listing_service import ListingService


async def get_current_blog(session: DbSession, blog_slug: str) -> BlogSummary:
    """Resolve the blog root from the path. Raises 404 if it does not exist."""
    blog = await BlogRepository(session).get_by_slug(blog_slug)
    if not blog:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Blog not found")
    return BlogSummary.model_validate(blog)


async def get_search_backend() -> SearchBackend:
    settings = get_settings()
    client = await get_elasticsearch()
    return ElasticsearchSearchBackend(client, settings.posts_index, settings.search_providers)


def get_tag_lookup(session: DbSession) -> TagLookup:
    return ContentService(PostRepository(session), TagRepository(session))


def get_listing_service(
    search_backend: Annotated[SearchBackend, Depends(get_search_backend)],
    tag_lookup: Annotated[TagLookup, Depends(get_tag_lookup)],
) -> ListingService:
    return ListingService(search_backend, tag_lookup, get_settings().search_field_weights)


CurrentBlog = Annotated[BlogSummary, Depends(get_current_blog)]
ListingServiceDep = Annotated[ListingService, Depends(get_listing_service)]

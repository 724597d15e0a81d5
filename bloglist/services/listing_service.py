"""
Listing service - search, tag and category listings of a blog's posts.
Challenge: Turn (filter, page number) into a stable page or a redirect.
Design: Backends are injected; expected outcomes are return values, backend
failures propagate to the caller.
"""

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from urllib.parse import urlencode

from bloglist.core.interfaces import SearchBackend, TagLookup
from bloglist.schemas.listing import ListingPage, Pager, PostSummary
from bloglist.search.query_builder import build_search_query
from bloglist.services.context import InvalidListingContextError, ListingContext, ListingKind
from bloglist.services.pagination import build_pager, normalize_page, page_offset

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ListingRedirect:
    """Render nothing; send the client to the blog root instead."""

    blog_id: int
    blog_slug: str


def _page_link(url: str, **params) -> Callable[[int], str]:
    """Link builder for a listing url; extra params (e.g. term) precede p."""
    separator = "&" if "?" in url else "?"

    def link_for(page: int) -> str:
        return f"{url}{separator}{urlencode({**params, 'p': page})}"

    return link_for


class ListingService:
    """Builds listing pages for the search, tag and category virtual pages of a blog."""

    def __init__(
        self,
        search_backend: SearchBackend,
        tag_lookup: TagLookup,
        field_weights: Mapping[str, int] | None = None,
    ):
        self.search_backend = search_backend
        self.tag_lookup = tag_lookup
        self.field_weights = field_weights

    async def search(
        self,
        context: ListingContext,
        term: str | None,
        provider: str | None = None,
        page: int | None = None,
    ) -> ListingPage | ListingRedirect:
        """
        Full-text search within the blog. A missing or blank term redirects
        to the blog root without querying the index.
        """
        if context.kind is not ListingKind.SEARCH:
            raise InvalidListingContextError(f"expected a search listing, got {context.kind.value}")

        root = context.root
        if term is None or not term.strip():
            logger.info("search on blog %s without a term, redirecting to root", root.slug)
            return ListingRedirect(root.id, root.slug)

        page = normalize_page(page)
        query = build_search_query(term, root.id, self.field_weights)
        logger.debug("search blog=%s provider=%s query=%s", root.slug, provider, query)

        criteria = self.search_backend.create_criteria(provider).raw_query(query)
        result = await self.search_backend.execute(
            criteria, skip=page_offset(page, root.page_size), limit=root.page_size
        )

        pager = build_pager(result.total, page, root.page_size, _page_link(context.url, term=term))
        if pager is None:
            logger.info("search page %s out of range for term=%r (%s hits), redirecting", page, term, result.total)
            return ListingRedirect(root.id, root.slug)
        return self._page(context, result.posts, pager, term=term)

    async def list_by_group(self, context: ListingContext, page: int | None = None) -> ListingPage | ListingRedirect | None:
        """
        Posts carrying the tag or category named by the context. Returns None
        when the grouping does not exist at all; an existing grouping without
        posts yields a single empty page.
        """
        group = context.kind.group
        if group is None:
            raise InvalidListingContextError(f"{context.kind.value} listing is not a tag or category listing")

        root = context.root
        page = normalize_page(page)
        content = await self.tag_lookup.get_content_by_tag(
            root,
            context.name,
            group,
            group.base_url,
            skip=page_offset(page, root.page_size),
            limit=root.page_size,
        )
        if content is None:
            logger.info("%s %r not found on blog %s", group.value, context.name, root.slug)
            return None

        pager = build_pager(content.post_count, page, root.page_size, _page_link(context.url))
        if pager is None:
            logger.info("%s %r page %s out of range (%s posts), redirecting", group.value, context.name, page, content.post_count)
            return ListingRedirect(root.id, root.slug)
        return self._page(context, content.posts, pager, name=content.name, url=content.url)

    async def list_by_tag(self, context: ListingContext, page: int | None = None) -> ListingPage | ListingRedirect | None:
        if context.kind is not ListingKind.TAGS:
            raise InvalidListingContextError(f"expected a tags listing, got {context.kind.value}")
        return await self.list_by_group(context, page)

    async def list_by_category(self, context: ListingContext, page: int | None = None) -> ListingPage | ListingRedirect | None:
        if context.kind is not ListingKind.CATEGORIES:
            raise InvalidListingContextError(f"expected a categories listing, got {context.kind.value}")
        return await self.list_by_group(context, page)

    @staticmethod
    def _page(
        context: ListingContext,
        posts: list[PostSummary],
        pager: Pager,
        term: str | None = None,
        name: str | None = None,
        url: str | None = None,
    ) -> ListingPage:
        """Canonical grouping name and url win over the requested ones when given."""
        # At most one page of posts
        return ListingPage(
            blog=context.root,
            kind=context.kind.value,
            name=name or context.name,
            url=url or context.url,
            term=term,
            posts=list(posts)[: pager.page_size],
            pager=pager,
        )

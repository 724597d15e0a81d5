"""
Blog endpoints - blog root plus its search, tag and category listings.
Design: Thin controller; ListingService decides page vs redirect vs not found.
"""

from urllib.parse import quote

from fastapi import APIRouter, HTTPException, Query, Request, status
from fastapi.responses import RedirectResponse

from bloglist.core.dependencies import CurrentBlog, ListingServiceDep
from bloglist.core.interfaces import UnknownSearchProviderError
from bloglist.schemas.blog import BlogResponse
from bloglist.schemas.listing import ListingPage
from bloglist.services.content_service import blog_url
from bloglist.services.context import ListingContext
from bloglist.services.listing_service import ListingRedirect

router = APIRouter()


def _render(request: Request, outcome: ListingPage | ListingRedirect | None, not_found: str = "Not found"):
    if outcome is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=not_found)
    if isinstance(outcome, ListingRedirect):
        return RedirectResponse(
            str(request.url_for("get_blog", blog_slug=outcome.blog_slug)),
            status_code=status.HTTP_302_FOUND,
        )
    return outcome


def _listing_url(request: Request) -> str:
    """Path of the current virtual page, used as the base of pager links."""
    return quote(request.url.path)


@router.get("/{blog_slug}", response_model=BlogResponse, name="get_blog")
async def get_blog(blog: CurrentBlog):
    """Blog root. Listings redirect here when they cannot render a page."""
    base = blog_url(blog.slug)
    return BlogResponse(
        **blog.model_dump(),
        search_url=f"{base}/search",
        tags_url=f"{base}/tags",
        categories_url=f"{base}/categories",
    )


@router.get("/{blog_slug}/search", response_model=ListingPage, name="search_posts")
async def search_posts(
    request: Request,
    blog: CurrentBlog,
    service: ListingServiceDep,
    term: str | None = Query(None),
    provider: str | None = Query(None),
    p: int | None = Query(None),
):
    """Full-text search. GET /blogs/{slug}/search?term=hello&p=2"""
    context = ListingContext.for_search(blog, _listing_url(request))
    try:
        outcome = await service.search(context, term, provider=provider, page=p)
    except UnknownSearchProviderError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
    return _render(request, outcome)


@router.get("/{blog_slug}/tags/{name}", response_model=ListingPage, name="posts_by_tag")
async def posts_by_tag(request: Request, blog: CurrentBlog, service: ListingServiceDep, name: str, p: int | None = None):
    """Posts with a tag, newest first."""
    context = ListingContext.for_tag(blog, name, _listing_url(request))
    outcome = await service.list_by_tag(context, page=p)
    return _render(request, outcome, "Tag not found")


@router.get("/{blog_slug}/categories/{name}", response_model=ListingPage, name="posts_by_category")
async def posts_by_category(request: Request, blog: CurrentBlog, service: ListingServiceDep, name: str, p: int | None = None):
    context = ListingContext.for_category(blog, name, _listing_url(request))
    outcome = await service.list_by_category(context, page=p)
    return _render(request, outcome, "Category not found")

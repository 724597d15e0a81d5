"""
Blog API tests - listing pages, redirects and not-found over HTTP.
Blog fixture has page size 2 and three "python" posts.
"""

import pytest
from httpx import AsyncClient

from bloglist.config import get_settings
from bloglist.db.models import Blog

BASE = "/api/v1/blogs/dev-notes"


@pytest.mark.asyncio
async def test_blog_root(client: AsyncClient, blog):
    response = await client.get(BASE)
    assert response.status_code == 200
    data = response.json()
    assert data["slug"] == "dev-notes"
    assert data["page_size"] == 2
    assert data["search_url"] == f"{BASE}/search"


@pytest.mark.asyncio
async def test_unknown_blog_is_404(client: AsyncClient, blog):
    response = await client.get("/api/v1/blogs/missing/tags/python")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_tag_first_page(client: AsyncClient, blog):
    response = await client.get(f"{BASE}/tags/python")
    assert response.status_code == 200
    data = response.json()
    assert [p["title"] for p in data["posts"]] == ["Newest", "Middle"]
    assert data["posts"][1]["tags"] == ["Python"]
    assert data["posts"][1]["categories"] == ["news"]
    assert data["pager"] == {
        "page_size": 2,
        "current_page_index": 0,
        "total_items": 3,
        "total_pages": 2,
        "next_url": f"{BASE}/tags/python?p=2",
        "previous_url": None,
        "has_next": True,
        "has_previous": False,
    }


@pytest.mark.asyncio
async def test_tag_second_page(client: AsyncClient, blog):
    response = await client.get(f"{BASE}/tags/python", params={"p": 2})
    data = response.json()
    assert [p["title"] for p in data["posts"]] == ["Oldest"]
    assert data["pager"]["next_url"] is None
    assert data["pager"]["previous_url"] == f"{BASE}/tags/python?p=1"


@pytest.mark.asyncio
async def test_tag_lookup_ignores_case(client: AsyncClient, blog):
    response = await client.get(f"{BASE}/tags/PYTHON")
    assert response.status_code == 200
    assert response.json()["pager"]["total_items"] == 3


@pytest.mark.asyncio
async def test_tag_listing_uses_stored_tag_name(client: AsyncClient, blog):
    data = (await client.get(f"{BASE}/tags/PYTHON")).json()
    assert data["name"] == "Python"
    assert data["url"] == f"{BASE}/tags/Python"


@pytest.mark.asyncio
async def test_tag_page_out_of_range_redirects_to_blog(client: AsyncClient, blog):
    response = await client.get(f"{BASE}/tags/python", params={"p": 3})
    assert response.status_code == 302
    assert response.headers["location"] == f"http://test{BASE}"


@pytest.mark.asyncio
async def test_non_positive_page_is_first_page(client: AsyncClient, blog):
    first = (await client.get(f"{BASE}/tags/python")).json()
    zero = (await client.get(f"{BASE}/tags/python", params={"p": 0})).json()
    assert zero == first


@pytest.mark.asyncio
async def test_unknown_tag_is_404(client: AsyncClient, blog):
    response = await client.get(f"{BASE}/tags/nonexistent")
    assert response.status_code == 404
    assert response.json()["detail"] == "Tag not found"


@pytest.mark.asyncio
async def test_tag_without_posts_is_one_empty_page(client: AsyncClient, blog):
    response = await client.get(f"{BASE}/tags/empty")
    assert response.status_code == 200
    data = response.json()
    assert data["posts"] == []
    assert data["pager"]["total_items"] == 0
    assert data["pager"]["total_pages"] == 1


@pytest.mark.asyncio
async def test_category_listing(client: AsyncClient, blog):
    response = await client.get(f"{BASE}/categories/news")
    assert response.status_code == 200
    assert [p["title"] for p in response.json()["posts"]] == ["Middle"]

    # "python" is a tag, not a category
    response = await client.get(f"{BASE}/categories/python")
    assert response.status_code == 404
    assert response.json()["detail"] == "Category not found"


@pytest.mark.asyncio
async def test_search_without_term_redirects(client: AsyncClient, blog, search_backend):
    response = await client.get(f"{BASE}/search")
    assert response.status_code == 302
    assert response.headers["location"].endswith(BASE)
    assert search_backend.executed == []


@pytest.mark.asyncio
async def test_search_results(client: AsyncClient, blog, search_backend, post_factory):
    search_backend.posts = [post_factory(i) for i in range(1, 6)]
    response = await client.get(f"{BASE}/search", params={"term": "hello world", "p": 2})
    assert response.status_code == 200
    data = response.json()
    assert [p["id"] for p in data["posts"]] == [3, 4]
    assert data["term"] == "hello world"
    assert data["pager"]["next_url"] == f"{BASE}/search?term=hello+world&p=3"
    assert data["pager"]["previous_url"] == f"{BASE}/search?term=hello+world&p=1"

    criteria, skip, limit = search_backend.executed[0]
    assert criteria.query.startswith(f"+parentID:{blog.id} +(")
    assert (skip, limit) == (2, 2)


@pytest.mark.asyncio
async def test_search_page_out_of_range_redirects(client: AsyncClient, blog, search_backend, post_factory):
    search_backend.posts = [post_factory(1)]
    response = await client.get(f"{BASE}/search", params={"term": "hello", "p": 5})
    assert response.status_code == 302


@pytest.mark.asyncio
async def test_search_unknown_provider_is_400(client: AsyncClient, blog):
    response = await client.get(f"{BASE}/search", params={"term": "hello", "provider": "nope"})
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_new_blog_takes_configured_page_size(session):
    blog = Blog(slug="fresh", title="Fresh")
    session.add(blog)
    await session.flush()
    assert blog.page_size == get_settings().default_page_size

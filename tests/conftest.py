"""
Pytest fixtures - test DB, client, in-memory search backend.
Challenge: Isolated tests; no PostgreSQL or Elasticsearch needed.
"""

import os

# Settings are cached on first import; point them at the test database first
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///./test.db")

from datetime import datetime, timezone
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from bloglist.core.dependencies import get_search_backend
from bloglist.core.interfaces import (
    SearchCriteria,
    SearchResult,
    TaggedContent,
    UnknownSearchProviderError,
)
from bloglist.db.base import Base
from bloglist.db.models import Blog, Post, Tag, TagGroup
from bloglist.db.session import get_db
from bloglist.main import app
from bloglist.schemas.blog import BlogSummary
from bloglist.schemas.listing import PostSummary
from bloglist.search.elasticsearch_client import get_elasticsearch

TEST_DATABASE_URL = "sqlite+aiosqlite:///./test.db"


class FakeSearchBackend:
    """In-memory SearchBackend: every query matches all posts, windowed by skip/limit."""

    def __init__(self, posts: list[PostSummary] | None = None, providers: dict[str, str] | None = None):
        self.posts = list(posts or [])
        self.providers = providers if providers is not None else {"archive": "posts-archive"}
        self.executed: list[tuple[SearchCriteria, int, int]] = []
        self.error: Exception | None = None

    def create_criteria(self, provider: str | None = None) -> SearchCriteria:
        if provider is None:
            return SearchCriteria(index="posts")
        if provider not in self.providers:
            raise UnknownSearchProviderError(provider)
        return SearchCriteria(index=self.providers[provider], provider=provider)

    async def execute(self, criteria: SearchCriteria, skip: int = 0, limit: int = 10) -> SearchResult:
        self.executed.append((criteria, skip, limit))
        if self.error is not None:
            raise self.error
        return SearchResult(total=len(self.posts), posts=self.posts[skip : skip + limit])


class FakeTagLookup:
    """In-memory TagLookup keyed by (group, lower-cased name)."""

    def __init__(self):
        self.groupings: dict[tuple[TagGroup, str], list[PostSummary]] = {}
        self.calls: list[dict] = []

    def add(self, group: TagGroup, name: str, posts: list[PostSummary]) -> None:
        self.groupings[(group, name.lower())] = posts

    async def get_content_by_tag(self, root, name, group, base_url, skip=0, limit=10):
        self.calls.append({"root": root, "name": name, "group": group, "base_url": base_url, "skip": skip, "limit": limit})
        posts = self.groupings.get((group, name.lower()))
        if posts is None:
            return None
        return TaggedContent(
            name=name,
            url=f"/api/v1/blogs/{root.slug}/{base_url}/{name}",
            post_count=len(posts),
            posts=posts[skip : skip + limit],
        )


class FakeElasticsearch:
    """Stands in for AsyncElasticsearch where only ping/search/close are used."""

    def __init__(self, response: dict | None = None, alive: bool = True):
        self.response = response or {"hits": {"total": {"value": 0, "relation": "eq"}, "hits": []}}
        self.alive = alive
        self.search_calls: list[dict] = []

    async def search(self, **kwargs):
        self.search_calls.append(kwargs)
        return self.response

    async def ping(self) -> bool:
        return self.alive

    async def close(self) -> None:
        pass


def make_post(id: int, title: str | None = None, **extra) -> PostSummary:
    return PostSummary(id=id, title=title or f"Post {id}", url_name=f"post-{id}", **extra)


@pytest.fixture
def post_factory():
    return make_post


@pytest.fixture
def search_backend() -> FakeSearchBackend:
    return FakeSearchBackend()


@pytest.fixture
def tag_lookup() -> FakeTagLookup:
    return FakeTagLookup()


@pytest.fixture
def fake_es() -> FakeElasticsearch:
    return FakeElasticsearch()


@pytest.fixture
def blog_root() -> BlogSummary:
    return BlogSummary(id=10, slug="dev-notes", title="Dev Notes", page_size=10)


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine(TEST_DATABASE_URL, echo=False)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def session(engine) -> AsyncGenerator[AsyncSession, None]:
    async_session = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with async_session() as s:
        yield s


@pytest_asyncio.fixture
async def client(session: AsyncSession, search_backend: FakeSearchBackend, fake_es: FakeElasticsearch):
    async def override_get_db():
        yield session

    async def override_get_elasticsearch():
        return fake_es

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_search_backend] = lambda: search_backend
    app.dependency_overrides[get_elasticsearch] = override_get_elasticsearch
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
    app.dependency_overrides.clear()


def _at(day: int) -> datetime:
    return datetime(2026, 1, day, 12, 0, tzinfo=timezone.utc)


@pytest_asyncio.fixture
async def blog(session: AsyncSession) -> Blog:
    """
    Blog with page size 2:
      tag "python" on three posts (plus one post of another blog),
      tag "empty" on none, category "news" on one post.
    """
    blog = Blog(slug="dev-notes", title="Dev Notes", page_size=2)
    other = Blog(slug="other", title="Other", page_size=2)
    session.add_all([blog, other])
    await session.flush()

    python = Tag(name="Python", group=TagGroup.TAGS.value)
    empty = Tag(name="empty", group=TagGroup.TAGS.value)
    news = Tag(name="news", group=TagGroup.CATEGORIES.value)
    session.add_all([python, empty, news])
    await session.flush()

    session.add_all(
        [
            Post(blog_id=blog.id, title="Oldest", url_name="oldest", published_at=_at(1), tags=[python]),
            Post(blog_id=blog.id, title="Middle", url_name="middle", published_at=_at(2), tags=[python, news]),
            Post(blog_id=blog.id, title="Newest", url_name="newest", published_at=_at(3), tags=[python]),
            Post(blog_id=other.id, title="Elsewhere", url_name="elsewhere", published_at=_at(4), tags=[python]),
        ]
    )
    await session.flush()
    await session.refresh(blog)
    return blog

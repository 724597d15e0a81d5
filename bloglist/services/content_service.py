"""
Content service - tag and category lookups against the content store.
Implements the TagLookup port with repositories (easy to swap for a fake in tests).
"""

from urllib.parse import quote

from bloglist.core.interfaces import TaggedContent
from bloglist.db.models.post import Post
from bloglist.db.models.tag import TagGroup
from bloglist.db.repositories.post_repository import PostRepository
from bloglist.db.repositories.tag_repository import TagRepository
from bloglist.schemas.blog import BlogSummary
from bloglist.schemas.listing import PostSummary

BLOGS_PATH = "/api/v1/blogs"


def blog_url(slug: str) -> str:
    return f"{BLOGS_PATH}/{quote(slug, safe='')}"


def post_to_summary(post: Post) -> PostSummary:
    """Map model to listing entry; tags and categories split by group."""
    return PostSummary(
        id=post.id,
        title=post.title,
        url_name=post.url_name,
        excerpt=post.excerpt,
        published_at=post.published_at,
        tags=post.tag_names,
        categories=post.category_names,
    )


class ContentService:
    def __init__(self, post_repo: PostRepository, tag_repo: TagRepository):
        self.post_repo = post_repo
        self.tag_repo = tag_repo

    async def get_content_by_tag(
        self,
        root: BlogSummary,
        name: str,
        group: TagGroup,
        base_url: str,
        skip: int = 0,
        limit: int = 10,
    ) -> TaggedContent | None:
        """Window of root's posts under the named grouping, or None if no such grouping exists."""
        tag = await self.tag_repo.get_by_name(name, group)
        if tag is None:
            return None
        count = await self.post_repo.count_tagged(root.id, tag.id)
        posts = await self.post_repo.get_tagged(root.id, tag.id, skip=skip, limit=limit) if count else []
        return TaggedContent(
            name=tag.name,
            url=f"{blog_url(root.slug)}/{base_url}/{quote(tag.name, safe='')}",
            post_count=count,
            posts=[post_to_summary(p) for p in posts],
        )

"""
Post repository - posts of one blog carrying a given tag.
Challenge: Count and window in the database instead of loading every post.
"""

from sqlalchemy import func, select
from sqlalchemy.orm import selectinload

from bloglist.db.models.post import Post
from bloglist.db.models.tag import Tag
from bloglist.db.repositories.base_repository import BaseRepository


class PostRepository(BaseRepository[Post]):
    def __init__(self, session):
        super().__init__(session, Post)

    @staticmethod
    def _tagged(blog_id: int, tag_id: int):
        return select(Post).where(Post.blog_id == blog_id, Post.tags.any(Tag.id == tag_id))

    async def count_tagged(self, blog_id: int, tag_id: int) -> int:
        stmt = select(func.count()).select_from(self._tagged(blog_id, tag_id).subquery())
        return (await self.session.execute(stmt)).scalar_one()

    async def get_tagged(self, blog_id: int, tag_id: int, skip: int = 0, limit: int = 10) -> list[Post]:
        """Newest first; tags loaded eagerly to avoid lazy loads in async context."""
        result = await self.session.execute(
            self._tagged(blog_id, tag_id)
            .options(selectinload(Post.tags))
            .order_by(Post.published_at.desc(), Post.id.desc())
            .offset(skip)
            .limit(limit)
        )
        return list(result.scalars().all())

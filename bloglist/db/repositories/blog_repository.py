"""
Blog repository - resolves listing roots by their URL slug.
"""

from sqlalchemy import select

from bloglist.db.models.blog import Blog
from bloglist.db.repositories.base_repository import BaseRepository


class BlogRepository(BaseRepository[Blog]):
    def __init__(self, session):
        super().__init__(session, Blog)

    async def get_by_slug(self, slug: str) -> Blog | None:
        result = await self.session.execute(select(Blog).where(Blog.slug == slug))
        return result.scalar_one_or_none()

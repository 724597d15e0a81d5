"""
Tag repository - grouping lookups (tags and categories).
"""

from sqlalchemy import func, select

from bloglist.db.models.tag import Tag, TagGroup
from bloglist.db.repositories.base_repository import BaseRepository


class TagRepository(BaseRepository[Tag]):
    def __init__(self, session):
        super().__init__(session, Tag)

    async def get_by_name(self, name: str, group: TagGroup) -> Tag | None:
        """Case-insensitive match within one group."""
        result = await self.session.execute(
            select(Tag).where(Tag.group == group.value, func.lower(Tag.name) == name.lower())
        )
        return result.scalars().first()

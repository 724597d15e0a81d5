"""
Tag model - named grouping (tag or category) posts are classified under.
"""

import enum

from sqlalchemy import String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from bloglist.db.base import Base


class TagGroup(str, enum.Enum):
    """Grouping kinds. The value doubles as the URL segment of the listing."""

    TAGS = "tags"
    CATEGORIES = "categories"

    @property
    def base_url(self) -> str:
        return self.value


class Tag(Base):
    __tablename__ = "tags"
    __table_args__ = (UniqueConstraint("group", "name", name="uq_tags_group_name"),)

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    group: Mapped[str] = mapped_column(String(50), nullable=False, default=TagGroup.TAGS.value)

    def __repr__(self) -> str:
        return f"<Tag(id={self.id}, group={self.group}, name={self.name})>"

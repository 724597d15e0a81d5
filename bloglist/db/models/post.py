"""
Post model - blog post, child of a blog, classified by tags and categories.
"""

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import Column, ForeignKey, String, Table, Text, DateTime, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from bloglist.db.base import Base
from bloglist.db.models.tag import Tag, TagGroup

if TYPE_CHECKING:
    from bloglist.db.models.blog import Blog


post_tags = Table(
    "post_tags",
    Base.metadata,
    Column("post_id", ForeignKey("posts.id", ondelete="CASCADE"), primary_key=True),
    Column("tag_id", ForeignKey("tags.id", ondelete="CASCADE"), primary_key=True),
)


class Post(Base):
    """Post entity. Tags and categories share one association (Tag.group tells them apart)."""

    __tablename__ = "posts"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    blog_id: Mapped[int] = mapped_column(ForeignKey("blogs.id"), nullable=False, index=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    url_name: Mapped[str] = mapped_column(String(255), nullable=False)
    excerpt: Mapped[str | None] = mapped_column(Text, nullable=True)
    markdown: Mapped[str | None] = mapped_column(Text, nullable=True)
    published_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), index=True
    )

    blog: Mapped["Blog"] = relationship("Blog", back_populates="posts")
    tags: Mapped[list[Tag]] = relationship(Tag, secondary=post_tags, lazy="selectin")

    @property
    def tag_names(self) -> list[str]:
        return [t.name for t in self.tags if t.group == TagGroup.TAGS.value]

    @property
    def category_names(self) -> list[str]:
        return [t.name for t in self.tags if t.group == TagGroup.CATEGORIES.value]

    def __repr__(self) -> str:
        return f"<Post(id={self.id}, title={self.title})>"

"""
Blog model - the listing root every post, tag page and search page hangs off.
"""

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import String, DateTime, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from bloglist.config import get_settings
from bloglist.db.base import Base

if TYPE_CHECKING:
    from bloglist.db.models.post import Post


class Blog(Base):
    """Blog root. Owns its posts and the page size used by every listing under it."""

    __tablename__ = "blogs"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    slug: Mapped[str] = mapped_column(String(255), unique=True, index=True, nullable=False)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    page_size: Mapped[int] = mapped_column(nullable=False, default=lambda: get_settings().default_page_size)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())

    posts: Mapped[list["Post"]] = relationship("Post", back_populates="blog", lazy="noload")

    def __repr__(self) -> str:
        return f"<Blog(id={self.id}, slug={self.slug})>"

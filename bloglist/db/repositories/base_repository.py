"""
Base repository - session and model shared by the content repositories.
"""

from typing import Generic, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession

from bloglist.db.base import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """Generic async repository. Subclasses add model-specific lookups."""

    def __init__(self, session: AsyncSession, model: type[ModelType]):
        self.session = session
        self.model = model

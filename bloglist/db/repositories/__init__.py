# Repository pattern: read access to the content store

from bloglist.db.repositories.blog_repository import BlogRepository
from bloglist.db.repositories.post_repository import PostRepository
from bloglist.db.repositories.tag_repository import TagRepository

__all__ = ["BlogRepository", "PostRepository", "TagRepository"]

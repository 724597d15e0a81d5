from bloglist.db.models.blog import Blog
from bloglist.db.models.post import Post, post_tags
from bloglist.db.models.tag import Tag, TagGroup

__all__ = ["Blog", "Post", "Tag", "TagGroup", "post_tags"]

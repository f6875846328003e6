"""
BlogPost GraphQL type definitions
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

if TYPE_CHECKING:
    from ...database.models import BlogPosts


@strawberry.type
class BlogPost:
    """Blog post type for GraphQL API."""

    id: int
    title: str
    description: str
    image_url: str | None
    user_id: int

    @classmethod
    def from_model(cls, post: BlogPosts) -> BlogPost:
        return cls(
            id=post.id,
            title=post.title,
            description=post.description,
            image_url=post.image_url,
            user_id=post.user_id,
        )

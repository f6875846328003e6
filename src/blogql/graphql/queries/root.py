"""
Root GraphQL query definitions
"""

import strawberry

from ..types.blog_post import BlogPost
from ..types.user import User


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field
    async def get_user(self, info: strawberry.Info, id: int) -> User | None:
        """Get a user by ID."""
        from ..resolvers.user import resolve_user_by_id

        return await resolve_user_by_id(info, id)

    @strawberry.field
    async def get_blog_post(self, info: strawberry.Info, id: int) -> BlogPost | None:
        """Get a blog post by ID."""
        from ..resolvers.blog_post import resolve_blog_post_by_id

        return await resolve_blog_post_by_id(info, id)

    @strawberry.field
    async def get_blog_posts(self, info: strawberry.Info) -> list[BlogPost | None] | None:
        """Get all blog posts."""
        from ..resolvers.blog_post import resolve_blog_posts

        return await resolve_blog_posts(info)

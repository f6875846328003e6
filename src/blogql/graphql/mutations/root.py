"""
Root GraphQL mutation definitions
"""

import strawberry

from ..types.blog_post import BlogPost


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    # Account mutations
    @strawberry.mutation
    async def register(
        self,
        info: strawberry.Info,
        first_name: str,
        last_name: str,
        email: str,
        password: str,
    ) -> str | None:
        """Register a user and return the new user id."""
        from ..resolvers.auth import register

        return await register(info, first_name, last_name, email, password)

    @strawberry.mutation
    async def login(self, info: strawberry.Info, email: str, password: str) -> str | None:
        """Log in and return a signed access token."""
        from ..resolvers.auth import login

        return await login(info, email, password)

    # Blog post mutations
    @strawberry.mutation(name="createBlogPost")
    async def create_blog_post(
        self,
        info: strawberry.Info,
        title: str,
        description: str,
        image_url: str | None = None,
    ) -> BlogPost | None:
        """Create a blog post owned by the current user."""
        from ..resolvers.blog_post import create_blog_post

        return await create_blog_post(info, title, description, image_url)

    @strawberry.mutation(name="updateBlogPost")
    async def update_blog_post(
        self,
        info: strawberry.Info,
        id: int,
        title: str,
        description: str,
        image_url: str | None = None,
    ) -> BlogPost | None:
        """Update a blog post owned by the current user."""
        from ..resolvers.blog_post import update_blog_post

        return await update_blog_post(info, id, title, description, image_url)

    @strawberry.mutation(name="deleteBlogPost")
    async def delete_blog_post(self, info: strawberry.Info, id: int) -> bool | None:
        """Delete a blog post owned by the current user."""
        from ..resolvers.blog_post import delete_blog_post

        return await delete_blog_post(info, id)

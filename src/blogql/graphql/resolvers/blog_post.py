from __future__ import annotations

import strawberry
from sqlalchemy import delete, insert, select, update

from ...database.models import BlogPosts
from ...errors import AuthorizationError, NotFoundError
from ...logging import get_logger
from ..access_control import get_context, require_user_id
from ..types.blog_post import BlogPost

logger = get_logger(__name__)

NOT_FOUND_OR_UNAUTHORIZED = "Blog post not found or unauthorized."


# Query resolvers
async def resolve_blog_posts(info: strawberry.Info) -> list[BlogPost]:
    """Resolve every blog post in insertion order."""
    async with get_context(info).database.session() as session:
        result = await session.scalars(select(BlogPosts).order_by(BlogPosts.id))
        posts = result.all()

    return [BlogPost.from_model(post) for post in posts]


async def resolve_blog_post_by_id(info: strawberry.Info, id: int) -> BlogPost:
    async with get_context(info).database.session() as session:
        result = await session.execute(select(BlogPosts).where(BlogPosts.id == id))
        post = result.scalar_one_or_none()

    if post is None:
        raise NotFoundError("Blog post not found.")

    return BlogPost.from_model(post)


# Mutation resolvers
async def create_blog_post(
    info: strawberry.Info,
    title: str,
    description: str,
    image_url: str | None,
) -> BlogPost:
    """
    Create a blog post owned by the authenticated user.
    """
    user_id = require_user_id(info)

    async with get_context(info).database.session() as session:
        result = await session.scalars(
            insert(BlogPosts).returning(BlogPosts),
            [
                {
                    "title": title,
                    "description": description,
                    "image_url": image_url,
                    "user_id": user_id,
                }
            ],
        )
        post = result.one()

    logger.info("Blog post created", post_id=post.id, title=post.title)
    return BlogPost.from_model(post)


async def update_blog_post(
    info: strawberry.Info,
    id: int,
    title: str,
    description: str,
    image_url: str | None,
) -> BlogPost:
    """
    Update a blog post owned by the authenticated user.

    Ownership is part of the WHERE clause, so a post owned by someone else
    and a missing post produce the same error.
    """
    user_id = require_user_id(info)

    async with get_context(info).database.session() as session:
        stmt = (
            update(BlogPosts)
            .where(BlogPosts.id == id, BlogPosts.user_id == user_id)
            .values(title=title, description=description, image_url=image_url)
            .returning(BlogPosts)
            .execution_options(synchronize_session=False)
        )
        result = await session.scalars(stmt)
        post = result.one_or_none()

    if post is None:
        logger.info("Blog post update matched no rows", post_id=id)
        raise AuthorizationError(NOT_FOUND_OR_UNAUTHORIZED)

    logger.info("Blog post updated", post_id=post.id)
    return BlogPost.from_model(post)


async def delete_blog_post(info: strawberry.Info, id: int) -> bool:
    """Delete a blog post owned by the authenticated user."""
    user_id = require_user_id(info)

    async with get_context(info).database.session() as session:
        stmt = (
            delete(BlogPosts)
            .where(BlogPosts.id == id, BlogPosts.user_id == user_id)
            .returning(BlogPosts.id)
            .execution_options(synchronize_session=False)
        )
        result = await session.execute(stmt)
        deleted_id = result.scalar_one_or_none()

    if deleted_id is None:
        logger.info("Blog post delete matched no rows", post_id=id)
        raise AuthorizationError(NOT_FOUND_OR_UNAUTHORIZED)

    logger.info("Blog post deleted", post_id=id)
    return True

"""
End-to-end blog post lifecycle across two users
"""

import pytest

from blogql.auth.tokens import TokenIssuer


@pytest.mark.integration
@pytest.mark.asyncio
async def test_blog_post_lifecycle(graphql, token_issuer: TokenIssuer):
    # Register and log in user A
    registered = await graphql(
        'mutation { register(firstName: "Ann", lastName: "A", email: "a@example.com", '
        'password: "pw-a") }'
    )
    a_id = int(registered["data"]["register"])
    a_login = await graphql('mutation { login(email: "a@example.com", password: "pw-a") }')
    a_token = a_login["data"]["login"]
    assert token_issuer.verify_token(a_token) == a_id

    # Create a post as A
    created = await graphql(
        'mutation { createBlogPost(title: "T", description: "D", imageUrl: null) { id } }',
        token=a_token,
    )
    post_id = created["data"]["createBlogPost"]["id"]

    fetched = await graphql(
        "query ($id: Int!) { getBlogPost(id: $id) { title description imageUrl userId } }",
        {"id": post_id},
    )
    assert fetched["data"]["getBlogPost"] == {
        "title": "T",
        "description": "D",
        "imageUrl": None,
        "userId": a_id,
    }

    # User B cannot update A's post
    await graphql(
        'mutation { register(firstName: "Bob", lastName: "B", email: "b@example.com", '
        'password: "pw-b") }'
    )
    b_login = await graphql('mutation { login(email: "b@example.com", password: "pw-b") }')
    b_token = b_login["data"]["login"]

    update = (
        "mutation ($id: Int!) { "
        'updateBlogPost(id: $id, title: "T2", description: "D2", imageUrl: null) '
        "{ title description } }"
    )
    as_b = await graphql(update, {"id": post_id}, b_token)
    assert as_b["data"]["updateBlogPost"] is None
    assert as_b["errors"][0]["message"] == "Blog post not found or unauthorized."

    # A can
    as_a = await graphql(update, {"id": post_id}, a_token)
    assert as_a["data"]["updateBlogPost"] == {"title": "T2", "description": "D2"}

    # A deletes it
    deleted = await graphql(
        "mutation ($id: Int!) { deleteBlogPost(id: $id) }", {"id": post_id}, a_token
    )
    assert deleted["data"]["deleteBlogPost"] is True

    gone = await graphql("query ($id: Int!) { getBlogPost(id: $id) { id } }", {"id": post_id})
    assert gone["data"]["getBlogPost"] is None
    assert gone["errors"][0]["message"] == "Blog post not found."

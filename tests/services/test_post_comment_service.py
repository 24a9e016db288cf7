"""Hard delete of posts with their comments, and the comment service around it."""

import pytest

from src.apps.blog.exceptions import PostNotFound
from src.apps.blog.repositories.comment_repository import CommentRepository


async def _comment_count(database, post_id):
    async with database.get_session() as session:
        return await CommentRepository(session).count(post_id=post_id)


async def test_hard_delete_removes_post_and_comments(services, database, make_post):
    post = await make_post()
    other = await make_post("other", "post")
    await services.comments.add_comment(post.id, "first")
    await services.comments.add_comment(post.id, "second")
    await services.comments.add_comment(other.id, "stays")

    removed = await services.post_comments.delete_post(post.id)

    assert removed == 2
    assert await _comment_count(database, post.id) == 0
    assert await _comment_count(database, other.id) == 1
    remaining = await services.posts.view_posts(False) + await services.posts.view_posts(True)
    assert [p.id for p in remaining] == [other.id]


async def test_hard_delete_works_on_soft_deleted_post(services, make_post):
    post = await make_post()
    await services.posts.delete_post_by_id(post.id)

    await services.post_comments.delete_post(post.id)

    assert await services.posts.view_posts(True) == []


async def test_hard_delete_missing_post_fails(services):
    with pytest.raises(PostNotFound):
        await services.post_comments.delete_post(123)


async def test_comments_listed_in_order(services, make_post):
    post = await make_post()
    await services.comments.add_comment(post.id, "one")
    await services.comments.add_comment(post.id, "two")

    comments = await services.comments.view_comments(post.id)

    assert [c.content for c in comments] == ["one", "two"]
    assert all(c.post_id == post.id for c in comments)


async def test_cannot_comment_on_soft_deleted_post(services, make_post):
    post = await make_post()
    await services.posts.delete_post_by_id(post.id)

    with pytest.raises(PostNotFound):
        await services.comments.add_comment(post.id, "late")
    with pytest.raises(PostNotFound):
        await services.comments.view_comments(post.id)

"""Blog services, built once per process and shared by the HTTP layer and the CLI."""

from dataclasses import dataclass
from typing import Any, Callable, Optional

from fastapi import FastAPI

from src.apps.blog.routers.category_router import CategoryRouter
from src.apps.blog.routers.post_router import PostRouter
from src.apps.blog.services.category_service import CategoryService
from src.apps.blog.services.comment_service import CommentService
from src.apps.blog.services.post_comment_service import PostCommentService
from src.apps.blog.services.post_service import PostService


@dataclass
class BlogServices:
    categories: CategoryService
    posts: PostService
    post_comments: PostCommentService
    comments: CommentService

    @classmethod
    def build(
        cls,
        get_session: Callable[..., Any],
        default_category_name: Optional[str] = None,
    ) -> "BlogServices":
        categories = CategoryService(get_session, default_category_name)
        return cls(
            categories=categories,
            posts=PostService(get_session, categories),
            post_comments=PostCommentService(get_session),
            comments=CommentService(get_session),
        )


def include_blog_routers(app: FastAPI, services: BlogServices) -> None:
    # Category routes first: the post router owns the catch-all /{post_id}
    app.include_router(CategoryRouter(services.categories).get_router())
    app.include_router(
        PostRouter(services.posts, services.post_comments, services.comments).get_router()
    )

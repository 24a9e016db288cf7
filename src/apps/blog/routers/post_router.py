"""Post router."""

from fastapi import Query, status

from src.core import exceptions
from src.core.bases.base_router import BaseRouter, ItemId
from src.core.response.handlers import success_response
from src.apps.blog.schemas.comment import CommentCreate
from src.apps.blog.schemas.post import PostCreate, PostUpdate
from src.apps.blog.services.comment_service import CommentService
from src.apps.blog.services.post_comment_service import PostCommentService
from src.apps.blog.services.post_service import PostService


class PostRouter(BaseRouter):
    """Post router class.

    Post detail and deletion live at the root (``/{post_id}``), so this router
    has to be included after every other router with a fixed first segment.
    """

    def __init__(
        self,
        post_service: PostService,
        post_comment_service: PostCommentService,
        comment_service: CommentService,
    ):
        self.post_service = post_service
        self.post_comment_service = post_comment_service
        self.comment_service = comment_service
        super().__init__(tags=["Posts"])

    def _register_routes(self) -> None:
        self._register_create()
        self._register_edit()
        self._register_list()
        self._register_list_by_category()
        self._register_comments()
        self._register_detail()
        self._register_soft_delete()
        self._register_hard_delete()

    def _register_create(self) -> None:
        @self.router.post(
            "/posts",
            status_code=status.HTTP_201_CREATED,
            summary="Create post",
            responses={404: {"description": "Category not found"}},
        )
        async def create_post(post_in: PostCreate):
            try:
                post = await self.post_service.create_post(post_in)
                return success_response(
                    data=post,
                    message="Post created successfully",
                    status_code=status.HTTP_201_CREATED,
                )
            except exceptions.ServiceException as e:
                return self._service_error(e)

    def _register_edit(self) -> None:
        @self.router.put(
            "/posts/{post_id}",
            status_code=status.HTTP_201_CREATED,
            summary="Edit post",
            responses={404: {"description": "Post or category not found"}},
        )
        async def edit_post(post_id: ItemId, post_in: PostUpdate):
            try:
                post = await self.post_service.edit_post(post_id, post_in)
                return success_response(
                    data=post,
                    message="Post updated successfully",
                    status_code=status.HTTP_201_CREATED,
                )
            except exceptions.ServiceException as e:
                return self._service_error(e)

    def _register_list(self) -> None:
        @self.router.get("/posts", summary="List posts")
        async def list_posts(
            deleted: bool = Query(False, description="List soft deleted posts instead"),
        ):
            try:
                posts = await self.post_service.view_posts(deleted)
                return success_response(
                    data=posts, message="Posts retrieved successfully"
                )
            except exceptions.ServiceException as e:
                return self._service_error(e)

    def _register_list_by_category(self) -> None:
        @self.router.get(
            "/categories/{category_id}/posts", summary="List active posts in a category"
        )
        async def list_posts_by_category(category_id: ItemId):
            try:
                posts = await self.post_service.view_posts_by_category(category_id, False)
                return success_response(
                    data=posts, message="Posts retrieved successfully"
                )
            except exceptions.ServiceException as e:
                return self._service_error(e)

    def _register_comments(self) -> None:
        @self.router.post(
            "/posts/{post_id}/comments",
            status_code=status.HTTP_201_CREATED,
            summary="Comment on a post",
        )
        async def add_comment(post_id: ItemId, comment_in: CommentCreate):
            try:
                comment = await self.comment_service.add_comment(post_id, comment_in.content)
                return success_response(
                    data=comment,
                    message="Comment created successfully",
                    status_code=status.HTTP_201_CREATED,
                )
            except exceptions.ServiceException as e:
                return self._service_error(e)

        @self.router.get("/posts/{post_id}/comments", summary="List comments of a post")
        async def list_comments(post_id: ItemId):
            try:
                comments = await self.comment_service.view_comments(post_id)
                return success_response(
                    data=comments, message="Comments retrieved successfully"
                )
            except exceptions.ServiceException as e:
                return self._service_error(e)

    def _register_detail(self) -> None:
        @self.router.get(
            "/{post_id}",
            summary="Read post (counts a view)",
            responses={404: {"description": "Post not found"}},
        )
        async def get_post(post_id: ItemId):
            try:
                post = await self.post_service.view_post_detail(post_id, False)
                return success_response(
                    data=post, message="Post retrieved successfully"
                )
            except exceptions.ServiceException as e:
                return self._service_error(e)

    def _register_soft_delete(self) -> None:
        @self.router.delete(
            "/{post_id}",
            summary="Soft delete post",
            responses={404: {"description": "Post not found"}},
        )
        async def soft_delete_post(post_id: ItemId):
            try:
                await self.post_service.delete_post_by_id(post_id)
                return success_response(
                    data={"id": post_id}, message="Post soft deleted successfully"
                )
            except exceptions.ServiceException as e:
                return self._service_error(e)

    def _register_hard_delete(self) -> None:
        @self.router.delete(
            "/{post_id}/force",
            summary="Permanently delete post and its comments",
            responses={404: {"description": "Post not found"}},
        )
        async def hard_delete_post(post_id: ItemId):
            try:
                removed = await self.post_comment_service.delete_post(post_id)
                return success_response(
                    data={"id": post_id, "removed_comments": removed},
                    message="Post permanently deleted successfully",
                )
            except exceptions.ServiceException as e:
                return self._service_error(e)

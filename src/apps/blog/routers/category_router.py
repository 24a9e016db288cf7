"""Category router."""

from fastapi import status

from src.core import exceptions
from src.core.bases.base_router import BaseRouter, ItemId
from src.core.response.handlers import success_response
from src.apps.blog.schemas.category import CategoryCreate, CategoryUpdate
from src.apps.blog.services.category_service import CategoryService


class CategoryRouter(BaseRouter):
    """Category router class."""

    def __init__(self, category_service: CategoryService):
        self.category_service = category_service
        super().__init__(prefix="/categories", tags=["Categories"])

    def _register_routes(self) -> None:
        self._register_create()
        self._register_list()
        self._register_get()
        self._register_update()
        self._register_delete()

    def _register_create(self) -> None:
        @self.router.post("", status_code=status.HTTP_201_CREATED, summary="Create category")
        async def create_category(category_in: CategoryCreate):
            try:
                category = await self.category_service.create_category(category_in.name)
                return success_response(
                    data=category,
                    message="Category created successfully",
                    status_code=status.HTTP_201_CREATED,
                )
            except exceptions.ServiceException as e:
                return self._service_error(e)

    def _register_list(self) -> None:
        @self.router.get("", summary="List categories")
        async def list_categories():
            try:
                categories = await self.category_service.get_category_all()
                return success_response(
                    data=categories, message="Categories retrieved successfully"
                )
            except exceptions.ServiceException as e:
                return self._service_error(e)

    def _register_get(self) -> None:
        @self.router.get(
            "/{category_id}",
            summary="Get category",
            responses={404: {"description": "Category not found"}},
        )
        async def get_category(category_id: ItemId):
            try:
                category = await self.category_service.get_category(category_id)
                return success_response(
                    data=category, message="Category retrieved successfully"
                )
            except exceptions.ServiceException as e:
                return self._service_error(e)

    def _register_update(self) -> None:
        @self.router.put(
            "/{category_id}",
            summary="Rename category",
            responses={404: {"description": "Category not found"}},
        )
        async def update_category(category_id: ItemId, category_in: CategoryUpdate):
            try:
                category = await self.category_service.update_category(
                    category_id, category_in.name
                )
                return success_response(
                    data=category, message="Category updated successfully"
                )
            except exceptions.ServiceException as e:
                return self._service_error(e)

    def _register_delete(self) -> None:
        @self.router.delete(
            "/{category_id}",
            summary="Delete an empty category",
            responses={
                404: {"description": "Category not found"},
                409: {"description": "Category still has active posts"},
            },
        )
        async def delete_category(category_id: ItemId):
            try:
                await self.category_service.delete_category(category_id)
                return success_response(
                    data={"id": category_id}, message="Category deleted successfully"
                )
            except exceptions.ServiceException as e:
                return self._service_error(e)

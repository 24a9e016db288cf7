"""Category service: CRUD, default category, and the empty-before-delete rule."""

import asyncio

import pytest

from src.core.exceptions import ServiceException
from src.apps.blog.exceptions import CategoryNotFound, NonEmptyCategory
from src.apps.blog.repositories.category_repository import CategoryRepository
from src.apps.blog.schemas.post import PostCreate


async def test_create_and_list_categories(services):
    await services.categories.create_category("Study")
    await services.categories.create_category("Diary")

    categories = await services.categories.get_category_all()

    assert [c.name for c in categories] == ["Study", "Diary"]


async def test_duplicate_names_are_allowed(services):
    first = await services.categories.create_category("Study")
    second = await services.categories.create_category("Study")

    assert first.id != second.id


async def test_update_category_renames(services):
    category = await services.categories.create_category("Study")

    renamed = await services.categories.update_category(category.id, "Learning")

    assert renamed.id == category.id
    assert renamed.name == "Learning"
    assert (await services.categories.get_category(category.id)).name == "Learning"


async def test_update_unknown_category_fails(services):
    with pytest.raises(CategoryNotFound):
        await services.categories.update_category(42, "Nope")


async def test_get_categories_by_post_returns_default_when_absent(services):
    first = await services.categories.get_categories_by_post(
        PostCreate(title="t", content="c")
    )
    second = await services.categories.get_categories_by_post(
        PostCreate(title="t", content="c")
    )

    assert first.name == "Uncategorized"
    # Created once, reused afterwards
    assert first.id == second.id
    assert len(await services.categories.get_category_all()) == 1


async def test_get_categories_by_post_resolves_reference(services):
    study = await services.categories.create_category("Study")

    resolved = await services.categories.get_categories_by_post(
        PostCreate(title="t", content="c", category_id=study.id)
    )

    assert (resolved.id, resolved.name) == (study.id, "Study")


async def test_get_categories_by_post_unknown_reference_fails(services):
    with pytest.raises(CategoryNotFound):
        await services.categories.get_categories_by_post(
            PostCreate(title="t", content="c", category_id=99)
        )


async def test_delete_empty_category(services):
    category = await services.categories.create_category("Empty")

    await services.categories.delete_category(category.id)

    assert await services.categories.get_category_all() == []


async def test_delete_category_with_active_post_fails(services, make_post):
    category = await services.categories.create_category("Study")
    await make_post(category_id=category.id)

    assert await services.categories.has_post_in_category(category.id) is True
    with pytest.raises(NonEmptyCategory):
        await services.categories.delete_category(category.id)

    assert len(await services.categories.get_category_all()) == 1


async def test_delete_category_with_only_soft_deleted_posts(services, make_post):
    category = await services.categories.create_category("Study")
    post = await make_post(category_id=category.id)
    await services.posts.delete_post_by_id(post.id)

    assert await services.categories.has_post_in_category(category.id) is False
    await services.categories.delete_category(category.id)

    deleted = await services.posts.view_posts(True)
    assert deleted[0].id == post.id
    assert deleted[0].category_id is None


async def test_delete_unknown_category_fails(services):
    with pytest.raises(CategoryNotFound):
        await services.categories.delete_category(5)


async def test_has_post_in_category_false_for_empty(services):
    category = await services.categories.create_category("Empty")

    assert await services.categories.has_post_in_category(category.id) is False


async def test_ensure_default_category_is_idempotent(services):
    first = await services.categories.ensure_default_category()
    second = await services.categories.ensure_default_category()

    assert first.id == second.id
    assert first.is_default is True
    assert first.name == "Uncategorized"


async def test_category_named_like_default_does_not_become_default(services, make_post):
    default = await services.categories.ensure_default_category()
    study = await services.categories.create_category("Study")
    await services.categories.update_category(study.id, "Uncategorized")

    post = await make_post()

    assert post.category_id == default.id
    assert post.category_id != study.id
    assert (await services.categories.get_category(study.id)).is_default is False


async def test_renamed_default_stays_default(services, make_post):
    default = await services.categories.ensure_default_category()
    await services.categories.update_category(default.id, "Misc")

    post = await make_post()

    assert post.category_id == default.id


async def test_concurrent_posts_share_one_default(services, make_post):
    posts = await asyncio.gather(*(make_post(f"t{i}", "c") for i in range(5)))

    categories = await services.categories.get_category_all()
    defaults = [c for c in categories if c.is_default]
    assert len(categories) == 1
    assert len(defaults) == 1
    assert {p.category_id for p in posts} == {defaults[0].id}


async def test_second_default_row_is_rejected(services):
    await services.categories.ensure_default_category()

    with pytest.raises(ServiceException):
        async with services.categories.transaction() as session:
            await CategoryRepository(session).create(
                {"name": "Other", "is_default": True}
            )

    categories = await services.categories.get_category_all()
    assert [c.is_default for c in categories] == [True]

"""Category routes: CRUD and the 409 on deleting a non-empty category."""


async def _create(client, name):
    res = await client.post("/categories", json={"name": name})
    assert res.status_code == 201
    return res.json()["data"]


async def test_create_and_list(client):
    await _create(client, "Study")
    await _create(client, "Diary")

    res = await client.get("/categories")

    assert res.status_code == 200
    assert [c["name"] for c in res.json()["data"]] == ["Study", "Diary"]


async def test_get_and_rename(client):
    category = await _create(client, "Study")

    res = await client.put(f"/categories/{category['id']}", json={"name": "Learning"})

    assert res.status_code == 200
    fetched = (await client.get(f"/categories/{category['id']}")).json()["data"]
    assert fetched["name"] == "Learning"


async def test_rename_unknown(client):
    res = await client.put("/categories/404", json={"name": "x"})

    assert res.status_code == 404
    assert res.json()["error_code"] == "NOT_FOUND"


async def test_delete_empty_category(client):
    category = await _create(client, "Empty")

    res = await client.delete(f"/categories/{category['id']}")

    assert res.status_code == 200
    assert (await client.get(f"/categories/{category['id']}")).status_code == 404


async def test_delete_non_empty_category_conflicts(client):
    category = await _create(client, "Study")
    await client.post(
        "/posts", json={"title": "t", "content": "c", "category_id": category["id"]},
    )

    res = await client.delete(f"/categories/{category['id']}")

    assert res.status_code == 409
    body = res.json()
    assert body["success"] is False
    assert body["error_code"] == "CONFLICT"


async def test_delete_after_soft_deleting_posts(client):
    category = await _create(client, "Study")
    post = (await client.post(
        "/posts", json={"title": "t", "content": "c", "category_id": category["id"]},
    )).json()["data"]
    await client.delete(f"/{post['id']}")

    res = await client.delete(f"/categories/{category['id']}")

    assert res.status_code == 200


async def test_out_of_range_category_id_is_rejected(client):
    res = await client.get(f"/categories/{2**63}")

    assert res.status_code == 422
    assert res.json()["error_code"] == "VALIDATION_ERROR"

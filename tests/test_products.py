from bson import ObjectId


def create_product(client, **fields):
    response = client.post("/products", json=fields)
    assert response.status_code == 200
    return response.json()["insertedId"]


def test_create_then_fetch_returns_submitted_fields(client):
    product_id = create_product(client, name="Classic Tee", price=19.99, category="Apparel")

    response = client.get(f"/products/{product_id}")

    assert response.status_code == 200
    product = response.json()
    assert product["_id"] == product_id
    assert product["name"] == "Classic Tee"
    assert product["price"] == 19.99
    assert product["category"] == "Apparel"
    assert product["reviews"] == []


def test_create_returns_insert_result(client):
    response = client.post("/products", json={"name": "Mug"})

    body = response.json()
    assert body["acknowledged"] is True
    assert ObjectId.is_valid(body["insertedId"])


def test_list_products_without_page_returns_everything(client):
    for i in range(5):
        create_product(client, name=f"item-{i}")

    response = client.get("/products", params={"size": 2})

    assert response.status_code == 200
    assert [p["name"] for p in response.json()] == [f"item-{i}" for i in range(5)]


def test_pages_are_distinct(client):
    for i in range(5):
        create_product(client, name=f"item-{i}")

    first = client.get("/products", params={"page": 0, "size": 2}).json()
    second = client.get("/products", params={"page": 1, "size": 2}).json()
    last = client.get("/products", params={"page": 2, "size": 2}).json()

    assert [p["name"] for p in first] == ["item-0", "item-1"]
    assert [p["name"] for p in second] == ["item-2", "item-3"]
    assert [p["name"] for p in last] == ["item-4"]


def test_page_without_size_uses_default_page_size(client, settings):
    for i in range(5):
        create_product(client, name=f"item-{i}")

    response = client.get("/products", params={"page": 0})

    assert len(response.json()) == settings.default_page_size


def test_reviews_are_appended(client):
    product_id = create_product(client, name="Backpack")

    first = client.put(f"/products/{product_id}", json={"rating": 5, "comment": "great"})
    client.put(f"/products/{product_id}", json={"rating": 3, "comment": "ok"})

    assert first.json()["matchedCount"] == 1
    assert first.json()["modifiedCount"] == 1
    reviews = client.get(f"/products/{product_id}").json()["reviews"]
    assert reviews == [
        {"rating": 5, "comment": "great"},
        {"rating": 3, "comment": "ok"},
    ]


def test_review_on_missing_product_matches_nothing(client):
    response = client.put(f"/products/{ObjectId()}", json={"rating": 1})

    assert response.status_code == 200
    assert response.json()["matchedCount"] == 0
    assert response.json()["modifiedCount"] == 0


def test_delete_product(client):
    product_id = create_product(client, name="Lamp")

    response = client.delete(f"/products/{product_id}")

    assert response.json() == {"acknowledged": True, "deletedCount": 1}
    assert client.get(f"/products/{product_id}").status_code == 404


def test_delete_missing_product_reports_zero(client):
    response = client.delete(f"/products/{ObjectId()}")

    assert response.status_code == 200
    assert response.json()["deletedCount"] == 0


def test_malformed_product_id_is_rejected(client):
    response = client.get("/products/not-an-id")

    assert response.status_code == 400
    assert "Invalid product ID format" in response.json()["detail"]

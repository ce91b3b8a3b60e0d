import pytest

from conftest import API


def test_create_item_derives_total(create_category, create_subcategory, create_item):
    category = create_category(name="Beverages", tax=10, taxApplicability=True)
    sub = create_subcategory(category["id"])
    item = create_item(category["id"], subCategoryId=sub["id"], baseAmount=100, discount=15)
    assert item["totalAmount"] == 85
    assert item["tax"] == 0
    assert item["taxApplicability"] is False
    assert item["category"]["name"] == "Beverages"
    assert item["subCategory"]["name"] == "Coffee"


def test_discount_defaults_to_zero(create_category, create_item):
    category = create_category()
    item = create_item(category["id"], discount=None)
    assert item["discount"] == 0
    assert item["totalAmount"] == 100
    assert item["subCategory"] is None


def test_negative_total_allowed(create_category, create_item):
    item = create_item(create_category()["id"], baseAmount=10, discount=25)
    assert item["totalAmount"] == -15


def test_total_amount_cannot_be_supplied(create_category, create_item):
    item = create_item(create_category()["id"], totalAmount=1)
    assert item["totalAmount"] == 85


@pytest.mark.parametrize("field", ["baseAmount", "discount"])
def test_negative_amounts_rejected(client, create_category, field):
    category = create_category()
    payload = {
        "name": "Latte",
        "image": "i",
        "description": "d",
        "baseAmount": 10,
        "categoryId": category["id"],
        field: -1,
    }
    res = client.post(f"{API}/items/", json=payload)
    assert res.status_code == 400
    assert field in res.json()["error"]


def test_cents_amounts_keep_total_consistent(client, create_category, create_item):
    item = create_item(create_category()["id"], baseAmount=12.34, discount=0.35)
    stored = client.get(f"{API}/items/{item['id']}").json()["data"]
    assert stored["baseAmount"] == 12.34
    assert stored["discount"] == 0.35
    assert stored["totalAmount"] == 11.99


@pytest.mark.parametrize(
    "amounts",
    [
        {"baseAmount": 1.006, "discount": 0.004},
        {"baseAmount": 10, "discount": 0.125},
        {"baseAmount": 12345678901},
    ],
)
def test_amounts_finer_than_cents_or_too_large_rejected(client, create_category, amounts):
    payload = {
        "name": "Latte",
        "image": "i",
        "description": "d",
        "baseAmount": 10,
        "categoryId": create_category()["id"],
    }
    payload.update(amounts)
    res = client.post(f"{API}/items/", json=payload)
    assert res.status_code == 400
    assert res.json()["message"] == "Validation failed"
    assert client.get(f"{API}/items/").json()["count"] == 0


def test_subcategory_of_other_category(client, create_category, create_subcategory):
    drinks = create_category(name="Drinks")
    food = create_category(name="Food")
    burgers = create_subcategory(food["id"], name="Burgers")
    res = client.post(
        f"{API}/items/",
        json={
            "name": "Latte",
            "image": "i",
            "description": "d",
            "baseAmount": 10,
            "categoryId": drinks["id"],
            "subCategoryId": burgers["id"],
        },
    )
    assert res.status_code == 404
    assert res.json()["message"] == "Sub-category not found or does not belong to specified category"


def test_unknown_category(client):
    res = client.post(
        f"{API}/items/",
        json={"name": "Latte", "image": "i", "description": "d", "baseAmount": 10, "categoryId": "nope"},
    )
    assert res.status_code == 404
    assert res.json()["message"] == "Category not found"


@pytest.mark.parametrize(
    ("changes", "expected_total"),
    [
        ({"baseAmount": 200}, 185),
        ({"discount": 40}, 60),
        ({"baseAmount": 50, "discount": 5}, 45),
        ({"name": "Flat White"}, 85),
    ],
)
def test_update_recomputes_total(client, create_category, create_item, changes, expected_total):
    item = create_item(create_category()["id"])
    res = client.put(f"{API}/items/{item['id']}", json=changes)
    assert res.status_code == 200
    data = res.json()["data"]
    assert data["totalAmount"] == expected_total
    assert data["totalAmount"] == data["baseAmount"] - data["discount"]


def test_update_rejects_fractional_cents(client, create_category, create_item):
    item = create_item(create_category()["id"])
    res = client.put(f"{API}/items/{item['id']}", json={"discount": 0.004})
    assert res.status_code == 400
    stored = client.get(f"{API}/items/{item['id']}").json()["data"]
    assert stored["discount"] == 15
    assert stored["totalAmount"] == 85


def test_update_rejects_foreign_subcategory(client, create_category, create_subcategory, create_item):
    drinks = create_category(name="Drinks")
    food = create_category(name="Food")
    burgers = create_subcategory(food["id"], name="Burgers")
    item = create_item(drinks["id"])
    res = client.put(f"{API}/items/{item['id']}", json={"subCategoryId": burgers["id"], "baseAmount": 1})
    assert res.status_code == 404
    stored = client.get(f"{API}/items/{item['id']}").json()["data"]
    assert stored["subCategoryId"] is None
    assert stored["baseAmount"] == 100


def test_update_null_required_field(client, create_category, create_item):
    item = create_item(create_category()["id"])
    res = client.put(f"{API}/items/{item['id']}", json={"baseAmount": None})
    assert res.status_code == 400
    assert res.json()["message"] == "Fields cannot be null: baseAmount"


def test_listings(client, create_category, create_subcategory, create_item):
    drinks = create_category(name="Drinks")
    food = create_category(name="Food")
    coffee = create_subcategory(drinks["id"], name="Coffee")
    create_item(drinks["id"], name="Latte", subCategoryId=coffee["id"])
    create_item(drinks["id"], name="Lemonade")
    create_item(food["id"], name="Burger")

    assert client.get(f"{API}/items/").json()["count"] == 3

    by_category = client.get(f"{API}/items/category/{drinks['id']}").json()
    assert by_category["category"] == "Drinks"
    assert {i["name"] for i in by_category["data"]} == {"Latte", "Lemonade"}

    by_sub = client.get(f"{API}/items/subcategory/{coffee['id']}").json()
    assert by_sub["category"] == "Drinks"
    assert by_sub["subCategory"] == "Coffee"
    assert [i["name"] for i in by_sub["data"]] == ["Latte"]

    assert client.get(f"{API}/items/category/507f1f77bcf86cd799439011").status_code == 404
    assert client.get(f"{API}/items/subcategory/507f1f77bcf86cd799439011").status_code == 404


def test_search(client, create_category, create_item):
    category = create_category()
    create_item(category["id"], name="Iced Latte")
    create_item(category["id"], name="Latte")
    create_item(category["id"], name="Espresso")

    res = client.get(f"{API}/items/search", params={"name": "latte"})
    body = res.json()
    assert res.status_code == 200
    assert body["searchQuery"] == "latte"
    assert body["count"] == 2
    assert {i["name"] for i in body["data"]} == {"Iced Latte", "Latte"}


def test_search_treats_wildcards_literally(client, create_category, create_item):
    category = create_category()
    create_item(category["id"], name="Latte")
    create_item(category["id"], name="100% Arabica")

    res = client.get(f"{API}/items/search", params={"name": "_"})
    assert res.json()["count"] == 0

    res = client.get(f"{API}/items/search", params={"name": "%"})
    assert [i["name"] for i in res.json()["data"]] == ["100% Arabica"]


def test_search_requires_name(client):
    res = client.get(f"{API}/items/search")
    assert res.status_code == 400
    assert res.json()["message"] == 'Search query parameter "name" is required'


def test_get_by_identifier(client, create_category, create_item):
    item = create_item(create_category()["id"], name="Flat White")
    assert client.get(f"{API}/items/flat white").json()["data"]["id"] == item["id"]
    assert client.get(f"{API}/items/{item['id']}").json()["data"]["name"] == "Flat White"
    assert client.get(f"{API}/items/Cappuccino").status_code == 404


def test_delete_item(client, create_category, create_item):
    item = create_item(create_category()["id"])
    res = client.delete(f"{API}/items/{item['id']}")
    assert res.json() == {"success": True, "message": "Item deleted successfully"}
    assert client.delete(f"{API}/items/{item['id']}").status_code == 404

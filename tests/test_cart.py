from bson import ObjectId

from restaurant_api.services.cleanup import purge_orphaned_cart_entries
from tests.conftest import OWNER, make_food

API = "/api/v1"


def order(food_id, email=OWNER, quantity=2):
    return {"userEmail": email, "foodId": str(food_id), "quantity": quantity, "name": "Larb", "price": 7.5}


def test_food_order_adds_cart_entry(client, db):
    food_id = db.foods.insert_one(make_food("Larb")).inserted_id
    response = client.post(f"{API}/food-orders", json=order(food_id))
    assert response.status_code == 200

    stored = db.cart.find_one({"_id": ObjectId(response.json()["insertedId"])})
    assert stored["userEmail"] == OWNER
    assert stored["foodId"] == str(food_id)
    assert stored["quantity"] == 2
    assert stored["addedAt"] is not None


def test_food_order_rejects_zero_quantity(client):
    response = client.post(f"{API}/food-orders", json=order(ObjectId(), quantity=0))
    assert response.status_code == 422


def test_cart_lists_only_own_entries(signed_in, db):
    food_id = db.foods.insert_one(make_food("Larb")).inserted_id
    signed_in.post(f"{API}/food-orders", json=order(food_id))
    signed_in.post(f"{API}/food-orders", json=order(food_id, email="b@example.com"))

    body = signed_in.get(f"{API}/cart", params={"email": OWNER}).json()
    assert len(body["orders"]) == 1
    assert body["orders"][0]["userEmail"] == OWNER
    assert body["orders"][0]["foodId"] == str(food_id)


def test_delete_cart_entry_leaves_food(client, db):
    food_id = db.foods.insert_one(make_food("Larb")).inserted_id
    entry_id = db.cart.insert_one(order(food_id)).inserted_id

    body = client.delete(f"{API}/user/delete-a-cart-food/{entry_id}").json()
    assert body == {"acknowledged": True, "deletedCount": 1}
    assert db.cart.count_documents({}) == 0
    assert db.foods.find_one({"_id": food_id}) is not None


def test_purge_orphaned_cart_entries(db):
    food_id = db.foods.insert_one(make_food("Larb")).inserted_id
    db.cart.insert_many([order(food_id), order(ObjectId()), {"userEmail": OWNER, "quantity": 1}])

    assert purge_orphaned_cart_entries(db) == 2
    assert [entry["foodId"] for entry in db.cart.find()] == [str(food_id)]
    assert purge_orphaned_cart_entries(db) == 0

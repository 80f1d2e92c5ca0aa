import json

import pytest

from storefront.domain.errors import InternalError, NotFound
from storefront.domain.schemas import CartItem
from storefront.services.cart_service import CartService


@pytest.fixture
def svc(fake_redis):
    return CartService(fake_redis)


# --- service ---

def test_get_missing_cart_is_empty(svc):
    cart = svc.get_cart("nobody")
    assert cart.user_id == "nobody"
    assert cart.items == []


def test_add_same_product_twice_sums_quantity(svc):
    svc.add_item("u1", CartItem(product_id=7, quantity=2))
    svc.add_item("u1", CartItem(product_id=7, quantity=3))

    cart = svc.get_cart("u1")
    assert [(i.product_id, i.quantity) for i in cart.items] == [(7, 5)]


def test_add_new_products_keeps_insertion_order(svc):
    svc.add_item("u1", CartItem(product_id=3, quantity=1))
    svc.add_item("u1", CartItem(product_id=1, quantity=1))
    svc.add_item("u1", CartItem(product_id=3, quantity=1))

    assert [i.product_id for i in svc.get_cart("u1").items] == [3, 1]


def test_add_writes_whole_cart_without_ttl(svc, fake_redis):
    svc.add_item("u1", CartItem(product_id=1, quantity=1))

    name, kwargs = fake_redis.set_calls[-1]
    assert name == "cart:u1"
    assert "ex" not in kwargs and "px" not in kwargs
    assert json.loads(fake_redis.data["cart:u1"]) == {
        "user_id": "u1",
        "items": [{"product_id": 1, "quantity": 1}],
    }


def test_remove_drops_entry_regardless_of_quantity(svc):
    svc.add_item("u1", CartItem(product_id=1, quantity=9))
    svc.add_item("u1", CartItem(product_id=2, quantity=1))

    svc.remove_item("u1", 1)

    assert [i.product_id for i in svc.get_cart("u1").items] == [2]


def test_remove_unknown_product_leaves_cart_unchanged(svc):
    svc.add_item("u1", CartItem(product_id=1, quantity=1))
    cart = svc.remove_item("u1", 99)
    assert [i.product_id for i in cart.items] == [1]


def test_remove_without_cart_is_not_found(svc):
    with pytest.raises(NotFound):
        svc.remove_item("ghost", 1)


def test_clear_then_get_is_empty(svc):
    svc.add_item("u1", CartItem(product_id=1, quantity=1))
    svc.clear_cart("u1")
    assert svc.get_cart("u1").items == []

    # clearing a cart that never existed still succeeds
    svc.clear_cart("never-seen")
    assert svc.get_cart("never-seen").items == []


def test_store_failure_is_internal(svc, fake_redis):
    fake_redis.fail = True
    with pytest.raises(InternalError) as exc:
        svc.get_cart("u1")
    assert exc.value.message == "Failed to retrieve cart"


def test_corrupted_value_is_internal(svc, fake_redis):
    fake_redis.data["cart:u1"] = "{not json"
    with pytest.raises(InternalError) as exc:
        svc.add_item("u1", CartItem(product_id=1, quantity=1))
    assert exc.value.message == "Failed to parse cart"


# --- http ---

def test_health_reflects_store(cart_client, fake_redis):
    assert cart_client.get("/health").json() == {"status": "healthy", "service": "cart-service"}

    fake_redis.fail = True
    assert cart_client.get("/health").json() == {"status": "unhealthy", "service": "cart-service"}


def test_get_untouched_cart(cart_client):
    resp = cart_client.get("/cart/newuser")
    assert resp.status_code == 200
    assert resp.json() == {"user_id": "newuser", "items": []}


def test_add_returns_201_with_cart(cart_client):
    cart_client.post("/cart/u1/add", json={"product_id": 1, "quantity": 2})
    resp = cart_client.post("/cart/u1/add", json={"product_id": 1, "quantity": 1})

    assert resp.status_code == 201
    assert resp.json() == {"user_id": "u1", "items": [{"product_id": 1, "quantity": 3}]}


def test_add_with_bad_body_is_400(cart_client):
    resp = cart_client.post("/cart/u1/add", json={"product_id": "x"})
    assert resp.status_code == 400
    assert resp.json() == {"error": "Invalid request body"}


def test_remove_from_missing_cart_is_404(cart_client):
    resp = cart_client.post("/cart/u1/remove", json={"product_id": 1})
    assert resp.status_code == 404
    assert resp.json() == {"error": "Cart not found"}


def test_remove_returns_updated_cart(cart_client):
    cart_client.post("/cart/u1/add", json={"product_id": 1, "quantity": 2})
    cart_client.post("/cart/u1/add", json={"product_id": 2, "quantity": 1})

    resp = cart_client.post("/cart/u1/remove", json={"product_id": 1})

    assert resp.status_code == 200
    assert resp.json()["items"] == [{"product_id": 2, "quantity": 1}]


def test_clear_always_succeeds(cart_client):
    cart_client.post("/cart/u1/add", json={"product_id": 1, "quantity": 2})

    for _ in range(2):
        resp = cart_client.delete("/cart/u1/clear")
        assert resp.status_code == 200
        assert resp.json() == {"message": "Cart cleared successfully"}

    assert cart_client.get("/cart/u1").json() == {"user_id": "u1", "items": []}


def test_store_failure_is_500_without_detail(cart_client, fake_redis):
    fake_redis.fail = True

    resp = cart_client.post("/cart/u1/add", json={"product_id": 1, "quantity": 1})

    assert resp.status_code == 500
    assert resp.json() == {"error": "Failed to retrieve cart"}

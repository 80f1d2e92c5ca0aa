# storefront/repos/cart_repo.py
import redis

from storefront.domain.schemas import Cart


def cart_key(user_id: str) -> str:
    return f"cart:{user_id}"


class CartRepo:
    """
    Cart stored as one JSON string per user
    every call is a full round trip of the whole value
    """

    def __init__(self, client: redis.Redis):
        self.redis = client

    def load_raw(self, user_id: str) -> str | None:
        return self.redis.get(cart_key(user_id))

    def save(self, cart: Cart) -> None:
        # SET without EX, koszyk nie wygasa
        self.redis.set(cart_key(cart.user_id), cart.model_dump_json())

    def delete(self, user_id: str) -> None:
        self.redis.delete(cart_key(user_id))

# storefront/services/cart_service.py
import redis
from pydantic import ValidationError
from redis.exceptions import RedisError

from storefront.domain.errors import InternalError, NotFound
from storefront.domain.schemas import Cart, CartItem
from storefront.repos.cart_repo import CartRepo
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class CartService:
    """
    Use case'y dla koszyka trzymanego w redisie jako jeden JSON
    query (get) tylko odczyt
    commands (add, remove, clear) read-modify-write calej wartosci

    Brak blokad i wersjonowania: dwa rownolegle add/remove dla tego samego
    usera moga nadpisac sie nawzajem (lost update). Zachowanie znane i celowo
    niezmienione.
    """

    def __init__(self, client: redis.Redis):
        self.repo = CartRepo(client)

    def _load(self, user_id: str) -> Cart | None:
        try:
            raw = self.repo.load_raw(user_id)
        except RedisError as e:
            logger.error(f"Failed to retrieve cart for user {user_id}: {e}")
            raise InternalError("Failed to retrieve cart") from e

        if raw is None:
            return None

        try:
            return Cart.model_validate_json(raw)
        except ValidationError as e:
            logger.error(f"Stored cart for user {user_id} is not valid JSON: {e}")
            raise InternalError("Failed to parse cart") from e

    def _save(self, cart: Cart) -> None:
        try:
            self.repo.save(cart)
        except RedisError as e:
            logger.error(f"Failed to save cart for user {cart.user_id}: {e}")
            raise InternalError("Failed to save cart") from e

    #query
    def get_cart(self, user_id: str) -> Cart:
        cart = self._load(user_id)
        if cart is None:
            # brak wartosci to pusty koszyk, nie blad
            return Cart(user_id=user_id, items=[])
        return cart

    #commands
    def add_item(self, user_id: str, item: CartItem) -> Cart:
        cart = self._load(user_id) or Cart(user_id=user_id, items=[])

        for existing in cart.items:
            if existing.product_id == item.product_id:
                logger.info(
                    f"Produkt {item.product_id} juz jest w koszyku {user_id}, zwiekszam ilosc "
                    f"z {existing.quantity} do {existing.quantity + item.quantity}"
                )
                existing.quantity += item.quantity
                break
        else:
            logger.info(f"Dodaje nowy produkt {item.product_id} do koszyka {user_id}")
            cart.items.append(CartItem(product_id=item.product_id, quantity=item.quantity))

        self._save(cart)
        return cart

    def remove_item(self, user_id: str, product_id: int) -> Cart:
        cart = self._load(user_id)
        if cart is None:
            raise NotFound("Cart not found")

        # usuwa cala pozycje, bez zmniejszania ilosci
        cart.items = [i for i in cart.items if i.product_id != product_id]
        logger.info(f"Usunieto produkt {product_id} z koszyka {user_id}")

        self._save(cart)
        return cart

    def clear_cart(self, user_id: str) -> None:
        try:
            self.repo.delete(user_id)
        except RedisError as e:
            logger.error(f"Failed to clear cart for user {user_id}: {e}")
            raise InternalError("Failed to clear cart") from e

        logger.info(f"Koszyk {user_id} wyczyszczony")

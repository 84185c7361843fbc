"""
Business logic for products.

Works like ``UserService`` with two differences: numeric fields are
read leniently (``"12.50"`` and ``12.5`` are both accepted as a price),
and on update ``stock`` is applied whenever it is sent, even when it
is ``0``, while the other fields still have to be truthy.
"""

import logging
from typing import Any, Dict, List, Optional

from ..core.coercion import is_truthy, parse_float, parse_int
from ..core.store import DataStore
from ..schemas.product import Product
from . import filters
from .errors import InvalidInputError

logger = logging.getLogger(__name__)


def _price(value: Any) -> float:
    price = parse_float(value)
    if price is None:
        raise InvalidInputError("Price must be a number")
    return price


class ProductService:
    """Operations on the products collection of a data store."""

    def __init__(self, store: DataStore) -> None:
        self.products = store.products

    async def list_products(
        self,
        category: Optional[str] = None,
        min_price: Optional[str] = None,
        max_price: Optional[str] = None,
        limit: Optional[str] = None,
    ) -> List[Product]:
        return filters.filter_products(
            self.products.all(),
            category=category,
            min_price=min_price,
            max_price=max_price,
            limit=limit,
        )

    async def get_product(self, product_id: int) -> Optional[Product]:
        return self.products.find_by_id(product_id)

    async def create_product(self, data: Dict[str, Any]) -> Product:
        """Create a product; ``name``, ``price`` and ``category`` are required.

        A zero price counts as missing.  ``stock`` defaults to 0, also
        when it is not a number.
        """
        name, price, category = data.get("name"), data.get("price"), data.get("category")
        if not (is_truthy(name) and is_truthy(price) and is_truthy(category)):
            raise InvalidInputError("Name, price, and category are required")
        parsed_price = _price(price)
        stock = parse_int(data.get("stock")) or 0
        product = self.products.insert_new(
            lambda product_id: Product(
                id=product_id,
                name=name,
                price=parsed_price,
                category=category,
                stock=stock,
            )
        )
        logger.info("Created product %s (%s)", product.id, product.name)
        return product

    async def update_product(self, product_id: int, data: Dict[str, Any]) -> Optional[Product]:
        """Apply the provided fields to a product.

        ``name``, ``price`` and ``category`` are applied when truthy.
        ``stock`` is applied whenever it is present and not null.
        Returns ``None`` when the product does not exist.
        """
        if self.products.find_by_id(product_id) is None:
            return None
        changes: Dict[str, Any] = {}
        if is_truthy(data.get("name")):
            changes["name"] = data["name"]
        if is_truthy(data.get("price")):
            changes["price"] = _price(data["price"])
        if is_truthy(data.get("category")):
            changes["category"] = data["category"]
        if data.get("stock") is not None:
            stock = parse_int(data["stock"])
            if stock is None:
                raise InvalidInputError("Stock must be an integer")
            changes["stock"] = stock

        def apply(current: Product) -> Product:
            return Product.model_validate({**current.model_dump(), **changes})

        product = self.products.update_by_id(product_id, apply)
        if product is not None and changes:
            logger.info("Updated product %s: %s", product_id, ", ".join(sorted(changes)))
        return product

    async def delete_product(self, product_id: int) -> bool:
        removed = self.products.remove_by_id(product_id)
        if removed is None:
            return False
        logger.info("Deleted product %s", product_id)
        return True

    async def search(self, query: Optional[str]) -> List[Product]:
        if not query:
            raise InvalidInputError('Search query parameter "q" is required')
        return filters.search_products(self.products.all(), query)

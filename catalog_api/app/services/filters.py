"""
Query filters for listing and searching records.

All functions work on a snapshot list taken from a collection and
return a new list; the collections themselves are never touched.
Query parameter values arrive as raw strings (or ``None`` when the
parameter is absent) and an empty string counts as absent.
"""

from typing import Callable, List, Optional, Sequence, TypeVar

from ..core.coercion import parse_float, parse_int
from ..schemas.product import Product
from ..schemas.user import User

T = TypeVar("T")


def apply_limit(items: Sequence[T], limit: Optional[str]) -> List[T]:
    """Keep the first ``limit`` items.

    The value is read by its leading integer.  A negative limit drops
    that many items from the end, and a limit that is not a number
    yields an empty list.
    """
    if not limit:
        return list(items)
    count = parse_int(limit)
    if count is None:
        return []
    return list(items[:count])


def _contains(haystack: Optional[str], needle: str) -> bool:
    return needle in (haystack or "").lower()


def filter_users(users: Sequence[User], role: Optional[str] = None, limit: Optional[str] = None) -> List[User]:
    """Filter users by exact (case-sensitive) role, then apply ``limit``."""
    result = list(users)
    if role:
        result = [user for user in result if user.role == role]
    return apply_limit(result, limit)


def filter_products(
    products: Sequence[Product],
    category: Optional[str] = None,
    min_price: Optional[str] = None,
    max_price: Optional[str] = None,
    limit: Optional[str] = None,
) -> List[Product]:
    """Filter products by category and an inclusive price range.

    Category matching ignores case.  A price bound that does not parse
    as a number is ignored rather than excluding every product.
    """
    result = list(products)
    if category:
        wanted = category.lower()
        result = [product for product in result if product.category.lower() == wanted]

    predicates: List[Callable[[Product], bool]] = []
    low = parse_float(min_price) if min_price else None
    if low is not None:
        predicates.append(lambda product: product.price >= low)
    high = parse_float(max_price) if max_price else None
    if high is not None:
        predicates.append(lambda product: product.price <= high)
    for predicate in predicates:
        result = [product for product in result if predicate(product)]

    return apply_limit(result, limit)


def search_users(users: Sequence[User], query: str) -> List[User]:
    """Users whose name or email contains ``query``, ignoring case."""
    needle = query.lower()
    return [user for user in users if _contains(user.name, needle) or _contains(user.email, needle)]


def search_products(products: Sequence[Product], query: str) -> List[Product]:
    """Products whose name or category contains ``query``, ignoring case."""
    needle = query.lower()
    return [
        product
        for product in products
        if _contains(product.name, needle) or _contains(product.category, needle)
    ]

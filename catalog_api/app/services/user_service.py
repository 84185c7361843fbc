"""
Business logic for users.

``UserService`` works on the users collection of a ``DataStore``.
Request bodies arrive as plain dictionaries; the service checks that
the required fields are present and builds ``User`` records from them.
Optional fields count as provided only when their value is truthy, so
an empty string in an update leaves the stored value unchanged.
"""

import logging
from typing import Any, Dict, List, Optional

from ..core.coercion import is_truthy
from ..core.store import DataStore
from ..schemas.user import DEFAULT_ROLE, User
from . import filters
from .errors import InvalidInputError

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("name", "email", "role")


class UserService:
    """Operations on the users collection of a data store."""

    def __init__(self, store: DataStore) -> None:
        self.users = store.users

    async def list_users(self, role: Optional[str] = None, limit: Optional[str] = None) -> List[User]:
        return filters.filter_users(self.users.all(), role=role, limit=limit)

    async def get_user(self, user_id: int) -> Optional[User]:
        return self.users.find_by_id(user_id)

    async def create_user(self, data: Dict[str, Any]) -> User:
        """Create a user from ``data``.

        ``name`` and ``email`` are required; ``role`` defaults to
        ``"user"``.  The id is allocated when the record is inserted.
        """
        name, email, role = data.get("name"), data.get("email"), data.get("role")
        if not is_truthy(name) or not is_truthy(email):
            raise InvalidInputError("Name and email are required")
        user = self.users.insert_new(
            lambda user_id: User(
                id=user_id,
                name=name,
                email=email,
                role=role if is_truthy(role) else DEFAULT_ROLE,
            )
        )
        logger.info("Created user %s (%s)", user.id, user.email)
        return user

    async def update_user(self, user_id: int, data: Dict[str, Any]) -> Optional[User]:
        """Overwrite the truthy ``name``/``email``/``role`` values of a user.

        Returns ``None`` when the user does not exist.  A body without
        any recognised field returns the user unchanged.
        """
        changes = {field: data[field] for field in UPDATABLE_FIELDS if is_truthy(data.get(field))}

        def apply(current: User) -> User:
            return User.model_validate({**current.model_dump(), **changes})

        user = self.users.update_by_id(user_id, apply)
        if user is not None and changes:
            logger.info("Updated user %s: %s", user_id, ", ".join(sorted(changes)))
        return user

    async def delete_user(self, user_id: int) -> bool:
        removed = self.users.remove_by_id(user_id)
        if removed is None:
            return False
        logger.info("Deleted user %s", user_id)
        return True

    async def bulk(self, operation: Any, data: Any) -> List[User]:
        """Run a bulk operation.  Only ``"create"`` is supported.

        ``data`` must be a list of objects each carrying ``name`` and
        ``email``.  The whole batch is inserted at once with consecutive
        ids, or nothing is inserted at all.
        """
        if operation != "create" or not isinstance(data, list):
            raise InvalidInputError("Invalid bulk operation")
        for entry in data:
            if not isinstance(entry, dict) or not is_truthy(entry.get("name")) or not is_truthy(entry.get("email")):
                raise InvalidInputError("Invalid bulk operation")

        def builder(entry: Dict[str, Any]):
            role = entry.get("role")
            return lambda user_id: User(
                id=user_id,
                name=entry["name"],
                email=entry["email"],
                role=role if is_truthy(role) else DEFAULT_ROLE,
            )

        created = self.users.insert_many_new([builder(entry) for entry in data])
        logger.info("Bulk created %d users", len(created))
        return created

    async def search(self, query: Optional[str]) -> List[User]:
        if not query:
            raise InvalidInputError('Search query parameter "q" is required')
        return filters.search_users(self.users.all(), query)

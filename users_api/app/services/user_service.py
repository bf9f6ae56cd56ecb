"""
Business logic for users.

``UserService`` wraps a ``UserStore`` and implements listing, lookup
and mutation.  It raises the errors from ``core.errors``; turning them
into HTTP responses is left to the application's exception handler.
"""

import logging
import math
import re
from typing import Any, Optional

from fastapi import Depends

from ..core.errors import Conflict, InvalidId, NotFound, ValidationError
from ..core.store import UserRecord, UserStore, get_user_store
from ..schemas.user import DEFAULT_ROLE, UserCreate, UserDeleted, UserPage, UserRead, UserUpdate


logger = logging.getLogger(__name__)

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 20
MAX_LIMIT = 100

# Leading integer: optional whitespace and sign, then ASCII digits.
# Anything after the digits is ignored, so "12abc" parses as 12.
_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)", re.ASCII)


def parse_int(value: Any, default: Optional[int] = None) -> Optional[int]:
    """Parse the leading base-10 integer of ``value``.

    Returns ``default`` when ``value`` is ``None``, does not start
    with an integer, or has too many digits to convert.
    """
    if value is None:
        return default
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    match = _LEADING_INT.match(str(value))
    if not match:
        return default
    try:
        return int(match.group(1))
    except ValueError:
        # more digits than the interpreter converts
        return default


def parse_user_id(raw_id: Any) -> int:
    """Return ``raw_id`` as a positive integer or raise ``InvalidId``."""
    user_id = parse_int(raw_id)
    if user_id is None or user_id < 1:
        raise InvalidId()
    return user_id


def _to_read(user: UserRecord) -> UserRead:
    return UserRead.model_validate(user)


class UserService:
    """Listing, lookup and CRUD over a user store."""

    def __init__(self, store: UserStore) -> None:
        self.store = store

    async def list_users(
        self,
        page: Any = None,
        limit: Any = None,
        role: Optional[str] = None,
        search: Optional[str] = None,
    ) -> UserPage:
        """Return one page of users matching ``role`` and ``search``.

        ``page`` and ``limit`` may be raw query strings; values that do
        not parse fall back to their defaults.  ``limit`` is clamped to
        ``[1, MAX_LIMIT]`` and ``page`` to ``[1, totalPages]``.
        """
        page_number = max(parse_int(page, DEFAULT_PAGE), 1)
        page_size = min(max(parse_int(limit, DEFAULT_LIMIT), 1), MAX_LIMIT)

        users = self.store.all()
        if role:
            users = [user for user in users if user.role == role]
        if search:
            needle = search.casefold()
            users = [
                user for user in users
                if needle in user.name.casefold() or needle in user.email.casefold()
            ]

        total = len(users)
        total_pages = max(math.ceil(total / page_size), 1)
        page_number = min(page_number, total_pages)
        offset = (page_number - 1) * page_size
        return UserPage(
            users=[_to_read(user) for user in users[offset:offset + page_size]],
            total=total,
            page=page_number,
            limit=page_size,
            total_pages=total_pages,
        )

    def _require(self, raw_id: Any) -> UserRecord:
        user_id = parse_user_id(raw_id)
        user = self.store.get(user_id)
        if user is None:
            logger.debug("User %s not found", user_id)
            raise NotFound(user_id)
        return user

    async def get_user(self, raw_id: Any) -> UserRead:
        """Retrieve a user by id.

        Raises ``InvalidId`` for ids that are not positive integers and
        ``NotFound`` when no such user exists.
        """
        return _to_read(self._require(raw_id))

    async def create_user(self, data: UserCreate) -> UserRead:
        """Create a new user and return it.

        ``name`` and ``email`` must be non-empty and the email must not
        be in use.  The new user receives the next id from the store.
        """
        if not data.name or not data.email:
            raise ValidationError("Name and email are required")
        if self.store.find_by_email(data.email) is not None:
            logger.warning("Rejected duplicate email %s", data.email)
            raise Conflict()
        user = self.store.add(name=data.name, email=data.email, role=data.role or DEFAULT_ROLE)
        logger.info("Created user %s (%s)", user.id, user.email)
        return _to_read(user)

    async def update_user(self, raw_id: Any, data: UserUpdate) -> UserRead:
        """Merge the truthy fields of ``data`` into an existing user.

        Empty strings and ``null`` are treated the same as omitted
        fields.  Changing the email to one held by another user raises
        ``Conflict``.
        """
        user = self._require(raw_id)
        if data.email:
            holder = self.store.find_by_email(data.email)
            if holder is not None and holder.id != user.id:
                logger.warning("Rejected email change of user %s to %s", user.id, data.email)
                raise Conflict()
        changes = {
            field: value
            for field, value in data.model_dump(include={"name", "email", "role"}).items()
            if value
        }
        for field, value in changes.items():
            setattr(user, field, value)
        logger.info("Updated user %s: %s", user.id, sorted(changes))
        return _to_read(user)

    async def delete_user(self, raw_id: Any) -> UserDeleted:
        """Remove a user and return it with a confirmation message."""
        user = self._require(raw_id)
        self.store.remove(user.id)
        logger.info("Deleted user %s (%s)", user.id, user.email)
        return UserDeleted(message=f"User {user.name} deleted successfully", user=_to_read(user))


def get_user_service(store: UserStore = Depends(get_user_store)) -> UserService:
    """FastAPI dependency building a service over the app's store."""
    return UserService(store)

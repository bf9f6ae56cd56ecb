"""
User endpoints.

CRUD over the in-memory user store plus a paginated, filterable
listing.  Path ids and the ``page``/``limit`` query values are taken
as raw strings and parsed by the service, so a malformed id yields the
API's own 400 response and a malformed page size falls back to its
default instead of failing.
"""

from typing import Optional

from fastapi import APIRouter, Depends, status

from users_api.app.schemas.user import UserCreate, UserDeleted, UserPage, UserRead, UserUpdate
from users_api.app.services.user_service import UserService, get_user_service

router = APIRouter()


@router.get("", response_model=UserPage)
async def list_users(
    page: Optional[str] = None,
    limit: Optional[str] = None,
    role: Optional[str] = None,
    search: Optional[str] = None,
    service: UserService = Depends(get_user_service),
) -> UserPage:
    """Return a page of users.

    ``role`` filters by exact match; ``search`` matches a
    case-insensitive substring of the name or email.  ``page``
    defaults to 1 and ``limit`` to 20 (at most 100).
    """
    return await service.list_users(page=page, limit=limit, role=role, search=search)


@router.get("/{user_id}", response_model=UserRead)
async def get_user(user_id: str, service: UserService = Depends(get_user_service)) -> UserRead:
    """Retrieve a single user by id.

    Returns 400 if the id is not a positive integer and 404 if no
    such user exists.
    """
    return await service.get_user(user_id)


@router.post("", response_model=UserRead, status_code=status.HTTP_201_CREATED)
async def create_user(
    user: Optional[UserCreate] = None,
    service: UserService = Depends(get_user_service),
) -> UserRead:
    """Create a new user.

    ``name`` and ``email`` are required (400 otherwise) and the email
    must be unused (409 otherwise).  ``role`` defaults to ``user``.
    """
    return await service.create_user(user or UserCreate())


@router.put("/{user_id}", response_model=UserRead)
async def update_user(
    user_id: str,
    body: Optional[UserUpdate] = None,
    service: UserService = Depends(get_user_service),
) -> UserRead:
    """Update a user's name, email or role.

    Only non-empty values are applied; the rest of the record is left
    as it was.
    """
    return await service.update_user(user_id, body or UserUpdate())


@router.delete("/{user_id}", response_model=UserDeleted)
async def delete_user(user_id: str, service: UserService = Depends(get_user_service)) -> UserDeleted:
    return await service.delete_user(user_id)

"""
In-memory storage for user records.

``UserStore`` describes the operations the service layer needs;
``InMemoryUserStore`` keeps records in a Python list (insertion order
preserved) plus a counter that supplies the next id.  Ids are taken
from the counter and never handed out twice, even after a deletion.

The store belongs to the application instance: ``create_app`` puts it
on ``app.state.user_store`` and routes obtain it with the
``get_user_store`` dependency.  A fresh store (or ``reset()``) brings
back the seed data.
"""

import copy
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional

from fastapi import Request


@dataclass
class UserRecord:
    id: int
    name: str
    email: str
    role: str = "user"


SEED_USERS = (
    UserRecord(id=1, name="Alice Johnson", email="alice@example.com", role="admin"),
    UserRecord(id=2, name="Bob Smith", email="bob@example.com", role="user"),
    UserRecord(id=3, name="Carol White", email="carol@example.com", role="user"),
)
SEED_NEXT_ID = 4


class UserStore(ABC):
    """Operations required from a user storage backend."""

    @abstractmethod
    def all(self) -> List[UserRecord]:
        """Return every record in insertion order."""

    @abstractmethod
    def get(self, user_id: int) -> Optional[UserRecord]:
        ...

    @abstractmethod
    def find_by_email(self, email: str) -> Optional[UserRecord]:
        ...

    @abstractmethod
    def add(self, name: str, email: str, role: str) -> UserRecord:
        """Create a record with the next free id and append it."""

    @abstractmethod
    def remove(self, user_id: int) -> Optional[UserRecord]:
        """Remove a record and return it, or ``None`` if it is unknown."""


class InMemoryUserStore(UserStore):
    """User store backed by a list held in process memory.

    Records returned by ``get`` and ``find_by_email`` are the stored
    objects themselves; the service mutates them in place on update.
    """

    def __init__(self, users: Optional[List[UserRecord]] = None, next_id: Optional[int] = None) -> None:
        self._users: List[UserRecord] = []
        self._next_id = 1
        if users is None:
            self.reset()
        else:
            self._users = [copy.copy(user) for user in users]
            highest = max((user.id for user in self._users), default=0)
            self._next_id = max(next_id or 1, highest + 1)

    @property
    def next_id(self) -> int:
        return self._next_id

    def reset(self) -> None:
        """Restore the seed records and id counter."""
        self._users = [copy.copy(user) for user in SEED_USERS]
        self._next_id = SEED_NEXT_ID

    def all(self) -> List[UserRecord]:
        return list(self._users)

    def get(self, user_id: int) -> Optional[UserRecord]:
        for user in self._users:
            if user.id == user_id:
                return user
        return None

    def find_by_email(self, email: str) -> Optional[UserRecord]:
        for user in self._users:
            if user.email == email:
                return user
        return None

    def add(self, name: str, email: str, role: str) -> UserRecord:
        user = UserRecord(id=self._next_id, name=name, email=email, role=role)
        self._next_id += 1
        self._users.append(user)
        return user

    def remove(self, user_id: int) -> Optional[UserRecord]:
        for index, user in enumerate(self._users):
            if user.id == user_id:
                return self._users.pop(index)
        return None

    def __len__(self) -> int:
        return len(self._users)


def get_user_store(request: Request) -> UserStore:
    """FastAPI dependency returning the store attached to the app."""
    return request.app.state.user_store

# In-memory CRUD for users
import threading
from typing import Iterable, List, Optional

from userservice.users.schemas import User

SEED_USERS = (
    {"id": 1, "name": "John Doe", "email": "john@example.com"},
    {"id": 2, "name": "Jane Smith", "email": "jane@example.com"},
    {"id": 3, "name": "Bob Johnson", "email": "bob@example.com"},
)


class UserStore:
    """
    Ordered, in-memory collection of users plus the id counter.

    Every operation holds a single lock for its whole duration. Records handed
    out are copies; the stored records are only changed through this class.
    """

    def __init__(self, seed: Optional[Iterable[dict]] = SEED_USERS):
        self._lock = threading.Lock()
        self._users: List[User] = [User(**u) for u in (seed or ())]
        self._next_id = max((u.id for u in self._users), default=0) + 1

    @property
    def next_id(self) -> int:
        return self._next_id

    def _index_of(self, user_id: int) -> int:
        for index, user in enumerate(self._users):
            if user.id == user_id:
                return index
        return -1

    def list(self) -> List[User]:
        with self._lock:
            return [u.model_copy() for u in self._users]

    def get(self, user_id: int) -> Optional[User]:
        with self._lock:
            index = self._index_of(user_id)
            return self._users[index].model_copy() if index != -1 else None

    def create(self, name: str, email: str) -> User:
        with self._lock:
            user = User(id=self._next_id, name=name, email=email)
            self._next_id += 1
            self._users.append(user)
            return user.model_copy()

    def update(self, user_id: int, name: Optional[str] = None, email: Optional[str] = None) -> Optional[User]:
        with self._lock:
            index = self._index_of(user_id)
            if index == -1:
                return None
            user = self._users[index]
            if name:
                user.name = name
            if email:
                user.email = email
            return user.model_copy()

    def delete(self, user_id: int) -> bool:
        with self._lock:
            index = self._index_of(user_id)
            if index == -1:
                return False
            del self._users[index]
            return True

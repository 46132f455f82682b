import re
from typing import Any, List, Optional

from pydantic import ValidationError as PayloadError

from userservice.config.logger import get_logger
from userservice.shared.errors import NotFoundError, ValidationError
from userservice.shared.logger import StructuredLogger
from userservice.users.crud import UserStore
from userservice.users.schemas import User, UserCreate, UserUpdate

# Leading ASCII digits, optionally signed; trailing text is ignored ("12abc" -> 12)
_USER_ID = re.compile(r"\s*([+-]?[0-9]+)", re.ASCII)


def parse_user_id(raw) -> int:
    """Parse a path segment into a user id; no leading digits means not found."""
    if isinstance(raw, int):
        return raw
    match = _USER_ID.match(str(raw))
    if match is None:
        raise NotFoundError()
    return int(match.group(1))


class UserService:
    """User operations over a UserStore, raising service errors on failure."""

    def __init__(self, store: UserStore, logger: Optional[StructuredLogger] = None):
        self.store = store
        self.logger = logger or get_logger("users")

    async def list_users(self) -> List[User]:
        return self.store.list()

    async def get_user(self, user_id) -> User:
        user = self.store.get(parse_user_id(user_id))
        if user is None:
            raise NotFoundError()
        return user

    async def create_user(self, payload: Optional[UserCreate]) -> User:
        payload = payload or UserCreate()
        if not payload.name or not payload.email:
            raise ValidationError("Name and email are required")
        user = self.store.create(payload.name, payload.email)
        self.logger.info("User created", user_id=user.id)
        return user

    async def update_user(self, user_id, payload: Any = None) -> User:
        """
        Apply a partial update. The user is looked up before the payload is
        validated, so an unknown id is reported as not found whatever the body.
        """
        parsed = parse_user_id(user_id)
        if self.store.get(parsed) is None:
            raise NotFoundError()

        changes = self._validate_update(payload)
        user = self.store.update(parsed, name=changes.name, email=changes.email)
        if user is None:
            raise NotFoundError()
        self.logger.info(
            "User updated",
            user_id=user.id,
            fields=[f for f in ("name", "email") if getattr(changes, f)],
        )
        return user

    async def delete_user(self, user_id) -> None:
        parsed = parse_user_id(user_id)
        if not self.store.delete(parsed):
            raise NotFoundError()
        self.logger.info("User deleted", user_id=parsed)

    @staticmethod
    def _validate_update(payload: Any) -> UserUpdate:
        if payload is None:
            return UserUpdate()
        if isinstance(payload, UserUpdate):
            return payload
        try:
            return UserUpdate.model_validate(payload)
        except PayloadError:
            raise ValidationError() from None

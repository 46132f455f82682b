from typing import Optional

from pydantic import BaseModel, ConfigDict


class User(BaseModel):
    id: int
    name: str
    email: str


class UserCreate(BaseModel):
    """Create payload. Presence of both fields is checked by the service."""

    model_config = ConfigDict(extra="forbid")

    name: Optional[str] = None
    email: Optional[str] = None


class UserUpdate(BaseModel):
    """Partial update payload; empty or missing fields leave the record as is."""

    model_config = ConfigDict(extra="forbid")

    name: Optional[str] = None
    email: Optional[str] = None

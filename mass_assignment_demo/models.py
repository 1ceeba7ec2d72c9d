from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_ROLE = "user"
DEFAULT_ORGANIZATION = "default_org"


class User(BaseModel):
    """The full user record, privileged fields included.

    Passwords are kept and returned in plaintext on purpose; this service
    demonstrates over-exposure alongside mass assignment.
    """

    model_config = ConfigDict(frozen=True)

    username: str
    password: str
    email: str = Field(..., description="Unique key in the store")
    role: str
    organization: str


class CreateUser(BaseModel):
    """Allow-listed input for the secure creation path.

    Unknown keys are rejected so ``role`` and ``organization`` can never be
    smuggled in by a client.
    """

    model_config = ConfigDict(extra="forbid")

    username: str
    password: str
    email: str

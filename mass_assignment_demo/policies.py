"""Record construction policies for the two creation paths.

Both take already-parsed client input and return the full ``User`` that will
be stored. Neither touches the store.
"""

from __future__ import annotations

from mass_assignment_demo.models import DEFAULT_ORGANIZATION, DEFAULT_ROLE, CreateUser, User


def build_user_vulnerable(payload: User) -> User:
    # Every field comes straight from the client, role and organization included.
    return payload.model_copy()


def build_user_secure(payload: CreateUser) -> User:
    return User(
        username=payload.username,
        password=payload.password,
        email=payload.email,
        role=DEFAULT_ROLE,
        organization=DEFAULT_ORGANIZATION,
    )

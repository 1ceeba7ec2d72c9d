from __future__ import annotations

import logging
import threading
from typing import Dict, Optional

from mass_assignment_demo.models import User

logger = logging.getLogger("mass_assignment_demo.store")


class InMemoryUserStore:
    """Thread-safe in-memory user store keyed by email.

    Storage semantics:
    - Stored only in the API process memory (cleared on restart).
    - Records are never updated or removed once inserted.
    - Emails are used verbatim as keys (no case folding or trimming).
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._users: Dict[str, User] = {}

    def exists(self, *, email: str) -> bool:
        with self._lock:
            return email in self._users

    def insert_if_absent(self, *, email: str, user: User) -> bool:
        """Insert ``user`` unless ``email`` is already taken.

        The check and the write happen under a single lock acquisition, so of
        several callers racing on the same email exactly one gets ``True``.
        """
        if user.email != email:
            raise ValueError("Store key must match the record's email")
        with self._lock:
            if email in self._users:
                return False
            self._users[email] = user
        logger.debug("Stored user %s (%d total)", email, len(self))
        return True

    def get(self, *, email: str) -> Optional[User]:
        with self._lock:
            return self._users.get(email)

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)

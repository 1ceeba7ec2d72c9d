from __future__ import annotations

from mass_assignment_demo.settings import Settings, get_settings
from mass_assignment_demo.store import InMemoryUserStore


def get_settings_dep() -> Settings:
    """FastAPI dependency for settings.

    Delegates to mass_assignment_demo.settings.get_settings (canonical constructor).
    """
    return get_settings()


# One store for the whole process; every request handler shares it by reference.
# Tests swap it out through app.dependency_overrides[get_store].
_STORE = InMemoryUserStore()


def get_store() -> InMemoryUserStore:
    return _STORE

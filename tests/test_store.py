import threading

import pytest

from mass_assignment_demo.models import User
from mass_assignment_demo.store import InMemoryUserStore


def _user(email: str, role: str = "user") -> User:
    return User(username="u", password="p", email=email, role=role, organization="default_org")


def test_insert_if_absent_then_exists():
    s = InMemoryUserStore()
    assert not s.exists(email="a@x.com")

    assert s.insert_if_absent(email="a@x.com", user=_user("a@x.com")) is True
    assert s.exists(email="a@x.com")
    assert s.get(email="a@x.com") == _user("a@x.com")
    assert len(s) == 1


def test_second_insert_does_not_overwrite():
    s = InMemoryUserStore()
    s.insert_if_absent(email="a@x.com", user=_user("a@x.com", role="user"))

    assert s.insert_if_absent(email="a@x.com", user=_user("a@x.com", role="admin")) is False
    assert s.get(email="a@x.com").role == "user"
    assert len(s) == 1


def test_emails_are_keys_verbatim():
    s = InMemoryUserStore()
    assert s.insert_if_absent(email="a@x.com", user=_user("a@x.com"))
    assert s.insert_if_absent(email="A@x.com", user=_user("A@x.com"))
    assert len(s) == 2


def test_key_must_match_record_email():
    s = InMemoryUserStore()
    with pytest.raises(ValueError):
        s.insert_if_absent(email="other@x.com", user=_user("a@x.com"))
    assert len(s) == 0


def test_concurrent_inserts_same_email_exactly_one_wins():
    s = InMemoryUserStore()
    barrier = threading.Barrier(16)
    results: list[bool] = []
    results_lock = threading.Lock()

    def worker(i: int) -> None:
        barrier.wait()
        ok = s.insert_if_absent(email="race@x.com", user=_user("race@x.com", role=f"r{i}"))
        with results_lock:
            results.append(ok)

    threads = [threading.Thread(target=worker, args=(i,)) for i in range(16)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert results.count(True) == 1
    assert results.count(False) == 15
    assert len(s) == 1


def test_concurrent_inserts_distinct_emails_all_succeed():
    s = InMemoryUserStore()

    def worker(i: int) -> None:
        email = f"user{i}@x.com"
        assert s.insert_if_absent(email=email, user=_user(email))

    threads = [threading.Thread(target=worker, args=(i,)) for i in range(32)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(s) == 32

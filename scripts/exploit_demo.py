from __future__ import annotations

import sys
import uuid

import requests

# Run the server first: mass-assignment-demo (or python -m mass_assignment_demo.main)
BASE_URL = "http://127.0.0.1:8080"


def main() -> int:
    base = sys.argv[1] if len(sys.argv) > 1 else BASE_URL
    tag = uuid.uuid4().hex[:8]
    attack = {
        "username": "mallory",
        "password": "hunter2",
        "role": "admin",
        "organization": "victim_corp",
    }

    try:
        r = requests.post(
            f"{base}/vulnerable/user/create",
            json={**attack, "email": f"mallory-{tag}@vuln.example"},
            timeout=10,
        )
    except requests.exceptions.RequestException as e:
        print(f"Could not reach {base}: {e.__class__.__name__}")
        return 1
    print("/vulnerable", r.status_code, r.text)
    if r.status_code != 201 or r.json().get("role") != "admin":
        print("expected the vulnerable path to persist role=admin")
        return 1

    r = requests.post(
        f"{base}/secure/user/create",
        json={**attack, "email": f"mallory-{tag}@secure.example"},
        timeout=10,
    )
    print("/secure (with role)", r.status_code, r.text)

    r = requests.post(
        f"{base}/secure/user/create",
        json={"username": "mallory", "password": "hunter2", "email": f"mallory-{tag}@secure.example"},
        timeout=10,
    )
    print("/secure (dto only)", r.status_code, r.text)
    if r.status_code != 201 or r.json().get("role") != "user":
        print("expected the secure path to assign role=user")
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())

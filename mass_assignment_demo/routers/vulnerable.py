from __future__ import annotations

import logging

from fastapi import APIRouter, Body, Depends, status
from fastapi.responses import JSONResponse, PlainTextResponse

from mass_assignment_demo.deps import get_store
from mass_assignment_demo.models import User
from mass_assignment_demo.policies import build_user_vulnerable
from mass_assignment_demo.store import InMemoryUserStore

logger = logging.getLogger("mass_assignment_demo.vulnerable")

router = APIRouter(prefix="/vulnerable", tags=["vulnerable"])

CONFLICT_MESSAGE = "User with this email already exists."


@router.post("/user/create", status_code=status.HTTP_201_CREATED, response_model=User)
async def create_user_vulnerable(
    payload: User = Body(...),
    store: InMemoryUserStore = Depends(get_store),
):
    """Create a user from the full client-supplied record.

    Deliberately unsafe: whatever the client sends for ``role`` and
    ``organization`` is persisted as-is.
    """
    if store.exists(email=payload.email):
        logger.info("[VULNERABLE] Rejected duplicate email: %s", payload.email)
        return PlainTextResponse(CONFLICT_MESSAGE, status_code=status.HTTP_409_CONFLICT)

    new_user = build_user_vulnerable(payload)
    if not store.insert_if_absent(email=new_user.email, user=new_user):
        logger.info("[VULNERABLE] Lost creation race for email: %s", new_user.email)
        return PlainTextResponse(CONFLICT_MESSAGE, status_code=status.HTTP_409_CONFLICT)

    logger.info("[VULNERABLE] Created user: %r", new_user)
    return JSONResponse(new_user.model_dump(), status_code=status.HTTP_201_CREATED)

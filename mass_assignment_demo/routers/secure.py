from __future__ import annotations

import logging

from fastapi import APIRouter, Body, Depends, status
from fastapi.responses import JSONResponse, PlainTextResponse

from mass_assignment_demo.deps import get_store
from mass_assignment_demo.models import CreateUser, User
from mass_assignment_demo.policies import build_user_secure
from mass_assignment_demo.routers.vulnerable import CONFLICT_MESSAGE
from mass_assignment_demo.store import InMemoryUserStore

logger = logging.getLogger("mass_assignment_demo.secure")

router = APIRouter(prefix="/secure", tags=["secure"])


@router.post("/user/create", status_code=status.HTTP_201_CREATED, response_model=User)
async def create_user_secure(
    payload: CreateUser = Body(...),
    store: InMemoryUserStore = Depends(get_store),
):
    """Create a user from the allow-listed DTO; role and organization are server-assigned."""
    if store.exists(email=payload.email):
        logger.info("[SECURE] Rejected duplicate email: %s", payload.email)
        return PlainTextResponse(CONFLICT_MESSAGE, status_code=status.HTTP_409_CONFLICT)

    new_user = build_user_secure(payload)
    if not store.insert_if_absent(email=new_user.email, user=new_user):
        logger.info("[SECURE] Lost creation race for email: %s", new_user.email)
        return PlainTextResponse(CONFLICT_MESSAGE, status_code=status.HTTP_409_CONFLICT)

    logger.info("[SECURE] Created user: %r", new_user)
    return JSONResponse(new_user.model_dump(), status_code=status.HTTP_201_CREATED)

from __future__ import annotations

import logging

import uvicorn
from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse

from mass_assignment_demo.deps import get_settings_dep, get_store
from mass_assignment_demo.logging_config import configure_logging
from mass_assignment_demo.routers.secure import router as secure_router
from mass_assignment_demo.routers.vulnerable import router as vulnerable_router
from mass_assignment_demo.settings import get_settings
from mass_assignment_demo.store import InMemoryUserStore

configure_logging(get_settings().log_level)

logger = logging.getLogger("mass_assignment_demo")

APP_VERSION = "1.0.0"

app = FastAPI(title="Mass Assignment Demo", version=APP_VERSION)
app.include_router(vulnerable_router)
app.include_router(secure_router)


@app.get("/healthz")
def healthz(store: InMemoryUserStore = Depends(get_store)):
    return JSONResponse(
        {
            "ok": True,
            "service": "mass-assignment-demo",
            "version": APP_VERSION,
            "users": len(store),
        }
    )


def run() -> None:
    """Serve the app with uvicorn on the configured address (127.0.0.1:8080 by default)."""
    s = get_settings_dep()
    logger.info("Server starting on http://%s:%s", s.host, s.port)
    uvicorn.run(app, host=s.host, port=s.port, log_level=s.log_level.lower())


if __name__ == "__main__":
    run()

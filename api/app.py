from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from fastapi.staticfiles import StaticFiles

from api.core.config import Settings, get_settings
from api.core.logging_config import setup_logging
from api.repositories.json_storage import JsonStore
from api.routers import initiatives as initiatives_router
from api.routers import users as users_router
from api.services.initiative_service import InitiativeService
from api.services.user_service import UserService

logger = logging.getLogger(__name__)

DEV_ORIGINS = {
    "http://localhost:3000",
    "http://127.0.0.1:3000",
    "http://localhost:5173",
    "http://127.0.0.1:5173",
}


async def _invalid_body(request: Request, exc: RequestValidationError) -> PlainTextResponse:
    # malformed JSON or a body that is not an object
    return PlainTextResponse("Invalid request body.", status_code=400)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the API with services bound to the configured data files."""
    settings = settings or get_settings()
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title="Initiatives API")
    app.state.settings = settings
    app.state.initiative_service = InitiativeService(JsonStore(settings.initiatives_file))
    app.state.user_service = UserService(JsonStore(settings.users_file))

    allowed_cors = set(settings.cors_origins)
    if settings.app_env != "prod":
        allowed_cors.update(DEV_ORIGINS)
    if allowed_cors:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=sorted(allowed_cors),
            allow_methods=["GET", "POST", "OPTIONS"],
            allow_headers=["*"],
        )
    app.add_exception_handler(RequestValidationError, _invalid_body)

    app.include_router(initiatives_router.router)
    app.include_router(users_router.router)

    # frontend assets; mounted last so API routes win
    if settings.static_dir.is_dir():
        app.mount("/", StaticFiles(directory=settings.static_dir, html=True), name="static")
    else:
        logger.debug("Static directory %s not found; serving API only", settings.static_dir)

    logger.info(
        "Initiatives API ready (initiatives=%s, users=%s)",
        settings.initiatives_file,
        settings.users_file,
    )
    return app


app = create_app()

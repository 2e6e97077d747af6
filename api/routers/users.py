from __future__ import annotations

import logging

from fastapi import APIRouter, Body, Request
from fastapi.responses import JSONResponse, PlainTextResponse

from api.repositories.json_storage import MalformedStoreError
from api.services.errors import RecordError
from api.services.user_service import UserService

router = APIRouter(tags=["users"])
logger = logging.getLogger(__name__)

STORE_ERRORS = (OSError, MalformedStoreError)


def _get_user_service(request: Request) -> UserService:
    svc = getattr(getattr(request.app, "state", None), "user_service", None)
    if not svc:
        raise RuntimeError("UserService not configured")
    return svc


@router.post("/api/users")
def register_user(request: Request, payload: dict = Body(default_factory=dict)):
    svc = _get_user_service(request)
    try:
        svc.register(payload)
    except RecordError as exc:
        return PlainTextResponse(exc.message, status_code=exc.status_code)
    except STORE_ERRORS:
        logger.exception("Error saving user")
        return PlainTextResponse("Failed to save user.", status_code=500)
    return PlainTextResponse("User registered successfully. please login at new email", status_code=201)


@router.get("/api/users/organizers")
def list_organizers(request: Request):
    svc = _get_user_service(request)
    try:
        return JSONResponse(svc.organizers())
    except STORE_ERRORS:
        logger.exception("Error fetching organizers")
        return PlainTextResponse("Failed to fetch organizers.", status_code=500)


@router.get("/test-read-users")
def read_all_users(request: Request):
    """Diagnostic dump of the users file."""
    svc = _get_user_service(request)
    try:
        return JSONResponse(svc.list_all())
    except STORE_ERRORS:
        logger.exception("Error testing read users")
        return PlainTextResponse("Failed to read users.", status_code=500)

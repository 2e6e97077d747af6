from __future__ import annotations

import logging

from fastapi import APIRouter, Body, Request
from fastapi.responses import JSONResponse, PlainTextResponse

from api.repositories.json_storage import MalformedStoreError
from api.services.errors import RecordError
from api.services.initiative_service import InitiativeService

router = APIRouter(prefix="/api/initiatives", tags=["initiatives"])
logger = logging.getLogger(__name__)

STORE_ERRORS = (OSError, MalformedStoreError)


def _get_initiative_service(request: Request) -> InitiativeService:
    svc = getattr(getattr(request.app, "state", None), "initiative_service", None)
    if not svc:
        raise RuntimeError("InitiativeService not configured")
    return svc


def _error_response(err: RecordError) -> PlainTextResponse:
    return PlainTextResponse(err.message, status_code=err.status_code)


@router.get("")
def list_initiatives(request: Request):
    svc = _get_initiative_service(request)
    try:
        return JSONResponse(svc.list_all())
    except STORE_ERRORS:
        logger.exception("Error reading initiatives")
        return PlainTextResponse("Failed to fetch initiatives.", status_code=500)


@router.post("")
def add_initiative(request: Request, payload: dict = Body(default_factory=dict)):
    svc = _get_initiative_service(request)
    try:
        svc.register(payload)
    except RecordError as exc:
        return _error_response(exc)
    except STORE_ERRORS:
        logger.exception("Error saving initiative")
        return PlainTextResponse("Failed to save initiative.", status_code=500)
    return PlainTextResponse("Initiative added successfully.", status_code=201)


@router.post("/{initiative_id}")
def update_initiative(initiative_id: str, request: Request, payload: dict = Body(default_factory=dict)):
    svc = _get_initiative_service(request)
    try:
        svc.assign_organizer(initiative_id, payload.get("organizer"))
    except RecordError as exc:
        return _error_response(exc)
    except STORE_ERRORS:
        logger.exception("Error updating initiative %s", initiative_id)
        return PlainTextResponse("Failed to update initiative.", status_code=500)
    return PlainTextResponse("Initiative updated successfully.", status_code=200)


@router.get("/organizer/{name}")
def initiatives_by_organizer(name: str, request: Request):
    svc = _get_initiative_service(request)
    try:
        return JSONResponse(svc.by_organizer(name))
    except STORE_ERRORS:
        logger.exception("Error fetching initiatives by organizer")
        return PlainTextResponse("Failed to fetch initiatives.", status_code=500)

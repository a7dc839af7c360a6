"""
FastAPI dependency providers.

Everything a handler needs is built once by `create_app` and kept on
`app.state`; these functions hand it to routes.
"""

from __future__ import annotations

import json
from typing import Callable, TypeVar

import pydantic
from fastapi import Request
from fastapi.exceptions import RequestValidationError

from hostel.auth.service import AuthService
from hostel.config import Settings
from hostel.services import ComplaintService, FineService, GatePassService, RoomService
from hostel.storage import StorageProvider

P = TypeVar("P", bound=pydantic.BaseModel)


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_storage(request: Request) -> StorageProvider:
    return request.app.state.storage


def get_auth_service(request: Request) -> AuthService:
    return request.app.state.auth_service


def get_room_service(request: Request) -> RoomService:
    return request.app.state.room_service


def get_complaint_service(request: Request) -> ComplaintService:
    return request.app.state.complaint_service


def get_fine_service(request: Request) -> FineService:
    return request.app.state.fine_service


def get_gatepass_service(request: Request) -> GatePassService:
    return request.app.state.gatepass_service


# =============================================================================
# Request bodies
# =============================================================================


def json_body(model: type[P]) -> Callable:
    """
    Parse the JSON body into `model` as a dependency.

    A plain body parameter is parsed by FastAPI before any dependency runs.
    Declared after the session or role gate, this one only reads the body
    once the caller is let through, so anonymous callers always get 401 and
    other roles 403, whatever they sent.

    Failures raise RequestValidationError with `body`-prefixed locations,
    the same shape FastAPI produces for a body parameter.
    """

    async def dependency(request: Request) -> P:
        raw = await request.body()
        try:
            data = json.loads(raw) if raw else {}
        except ValueError as e:
            error = {
                "type": "json_invalid",
                "loc": ("body", getattr(e, "pos", 0)),
                "msg": "JSON decode error",
                "input": {},
            }
            raise RequestValidationError([error]) from e

        try:
            return model.model_validate(data)
        except pydantic.ValidationError as e:
            raise RequestValidationError(
                [{**error, "loc": ("body", *error["loc"])} for error in e.errors()],
                body=data,
            ) from e

    return dependency

"""FastAPI routes for the Registration domain.

Every RPC operation is listed in an explicit dispatch table built from the
directory handed to ``create_router``. Adding an operation means adding a
row to ``build_operations``.

NOTE: these endpoints perform no authentication or authorization. Anyone who
can reach the service can register, unregister and list devices.
"""

from collections.abc import Callable
from dataclasses import dataclass

from fastapi import APIRouter, Body, HTTPException
from fastapi.responses import JSONResponse
from protean.domain import Domain
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from registration.api.schemas import (
    CollectionResponse,
    ListDevicesParams,
    RegIdParams,
    RegistrationRecordResponse,
    StatusResponse,
)
from registration.device.directory import RegistrationDirectory

API_NAME = "registration"
API_VERSION = "v1"


@dataclass(frozen=True)
class Operation:
    """One entry of the dispatch table: parameter schema plus handler."""

    name: str
    params: type[BaseModel]
    handler: Callable[[BaseModel], BaseModel]


def build_operations(directory: RegistrationDirectory) -> dict[str, Operation]:
    """Build the operation name -> handler table for a directory."""

    def register(params: RegIdParams) -> StatusResponse:
        directory.register(params.reg_id)
        return StatusResponse()

    def unregister(params: RegIdParams) -> StatusResponse:
        directory.unregister(params.reg_id)
        return StatusResponse()

    def list_devices(params: ListDevicesParams) -> CollectionResponse:
        records = directory.list(params.count)
        return CollectionResponse(
            items=[RegistrationRecordResponse(id=str(r.id), reg_id=r.reg_id) for r in records]
        )

    operations = [
        Operation("register", RegIdParams, register),
        Operation("unregister", RegIdParams, unregister),
        Operation("list", ListDevicesParams, list_devices),
        # Name used by existing mobile clients
        Operation("listDevices", ListDevicesParams, list_devices),
    ]
    return {op.name: op for op in operations}


def create_router(directory: RegistrationDirectory, domain: Domain) -> APIRouter:
    """Return a router serving ``POST /registration/v1/{operation}``.

    Each call runs inside ``domain``'s context so the store can reach its
    provider from the worker thread FastAPI runs the handler on.
    """
    operations = build_operations(directory)
    router = APIRouter(prefix=f"/{API_NAME}/{API_VERSION}", tags=["registration"])

    @router.post("/{operation}")
    def dispatch(operation: str, payload: dict | None = Body(default=None)) -> JSONResponse:
        """Invoke a directory operation with a JSON object of parameters."""
        op = operations.get(operation)
        if op is None:
            raise HTTPException(status_code=404, detail=f"Unknown operation: {operation}")

        try:
            params = op.params.model_validate(payload or {})
        except PydanticValidationError as exc:
            raise HTTPException(
                status_code=422,
                detail=exc.errors(include_url=False, include_context=False, include_input=False),
            ) from None

        with domain.domain_context():
            result = op.handler(params)
        return JSONResponse(status_code=200, content=result.model_dump(mode="json", by_alias=True))

    return router

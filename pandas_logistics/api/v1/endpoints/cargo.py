"""
Cargo JSON endpoints under the API prefix.
"""
import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from pandas_logistics.api.dependencies import get_cargo_service, get_settings
from pandas_logistics.api.payload import read_payload
from pandas_logistics.core.config import Settings
from pandas_logistics.infrastructure.exceptions import InfrastructureError, RequestValidationFailed
from pandas_logistics.infrastructure.response import error_response, public_error_message, success_response
from pandas_logistics.services import CargoService

logger = logging.getLogger(__name__)

router = APIRouter()


async def register_cargo_json(request: Request, service: CargoService, settings: Settings):
    """
    Shared body of the JSON registration routes

    Returns the success envelope, a 400 on invalid input or a 500 carrying
    the database error.
    """
    try:
        payload = await read_payload(request)
        cargo_data = CargoService.parse(payload)
        cargo = await run_in_threadpool(service.register_cargo, cargo_data)
    except RequestValidationFailed as e:
        return JSONResponse(status_code=e.status_code, content=error_response(error=e.message))
    except InfrastructureError as e:
        return JSONResponse(
            status_code=500,
            content=error_response(
                error="Failed to register cargo",
                message=public_error_message(e, settings.is_production),
            ),
        )
    return success_response(data=cargo, message="Cargo registered successfully")


@router.get("/cargo")
def list_cargo(
        service: CargoService = Depends(get_cargo_service),
        settings: Settings = Depends(get_settings),
):
    """All cargo records, newest first, no pagination"""
    try:
        items = service.list_cargo()
    except InfrastructureError as e:
        return JSONResponse(
            status_code=500,
            content=error_response(
                error="Failed to fetch cargo",
                message=public_error_message(e, settings.is_production),
            ),
        )
    return success_response(data=items, count=len(items))


@router.post("/cargo")
async def create_cargo(
        request: Request,
        service: CargoService = Depends(get_cargo_service),
        settings: Settings = Depends(get_settings),
):
    """Register a cargo record"""
    return await register_cargo_json(request, service, settings)

"""
Routes outside the API prefix: cargo dashboard, form/JSON registration
and tracking lookups.
"""
import logging
import os

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, RedirectResponse
from fastapi.templating import Jinja2Templates
from starlette.concurrency import run_in_threadpool

from pandas_logistics.api.dependencies import get_cargo_service, get_settings, get_tracking_provider
from pandas_logistics.api.payload import read_payload
from pandas_logistics.api.v1.endpoints.cargo import register_cargo_json
from pandas_logistics.core.config import Settings
from pandas_logistics.infrastructure.exceptions import InfrastructureError, RequestValidationFailed
from pandas_logistics.infrastructure.response import error_response, public_error_message
from pandas_logistics.infrastructure.tracking import ITrackingProvider
from pandas_logistics.services import CargoService

logger = logging.getLogger(__name__)

TEMPLATES_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "templates")
templates = Jinja2Templates(directory=TEMPLATES_DIR)

router = APIRouter()


@router.get("/cargo")
def cargo_dashboard(
        request: Request,
        service: CargoService = Depends(get_cargo_service),
        settings: Settings = Depends(get_settings),
):
    """
    HTML listing of every cargo record with a registration form

    Filtering by sender name or destination happens in the browser on the
    rows rendered here.
    """
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
    return templates.TemplateResponse(
        request,
        "cargo_list.html",
        {"cargo_items": items, "platform": settings.PROJECT_NAME, "tagline": settings.TAGLINE},
    )


@router.post("/add-cargo")
async def add_cargo(
        request: Request,
        service: CargoService = Depends(get_cargo_service),
        settings: Settings = Depends(get_settings),
):
    """Register a cargo record and acknowledge with JSON"""
    return await register_cargo_json(request, service, settings)


@router.post("/add-cargo-web")
async def add_cargo_web(
        request: Request,
        service: CargoService = Depends(get_cargo_service),
        settings: Settings = Depends(get_settings),
):
    """Register a cargo record from the dashboard form, then redirect back to it"""
    try:
        payload = await read_payload(request)
        cargo_data = CargoService.parse(payload)
        await run_in_threadpool(service.register_cargo, cargo_data)
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
    return RedirectResponse(url="/cargo", status_code=303)


@router.get("/track/{cargo_id}")
def track_cargo(
        cargo_id: str,
        provider: ITrackingProvider = Depends(get_tracking_provider),
        settings: Settings = Depends(get_settings),
):
    """
    Tracking status of a cargo

    ``{"status": null}`` when the identifier is unknown.
    """
    try:
        return CargoService.track(cargo_id, provider)
    except InfrastructureError as e:
        logger.error(f"Tracking failed for {cargo_id}: {e}")
        return JSONResponse(
            status_code=500,
            content={"error": public_error_message(e, settings.is_production)},
        )

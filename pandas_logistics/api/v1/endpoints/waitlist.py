import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from pandas_logistics.api.dependencies import get_settings, get_waitlist_service
from pandas_logistics.api.payload import read_payload
from pandas_logistics.core.config import Settings
from pandas_logistics.infrastructure.exceptions import InfrastructureError, RequestValidationFailed
from pandas_logistics.infrastructure.response import error_response, public_error_message, success_response
from pandas_logistics.services import WaitlistService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/waitlist")
async def join_waitlist(
        request: Request,
        service: WaitlistService = Depends(get_waitlist_service),
        settings: Settings = Depends(get_settings),
):
    """
    Join the waitlist

    Accepts JSON or form data with ``name`` and ``email`` plus optional
    ``phone``, ``company``, ``user_type`` and ``region``. The submitted
    values are echoed back.
    """
    try:
        payload = await read_payload(request)
        signup = WaitlistService.parse(payload)
        data = await run_in_threadpool(service.join, signup)
    except RequestValidationFailed as e:
        return JSONResponse(status_code=e.status_code, content=error_response(error=e.message))
    except InfrastructureError as e:
        return JSONResponse(
            status_code=500,
            content=error_response(
                error="Failed to process waitlist signup",
                message=public_error_message(e, settings.is_production),
            ),
        )

    return success_response(data=data, message="Successfully joined waitlist!")

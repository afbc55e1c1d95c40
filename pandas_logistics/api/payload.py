"""
Request body helpers

Endpoints that accept both JSON and HTML form submissions read their body
through ``read_payload`` and validate the resulting mapping themselves.
"""
import json
import logging
from typing import Any, Dict

from fastapi import Request

from pandas_logistics.infrastructure.exceptions import RequestValidationFailed

logger = logging.getLogger(__name__)

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


async def read_payload(request: Request) -> Dict[str, Any]:
    """
    Parse the request body as JSON or form data

    An empty body yields an empty mapping so the caller reports the missing
    fields.

    Raises:
        RequestValidationFailed: malformed JSON or a JSON body that is not an object
    """
    content_type = request.headers.get("content-type", "").split(";")[0].strip().lower()

    if content_type in FORM_CONTENT_TYPES:
        form = await request.form()
        return {key: value for key, value in form.items() if isinstance(value, str)}

    body = await request.body()
    if not body.strip():
        return {}

    try:
        payload = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError):
        logger.warning(f"Malformed JSON body on {request.url.path}")
        raise RequestValidationFailed("Request body must be valid JSON")

    if not isinstance(payload, dict):
        raise RequestValidationFailed("Request body must be a JSON object")
    return payload

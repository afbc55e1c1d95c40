from datetime import datetime, timezone
from typing import Any, Dict, Optional


GENERIC_ERROR_MESSAGE = "Something went wrong"


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with millisecond precision and a trailing Z."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def success_response(
    data: Any = None,
    message: Optional[str] = None,
    **extra: Any,
) -> Dict[str, Any]:
    """
    Build a success envelope

    Args:
        data: payload placed under ``data``; omitted when None
        message: optional human readable message
        **extra: additional top-level fields (``count``, ``users``...)

    Returns:
        Dict[str, Any]: ``{"success": True, ..., "timestamp": ...}``
    """
    body: Dict[str, Any] = {"success": True}
    if message is not None:
        body["message"] = message
    if data is not None:
        body["data"] = data
    body.update(extra)
    body["timestamp"] = utc_timestamp()
    return body


def error_response(
    error: str,
    message: Optional[str] = None,
    **extra: Any,
) -> Dict[str, Any]:
    """
    Build an error envelope

    Args:
        error: short description of what failed
        message: detail, usually the underlying exception message
        **extra: additional top-level fields

    Returns:
        Dict[str, Any]: ``{"success": False, "error": ..., ...}``
    """
    body: Dict[str, Any] = {"success": False, "error": error}
    if message is not None:
        body["message"] = message
    body.update(extra)
    body["timestamp"] = utc_timestamp()
    return body


def public_error_message(exc: BaseException, production: bool) -> str:
    """Raw exception text outside production, a generic message inside it."""
    if production:
        return GENERIC_ERROR_MESSAGE
    return str(exc)

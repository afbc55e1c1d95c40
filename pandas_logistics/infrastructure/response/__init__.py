"""Response envelope helpers"""

from .response_formatter import (
    utc_timestamp,
    success_response,
    error_response,
    public_error_message,
)

__all__ = [
    "utc_timestamp",
    "success_response",
    "error_response",
    "public_error_message",
]

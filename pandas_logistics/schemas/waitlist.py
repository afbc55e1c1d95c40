from typing import Any, Optional

from pydantic import BaseModel


class WaitlistCreate(BaseModel):
    """
    Waitlist signup request

    ``name`` and ``email`` are checked by the waitlist service so the
    caller gets the same messages for JSON and form submissions. The
    optional contact fields are free-form and echoed back as sent.
    """
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Any = None
    company: Any = None
    user_type: Any = None
    region: Any = None

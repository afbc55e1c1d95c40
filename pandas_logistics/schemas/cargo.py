from typing import Optional

from pydantic import BaseModel


class CargoCreate(BaseModel):
    """Cargo registration request, all three fields are required free text."""
    sender_name: Optional[str] = None
    cargo_details: Optional[str] = None
    destination: Optional[str] = None


class TrackingStatus(BaseModel):
    """Tracking lookup result, ``status`` is None when the id is unknown."""
    status: Optional[str] = None
    location: Optional[str] = None
    eta: Optional[str] = None
    destination: Optional[str] = None
    sender_name: Optional[str] = None
    registered_at: Optional[str] = None

    def to_dict(self) -> dict:
        if self.status is None:
            return {"status": None}
        return self.model_dump(exclude_none=True) | {
            "location": self.location,
            "eta": self.eta,
        }

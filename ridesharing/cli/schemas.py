"""Pydantic schemas validating operator input typed at the console prompts."""

from __future__ import annotations

from pydantic import BaseModel, Field, ValidationError

_TEXT = {"str_strip_whitespace": True}


class MenuSelection(BaseModel):
    choice: int

    model_config = _TEXT


class RiderRegistration(BaseModel):
    name: str = Field(..., min_length=1)
    phone_number: str = Field(..., min_length=1)

    model_config = _TEXT


class DriverRegistration(BaseModel):
    name: str = Field(..., min_length=1)
    phone_number: str = Field(..., min_length=1)
    vehicle_details: str = Field(..., min_length=1)

    model_config = _TEXT


class RideRequestInput(BaseModel):
    start_location: str = Field(..., min_length=1)
    destination: str = Field(..., min_length=1)

    model_config = _TEXT


class HistoryQuery(BaseModel):
    user_id: int

    model_config = _TEXT


def describe_error(exc: ValidationError) -> str:
    """Flatten a ``ValidationError`` into one operator-readable line."""
    parts = []
    for err in exc.errors():
        field = ".".join(str(loc) for loc in err["loc"])
        parts.append(f"{field}: {err['msg']}")
    return "Invalid input -- " + "; ".join(parts)

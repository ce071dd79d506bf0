from datetime import date
from typing import List, Optional
from pydantic import BaseModel, Field, field_validator

from shared.core.schemas import CommonQueryParams
from ..enum.booking_enum import ApprovalStatus, BookingStatus, BookingType
from ..services.expiry_service import parse_time


def _check_timestamp(value):
    if value in (None, ""):
        return None
    parse_time(value)  # raises ValueError
    return value


# ----------------- Base -----------------
class BookingBase(BaseModel):
    space_id: str = Field(min_length=1)
    customer_id: str = Field(min_length=1)
    start_date: str = Field(min_length=1)
    end_date: str = Field(min_length=1)
    setup_date: Optional[str] = None
    breakdown_date: Optional[str] = None
    responsible: str = Field(min_length=1)
    event_name: str = Field(min_length=1)
    description: Optional[str] = None
    situation_notes: Optional[str] = None
    status: BookingStatus = BookingStatus.pending
    type: BookingType = BookingType.paid
    approval_status: Optional[ApprovalStatus] = ApprovalStatus.pending
    contact_name: Optional[str] = None
    contact_email: Optional[str] = None
    price: float = Field(default=0, ge=0)
    attendees: int = Field(default=0, ge=0)
    created_at: Optional[str] = None

    model_config = {"from_attributes": True, "use_enum_values": True}

    @field_validator("start_date", "end_date", "setup_date", "breakdown_date", "created_at")
    @classmethod
    def validate_timestamp(cls, value):
        return _check_timestamp(value)


# ----------------- Create -----------------
class BookingCreate(BookingBase):
    pass


# ----------------- Update -----------------
class BookingUpdate(BaseModel):
    """Partial update: only the fields sent are merged onto the stored record."""
    id: str
    space_id: Optional[str] = None
    customer_id: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    setup_date: Optional[str] = None
    breakdown_date: Optional[str] = None
    responsible: Optional[str] = None
    event_name: Optional[str] = None
    description: Optional[str] = None
    situation_notes: Optional[str] = None
    status: Optional[BookingStatus] = None
    type: Optional[BookingType] = None
    approval_status: Optional[ApprovalStatus] = None
    contact_name: Optional[str] = None
    contact_email: Optional[str] = None
    price: Optional[float] = None
    attendees: Optional[int] = None

    model_config = {"use_enum_values": True}


# ----------------- Out -----------------
class BookingOut(BookingBase):
    id: str


class BookingView(BookingOut):
    customer_name: str = "(unknown)"
    space_name: str = "(unknown)"
    status_label: str = ""
    approval_label: str = ""


# ----------------- Request -----------------
class BookingRequest(CommonQueryParams):
    category: Optional[str] = None
    status: Optional[str] = None
    space_id: Optional[str] = None
    start_from: Optional[date] = None
    start_to: Optional[date] = None


# ----------------- List Response -----------------
class BookingListResponse(BaseModel):
    bookings: List[BookingView]
    total: int

    model_config = {"from_attributes": True}


class SweepResult(BaseModel):
    expired_ids: List[str]
    total: int

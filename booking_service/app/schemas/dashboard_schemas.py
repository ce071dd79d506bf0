from typing import Dict, List
from pydantic import BaseModel

from .bookings_schemas import BookingView


class DashboardKpisResponse(BaseModel):
    customerCount: int
    spaceCount: int
    staffCount: int
    bookingCount: int
    perStatusCount: Dict[str, int]
    perStaffCount: Dict[str, int]


class ValuesOverviewResponse(BaseModel):
    confirmedTotal: float
    pendingTotal: float
    confirmedTotalFormatted: str
    pendingTotalFormatted: str
    confirmedBookings: List[BookingView]
    pendingBookings: List[BookingView]

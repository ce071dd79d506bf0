from typing import List, Optional
from pydantic import BaseModel

from .bookings_schemas import BookingView


class DayCell(BaseModel):
    day: int
    date: str
    is_today: bool = False
    bookings: List[BookingView]
    preview: List[BookingView]
    overflow: int


class MonthRef(BaseModel):
    year: int
    month: int


class MonthGridResponse(BaseModel):
    year: int
    month: int  # zero-based
    leading_blanks: int
    days_in_month: int
    # None marks a leading blank cell
    cells: List[Optional[DayCell]]
    space_ids: List[str]
    previous: MonthRef
    next: MonthRef


class DayAgendaResponse(BaseModel):
    date: str
    bookings: List[BookingView]


class SpaceToggleRequest(BaseModel):
    selected: List[str] = []
    space_id: Optional[str] = None


class SpaceSelectionResponse(BaseModel):
    selected: List[str]
    all_selected: bool

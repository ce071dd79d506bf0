from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from shared.core.database import get_db
from ..crud import bookings_crud as crud
from ..enum.booking_enum import BookingStatus, RecordCategory
from ..schemas.bookings_schemas import (
    BookingCreate, BookingListResponse, BookingOut, BookingRequest, BookingUpdate)

# A visit is a booking whose status is "visita"
router = APIRouter(prefix="/api/visits", tags=["Visits"])


@router.get("/all", response_model=BookingListResponse)
def get_visits(params: BookingRequest = Depends(), db: Session = Depends(get_db)):
    params.category = RecordCategory.visit.value
    return crud.get_bookings(db, params)


@router.post("/", response_model=BookingOut)
def create_visit(visit: BookingCreate, db: Session = Depends(get_db)):
    visit.status = BookingStatus.visit.value
    return crud.create_booking(db, visit)


@router.put("/", response_model=BookingOut)
def update_visit(visit: BookingUpdate, db: Session = Depends(get_db)):
    visit.status = BookingStatus.visit.value
    return crud.update_booking(db, visit)

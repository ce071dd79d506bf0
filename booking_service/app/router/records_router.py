from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from shared.core.database import get_db
from ..crud import bookings_crud as crud
from ..schemas.bookings_schemas import BookingListResponse, BookingRequest

router = APIRouter(prefix="/api/records", tags=["All Records"])


@router.get("/all", response_model=BookingListResponse)
def get_all_records(params: BookingRequest = Depends(), db: Session = Depends(get_db)):
    """Processes and visits together, every filter dimension available."""
    return crud.get_bookings(db, params)

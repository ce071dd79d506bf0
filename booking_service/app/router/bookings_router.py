from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from shared.core.database import get_db
from shared.core.schemas import Lookup
from ..crud import bookings_crud as crud
from ..enum.booking_enum import (
    APPROVAL_LABELS, STATUS_LABELS, ApprovalStatus, BookingStatus, BookingType)
from ..schemas.bookings_schemas import (
    BookingCreate, BookingListResponse, BookingOut, BookingRequest, BookingUpdate,
    BookingView, SweepResult)

router = APIRouter(prefix="/api/bookings", tags=["Bookings"])


# ---------------- List Bookings ----------------
@router.get("/all", response_model=BookingListResponse)
def get_bookings_endpoint(
    params: BookingRequest = Depends(),
    db: Session = Depends(get_db)
):
    return crud.get_bookings(db, params)


# ----------------- Expiry sweep -----------------
@router.post("/sweep-expirations", response_model=SweepResult)
def sweep_expirations_endpoint(db: Session = Depends(get_db)):
    expired = crud.sweep_expirations(db)
    return {"expired_ids": expired, "total": len(expired)}


# ----------------status Lookup by enum ----------------
@router.get("/status-lookup", response_model=List[Lookup])
def booking_status_lookup():
    return [Lookup(id=s.value, name=STATUS_LABELS[s.value]) for s in BookingStatus]


@router.get("/type-lookup", response_model=List[Lookup])
def booking_type_lookup():
    return [Lookup(id=t.value, name=t.name.capitalize()) for t in BookingType]


@router.get("/approval-status-lookup", response_model=List[Lookup])
def booking_approval_status_lookup():
    return [Lookup(id=a.value, name=APPROVAL_LABELS[a.value]) for a in ApprovalStatus]


# ----------------- Get Booking -----------------
@router.get("/{booking_id}", response_model=BookingView)
def get_booking_route(booking_id: str, db: Session = Depends(get_db)):
    return crud.get_booking(db, booking_id)


# ----------------- Create Booking -----------------
@router.post("/", response_model=BookingOut)
def create_booking_route(booking: BookingCreate, db: Session = Depends(get_db)):
    return crud.create_booking(db, booking)


# ----------------- Update Booking -----------------
@router.put("/", response_model=BookingOut)
def update_booking_route(booking_update: BookingUpdate, db: Session = Depends(get_db)):
    return crud.update_booking(db, booking_update)


# ---------------- Delete Booking ----------------
@router.delete("/{booking_id}")
def delete_booking_route(booking_id: str, db: Session = Depends(get_db)):
    return crud.delete_booking(db, booking_id)

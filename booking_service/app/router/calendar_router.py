from datetime import date
from typing import List, Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from shared.core.database import get_db
from ..crud import dashboard_crud
from ..crud.spaces_crud import all_space_ids
from ..schemas.calendar_schemas import (
    DayAgendaResponse, MonthGridResponse, SpaceSelectionResponse, SpaceToggleRequest)
from ..services import calendar_service

router = APIRouter(prefix="/api/calendar", tags=["Calendar"])


@router.get("/month", response_model=MonthGridResponse)
def get_month(
    year: int = Query(..., ge=1, le=9999),
    month: int = Query(..., ge=0, le=11, description="zero-based month"),
    space_ids: Optional[List[str]] = Query(None),
    preview_limit: Optional[int] = Query(None, ge=0),
    db: Session = Depends(get_db)
):
    return dashboard_crud.get_month_grid(db, year, month, space_ids, preview_limit)


@router.get("/agenda", response_model=DayAgendaResponse)
def get_agenda(
    day: date = Query(...),
    space_ids: Optional[List[str]] = Query(None),
    db: Session = Depends(get_db)
):
    return dashboard_crud.get_day_agenda(db, day, space_ids)


def _selection(selected: List[str], all_ids: List[str]):
    return {
        "selected": selected,
        "all_selected": set(selected) == set(all_ids) and len(selected) == len(all_ids),
    }


@router.post("/spaces/toggle", response_model=SpaceSelectionResponse)
def toggle_space(request: SpaceToggleRequest, db: Session = Depends(get_db)):
    selected = request.selected
    if request.space_id:
        selected = calendar_service.toggle_space(selected, request.space_id)
    return _selection(selected, all_space_ids(db))


@router.post("/spaces/toggle-all", response_model=SpaceSelectionResponse)
def toggle_all_spaces(request: SpaceToggleRequest, db: Session = Depends(get_db)):
    all_ids = all_space_ids(db)
    return _selection(calendar_service.toggle_all_spaces(request.selected, all_ids), all_ids)

from datetime import date
from typing import List, Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from shared.core.config import settings
from shared.core.database import get_db
from ..crud import dashboard_crud
from ..schemas.calendar_schemas import DayAgendaResponse, MonthGridResponse
from ..schemas.dashboard_schemas import DashboardKpisResponse, ValuesOverviewResponse

router = APIRouter(prefix="/api/dashboard", tags=["Dashboard"])


@router.get("/kpis", response_model=DashboardKpisResponse)
def get_kpis(db: Session = Depends(get_db)):
    return dashboard_crud.get_aggregate_counts(db)


@router.get("/calendar", response_model=MonthGridResponse)
def get_dashboard_calendar(
    year: int = Query(..., ge=1, le=9999),
    month: int = Query(..., ge=0, le=11),
    space_ids: Optional[List[str]] = Query(None),
    db: Session = Depends(get_db)
):
    return dashboard_crud.get_month_grid(
        db, year, month, space_ids, settings.DASHBOARD_PREVIEW_LIMIT)


@router.get("/agenda", response_model=DayAgendaResponse)
def get_dashboard_agenda(
    day: date = Query(...),
    space_ids: Optional[List[str]] = Query(None),
    db: Session = Depends(get_db)
):
    return dashboard_crud.get_day_agenda(db, day, space_ids)


values_router = APIRouter(prefix="/api/values", tags=["Values"])


@values_router.get("/overview", response_model=ValuesOverviewResponse)
def get_values_overview(db: Session = Depends(get_db)):
    return dashboard_crud.get_values_overview(db)

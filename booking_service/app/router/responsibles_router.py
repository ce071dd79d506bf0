from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from shared.core.database import get_db
from shared.core.schemas import Lookup
from ..crud import responsibles_crud as crud
from ..schemas.responsibles_schemas import (
    ResponsibleCreate, ResponsibleListResponse, ResponsibleOut, ResponsibleRequest,
    ResponsibleUpdate)

router = APIRouter(prefix="/api/responsibles", tags=["Responsibles"])


@router.get("/all", response_model=ResponsibleListResponse)
def get_responsibles(params: ResponsibleRequest = Depends(), db: Session = Depends(get_db)):
    return crud.get_responsibles(db, params)


@router.get("/lookup", response_model=List[Lookup])
def responsible_lookup(db: Session = Depends(get_db)):
    return crud.responsible_lookup(db)


@router.get("/{responsible_id}", response_model=ResponsibleOut)
def get_responsible(responsible_id: str, db: Session = Depends(get_db)):
    return crud.get_responsible(db, responsible_id)


@router.post("/", response_model=ResponsibleOut)
def create_responsible(responsible: ResponsibleCreate, db: Session = Depends(get_db)):
    return crud.create_responsible(db, responsible)


@router.put("/", response_model=ResponsibleOut)
def update_responsible(responsible: ResponsibleUpdate, db: Session = Depends(get_db)):
    return crud.update_responsible(db, responsible)


@router.delete("/{responsible_id}")
def delete_responsible(responsible_id: str, db: Session = Depends(get_db)):
    return crud.delete_responsible(db, responsible_id)

from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from shared.core.database import get_db
from shared.core.schemas import Lookup
from ..crud import spaces_crud as crud
from ..schemas.spaces_schemas import (
    SpaceCreate, SpaceListResponse, SpaceOut, SpaceRequest, SpaceUpdate)

router = APIRouter(prefix="/api/spaces", tags=["spaces"])


@router.get("/all", response_model=SpaceListResponse)
def get_spaces(params: SpaceRequest = Depends(), db: Session = Depends(get_db)):
    return crud.get_spaces(db, params)


@router.get("/lookup", response_model=List[Lookup])
def space_lookup(db: Session = Depends(get_db)):
    return crud.space_lookup(db)


@router.get("/{space_id}", response_model=SpaceOut)
def get_space(space_id: str, db: Session = Depends(get_db)):
    return crud.get_space(db, space_id)


@router.post("/", response_model=SpaceOut)
def create_space(space: SpaceCreate, db: Session = Depends(get_db)):
    return crud.create_space(db, space)


@router.put("/", response_model=SpaceOut)
def update_space(space: SpaceUpdate, db: Session = Depends(get_db)):
    return crud.update_space(db, space)


@router.delete("/{space_id}")
def delete_space(space_id: str, db: Session = Depends(get_db)):
    return crud.delete_space(db, space_id)

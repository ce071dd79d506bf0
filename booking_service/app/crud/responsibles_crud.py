from typing import List, Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session

from shared.core.database import commit_or_rollback
from shared.core.schemas import Lookup
from shared.helpers.json_response_helper import error_response, not_found
from shared.utils.app_status_code import AppStatusCode
from ..models.responsibles import Responsible
from ..schemas.responsibles_schemas import (
    ResponsibleCreate, ResponsibleListResponse, ResponsibleOut, ResponsibleRequest,
    ResponsibleUpdate)


def get_responsibles(db: Session, params: ResponsibleRequest) -> ResponsibleListResponse:
    query = db.query(Responsible)
    if params.search:
        search_term = f"%{params.search}%"
        query = query.filter(or_(Responsible.name.ilike(search_term),
                                 Responsible.role.ilike(search_term)))
    total = query.count()
    rows = (
        query
        .order_by(Responsible.name.asc())
        .offset(params.skip or 0)
        .limit(params.limit)
        .all()
    )
    return {"responsibles": [ResponsibleOut.model_validate(r) for r in rows], "total": total}


# Bookings reference staff by name, so the lookup id is the name too
def responsible_lookup(db: Session) -> List[Lookup]:
    rows = db.query(Responsible.name).order_by(Responsible.name.asc()).all()
    return [Lookup(id=r.name, name=r.name) for r in rows]


def get_responsible_by_id(db: Session, responsible_id: str) -> Optional[Responsible]:
    return db.query(Responsible).filter(Responsible.id == responsible_id).first()


def get_responsible(db: Session, responsible_id: str) -> ResponsibleOut:
    db_responsible = get_responsible_by_id(db, responsible_id)
    if not db_responsible:
        return not_found("Responsible", responsible_id)
    return ResponsibleOut.model_validate(db_responsible)


def create_responsible(db: Session, responsible: ResponsibleCreate) -> ResponsibleOut:
    db_responsible = Responsible(**responsible.model_dump())
    db.add(db_responsible)
    commit_or_rollback(db)
    db.refresh(db_responsible)
    return ResponsibleOut.model_validate(db_responsible)


def update_responsible(db: Session, responsible: ResponsibleUpdate) -> ResponsibleOut:
    db_responsible = get_responsible_by_id(db, responsible.id)
    if not db_responsible:
        return not_found("Responsible", responsible.id)

    update_data = responsible.model_dump(exclude_unset=True, exclude={"id"})
    if "name" in update_data and not (update_data["name"] or "").strip():
        return error_response(
            message="Responsible name is required",
            status_code=AppStatusCode.REQUIRED_VALIDATION_ERROR,
            http_status=422
        )

    # Renaming does not touch bookings that carry the old name
    for key, value in update_data.items():
        setattr(db_responsible, key, value)

    commit_or_rollback(db)
    db.refresh(db_responsible)
    return ResponsibleOut.model_validate(db_responsible)


def delete_responsible(db: Session, responsible_id: str) -> dict:
    db_responsible = get_responsible_by_id(db, responsible_id)
    if not db_responsible:
        return not_found("Responsible", responsible_id)

    db.delete(db_responsible)
    commit_or_rollback(db)
    return {"id": responsible_id, "deleted": True}

import logging
from typing import List, Optional

from pydantic import ValidationError
from sqlalchemy import or_
from sqlalchemy.orm import Session

from shared.core.database import commit_or_rollback
from shared.core.schemas import Lookup
from shared.helpers.json_response_helper import error_response, not_found
from shared.utils.app_status_code import AppStatusCode
from ..models.spaces import Space
from ..schemas.spaces_schemas import (
    SpaceBase, SpaceCreate, SpaceListResponse, SpaceOut, SpaceRequest, SpaceUpdate)

logger = logging.getLogger(__name__)


def build_space_filters(params: SpaceRequest):
    filters = []

    if params.active is not None:
        filters.append(Space.active == params.active)

    if params.search:
        search_term = f"%{params.search}%"
        filters.append(or_(Space.name.ilike(search_term),
                           Space.address.ilike(search_term)))

    return filters


def all_space_ids(db: Session) -> List[str]:
    return [row.id for row in db.query(Space.id).order_by(Space.name.asc()).all()]


def get_spaces(db: Session, params: SpaceRequest) -> SpaceListResponse:
    query = db.query(Space).filter(*build_space_filters(params))
    total = query.count()

    spaces = (
        query
        .order_by(Space.name.asc())
        .offset(params.skip or 0)
        .limit(params.limit)
        .all()
    )
    return {"spaces": [SpaceOut.model_validate(s) for s in spaces], "total": total}


def space_lookup(db: Session) -> List[Lookup]:
    rows = db.query(Space.id, Space.name).order_by(Space.name.asc()).all()
    return [Lookup(id=r.id, name=r.name) for r in rows]


def get_space_by_id(db: Session, space_id: str) -> Optional[Space]:
    return db.query(Space).filter(Space.id == space_id).first()


def get_space(db: Session, space_id: str) -> SpaceOut:
    db_space = get_space_by_id(db, space_id)
    if not db_space:
        return not_found("Space", space_id)
    return SpaceOut.model_validate(db_space)


def create_space(db: Session, space: SpaceCreate) -> SpaceOut:
    db_space = Space(**space.model_dump())
    db.add(db_space)
    commit_or_rollback(db)
    db.refresh(db_space)
    return SpaceOut.model_validate(db_space)


def update_space(db: Session, space: SpaceUpdate) -> SpaceOut:
    db_space = get_space_by_id(db, space.id)
    if not db_space:
        return not_found("Space", space.id)

    merged = {
        **SpaceBase.model_validate(db_space).model_dump(),
        **space.model_dump(exclude_unset=True, exclude={"id"}),
    }
    try:
        record = SpaceBase.model_validate(merged)
    except ValidationError as e:
        return error_response(
            message=str(e),
            status_code=AppStatusCode.REQUIRED_VALIDATION_ERROR,
            http_status=422
        )

    for key, value in record.model_dump().items():
        setattr(db_space, key, value)

    commit_or_rollback(db)
    db.refresh(db_space)
    return SpaceOut.model_validate(db_space)


def delete_space(db: Session, space_id: str) -> dict:
    db_space = get_space_by_id(db, space_id)
    if not db_space:
        return not_found("Space", space_id)

    # No cascade: bookings on this space stay and show "(unknown)"
    db.delete(db_space)
    commit_or_rollback(db)
    logger.info("Deleted space %s", space_id)
    return {"id": space_id, "deleted": True}

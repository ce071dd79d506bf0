import logging
from datetime import datetime, timezone
from typing import List, Optional

from pydantic import ValidationError
from sqlalchemy import func
from sqlalchemy.orm import Session

from shared.core.database import commit_or_rollback
from shared.core.schemas import Lookup
from shared.helpers.json_response_helper import error_response, not_found
from shared.utils.app_status_code import AppStatusCode
from ..models.customers import Customer
from ..schemas.customers_schemas import (
    ContactPerson, CustomerBase, CustomerCreate, CustomerListResponse, CustomerOut,
    CustomerRequest, CustomerUpdate)

logger = logging.getLogger(__name__)


def upgrade_legacy_contacts(customer: CustomerOut) -> CustomerOut:
    """
    Turn the pre-migration single contact (company/phone) into a contacts
    entry. Applied when a record is loaded for editing; a customer that
    already has contacts is returned unchanged.
    """
    if customer.contacts or not customer.company:
        return customer
    legacy = ContactPerson(
        name=customer.company,
        rgpd_consent=True,
        email="",
        phone=customer.phone or "",
    )
    return customer.model_copy(update={"contacts": [legacy]})


def drop_legacy_fields(data: dict) -> dict:
    # Once contacts exist the legacy pair is never written again
    if data.get("contacts"):
        data["company"] = None
        data["phone"] = None
    return data


def matches_search(customer: CustomerOut, term: Optional[str]) -> bool:
    if not term:
        return True
    term = term.lower()
    return (
        term in customer.name.lower()
        or term in customer.email.lower()
        or any(term in c.name.lower() for c in customer.contacts)
        or term in (customer.company or "").lower()
    )


# ----------------- Get All Customers -----------------

def get_customers(db: Session, params: CustomerRequest) -> CustomerListResponse:
    query = db.query(Customer)
    if params.status and params.status.lower() != "all":
        query = query.filter(func.lower(Customer.status) == params.status.lower())

    customers = [CustomerOut.model_validate(c) for c in query.order_by(Customer.name.asc()).all()]
    customers = [c for c in customers if matches_search(c, params.search)]

    total = len(customers)
    skip = params.skip or 0
    page = customers[skip: skip + params.limit] if params.limit else customers[skip:]
    return {"customers": page, "total": total}


def customer_lookup(db: Session) -> List[Lookup]:
    rows = db.query(Customer.id, Customer.name).order_by(Customer.name.asc()).all()
    return [Lookup(id=r.id, name=r.name) for r in rows]


# ----------------- Get Single Customer -----------------

def get_customer_by_id(db: Session, customer_id: str) -> Optional[Customer]:
    return db.query(Customer).filter(Customer.id == customer_id).first()


def get_customer_for_edit(db: Session, customer_id: str) -> CustomerOut:
    db_customer = get_customer_by_id(db, customer_id)
    if not db_customer:
        return not_found("Customer", customer_id)
    return upgrade_legacy_contacts(CustomerOut.model_validate(db_customer))


# ----------------- Create Customer -----------------

def create_customer(db: Session, customer: CustomerCreate) -> CustomerOut:
    data = drop_legacy_fields(customer.model_dump())
    db_customer = Customer(
        **data,
        created_at=datetime.now(timezone.utc).isoformat()
    )
    db.add(db_customer)
    commit_or_rollback(db)
    db.refresh(db_customer)
    return CustomerOut.model_validate(db_customer)


# ----------------- Update Customer -----------------

def update_customer(db: Session, customer_update: CustomerUpdate) -> CustomerOut:
    db_customer = get_customer_by_id(db, customer_update.id)
    if not db_customer:
        return not_found("Customer", customer_update.id)

    merged = {
        **CustomerOut.model_validate(db_customer).model_dump(exclude={"id", "created_at"}),
        **customer_update.model_dump(exclude_unset=True, exclude={"id"}),
    }
    try:
        record = CustomerBase.model_validate(merged)
    except ValidationError as e:
        return error_response(
            message=str(e),
            status_code=AppStatusCode.REQUIRED_VALIDATION_ERROR,
            http_status=422
        )

    for key, value in drop_legacy_fields(record.model_dump()).items():
        setattr(db_customer, key, value)

    commit_or_rollback(db)
    db.refresh(db_customer)
    return CustomerOut.model_validate(db_customer)


# ----------------- Delete Customer -----------------

def delete_customer(db: Session, customer_id: str) -> dict:
    db_customer = get_customer_by_id(db, customer_id)
    if not db_customer:
        return not_found("Customer", customer_id)

    # Bookings keep their customer_id and render it as "(unknown)"
    logger.info("Deleting customer %s", customer_id)
    db.delete(db_customer)
    commit_or_rollback(db)
    return {"id": customer_id, "deleted": True}

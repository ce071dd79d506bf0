from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from shared.core.database import get_db
from shared.core.schemas import Lookup
from ..crud import customers_crud as crud
from ..schemas.customers_schemas import (
    CustomerCreate, CustomerListResponse, CustomerOut, CustomerRequest, CustomerUpdate)

router = APIRouter(prefix="/api/customers", tags=["Customers"])


@router.get("/all", response_model=CustomerListResponse)
def get_customers(params: CustomerRequest = Depends(), db: Session = Depends(get_db)):
    return crud.get_customers(db, params)


@router.get("/lookup", response_model=List[Lookup])
def customer_lookup(db: Session = Depends(get_db)):
    return crud.customer_lookup(db)


# Loaded for editing: legacy single-contact records come back upgraded
@router.get("/{customer_id}", response_model=CustomerOut)
def get_customer(customer_id: str, db: Session = Depends(get_db)):
    return crud.get_customer_for_edit(db, customer_id)


@router.post("/", response_model=CustomerOut)
def create_customer(customer: CustomerCreate, db: Session = Depends(get_db)):
    return crud.create_customer(db, customer)


@router.put("/", response_model=CustomerOut)
def update_customer(customer: CustomerUpdate, db: Session = Depends(get_db)):
    return crud.update_customer(db, customer)


@router.delete("/{customer_id}")
def delete_customer(customer_id: str, db: Session = Depends(get_db)):
    return crud.delete_customer(db, customer_id)

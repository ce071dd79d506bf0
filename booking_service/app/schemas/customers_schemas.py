import uuid
from datetime import datetime, timezone
from typing import List, Optional
from pydantic import BaseModel, EmailStr, Field

from shared.core.schemas import CommonQueryParams
from ..enum.booking_enum import EntityStatus


def _new_id() -> str:
    return uuid.uuid4().hex[:9]


class ContactPerson(BaseModel):
    id: str = Field(default_factory=_new_id)
    name: str = ""
    rgpd_consent: bool = False
    email: str = ""
    phone: str = ""


class Attachment(BaseModel):
    id: str = Field(default_factory=_new_id)
    name: str
    size: int = Field(ge=0)
    type: str
    uploaded_at: str = Field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat())


class CustomerBase(BaseModel):
    name: str = Field(min_length=1)
    email: EmailStr
    contacts: List[ContactPerson] = []
    attachments: List[Attachment] = []
    company: Optional[str] = None
    phone: Optional[str] = None
    status: EntityStatus = EntityStatus.active
    notes: Optional[str] = None

    model_config = {"from_attributes": True, "use_enum_values": True}


class CustomerCreate(CustomerBase):
    pass


class CustomerUpdate(BaseModel):
    id: str
    name: Optional[str] = None
    email: Optional[EmailStr] = None
    contacts: Optional[List[ContactPerson]] = None
    attachments: Optional[List[Attachment]] = None
    company: Optional[str] = None
    phone: Optional[str] = None
    status: Optional[EntityStatus] = None
    notes: Optional[str] = None

    model_config = {"use_enum_values": True}


class CustomerOut(CustomerBase):
    id: str
    created_at: Optional[str] = None


class CustomerRequest(CommonQueryParams):
    status: Optional[str] = None


class CustomerListResponse(BaseModel):
    customers: List[CustomerOut]
    total: int

from typing import List, Optional
from pydantic import BaseModel, Field

from shared.core.schemas import CommonQueryParams


class ResponsibleBase(BaseModel):
    name: str = Field(min_length=1)
    email: Optional[str] = ""
    phone: Optional[str] = ""
    role: Optional[str] = ""

    model_config = {"from_attributes": True}


class ResponsibleCreate(ResponsibleBase):
    pass


class ResponsibleUpdate(BaseModel):
    id: str
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    role: Optional[str] = None


class ResponsibleOut(ResponsibleBase):
    id: str


class ResponsibleRequest(CommonQueryParams):
    pass


class ResponsibleListResponse(BaseModel):
    responsibles: List[ResponsibleOut]
    total: int

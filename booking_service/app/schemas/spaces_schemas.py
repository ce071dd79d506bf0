from typing import List, Optional
from pydantic import BaseModel, Field, computed_field

from shared.core.schemas import CommonQueryParams


class SpaceBase(BaseModel):
    name: str = Field(min_length=1)
    address: str = Field(min_length=1)
    google_map_link: Optional[str] = ""
    capacity: int = Field(ge=1)
    extras: Optional[str] = ""
    images: List[str] = []
    description: Optional[str] = ""
    active: bool = True

    model_config = {"from_attributes": True}


class SpaceCreate(SpaceBase):
    pass


class SpaceUpdate(BaseModel):
    id: str
    name: Optional[str] = None
    address: Optional[str] = None
    google_map_link: Optional[str] = None
    capacity: Optional[int] = None
    extras: Optional[str] = None
    images: Optional[List[str]] = None
    description: Optional[str] = None
    active: Optional[bool] = None


class SpaceOut(SpaceBase):
    id: str

    @computed_field
    @property
    def availability(self) -> str:
        return "available" if self.active else "under maintenance"


class SpaceRequest(CommonQueryParams):
    active: Optional[bool] = None


class SpaceListResponse(BaseModel):
    spaces: List[SpaceOut]
    total: int

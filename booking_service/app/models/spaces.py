import uuid
from sqlalchemy import Boolean, Column, Integer, String, Text, JSON

from shared.core.database import Base


class Space(Base):
    __tablename__ = "spaces"

    id = Column(String(64), primary_key=True, default=lambda: uuid.uuid4().hex)
    name = Column(String(255), nullable=False)
    address = Column(String(500), nullable=False)
    google_map_link = Column(String(500))
    capacity = Column(Integer, nullable=False, default=1)
    extras = Column(Text)
    images = Column(JSON, nullable=False, default=list)
    description = Column(Text)
    active = Column(Boolean, nullable=False, default=True)

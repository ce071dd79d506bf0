import uuid
from sqlalchemy import Column, String

from shared.core.database import Base


class Responsible(Base):
    __tablename__ = "responsibles"

    id = Column(String(64), primary_key=True, default=lambda: uuid.uuid4().hex)
    name = Column(String(200), nullable=False)
    email = Column(String(200))
    phone = Column(String(50))
    role = Column(String(200))

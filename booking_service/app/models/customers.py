import uuid
from sqlalchemy import Column, String, Text, JSON

from shared.core.database import Base


class Customer(Base):
    __tablename__ = "customers"

    id = Column(String(64), primary_key=True, default=lambda: uuid.uuid4().hex)
    name = Column(String(255), nullable=False)
    email = Column(String(200), nullable=False)
    contacts = Column(JSON, nullable=False, default=list)  # [ContactPerson]
    attachments = Column(JSON, nullable=False, default=list)  # [Attachment] metadata only

    # Pre-migration single contact; cleared once contacts exist
    company = Column(String(200))
    phone = Column(String(50))

    status = Column(String(16), nullable=False, default="ativo")
    notes = Column(Text)
    created_at = Column(String(40))

from sqlalchemy import Column, String, Integer, Numeric, Text

from shared.core.database import Base


class Booking(Base):
    __tablename__ = "bookings"

    # Sequential decimal string, assigned by bookings_crud.next_booking_id
    id = Column(String(32), primary_key=True)
    space_id = Column(String(64), nullable=False, index=True)
    customer_id = Column(String(64), nullable=False, index=True)

    # ISO 8601 strings exactly as submitted
    start_date = Column(String(40), nullable=False)
    end_date = Column(String(40), nullable=False)
    setup_date = Column(String(40))
    breakdown_date = Column(String(40))
    created_at = Column(String(40))

    # Free-text staff name, not a foreign key
    responsible = Column(String(200), nullable=False)
    event_name = Column(String(255), nullable=False)
    description = Column(Text)
    situation_notes = Column(Text)

    status = Column(String(24), nullable=False, default="pendente")
    type = Column(String(24), nullable=False, default="paga")
    approval_status = Column(String(32), default="pendente")

    contact_name = Column(String(200))
    contact_email = Column(String(200))
    price = Column(Numeric(12, 2), nullable=False, default=0)
    attendees = Column(Integer, nullable=False, default=0)

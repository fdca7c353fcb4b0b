# nexa/ticket/models.py
from sqlalchemy import JSON, Column, DateTime, Integer, String, text
from nexa.core.database import Base

class Ticket(Base):
    __tablename__ = "tickets"

    id = Column(Integer, primary_key=True, index=True)
    data = Column(DateTime, nullable=False)
    title = Column(String, nullable=False)
    priority = Column(String, nullable=False)
    status = Column(String, index=True)
    user_name = Column(String)
    feedbacks = Column(JSON, nullable=False, server_default=text("'[]'"))

from uuid import uuid4
from sqlalchemy import Column, String, DateTime, ForeignKey
from groupledger.db.session import Base, utcnow

class Participant(Base):
    __tablename__ = "participants"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid4()))
    group_id = Column(String(36), ForeignKey("groups.id"), nullable=False, index=True)
    name = Column(String, nullable=False)
    color = Column(String(7), nullable=True)
    avatar = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow)

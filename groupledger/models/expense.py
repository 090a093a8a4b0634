from uuid import uuid4
from sqlalchemy import Column, String, ForeignKey, DateTime, Date, Numeric, JSON
from sqlalchemy.orm import relationship
from groupledger.db.session import Base, utcnow
from groupledger.models.expense_split import ExpenseSplit

class Expense(Base):
    __tablename__ = "expenses"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid4()))
    group_id = Column(String(36), ForeignKey("groups.id"), nullable=False, index=True)
    # either the group owner's user id or a participant id
    payer_id = Column(String(36), nullable=False)
    amount = Column(Numeric(10, 2), nullable=False)
    description = Column(String, nullable=False)
    spent_on = Column(Date, nullable=False)
    participant_ids = Column(JSON, nullable=False, default=list)
    split_mode = Column(String(16), nullable=False, default="equal")
    created_at = Column(DateTime(timezone=True), default=utcnow)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)

    splits = relationship(
        ExpenseSplit,
        back_populates="expense",
        cascade="all, delete-orphan",
        order_by=ExpenseSplit.position,
    )

from sqlalchemy import Column, Integer, String, Numeric, ForeignKey
from sqlalchemy.orm import relationship
from groupledger.db.session import Base

class ExpenseSplit(Base):
    __tablename__ = "expense_splits"

    id = Column(Integer, primary_key=True, index=True)
    expense_id = Column(String(36), ForeignKey("expenses.id"), nullable=False, index=True)
    participant_id = Column(String(36), nullable=False)
    amount = Column(Numeric(10, 2), nullable=False)
    # order the splits were resolved in
    position = Column(Integer, nullable=False, default=0)

    expense = relationship("Expense", back_populates="splits")

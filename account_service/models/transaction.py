import enum
import uuid
from sqlalchemy import Column, String, Enum, Numeric, ForeignKey, DateTime, Integer
from datetime import datetime, timezone

from account_service.core.db import Base


class TransactionType(str, enum.Enum):
    DEPOSIT = "DEPOSIT"
    WITHDRAWAL = "WITHDRAWAL"
    DEBIT = "DEBIT"
    CHECK = "CHECK"


class TransactionDirection(str, enum.Enum):
    """Direction tag carried by a request. DEBIT adds funds, CREDIT removes them."""

    DEBIT = "DEBIT"
    CREDIT = "CREDIT"


class Transaction(Base):
    __tablename__ = "transactions"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    account_id = Column(
        Integer, ForeignKey("accounts.id"), index=True, nullable=False
    )
    transaction_type = Column(Enum(TransactionType), nullable=False)
    amount = Column(Numeric(precision=18, scale=2), nullable=False)
    description = Column(String(255), nullable=True)
    transaction_date = Column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        index=True,
        nullable=False,
    )

import enum
from sqlalchemy import Column, Integer, String, Numeric, DateTime, Enum, func
from account_service.core.db import Base


class AccountStatus(str, enum.Enum):
    ACTIVE = "ACTIVE"
    CLOSED = "CLOSED"


class Account(Base):
    __tablename__ = "accounts"

    id = Column(Integer, primary_key=True, index=True)

    account_number = Column(String(20), unique=True, index=True, nullable=False)

    first_name = Column(String(64), nullable=False)
    last_name = Column(String(64), nullable=False)

    pin = Column(String(4), nullable=False)

    holder_id = Column(String(64), index=True, nullable=True)

    status = Column(Enum(AccountStatus), nullable=False, default=AccountStatus.ACTIVE)

    balance = Column(Numeric(18, 2), nullable=False, default=0)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(
        DateTime(timezone=True), onupdate=func.now(), server_default=func.now()
    )

    @property
    def holder_full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

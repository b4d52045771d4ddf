from pydantic import BaseModel, Field
from typing import Optional
from decimal import Decimal


class TransactionRequest(BaseModel):
    amount: Optional[Decimal] = Field(None, description="Positive amount")
    type: Optional[str] = Field(
        None, description="DEBIT or CREDIT, used by debit and check operations"
    )
    description: Optional[str] = None


class TransactionDetailOut(BaseModel):
    amount: Decimal
    transaction_type: str = Field(..., alias="transactionType")
    description: Optional[str] = None
    transaction_date: str = Field(..., alias="transactionDate")

    class Config:
        populate_by_name = True

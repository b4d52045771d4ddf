# account_service/schemas/account.py
from pydantic import BaseModel, Field
from decimal import Decimal
from typing import List, Optional

from account_service.models.accounts import AccountStatus
from account_service.schemas.transaction import TransactionDetailOut


class AccountRequest(BaseModel):
    first_name: Optional[str] = Field(None, alias="firstName")
    last_name: Optional[str] = Field(None, alias="lastName")
    account_pin: Optional[str] = Field(None, alias="accountPin")
    conf_account_pin: Optional[str] = Field(None, alias="confAccountPin")
    holder_id_number: Optional[str] = Field(
        None,
        alias="holderIdNumber",
        description="The account holder ID (SSN, Voter Card ID)",
    )

    class Config:
        populate_by_name = True


class ResponseOut(BaseModel):
    account_number: Optional[str] = Field(None, alias="accountNumber")
    pin: Optional[str] = None
    transaction_id: Optional[str] = Field(None, alias="transactionId")

    class Config:
        populate_by_name = True


class AccountSummaryOut(BaseModel):
    account_id: int = Field(..., alias="accountId")
    account_number: str = Field(..., alias="accountNumber")
    holder_full_name: str = Field(..., alias="holderFullName")

    class Config:
        populate_by_name = True


class AccountDetailOut(BaseModel):
    account_id: int = Field(..., alias="accountId")
    account_number: str = Field(..., alias="accountNumber")
    account_pin: str = Field(..., alias="accountPin")
    holder_full_name: str = Field(..., alias="holderFullName")
    holder_id: Optional[str] = Field(None, alias="holderId")
    status: AccountStatus
    current_balance: Decimal = Field(..., alias="currentBalance")
    last_transactions: List[TransactionDetailOut] = Field(
        default_factory=list, alias="lastTransactions"
    )

    class Config:
        populate_by_name = True


class BalanceOut(BaseModel):
    account_number: str = Field(..., alias="accountNumber")
    balance: Decimal

    class Config:
        populate_by_name = True


class MessageOut(BaseModel):
    message: str

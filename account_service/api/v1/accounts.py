# account_service/api/v1/accounts.py
from typing import Optional
from fastapi import APIRouter, Body, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from account_service.core.db import get_db
from account_service.schemas.account import (
    AccountDetailOut,
    AccountRequest,
    AccountSummaryOut,
    BalanceOut,
    MessageOut,
    ResponseOut,
)
from account_service.schemas.transaction import TransactionRequest
from account_service.services import account_service

router = APIRouter(
    prefix="/accounts",
    tags=["accounts"],
    responses={400: {"model": MessageOut}},
)


@router.get("", response_model=AccountSummaryOut)
async def search_account(
    account_number: Optional[str] = Query(None, alias="accountNumber"),
    pin: Optional[str] = Query(None),
    db: AsyncSession = Depends(get_db),
):
    return await account_service.search_account(db, account_number, pin)


@router.get("/{account_id}", response_model=AccountDetailOut)
async def find_account(account_id: int, db: AsyncSession = Depends(get_db)):
    return await account_service.find_account(db, account_id)


@router.get("/{account_id}/balance", response_model=BalanceOut)
async def get_current_balance(account_id: int, db: AsyncSession = Depends(get_db)):
    return await account_service.get_current_balance(db, account_id)


@router.post("", response_model=ResponseOut, response_model_exclude_none=True)
async def open_account(
    payload: AccountRequest = Body(...),
    db: AsyncSession = Depends(get_db),
):
    return await account_service.open_account(
        db,
        payload.first_name,
        payload.last_name,
        payload.account_pin,
        payload.conf_account_pin,
        payload.holder_id_number,
    )


@router.put(
    "/{account_id}/close", response_model=ResponseOut, response_model_exclude_none=True
)
async def close_account(account_id: int, db: AsyncSession = Depends(get_db)):
    return await account_service.close_account(db, account_id)


@router.put(
    "/{account_id}/deposit",
    response_model=ResponseOut,
    response_model_exclude_none=True,
)
async def make_deposit(
    account_id: int,
    payload: TransactionRequest = Body(...),
    db: AsyncSession = Depends(get_db),
):
    return await account_service.make_deposit(db, account_id, payload)


@router.put(
    "/{account_id}/withdrawal",
    response_model=ResponseOut,
    response_model_exclude_none=True,
)
async def make_withdrawal(
    account_id: int,
    payload: TransactionRequest = Body(...),
    db: AsyncSession = Depends(get_db),
):
    return await account_service.make_withdrawal(db, account_id, payload)


@router.put(
    "/{account_id}/debit",
    response_model=ResponseOut,
    response_model_exclude_none=True,
)
async def process_debit(
    account_id: int,
    payload: TransactionRequest = Body(...),
    db: AsyncSession = Depends(get_db),
):
    return await account_service.process_debit(db, account_id, payload)


@router.put(
    "/{account_id}/check",
    response_model=ResponseOut,
    response_model_exclude_none=True,
)
async def process_check(
    account_id: int,
    payload: TransactionRequest = Body(...),
    db: AsyncSession = Depends(get_db),
):
    return await account_service.process_check(db, account_id, payload)

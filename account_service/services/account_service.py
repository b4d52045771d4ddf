# account_service/services/account_service.py
import logging
from datetime import datetime
from decimal import Decimal

from sqlalchemy.ext.asyncio import AsyncSession

from account_service.core.config import settings
from account_service.core.db import atomic
from account_service.core.errors import (
    InsufficientFundsError,
    NotFoundError,
    StateError,
    ValidationError,
)
from account_service.core.locks import account_locks
from account_service.core.security import (
    generate_account_number,
    is_blank,
    validate_pin,
)
from account_service.models.accounts import Account, AccountStatus
from account_service.models.transaction import (
    Transaction,
    TransactionDirection,
    TransactionType,
)
from account_service.repositories.accounts import AccountRepository
from account_service.repositories.transactions import TransactionRepository
from account_service.schemas.account import (
    AccountDetailOut,
    AccountSummaryOut,
    BalanceOut,
    ResponseOut,
)
from account_service.schemas.transaction import TransactionDetailOut, TransactionRequest

logger = logging.getLogger(__name__)

DATE_FORMAT = "%d-%b-%Y %H:%M:%S"
CENT = Decimal("0.01")


def format_date(value: datetime | None) -> str:
    if value is None:
        return ""
    return value.strftime(DATE_FORMAT)


async def _new_account_number(accounts: AccountRepository) -> str:
    for _ in range(settings.ACCOUNT_NUMBER_ATTEMPTS):
        number = generate_account_number()
        if not await accounts.number_exists(number):
            return number
    raise RuntimeError("Could not allocate a unique account number")


async def open_account(
    db: AsyncSession,
    first_name: str | None,
    last_name: str | None,
    pin: str | None,
    pin_confirmation: str | None,
    holder_id: str | None,
) -> ResponseOut:
    validate_pin(pin, pin_confirmation)
    if is_blank(first_name):
        raise ValidationError("First name is required.")
    if is_blank(last_name):
        raise ValidationError("Last name is required.")

    accounts = AccountRepository(db)
    async with atomic(db):
        account = Account(
            account_number=await _new_account_number(accounts),
            first_name=first_name,
            last_name=last_name,
            pin=pin,
            holder_id=holder_id,
            status=AccountStatus.ACTIVE,
            balance=Decimal("0"),
        )
        await accounts.save(account)

    logger.info("Account %s opened (id=%s)", account.account_number, account.id)
    return ResponseOut(account_number=account.account_number, pin=account.pin)


async def close_account(db: AsyncSession, account_id: int) -> ResponseOut:
    accounts = AccountRepository(db)
    async with account_locks.hold(account_id):
        async with atomic(db):
            account = await accounts.get(account_id, for_update=True)
            if account is None:
                raise NotFoundError("Account with provided id does not exist")
            if Decimal(account.balance) < 0:
                raise StateError(
                    "The account can not be closed due to it is overdrawn."
                )
            account.status = AccountStatus.CLOSED
            await accounts.save(account)

    logger.info("Account %s closed", account.account_number)
    return ResponseOut(account_number=account.account_number)


async def search_account(
    db: AsyncSession, account_number: str | None, pin: str | None
) -> AccountSummaryOut:
    if is_blank(account_number):
        raise ValidationError("Account number is required.")
    if is_blank(pin):
        raise ValidationError("Pin number is required.")

    account = await AccountRepository(db).find_by_number_and_pin(account_number, pin)
    if account is None:
        logger.warning("Failed lookup for account number %s", account_number)
        raise NotFoundError("Account not found for the given number and pin.")
    return AccountSummaryOut(
        account_id=account.id,
        account_number=account.account_number,
        holder_full_name=account.holder_full_name,
    )


def _transaction_detail(txn: Transaction) -> TransactionDetailOut:
    return TransactionDetailOut(
        amount=txn.amount,
        transaction_type=txn.transaction_type.value,
        description=txn.description,
        transaction_date=format_date(txn.transaction_date),
    )


async def find_account(db: AsyncSession, account_id: int) -> AccountDetailOut:
    account = await AccountRepository(db).get(account_id)
    if account is None:
        raise NotFoundError("The account does not exist")

    recent = await TransactionRepository(db).find_recent_by_account(
        account.id, limit=settings.RECENT_TRANSACTIONS_LIMIT
    )
    return AccountDetailOut(
        account_id=account.id,
        account_number=account.account_number,
        account_pin=account.pin,
        holder_full_name=account.holder_full_name,
        holder_id=account.holder_id,
        status=account.status,
        current_balance=account.balance,
        last_transactions=[_transaction_detail(t) for t in recent],
    )


async def get_current_balance(db: AsyncSession, account_id: int) -> BalanceOut:
    account = await AccountRepository(db).get(account_id)
    if account is None:
        raise NotFoundError("Account does not exist")
    return BalanceOut(account_number=account.account_number, balance=account.balance)


def resolve_direction(tag: str | None) -> TransactionDirection:
    if tag is None:
        raise ValidationError("Transaction Type is mandatory [DEBIT,CREDIT]")
    try:
        return TransactionDirection(tag)
    except ValueError:
        raise ValidationError(
            "Transaction type [DEBIT, CREDIT] is required to process current operation."
        )


def signed_amount(amount: Decimal, direction: TransactionDirection) -> Decimal:
    if direction is TransactionDirection.CREDIT:
        return -amount
    return amount


async def apply_transaction(
    db: AsyncSession,
    account_id: int,
    amount: Decimal | None,
    direction: str | None,
    description: str | None,
    transaction_type: TransactionType,
) -> str:
    """
    Apply one transaction to an account and return the new transaction id.

    The account row is read, checked for overdraft and updated while holding
    the account's lock, and the transaction record and the new balance are
    committed together.
    """
    accounts = AccountRepository(db)
    transactions = TransactionRepository(db)

    async with account_locks.hold(account_id):
        async with atomic(db):
            account = await accounts.get(account_id, for_update=True)
            if account is None:
                raise NotFoundError("Account with provided id does not exist")

            resolved = resolve_direction(direction)
            if amount is None or amount <= 0:
                raise ValidationError("Amount must be a positive value.")
            if amount != amount.quantize(CENT):
                raise ValidationError("Amount can not have more than 2 decimal places.")

            delta = signed_amount(Decimal(amount), resolved)
            new_balance = Decimal(account.balance) + delta
            if new_balance < 0:
                raise InsufficientFundsError(
                    "Operation cancelled due to insufficient funds."
                )

            txn = Transaction(
                account_id=account.id,
                transaction_type=transaction_type,
                amount=delta,
                description=description,
            )
            await transactions.add(txn)

            account.balance = new_balance
            await accounts.save(account)

    logger.info(
        "Transaction %s applied to account %s: %s %s",
        txn.id,
        account_id,
        transaction_type.value,
        delta,
    )
    return txn.id


async def make_deposit(
    db: AsyncSession, account_id: int, request: TransactionRequest
) -> ResponseOut:
    txn_id = await apply_transaction(
        db,
        account_id,
        request.amount,
        TransactionDirection.DEBIT.value,
        request.description,
        TransactionType.DEPOSIT,
    )
    return ResponseOut(transaction_id=txn_id)


async def make_withdrawal(
    db: AsyncSession, account_id: int, request: TransactionRequest
) -> ResponseOut:
    txn_id = await apply_transaction(
        db,
        account_id,
        request.amount,
        TransactionDirection.CREDIT.value,
        request.description,
        TransactionType.WITHDRAWAL,
    )
    return ResponseOut(transaction_id=txn_id)


async def process_debit(
    db: AsyncSession, account_id: int, request: TransactionRequest
) -> ResponseOut:
    txn_id = await apply_transaction(
        db,
        account_id,
        request.amount,
        request.type,
        request.description,
        TransactionType.DEBIT,
    )
    return ResponseOut(transaction_id=txn_id)


async def process_check(
    db: AsyncSession, account_id: int, request: TransactionRequest
) -> ResponseOut:
    txn_id = await apply_transaction(
        db,
        account_id,
        request.amount,
        request.type,
        request.description,
        TransactionType.CHECK,
    )
    return ResponseOut(transaction_id=txn_id)

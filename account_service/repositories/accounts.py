from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from account_service.models.accounts import Account


class AccountRepository:
    """Account store backed by an async SQLAlchemy session."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get(self, account_id: int, for_update: bool = False) -> Account | None:
        query = select(Account).where(Account.id == account_id)
        if for_update:
            query = query.with_for_update().execution_options(populate_existing=True)
        q = await self.db.execute(query)
        return q.scalars().first()

    async def exists(self, account_id: int) -> bool:
        q = await self.db.execute(select(Account.id).where(Account.id == account_id))
        return q.scalar() is not None

    async def find_by_number_and_pin(
        self, account_number: str, pin: str
    ) -> Account | None:
        q = await self.db.execute(
            select(Account).where(
                Account.account_number == account_number, Account.pin == pin
            )
        )
        return q.scalars().first()

    async def number_exists(self, account_number: str) -> bool:
        q = await self.db.execute(
            select(Account.id).where(Account.account_number == account_number)
        )
        return q.scalar() is not None

    async def save(self, account: Account) -> Account:
        self.db.add(account)
        await self.db.flush()
        return account

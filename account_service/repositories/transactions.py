from typing import List
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from account_service.models.transaction import Transaction


class TransactionRepository:
    """Append-only transaction store."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def add(self, txn: Transaction) -> Transaction:
        self.db.add(txn)
        await self.db.flush()
        return txn

    async def find_recent_by_account(
        self, account_id: int, limit: int = 5
    ) -> List[Transaction]:
        q = await self.db.execute(
            select(Transaction)
            .where(Transaction.account_id == account_id)
            .order_by(Transaction.transaction_date.desc())
            .limit(limit)
        )
        return list(q.scalars().all())

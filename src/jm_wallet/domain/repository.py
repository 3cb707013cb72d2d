"""Ledger Service Protocol — dependency inversion for testability.

Unit tests inject a mock that conforms to this Protocol.
Infrastructure layer provides the real implementation.
"""

from typing import Protocol

from sqlalchemy.ext.asyncio import AsyncSession

from src.jm_wallet.domain.models import Transaction, WalletSnapshot, WithdrawalRecord


class LedgerServiceProtocol(Protocol):
    async def get_wallet(self, db: AsyncSession, user_id: str) -> WalletSnapshot | None: ...

    async def get_transactions(self, db: AsyncSession, user_id: str) -> list[Transaction]:
        """Newest first."""
        ...

    async def get_withdrawal_history(
        self, db: AsyncSession, user_id: str
    ) -> list[WithdrawalRecord]:
        """Newest first."""
        ...

    async def withdraw(
        self, db: AsyncSession, user_id: str, amount_paise: int
    ) -> WithdrawalRecord:
        """Raises InsufficientFundsError, WalletNotFoundError or PersistenceError."""
        ...

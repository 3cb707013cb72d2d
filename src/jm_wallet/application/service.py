"""LedgerViewService — read-only aggregation over the Ledger Service plus withdraw.

withdraw() delegates to the Ledger Service, commits, then re-reads wallet,
transactions and withdrawals in full. Nothing is patched locally.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from src.jm_common.database import translate_db_errors
from src.jm_common.errors import PersistenceError
from src.jm_common.money import to_paise
from src.jm_wallet.application.schemas import WalletOverview, WithdrawalItem, WithdrawResponse
from src.jm_wallet.domain.repository import LedgerServiceProtocol
from src.jm_wallet.infrastructure.persistence import LedgerService

logger = logging.getLogger(__name__)


class LedgerViewService:
    def __init__(self, ledger: LedgerServiceProtocol | None = None) -> None:
        self._ledger: LedgerServiceProtocol = ledger or LedgerService()

    async def get_overview(self, db: AsyncSession, user_id: str) -> WalletOverview:
        wallet = await self._ledger.get_wallet(db, user_id)
        transactions = await self._ledger.get_transactions(db, user_id)
        withdrawals = await self._ledger.get_withdrawal_history(db, user_id)
        return WalletOverview.build(user_id, wallet, transactions, withdrawals)

    async def withdraw(
        self, db: AsyncSession, user_id: str, amount: object
    ) -> WithdrawResponse:
        amount_paise = to_paise(amount, field="amount")
        try:
            withdrawal = await self._ledger.withdraw(db, user_id, amount_paise)
            with translate_db_errors("commit withdrawal"):
                await db.commit()
        except Exception:
            await db.rollback()
            raise

        logger.info("Withdrawal %s requested: user=%s amount=%d", withdrawal.id, user_id, amount_paise)
        item = WithdrawalItem.from_domain(withdrawal)
        try:
            overview = await self.get_overview(db, user_id)
        except PersistenceError as exc:
            logger.warning("Wallet refresh failed after withdrawal %s: %s", withdrawal.id, exc.message)
            return WithdrawResponse(withdrawal=item, overview=None, refresh_failed=True)
        return WithdrawResponse(withdrawal=item, overview=overview, refresh_failed=False)

"""Pydantic schemas for the wallet (Ledger View) API.

Every monetary figure is shown twice: raw paise and a display string.
A figure the Ledger Service did not return is shown as 0 / "₹0.00".
"""

from decimal import Decimal

from pydantic import BaseModel, Field

from src.jm_common.money import paise_to_display
from src.jm_wallet.domain.models import Transaction, WalletSnapshot, WithdrawalRecord


class WithdrawRequest(BaseModel):
    amount: Decimal | str = Field(..., description="Rupees to withdraw")


class TransactionItem(BaseModel):
    id: int
    type: str
    amount_paise: int
    amount_display: str
    description: str | None
    reference_id: str | None
    created_at: str

    @classmethod
    def from_domain(cls, t: Transaction) -> "TransactionItem":
        return cls(
            id=t.id,
            type=t.type,
            amount_paise=t.amount_paise,
            amount_display=paise_to_display(t.amount_paise),
            description=t.description,
            reference_id=t.reference_id,
            created_at=t.created_at.isoformat() if t.created_at else "",
        )


class WithdrawalItem(BaseModel):
    id: int
    amount_paise: int
    amount_display: str
    status: str
    requested_at: str
    processed_at: str | None

    @classmethod
    def from_domain(cls, w: WithdrawalRecord) -> "WithdrawalItem":
        return cls(
            id=w.id,
            amount_paise=w.amount_paise,
            amount_display=paise_to_display(w.amount_paise),
            status=w.status,
            requested_at=w.requested_at.isoformat() if w.requested_at else "",
            processed_at=w.processed_at.isoformat() if w.processed_at else None,
        )


class WalletOverview(BaseModel):
    user_id: str
    balance_paise: int
    balance_display: str
    total_earned_paise: int
    total_earned_display: str
    pending_amount_paise: int
    pending_amount_display: str
    can_withdraw: bool
    transactions: list[TransactionItem]
    withdrawals: list[WithdrawalItem]

    @classmethod
    def build(
        cls,
        user_id: str,
        wallet: WalletSnapshot | None,
        transactions: list[Transaction],
        withdrawals: list[WithdrawalRecord],
    ) -> "WalletOverview":
        wallet = wallet or WalletSnapshot(user_id=user_id)
        balance = wallet.balance or 0
        earned = wallet.total_earned or 0
        pending = wallet.pending_amount or 0
        return cls(
            user_id=user_id,
            balance_paise=balance,
            balance_display=paise_to_display(balance),
            total_earned_paise=earned,
            total_earned_display=paise_to_display(earned),
            pending_amount_paise=pending,
            pending_amount_display=paise_to_display(pending),
            can_withdraw=balance > 0,
            transactions=[TransactionItem.from_domain(t) for t in transactions],
            withdrawals=[WithdrawalItem.from_domain(w) for w in withdrawals],
        )


class WithdrawResponse(BaseModel):
    withdrawal: WithdrawalItem
    overview: WalletOverview | None
    refresh_failed: bool

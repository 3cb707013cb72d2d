"""Domain models for jm_wallet — pure dataclasses, no SQLAlchemy dependency.

The Ledger Service owns all of these; the core only reads them and asks the
service to withdraw.
"""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class WalletSnapshot:
    user_id: str
    balance: int | None = None           # paise, available to withdraw
    total_earned: int | None = None      # paise, lifetime credits
    pending_amount: int | None = None    # paise, earned but not yet released


@dataclass
class Transaction:
    id: int
    user_id: str
    type: str                            # TransactionType value
    amount_paise: int                    # positive=credit, negative=debit/withdrawal
    description: str | None = None
    reference_id: str | None = None
    created_at: datetime | None = None


@dataclass
class WithdrawalRecord:
    id: int
    user_id: str
    amount_paise: int
    status: str                          # WithdrawalStatus value
    requested_at: datetime | None = None
    processed_at: datetime | None = None

"""Mini README: Plain records owned by the user ledger.

Structure:
    * TransactionDirection - enum distinguishing credits from debits.
    * Budget - mutable allocation of money to a spending category.
    * Transaction - immutable record of money moving through a budget.

Budgets are mutated only by ``UserLedger``. Transactions hold the budget's
identifier and the name it had when the transaction was recorded, never the
budget object itself, so later renames or removals leave history untouched.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Dict, Optional


class TransactionDirection(str, Enum):
    """Enumerate the supported transaction directions."""

    CREDIT = "credit"
    DEBIT = "debit"

    @classmethod
    def from_flag(cls, credit: bool) -> "TransactionDirection":
        return cls.CREDIT if credit else cls.DEBIT


@dataclass(slots=True, eq=False)
class Budget:
    """Money set aside for one spending category.

    ``remaining`` defaults to ``allocated`` for a fresh budget. Budgets
    compare by identity: two budgets with equal fields are still distinct
    members of a ledger. ``budget_id`` is always assigned by the ledger the
    budget is added to; any value set beforehand is replaced.
    """

    name: str
    allocated: float
    remaining: Optional[float] = None
    budget_id: Optional[str] = None

    def __post_init__(self) -> None:
        if self.remaining is None:
            self.remaining = self.allocated

    @property
    def spent(self) -> float:
        """Portion of the allocation already consumed by debits."""

        return self.allocated - self.remaining

    def as_dict(self) -> Dict[str, object]:
        """Export the budget with serialisable values."""

        return {
            "budget_id": self.budget_id,
            "name": self.name,
            "allocated": self.allocated,
            "remaining": self.remaining,
            "spent": self.spent,
        }


@dataclass(frozen=True, slots=True)
class Transaction:
    """Append-only ledger entry recorded against a budget."""

    transaction_id: str
    occurred_at: datetime
    direction: TransactionDirection
    amount: float
    budget_id: Optional[str]
    budget_name: str

    @property
    def is_credit(self) -> bool:
        return self.direction is TransactionDirection.CREDIT

    def as_dict(self) -> Dict[str, object]:
        """Export the transaction with serialisable values."""

        return {
            "transaction_id": self.transaction_id,
            "occurred_at": self.occurred_at.isoformat(),
            "direction": self.direction.value,
            "amount": self.amount,
            "budget_id": self.budget_id,
            "budget_name": self.budget_name,
        }

"""Mini README: Budget and transaction ledger for a single user.

This package holds the ``UserLedger`` aggregate, the plain records it owns,
the errors its mutations raise, the injectable time sources it stamps
transactions with and the pure period reports computed over its history.
"""

from .clock import FixedTimeSource, SystemTimeSource, TimeSource
from .errors import (
    DuplicateNameError,
    InsufficientBudgetError,
    InsufficientFundsError,
    InvalidAmountError,
    LedgerError,
    LedgerErrorKind,
    NotFoundError,
)
from .models import Budget, Transaction, TransactionDirection
from .reporting import Period, total_for_period
from .user import UserLedger

__all__ = [
    "Budget",
    "DuplicateNameError",
    "FixedTimeSource",
    "InsufficientBudgetError",
    "InsufficientFundsError",
    "InvalidAmountError",
    "LedgerError",
    "LedgerErrorKind",
    "NotFoundError",
    "Period",
    "SystemTimeSource",
    "TimeSource",
    "Transaction",
    "TransactionDirection",
    "UserLedger",
    "total_for_period",
]

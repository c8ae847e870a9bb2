"""Mini README: Errors raised by ledger mutations.

Every error is caller-correctable and raised before the ledger changes any
field, so a rejected operation leaves the ledger exactly as it was. Each
error carries a ``kind`` so presentation layers can branch on the category
without matching on classes or messages.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional


class LedgerErrorKind(str, Enum):
    """Categories of rejected ledger operations."""

    INVALID_AMOUNT = "invalid_amount"
    INSUFFICIENT_FUNDS = "insufficient_funds"
    INSUFFICIENT_BUDGET = "insufficient_budget"
    DUPLICATE_NAME = "duplicate_name"
    NOT_FOUND = "not_found"


class LedgerError(Exception):
    """Base class for ledger validation failures."""

    kind: LedgerErrorKind
    default_message = "Ledger operation rejected"

    def __init__(self, message: Optional[str] = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class InvalidAmountError(LedgerError, ValueError):
    kind = LedgerErrorKind.INVALID_AMOUNT
    default_message = "Must be larger than zero"


class InsufficientFundsError(LedgerError, ValueError):
    kind = LedgerErrorKind.INSUFFICIENT_FUNDS
    default_message = "Not enough bank for budget"


class InsufficientBudgetError(LedgerError, ValueError):
    kind = LedgerErrorKind.INSUFFICIENT_BUDGET
    default_message = "Not enough budget for transaction"


class DuplicateNameError(LedgerError, ValueError):
    kind = LedgerErrorKind.DUPLICATE_NAME
    default_message = "Name was used"


class NotFoundError(LedgerError, KeyError):
    """Raised when a referenced budget is not a member of the ledger."""

    kind = LedgerErrorKind.NOT_FOUND
    default_message = "Budget not found"

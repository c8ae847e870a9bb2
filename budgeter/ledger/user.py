"""Mini README: The user ledger aggregate.

Structure:
    * UserLedger - bank balance, budgets and transactions kept consistent.

The ledger tracks ``projected_spend``, the money committed to budgets but
not yet spent. Each mutation adjusts it incrementally. Every mutation runs
all of its checks before touching any field, so a raised ``LedgerError``
means nothing changed. Funds checks compare against ``available_funds``
(bank minus projected spend) and are specific to each operation.

The ledger is not thread-safe. Callers sharing one instance across threads
must serialise the mutating methods.
"""

from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Optional, Tuple

from ..configuration import get_settings
from ..logging_utils import get_logger
from . import reporting
from .clock import SystemTimeSource, TimeSource
from .errors import (
    DuplicateNameError,
    InsufficientBudgetError,
    InsufficientFundsError,
    InvalidAmountError,
    NotFoundError,
)
from .models import Budget, Transaction, TransactionDirection

LOGGER = get_logger(__name__)


class UserLedger:
    """A user's bank balance, budgets and transaction history."""

    def __init__(
        self,
        *,
        bank_amount: float = 0.0,
        target_saving: Optional[float] = None,
        low_bank_warning: Optional[float] = None,
        clock: Optional[TimeSource] = None,
    ) -> None:
        settings = get_settings()
        self._bank_amount = bank_amount
        self._projected_spend = 0.0
        self.target_saving = (
            settings.default_target_saving if target_saving is None else target_saving
        )
        self.low_bank_warning = (
            settings.default_low_bank_warning if low_bank_warning is None else low_bank_warning
        )
        self._clock = clock or SystemTimeSource()
        self._budgets: List[Budget] = []
        self._transactions: List[Transaction] = []
        self._budget_sequence = 0
        self._transaction_sequence = 0
        LOGGER.debug("User ledger initialised with bank amount %.2f", bank_amount)

    # accessors

    @property
    def bank_amount(self) -> float:
        return self._bank_amount

    @bank_amount.setter
    def bank_amount(self, value: float) -> None:
        LOGGER.info("Bank amount set %.2f -> %.2f", self._bank_amount, value)
        self._bank_amount = value

    @property
    def projected_spend(self) -> float:
        return self._projected_spend

    @property
    def available_funds(self) -> float:
        """Bank money not yet committed to any budget."""

        return self._bank_amount - self._projected_spend

    @property
    def is_bank_low(self) -> bool:
        return self._bank_amount <= self.low_bank_warning

    @property
    def budgets(self) -> Tuple[Budget, ...]:
        return tuple(self._budgets)

    @property
    def transactions(self) -> Tuple[Transaction, ...]:
        return tuple(self._transactions)

    @property
    def clock(self) -> TimeSource:
        return self._clock

    # identifiers

    def _next_budget_id(self) -> str:
        self._budget_sequence += 1
        return f"bud_{self._budget_sequence:04d}"

    def _next_transaction_id(self) -> str:
        self._transaction_sequence += 1
        return f"txn_{self._transaction_sequence:04d}"

    def _is_member(self, budget: Budget) -> bool:
        return any(member is budget for member in self._budgets)

    # budget lookups and mutations

    def find_budget(self, name: str) -> Optional[Budget]:
        """Return the budget called ``name`` or ``None`` when absent."""

        for budget in self._budgets:
            if budget.name == name:
                return budget
        LOGGER.debug("Budget '%s' not found", name)
        return None

    def add_budget(self, budget: Budget) -> Budget:
        """Add a new budget, committing its allocation against the bank.

        Checks run in order: enough uncommitted funds for the budget's
        remaining amount, a positive allocation, then a unique name.
        """

        if self._bank_amount - (budget.remaining + self._projected_spend) < 0:
            LOGGER.warning(
                "Rejected budget '%s': %.2f exceeds available funds %.2f",
                budget.name,
                budget.remaining,
                self.available_funds,
            )
            raise InsufficientFundsError()
        if not budget.allocated > 0:
            LOGGER.warning("Rejected budget '%s': allocation %.2f", budget.name, budget.allocated)
            raise InvalidAmountError()
        if self.find_budget(budget.name) is not None:
            LOGGER.warning("Rejected budget '%s': name already used", budget.name)
            raise DuplicateNameError()

        budget.budget_id = self._next_budget_id()
        self._budgets.append(budget)
        self._projected_spend += budget.allocated
        LOGGER.info(
            "Added budget '%s' allocated=%.2f projected_spend=%.2f",
            budget.name,
            budget.allocated,
            self._projected_spend,
        )
        return budget

    def update_budget(self, name: str, new_name: str, new_allocated: float) -> Budget:
        """Rename and reallocate a budget, keeping what it has already spent."""

        budget = self.find_budget(name)
        if budget is None:
            LOGGER.warning("Rejected update of unknown budget '%s'", name)
            raise NotFoundError(f"Budget '{name}' not found")

        delta = new_allocated - budget.allocated
        if self._bank_amount - (delta + self._projected_spend) < 0:
            LOGGER.warning(
                "Rejected update of '%s': increase %.2f exceeds available funds %.2f",
                name,
                delta,
                self.available_funds,
            )
            raise InsufficientFundsError()
        clash = self.find_budget(new_name)
        if clash is not None and clash is not budget:
            LOGGER.warning("Rejected rename of '%s' to '%s': name already used", name, new_name)
            raise DuplicateNameError()

        budget.remaining = new_allocated - budget.spent
        budget.allocated = new_allocated
        budget.name = new_name
        self._projected_spend += delta
        LOGGER.info(
            "Updated budget '%s' -> '%s' allocated=%.2f projected_spend=%.2f",
            name,
            new_name,
            new_allocated,
            self._projected_spend,
        )
        return budget

    def reset_budget(self, name: str) -> None:
        """Restore a budget's remaining amount to its full allocation.

        Unknown names are ignored, unlike ``update_budget``.
        """

        budget = self.find_budget(name)
        if budget is None:
            return

        spent = budget.spent
        if self._bank_amount - (self._projected_spend + spent) < 0:
            LOGGER.warning(
                "Rejected reset of '%s': spent %.2f exceeds available funds %.2f",
                name,
                spent,
                self.available_funds,
            )
            raise InsufficientFundsError()

        self._projected_spend += spent
        budget.remaining = budget.allocated
        LOGGER.info("Reset budget '%s' projected_spend=%.2f", name, self._projected_spend)

    def remove_budget(self, budget: Budget) -> None:
        """Drop a budget and release its remaining amount; never rejected.

        The remaining amount is released even when ``budget`` is not a
        member, in which case only ``projected_spend`` changes.
        """

        if self._is_member(budget):
            self._budgets = [member for member in self._budgets if member is not budget]
        else:
            LOGGER.warning("Removing non-member budget '%s'", budget.name)
        self._projected_spend -= budget.remaining
        LOGGER.info(
            "Removed budget '%s' projected_spend=%.2f", budget.name, self._projected_spend
        )

    # transactions

    def carry_transaction(self, budget: Budget, amount: float, credit: bool) -> Transaction:
        """Record money moving through ``budget``.

        Debits draw down the budget, the projected spend and the bank.
        Credits only add to the bank; the budget is kept as a reference.
        """

        if not amount > 0:
            LOGGER.warning("Rejected transaction on '%s': amount %.2f", budget.name, amount)
            raise InvalidAmountError()
        if not credit and budget.remaining - amount < 0:
            LOGGER.warning(
                "Rejected debit of %.2f on '%s': only %.2f remaining",
                amount,
                budget.name,
                budget.remaining,
            )
            raise InsufficientBudgetError()
        if not self._is_member(budget):
            LOGGER.warning("Rejected transaction on non-member budget '%s'", budget.name)
            raise NotFoundError(f"Budget '{budget.name}' is not part of this ledger")

        transaction = Transaction(
            transaction_id=self._next_transaction_id(),
            occurred_at=self._clock.now(),
            direction=TransactionDirection.from_flag(credit),
            amount=amount,
            budget_id=budget.budget_id,
            budget_name=budget.name,
        )
        self._transactions.append(transaction)

        if credit:
            self._bank_amount += amount
        else:
            self._projected_spend -= amount
            budget.remaining -= amount
            self._bank_amount -= amount
        LOGGER.info(
            "Recorded %s %s of %.2f on '%s' bank=%.2f",
            transaction.transaction_id,
            transaction.direction.value,
            amount,
            budget.name,
            self._bank_amount,
        )
        return transaction

    # period reports

    def _resolve_now(self, now: Optional[datetime]) -> datetime:
        return self._clock.now() if now is None else now

    def get_day_spend(self, now: Optional[datetime] = None) -> float:
        return reporting.day_spend(self._transactions, self._resolve_now(now))

    def get_month_spend(self, now: Optional[datetime] = None) -> float:
        return reporting.month_spend(self._transactions, self._resolve_now(now))

    def get_year_spend(self, now: Optional[datetime] = None) -> float:
        return reporting.year_spend(self._transactions, self._resolve_now(now))

    def get_year_earn(self, now: Optional[datetime] = None) -> float:
        return reporting.year_earn(self._transactions, self._resolve_now(now))

    def export_snapshot(self) -> Dict[str, object]:
        """Export balances, budgets and history for JSON responses."""

        return {
            "bank_amount": self._bank_amount,
            "projected_spend": self._projected_spend,
            "available_funds": self.available_funds,
            "target_saving": self.target_saving,
            "low_bank_warning": self.low_bank_warning,
            "is_bank_low": self.is_bank_low,
            "budgets": [budget.as_dict() for budget in self._budgets],
            "transactions": [transaction.as_dict() for transaction in self._transactions],
        }

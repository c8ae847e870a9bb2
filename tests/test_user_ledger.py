"""Mini README: Tests covering the user ledger's budget and transaction rules.

Structure:
    * budget lifecycle - add, update, reset and remove keep projected spend consistent.
    * transactions - debits draw down budgets and bank, credits only touch the bank.
    * rejections - every error leaves the ledger unchanged.
"""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from budgeter.ledger import (
    Budget,
    DuplicateNameError,
    FixedTimeSource,
    InsufficientBudgetError,
    InsufficientFundsError,
    InvalidAmountError,
    LedgerErrorKind,
    NotFoundError,
    TransactionDirection,
    UserLedger,
)

NOW = datetime(2024, 5, 15, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def clock() -> FixedTimeSource:
    return FixedTimeSource(NOW)


@pytest.fixture
def ledger(clock: FixedTimeSource) -> UserLedger:
    return UserLedger(bank_amount=100.0, clock=clock)


def _state(ledger: UserLedger):
    return (
        ledger.bank_amount,
        ledger.projected_spend,
        [(budget.name, budget.allocated, budget.remaining) for budget in ledger.budgets],
        len(ledger.transactions),
    )


def test_new_ledger_uses_configured_defaults() -> None:
    ledger = UserLedger()

    assert ledger.bank_amount == 0.0
    assert ledger.projected_spend == 0.0
    assert ledger.target_saving == pytest.approx(150.0)
    assert ledger.low_bank_warning == pytest.approx(80.0)
    assert ledger.budgets == ()
    assert ledger.transactions == ()


def test_add_budget_rejected_without_bank_funds() -> None:
    """An empty bank cannot cover any allocation."""

    ledger = UserLedger()

    with pytest.raises(InsufficientFundsError) as excinfo:
        ledger.add_budget(Budget(name="Food", allocated=100.0, remaining=100.0))
    assert excinfo.value.kind is LedgerErrorKind.INSUFFICIENT_FUNDS
    assert ledger.budgets == ()
    assert ledger.projected_spend == 0.0


def test_add_budget_commits_allocation(ledger: UserLedger) -> None:
    food = ledger.add_budget(Budget(name="Food", allocated=60.0))

    assert ledger.projected_spend == pytest.approx(60.0)
    assert ledger.available_funds == pytest.approx(40.0)
    assert ledger.find_budget("Food") is food
    assert food.remaining == pytest.approx(60.0)
    assert food.budget_id == "bud_0001"


def test_add_budget_rejects_duplicate_name(ledger: UserLedger) -> None:
    ledger.add_budget(Budget(name="Food", allocated=40.0))
    before = _state(ledger)

    with pytest.raises(DuplicateNameError):
        ledger.add_budget(Budget(name="Food", allocated=10.0))
    assert _state(ledger) == before


def test_add_budget_rejects_non_positive_allocation(ledger: UserLedger) -> None:
    with pytest.raises(InvalidAmountError):
        ledger.add_budget(Budget(name="Nothing", allocated=0.0))
    assert ledger.budgets == ()


def test_add_budget_checks_funds_before_positivity() -> None:
    """Funds are checked first, so a negative allocation with no bank reports funds."""

    ledger = UserLedger(bank_amount=0.0)

    with pytest.raises(InsufficientFundsError):
        ledger.add_budget(Budget(name="Odd", allocated=-5.0, remaining=5.0))


def test_walkthrough_debit_credit_and_remove(ledger: UserLedger, clock: FixedTimeSource) -> None:
    """Follow a budget from creation through spending, income and removal."""

    food = ledger.add_budget(Budget(name="Food", allocated=100.0, remaining=100.0))
    assert ledger.projected_spend == pytest.approx(100.0)

    debit = ledger.carry_transaction(food, 30.0, credit=False)
    assert food.remaining == pytest.approx(70.0)
    assert ledger.bank_amount == pytest.approx(70.0)
    assert ledger.projected_spend == pytest.approx(70.0)
    assert debit.direction is TransactionDirection.DEBIT
    assert debit.occurred_at == NOW
    assert debit.budget_id == food.budget_id

    ledger.carry_transaction(food, 50.0, credit=True)
    assert ledger.bank_amount == pytest.approx(120.0)
    assert food.remaining == pytest.approx(70.0)
    assert ledger.projected_spend == pytest.approx(70.0)
    assert len(ledger.transactions) == 2

    ledger.remove_budget(food)
    assert ledger.projected_spend == pytest.approx(0.0)
    assert ledger.find_budget("Food") is None
    assert [transaction.budget_name for transaction in ledger.transactions] == ["Food", "Food"]


def test_debit_beyond_remaining_is_rejected(ledger: UserLedger) -> None:
    food = ledger.add_budget(Budget(name="Food", allocated=50.0))
    before = _state(ledger)

    with pytest.raises(InsufficientBudgetError):
        ledger.carry_transaction(food, 50.01, credit=False)
    assert _state(ledger) == before
    assert ledger.transactions == ()


@pytest.mark.parametrize("amount", [0.0, -10.0])
def test_transaction_rejects_non_positive_amount(ledger: UserLedger, amount: float) -> None:
    food = ledger.add_budget(Budget(name="Food", allocated=50.0))

    with pytest.raises(InvalidAmountError):
        ledger.carry_transaction(food, amount, credit=True)
    assert ledger.transactions == ()


def test_transaction_requires_member_budget(ledger: UserLedger) -> None:
    stranger = Budget(name="Stranger", allocated=20.0)

    with pytest.raises(NotFoundError):
        ledger.carry_transaction(stranger, 5.0, credit=False)
    assert ledger.bank_amount == pytest.approx(100.0)
    assert stranger.remaining == pytest.approx(20.0)


def test_update_budget_preserves_spent_amount(ledger: UserLedger) -> None:
    food = ledger.add_budget(Budget(name="Food", allocated=50.0))
    ledger.carry_transaction(food, 20.0, credit=False)

    ledger.update_budget("Food", "Groceries", 60.0)

    assert food.name == "Groceries"
    assert food.allocated == pytest.approx(60.0)
    assert food.remaining == pytest.approx(40.0)
    assert ledger.projected_spend == pytest.approx(40.0)
    assert ledger.transactions[0].budget_name == "Food"


def test_update_budget_allows_keeping_its_own_name(ledger: UserLedger) -> None:
    food = ledger.add_budget(Budget(name="Food", allocated=50.0))

    ledger.update_budget("Food", "Food", 30.0)

    assert food.allocated == pytest.approx(30.0)
    assert ledger.projected_spend == pytest.approx(30.0)


def test_update_budget_rejects_taken_name(ledger: UserLedger) -> None:
    ledger.add_budget(Budget(name="Food", allocated=20.0))
    ledger.add_budget(Budget(name="Fuel", allocated=20.0))
    before = _state(ledger)

    with pytest.raises(DuplicateNameError):
        ledger.update_budget("Food", "Fuel", 20.0)
    assert _state(ledger) == before


def test_update_budget_rejects_increase_beyond_funds(ledger: UserLedger) -> None:
    ledger.add_budget(Budget(name="Food", allocated=80.0))
    before = _state(ledger)

    with pytest.raises(InsufficientFundsError):
        ledger.update_budget("Food", "Food", 120.01)
    assert _state(ledger) == before


def test_update_unknown_budget_raises_not_found(ledger: UserLedger) -> None:
    with pytest.raises(NotFoundError) as excinfo:
        ledger.update_budget("Missing", "Other", 10.0)
    assert isinstance(excinfo.value, KeyError)
    assert "Missing" in str(excinfo.value)


def test_reset_budget_recommits_spent_amount(ledger: UserLedger) -> None:
    food = ledger.add_budget(Budget(name="Food", allocated=40.0))
    ledger.carry_transaction(food, 25.0, credit=False)
    assert ledger.projected_spend == pytest.approx(15.0)

    ledger.reset_budget("Food")
    assert food.remaining == pytest.approx(40.0)
    assert ledger.projected_spend == pytest.approx(40.0)

    ledger.reset_budget("Food")
    assert food.remaining == pytest.approx(40.0)
    assert ledger.projected_spend == pytest.approx(40.0)


def test_reset_budget_rejected_when_bank_cannot_cover(ledger: UserLedger) -> None:
    food = ledger.add_budget(Budget(name="Food", allocated=60.0))
    ledger.add_budget(Budget(name="Rent", allocated=40.0))
    ledger.carry_transaction(food, 30.0, credit=False)
    before = _state(ledger)

    with pytest.raises(InsufficientFundsError):
        ledger.reset_budget("Food")
    assert _state(ledger) == before


def test_reset_unknown_budget_is_silent(ledger: UserLedger) -> None:
    before = _state(ledger)

    ledger.reset_budget("Missing")

    assert _state(ledger) == before
    assert ledger.find_budget("Missing") is None


def test_remove_non_member_budget_still_releases_remaining(ledger: UserLedger) -> None:
    """Removal always subtracts the remaining amount, even for a stranger."""

    food = ledger.add_budget(Budget(name="Food", allocated=40.0))

    ledger.remove_budget(Budget(name="Other", allocated=10.0))

    assert ledger.projected_spend == pytest.approx(30.0)
    assert ledger.budgets == (food,)


def test_bank_low_warning_follows_threshold(ledger: UserLedger) -> None:
    ledger.low_bank_warning = 50.0
    assert not ledger.is_bank_low

    ledger.bank_amount = 50.0
    assert ledger.is_bank_low


def test_export_snapshot_lists_budgets_and_transactions(ledger: UserLedger) -> None:
    food = ledger.add_budget(Budget(name="Food", allocated=40.0))
    ledger.carry_transaction(food, 10.0, credit=False)

    snapshot = ledger.export_snapshot()

    assert snapshot["bank_amount"] == pytest.approx(90.0)
    assert snapshot["projected_spend"] == pytest.approx(30.0)
    assert snapshot["budgets"] == [
        {"budget_id": "bud_0001", "name": "Food", "allocated": 40.0, "remaining": 30.0, "spent": 10.0}
    ]
    assert snapshot["transactions"][0]["transaction_id"] == "txn_0001"
    assert snapshot["transactions"][0]["direction"] == "debit"
    assert snapshot["transactions"][0]["occurred_at"] == NOW.isoformat()


def test_ledger_assigns_budget_ids_over_caller_values(ledger: UserLedger) -> None:
    """Ids come from the ledger's sequence so history never confuses budgets."""

    first = ledger.add_budget(Budget(name="A", allocated=10.0, budget_id="bud_0002"))
    second = ledger.add_budget(Budget(name="B", allocated=10.0))

    assert first.budget_id == "bud_0001"
    assert second.budget_id == "bud_0002"


def test_debit_of_exact_remaining_empties_budget(ledger: UserLedger) -> None:
    food = ledger.add_budget(Budget(name="Food", allocated=40.0))

    ledger.carry_transaction(food, 40.0, credit=False)

    assert food.remaining == 0.0
    assert ledger.projected_spend == pytest.approx(0.0)
    assert ledger.bank_amount == pytest.approx(60.0)


@pytest.mark.parametrize("credit", [True, False])
def test_transaction_rejects_nan_amount(ledger: UserLedger, credit: bool) -> None:
    food = ledger.add_budget(Budget(name="Food", allocated=40.0))
    before = _state(ledger)

    with pytest.raises(InvalidAmountError):
        ledger.carry_transaction(food, float("nan"), credit=credit)
    assert _state(ledger) == before


def test_add_budget_rejects_nan_allocation(ledger: UserLedger) -> None:
    with pytest.raises(InvalidAmountError):
        ledger.add_budget(Budget(name="Food", allocated=float("nan"), remaining=10.0))
    assert ledger.budgets == ()

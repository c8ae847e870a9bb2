"""Mini README: Period totals over a transaction history.

Structure:
    * Period - the calendar windows a report can cover.
    * total_for_period - sum matching transactions for a window around ``now``.
    * day_spend / month_spend / year_spend / year_earn - named shortcuts.

All functions are pure: they read the supplied transactions and the
caller's ``now`` and nothing else. Windows compare a single calendar field.
``Period.DAY`` matches the day of the month only and ``Period.MONTH`` the
month of the year only, so a debit from 5 March counts towards "today" on
5 April. Callers that need a true calendar day should filter the history
to the current month first.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Iterable

from .models import Transaction, TransactionDirection


class Period(str, Enum):
    DAY = "day"
    MONTH = "month"
    YEAR = "year"


def _in_period(occurred_at: datetime, now: datetime, period: Period) -> bool:
    if period is Period.DAY:
        return occurred_at.day == now.day
    if period is Period.MONTH:
        return occurred_at.month == now.month
    return occurred_at.year == now.year


def total_for_period(
    transactions: Iterable[Transaction],
    now: datetime,
    period: Period,
    direction: TransactionDirection,
) -> float:
    """Sum amounts of ``direction`` transactions falling in ``period``."""

    return sum(
        (
            transaction.amount
            for transaction in transactions
            if transaction.direction is direction
            and _in_period(transaction.occurred_at, now, period)
        ),
        0.0,
    )


def day_spend(transactions: Iterable[Transaction], now: datetime) -> float:
    return total_for_period(transactions, now, Period.DAY, TransactionDirection.DEBIT)


def month_spend(transactions: Iterable[Transaction], now: datetime) -> float:
    return total_for_period(transactions, now, Period.MONTH, TransactionDirection.DEBIT)


def year_spend(transactions: Iterable[Transaction], now: datetime) -> float:
    return total_for_period(transactions, now, Period.YEAR, TransactionDirection.DEBIT)


def year_earn(transactions: Iterable[Transaction], now: datetime) -> float:
    return total_for_period(transactions, now, Period.YEAR, TransactionDirection.CREDIT)

"""Expense arithmetic: paid and outstanding amounts, totals, filtering, sorting.

Functions accept stored Expense rows or any object exposing the same
attributes (amount, payment_status, paid_amount, ...).
"""

from collections import defaultdict
from collections.abc import Iterable
from datetime import date
from enum import Enum
from typing import Any

from tripbook.models.enums import PaymentStatus
from tripbook.models.summaries import ExpenseSummary

CURRENCY_SYMBOLS: dict[str, str] = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "JPY": "¥",
    "INR": "₹",
    "THB": "฿",
    "CAD": "CA$",
    "AUD": "A$",
}

SUPPORTED_CURRENCIES: tuple[str, ...] = ("USD", "EUR", "GBP", "JPY", "CAD", "AUD", "CHF", "CNY", "INR", "THB", "NZD", "MXN")

# Currencies formatted without minor units
_ZERO_DECIMAL = {"JPY"}


class ExpenseSort(str, Enum):
    DATE_ASC = "date-asc"
    DATE_DESC = "date-desc"
    AMOUNT_ASC = "amount-asc"
    AMOUNT_DESC = "amount-desc"
    TITLE_ASC = "title-asc"


class StatusFilter(str, Enum):
    ALL = "all"
    PAID = "paid"
    DUE = "due"
    PARTIAL = "partial"


def outstanding_amount(expense: Any) -> float:
    """Amount still to be paid on an expense."""
    status = PaymentStatus(expense.payment_status)
    if status is PaymentStatus.PAID:
        return 0.0
    if status is PaymentStatus.DUE:
        return expense.amount
    return max(0.0, expense.amount - (expense.paid_amount or 0.0))


def settled_amount(expense: Any) -> float:
    return expense.amount - outstanding_amount(expense)


def summarize_expenses(expenses: Iterable[Any], budget: float = 0.0) -> ExpenseSummary:
    expenses = list(expenses)
    by_status = {status: 0.0 for status in PaymentStatus}
    for expense in expenses:
        by_status[PaymentStatus(expense.payment_status)] += expense.amount

    total = sum(expense.amount for expense in expenses)
    outstanding = sum(outstanding_amount(expense) for expense in expenses)
    return ExpenseSummary(
        total=total,
        by_status=by_status,
        settled=total - outstanding,
        outstanding=outstanding,
        budget=budget,
        remaining_budget=budget - total,
        over_budget=total > budget,
    )


def expenses_by_category(expenses: Iterable[Any]) -> dict[str, float]:
    totals: dict[str, float] = defaultdict(float)
    for expense in expenses:
        totals[expense.category or "other"] += expense.amount
    return dict(totals)


def _matches_search(expense: Any, needle: str) -> bool:
    haystacks = (expense.title, expense.notes, expense.category)
    return any(needle in (value or "").casefold() for value in haystacks)


def filter_expenses(
    expenses: Iterable[Any],
    search: str = "",
    status: StatusFilter | str = StatusFilter.ALL,
    sort: ExpenseSort | str = ExpenseSort.DATE_DESC,
) -> list[Any]:
    status = StatusFilter(status)
    sort = ExpenseSort(sort)
    needle = search.strip().casefold()

    result = [
        expense
        for expense in expenses
        if (not needle or _matches_search(expense, needle))
        and (status is StatusFilter.ALL or expense.payment_status == status.value)
    ]

    if sort in (ExpenseSort.DATE_ASC, ExpenseSort.DATE_DESC):
        # Undated expenses sort as if dated today
        today = date.today()
        result.sort(key=lambda e: e.expense_date or today, reverse=sort is ExpenseSort.DATE_DESC)
    elif sort in (ExpenseSort.AMOUNT_ASC, ExpenseSort.AMOUNT_DESC):
        result.sort(key=lambda e: e.amount, reverse=sort is ExpenseSort.AMOUNT_DESC)
    else:
        result.sort(key=lambda e: e.title or "")
    return result


def toggle_paid(expense: Any) -> None:
    """Flip an expense between fully paid and due."""
    if expense.payment_status == PaymentStatus.PAID.value:
        expense.payment_status = PaymentStatus.DUE.value
        expense.paid_amount = 0.0
    else:
        expense.payment_status = PaymentStatus.PAID.value
        expense.paid_amount = expense.amount
        expense.due_date = None


def format_currency(amount: float, currency_code: str = "USD") -> str:
    decimals = 0 if currency_code in _ZERO_DECIMAL else 2
    sign = "-" if amount < 0 else ""
    number = f"{abs(amount):,.{decimals}f}"
    symbol = CURRENCY_SYMBOLS.get(currency_code)
    if symbol is None:
        return f"{sign}{currency_code} {number}"
    return f"{sign}{symbol}{number}"

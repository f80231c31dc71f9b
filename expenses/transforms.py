from datetime import datetime, timedelta
from decimal import ROUND_HALF_UP, Decimal
from functools import partial, reduce
from typing import Dict, Iterable, List, Optional, Tuple

from expenses.config import CURRENCY
from expenses.domain import Category, Expense
from expenses.functional import pipe


def sample_categories() -> Tuple[Category, ...]:
    return (
        Category("Food", "#FF6B6B"),
        Category("Transport", "#4ECDC4"),
        Category("Entertainment", "#45B7D1"),
        Category("Shopping", "#96CEB4"),
    )


def sample_expenses(
    cats: Tuple[Category, ...], now: Optional[datetime] = None
) -> Tuple[Expense, ...]:
    now = now or datetime.now()
    food, transport, entertainment, shopping = cats[:4]
    rows = (
        ("e1", "25.50", "Lunch", 1, food),
        ("e2", "15.00", "Bus fare", 2, transport),
        ("e3", "45.00", "Movie tickets", 3, entertainment),
        ("e4", "120.00", "New shoes", 4, shopping),
    )
    return tuple(
        Expense(
            id=eid,
            amount=Decimal(amount),
            description=desc,
            date=now - timedelta(days=days_ago),
            category=cat,
        )
        for eid, amount, desc, days_ago, cat in rows
    )


def format_amount(amount: Decimal) -> str:
    # midpoints round away from zero: 0.025 -> 0.03
    cents = amount.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    return f"{cents:,.2f} {CURRENCY}"


def add_expense(expenses: Tuple[Expense, ...], e: Expense) -> Tuple[Expense, ...]:
    return expenses + (e,)


def total_amount(expenses: Iterable[Expense]) -> Decimal:
    return reduce(lambda acc, e: acc + e.amount, expenses, Decimal("0"))


def expensive_items(expenses: Iterable[Expense], threshold: Decimal) -> List[str]:
    """Filter -> map -> collect, keeping the input order."""
    return pipe(
        expenses,
        partial(filter, lambda e: e.amount > threshold),
        partial(map, lambda e: f"{e.description}: {format_amount(e.amount)}"),
        list,
    )


def category_totals(expenses: Iterable[Expense]) -> List[Tuple[str, Decimal]]:
    # dicts keep insertion order and sorted() is stable, so equal totals
    # stay in the order their category was first seen
    totals: Dict[str, Decimal] = {}
    for e in expenses:
        name = e.category.name
        totals[name] = totals.get(name, Decimal("0")) + e.amount

    return sorted(totals.items(), key=lambda item: item[1], reverse=True)

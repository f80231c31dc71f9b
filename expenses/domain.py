from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import FrozenSet, Iterable


@dataclass(frozen=True)
class Category:
    name: str
    color: str   # hex string, e.g. "#FF6B6B"


@dataclass(frozen=True)
class Expense:
    id: str            # uuid4 hex
    amount: Decimal    # always positive once validated
    description: str
    date: datetime
    category: Category


@dataclass(frozen=True)
class ValidationError:
    message: str


# Aggregate view over a collection of expenses
@dataclass(frozen=True)
class ExpenseSummary:
    total: Decimal
    count: int
    categories: FrozenSet[str]


@dataclass(frozen=True)
class Classification:
    expense: Expense
    category_type: str   # Essential / Luxury / Other
    priority: str        # High / Medium / Low / Very Low


def summarize(expenses: Iterable[Expense]) -> ExpenseSummary:
    items = tuple(expenses)
    return ExpenseSummary(
        total=sum((e.amount for e in items), Decimal("0")),
        count=len(items),
        categories=frozenset(e.category.name for e in items),
    )

from decimal import Decimal
from typing import Iterable, List

from expenses.domain import Classification, Expense

ESSENTIAL = "Essential"
LUXURY = "Luxury"
OTHER = "Other"


def category_type(name: str) -> str:
    match name:
        case "Food" | "Transport":
            return ESSENTIAL
        case "Entertainment" | "Shopping":
            return LUXURY
        case _:
            return OTHER


def priority(amount: Decimal) -> str:
    # strict comparisons: exactly 100 is Medium, exactly 50 is Low
    match amount:
        case a if a > 100:
            return "High"
        case a if a > 50:
            return "Medium"
        case a if a > 20:
            return "Low"
        case _:
            return "Very Low"


def classify(e: Expense) -> Classification:
    return Classification(
        expense=e,
        category_type=category_type(e.category.name),
        priority=priority(e.amount),
    )


def classify_all(expenses: Iterable[Expense]) -> List[Classification]:
    return [classify(e) for e in expenses]


def classify_sorted(expenses: Iterable[Expense]) -> List[Classification]:
    """Classify, then order by category type ascending and priority descending.

    Both keys compare the labels as text, so "Very Low" sorts above "High"
    when descending.
    """
    by_priority = sorted(classify_all(expenses), key=lambda c: c.priority, reverse=True)
    return sorted(by_priority, key=lambda c: c.category_type)


def describe(c: Classification) -> str:
    return f"{c.expense.description}: {c.category_type} expense, {c.priority} priority"

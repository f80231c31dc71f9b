"""Demo sections, each rendered as a list of console lines.

Every section is a pure function of its inputs; printing is left to the
caller so the dashboard and the console runner can share them.
"""

from decimal import Decimal
from typing import List, Sequence

from expenses.budget import analyze_budget, estimate_tax
from expenses.config import DEFAULT_BUDGET, EXPENSIVE_THRESHOLD, PIPELINE_THRESHOLD
from expenses.domain import Category, Expense
from expenses.functional import find_category, find_expensive
from expenses.matching import classify_sorted, describe
from expenses.transforms import category_totals, expensive_items, format_amount, total_amount
from expenses.validation import create_expense

# (description, amount, category) fed to the validation pipeline
VALIDATION_CASES = (
    ("Coffee", "5.50", "Food"),
    ("", "-10.00", "InvalidCategory"),
    ("Unknown", "-10.00", "InvalidCategory"),
    ("Unknown", "10.00", "InvalidCategory"),
)


def header(title: str) -> List[str]:
    return [title, "-" * (len(title) + 1)]


def option_types_demo(expenses: Sequence[Expense], cats: Sequence[Category]) -> List[str]:
    lines = header("1. Option Types Demo:")
    lines.append(
        find_expensive(expenses, EXPENSIVE_THRESHOLD).match(
            some=lambda e: f"Found expensive item: {e.description} ({format_amount(e.amount)})",
            none=lambda: "No expensive items found",
        )
    )
    lines.append(
        find_category(cats, "Food").match(
            some=lambda c: f"Found category: {c.name} ({c.color})",
            none=lambda: "Category not found",
        )
    )
    lines.append(f"Total expenses: {format_amount(total_amount(expenses))}")
    lines.append("")
    return lines


def either_validation_demo() -> List[str]:
    lines = header("2. Either Validation Demo:")
    for description, amount, category in VALIDATION_CASES:
        lines.append(
            create_expense(description, amount, category).match(
                right=lambda e: f"Valid expense created: {e.description} ({format_amount(e.amount)})",
                left=lambda err: f"Validation error: {err.message}",
            )
        )
    lines.append("")
    return lines


def functional_pipelines_demo(expenses: Sequence[Expense]) -> List[str]:
    lines = header("3. Functional Pipelines Demo:")
    lines.append(f"Expensive items (>{format_amount(PIPELINE_THRESHOLD)}):")
    lines.extend(f"  - {item}" for item in expensive_items(expenses, PIPELINE_THRESHOLD))
    lines.append("")
    lines.append("Totals by category:")
    lines.extend(
        f"  {name}: {format_amount(total)}" for name, total in category_totals(expenses)
    )
    lines.append("")
    return lines


def pattern_matching_demo(expenses: Sequence[Expense]) -> List[str]:
    lines = header("4. Pattern Matching Demo:")
    lines.extend(describe(c) for c in classify_sorted(expenses))
    lines.append("")
    return lines


def monadic_composition_demo(
    expenses: Sequence[Expense], budget: Decimal = DEFAULT_BUDGET
) -> List[str]:
    lines = header("5. Monadic Composition Demo:")
    lines.append(
        estimate_tax(expenses).match(
            some=lambda tax: f"Estimated tax on expenses: {format_amount(tax)}",
            none=lambda: "No expenses to calculate tax on",
        )
    )
    lines.append(
        analyze_budget(expenses, budget).match(
            right=lambda analysis: f"Budget analysis: {analysis}",
            left=lambda err: f"Analysis error: {err.message}",
        )
    )
    lines.append("")
    return lines

from decimal import Decimal
from typing import Sequence

from expenses.config import CLOSE_TO_LIMIT, TAX_RATE
from expenses.domain import Expense, ValidationError
from expenses.functional import Either, Left, Maybe, Nothing, Right, Some
from expenses.logging_setup import get_logger
from expenses.transforms import format_amount, total_amount

logger = get_logger("expenses.budget")


def analyze_budget(
    expenses: Sequence[Expense], budget: Decimal
) -> Either[ValidationError, str]:
    remaining = budget - total_amount(expenses)
    logger.debug("Budget %s, remaining %s", budget, remaining)

    if remaining < 0:
        return Left(ValidationError(f"Over budget by {format_amount(abs(remaining))}"))
    elif remaining < CLOSE_TO_LIMIT:
        return Right(f"Close to budget limit. Remaining: {format_amount(remaining)}")
    return Right(f"Well within budget. Remaining: {format_amount(remaining)}")


def non_empty(expenses: Sequence[Expense]) -> Maybe[Sequence[Expense]]:
    return Some(expenses) if len(expenses) > 0 else Nothing()


def estimate_tax(
    expenses: Sequence[Expense], rate: Decimal = TAX_RATE
) -> Maybe[Decimal]:
    """Tax on the summed expenses; ``Nothing()`` when there is nothing to tax."""
    return (
        Some(expenses)
        .bind(non_empty)
        .map(total_amount)
        .map(lambda total: total * rate)
    )

import re
import uuid
from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Callable, Optional

from expenses.config import DEFAULT_CATEGORY_COLOR, VALID_CATEGORIES
from expenses.domain import Category, Expense, ValidationError
from expenses.functional import Either, Left, Right
from expenses.logging_setup import get_logger

logger = get_logger("expenses.validation")

EMPTY_DESCRIPTION = "Description cannot be empty"
INVALID_AMOUNT = "Amount must be a positive number"

# ASCII digits only, optional comma thousands groups, "." decimal point, exponent
AMOUNT_PATTERN = re.compile(r"[+-]?([0-9]{1,3}(,[0-9]{3})+|[0-9]+)?(\.[0-9]+)?([eE][+-]?[0-9]+)?")


def validate_description(description: Optional[str]) -> Either[ValidationError, str]:
    if description is None or not description.strip():
        return Left(ValidationError(EMPTY_DESCRIPTION))
    return Right(description.strip())


def parse_amount(amount_str: Optional[str]) -> Either[ValidationError, Decimal]:
    """Parse a decimal amount using ``.`` as the separator, whatever the locale."""
    if amount_str is None:
        return Left(ValidationError(INVALID_AMOUNT))
    text = amount_str.strip()
    if not AMOUNT_PATTERN.fullmatch(text):
        return Left(ValidationError(INVALID_AMOUNT))
    try:
        amount = Decimal(text.replace(",", ""))
    except InvalidOperation:
        return Left(ValidationError(INVALID_AMOUNT))
    if not amount.is_finite() or amount <= 0:
        return Left(ValidationError(INVALID_AMOUNT))
    return Right(amount)


def validate_category(category_name: str) -> Either[ValidationError, Category]:
    if category_name not in VALID_CATEGORIES:
        return Left(ValidationError(f"Invalid category: {category_name}"))
    return Right(Category(category_name, DEFAULT_CATEGORY_COLOR))


def create_expense(
    description: Optional[str],
    amount_str: Optional[str],
    category_name: str,
    *,
    clock: Callable[[], datetime] = datetime.now,
    id_factory: Callable[[], str] = lambda: uuid.uuid4().hex,
) -> Either[ValidationError, Expense]:
    """Build an expense from raw input, stopping at the first invalid field.

    Fields are checked in order description, amount, category; once one
    fails the remaining validators are not called at all.
    """
    result = validate_description(description).bind(
        lambda desc: parse_amount(amount_str).bind(
            lambda amount: validate_category(category_name).map(
                lambda category: Expense(
                    id=id_factory(),
                    amount=amount,
                    description=desc,
                    date=clock(),
                    category=category,
                )
            )
        )
    )
    if result.is_left():
        logger.debug("Rejected expense %r: %s", description, result.get_error().message)
    return result

from decimal import Decimal

from expenses.domain import Category, Expense
from expenses.functional import (
    Maybe, Some, Nothing, Either, Left, Right,
    find_category, find_expensive, pipe,
)
from expenses.transforms import sample_categories, sample_expenses


def test_maybe_map():
    doubled = Some(5).map(lambda x: x * 2)
    assert doubled.is_some()
    assert doubled.get_or_else(0) == 10

    mapped_nothing = Nothing().map(lambda x: x * 2)
    assert mapped_nothing.is_none()
    assert mapped_nothing.get_or_else(0) == 0


def test_maybe_bind_propagates_nothing():
    def safe_divide(x: int) -> Maybe[int]:
        if x == 0:
            return Nothing()
        return Some(10 // x)

    assert Some(2).bind(safe_divide) == Some(5)
    assert Some(0).bind(safe_divide).is_none()
    assert Nothing().bind(safe_divide).is_none()


def test_maybe_match_and_filter():
    assert Some(3).match(some=lambda v: v + 1, none=lambda: 0) == 4
    assert Nothing().match(some=lambda v: v + 1, none=lambda: 0) == 0
    assert Some(3).filter(lambda v: v > 5) == Nothing()
    assert Some(7).filter(lambda v: v > 5) == Some(7)


def test_maybe_of():
    assert Maybe.of(None) == Nothing()
    assert Maybe.of(0) == Some(0)


def test_either_map():
    assert Right(5).map(lambda x: x * 2) == Right(10)

    mapped_left = Left("error").map(lambda x: x * 2)
    assert mapped_left.is_left()
    assert mapped_left.get_or_else(0) == 0
    assert mapped_left.get_error() == "error"


def test_either_bind():
    def safe_divide(x: int) -> Either[str, int]:
        if x == 0:
            return Left("Division by zero")
        return Right(10 // x)

    assert Right(2).bind(safe_divide) == Right(5)
    assert Right(0).bind(safe_divide).get_error() == "Division by zero"
    assert Left("original error").bind(safe_divide).get_error() == "original error"


def test_either_accessors_raise_on_wrong_side():
    import pytest

    with pytest.raises(ValueError):
        Right(1).get_error()
    with pytest.raises(ValueError):
        Left("boom").get()


def test_either_match():
    assert Right(2).match(right=lambda v: v * 10, left=lambda e: -1) == 20
    assert Left("x").match(right=lambda v: v * 10, left=lambda e: e + "!") == "x!"


def test_find_expensive_returns_first_over_threshold():
    cats = sample_categories()
    expenses = sample_expenses(cats)

    found = find_expensive(expenses, Decimal("100"))
    assert found.is_some()
    assert found.get_or_else(None).amount == Decimal("120.00")
    assert found.get_or_else(None).description == "New shoes"


def test_find_expensive_uses_iteration_order():
    food = Category("Food", "#FF6B6B")
    from datetime import datetime
    now = datetime(2025, 1, 1)
    expenses = (
        Expense("a", Decimal("30"), "First", now, food),
        Expense("b", Decimal("90"), "Second", now, food),
    )
    assert find_expensive(expenses, Decimal("20")).get_or_else(None).id == "a"


def test_find_expensive_nothing_when_none_qualify():
    expenses = sample_expenses(sample_categories())
    assert find_expensive(expenses, Decimal("1000")) == Nothing()
    assert find_expensive((), Decimal("0")) == Nothing()


def test_find_expensive_threshold_is_strict():
    expenses = sample_expenses(sample_categories())
    assert find_expensive(expenses, Decimal("120.00")).is_none()


def test_find_category():
    cats = sample_categories()
    food = find_category(cats, "Food")
    assert food == Some(Category("Food", "#FF6B6B"))
    assert find_category(cats, "food").is_none()
    assert find_category(cats, "Rent").is_none()


def test_pipe_applies_left_to_right():
    def add1(x):
        return x + 1

    def mul2(x):
        return x * 2

    assert pipe(3, add1, mul2) == 8
    assert pipe(3, mul2, add1) == 7
    assert pipe(3) == 3

from datetime import datetime, timedelta
from decimal import Decimal

from expenses.domain import Category, Expense, ExpenseSummary, summarize
from expenses.transforms import (
    add_expense,
    category_totals,
    expensive_items,
    format_amount,
    sample_categories,
    sample_expenses,
    total_amount,
)

NOW = datetime(2025, 6, 1, 9, 30)


def make_sample():
    cats = sample_categories()
    return cats, sample_expenses(cats, now=NOW)


def test_sample_data_shape():
    cats, expenses = make_sample()
    assert [c.name for c in cats] == ["Food", "Transport", "Entertainment", "Shopping"]
    assert [e.amount for e in expenses] == [
        Decimal("25.50"), Decimal("15.00"), Decimal("45.00"), Decimal("120.00"),
    ]
    assert expenses[0].date == NOW - timedelta(days=1)
    assert expenses[3].category is cats[3]


def test_entities_are_immutable_values():
    import dataclasses
    import pytest

    cats, expenses = make_sample()
    assert Category("Food", "#FF6B6B") == cats[0]
    with pytest.raises(dataclasses.FrozenInstanceError):
        expenses[0].amount = Decimal("1")


def test_add_expense_returns_new_tuple():
    cats, expenses = make_sample()
    extra = Expense("e5", Decimal("9.99"), "Snack", NOW, cats[0])
    updated = add_expense(expenses, extra)
    assert len(updated) == 5
    assert len(expenses) == 4
    assert updated is not expenses


def test_total_amount():
    _, expenses = make_sample()
    assert total_amount(expenses) == Decimal("205.50")
    assert total_amount(()) == Decimal("0")


def test_summarize():
    _, expenses = make_sample()
    assert summarize(expenses) == ExpenseSummary(
        total=Decimal("205.50"),
        count=4,
        categories=frozenset({"Food", "Transport", "Entertainment", "Shopping"}),
    )
    assert summarize([]) == ExpenseSummary(Decimal("0"), 0, frozenset())


def test_format_amount():
    assert format_amount(Decimal("25.5")) == "25.50 SEK"
    assert format_amount(Decimal("1234.5")) == "1,234.50 SEK"


def test_format_amount_rounds_midpoints_away_from_zero():
    assert format_amount(Decimal("0.025")) == "0.03 SEK"
    assert format_amount(Decimal("20.555")) == "20.56 SEK"
    assert format_amount(Decimal("0.024")) == "0.02 SEK"


def test_expensive_items_filters_and_keeps_order():
    _, expenses = make_sample()
    assert expensive_items(expenses, Decimal("20")) == [
        "Lunch: 25.50 SEK",
        "Movie tickets: 45.00 SEK",
        "New shoes: 120.00 SEK",
    ]


def test_expensive_items_threshold_is_strict():
    _, expenses = make_sample()
    assert expensive_items(expenses, Decimal("15.00")) == [
        "Lunch: 25.50 SEK",
        "Movie tickets: 45.00 SEK",
        "New shoes: 120.00 SEK",
    ]
    assert expensive_items(expenses, Decimal("120")) == []


def test_category_totals_sorted_descending():
    cats, expenses = make_sample()
    extra = Expense("e5", Decimal("30.00"), "Dinner", NOW, cats[0])
    totals = category_totals(add_expense(expenses, extra))
    assert totals == [
        ("Shopping", Decimal("120.00")),
        ("Food", Decimal("55.50")),
        ("Entertainment", Decimal("45.00")),
        ("Transport", Decimal("15.00")),
    ]


def test_category_totals_empty():
    assert category_totals([]) == []

import sys
import os
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from decimal import Decimal

import streamlit as st
import pandas as pd
import plotly.express as px

from expenses.budget import analyze_budget, estimate_tax
from expenses.config import (
    CURRENCY,
    DEFAULT_BUDGET,
    EXPENSIVE_THRESHOLD,
    PIPELINE_THRESHOLD,
    VALID_CATEGORIES,
)
from expenses.domain import summarize
from expenses.functional import find_category, find_expensive
from expenses.logging_setup import configure_logging
from expenses.matching import classify_all, classify_sorted
from expenses.services import ReportService, default_sections
from expenses.transforms import (
    add_expense,
    category_totals,
    expensive_items,
    format_amount,
    sample_categories,
    sample_expenses,
)
from expenses.validation import create_expense

configure_logging()
st.set_page_config(page_title="Expense Sandbox", layout="wide")

categories = sample_categories()

if "expenses" not in st.session_state:
    st.session_state.expenses = sample_expenses(categories)

expenses = st.session_state.expenses
color_by_name = {c.name: c.color for c in categories}


def expenses_to_df(items):
    return pd.DataFrame([
        {
            "date": e.date.strftime("%Y-%m-%d"),
            "description": e.description,
            "category": e.category.name,
            "amount": float(e.amount),
        }
        for e in items
    ])


menu = st.sidebar.radio(
    "Menu",
    ["🏠 Overview", "🔍 Option Types", "✅ Validation", "🔗 Pipelines", "🧩 Pattern Matching", "💰 Budget & Tax", "🖥 Console"]
)

if menu == "🏠 Overview":
    summary = summarize(expenses)
    k1, k2, k3 = st.columns(3)
    with k1:
        st.metric("Expenses", summary.count)
    with k2:
        st.metric("Categories", len(summary.categories))
    with k3:
        st.metric("Total", format_amount(summary.total))

    st.subheader("🧾 Expenses")
    st.dataframe(expenses_to_df(expenses), use_container_width=True)

elif menu == "🔍 Option Types":
    st.title("🔍 Option Types")

    threshold = st.number_input("Threshold", value=float(EXPENSIVE_THRESHOLD), step=10.0)
    find_expensive(expenses, Decimal(str(threshold))).match(
        some=lambda e: st.success(f"Found expensive item: {e.description} ({format_amount(e.amount)})"),
        none=lambda: st.info("No expensive items found"),
    )

    name = st.text_input("Category name", value="Food")
    find_category(categories, name).match(
        some=lambda c: st.success(f"Found category: {c.name} ({c.color})"),
        none=lambda: st.error("Category not found"),
    )

elif menu == "✅ Validation":
    st.title("✅ Either Validation")

    with st.form("new_expense"):
        description = st.text_input("Description")
        amount_str = st.text_input("Amount", value="5.50")
        category_name = st.selectbox("Category", list(VALID_CATEGORIES) + ["Other"])
        submitted = st.form_submit_button("Create expense")

    if submitted:
        result = create_expense(description, amount_str, category_name)
        if result.is_right():
            created = result.get()
            st.session_state.expenses = add_expense(st.session_state.expenses, created)
            st.success(f"✅ Valid expense created: {created.description} ({format_amount(created.amount)})")
        else:
            st.error(f"❌ Validation error: {result.get_error().message}")

elif menu == "🔗 Pipelines":
    st.title("🔗 Functional Pipelines")

    st.subheader(f"Expensive items (>{format_amount(PIPELINE_THRESHOLD)})")
    for item in expensive_items(expenses, PIPELINE_THRESHOLD):
        st.markdown(f"- {item}")

    totals = category_totals(expenses)
    df_totals = pd.DataFrame(
        [{"Category": name, "Total": float(total)} for name, total in totals]
    )
    fig = px.bar(
        df_totals,
        x="Category",
        y="Total",
        color="Category",
        color_discrete_map=color_by_name,
        labels={"Total": f"Total ({CURRENCY})"},
        title="Totals by category",
        template="plotly_dark",
    )
    st.plotly_chart(fig, use_container_width=True)

elif menu == "🧩 Pattern Matching":
    st.title("🧩 Pattern Matching")

    sort_results = st.checkbox("Sort by category type, then priority", value=True)
    classified = classify_sorted(expenses) if sort_results else classify_all(expenses)
    st.table(pd.DataFrame([
        {
            "description": c.expense.description,
            "amount": format_amount(c.expense.amount),
            "type": c.category_type,
            "priority": c.priority,
        }
        for c in classified
    ]))

elif menu == "💰 Budget & Tax":
    st.title("💰 Monadic Composition")

    estimate_tax(expenses).match(
        some=lambda tax: st.metric("Estimated tax", format_amount(tax)),
        none=lambda: st.info("No expenses to calculate tax on"),
    )

    budget = st.number_input(f"Budget ({CURRENCY})", value=float(DEFAULT_BUDGET), step=50.0)
    analyze_budget(expenses, Decimal(str(budget))).match(
        right=lambda analysis: st.success(f"Budget analysis: {analysis}"),
        left=lambda err: st.error(f"Analysis error: {err.message}"),
    )

elif menu == "🖥 Console":
    st.title("🖥 Console Output")
    report = ReportService(default_sections(expenses, categories)).run()
    st.code("\n".join(report["lines"]), language="text")

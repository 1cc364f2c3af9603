"""Expense Tracking tab: seeded expenses filtered by status and category."""

from typing import Sequence

import streamlit as st

from src.expenseflow.expenses import SEED_EXPENSES, TrackedExpense
from src.expenseflow.flows.tracking import (
    ALL,
    CATEGORY_FILTERS,
    NO_MATCHES_TEXT,
    STATUS_FILTERS,
    count_label,
    filter_expenses,
    format_amount,
)
from ui.components import status_badge

TABLE_HEADER = "| Date | Vendor | Amount | Category | Status |\n|---|---|---:|---|---|"


def expense_table_markdown(rows: Sequence[TrackedExpense]) -> str:
    """Markdown table of the filtered expenses; a single notice row when nothing matches."""
    if not rows:
        return f"{TABLE_HEADER}\n| {NO_MATCHES_TEXT} | | | | |"
    lines = [
        f"| **{e.date}** | {e.vendor} | `{format_amount(e.amount)}` | {e.category.value} | {status_badge(e.status)} |"
        for e in rows
    ]
    return "\n".join([TABLE_HEADER, *lines])


def render() -> None:
    st.subheader("🔎 Expense Tracking")
    st.caption("View and filter all submitted expenses")

    col1, col2 = st.columns(2)
    with col1:
        status = st.selectbox(
            "Filter by Status", STATUS_FILTERS,
            format_func=lambda v: "All Statuses" if v == ALL else v, key="status_filter",
        )
    with col2:
        category = st.selectbox(
            "Filter by Category", CATEGORY_FILTERS,
            format_func=lambda v: "All Categories" if v == ALL else v, key="category_filter",
        )

    rows = filter_expenses(SEED_EXPENSES, status, category)
    st.markdown(expense_table_markdown(rows))
    st.caption(count_label(len(rows), len(SEED_EXPENSES)))

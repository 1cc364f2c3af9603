"""Reusable UI components for the ExpenseFlow tabs."""

import re
from typing import List

import streamlit as st

from src.expenseflow.expenses.models import ChatMessage, ExpenseResult, ExpenseStatus
from src.expenseflow.flows.tracking import format_amount

MARKDOWN_SPECIALS = re.compile(r"([\\`*_\[\]$~<>#|])")

STATUS_BADGE_COLORS = {
    ExpenseStatus.APPROVED: "green",
    ExpenseStatus.REJECTED: "red",
    ExpenseStatus.PENDING_APPROVAL: "gray",
}


def escape_markdown(text: str) -> str:
    """Backslash-escape markdown and LaTeX (``$``) characters in agent-supplied text."""
    return MARKDOWN_SPECIALS.sub(r"\\\1", str(text))


def badge(label: str, color: str) -> str:
    """Markdown badge, e.g. ``:green-badge[Approved]``."""
    return f":{color}-badge[{label}]"


def status_badge(status: ExpenseStatus) -> str:
    return badge(status.value, STATUS_BADGE_COLORS[status])


def compliance_badges(result: ExpenseResult) -> List[str]:
    """Compliance badge, plus the approval badge when approval is required."""
    pv = result.policy_validation
    badges = [badge("✔ Compliant", "green") if pv.is_compliant else badge("✖ Non-Compliant", "red")]
    if pv.approval_required:
        badges.append(badge("⚠ Approval Required", "orange"))
    return badges


def bullet_list(items: List[str]) -> str:
    return "\n".join(f"- {escape_markdown(item)}" for item in items)


def display_expense_result(result: ExpenseResult) -> None:
    """Render extracted details, policy validation and recommendations for one submission."""
    pv = result.policy_validation
    details = result.expense_details
    with st.container(border=True):
        st.subheader("🧾 Expense Processed")
        st.caption("Your expense has been validated" if pv.is_compliant else "Issues found with your expense")

        st.markdown("**Extracted Details**")
        col1, col2 = st.columns(2)
        with col1:
            st.markdown(f"Vendor:  \n**{escape_markdown(details.vendor)}**")
            amount = escape_markdown(f"{details.currency} {format_amount(details.amount)}")
            st.markdown(f"Amount:  \n**{amount}**")
        with col2:
            st.markdown(f"Date:  \n**{escape_markdown(details.date)}**")
            st.markdown(f"Category:  \n**{escape_markdown(details.category)}**")
        if details.items:
            st.markdown("Items:")
            st.markdown(bullet_list(details.items))

        st.divider()
        st.markdown("**Policy Validation**")
        st.markdown(" ".join(compliance_badges(result)))
        if pv.violations:
            st.error("**Violations:**\n\n" + bullet_list(pv.violations))
        if pv.warnings:
            st.warning("**Warnings:**\n\n" + bullet_list(pv.warnings))

        if result.recommendations:
            st.divider()
            st.markdown("**Recommendations**")
            st.markdown(bullet_list(result.recommendations))


def display_chat_message(message: ChatMessage) -> None:
    with st.chat_message(message.role.value):
        st.text(message.content)
        if message.recommendations:
            st.divider()
            st.caption("Recommendations:")
            st.markdown(bullet_list(message.recommendations))


def display_chat_history(messages: List[ChatMessage]) -> None:
    """Display the transcript, or the getting-started hint when it is empty."""
    if not messages:
        st.markdown(
            "<div style='text-align:center;opacity:0.6;padding:3rem 0'>💬<br>"
            "Ask any questions about expense policies and guidelines<br>"
            "<small>Example: \"What is the meal expense limit?\"</small></div>",
            unsafe_allow_html=True,
        )
        return
    for message in messages:
        display_chat_message(message)

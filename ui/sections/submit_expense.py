"""Submit Expense tab: receipt upload, expense form and the agent's verdict."""

import streamlit as st

from src.expenseflow.expenses.models import ExpenseCategory
from src.expenseflow.flows import ExpenseForm, SubmissionPhase
from ui.components import display_expense_result
from ui.services import get_app_settings, get_submission_flow

RECEIPT_TYPES = ["png", "jpg", "jpeg", "gif", "webp", "pdf"]
# Identifies the uploader's current file so each selection is uploaded once
UPLOADED_RECEIPT_KEY = "uploaded_receipt_key"


def _handle_receipt(flow, receipt) -> None:
    if receipt is None:
        if st.session_state.pop(UPLOADED_RECEIPT_KEY, None) is not None:
            flow.clear_receipt()
        return
    key = f"{receipt.name}:{receipt.size}"
    if st.session_state.get(UPLOADED_RECEIPT_KEY) == key:
        return
    st.session_state[UPLOADED_RECEIPT_KEY] = key
    with st.spinner("Uploading receipt..."):
        flow.upload_receipt(receipt.name, receipt.getvalue(), receipt.type)


def _read_form() -> ExpenseForm:
    col1, col2 = st.columns(2)
    with col1:
        vendor = st.text_input("Vendor", placeholder="e.g., ABC Cafe", key="expense_vendor")
    with col2:
        day = st.date_input("Date", value=None, key="expense_date")
    col3, col4 = st.columns(2)
    with col3:
        amount = st.number_input(
            "Amount ($)", min_value=0.0, step=0.01, value=None, format="%.2f",
            placeholder="0.00", key="expense_amount",
        )
    with col4:
        category = st.selectbox(
            "Category", [c.value for c in ExpenseCategory], index=None,
            placeholder="Select category", key="expense_category",
        )
    description = st.text_area(
        "Description", placeholder="Brief description of the expense", height=90, key="expense_description"
    )
    return ExpenseForm(
        vendor=vendor or "",
        date=day.isoformat() if day else "",
        amount=f"{amount:.2f}" if amount is not None else "",
        category=category or "",
        description=description or "",
    )


def render() -> None:
    st.subheader("💲 Submit New Expense")
    st.caption("Upload your receipt and enter expense details for processing")

    flow = get_submission_flow()
    state = flow.state

    receipt = st.file_uploader(
        "Upload Receipt (Image/PDF)", type=RECEIPT_TYPES, disabled=flow.controls_disabled, key="receipt_file"
    )
    _handle_receipt(flow, receipt)
    if state.has_receipt and state.receipt_name:
        st.markdown(f":green[✔ {state.receipt_name} uploaded]")

    form = _read_form()
    submitting = state.phase is SubmissionPhase.SUBMITTING
    clicked = st.button(
        "Submitting..." if submitting else "Submit Expense",
        type="primary",
        icon=":material/send:",
        disabled=flow.controls_disabled or not form.is_complete,
        key="submit_expense",
    )
    if clicked and flow.begin_submit(form):
        st.rerun()

    if submitting:
        with st.spinner("Submitting..."):
            flow.finish_submit()
        st.rerun()

    if state.phase is SubmissionPhase.ERROR_SHOWN and state.error:
        st.error(state.error, icon=":material/error:")
    elif state.phase is SubmissionPhase.RESULT_SHOWN:
        if state.result is not None:
            display_expense_result(state.result)
        else:
            st.info("The agent did not return any expense details.")

    if get_app_settings().DEBUG and state.last_envelope is not None:
        with st.expander("Raw agent response"):
            st.json(state.last_envelope.model_dump(mode="json"))

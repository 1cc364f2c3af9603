"""ExpenseFlow Streamlit UI: submit, track and ask about expenses."""

import sys
from pathlib import Path

# Ensure project root is on path so src.* and ui.* resolve
_root = Path(__file__).resolve().parent.parent
if str(_root) not in sys.path:
    sys.path.insert(0, str(_root))

import streamlit as st

from src.expenseflow.config import get_settings
from src.expenseflow.utils import setup_logging
from ui.sections import policy_chat, submit_expense, tracking

st.set_page_config(
    page_title="ExpenseFlow",
    page_icon="🧾",
    layout="wide",
)

settings = get_settings()
setup_logging(settings.LOG_LEVEL, Path(settings.LOG_FILE) if settings.LOG_FILE else None)

st.title("🧾 ExpenseFlow")
st.caption("Smart Expense Management System")

submit_tab, tracking_tab, chat_tab = st.tabs(["⬆ Submit Expense", "📄 Expense Tracking", "💬 Policy Q&A"])

with submit_tab:
    submit_expense.render()

with tracking_tab:
    tracking.render()

with chat_tab:
    policy_chat.render()

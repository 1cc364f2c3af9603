"""Interaction flows for the three ExpenseFlow panels.

Each flow owns an explicit state record and mutates only that record, so the
UI can keep one per session and tests can drive them without Streamlit.
"""

from .chat import ChatState, PolicyChatFlow
from .submission import ExpenseForm, SubmissionFlow, SubmissionPhase, SubmissionState, build_submission_message
from .tracking import ALL, count_label, filter_expenses

__all__ = [
    "ALL",
    "ChatState",
    "ExpenseForm",
    "PolicyChatFlow",
    "SubmissionFlow",
    "SubmissionPhase",
    "SubmissionState",
    "build_submission_message",
    "count_label",
    "filter_expenses",
]

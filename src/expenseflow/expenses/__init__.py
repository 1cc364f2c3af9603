"""Expense domain: agent result schemas, tracked expenses and chat messages."""

from .models import (
    ChatAnswer,
    ChatMessage,
    ChatRole,
    ExpenseCategory,
    ExpenseDetails,
    ExpenseResult,
    ExpenseStatus,
    PolicyValidation,
    TrackedExpense,
)
from .seed import SEED_EXPENSES

__all__ = [
    "ChatAnswer",
    "ChatMessage",
    "ChatRole",
    "ExpenseCategory",
    "ExpenseDetails",
    "ExpenseResult",
    "ExpenseStatus",
    "PolicyValidation",
    "SEED_EXPENSES",
    "TrackedExpense",
]

"""Expense tracking: status/category filtering over the seeded expense list."""

from typing import Iterable

from ..expenses.models import ExpenseCategory, ExpenseStatus, TrackedExpense

ALL = "all"
NO_MATCHES_TEXT = "No expenses found matching the selected filters"

STATUS_FILTERS: tuple[str, ...] = (ALL, *(s.value for s in (
    ExpenseStatus.APPROVED, ExpenseStatus.PENDING_APPROVAL, ExpenseStatus.REJECTED,
)))
CATEGORY_FILTERS: tuple[str, ...] = (ALL, *(c.value for c in ExpenseCategory))


def _check_filter(value: str, allowed: tuple[str, ...], name: str) -> None:
    if value not in allowed:
        raise ValueError(f"Unknown {name} filter '{value}'. Expected one of: {', '.join(allowed)}")


def filter_expenses(
    expenses: Iterable[TrackedExpense],
    status_filter: str = ALL,
    category_filter: str = ALL,
) -> list[TrackedExpense]:
    """Return the expenses matching both filters, in their original order. ``"all"`` matches everything."""
    status_filter = getattr(status_filter, "value", status_filter)
    category_filter = getattr(category_filter, "value", category_filter)
    _check_filter(status_filter, STATUS_FILTERS, "status")
    _check_filter(category_filter, CATEGORY_FILTERS, "category")
    return [
        e for e in expenses
        if (status_filter == ALL or e.status.value == status_filter)
        and (category_filter == ALL or e.category.value == category_filter)
    ]


def count_label(shown: int, total: int) -> str:
    return f"Showing {shown} of {total} expenses"


def format_amount(amount) -> str:
    return f"${amount:.2f}"

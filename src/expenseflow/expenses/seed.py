"""Expenses shown in the tracking table at session start."""

from decimal import Decimal

from .models import ExpenseCategory, ExpenseStatus, TrackedExpense

SEED_EXPENSES: tuple[TrackedExpense, ...] = (
    TrackedExpense(id="1", date="2024-06-15", vendor="ABC Airlines", amount=Decimal("450.00"),
                   category=ExpenseCategory.TRAVEL, status=ExpenseStatus.APPROVED),
    TrackedExpense(id="2", date="2024-06-14", vendor="Tech Store", amount=Decimal("1200.00"),
                   category=ExpenseCategory.HARDWARE, status=ExpenseStatus.PENDING_APPROVAL),
    TrackedExpense(id="3", date="2024-06-13", vendor="Coffee Shop", amount=Decimal("25.50"),
                   category=ExpenseCategory.MEALS, status=ExpenseStatus.APPROVED),
    TrackedExpense(id="4", date="2024-06-12", vendor="Office Depot", amount=Decimal("85.00"),
                   category=ExpenseCategory.OFFICE_SUPPLIES, status=ExpenseStatus.APPROVED),
    TrackedExpense(id="5", date="2024-06-10", vendor="Luxury Restaurant", amount=Decimal("350.00"),
                   category=ExpenseCategory.MEALS, status=ExpenseStatus.REJECTED),
)

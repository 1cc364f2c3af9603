"""Schemas for expense results, tracked expenses and policy chat messages."""

import re
from collections.abc import Iterable
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ExpenseCategory(str, Enum):
    """Fixed category set used by the submission form and tracking filters."""

    TRAVEL = "Travel"
    MEALS = "Meals"
    OFFICE_SUPPLIES = "Office Supplies"
    SOFTWARE = "Software"
    HARDWARE = "Hardware"
    TRAINING = "Training"
    OTHER = "Other"


class ExpenseStatus(str, Enum):
    """Approval status of a tracked expense."""

    PENDING_APPROVAL = "Pending Approval"
    APPROVED = "Approved"
    REJECTED = "Rejected"


class ChatRole(str, Enum):
    USER = "user"
    ASSISTANT = "assistant"


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bytes):
        return value.decode(errors="replace")
    return value if isinstance(value, str) else str(value)


def _as_text_list(value: Any) -> list[str]:
    """Agents occasionally return numbers or objects inside string lists, or a bare string."""
    if value is None:
        return []
    if isinstance(value, (str, bytes, dict)) or not isinstance(value, Iterable):
        return [_as_text(value)]
    return [_as_text(v) for v in value]


def _as_amount(value: Any) -> Decimal:
    """Amounts arrive as numbers or text such as "$1,234.50"; unreadable values become 0."""
    if value is None or isinstance(value, bool):
        return Decimal("0")
    if isinstance(value, (int, float, Decimal)):
        text = str(value)
    else:
        text = re.sub(r"[^0-9.\-]", "", _as_text(value))
    try:
        amount = Decimal(text)
    except InvalidOperation:
        return Decimal("0")
    return amount if amount.is_finite() else Decimal("0")


class ExpenseDetails(BaseModel):
    """Fields the agent extracted from the submission and receipt."""

    model_config = ConfigDict(frozen=True)

    vendor: str = ""
    date: str = ""
    amount: Decimal = Decimal("0")
    currency: str = ""
    category: str = ""
    items: list[str] = Field(default_factory=list)

    @field_validator("items", mode="before")
    @classmethod
    def _items_as_text(cls, v: Any) -> list[str]:
        return _as_text_list(v)

    @field_validator("vendor", "date", "currency", "category", mode="before")
    @classmethod
    def _scalar_as_text(cls, v: Any) -> str:
        return _as_text(v)

    @field_validator("amount", mode="before")
    @classmethod
    def _amount_from_text(cls, v: Any) -> Decimal:
        return _as_amount(v)


class PolicyValidation(BaseModel):
    """Policy compliance verdict produced by the agent."""

    model_config = ConfigDict(frozen=True)

    is_compliant: bool = False
    violations: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
    approval_required: bool = False

    @field_validator("violations", "warnings", mode="before")
    @classmethod
    def _as_text(cls, v: Any) -> list[str]:
        return _as_text_list(v)


class ExpenseResult(BaseModel):
    """Agent result payload. Policy chat replies use the same schema for answer/recommendations."""

    model_config = ConfigDict(frozen=True)

    expense_details: ExpenseDetails = Field(default_factory=ExpenseDetails)
    policy_validation: PolicyValidation = Field(default_factory=PolicyValidation)
    answer: str = ""
    recommendations: list[str] = Field(default_factory=list)

    @field_validator("expense_details", "policy_validation", mode="before")
    @classmethod
    def _none_as_default(cls, v: Any) -> Any:
        return {} if v is None else v

    @field_validator("answer", mode="before")
    @classmethod
    def _answer_text(cls, v: Any) -> str:
        return _as_text(v)

    @field_validator("recommendations", mode="before")
    @classmethod
    def _recommendations_text(cls, v: Any) -> list[str]:
        return _as_text_list(v)


class TrackedExpense(BaseModel):
    """One row of the expense tracking table."""

    model_config = ConfigDict(frozen=True)

    id: str
    date: str
    vendor: str
    amount: Decimal
    category: ExpenseCategory
    status: ExpenseStatus


class ChatMessage(BaseModel):
    """One entry of the policy chat transcript."""

    model_config = ConfigDict(frozen=True)

    role: ChatRole
    content: str
    recommendations: list[str] = Field(default_factory=list)


class ChatAnswer(BaseModel):
    """The part of an agent result a policy chat reply needs; other result fields are ignored."""

    answer: str = ""
    recommendations: list[str] = Field(default_factory=list)

    @field_validator("answer", mode="before")
    @classmethod
    def _answer_text(cls, v: Any) -> str:
        return _as_text(v)

    @field_validator("recommendations", mode="before")
    @classmethod
    def _recommendations_text(cls, v: Any) -> list[str]:
        return _as_text_list(v)

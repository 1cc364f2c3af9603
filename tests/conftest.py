"""Pytest fixtures and configuration."""

import json
from pathlib import Path
from typing import Any, Callable, Optional

import httpx
import pytest

from src.expenseflow.agent.schemas import AgentContext, AgentEnvelope, UploadResult, normalize_agent_response
from src.expenseflow.config import DEFAULT_AGENT_ID, ExpenseFlowSettings

# Project root (parent of tests/)
PROJECT_ROOT = Path(__file__).resolve().parent.parent


class FakeAgent:
    """Records every send() and answers from a queue of envelopes, raw bodies or exceptions to raise."""

    def __init__(self, *replies: Any):
        self.replies = list(replies)
        self.calls: list[tuple[str, str, Optional[AgentContext]]] = []

    def send(self, message: str, agent_id: str, context: Optional[AgentContext] = None) -> AgentEnvelope:
        self.calls.append((message, agent_id, context))
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply if isinstance(reply, AgentEnvelope) else normalize_agent_response(reply)


class FakeUploader:
    def __init__(self, *results: UploadResult):
        self.results = list(results)
        self.calls: list[tuple[str, bytes, Optional[str]]] = []

    def upload(self, filename: str, content: bytes, content_type: Optional[str] = None) -> UploadResult:
        self.calls.append((filename, content, content_type))
        return self.results.pop(0)


@pytest.fixture
def project_root() -> Path:
    return PROJECT_ROOT


@pytest.fixture
def settings() -> ExpenseFlowSettings:
    """Settings with explicit values so a local .env cannot leak into tests."""
    return ExpenseFlowSettings(
        AGENT_API_URL="https://agent.test/api/agent",
        UPLOAD_API_URL="https://agent.test/api/upload",
        AGENT_API_KEY="test-key",
        AGENT_ID=DEFAULT_AGENT_ID,
        MAX_UPLOAD_SIZE=1024,
    )


@pytest.fixture
def mock_http() -> Callable[..., tuple[httpx.Client, list[httpx.Request]]]:
    """Build an httpx.Client whose transport is a handler; returns (client, captured requests)."""

    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> tuple[httpx.Client, list[httpx.Request]]:
        seen: list[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return handler(request)

        return httpx.Client(transport=httpx.MockTransport(_record)), seen

    return _make


def json_body(request: httpx.Request) -> dict[str, Any]:
    return json.loads(request.content.decode("utf-8"))


def expense_envelope(**result_overrides: Any) -> dict[str, Any]:
    """A successful submission reply as the agent service sends it."""
    result = {
        "expense_details": {
            "vendor": "ABC Cafe",
            "date": "2024-06-20",
            "amount": 42.5,
            "currency": "USD",
            "category": "Meals",
            "items": ["Sandwich", "Coffee"],
        },
        "policy_validation": {
            "is_compliant": True,
            "violations": [],
            "warnings": [],
            "approval_required": False,
        },
        "answer": "Expense processed.",
        "recommendations": ["Submit within 30 days"],
    }
    result.update(result_overrides)
    return {"success": True, "response": {"status": "success", "result": result}}

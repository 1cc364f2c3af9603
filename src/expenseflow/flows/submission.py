"""Expense submission: receipt upload, message composition and agent result handling.

Phases:
    IDLE -> UPLOADING -> IDLE | ERROR_SHOWN          (receipt selected)
    RESULT_SHOWN -> UPLOADING -> RESULT_SHOWN | ERROR_SHOWN
    IDLE -> SUBMITTING -> RESULT_SHOWN | ERROR_SHOWN (form submitted)

RESULT_SHOWN and ERROR_SHOWN accept new uploads and submissions; only
UPLOADING and SUBMITTING lock the form.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Protocol

from pydantic import ValidationError

from ..agent.schemas import AgentContext, AgentEnvelope, UploadResult
from ..expenses.models import ExpenseResult

logger = logging.getLogger("expenseflow.flows.submission")

UPLOAD_FAILED = "Upload failed"
UPLOAD_NETWORK_ERROR = "Failed to upload receipt"
SUBMISSION_FAILED = "Submission failed"
SUBMISSION_NETWORK_ERROR = "Network error during submission"
UNEXPECTED_RESPONSE = "Unexpected response from agent"


class AgentSender(Protocol):
    def send(self, message: str, agent_id: str, context: Optional[AgentContext] = None) -> AgentEnvelope: ...


class ReceiptUploader(Protocol):
    def upload(self, filename: str, content: bytes, content_type: Optional[str] = None) -> UploadResult: ...


class SubmissionPhase(str, Enum):
    IDLE = "idle"
    UPLOADING = "uploading"
    SUBMITTING = "submitting"
    RESULT_SHOWN = "result_shown"
    ERROR_SHOWN = "error_shown"


@dataclass
class ExpenseForm:
    """Submission form fields as entered (amount stays text, as typed)."""

    vendor: str = ""
    date: str = ""
    amount: str = ""
    category: str = ""
    description: str = ""

    @property
    def is_complete(self) -> bool:
        """Vendor, date and amount are required; category and description are optional."""
        return all(str(v).strip() for v in (self.vendor, self.date, self.amount))


@dataclass
class SubmissionState:
    phase: SubmissionPhase = SubmissionPhase.IDLE
    asset_ids: list[str] = field(default_factory=list)
    receipt_name: Optional[str] = None
    pending_message: Optional[str] = None
    result: Optional[ExpenseResult] = None
    error: Optional[str] = None
    last_envelope: Optional[AgentEnvelope] = None

    @property
    def busy(self) -> bool:
        return self.phase in (SubmissionPhase.UPLOADING, SubmissionPhase.SUBMITTING)

    @property
    def has_receipt(self) -> bool:
        return bool(self.asset_ids)


def build_submission_message(form: ExpenseForm, receipt_attached: bool) -> str:
    """Compose the natural-language request sent to the agent."""
    return (
        "Process expense submission:\n"
        f"Vendor: {form.vendor}\n"
        f"Date: {form.date}\n"
        f"Amount: {form.amount}\n"
        f"Category: {form.category}\n"
        f"Description: {form.description}\n"
        f"{'Receipt attached.' if receipt_attached else 'No receipt attached.'}"
    )


class SubmissionFlow:
    """Drives one session's ``SubmissionState`` against the upload adapter and agent client."""

    def __init__(
        self,
        state: SubmissionState,
        agent: AgentSender,
        uploader: ReceiptUploader,
        agent_id: str,
    ):
        self.state = state
        self._agent = agent
        self._uploader = uploader
        self._agent_id = agent_id

    @property
    def controls_disabled(self) -> bool:
        return self.state.busy

    def upload_receipt(self, filename: str, content: bytes, content_type: Optional[str] = None) -> bool:
        """Upload a newly selected receipt. Returns True when asset ids were attached."""
        state = self.state
        if state.busy:
            return False
        previous = state.phase
        state.phase = SubmissionPhase.UPLOADING
        state.error = None
        state.receipt_name = filename
        result = self._uploader.upload(filename, content, content_type)
        if result.success:
            state.asset_ids = list(result.asset_ids)
            # A verdict already on screen stays visible after attaching a new receipt
            state.phase = SubmissionPhase.RESULT_SHOWN if previous is SubmissionPhase.RESULT_SHOWN else SubmissionPhase.IDLE
            return True
        # A failed upload must not leave an older receipt attached
        state.asset_ids = []
        state.receipt_name = None
        state.error = UPLOAD_NETWORK_ERROR if result.transport_error else (result.error or UPLOAD_FAILED)
        state.phase = SubmissionPhase.ERROR_SHOWN
        logger.info("Receipt upload failed: %s", state.error)
        return False

    def clear_receipt(self) -> None:
        if self.state.busy:
            return
        self.state.asset_ids = []
        self.state.receipt_name = None

    def begin_submit(self, form: ExpenseForm) -> bool:
        """Move to SUBMITTING and compose the request. No effect while busy or with missing required fields."""
        state = self.state
        if state.busy or not form.is_complete:
            return False
        state.phase = SubmissionPhase.SUBMITTING
        state.error = None
        state.result = None
        state.last_envelope = None
        state.pending_message = build_submission_message(form, state.has_receipt)
        return True

    def finish_submit(self) -> SubmissionPhase:
        """Send the pending request and settle into RESULT_SHOWN or ERROR_SHOWN."""
        state = self.state
        if state.phase is not SubmissionPhase.SUBMITTING or state.pending_message is None:
            return state.phase
        context = AgentContext(assets=state.asset_ids) if state.asset_ids else None
        try:
            envelope = self._agent.send(state.pending_message, self._agent_id, context)
        except Exception:
            logger.exception("Agent %s call raised", self._agent_id)
            envelope = AgentEnvelope.failure(SUBMISSION_NETWORK_ERROR, transport_error=True)
        state.pending_message = None
        state.last_envelope = envelope

        if envelope.ok:
            payload = envelope.response.result
            try:
                state.result = ExpenseResult.model_validate(payload) if payload is not None else None
            except ValidationError as e:
                logger.warning("Agent result did not match the expense schema: %s", e)
                state.error = UNEXPECTED_RESPONSE
                state.phase = SubmissionPhase.ERROR_SHOWN
                return state.phase
            state.phase = SubmissionPhase.RESULT_SHOWN
        else:
            if envelope.transport_error:
                state.error = SUBMISSION_NETWORK_ERROR
            else:
                state.error = envelope.response.message or SUBMISSION_FAILED
            state.phase = SubmissionPhase.ERROR_SHOWN
        return state.phase

    def submit(self, form: ExpenseForm) -> SubmissionPhase:
        if not self.begin_submit(form):
            return self.state.phase
        return self.finish_submit()

"""Policy Q&A chat: append-only transcript, one agent call per user turn."""

import logging
from dataclasses import dataclass, field
from typing import Optional

from ..agent.schemas import AgentEnvelope
from ..expenses.models import ChatAnswer, ChatMessage, ChatRole
from .submission import AgentSender

logger = logging.getLogger("expenseflow.flows.chat")

NO_ANSWER = "No answer provided"
ANSWER_FAILED = "Failed to get answer"
NETWORK_ERROR = "Network error"
ERROR_APOLOGY = "Sorry, I encountered an error processing your question. Please try again."
NETWORK_APOLOGY = "Sorry, I encountered a network error. Please try again."


@dataclass
class ChatState:
    messages: list[ChatMessage] = field(default_factory=list)
    loading: bool = False
    error: Optional[str] = None
    pending_question: Optional[str] = None


class PolicyChatFlow:
    """
    Appends a user message, asks the agent, appends exactly one assistant reply.

    Turns are strictly sequential: a question submitted while ``loading`` is
    ignored. The agent sees only the current question, never the history.
    """

    def __init__(self, state: ChatState, agent: AgentSender, agent_id: str):
        self.state = state
        self._agent = agent
        self._agent_id = agent_id

    @property
    def input_disabled(self) -> bool:
        return self.state.loading

    def begin_turn(self, question: str) -> bool:
        """Record the user's message and mark the turn in flight. Blank questions are ignored."""
        state = self.state
        if not (question or "").strip() or state.loading:
            return False
        state.messages.append(ChatMessage(role=ChatRole.USER, content=question))
        state.loading = True
        state.error = None
        state.pending_question = question
        return True

    def finish_turn(self) -> Optional[ChatMessage]:
        """Send the pending question and append the assistant's reply (or an apology)."""
        state = self.state
        if not state.loading or state.pending_question is None:
            return None
        question = state.pending_question
        try:
            try:
                envelope = self._agent.send(question, self._agent_id)
            except Exception:
                logger.exception("Agent %s call raised", self._agent_id)
                envelope = AgentEnvelope.failure(NETWORK_ERROR, transport_error=True)
            if envelope.ok:
                reply = self._answer_message(envelope.response.result, envelope.response.message)
            elif envelope.transport_error:
                state.error = NETWORK_ERROR
                reply = ChatMessage(role=ChatRole.ASSISTANT, content=NETWORK_APOLOGY)
            else:
                state.error = envelope.response.message or ANSWER_FAILED
                reply = ChatMessage(role=ChatRole.ASSISTANT, content=ERROR_APOLOGY)
            state.messages.append(reply)
            return reply
        finally:
            state.loading = False
            state.pending_question = None

    def _answer_message(self, result: Optional[dict], message: Optional[str]) -> ChatMessage:
        # Only answer/recommendations matter here; a malformed expense_details must not hide the answer
        parsed = ChatAnswer.model_validate(result or {})
        return ChatMessage(
            role=ChatRole.ASSISTANT,
            content=parsed.answer or message or NO_ANSWER,
            recommendations=parsed.recommendations,
        )

    def ask(self, question: str) -> Optional[ChatMessage]:
        if not self.begin_turn(question):
            return None
        return self.finish_turn()

"""UI service layer: cached agent/upload clients and per-session flow state."""

import streamlit as st

from src.expenseflow.agent import AgentClient, UploadAdapter
from src.expenseflow.config import ExpenseFlowSettings, get_settings
from src.expenseflow.flows import (
    ChatState,
    PolicyChatFlow,
    SubmissionFlow,
    SubmissionState,
)

SUBMISSION_STATE_KEY = "submission_state"
CHAT_STATE_KEY = "chat_state"


@st.cache_resource
def _cached_agent_client() -> AgentClient:
    """Agent client shared by every session (uses app config)."""
    return AgentClient.from_settings(get_settings())


@st.cache_resource
def _cached_upload_adapter() -> UploadAdapter:
    """Upload adapter shared by every session."""
    return UploadAdapter.from_settings(get_settings())


def get_app_settings() -> ExpenseFlowSettings:
    return get_settings()


def get_agent_client() -> AgentClient:
    return _cached_agent_client()


def get_upload_adapter() -> UploadAdapter:
    return _cached_upload_adapter()


def _session_state(key: str, factory):
    if key not in st.session_state:
        st.session_state[key] = factory()
    return st.session_state[key]


def get_submission_flow() -> SubmissionFlow:
    """Submission flow bound to this session's state."""
    return SubmissionFlow(
        _session_state(SUBMISSION_STATE_KEY, SubmissionState),
        get_agent_client(),
        get_upload_adapter(),
        get_app_settings().AGENT_ID,
    )


def get_chat_flow() -> PolicyChatFlow:
    """Policy chat flow bound to this session's transcript."""
    return PolicyChatFlow(
        _session_state(CHAT_STATE_KEY, ChatState),
        get_agent_client(),
        get_app_settings().AGENT_ID,
    )

"""Remote agent integration: inference client, upload adapter and response envelope."""

from .client import AgentClient
from .schemas import AgentContext, AgentEnvelope, AgentResponse, UploadResult, normalize_agent_response
from .upload import UploadAdapter

__all__ = [
    "AgentClient",
    "AgentContext",
    "AgentEnvelope",
    "AgentResponse",
    "UploadAdapter",
    "UploadResult",
    "normalize_agent_response",
]

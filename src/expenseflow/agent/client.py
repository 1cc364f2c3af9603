"""HTTP client for the remote expense agent."""

import logging
import time
from typing import Any, Optional

import httpx

from ..config import ExpenseFlowSettings
from ..exceptions import AgentResponseError, ConfigurationError
from .schemas import AgentContext, AgentEnvelope, normalize_agent_response

logger = logging.getLogger("expenseflow.agent.client")


class AgentClient:
    """
    Sends a message to a named agent and returns a normalized ``AgentEnvelope``.

    ``send`` never raises: network failures, HTTP errors and unusable bodies
    are all reported through the envelope so every caller handles them the
    same way. One request per call, no retry.
    """

    def __init__(
        self,
        api_url: str,
        *,
        api_key: Optional[str] = None,
        timeout: Optional[float] = None,
        http_client: Optional[httpx.Client] = None,
    ):
        if not api_url:
            raise ConfigurationError("AGENT_API_URL")
        self.api_url = api_url
        self.timeout = timeout
        self._headers = {"Accept": "application/json"}
        if api_key:
            self._headers["x-api-key"] = api_key
        self._http = http_client or httpx.Client(timeout=timeout)

    @classmethod
    def from_settings(cls, settings: ExpenseFlowSettings, http_client: Optional[httpx.Client] = None) -> "AgentClient":
        return cls(
            settings.AGENT_API_URL,
            api_key=settings.AGENT_API_KEY,
            timeout=settings.REQUEST_TIMEOUT,
            http_client=http_client,
        )

    def build_payload(self, message: str, agent_id: str, context: Optional[AgentContext] = None) -> dict[str, Any]:
        payload: dict[str, Any] = {"message": message, "agent_id": agent_id}
        if context and context.assets:
            payload["assets"] = list(context.assets)
        return payload

    def _decode(self, resp: httpx.Response) -> Any:
        try:
            body = resp.json()
        except ValueError:
            body = resp.text
        if resp.is_error:
            message = None
            if isinstance(body, dict):
                message = body.get("message") or body.get("error") or body.get("detail")
            raise AgentResponseError(resp.status_code, str(message) if message else None)
        return body

    def send(self, message: str, agent_id: str, context: Optional[AgentContext] = None) -> AgentEnvelope:
        """Send ``message`` to ``agent_id``; attached assets travel in ``context``."""
        payload = self.build_payload(message, agent_id, context)
        start = time.perf_counter()
        try:
            resp = self._http.post(self.api_url, json=payload, headers=self._headers)
            envelope = normalize_agent_response(self._decode(resp))
        except httpx.HTTPError as e:
            logger.warning("Agent %s unreachable: %s", agent_id, e)
            return AgentEnvelope.failure(f"Network error: {e}", transport_error=True)
        except AgentResponseError as e:
            logger.warning("Agent %s rejected request: %s", agent_id, e.message)
            return AgentEnvelope.failure(e.message)
        elapsed = time.perf_counter() - start
        logger.info(
            "Agent %s replied success=%s status=%s assets=%d in %.2fs",
            agent_id,
            envelope.success,
            envelope.response.status,
            len(payload.get("assets", [])),
            elapsed,
        )
        return envelope

    def close(self) -> None:
        self._http.close()

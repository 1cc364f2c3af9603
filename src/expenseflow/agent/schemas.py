"""Envelope and upload result schemas shared by every flow."""

from typing import Any

from pydantic import BaseModel, Field

from ..utils.json_utils import extract_json_object

SUCCESS_STATUS = "success"
ERROR_STATUS = "error"


class AgentContext(BaseModel):
    """Optional context sent with a message (attached receipt assets)."""

    assets: list[str] = Field(default_factory=list)


class AgentResponse(BaseModel):
    """Inner response of the envelope."""

    status: str = ERROR_STATUS
    message: str | None = None
    result: dict[str, Any] | None = None


class AgentEnvelope(BaseModel):
    """Normalized agent reply. ``ok`` requires both success signals."""

    success: bool = False
    response: AgentResponse = Field(default_factory=AgentResponse)
    transport_error: bool = Field(False, description="True when no HTTP response was received")
    raw: Any = Field(None, exclude=True, description="Decoded body as received, for debugging")

    @property
    def ok(self) -> bool:
        return self.success and self.response.status == SUCCESS_STATUS

    @classmethod
    def failure(cls, message: str, *, transport_error: bool = False) -> "AgentEnvelope":
        return cls(
            success=False,
            response=AgentResponse(status=ERROR_STATUS, message=message),
            transport_error=transport_error,
        )


class UploadResult(BaseModel):
    """Outcome of one receipt upload."""

    success: bool = False
    asset_ids: list[str] = Field(default_factory=list)
    error: str | None = None
    transport_error: bool = False


def _text_or_none(value: Any) -> str | None:
    if value is None:
        return None
    text = value if isinstance(value, str) else str(value)
    return text or None


RESPONSE_ONLY_KEYS = {"result", "message"}


def _response_from_object(obj: dict[str, Any]) -> AgentResponse:
    # {"result": ...} without a status is a response wrapper, not a result named "result"
    if "status" in obj or ("result" in obj and set(obj) <= RESPONSE_ONLY_KEYS):
        result = obj.get("result")
        if isinstance(result, str):
            result = extract_json_object(result) or {"answer": result}
        return AgentResponse(
            status=str(obj.get("status") or ERROR_STATUS) if "status" in obj else SUCCESS_STATUS,
            message=_text_or_none(obj.get("message")),
            result=result if isinstance(result, dict) else None,
        )
    return AgentResponse(status=SUCCESS_STATUS, result=obj)


def normalize_agent_response(raw: Any) -> AgentEnvelope:
    """
    Build an envelope from a decoded agent body.

    Accepts the full envelope (``{"success": ..., "response": {...}}``), a
    bare response (``{"status": ..., "result": ...}``) or a bare result. A
    ``response`` given as text is searched for an embedded JSON object; plain
    prose becomes the response message.
    """
    if not isinstance(raw, dict):
        if isinstance(raw, str) and raw.strip():
            parsed = extract_json_object(raw)
            if parsed is not None:
                return normalize_agent_response(parsed)
            return AgentEnvelope(success=True, response=AgentResponse(status=SUCCESS_STATUS, message=raw.strip()), raw=raw)
        return AgentEnvelope.failure("Agent returned an empty response")

    success = bool(raw.get("success", True))
    if "response" in raw:
        inner = raw["response"]
        if isinstance(inner, str):
            parsed = extract_json_object(inner)
            if parsed is None:
                response = AgentResponse(status=SUCCESS_STATUS, message=_text_or_none(inner.strip()))
            else:
                response = _response_from_object(parsed)
        elif isinstance(inner, dict):
            response = _response_from_object(inner)
        else:
            response = AgentResponse(status=SUCCESS_STATUS if success else ERROR_STATUS)
    else:
        body = {k: v for k, v in raw.items() if k not in ("success", "error", "detail")}
        response = _response_from_object(body) if body else AgentResponse(
            status=SUCCESS_STATUS if success else ERROR_STATUS
        )

    if not success:
        if not response.message:
            fallback = _text_or_none(raw.get("error")) or _text_or_none(raw.get("detail"))
            response = response.model_copy(update={"message": fallback})

    return AgentEnvelope(success=success, response=response, raw=raw)

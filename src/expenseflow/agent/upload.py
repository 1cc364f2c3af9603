"""Receipt upload adapter: transfers one file and returns its asset identifiers."""

import logging
from typing import Any, Optional

import httpx

from ..config import ExpenseFlowSettings
from ..exceptions import ConfigurationError
from .schemas import UploadResult

logger = logging.getLogger("expenseflow.agent.upload")


class UploadAdapter:
    """Multipart upload to the asset store. ``upload`` never raises."""

    def __init__(
        self,
        upload_url: str,
        *,
        api_key: Optional[str] = None,
        timeout: Optional[float] = None,
        max_size: Optional[int] = None,
        http_client: Optional[httpx.Client] = None,
    ):
        if not upload_url:
            raise ConfigurationError("UPLOAD_API_URL")
        self.upload_url = upload_url
        self.max_size = max_size
        self._headers = {"x-api-key": api_key} if api_key else {}
        self._http = http_client or httpx.Client(timeout=timeout)

    @classmethod
    def from_settings(cls, settings: ExpenseFlowSettings, http_client: Optional[httpx.Client] = None) -> "UploadAdapter":
        return cls(
            settings.UPLOAD_API_URL,
            api_key=settings.AGENT_API_KEY,
            timeout=settings.REQUEST_TIMEOUT,
            max_size=settings.MAX_UPLOAD_SIZE,
            http_client=http_client,
        )

    @staticmethod
    def _parse(body: Any) -> UploadResult:
        if not isinstance(body, dict):
            return UploadResult(success=False, error=None)
        asset_ids = body.get("asset_ids") or []
        if isinstance(asset_ids, str):
            asset_ids = [asset_ids]
        asset_ids = [str(a) for a in asset_ids if a]
        error = body.get("error") or body.get("message")
        if not body.get("success", bool(asset_ids)) or not asset_ids:
            return UploadResult(success=False, error=str(error) if error else None)
        return UploadResult(success=True, asset_ids=asset_ids)

    def upload(self, filename: str, content: bytes, content_type: Optional[str] = None) -> UploadResult:
        """Upload ``content`` as ``filename``. Returns asset ids or an error message."""
        if self.max_size is not None and len(content) > self.max_size:
            logger.info("Rejected %s locally: %d bytes exceeds %d", filename, len(content), self.max_size)
            return UploadResult(
                success=False,
                error=f"File exceeds maximum upload size of {self.max_size} bytes",
            )
        files = {"files": (filename, content, content_type or "application/octet-stream")}
        try:
            resp = self._http.post(self.upload_url, files=files, headers=self._headers)
        except httpx.HTTPError as e:
            logger.warning("Upload of %s failed: %s", filename, e)
            return UploadResult(success=False, transport_error=True)
        try:
            body = resp.json()
        except ValueError:
            body = None
        result = self._parse(body)
        if resp.is_error and result.success:
            result = UploadResult(success=False, error=f"Upload rejected with HTTP {resp.status_code}")
        logger.info("Upload of %s: success=%s assets=%d", filename, result.success, len(result.asset_ids))
        return result

    def close(self) -> None:
        self._http.close()

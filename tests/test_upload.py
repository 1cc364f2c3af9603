"""Tests for the receipt upload adapter."""

import httpx

from src.expenseflow.agent import UploadAdapter


def test_upload_success_returns_asset_ids(settings, mock_http):
    http, seen = mock_http(lambda req: httpx.Response(200, json={"success": True, "asset_ids": ["a1", "a2"]}))
    adapter = UploadAdapter.from_settings(settings, http_client=http)
    result = adapter.upload("receipt.pdf", b"%PDF-1.4", "application/pdf")

    assert result.success is True
    assert result.asset_ids == ["a1", "a2"]
    assert str(seen[0].url) == "https://agent.test/api/upload"
    assert seen[0].headers["content-type"].startswith("multipart/form-data")
    assert b'filename="receipt.pdf"' in seen[0].content
    assert b"%PDF-1.4" in seen[0].content


def test_upload_remote_rejection_reports_error_text(settings, mock_http):
    http, _ = mock_http(lambda req: httpx.Response(200, json={"success": False, "error": "file too large"}))
    result = UploadAdapter.from_settings(settings, http_client=http).upload("big.png", b"x")

    assert result.success is False
    assert result.error == "file too large"
    assert result.asset_ids == []


def test_upload_http_error_status(settings, mock_http):
    http, _ = mock_http(lambda req: httpx.Response(413, json={"success": False, "error": "file too large"}))
    result = UploadAdapter.from_settings(settings, http_client=http).upload("big.png", b"x")
    assert result.success is False
    assert result.error == "file too large"


def test_upload_success_without_assets_is_failure(settings, mock_http):
    http, _ = mock_http(lambda req: httpx.Response(200, json={"success": True, "asset_ids": []}))
    result = UploadAdapter.from_settings(settings, http_client=http).upload("r.png", b"x")
    assert result.success is False
    assert result.error is None


def test_upload_transport_error(settings, mock_http):
    def boom(req):
        raise httpx.ReadError("reset", request=req)

    http, _ = mock_http(boom)
    result = UploadAdapter.from_settings(settings, http_client=http).upload("r.png", b"x")
    assert result.success is False
    assert result.transport_error is True


def test_upload_rejects_oversized_file_locally(settings, mock_http):
    """Files over MAX_UPLOAD_SIZE never reach the network."""
    http, seen = mock_http(lambda req: httpx.Response(200, json={"success": True, "asset_ids": ["a"]}))
    result = UploadAdapter.from_settings(settings, http_client=http).upload("huge.pdf", b"x" * 2048)
    assert result.success is False
    assert "1024" in result.error
    assert seen == []

#!/usr/bin/env python3

"""Transport-layer contract tests: config, error mapping and step logs."""

from __future__ import annotations

import dataclasses
from typing import Any

import pytest
from requests.exceptions import ChunkedEncodingError, ConnectTimeout, ConnectionError, HTTPError

from imdsbox.metadata.errors import (
    MetadataConnectionError,
    MetadataError,
    MetadataHTTPError,
    MetadataTimeoutError,
    map_requests_exception,
)
from imdsbox.metadata.transport import MetadataConfig, MetadataTransport


class DummyHTTPResponse:
    """Simple mock HTTP response."""

    def __init__(self, status_code: int, text: str = "") -> None:
        """Initialize a dummy response.

        Args:
            status_code: HTTP status code.
            text: Body text.
        """
        self.status_code = status_code
        self.text = text
        self.content = text.encode("utf-8")

    def raise_for_status(self) -> None:
        """Raise like requests does for 4xx/5xx."""
        if self.status_code >= 400:
            raise HTTPError(f"{self.status_code} error", response=self)


@pytest.fixture
def transport() -> MetadataTransport:
    """Create transport for a fake base URL.

    Returns:
        MetadataTransport: Transport instance.
    """
    return MetadataTransport(MetadataConfig(base_url="http://imds.example.com/latest", timeout_s=2.0))


def test_config_appends_trailing_slash() -> None:
    """Base URL without trailing slash should keep its last segment."""
    config = MetadataConfig(base_url="http://imds.example.com/latest")

    assert config.base_url == "http://imds.example.com/latest/"
    assert MetadataTransport(config).url_for("meta-data/ami-id") == "http://imds.example.com/latest/meta-data/ami-id"


def test_config_is_immutable() -> None:
    """Config should not be mutable after construction."""
    config = MetadataConfig()

    with pytest.raises(dataclasses.FrozenInstanceError):
        config.timeout_s = 1.0  # type: ignore[misc]


def test_get_text_returns_body_verbatim(
    transport: MetadataTransport,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """Body should not be stripped or parsed."""
    monkeypatch.setattr(
        "imdsbox.metadata.transport.requests.get",
        lambda url, timeout: DummyHTTPResponse(200, " value with spaces \n"),
    )

    assert transport.get_text("meta-data/instance-id") == " value with spaces \n"


@pytest.mark.parametrize("status_code", [401, 404, 500, 503])
def test_non_success_status_is_transport_failure(
    transport: MetadataTransport,
    monkeypatch: pytest.MonkeyPatch,
    status_code: int,
) -> None:
    """Non-2xx statuses should raise without retrying."""
    calls: list[str] = []

    def fake_get(url: str, timeout: float) -> DummyHTTPResponse:
        calls.append(url)
        return DummyHTTPResponse(status_code, "error body")

    monkeypatch.setattr("imdsbox.metadata.transport.requests.get", fake_get)

    with pytest.raises(MetadataHTTPError) as exc_info:
        transport.get_text("meta-data/ramdisk-id")

    assert exc_info.value.status_code == status_code
    assert isinstance(exc_info.value, MetadataError)
    assert isinstance(exc_info.value.__cause__, HTTPError)
    assert len(calls) == 1


def test_probe_swallows_errors(
    transport: MetadataTransport,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """Probe should turn transport errors into False."""

    def fake_get(url: str, timeout: float) -> Any:
        raise ConnectTimeout("connect timed out")

    monkeypatch.setattr("imdsbox.metadata.transport.requests.get", fake_get)

    assert transport.probe() is False


@pytest.mark.parametrize(
    ("exc", "expected"),
    [
        (ConnectTimeout("connect timed out"), MetadataTimeoutError),
        (ConnectionError("refused"), MetadataConnectionError),
        (ChunkedEncodingError("broken body"), MetadataError),
        (RuntimeError("boom"), MetadataError),
    ],
)
def test_map_requests_exception(exc: Exception, expected: type) -> None:
    """requests errors should map to the matching metadata error."""
    mapped = map_requests_exception("meta-data/mac", exc)

    assert type(mapped) is expected
    assert mapped.path == "meta-data/mac"
    assert "meta-data/mac" in str(mapped)


def test_request_logs_key_fields(
    transport: MetadataTransport,
    monkeypatch: pytest.MonkeyPatch,
    caplog: pytest.LogCaptureFixture,
) -> None:
    """Each request should log task id, target, result and duration."""
    monkeypatch.setattr(
        "imdsbox.metadata.transport.requests.get",
        lambda url, timeout: DummyHTTPResponse(200, "secret-body"),
    )
    caplog.set_level("INFO", logger="imdsbox")

    transport.get_text("meta-data/local-ipv4")

    text = caplog.text
    assert "task_id=" in text
    assert "target=meta-data/local-ipv4" in text
    assert "result=ok" in text
    assert "duration_ms=" in text
    assert "secret-body" not in text


def test_failed_request_logs_status(
    transport: MetadataTransport,
    monkeypatch: pytest.MonkeyPatch,
    caplog: pytest.LogCaptureFixture,
) -> None:
    """Failed requests should log the HTTP status as result."""
    monkeypatch.setattr(
        "imdsbox.metadata.transport.requests.get",
        lambda url, timeout: DummyHTTPResponse(404),
    )
    caplog.set_level("INFO", logger="imdsbox")

    with pytest.raises(MetadataHTTPError):
        transport.get_text("meta-data/kernel-id")

    assert "result=http_404" in caplog.text


def test_get_text_decodes_utf8_without_charset(
    transport: MetadataTransport,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """Body bytes should be decoded as UTF-8 whatever the content type says."""
    response = DummyHTTPResponse(200)
    response.content = "Name\nÅsa".encode("utf-8")
    response.text = response.content.decode("iso-8859-1")
    monkeypatch.setattr("imdsbox.metadata.transport.requests.get", lambda url, timeout: response)

    assert transport.get_text("meta-data/tags/instance") == "Name\nÅsa"


def test_invalid_utf8_body_is_metadata_error(
    transport: MetadataTransport,
    monkeypatch: pytest.MonkeyPatch,
    caplog: pytest.LogCaptureFixture,
) -> None:
    """Undecodable bodies should fail like any other transport failure."""
    response = DummyHTTPResponse(200)
    response.content = b"\xff\xfe broken"
    monkeypatch.setattr("imdsbox.metadata.transport.requests.get", lambda url, timeout: response)
    caplog.set_level("INFO", logger="imdsbox")

    with pytest.raises(MetadataError) as exc_info:
        transport.get_text("meta-data/hostname")

    assert exc_info.value.path == "meta-data/hostname"
    assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)
    assert "result=decode_fail" in caplog.text

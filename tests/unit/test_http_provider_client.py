"""
tests/unit/test_http_provider_client.py

Tests for HTTPProviderClient failure mapping.

Verifies:
✔ Missing credential returns NotConfigured with zero network calls
✔ Connection errors and timeouts return TransportError
✔ Non-ok status returns NonOkStatus(code) without parsing the body
✔ In-body error and invalid JSON return MalformedPayload
✔ Missing, blank, or non-string text returns EmptyResponse
✔ Never raises
"""

from unittest.mock import AsyncMock, patch

import httpx
import pytest

from providers import (
    FailureReason,
    HTTPProviderClient,
    ProviderKind,
    ProviderProfile,
    ProviderRequest,
)


# ─────────────────────────────────────────────────────
# Helpers
# ─────────────────────────────────────────────────────


def make_profile(body_format="json", ok_statuses=frozenset({200})):
    """Minimal profile: POST to example.com, text at data['answer']."""

    def build_request(question, api_key):
        return ProviderRequest(
            method="POST",
            url="https://provider.example.com/solve",
            headers={"Authorization": f"Bearer {api_key}"},
            json={"q": question},
        )

    def extract_text(data, question):
        if body_format == "text":
            return data
        return data["answer"]

    def extract_error(data):
        if isinstance(data, dict) and data.get("error"):
            return str(data["error"])
        return None

    return ProviderProfile(
        name="example",
        kind=ProviderKind.GENERATIVE,
        build_request=build_request,
        extract_text=extract_text,
        extract_error=extract_error,
        ok_statuses=ok_statuses,
        body_format=body_format,
    )


def recording_transport(handler):
    """MockTransport that records every request it receives."""
    calls = []

    def wrapped(request):
        calls.append(request)
        return handler(request)

    return httpx.MockTransport(wrapped), calls


def make_client(handler, api_key="secret-key", **profile_kwargs):
    transport, calls = recording_transport(handler)
    client = HTTPProviderClient(
        make_profile(**profile_kwargs),
        api_key=api_key,
        timeout=1.0,
        transport=transport,
    )
    return client, calls


# ─────────────────────────────────────────────────────
# Not configured
# ─────────────────────────────────────────────────────


class TestNotConfigured:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("api_key", [None, "", "   "])
    async def test_missing_key_returns_not_configured(self, api_key):
        client, calls = make_client(lambda r: httpx.Response(200, json={"answer": "42"}), api_key=api_key)
        result = await client.attempt("What is 6 * 7?")

        assert result.status == "failure"
        assert result.failure.reason is FailureReason.NOT_CONFIGURED

    @pytest.mark.asyncio
    async def test_missing_key_issues_no_request(self):
        client, calls = make_client(lambda r: httpx.Response(200, json={"answer": "42"}), api_key=None)
        await client.attempt("What is 6 * 7?")
        assert calls == []

    def test_configured_flag(self):
        assert HTTPProviderClient(make_profile(), api_key="k").configured is True
        assert HTTPProviderClient(make_profile(), api_key=None).configured is False


# ─────────────────────────────────────────────────────
# Transport errors
# ─────────────────────────────────────────────────────


class TestTransportErrors:
    @pytest.mark.asyncio
    async def test_connection_refused_returns_transport_error(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        client, calls = make_client(handler)
        result = await client.attempt("What is 6 * 7?")

        assert result.failure.reason is FailureReason.TRANSPORT_ERROR
        assert len(calls) == 1

    @pytest.mark.asyncio
    async def test_timeout_returns_transport_error(self):
        def handler(request):
            raise httpx.ReadTimeout("timed out", request=request)

        client, _ = make_client(handler)
        result = await client.attempt("What is 6 * 7?")

        assert result.failure.reason is FailureReason.TRANSPORT_ERROR
        assert result.failure.detail == "timeout"

    @pytest.mark.asyncio
    async def test_patched_async_client_timeout(self):
        with patch("httpx.AsyncClient") as mock_class:
            mock_instance = AsyncMock()
            mock_instance.__aenter__ = AsyncMock(return_value=mock_instance)
            mock_instance.__aexit__ = AsyncMock(return_value=False)
            mock_instance.request.side_effect = httpx.TimeoutException("timed out")
            mock_class.return_value = mock_instance

            client = HTTPProviderClient(make_profile(), api_key="k", timeout=0.1)
            result = await client.attempt("What is 6 * 7?")

        assert result.status == "failure"
        assert result.failure.reason is FailureReason.TRANSPORT_ERROR

    @pytest.mark.asyncio
    async def test_unexpected_error_does_not_raise(self):
        def handler(request):
            raise RuntimeError("boom")

        client, _ = make_client(handler)
        result = await client.attempt("What is 6 * 7?")

        assert result.failure.reason is FailureReason.TRANSPORT_ERROR
        assert result.failure.detail == "RuntimeError"


# ─────────────────────────────────────────────────────
# Status handling
# ─────────────────────────────────────────────────────


class TestStatusHandling:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("status_code", [400, 401, 429, 500, 501, 503])
    async def test_non_ok_status(self, status_code):
        client, _ = make_client(lambda r: httpx.Response(status_code, json={"answer": "ignored"}))
        result = await client.attempt("What is 6 * 7?")

        assert result.failure.reason is FailureReason.NON_OK_STATUS
        assert result.failure.status_code == status_code
        assert str(result.failure) == f"non_ok_status({status_code})"

    @pytest.mark.asyncio
    async def test_non_ok_status_with_unparseable_body(self):
        client, _ = make_client(lambda r: httpx.Response(503, text="<html>Model loading</html>"))
        result = await client.attempt("What is 6 * 7?")

        assert result.failure.reason is FailureReason.NON_OK_STATUS
        assert result.failure.status_code == 503

    @pytest.mark.asyncio
    async def test_custom_ok_status_set(self):
        client, _ = make_client(
            lambda r: httpx.Response(201, json={"answer": "42"}),
            ok_statuses=frozenset({200, 201}),
        )
        result = await client.attempt("What is 6 * 7?")
        assert result.ok
        assert result.output == "42"


# ─────────────────────────────────────────────────────
# Body handling
# ─────────────────────────────────────────────────────


class TestBodyHandling:
    @pytest.mark.asyncio
    async def test_success(self):
        client, calls = make_client(lambda r: httpx.Response(200, json={"answer": "42"}))
        result = await client.attempt("What is 6 * 7?")

        assert result.status == "success"
        assert result.output == "42"
        assert result.failure is None
        assert calls[0].headers["Authorization"] == "Bearer secret-key"

    @pytest.mark.asyncio
    async def test_in_body_error_is_malformed_payload(self):
        client, _ = make_client(lambda r: httpx.Response(200, json={"error": "quota exceeded"}))
        result = await client.attempt("What is 6 * 7?")

        assert result.failure.reason is FailureReason.MALFORMED_PAYLOAD
        assert result.failure.detail == "quota exceeded"

    @pytest.mark.asyncio
    async def test_invalid_json_is_malformed_payload(self):
        client, _ = make_client(lambda r: httpx.Response(200, text="not json"))
        result = await client.attempt("What is 6 * 7?")
        assert result.failure.reason is FailureReason.MALFORMED_PAYLOAD

    @pytest.mark.asyncio
    @pytest.mark.parametrize("body", [{}, {"answer": ""}, {"answer": "   "}, {"answer": None}, []])
    async def test_missing_text_is_empty_response(self, body):
        client, _ = make_client(lambda r: httpx.Response(200, json=body))
        result = await client.attempt("What is 6 * 7?")
        assert result.failure.reason is FailureReason.EMPTY_RESPONSE

    @pytest.mark.asyncio
    async def test_text_body_format(self):
        client, _ = make_client(lambda r: httpx.Response(200, text="42"), body_format="text")
        result = await client.attempt("What is 6 * 7?")
        assert result.output == "42"

    @pytest.mark.asyncio
    async def test_empty_text_body_is_empty_response(self):
        client, _ = make_client(lambda r: httpx.Response(200, text=""), body_format="text")
        result = await client.attempt("What is 6 * 7?")
        assert result.failure.reason is FailureReason.EMPTY_RESPONSE

    @pytest.mark.asyncio
    @pytest.mark.parametrize("answer", [42, 4.2, True, {"value": "42"}, ["42"]])
    async def test_non_string_text_is_empty_response(self, answer):
        client, _ = make_client(lambda r: httpx.Response(200, json={"answer": answer}))
        result = await client.attempt("What is 6 * 7?")

        assert result.status == "failure"
        assert result.failure.reason is FailureReason.EMPTY_RESPONSE

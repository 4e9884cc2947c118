"""Tests for the request/response logging transport."""

import json
import logging

import httpx
import pytest

from gocd_provider.transport.api_logging import LoggingTransport


class TestLoggingTransport:
    """LoggingTransport logs traffic and passes it through unchanged."""

    @pytest.mark.unit
    async def test_passes_request_and_response_through(self):
        seen = []

        async def mock_handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, headers={"ETag": "abc"}, json={"name": "dev"})

        transport = LoggingTransport(name="GoCD", wrapped_transport=httpx.MockTransport(mock_handler))

        async with httpx.AsyncClient(transport=transport) as client:
            response = await client.post(
                "https://ci.example.com/go/api/admin/environments",
                json={"name": "dev"},
                headers={"X-Custom": "value"},
            )

        assert response.status_code == 200
        assert response.headers["ETag"] == "abc"
        assert response.json() == {"name": "dev"}
        assert len(seen) == 1
        assert seen[0].headers["X-Custom"] == "value"
        assert json.loads(seen[0].content) == {"name": "dev"}

    @pytest.mark.unit
    async def test_logs_request_and_response_at_debug(self, caplog):
        caplog.set_level(logging.DEBUG, logger="gocd_provider.transport.api_logging")

        async def mock_handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(404, json={"message": "not found"})

        transport = LoggingTransport(name="GoCD", wrapped_transport=httpx.MockTransport(mock_handler))

        async with httpx.AsyncClient(transport=transport) as client:
            await client.get("https://ci.example.com/go/api/admin/pipelines/build")

        assert "GoCD API Request Details" in caplog.text
        assert "GET https://ci.example.com/go/api/admin/pipelines/build" in caplog.text
        assert "GoCD API Response Details" in caplog.text
        assert "HTTP 404" in caplog.text

    @pytest.mark.unit
    async def test_redacts_authorization_header(self, caplog):
        caplog.set_level(logging.DEBUG, logger="gocd_provider.transport.api_logging")

        async def mock_handler(request: httpx.Request) -> httpx.Response:
            assert request.headers["Authorization"].startswith("Basic ")
            return httpx.Response(200)

        transport = LoggingTransport(name="GoCD", wrapped_transport=httpx.MockTransport(mock_handler))

        async with httpx.AsyncClient(transport=transport, auth=("admin", "s3cret")) as client:
            await client.get("https://ci.example.com/go/api/version")

        assert "authorization: ***" in caplog.text.lower()
        assert "Basic " not in caplog.text

    @pytest.mark.unit
    async def test_no_output_above_debug(self, caplog):
        caplog.set_level(logging.INFO, logger="gocd_provider.transport.api_logging")

        transport = LoggingTransport(
            name="GoCD",
            wrapped_transport=httpx.MockTransport(lambda request: httpx.Response(200)),
        )

        async with httpx.AsyncClient(transport=transport) as client:
            await client.get("https://ci.example.com/go/api/version")

        assert "API Request Details" not in caplog.text

    @pytest.mark.unit
    async def test_propagates_transport_errors(self):
        def failing_handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("Connection refused", request=request)

        transport = LoggingTransport(name="GoCD", wrapped_transport=httpx.MockTransport(failing_handler))

        async with httpx.AsyncClient(transport=transport) as client:
            with pytest.raises(httpx.ConnectError):
                await client.get("https://ci.example.com/go/api/version")

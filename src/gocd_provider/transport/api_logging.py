"""Request/response logging transport.

Wraps any async httpx transport and records each outbound request and its
response at DEBUG level under a fixed component tag. Requests and responses
pass through unchanged; nothing is retried and no timeouts are added.

```python
import httpx

from gocd_provider.transport.api_logging import LoggingTransport

transport = LoggingTransport(name="GoCD", wrapped_transport=httpx.AsyncHTTPTransport())

async with httpx.AsyncClient(transport=transport) as client:
    response = await client.get("https://ci.example.com/go/api/version")
```
"""

import logging

import httpx

logger = logging.getLogger(__name__)

# Header values never written to the log
REDACTED_HEADERS: frozenset[str] = frozenset(["authorization", "cookie", "set-cookie"])


def _format_headers(headers: httpx.Headers) -> str:
    lines = []
    for key, value in headers.multi_items():
        if key.lower() in REDACTED_HEADERS:
            value = "***"
        lines.append(f"{key}: {value}")
    return "\n".join(lines)


class LoggingTransport(httpx.AsyncBaseTransport):
    """Transport that logs API traffic before delegating to the wrapped transport.

    Args:
        name: Component tag used in every log line (e.g. "GoCD")
        wrapped_transport: The underlying transport to wrap

    Example:
        ```python
        transport = LoggingTransport(name="GoCD", wrapped_transport=httpx.AsyncHTTPTransport())
        ```
    """

    def __init__(self, *, name: str, wrapped_transport: httpx.AsyncBaseTransport) -> None:
        self.name = name
        self._wrapped_transport = wrapped_transport

    @property
    def wrapped_transport(self) -> httpx.AsyncBaseTransport:
        return self._wrapped_transport

    async def __aenter__(self):
        """Enter async context, delegating to wrapped transport."""
        await self._wrapped_transport.__aenter__()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Exit async context, delegating to wrapped transport."""
        return await self._wrapped_transport.__aexit__(exc_type, exc_val, exc_tb)

    async def aclose(self) -> None:
        await self._wrapped_transport.aclose()

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        """Log the request, send it, then log the response.

        Args:
            request: The HTTP request to send

        Returns:
            The wrapped transport's response, unmodified
        """
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"{self.name} API Request Details:\n{self._describe_request(request)}")

        response = await self._wrapped_transport.handle_async_request(request)

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"{self.name} API Response Details:\n{self._describe_response(response)}")

        return response

    def _describe_request(self, request: httpx.Request) -> str:
        lines = [
            "---[ REQUEST ]---------------------------------------",
            f"{request.method} {request.url}",
            _format_headers(request.headers),
        ]

        # Streaming bodies are not read here so they reach the server intact
        try:
            body = request.content
        except httpx.RequestNotRead:
            body = b""
        if body:
            lines.append("")
            lines.append(body.decode("utf-8", errors="replace"))

        lines.append("-----------------------------------------------------")
        return "\n".join(lines)

    def _describe_response(self, response: httpx.Response) -> str:
        lines = [
            "---[ RESPONSE ]--------------------------------------",
            f"HTTP {response.status_code} {response.reason_phrase}",
            _format_headers(response.headers),
            "-----------------------------------------------------",
        ]
        return "\n".join(lines)

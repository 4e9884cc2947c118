"""Transport layer for the GoCD API client.

Transport layers wrap httpx's AsyncHTTPTransport. The factory selects a TLS or
plain transport from the server URL and interposes request/response logging.

Modules:
    api_logging: Request/response logging transport
    factory: TLS-aware transport construction

Example:
    ```python
    from gocd_provider.transport import build_transport

    transport = build_transport("https://ci.example.com/go", skip_ssl_check=False)
    ```
"""

from gocd_provider.transport.api_logging import LoggingTransport
from gocd_provider.transport.factory import build_transport, create_ssl_context

__all__ = ["LoggingTransport", "build_transport", "create_ssl_context"]

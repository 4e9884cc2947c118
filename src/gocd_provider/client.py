"""GoCD API client and its bootstrap."""

import logging
import platform
from dataclasses import dataclass
from typing import Any

import httpx

from gocd_provider import __version__
from gocd_provider.config import ResolvedConfig
from gocd_provider.errors.handler import raise_for_status

logger = logging.getLogger(__name__)

DEFAULT_HOST_TOOL = "Terraform"


@dataclass(frozen=True)
class ServerConfiguration:
    """Connection settings handed to the API client."""

    server: str
    username: str = ""
    password: str = ""
    skip_ssl_check: bool = False

    @classmethod
    def from_resolved(cls, resolved: ResolvedConfig) -> "ServerConfiguration":
        return cls(
            server=resolved.baseurl,
            username=resolved.username,
            password=resolved.password,
            skip_ssl_check=resolved.skip_ssl_check,
        )


def build_user_agent(host_tool: str = DEFAULT_HOST_TOOL, host_version: str | None = None) -> str:
    """Build the user-agent string ``(<os> <arch>) <HostTool>/<version>``.

    Args:
        host_tool: Name of the tool hosting the provider.
        host_version: Its version. Falls back to this package's version so the
            token is never empty.
    """
    version = host_version or __version__
    return f"({platform.system().lower()} {platform.machine()}) {host_tool}/{version}"


class GoCDClient:
    """Handle through which resources and data sources reach the GoCD server.

    Built once per provider configuration and shared read-only afterwards.
    Construction performs no I/O; an unreachable server or bad credentials
    surface as errors on the first request.

    Example:
        ```python
        async with new_client(resolved, build_transport(resolved.baseurl)) as client:
            response = await client.get("/api/admin/environments", api_version=2)
        ```
    """

    def __init__(
        self,
        config: ServerConfiguration,
        transport: httpx.AsyncBaseTransport,
        user_agent: str,
    ) -> None:
        self._config = config
        self._transport = transport
        self._user_agent = user_agent

        auth = httpx.BasicAuth(config.username, config.password) if config.username else None
        self._http = httpx.AsyncClient(
            base_url=config.server,
            transport=transport,
            auth=auth,
            headers={"User-Agent": user_agent},
        )

    @property
    def config(self) -> ServerConfiguration:
        return self._config

    @property
    def transport(self) -> httpx.AsyncBaseTransport:
        return self._transport

    @property
    def user_agent(self) -> str:
        return self._user_agent

    async def __aenter__(self) -> "GoCDClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def request(
        self,
        method: str,
        path: str,
        *,
        api_version: int | None = None,
        json: Any = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """Send a request to the GoCD API.

        Args:
            method: HTTP method
            path: Path relative to the server URL, e.g. "/api/admin/pipelines/build"
            api_version: Versioned media type to accept (application/vnd.go.cd.vN+json)
            json: JSON request body
            headers: Extra request headers

        Returns:
            The successful response

        Raises:
            APIError subclass for non-2xx responses
        """
        request_headers = dict(headers or {})
        if api_version is not None:
            request_headers["Accept"] = f"application/vnd.go.cd.v{api_version}+json"

        response = await self._http.request(method, path, json=json, headers=request_headers)
        raise_for_status(response)
        return response

    async def get(self, path: str, **kwargs: Any) -> httpx.Response:
        return await self.request("GET", path, **kwargs)

    async def post(self, path: str, **kwargs: Any) -> httpx.Response:
        return await self.request("POST", path, **kwargs)

    async def put(self, path: str, **kwargs: Any) -> httpx.Response:
        return await self.request("PUT", path, **kwargs)

    async def delete(self, path: str, **kwargs: Any) -> httpx.Response:
        return await self.request("DELETE", path, **kwargs)


def new_client(
    config: ResolvedConfig,
    transport: httpx.AsyncBaseTransport,
    user_agent: str | None = None,
) -> GoCDClient:
    """Bootstrap a GoCDClient from resolved settings and a built transport.

    Args:
        config: Resolved provider settings
        transport: Transport from ``build_transport``
        user_agent: User-agent string; defaults to ``build_user_agent()``

    Returns:
        The client handle
    """
    server_config = ServerConfiguration.from_resolved(config)
    client = GoCDClient(server_config, transport, user_agent or build_user_agent())
    logger.debug(f"Created GoCD client for '{server_config.server}' ({client.user_agent})")
    return client

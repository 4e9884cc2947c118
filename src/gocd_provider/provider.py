"""GoCD provider descriptor.

Declares the settings needed to reach a GoCD server, the resource and
data-source kinds the provider serves, and the configuration entry point that
turns settings into a GoCDClient. Each setting falls back to an environment
variable:

    baseurl        - GOCD_URL
    username       - GOCD_USERNAME
    password       - GOCD_PASSWORD
    skip_ssl_check - GOCD_SKIP_SSL_CHECK

Example:
    ```python
    from gocd_provider.provider import Provider

    provider = Provider(host_version="1.5.7")
    client = provider.configure({"baseurl": "https://ci.example.com/go", "skip_ssl_check": True})
    ```
"""

from collections.abc import Mapping
from pathlib import Path
from typing import Any

from gocd_provider.auth.credentials import CredentialResolver
from gocd_provider.auth.exceptions import CredentialNotFoundError
from gocd_provider.client import DEFAULT_HOST_TOOL, GoCDClient, build_user_agent, new_client
from gocd_provider.config import DESCRIPTIONS, FieldSpec, ResolvedConfig, provider_fields, resolve_config
from gocd_provider.resources import DATA_SOURCE_DEFINITIONS, RESOURCE_DEFINITIONS, ResourceRegistry
from gocd_provider.transport.factory import build_transport


class Provider:
    """Static provider declaration and its single configuration entry point.

    Args:
        descriptions: Field descriptions, keyed by field name.
        host_tool: Name of the tool hosting the provider, used in the user agent.
        host_version: Version of the hosting tool.
        dotenv_path: Optional .env file consulted after the process environment.
        strict: If True, a missing baseurl raises CredentialNotFoundError
            instead of failing on the first API call.
    """

    def __init__(
        self,
        *,
        descriptions: Mapping[str, str] = DESCRIPTIONS,
        host_tool: str = DEFAULT_HOST_TOOL,
        host_version: str | None = None,
        dotenv_path: str | Path | None = None,
        strict: bool = False,
    ) -> None:
        self.fields: tuple[FieldSpec, ...] = provider_fields(descriptions)
        self.resources = ResourceRegistry(RESOURCE_DEFINITIONS)
        self.data_sources = ResourceRegistry(DATA_SOURCE_DEFINITIONS)
        self.host_tool = host_tool
        self.host_version = host_version
        self.strict = strict
        self._resolver = CredentialResolver(dotenv_path=dotenv_path)

    @property
    def schema(self) -> dict[str, FieldSpec]:
        return {field.name: field for field in self.fields}

    def resolve(self, raw: Mapping[str, Any]) -> ResolvedConfig:
        """Resolve the configuration input into final settings."""
        resolved = resolve_config(raw, self.fields, self._resolver)

        if self.strict:
            for field in self.fields:
                if field.required and not getattr(resolved, field.name):
                    raise CredentialNotFoundError(
                        f"Required provider setting '{field.name}' not set (checked env var: {field.env_var})",
                        env_var_name=field.env_var,
                    )

        return resolved

    def configure(self, raw: Mapping[str, Any]) -> GoCDClient:
        """Resolve settings and bootstrap the client shared by all resources.

        Args:
            raw: Provider configuration block as supplied by the host.

        Returns:
            A ready-to-use GoCDClient.
        """
        resolved = self.resolve(raw)
        transport = build_transport(resolved.baseurl, resolved.skip_ssl_check)
        return new_client(resolved, transport, build_user_agent(self.host_tool, self.host_version))

"""Provider configuration fields and their resolution."""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from gocd_provider.auth.credentials import CredentialResolver

logger = logging.getLogger(__name__)

DESCRIPTIONS: Mapping[str, str] = {
    "baseurl": "URL for the GoCD Server",
    "username": "User to interact with the GoCD API with.",
    "password": "Password for User for GoCD API interaction.",
    "skip_ssl_check": "Skip TLS certificate verification when connecting to the GoCD Server.",
}


@dataclass(frozen=True)
class FieldSpec:
    """Static descriptor of one provider configuration field."""

    name: str
    type: type = str
    required: bool = False
    env_var: str | None = None
    description: str = ""
    sensitive: bool = False


@dataclass(frozen=True)
class ResolvedConfig:
    """Final connection settings after resolution.

    Every field holds a concrete value; unresolved strings are "" and the
    flag defaults to False.
    """

    baseurl: str = ""
    username: str = ""
    password: str = ""
    skip_ssl_check: bool = False


def provider_fields(descriptions: Mapping[str, str] = DESCRIPTIONS) -> tuple[FieldSpec, ...]:
    """Build the provider's field table.

    Args:
        descriptions: Field name to description mapping.

    Returns:
        FieldSpecs for baseurl, username, password and skip_ssl_check.
    """
    return (
        FieldSpec(
            name="baseurl",
            required=True,
            env_var="GOCD_URL",
            description=descriptions.get("baseurl", ""),
        ),
        FieldSpec(
            name="username",
            env_var="GOCD_USERNAME",
            description=descriptions.get("username", ""),
        ),
        FieldSpec(
            name="password",
            env_var="GOCD_PASSWORD",
            description=descriptions.get("password", ""),
            sensitive=True,
        ),
        FieldSpec(
            name="skip_ssl_check",
            type=bool,
            env_var="GOCD_SKIP_SSL_CHECK",
            description=descriptions.get("skip_ssl_check", ""),
        ),
    )


def resolve_config(
    raw: Mapping[str, Any],
    fields: Iterable[FieldSpec],
    resolver: CredentialResolver,
) -> ResolvedConfig:
    """Resolve every declared field against the configuration input.

    Args:
        raw: Configuration input as supplied by the host. Missing keys and
            None values are treated as unset.
        fields: Field table to resolve.
        resolver: Resolver applying the explicit/environment precedence.

    Returns:
        A ResolvedConfig. Fields not in the table keep their defaults.
    """
    values: dict[str, Any] = {}

    for field in fields:
        value = raw.get(field.name)
        if field.type is bool:
            values[field.name] = resolver.resolve_bool(field.name, value, env_var_name=field.env_var)
        else:
            values[field.name] = resolver.resolve_string(
                field.name,
                value,
                env_var_name=field.env_var,
                sensitive=field.sensitive,
            )

    unknown = set(raw) - set(values)
    if unknown:
        logger.debug(f"Ignoring unknown provider config keys: {sorted(unknown)}")

    return ResolvedConfig(**values)

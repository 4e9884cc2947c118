"""Multi-source resolution of GoCD provider settings.

Each provider field is resolved from an explicit configuration value with an
environment variable fallback. The rules differ slightly by field type.

String fields (highest to lowest priority):
1. Explicitly configured value, if it is a non-empty string
2. Environment variable
3. .env file (python-dotenv), when a path is given
4. Empty string

Boolean fields:
1. Explicitly configured value, coerced to bool. A value that cannot be
   coerced resolves to False; the environment is NOT consulted.
2. Environment variable / .env file, parsed as bool, when no value is set
3. False

Example:
    ```python
    from gocd_provider.auth import CredentialResolver

    resolver = CredentialResolver()

    url = resolver.resolve_string("baseurl", config.get("baseurl"), env_var_name="GOCD_URL")
    skip = resolver.resolve_bool(
        "skip_ssl_check", config.get("skip_ssl_check"), env_var_name="GOCD_SKIP_SSL_CHECK"
    )
    ```

Security Considerations:
    - Sensitive fields are masked with *** in log output
    - .env values are read into the resolver only, never into os.environ
"""

import logging
import os
from pathlib import Path
from typing import Any

from dotenv import dotenv_values

logger = logging.getLogger(__name__)

# Literals accepted by Go's strconv.ParseBool, which GoCD tooling uses for flags.
TRUE_STRINGS: frozenset[str] = frozenset(["1", "t", "T", "TRUE", "true", "True"])
FALSE_STRINGS: frozenset[str] = frozenset(["0", "f", "F", "FALSE", "false", "False"])


def parse_bool(value: Any) -> bool | None:
    """Coerce a configuration value to bool.

    Args:
        value: A bool, or one of the accepted true/false literals.

    Returns:
        The boolean value, or None if the value cannot be coerced.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        if value in TRUE_STRINGS:
            return True
        if value in FALSE_STRINGS:
            return False
    return None


class CredentialResolver:
    """Resolve provider settings from configuration and the environment.

    The resolver holds no mutable state after construction, so one instance
    can be shared across concurrent provider configurations.

    Example:
        ```python
        resolver = CredentialResolver(dotenv_path="/app/.env")

        user = resolver.resolve_string("username", None, env_var_name="GOCD_USERNAME")
        password = resolver.resolve_string(
            "password", "s3cret", env_var_name="GOCD_PASSWORD", sensitive=True
        )
        ```
    """

    def __init__(self, dotenv_path: str | Path | None = None):
        """Initialize credential resolver.

        Args:
            dotenv_path: Path to a .env file consulted after os.environ.
                If None, no .env file is read.
        """
        self._dotenv_path = dotenv_path
        self._dotenv_values: dict[str, str] = {}

        if dotenv_path is not None:
            self._dotenv_values = self._read_dotenv(dotenv_path)

    def _read_dotenv(self, dotenv_path: str | Path) -> dict[str, str]:
        """Read a .env file without touching os.environ."""
        try:
            values = dotenv_values(dotenv_path=dotenv_path)
            logger.debug(f"Loaded .env file for provider configuration: {dotenv_path}")
        except Exception as e:
            logger.warning(f"Failed to load .env file: {e}")
            # Don't fail - continue without .env
            return {}

        # Keys declared without a value parse as None
        return {key: value for key, value in values.items() if value is not None}

    def _mask_credential(self, value: str) -> str:
        """Mask a credential value for safe logging.

        Args:
            value: The credential value to mask.

        Returns:
            "***" if the value is non-empty, the empty string otherwise.
        """
        return "***" if value else ""

    def lookup_env(self, env_var_name: str | None) -> str | None:
        """Look up a variable in os.environ, then in the loaded .env values.

        Args:
            env_var_name: Environment variable name, or None.

        Returns:
            The raw string value, or None if the variable is not set anywhere.
        """
        if not env_var_name:
            return None
        if env_var_name in os.environ:
            return os.environ[env_var_name]
        return self._dotenv_values.get(env_var_name)

    def resolve_string(
        self,
        name: str,
        value: Any,
        *,
        env_var_name: str | None = None,
        sensitive: bool = False,
    ) -> str:
        """Resolve a string field.

        Args:
            name: Field name, used for logging.
            value: Value from the configuration input, or None when unset.
            env_var_name: Environment variable consulted as fallback.
            sensitive: If True, masks the resolved value in log messages.

        Returns:
            The resolved string. Never None; an unresolved field is "".
        """
        if isinstance(value, str) and value != "":
            result = value
        else:
            # Wrong type, empty, or unset: all fall back to the environment
            result = self.lookup_env(env_var_name) or ""

        logged = self._mask_credential(result) if sensitive else result
        logger.debug(f"Using GoCD config '{name}': {logged}")
        return result

    def resolve_bool(self, name: str, value: Any, *, env_var_name: str | None = None) -> bool:
        """Resolve a boolean field.

        An explicitly configured value that fails coercion resolves to False
        without consulting the environment.

        Args:
            name: Field name, used for logging.
            value: Value from the configuration input, or None when unset.
            env_var_name: Environment variable consulted when value is unset.

        Returns:
            The resolved flag.
        """
        if value is not None:
            coerced = parse_bool(value)
            result = coerced if coerced is not None else False
        else:
            raw = self.lookup_env(env_var_name)
            coerced = parse_bool(raw) if raw else None
            if raw and coerced is None:
                logger.warning(f"Ignoring unparseable boolean in {env_var_name}: {raw!r}")
            result = bool(coerced)

        logger.debug(f"Using GoCD config '{name}': {str(result).lower()}")
        return result

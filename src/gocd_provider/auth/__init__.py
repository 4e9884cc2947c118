"""Credential resolution for the GoCD provider.

This module provides the resolution rules applied to every provider field:
- Explicit configuration value first
- Environment variable (or .env file) fallback
- Type coercion for string and boolean fields

Example:
    ```python
    from gocd_provider.auth import CredentialResolver

    resolver = CredentialResolver()
    url = resolver.resolve_string("baseurl", None, env_var_name="GOCD_URL")
    ```
"""

from gocd_provider.auth.credentials import CredentialResolver, parse_bool
from gocd_provider.auth.exceptions import CredentialError, CredentialNotFoundError

__all__ = [
    "CredentialError",
    "CredentialNotFoundError",
    "CredentialResolver",
    "parse_bool",
]

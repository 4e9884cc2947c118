"""Custom exceptions for credential resolution.

Resolution itself never fails; these are only raised when the provider is
configured for eager validation.

Example:
    ```python
    from gocd_provider.auth.exceptions import CredentialNotFoundError

    if not baseurl:
        raise CredentialNotFoundError("GoCD server URL not set", env_var_name="GOCD_URL")
    ```
"""


class CredentialError(Exception):
    """Base exception for credential-related errors.

    All credential-specific exceptions inherit from this class,
    making it easy to catch any credential-related error.
    """

    pass


class CredentialNotFoundError(CredentialError):
    """Raised when a required provider field resolves to an empty value.

    Attributes:
        env_var_name: The environment variable name that was checked (if any).

    Example:
        ```python
        try:
            client = Provider(strict=True).configure({})
        except CredentialNotFoundError as e:
            print(f"Missing setting: {e.env_var_name}")
        ```
    """

    def __init__(self, message: str, env_var_name: str | None = None):
        """Initialize CredentialNotFoundError.

        Args:
            message: Error message describing which field is missing.
            env_var_name: Optional environment variable name for reference.
        """
        super().__init__(message)
        self.env_var_name = env_var_name

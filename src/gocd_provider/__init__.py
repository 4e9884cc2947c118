"""GoCD provider - configuration resolution and API client bootstrap.

This library resolves the connection settings for a GoCD server and builds the
client that every resource and data source uses to reach it:
- Explicit configuration with environment variable fallbacks
- TLS-aware transport with optional certificate verification bypass
- Request/response logging interposition
- User-agent tagging with host platform and tool version

Example:
    ```python
    from gocd_provider.provider import Provider

    provider = Provider(host_version="1.5.7")
    client = provider.configure({"baseurl": "https://ci.example.com/go"})

    async with client:
        response = await client.get("/api/admin/environments", api_version=2)
    ```
"""

__version__ = "0.1.0"

__all__ = ["__version__"]

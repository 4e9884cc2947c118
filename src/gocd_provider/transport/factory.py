"""Transport construction for the GoCD API client."""

import logging
import ssl

import httpx

from gocd_provider.transport.api_logging import LoggingTransport

logger = logging.getLogger(__name__)

SECURE_SCHEME_PREFIX = "https"
LOG_COMPONENT = "GoCD"


def create_ssl_context(skip_verify: bool = False) -> ssl.SSLContext:
    """Create the TLS context for an https GoCD server.

    Args:
        skip_verify: If True, disables hostname checking and certificate
            chain validation. Never the default.

    Returns:
        A client-side SSLContext.
    """
    context = ssl.create_default_context()
    if skip_verify:
        logger.warning("TLS certificate verification is disabled for the GoCD server")
        context.check_hostname = False
        context.verify_mode = ssl.CERT_NONE
    return context


def build_transport(base_url: str, skip_ssl_check: bool = False) -> LoggingTransport:
    """Build the logging-wrapped transport for a GoCD server.

    Servers whose URL starts with "https" get a transport with an explicit
    TLS context honouring ``skip_ssl_check``. Anything else gets httpx's
    default transport and the flag is ignored.

    Args:
        base_url: Resolved GoCD server URL
        skip_ssl_check: Resolved certificate verification bypass flag

    Returns:
        LoggingTransport wrapping the selected transport
    """
    if base_url.startswith(SECURE_SCHEME_PREFIX):
        logger.debug("GoCD is using https.")
        transport = httpx.AsyncHTTPTransport(verify=create_ssl_context(skip_ssl_check))
    else:
        transport = httpx.AsyncHTTPTransport()

    return LoggingTransport(name=LOG_COMPONENT, wrapped_transport=transport)

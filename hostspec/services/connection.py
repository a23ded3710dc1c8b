"""Hand a Host to asyncssh.

Translates the host's connection options into ``asyncssh.connect`` keyword
arguments. Session lifetime is left to the caller.
"""

import logging
from typing import TYPE_CHECKING, Any

import asyncssh

from hostspec.config.settings import Settings

if TYPE_CHECKING:
    from hostspec.models import Host

logger = logging.getLogger(__name__)


class HostConnectionError(Exception):
    """Failed to establish an SSH connection to a host."""

    def __init__(self, host: "Host", original_error: Exception):
        """Initialize connection error.

        Args:
            host: Host that could not be reached
            original_error: Original exception that caused the failure
        """
        self.host = host
        self.original_error = original_error
        super().__init__(f"Cannot connect to {host}: {original_error}")


def asyncssh_options(host: "Host") -> dict[str, Any]:
    """Map a host's netssh options onto asyncssh.connect keyword arguments.

    Args:
        host: Host to connect to

    Returns:
        Keyword arguments for asyncssh.connect (without the hostname)
    """
    options = host.netssh_options()
    kwargs: dict[str, Any] = {
        "port": options["port"],
        "username": str(options["user"]),
    }
    if options["password"] is not None:
        kwargs["password"] = options["password"]
    if options["keys"]:
        kwargs["client_keys"] = options["keys"]
    return kwargs


async def open_connection(
    host: "Host",
    settings: Settings | None = None,
) -> asyncssh.SSHClientConnection:
    """Open an SSH connection to a host.

    Args:
        host: Host to connect to
        settings: Host key and timeout settings (default: Settings.from_env())

    Returns:
        Active SSH connection

    Raises:
        asyncssh.HostKeyNotVerifiable: If strict host key checking rejects the host
        HostConnectionError: If the connection fails for any other reason
    """
    settings = settings or Settings.from_env()
    kwargs = asyncssh_options(host)

    logger.info("Opening SSH connection to %s", host)
    try:
        try:
            conn = await asyncssh.connect(
                host.hostname,
                known_hosts=settings.known_hosts,
                connect_timeout=settings.connect_timeout,
                **kwargs,
            )
        except asyncssh.HostKeyNotVerifiable as e:
            if settings.strict_host_key_checking:
                logger.error(
                    "Host key verification failed for %s: %s. "
                    "Add the host key to %s or set "
                    "HOSTSPEC_STRICT_HOST_KEY_CHECKING=false",
                    host,
                    e,
                    settings.known_hosts,
                )
                raise
            logger.warning(
                "Host key not verified for %s (strict mode disabled): %s",
                host,
                e,
            )
            conn = await asyncssh.connect(
                host.hostname,
                known_hosts=None,
                connect_timeout=settings.connect_timeout,
                **kwargs,
            )
    except asyncssh.HostKeyNotVerifiable:
        raise
    except (OSError, asyncssh.Error) as e:
        logger.error("Connection to %s failed: %s", host, e)
        raise HostConnectionError(host, e) from e

    logger.info("SSH connection established to %s", host)
    return conn

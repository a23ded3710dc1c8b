"""Services for hostspec."""

from hostspec.services.connection import (
    HostConnectionError,
    asyncssh_options,
    open_connection,
)

__all__ = ["asyncssh_options", "HostConnectionError", "open_connection"]

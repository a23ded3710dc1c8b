"""Settings from environment variables.

Centralized environment variable parsing and validation.
"""

import logging
import os
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)


@dataclass
class Settings:
    """Settings from environment.

    Handles parsing, validation, and defaults for all env vars.
    """

    # Logging
    log_level: str = field(default="INFO")

    # Connection
    known_hosts: str | None = field(default=None)
    strict_host_key_checking: bool = field(default=True)
    connect_timeout: int = field(default=30)

    @classmethod
    def from_env(cls) -> "Settings":
        """Load settings from HOSTSPEC_* environment variables.

        Returns:
            Settings instance with values from environment
        """
        return cls(
            log_level=os.getenv("HOSTSPEC_LOG_LEVEL", "INFO").upper(),
            known_hosts=os.getenv("HOSTSPEC_KNOWN_HOSTS") or None,
            strict_host_key_checking=cls._get_bool("HOSTSPEC_STRICT_HOST_KEY_CHECKING", True),
            connect_timeout=cls._get_int("HOSTSPEC_CONNECT_TIMEOUT", 30),
        )

    @staticmethod
    def _get_int(key: str, default: int) -> int:
        """Get integer from environment.

        Args:
            key: Environment variable key
            default: Default value if not set

        Returns:
            Integer value from environment or default
        """
        value = os.getenv(key)
        if value is None:
            return default

        try:
            return int(value)
        except ValueError:
            logger.warning("Invalid int for %s: %s, using default %d", key, value, default)
            return default

    @staticmethod
    def _get_bool(key: str, default: bool) -> bool:
        """Get boolean from environment.

        Args:
            key: Environment variable key
            default: Default value if not set

        Returns:
            Boolean value from environment or default
        """
        value = os.getenv(key)
        if value is None:
            return default
        return value.lower() in ("1", "true", "yes", "on")

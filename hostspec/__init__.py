"""hostspec: parse SSH-style host strings into connection descriptors."""

from hostspec.exceptions import (
    HostError,
    MissingHostPropertyError,
    UnknownHostPropertyError,
    UnparsableHostStringError,
)
from hostspec.models import Host

__version__ = "0.1.0"

__all__ = [
    "Host",
    "HostError",
    "MissingHostPropertyError",
    "UnknownHostPropertyError",
    "UnparsableHostStringError",
]

"""Host string parsing.

A host string is matched against a fixed, ordered table of parser variants.
Each variant pairs a structural ``suitable`` predicate with an ``extract``
function; the first suitable variant wins.

Formats:
    - "host"                 -> (login, host, 22)
    - "host:port"            -> (login, host, port)
    - "user@host"            -> (user, host, 22)
    - "user@host:port"       -> (user, host, port)
    - "[ipv6]:port"          -> (login, ipv6, port)
"""

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass

from hostspec.exceptions import UnparsableHostStringError
from hostspec.utils.users import CurrentUserProvider, get_login_name

logger = logging.getLogger(__name__)

DEFAULT_PORT = 22

HostFields = tuple[str, str, int]

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def to_int(text: str) -> int:
    """Convert the leading digits of ``text`` to an int, 0 if there are none."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


@dataclass(frozen=True)
class ParserVariant:
    """One host string grammar."""

    name: str
    suitable: Callable[[str], bool]
    extract: Callable[[str, CurrentUserProvider], HostFields]


# Simple: "host"


def _simple_suitable(host_string: str) -> bool:
    return re.search(r"[:|@]", host_string) is None


def _simple_extract(host_string: str, current_user: CurrentUserProvider) -> HostFields:
    return current_user(), host_string, DEFAULT_PORT


# HostWithPort: "host:port"


def _host_with_port_suitable(host_string: str) -> bool:
    return re.search(r"[@|\[\]]", host_string) is None


def _host_with_port_extract(
    host_string: str, current_user: CurrentUserProvider
) -> HostFields:
    hostname, _, port = host_string.rpartition(":")
    return current_user(), hostname, to_int(port)


# IPv6HostWithPort: "[fe80::1]:2222"


def _ipv6_suitable(host_string: str) -> bool:
    return re.search(r"[a-fA-F0-9:]+:\d+", host_string) is not None


def _ipv6_extract(host_string: str, current_user: CurrentUserProvider) -> HostFields:
    segments = re.sub(r"\[|\]", "", host_string).split(":")
    return current_user(), ":".join(segments[:-1]), to_int(segments[-1])


# HostWithUsername: "user@host"


def _username_suitable(host_string: str) -> bool:
    return "@" in host_string and ":" not in host_string


def _username_extract(host_string: str, current_user: CurrentUserProvider) -> HostFields:
    parts = host_string.split("@")
    return parts[0], parts[-1], DEFAULT_PORT


# HostWithUsernameAndPort: "user@host:port"


def _username_and_port_suitable(host_string: str) -> bool:
    return re.search(r"@.*:\d+", host_string) is not None


def _username_and_port_extract(
    host_string: str, current_user: CurrentUserProvider
) -> HostFields:
    # Hostname is everything up to the last ":<digits>", so "user@fe80::1:22"
    # keeps "fe80::1" and "user@host:22:x" stops at "host".
    match = re.search(r"@(.*):(\d+)", host_string)
    user = re.split(r"[:@]", host_string)[0]
    return user, match.group(1), int(match.group(2))


SIMPLE = ParserVariant("SimpleHost", _simple_suitable, _simple_extract)
HOST_WITH_PORT = ParserVariant(
    "HostWithPort", _host_with_port_suitable, _host_with_port_extract
)
IPV6_HOST_WITH_PORT = ParserVariant("IPv6HostWithPort", _ipv6_suitable, _ipv6_extract)
HOST_WITH_USERNAME = ParserVariant(
    "HostWithUsername", _username_suitable, _username_extract
)

# "HostWithUsernameAndPort" occupies two slots with the same grammar. The
# early slot must precede IPv6HostWithPort.
HOST_WITH_USERNAME_AND_PORT_EARLY = ParserVariant(
    "HostWithUsernameAndPort", _username_and_port_suitable, _username_and_port_extract
)
HOST_WITH_USERNAME_AND_PORT = ParserVariant(
    "HostWithUsernameAndPort", _username_and_port_suitable, _username_and_port_extract
)

HOST_PARSERS: tuple[ParserVariant, ...] = (
    SIMPLE,
    HOST_WITH_PORT,
    HOST_WITH_USERNAME_AND_PORT_EARLY,
    IPV6_HOST_WITH_PORT,
    HOST_WITH_USERNAME,
    HOST_WITH_USERNAME_AND_PORT,
)


def select_parser(host_string: str) -> ParserVariant:
    """Pick the first parser variant that accepts the host string.

    Args:
        host_string: Raw host string

    Returns:
        The winning ParserVariant

    Raises:
        UnparsableHostStringError: If no variant accepts the string
    """
    for variant in HOST_PARSERS:
        if variant.suitable(host_string):
            logger.debug("Parsing %r with %s", host_string, variant.name)
            return variant
    raise UnparsableHostStringError(host_string)


def parse_host_string(
    host_string: str,
    current_user: CurrentUserProvider | None = None,
) -> HostFields:
    """Parse a host string into ``(user, hostname, port)``.

    Args:
        host_string: Raw host string, e.g. "deploy@example.com:2222"
        current_user: Login-name provider used when the string names no user

    Returns:
        Tuple of (user, hostname, port)

    Raises:
        UnparsableHostStringError: If no variant accepts the string
    """
    variant = select_parser(host_string)
    return variant.extract(host_string, current_user or get_login_name)

"""Tests for host string parsing."""

import pytest

from hostspec.exceptions import UnparsableHostStringError
from hostspec.utils.parser import (
    HOST_PARSERS,
    HOST_WITH_PORT,
    HOST_WITH_USERNAME,
    HOST_WITH_USERNAME_AND_PORT,
    HOST_WITH_USERNAME_AND_PORT_EARLY,
    IPV6_HOST_WITH_PORT,
    SIMPLE,
    parse_host_string,
    select_parser,
    to_int,
)


def login() -> str:
    return "localuser"


@pytest.mark.parametrize(
    ("host_string", "expected"),
    [
        ("example.com", ("localuser", "example.com", 22)),
        ("example.com:2222", ("localuser", "example.com", 2222)),
        ("deploy@example.com", ("deploy", "example.com", 22)),
        ("deploy@example.com:2222", ("deploy", "example.com", 2222)),
        ("[fe80::1]:2222", ("localuser", "fe80::1", 2222)),
        ("192.168.1.100", ("localuser", "192.168.1.100", 22)),
        ("192.168.1.100:8022", ("localuser", "192.168.1.100", 8022)),
    ],
)
def test_parse_host_string_formats(host_string: str, expected: tuple) -> None:
    """Each supported format yields the documented user/hostname/port."""
    assert parse_host_string(host_string, login) == expected


def test_host_with_port_splits_on_last_colon() -> None:
    """Bare IPv6 with a port keeps every colon but the last in the hostname."""
    assert parse_host_string("fe80::1:2222", login) == ("localuser", "fe80::1", 2222)


def test_ipv6_brackets_without_port_number() -> None:
    """Bracketed IPv6 address followed by a port."""
    assert parse_host_string("[2001:db8::42]:22", login) == (
        "localuser",
        "2001:db8::42",
        22,
    )


def test_username_and_port_keeps_ipv6_hostname() -> None:
    """Canonical form of an IPv6 host parses back to the same address."""
    assert parse_host_string("admin@fe80::1:2222", login) == ("admin", "fe80::1", 2222)


def test_username_and_port_ignores_trailing_segment() -> None:
    """Port is the last ':<digits>' group; trailing text is dropped."""
    assert parse_host_string("deploy@example.com:2222:x", login) == (
        "deploy",
        "example.com",
        2222,
    )


def test_username_uses_first_and_last_at_segments() -> None:
    """With several '@' the user is the first segment and host the last."""
    assert parse_host_string("a@b@c", login) == ("a", "c", 22)


def test_non_numeric_port_converts_to_zero() -> None:
    """Ports are extracted syntactically, not validated."""
    assert parse_host_string("example.com:ssh", login) == ("localuser", "example.com", 0)


def test_parse_does_not_call_provider_when_user_given() -> None:
    """Explicit users never consult the login-name provider."""

    def fail() -> str:
        raise AssertionError("provider should not be called")

    assert parse_host_string("deploy@example.com:22", fail)[0] == "deploy"


def test_parse_uses_current_login_by_default(monkeypatch: pytest.MonkeyPatch) -> None:
    """Without a provider the process login name is used."""
    monkeypatch.setattr("hostspec.utils.parser.get_login_name", lambda: "envuser")
    assert parse_host_string("example.com") == ("envuser", "example.com", 22)


def test_ipv6_extraction_leaves_input_untouched() -> None:
    """Bracket stripping works on a copy."""
    host_string = "[fe80::1]:2222"
    IPV6_HOST_WITH_PORT.extract(host_string, login)
    assert host_string == "[fe80::1]:2222"


@pytest.mark.parametrize(
    ("host_string", "variant"),
    [
        ("example.com", SIMPLE),
        ("example.com:2222", HOST_WITH_PORT),
        ("deploy@example.com:2222", HOST_WITH_USERNAME_AND_PORT_EARLY),
        ("[fe80::1]:2222", IPV6_HOST_WITH_PORT),
        ("deploy@example.com", HOST_WITH_USERNAME),
    ],
)
def test_select_parser_priority(host_string: str, variant) -> None:
    """Selector returns the first suitable variant in table order."""
    assert select_parser(host_string) is variant


def test_parser_table_order() -> None:
    """Both username-and-port slots are distinct entries in the table."""
    assert HOST_PARSERS == (
        SIMPLE,
        HOST_WITH_PORT,
        HOST_WITH_USERNAME_AND_PORT_EARLY,
        IPV6_HOST_WITH_PORT,
        HOST_WITH_USERNAME,
        HOST_WITH_USERNAME_AND_PORT,
    )
    assert HOST_WITH_USERNAME_AND_PORT_EARLY is not HOST_WITH_USERNAME_AND_PORT
    assert HOST_WITH_USERNAME_AND_PORT_EARLY.name == HOST_WITH_USERNAME_AND_PORT.name


@pytest.mark.parametrize("host_string", ["a|b", "host|x:22", "user@host:|", "web|db"])
def test_unparsable_host_string(host_string: str) -> None:
    """Strings no variant accepts raise with the string attached."""
    with pytest.raises(UnparsableHostStringError, match="Cannot parse host string") as exc:
        select_parser(host_string)
    assert exc.value.host_string == host_string


def test_suitable_predicates() -> None:
    """Spot-check the structural predicates."""
    assert SIMPLE.suitable("example.com")
    assert not SIMPLE.suitable("example.com:22")
    assert not SIMPLE.suitable("a|b")
    assert HOST_WITH_PORT.suitable("example.com:22")
    assert not HOST_WITH_PORT.suitable("[::1]:22")
    assert HOST_WITH_USERNAME.suitable("u@h")
    assert not HOST_WITH_USERNAME.suitable("u@h:22")
    assert HOST_WITH_USERNAME_AND_PORT.suitable("u@h:22")
    assert not HOST_WITH_USERNAME_AND_PORT.suitable("u@h:ssh")
    assert IPV6_HOST_WITH_PORT.suitable("[::1]:22")


@pytest.mark.parametrize(
    ("text", "expected"),
    [("2222", 2222), (" 22", 22), ("22abc", 22), ("abc", 0), ("", 0), ("-1", -1)],
)
def test_to_int(text: str, expected: int) -> None:
    """Leading digits are converted, anything else is zero."""
    assert to_int(text) == expected

"""Utilities for hostspec."""

from hostspec.utils.console import ColorfulFormatter, configure_logging
from hostspec.utils.parser import (
    HOST_PARSERS,
    ParserVariant,
    parse_host_string,
    select_parser,
)
from hostspec.utils.users import get_login_name

__all__ = [
    "ColorfulFormatter",
    "configure_logging",
    "get_login_name",
    "HOST_PARSERS",
    "parse_host_string",
    "ParserVariant",
    "select_parser",
]

"""Colorful console logging formatter."""

import logging
import re
import sys
from datetime import datetime

from hostspec.config.settings import Settings

# ANSI color codes
COLORS = {
    "reset": "\033[0m",
    "bold": "\033[1m",
    "dim": "\033[2m",
    "white": "\033[37m",
    "cyan": "\033[36m",
    "green": "\033[32m",
    "bright_black": "\033[90m",
    "bright_red": "\033[91m",
    "bright_green": "\033[92m",
    "bright_yellow": "\033[93m",
    "bright_blue": "\033[94m",
    "bright_magenta": "\033[95m",
    "bg_red": "\033[41m",
}

# Log level colors
LEVEL_COLORS = {
    "DEBUG": COLORS["bright_black"],
    "INFO": COLORS["bright_green"],
    "WARNING": COLORS["bright_yellow"],
    "ERROR": COLORS["bright_red"],
    "CRITICAL": COLORS["bg_red"] + COLORS["white"] + COLORS["bold"],
}

# Component colors for logger names
COMPONENT_COLORS = {
    "hostspec.utils.parser": COLORS["bright_blue"],
    "hostspec.services": COLORS["bright_magenta"],
    "hostspec.config": COLORS["green"],
    "default": COLORS["white"],
}

# user@host:port, including bracketless IPv6 hosts
HOST_PATTERN = re.compile(r"([\w.\-]+@[\w.\-:]+:\d+)")

NOISY_LOGGERS = ("asyncssh",)


class ColorfulFormatter(logging.Formatter):
    """Colorful log formatter with component highlighting."""

    def __init__(self, use_colors: bool = True) -> None:
        """Initialize the formatter.

        Args:
            use_colors: Whether to use ANSI colors.
        """
        super().__init__()
        self.use_colors = use_colors

    def _colorize(self, text: str, color: str) -> str:
        """Apply color to text if colors are enabled."""
        if not self.use_colors:
            return text
        return f"{color}{text}{COLORS['reset']}"

    def _get_component_color(self, name: str) -> str:
        """Get color for a logger name/component."""
        for prefix, color in COMPONENT_COLORS.items():
            if prefix != "default" and name.startswith(prefix):
                return color
        return COMPONENT_COLORS["default"]

    def _format_timestamp(self, record: logging.LogRecord) -> str:
        dt = datetime.fromtimestamp(record.created)
        return f"{dt.strftime('%H:%M:%S')}.{int(record.msecs):03d} {dt.strftime('%m/%d')}"

    def _format_level(self, record: logging.LogRecord) -> str:
        level = record.levelname
        color = LEVEL_COLORS.get(level, COLORS["white"])
        return self._colorize(f"{level:<8}", color)

    def _format_component(self, record: logging.LogRecord) -> str:
        name = record.name
        if name.startswith("hostspec."):
            name = name[len("hostspec.") :]
        color = self._get_component_color(record.name)
        return self._colorize(f"{name:<20}", color)

    def _highlight_message(self, message: str) -> str:
        """Highlight user@host:port descriptors in log messages."""
        if not self.use_colors or "@" not in message:
            return message
        return HOST_PATTERN.sub(
            f"{COLORS['bright_magenta']}\\1{COLORS['reset']}",
            message,
        )

    def format(self, record: logging.LogRecord) -> str:
        """Format the log record as ``time | LEVEL | component | message``."""
        timestamp = self._colorize(self._format_timestamp(record), COLORS["dim"])
        level = self._format_level(record)
        component = self._format_component(record)
        sep = self._colorize("|", COLORS["dim"])
        message = self._highlight_message(record.getMessage())

        line = f"{timestamp} {sep} {level} {sep} {component} {sep} {message}"
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


def configure_logging(
    settings: Settings | None = None,
    use_colors: bool | None = None,
) -> logging.Logger:
    """Attach a ColorfulFormatter handler to the ``hostspec`` logger.

    Args:
        settings: Source of the log level (default: Settings.from_env())
        use_colors: Force colors on or off (default: only on a TTY)

    Returns:
        The configured ``hostspec`` logger
    """
    settings = settings or Settings.from_env()
    if use_colors is None:
        use_colors = sys.stderr.isatty()

    hostspec_logger = logging.getLogger("hostspec")
    hostspec_logger.setLevel(getattr(logging, settings.log_level.upper(), logging.INFO))

    # Only add handler if not already configured
    if not hostspec_logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(ColorfulFormatter(use_colors=use_colors))
        hostspec_logger.addHandler(handler)
        hostspec_logger.propagate = False

    for noisy_logger in NOISY_LOGGERS:
        logging.getLogger(noisy_logger).setLevel(logging.WARNING)

    return hostspec_logger

"""Host construction errors."""


class HostError(ValueError):
    """Base class for host construction errors."""

    pass


class UnparsableHostStringError(HostError):
    """No parser variant accepts the host string."""

    def __init__(self, host_string: str):
        """Initialize the error.

        Args:
            host_string: The string that could not be parsed
        """
        self.host_string = host_string
        super().__init__(f"Cannot parse host string {host_string}")


class UnknownHostPropertyError(HostError):
    """Options map names a property Host cannot set."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Unknown host property {key}")


class MissingHostPropertyError(HostError):
    """Options map leaves out a required property."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Missing host property {key}")

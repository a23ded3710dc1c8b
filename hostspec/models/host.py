"""Host connection descriptor."""

from collections.abc import Iterable, Mapping
from typing import Any

from hostspec.exceptions import MissingHostPropertyError, UnknownHostPropertyError
from hostspec.utils.parser import DEFAULT_PORT, parse_host_string, to_int
from hostspec.utils.users import CurrentUserProvider, get_login_name


class Host:
    """A login target: user, hostname and port plus credentials.

    Identity is ``(user, hostname, port)``; password, keys and properties
    do not take part in equality or hashing.

    Construct from a host string (``Host("deploy@example.com:2222")``) or
    from a mapping of settable properties
    (``Host({"hostname": "example.com", "key": "~/.ssh/id_ed25519"})``).
    """

    # Plain attributes accepted in an options mapping besides settable properties.
    _FIELDS = ("user", "hostname", "port", "password")

    def __init__(
        self,
        host_string_or_options: str | Mapping[str, Any],
        current_user: CurrentUserProvider | None = None,
    ):
        """Initialize a Host.

        Args:
            host_string_or_options: Host string or mapping of property values
            current_user: Login-name provider for hosts that name no user

        Raises:
            UnparsableHostStringError: If the host string matches no format
            UnknownHostPropertyError: If the mapping has an unsettable key
            MissingHostPropertyError: If the mapping has no hostname
            TypeError: If the argument is neither a string nor a mapping
        """
        self.user: str | None = None
        self.hostname: str | None = None
        self.port: int | None = None
        self.password: str | None = None
        self._keys: list[str] = []
        self._properties: dict[str, Any] | None = None

        current_user = current_user or get_login_name

        if isinstance(host_string_or_options, Mapping):
            self._apply_options(host_string_or_options, current_user)
        elif isinstance(host_string_or_options, str):
            self.user, self.hostname, self.port = parse_host_string(
                host_string_or_options, current_user
            )
        else:
            raise TypeError(
                "Host expects a host string or an options mapping, "
                f"got {type(host_string_or_options).__name__}"
            )

    @classmethod
    def parse(
        cls, host_string: str, current_user: CurrentUserProvider | None = None
    ) -> "Host":
        """Create a Host from a host string."""
        return cls(host_string, current_user=current_user)

    @classmethod
    def from_options(
        cls,
        options: Mapping[str, Any],
        current_user: CurrentUserProvider | None = None,
    ) -> "Host":
        """Create a Host from a mapping of property values."""
        return cls(options, current_user=current_user)

    @classmethod
    def settable_properties(cls) -> frozenset[str]:
        """Return the names accepted in an options mapping."""
        names = set(cls._FIELDS)
        for name in dir(cls):
            attr = getattr(cls, name, None)
            if isinstance(attr, property) and attr.fset is not None:
                names.add(name)
        return frozenset(names)

    def _apply_options(
        self, options: Mapping[str, Any], current_user: CurrentUserProvider
    ) -> None:
        settable = self.settable_properties()
        for key, value in options.items():
            if key not in settable:
                raise UnknownHostPropertyError(key)
            setattr(self, key, value)

        if self.hostname is None:
            raise MissingHostPropertyError("hostname")
        if self.user is None:
            self.user = current_user()
        if self.port is None:
            self.port = DEFAULT_PORT
        elif isinstance(self.port, str):
            self.port = to_int(self.port)

    @property
    def username(self) -> str | None:
        """Alias for user."""
        return self.user

    @property
    def keys(self) -> list[str]:
        """Private key paths in insertion order."""
        return list(self._keys)

    @keys.setter
    def keys(self, new_keys: str | Iterable[str] | None) -> None:
        if new_keys is None:
            self._keys = []
        elif isinstance(new_keys, str):
            self._keys = [new_keys]
        else:
            self._keys = list(new_keys)

    @property
    def key(self) -> str | None:
        """First key, if any. Setting replaces all keys with this one."""
        return self._keys[0] if self._keys else None

    @key.setter
    def key(self, new_key: str | None) -> None:
        self._keys = [] if new_key is None else [new_key]

    @property
    def properties(self) -> dict[str, Any]:
        """Free-form metadata owned by this host, created on first access."""
        if self._properties is None:
            self._properties = {}
        return self._properties

    def netssh_options(self) -> dict[str, Any]:
        """Options consumed by the SSH session layer."""
        return {
            "keys": self.keys,
            "port": self.port,
            "user": self.user,
            "password": self.password,
        }

    def to_key(self) -> str:
        """Return the canonical form, for use as a dict key."""
        return str(self)

    def _identity(self) -> tuple[Any, Any, Any]:
        return (self.user, self.hostname, self.port)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Host):
            return NotImplemented
        return self._identity() == other._identity()

    def __hash__(self) -> int:
        return hash(self._identity())

    def __str__(self) -> str:
        return f"{self.username}@{self.hostname}:{self.port}"

    def __repr__(self) -> str:
        return (
            f"Host(user={self.user!r}, hostname={self.hostname!r}, port={self.port!r})"
        )


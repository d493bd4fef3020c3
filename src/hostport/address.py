"""Host/port values."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, NoReturn, Self

from . import parser
from .errors import BracketlessIPv6Error, HostAndPortError, HostHasPortError
from .validate import check_port


class HostAndPort:
    """
    An immutable host and optional port.

    The host is a hostname, an IPv4 literal, an IPv6 literal without brackets, or
    anything else that parsed; it is never checked beyond its colons and brackets.

    Two values are equal if their hosts are identical and they have the same port (or
    both have none). Whether the original string used brackets does not matter.
    """

    __slots__ = {
        "host": "The host part, without brackets.",
        "_port": "The port number, or None if there is no port.",
        "_ambiguous": "True if the host has colons but was given without brackets.",
    }

    host: str
    _port: int | None
    _ambiguous: bool

    def __init__(self: Self, host: str, port: int | None, ambiguous: bool) -> None:
        """
        Construct a new HostAndPort from already-validated parts.

        Applications should use from_string, from_host, or from_parts instead.

        :param host: The host part, without brackets.
        :param port: The port number, or None.
        :param ambiguous: True if the host has colons but was given without brackets.
        """
        object.__setattr__(self, "host", host)
        object.__setattr__(self, "_port", port)
        object.__setattr__(self, "_ambiguous", ambiguous)

    @classmethod
    def from_string(cls: type[Self], text: str) -> Self:
        """
        Parse a host/port string.

        :param text: A string such as “example.com”, “127.0.0.1:80”, “[::1]:80”, or
            “::1”.
        :return: The parsed value.
        :raises HostAndPortError: if the string is rejected.
        """
        return cls(*parser.parse(text))

    @classmethod
    def from_host(cls: type[Self], text: str) -> Self:
        """
        Parse a host which must not carry a port.

        :param text: The host, optionally in brackets.
        :return: The parsed value, which has no port.
        :raises HostAndPortError: if the string is rejected or contains a port.
        """
        parsed = parser.parse(text)
        if parsed.port is not None:
            msg = f"Host has a port: {text}"
            raise HostHasPortError(msg, text)
        return cls(*parsed)

    @classmethod
    def from_parts(cls: type[Self], host: str, port: int) -> Self:
        """
        Combine a host and a port.

        :param host: The host, optionally in brackets, which must not carry a port.
        :param port: The port number.
        :return: The combined value.
        :raises HostAndPortError: if the port is out of range, or if the host is
            rejected or contains a port.
        """
        check_port(port, port)
        parsed = parser.parse(host)
        if parsed.port is not None:
            msg = f"Host has a port: {host}"
            raise HostHasPortError(msg, host)
        return cls(parsed.host, port, parsed.ambiguous)

    @property
    def has_port(self: Self) -> bool:
        """Return whether a port is present."""
        return self._port is not None

    @property
    def port(self: Self) -> int:
        """
        Return the port number.

        :raises ValueError: if there is no port.
        """
        if self._port is None:
            msg = f"No port in {self}"
            raise ValueError(msg)
        return self._port

    @property
    def ambiguous(self: Self) -> bool:
        """Return whether the host has colons but was given without brackets."""
        return self._ambiguous

    def port_or_default(self: Self, default: int) -> int:
        """
        Return the port number, or a default if there is none.

        :param default: The value to return if there is no port.
        :return: The port number or default.
        """
        return default if self._port is None else self._port

    def require_brackets_for_ipv6(self: Self) -> Self:
        """
        Reject a host that has colons but was given without brackets.

        Parsing accepts such hosts, so that “::1” is a host rather than an error.
        Callers which would rather insist on “[::1]” call this afterwards.

        :return: self.
        :raises BracketlessIPv6Error: if the host was given without brackets despite
            containing colons.
        """
        if self._ambiguous:
            msg = f"Possible bracketless IPv6 literal: {self.host}"
            raise BracketlessIPv6Error(msg, self.host)
        return self

    def to_canonical_string(self: Self) -> str:
        """
        Render the value as text.

        The host is enclosed in brackets if it contains a colon, and the port follows
        after a colon if present. Parsing the result gives back an equal value.
        """
        host = f"[{self.host}]" if ":" in self.host else self.host
        if self._port is None:
            return host
        return f"{host}:{self._port}"

    def __str__(self: Self) -> str:
        """Return the canonical form."""
        return self.to_canonical_string()

    def __repr__(self: Self) -> str:
        """Return a representation showing the canonical form."""
        return f"<{type(self).__name__} {self.to_canonical_string()}>"

    def __eq__(self: Self, other: object) -> bool:
        """
        Compare with another value.

        :param other: The value to compare with.
        """
        if not isinstance(other, HostAndPort):
            return NotImplemented
        return self.host == other.host and self._port == other._port

    def __hash__(self: Self) -> int:
        """Return a hash of the canonical form."""
        return hash(self.to_canonical_string())

    def __setattr__(self: Self, name: str, value: object) -> NoReturn:
        """Refuse to modify the value."""
        msg = f"{type(self).__name__} is immutable"
        raise AttributeError(msg)

    def __delattr__(self: Self, name: str) -> NoReturn:
        """Refuse to modify the value."""
        msg = f"{type(self).__name__} is immutable"
        raise AttributeError(msg)

    def __reduce__(self: Self) -> tuple[Any, ...]:
        """Support pickling and copying."""
        return (type(self), (self.host, self._port, self._ambiguous))


def _attempt(func: Callable[[], HostAndPort]) -> HostAndPort | HostAndPortError:
    """
    Call a constructor, returning rather than raising any rejection.

    :param func: The constructor call.
    :return: The constructed value, or the error.
    """
    try:
        return func()
    except HostAndPortError as exc:
        return exc


def try_from_string(text: str) -> HostAndPort | HostAndPortError:
    """
    Parse a host/port string without raising.

    :param text: The string.
    :return: The value, or the error HostAndPort.from_string would have raised.
    """
    return _attempt(lambda: HostAndPort.from_string(text))


def try_from_host(text: str) -> HostAndPort | HostAndPortError:
    """
    Parse a host without raising.

    :param text: The host.
    :return: The value, or the error HostAndPort.from_host would have raised.
    """
    return _attempt(lambda: HostAndPort.from_host(text))


def try_from_parts(host: str, port: int) -> HostAndPort | HostAndPortError:
    """
    Combine a host and a port without raising.

    :param host: The host.
    :param port: The port number.
    :return: The value, or the error HostAndPort.from_parts would have raised.
    """
    return _attempt(lambda: HostAndPort.from_parts(host, port))

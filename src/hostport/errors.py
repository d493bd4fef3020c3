"""Errors raised when a host/port string or part is rejected."""

import enum
from typing import Any, Self


class ErrorKind(enum.Enum):
    """The reason a host/port value could not be constructed."""

    EMPTY_INPUT = "empty input"
    MALFORMED_BRACKETED_HOST = "malformed bracketed host"
    EMPTY_HOST = "empty host"
    BRACKET_SUFFIX = "bracket suffix"
    INVALID_PORT_DIGITS = "invalid port digits"
    INVALID_PORT_NUMBER = "invalid port number"
    PORT_OUT_OF_RANGE = "port out of range"
    HOST_HAS_PORT = "host has port"
    BRACKETLESS_IPV6 = "bracketless IPv6"


class HostAndPortError(ValueError):
    """
    Raised when a host/port value cannot be constructed.

    Subclasses set kind so that callers can tell failures apart without looking at the
    message.
    """

    __slots__ = {
        "text": "The offending input.",
    }

    kind: ErrorKind

    text: str | int | None

    def __init__(self: Self, msg: str, text: str | int | None) -> None:
        """
        Construct a new error.

        :param msg: The human-readable message.
        :param text: The offending input.
        """
        super().__init__(msg)
        self.text = text

    def __reduce__(self: Self) -> tuple[Any, ...]:
        """Support pickling and copying."""
        return (type(self), (self.args[0], self.text))


class EmptyInputError(HostAndPortError):
    """The input string was empty or absent."""

    kind = ErrorKind.EMPTY_INPUT


class MalformedBracketedHostError(HostAndPortError):
    """A bracketed input had no colon, or its closing bracket preceded the colon."""

    kind = ErrorKind.MALFORMED_BRACKETED_HOST


class EmptyHostError(HostAndPortError):
    """The host part was empty."""

    kind = ErrorKind.EMPTY_HOST


class BracketSuffixError(HostAndPortError):
    """Something other than a colon followed the closing bracket."""

    kind = ErrorKind.BRACKET_SUFFIX


class InvalidPortDigitsError(HostAndPortError):
    """A bracketed port segment contained a non-digit character."""

    kind = ErrorKind.INVALID_PORT_DIGITS


class InvalidPortNumberError(HostAndPortError):
    """The port segment was not an integer."""

    kind = ErrorKind.INVALID_PORT_NUMBER


class PortOutOfRangeError(HostAndPortError):
    """The port number was outside the permitted range."""

    kind = ErrorKind.PORT_OUT_OF_RANGE


class HostHasPortError(HostAndPortError):
    """A host-only input carried a port."""

    kind = ErrorKind.HOST_HAS_PORT


class BracketlessIPv6Error(HostAndPortError):
    """A host containing colons was given without brackets."""

    kind = ErrorKind.BRACKETLESS_IPV6

"""Splitting of host/port strings into their parts."""

import re
from typing import NamedTuple

from .errors import (
    BracketSuffixError,
    EmptyHostError,
    EmptyInputError,
    InvalidPortDigitsError,
    InvalidPortNumberError,
    MalformedBracketedHostError,
    PortOutOfRangeError,
)
from .validate import MAX_PORT, check_port

_PORT_NUMBER = re.compile(r"[+-]?[0-9]+", re.ASCII)
"""The accepted spelling of a port number in an unbracketed string."""


class ParsedAddress(NamedTuple):
    """The parts found in a host/port string."""

    host: str
    """The host part, without brackets."""

    port: int | None
    """The port number, or None if there was no port."""

    ambiguous: bool
    """True if the host contains colons but was not enclosed in brackets."""


def split_bracketed(text: str) -> tuple[str, str]:
    """
    Split a host/port string whose host is enclosed in brackets.

    :param text: The combined string, which must start with an opening bracket.
    :return: The host without brackets and the port text, which is empty if there is no
        port.
    :raises HostAndPortError: if the string is not a well-formed bracketed host/port.
    """
    if not text.startswith("["):
        msg = f"Bracketed host/port must start with a bracket: {text}"
        raise MalformedBracketedHostError(msg, text)
    close_index = text.rfind("]")
    if close_index == 1:
        msg = f"Empty host in brackets: {text}"
        raise EmptyHostError(msg, text)
    colon_index = text.find(":")
    if colon_index == -1 or close_index < colon_index:
        # An IPv6 literal always contains a colon, so a bracketed host without one (or
        # one whose only colons come after the closing bracket) is not IPv6.
        msg = f"Invalid bracketed host/port: {text}"
        raise MalformedBracketedHostError(msg, text)
    host = text[1:close_index]
    if close_index + 1 == len(text):
        return host, ""
    if text[close_index + 1] != ":":
        msg = f"Only a colon may follow a closing bracket: {text}"
        raise BracketSuffixError(msg, text)
    port_text = text[close_index + 2 :]
    if not all("0" <= ch <= "9" for ch in port_text):
        msg = f"Port must consist of digits: {text}"
        raise InvalidPortDigitsError(msg, text)
    return host, port_text


def parse_port(port_text: str, text: str) -> int | None:
    """
    Convert the port part of a host/port string to a number.

    :param port_text: The port part.
    :param text: The whole host/port string, for error messages.
    :return: The port number, or None if port_text is empty.
    :raises HostAndPortError: if the port is not a number or is out of range.
    """
    if not port_text:
        return None
    if _PORT_NUMBER.fullmatch(port_text) is None:
        msg = f"Unparseable port number: {text}"
        raise InvalidPortNumberError(msg, text)
    digits = port_text.lstrip("+-").lstrip("0")
    if len(digits) > len(str(MAX_PORT)):
        # More digits than MAX_PORT has; int() also refuses very long digit strings.
        msg = f"Port number out of range: {text}"
        raise PortOutOfRangeError(msg, text)
    port = int(digits or "0")
    return check_port(-port if port_text.startswith("-") else port, text)


def parse(text: str | None) -> ParsedAddress:
    """
    Parse a host/port string.

    A host enclosed in brackets may contain colons and may be followed by a colon and a
    port. Without brackets, a single colon separates host and port; two or more colons
    mean the whole string is a host (probably an IPv6 literal) with no port.

    :param text: The combined string.
    :return: The parts.
    :raises HostAndPortError: if the string is rejected.
    """
    if not text:
        msg = "Host/port string is empty"
        raise EmptyInputError(msg, text)
    ambiguous = False
    if text.startswith("["):
        host, port_text = split_bracketed(text)
    else:
        colon_index = text.find(":")
        if colon_index >= 0 and text.find(":", colon_index + 1) == -1:
            host = text[:colon_index]
            port_text = text[colon_index + 1 :]
        else:
            host = text
            port_text = ""
            ambiguous = colon_index >= 0
        if not host:
            msg = f"Empty host: {text}"
            raise EmptyHostError(msg, text)
    return ParsedAddress(host, parse_port(port_text, text), ambiguous)

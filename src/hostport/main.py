"""The command-line entry point."""

import argparse
import json
import logging
import logging.config
import pathlib
import sys

from .address import HostAndPort
from .errors import HostAndPortError


def convert(
    text: str, host_only: bool, default_port: int | None, require_brackets: bool
) -> HostAndPort:
    """
    Convert one command-line address to a value.

    :param text: The address as given.
    :param host_only: True to reject addresses that carry a port.
    :param default_port: The port to use for addresses without one, or None to leave
        them without a port.
    :param require_brackets: True to reject hosts with colons but no brackets.
    :return: The value.
    :raises HostAndPortError: if the address is rejected.
    """
    value = (
        HostAndPort.from_host(text) if host_only else HostAndPort.from_string(text)
    )
    if default_port is not None and not value.has_port:
        value = HostAndPort.from_parts(text, default_port)
    if require_brackets:
        value.require_brackets_for_ipv6()
    return value


def main() -> None:
    """Run the application."""
    try:
        # Parse command-line parameters.
        parser = argparse.ArgumentParser(
            description="Check host/port addresses and print them in canonical form."
        )
        parser.add_argument(
            "--host-only",
            action="store_true",
            help="reject addresses that include a port",
        )
        parser.add_argument(
            "--default-port",
            "-p",
            type=int,
            help="the port to use for addresses without one (default: none)",
        )
        parser.add_argument(
            "--require-brackets",
            action="store_true",
            help="reject IPv6 literals that are not enclosed in brackets",
        )
        parser.add_argument(
            "--logging",
            "-l",
            type=pathlib.Path,
            help="the JSON file containing a logging configuration dictionary per "
            "logging.config.dictConfig (default: none)",
        )
        parser.add_argument(
            "address",
            nargs="+",
            help="the addresses to check",
            metavar="IPv4ADDR[:PORT] | [IPv6ADDR][:PORT] | HOSTNAME[:PORT]",
        )
        args = parser.parse_args()

        # Set up logging.
        if args.logging is not None:
            with args.logging.open("rb") as logging_config_file:
                cfg = json.load(logging_config_file)
            logging.config.dictConfig(cfg)
        else:
            logging.basicConfig(level=logging.INFO)

        # Check each address, carrying on past failures so all of them are reported.
        failed = False
        for text in args.address:
            try:
                value = convert(
                    text, args.host_only, args.default_port, args.require_brackets
                )
            except HostAndPortError as exc:
                logging.getLogger(__name__).error(
                    "Rejected %r (%s): %s", text, exc.kind.value, exc
                )
                failed = True
                continue
            logging.getLogger(__name__).debug("Accepted %r as %s", text, value)
            print(value)  # noqa: T201
        if failed:
            sys.exit(1)
    finally:
        logging.shutdown()

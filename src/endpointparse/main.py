"""The application entry point."""

import argparse
import json
import logging
import logging.config
import pathlib
import sys
from collections.abc import Iterable

from .errors import ParseError
from .parser import parse
from .types import PORT_MAX, EndpointInfo


def endpoint_argument(text: str) -> EndpointInfo:
    """
    Parse an endpoint given on the command line.

    This is meant to be passed as the ``type`` of an argparse argument, so that the
    parse failure is reported to the user as a usage error.

    :param text: The command-line argument.
    :return: The parsed endpoint.
    """
    try:
        return parse(text)
    except ParseError as exp:
        raise argparse.ArgumentTypeError(str(exp)) from exp


def port_argument(text: str) -> int:
    """
    Parse a port number given on the command line.

    :param text: The command-line argument.
    :return: The port number.
    """
    port = int(text) if text.isascii() and text.isdigit() else -1
    if not 0 <= port <= PORT_MAX:
        msg = f"port must be a number from 0 to {PORT_MAX}, not {text!r}"
        raise argparse.ArgumentTypeError(msg)
    return port


def describe(text: str, endpoint: EndpointInfo) -> dict[str, str | int | None]:
    """
    Build the machine-readable description of a parsed endpoint.

    :param text: The string the endpoint was parsed from.
    :param endpoint: The parsed endpoint.
    :return: A dictionary suitable for encoding as JSON.
    """
    kind = f"ipv{endpoint.version}" if endpoint.is_ip else "hostname"
    return {
        "input": text,
        "kind": kind,
        "address": endpoint.host,
        "port": endpoint.port,
    }


def process(
    texts: Iterable[str],
    *,
    require_port: bool,
    default_port: int | None,
    as_json: bool,
) -> bool:
    """
    Parse and print each endpoint.

    :param texts: The endpoint strings.
    :param require_port: True to reject endpoints that have no port.
    :param default_port: The port to fill in for endpoints without one, or None.
    :param as_json: True to print JSON lines, or False to print canonical endpoints.
    :return: True if every endpoint was parsed successfully, or False if not.
    """
    logger = logging.getLogger(__name__)
    ok = True
    for text in texts:
        try:
            endpoint = parse(text)
        except ParseError as exp:
            logger.error("%s: %s", exp.kind, exp)  # noqa: TRY400
            ok = False
            continue
        if endpoint.port is None:
            if default_port is not None:
                endpoint = endpoint.with_port(default_port)
            elif require_port:
                logger.error("MissingPort: Endpoint %r has no :PORT part", text)
                ok = False
                continue
        if as_json:
            print(json.dumps(describe(text, endpoint)))
        else:
            print(endpoint)
    logger.debug("Processed endpoints, success=%s", ok)
    return ok


def main() -> None:
    """Run the application."""
    try:
        # Parse and check command-line parameters.
        parser = argparse.ArgumentParser(
            description="Parse and validate network endpoint strings."
        )
        parser.add_argument(
            "--logging",
            "-l",
            type=pathlib.Path,
            help="the JSON file containing a logging configuration dictionary per "
            "logging.config.dictConfig (default: none)",
        )
        port_group = parser.add_mutually_exclusive_group()
        port_group.add_argument(
            "--require-port",
            action="store_true",
            help="reject endpoints that do not include a port",
        )
        port_group.add_argument(
            "--default-port",
            type=port_argument,
            help="the port to use for endpoints that do not include one "
            "(default: none)",
            metavar="PORT",
        )
        parser.add_argument(
            "--json",
            action="store_true",
            help="print one JSON object per endpoint instead of the canonical form",
        )
        parser.add_argument(
            "endpoint",
            nargs="+",
            help="the endpoint to parse, one of IPv4ADDR[:PORT], HOSTNAME[:PORT], "
            "IPv6ADDR, or [IPv6ADDR][:PORT]",
        )
        args = parser.parse_args()

        # Set up logging.
        if args.logging is not None:
            with args.logging.open("rb") as logging_config_file:
                cfg = json.load(logging_config_file)
            logging.config.dictConfig(cfg)
        else:
            logging.basicConfig(level=logging.INFO)

        ok = process(
            args.endpoint,
            require_port=args.require_port,
            default_port=args.default_port,
            as_json=args.json,
        )
    finally:
        logging.shutdown()
    sys.exit(0 if ok else 1)

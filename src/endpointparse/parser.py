"""
Parsing of endpoint strings.

An endpoint string is one of the following, where PORT is a decimal number from 0 to
65535:

* ``IPv4ADDR`` or ``IPv4ADDR:PORT``
* ``HOSTNAME`` or ``HOSTNAME:PORT``
* ``IPv6ADDR``, ``[IPv6ADDR]`` or ``[IPv6ADDR]:PORT``

A bare IPv6 literal never carries a port, because the last group of the address could
not be told apart from a port number.
"""

import ipaddress
import re

from .errors import (
    EmptyInput,
    InputTooLong,
    InvalidIPv4,
    InvalidIPv6,
    InvalidPort,
    UnexpectedWhitespace,
    UnmatchedBracket,
    UnsupportedForm,
)
from .types import PORT_MAX, EndpointInfo, Hostname

MAX_INPUT_LENGTH = 2048
"""The length beyond which input is rejected without being examined."""

_DIGITS = re.compile(r"[0-9]+")
_IPV4_LIKE = re.compile(r"[0-9.]+")


def _parse_port(text: str) -> int:
    """
    Parse a port number.

    :param text: The digits following the separating colon.
    :return: The port number.
    """
    # int() alone would also accept signs, underscores and non-ASCII digits.
    if not _DIGITS.fullmatch(text):
        raise InvalidPort(text, "expected decimal digits")
    port = int(text)
    if port > PORT_MAX:
        raise InvalidPort(text, f"greater than {PORT_MAX}")
    return port


def _parse_ipv4(text: str) -> ipaddress.IPv4Address:
    """
    Parse a dotted-quad IPv4 address.

    Each of the four components must be a decimal number from 0 to 255 without leading
    zeroes, so that nothing can be mistaken for an octal component.

    :param text: The address.
    :return: The address.
    """
    components = text.split(".")
    if len(components) != 4:  # noqa: PLR2004
        raise InvalidIPv4(text, f"expected 4 components, got {len(components)}")
    for component in components:
        if not _DIGITS.fullmatch(component):
            raise InvalidIPv4(text, f"component {component!r} is not a number")
        if len(component) > 1 and component[0] == "0":
            raise InvalidIPv4(text, f"component {component!r} has a leading zero")
        if int(component) > 255:  # noqa: PLR2004
            raise InvalidIPv4(text, f"component {component!r} is greater than 255")
    return ipaddress.IPv4Address(text)


def _parse_ipv6(text: str) -> ipaddress.IPv6Address:
    """
    Parse an IPv6 address literal, without brackets.

    :param text: The address.
    :return: The address.
    """
    if "%" in text:
        # The standard library would accept a zone index and keep it.
        raise InvalidIPv6(text, "zone indices are not supported")
    try:
        return ipaddress.IPv6Address(text)
    except ValueError as exp:
        raise InvalidIPv6(text, str(exp)) from exp


def _parse_host(text: str) -> ipaddress.IPv4Address | Hostname:
    """
    Parse the host part of an endpoint that is not an IPv6 literal.

    A host made only of digits and dots is taken as an IPv4 address and is an error if
    it is not a valid one; it is never reinterpreted as a hostname.

    :param text: The host.
    :return: The IPv4 address or hostname.
    """
    if _IPV4_LIKE.fullmatch(text):
        return _parse_ipv4(text)
    return Hostname(text)


def _parse_bracketed(text: str) -> EndpointInfo:
    """
    Parse an endpoint in the literal bracket form.

    :param text: The endpoint, starting with an opening bracket.
    :return: The endpoint.
    """
    close = text.find("]")
    if close == -1:
        raise UnmatchedBracket(text, "missing ]")
    address = _parse_ipv6(text[1:close])
    rest = text[close + 1 :]
    if not rest:
        return EndpointInfo(address)
    if rest[0] != ":":
        raise UnsupportedForm(text, "expected :PORT after ]")
    return EndpointInfo(address, _parse_port(rest[1:]))


def _parse_colons(text: str) -> EndpointInfo:
    """
    Parse an endpoint that contains more than one colon and no brackets.

    Such an endpoint can only be a bare IPv6 address, without a port.

    :param text: The endpoint.
    :return: The endpoint.
    """
    try:
        return EndpointInfo(_parse_ipv6(text))
    except InvalidIPv6:
        # Tell the user about the bracket form if they appear to have tried to append a
        # port to a bare IPv6 address.
        prefix, _, suffix = text.rpartition(":")
        if _DIGITS.fullmatch(suffix):
            try:
                _parse_ipv6(prefix)
            except InvalidIPv6:
                pass
            else:
                msg = "an IPv6 address with a port must be written as [IPv6ADDR]:PORT"
                raise UnsupportedForm(text, msg) from None
        raise


def parse(text: str) -> EndpointInfo:
    """
    Parse an endpoint string.

    :param text: The endpoint string.
    :return: The parsed endpoint.
    :raises ParseError: If the string is not a valid endpoint; the subclass raised
        identifies the reason.
    """
    if not text or text.isspace():
        raise EmptyInput(text)
    if len(text) > MAX_INPUT_LENGTH:
        raise InputTooLong(text, f"longer than {MAX_INPUT_LENGTH} characters")
    if any(c.isspace() for c in text):
        raise UnexpectedWhitespace(text)

    if text[0] == "[":
        return _parse_bracketed(text)
    if "[" in text:
        raise UnsupportedForm(text, "[ is only allowed at the start")
    if "]" in text:
        raise UnmatchedBracket(text, "missing [")

    match text.count(":"):
        case 0:
            return EndpointInfo(_parse_host(text))
        case 1:
            host, _, port = text.partition(":")
            return EndpointInfo(_parse_host(host), _parse_port(port))
        case _:
            return _parse_colons(text)

"""The parsed representation of an endpoint."""

from __future__ import annotations

import ipaddress
import re
from typing import Any, NoReturn, Self

from .errors import InvalidHostname

PORT_MAX = 65535
"""The largest value a port number can take."""

MAX_HOSTNAME_LENGTH = 253
"""The maximum length of a hostname, excluding any trailing dot."""

MAX_LABEL_LENGTH = 63
"""The maximum length of a single hostname label."""

_LABEL = re.compile(r"[A-Za-z0-9](?:[A-Za-z0-9-]*[A-Za-z0-9])?")
_NUMERIC = re.compile(r"[0-9.]+")


class _Immutable:
    """A base class whose attributes cannot change after construction."""

    __slots__ = ()

    def __setattr__(self: Self, name: str, value: Any) -> NoReturn:  # noqa: ANN401
        msg = f"{type(self).__name__} is immutable"
        raise AttributeError(msg)

    def __delattr__(self: Self, name: str) -> NoReturn:
        msg = f"{type(self).__name__} is immutable"
        raise AttributeError(msg)


class Hostname(_Immutable):
    """
    A DNS hostname.

    A hostname is made of dot-separated ASCII labels of letters, digits and hyphens. A
    name made only of digits and dots is not a hostname, since it would be read back as
    an IPv4 address. Hostnames are compared case-insensitively, but the spelling given
    by the user is kept for display.
    """

    __slots__ = {
        "name": "The hostname as it was written.",
    }

    name: str

    def __init__(self: Self, name: str) -> None:
        """
        Construct a new Hostname.

        :param name: The hostname.
        :raises InvalidHostname: If the name is not a valid hostname.
        """
        if not name:
            raise InvalidHostname(name, "empty hostname")
        if len(name) > MAX_HOSTNAME_LENGTH:
            raise InvalidHostname(
                name, f"longer than {MAX_HOSTNAME_LENGTH} characters"
            )
        if _NUMERIC.fullmatch(name):
            raise InvalidHostname(name, "only digits and dots")
        for label in name.split("."):
            if not label:
                raise InvalidHostname(name, "empty label")
            if len(label) > MAX_LABEL_LENGTH:
                raise InvalidHostname(
                    name,
                    f"label {label!r} is longer than {MAX_LABEL_LENGTH} characters",
                )
            if not _LABEL.fullmatch(label):
                raise InvalidHostname(name, f"label {label!r} is malformed")
        object.__setattr__(self, "name", name)

    def __reduce__(self: Self) -> tuple[type[Hostname], tuple[str]]:
        return (Hostname, (self.name,))

    def __eq__(self: Self, other: object) -> bool:
        if not isinstance(other, Hostname):
            return NotImplemented
        return self.name.lower() == other.name.lower()

    def __hash__(self: Self) -> int:
        return hash(self.name.lower())

    def __str__(self: Self) -> str:
        return self.name

    def __repr__(self: Self) -> str:
        return f"Hostname({self.name!r})"


Address = ipaddress.IPv4Address | ipaddress.IPv6Address | Hostname
"""The address part of an endpoint: exactly one of IPv4, IPv6 or hostname."""


class EndpointInfo(_Immutable):
    """
    An address optionally paired with a port.

    The string form of an EndpointInfo is the canonical spelling of the endpoint, which
    parses back to an equal EndpointInfo.
    """

    __slots__ = {
        "address": "The IPv4 address, IPv6 address or hostname.",
        "port": "The port number, or None if no port was given.",
    }

    address: Address
    port: int | None

    def __init__(self: Self, address: Address, port: int | None = None) -> None:
        """
        Construct a new EndpointInfo.

        :param address: The address.
        :param port: The port number from 0 to 65535, or None if there is none.
        """
        if not isinstance(address, Address):
            msg = f"Unsupported address type {type(address).__name__}"
            raise TypeError(msg)
        if port is not None:
            # bool is an int subclass but True is not a port number.
            if isinstance(port, bool) or not isinstance(port, int):
                msg = f"Port must be an int, not {type(port).__name__}"
                raise TypeError(msg)
            if not 0 <= port <= PORT_MAX:
                msg = f"Port {port} out of range 0–{PORT_MAX}"
                raise ValueError(msg)
        object.__setattr__(self, "address", address)
        object.__setattr__(self, "port", port)

    @property
    def version(self: Self) -> int | None:
        """Return the IP version (4 or 6), or None for a hostname."""
        if isinstance(self.address, Hostname):
            return None
        return self.address.version

    @property
    def is_ip(self: Self) -> bool:
        """Return whether the address is an IP address literal."""
        return not isinstance(self.address, Hostname)

    @property
    def host(self: Self) -> str:
        """
        Return the address in the form accepted by socket functions.

        IPv6 addresses are given without brackets.
        """
        return str(self.address)

    def with_port(self: Self, port: int | None) -> EndpointInfo:
        """
        Return a copy of this endpoint with a different port.

        :param port: The new port, or None to drop the port.
        :return: The new endpoint.
        """
        return EndpointInfo(self.address, port)

    def __reduce__(
        self: Self,
    ) -> tuple[type[EndpointInfo], tuple[Address, int | None]]:
        return (EndpointInfo, (self.address, self.port))

    def __eq__(self: Self, other: object) -> bool:
        if not isinstance(other, EndpointInfo):
            return NotImplemented
        return (self.address, self.port) == (other.address, other.port)

    def __hash__(self: Self) -> int:
        return hash((self.address, self.port))

    def __str__(self: Self) -> str:
        if self.port is None:
            return str(self.address)
        if isinstance(self.address, ipaddress.IPv6Address):
            return f"[{self.address}]:{self.port}"
        return f"{self.address}:{self.port}"

    def __repr__(self: Self) -> str:
        return f"EndpointInfo({self.address!r}, {self.port!r})"

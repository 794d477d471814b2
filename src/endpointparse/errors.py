"""Errors raised when an endpoint string cannot be parsed."""

from typing import Self

_FRAGMENT_LIMIT = 64
"""The number of characters of an overlong input kept in an InputTooLong error."""


class ParseError(ValueError):
    """
    The base class of all endpoint parsing errors.

    Each subclass identifies exactly one cause of failure, so callers can classify an
    error by catching the specific subclass. This is a subclass of ValueError so that
    the parse function can be used directly as an argparse type callable.
    """

    __slots__ = {
        "fragment": "The input, or the part of it, that caused the failure.",
    }

    fragment: str

    description = "Invalid endpoint"
    """The human-readable name of the failure kind, used in the message."""

    def __init__(self: Self, fragment: str, detail: str | None = None) -> None:
        """
        Construct a new ParseError.

        :param fragment: The offending input or sub-fragment.
        :param detail: An optional explanation appended to the message.
        """
        super().__init__(fragment, detail)
        self.fragment = fragment

    def __str__(self: Self) -> str:
        msg = f"{self.description} {self.args[0]!r}"
        if self.args[1] is not None:
            msg = f"{msg}: {self.args[1]}"
        return msg

    @property
    def kind(self: Self) -> str:
        """Return the name of the failure kind."""
        return type(self).__name__


class InvalidIPv4(ParseError):
    """An IPv4-like host has the wrong component count or a bad octet."""

    __slots__ = ()
    description = "Invalid IPv4 address"


class InvalidIPv6(ParseError):
    """An IPv6 literal has bad groups, bad hex digits or malformed compression."""

    __slots__ = ()
    description = "Invalid IPv6 address"


class InvalidHostname(ParseError):
    """A hostname has an illegal character or violates a length limit."""

    __slots__ = ()
    description = "Invalid hostname"


class InvalidPort(ParseError):
    """A port is empty, non-numeric or greater than 65535."""

    __slots__ = ()
    description = "Invalid port"


class UnmatchedBracket(ParseError):
    """A bracket has no counterpart."""

    __slots__ = ()
    description = "Unmatched bracket in"


class UnsupportedForm(ParseError):
    """The input is in a form the parser refuses to guess at."""

    __slots__ = ()
    description = "Unsupported endpoint form"


class EmptyInput(ParseError):
    """The input is empty or consists only of whitespace."""

    __slots__ = ()
    description = "Empty endpoint"


class UnexpectedWhitespace(ParseError):
    """The input contains whitespace, which is never part of an endpoint."""

    __slots__ = ()
    description = "Whitespace in endpoint"


class InputTooLong(ParseError):
    """The input exceeds the length any endpoint could have."""

    __slots__ = ()
    description = "Endpoint too long"

    def __init__(self: Self, fragment: str, detail: str | None = None) -> None:
        """
        Construct a new InputTooLong.

        Only a prefix of an overlong input is kept as the fragment.

        :param fragment: The offending input.
        :param detail: An optional explanation appended to the message.
        """
        if len(fragment) > _FRAGMENT_LIMIT + 1:
            fragment = fragment[:_FRAGMENT_LIMIT] + "…"
        super().__init__(fragment, detail)

"""Small request options: verbosity, user agent and network interface."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Verbose:
    """Whether the transfer reports details of what it does."""

    verbose: bool = True


class UserAgent(str):
    """The User-Agent string sent with a request."""

    __slots__ = ()

    def __repr__(self) -> str:
        return f"UserAgent({str.__repr__(self)})"


class Interface(str):
    """The network interface, host or address to send from."""

    __slots__ = ()

    def __repr__(self) -> str:
        return f"Interface({str.__repr__(self)})"
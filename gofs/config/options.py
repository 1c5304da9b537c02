"""Option records and defaults for gofs.

RawOptions holds what the user typed (or the defaults); ResolvedConfig is
the validated serving plan handed to the server.
"""

import os
from enum import Enum
from typing import NamedTuple, Optional

DEF_SCHEME = "http"
DEF_ADDR = "127.0.0.1:8080"
SCHEMES = ("http", "https", "ftp")


def home_dir() -> str:
    """Return the invoking user's home directory."""
    return os.path.expanduser("~")


class RawOptions(object):
    """Unvalidated user input, one instance per invocation."""

    def __init__(
        self,
        scheme: str = DEF_SCHEME,
        url_prefix: str = "",
        path: Optional[str] = None,
        address: str = DEF_ADDR,
        want_help: bool = False,
        want_version: bool = False,
    ) -> None:
        self.scheme = scheme
        self.url_prefix = url_prefix
        self.path = home_dir() if path is None else path
        self.address = address
        self.want_help = want_help
        self.want_version = want_version

    def __repr__(self) -> str:
        return "RawOptions(scheme={!r}, url_prefix={!r}, path={!r}, address={!r})".format(
            self.scheme, self.url_prefix, self.path, self.address
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RawOptions):
            return NotImplemented
        return self.__dict__ == other.__dict__


class ResolvedConfig(NamedTuple):
    addr: str
    dir: str
    filename: str
    prefix: str
    url: str


class EarlyExit(Enum):
    HELP = "help"
    VERSION = "version"

"""Command-line parsing for gofs.

Turns argv into a RawOptions record:
- help tokens are detected by a raw scan, before any flag parsing
- flags follow the Go flag grammar: one or two dashes, exact names,
  "name=value" or the next argument as the value, even if it starts with "-"
- the canonical "--name=value" form then goes through argparse
"""

import argparse
from typing import Callable, List, Optional, Sequence

from .errors import BadArgument
from .options import DEF_ADDR, DEF_SCHEME, SCHEMES, RawOptions, home_dir

HELP_ARGS = frozenset(["-h", "--h", "-help", "--help"])

# accepted flag name -> long name handed to argparse
FLAG_NAMES = {
    "v": "version",
    "version": "version",
    "url-prefix": "url-prefix",
    "s": "scheme",
    "scheme": "scheme",
    "a": "address",
    "address": "address",
    "p": "path",
    "path": "path",
}
BOOL_FLAGS = frozenset(["version"])

BOOL_TRUE = ("1", "t", "T", "TRUE", "true", "True")
BOOL_FALSE = ("0", "f", "F", "FALSE", "false", "False")


def wants_usage(args: Sequence[str]) -> bool:
    """True if any argument is exactly one of the help tokens.

    Args:
        args: Arguments without the program path

    Returns:
        True even when the token is the value of another flag
    """
    return any(arg in HELP_ARGS for arg in args)


def canonicalize(args: Sequence[str]) -> List[str]:
    """
    Rewrite flags into "--name=value" / "--version" form.

    Args:
        args: Arguments without the program path

    Returns:
        Canonical arguments; a value is never split from its flag

    Raises:
        BadArgument: On undefined flags, bad syntax, missing values,
            bad boolean values or positional arguments
    """
    ret: List[str] = []
    n = 0
    while n < len(args):
        arg = args[n]
        n += 1
        if arg == "--":
            break

        if len(arg) < 2 or not arg.startswith("-"):
            raise BadArgument("unexpected argument: %s" % (arg,))

        name = arg[2:] if arg.startswith("--") else arg[1:]
        if not name or name[0] in "-=":
            raise BadArgument("bad flag syntax: %s" % (arg,))

        value: Optional[str] = None
        if "=" in name:
            name, value = name.split("=", 1)

        long_name = FLAG_NAMES.get(name)
        if not long_name:
            raise BadArgument("flag provided but not defined: -%s" % (name,))

        if long_name in BOOL_FLAGS:
            if value is None or value in BOOL_TRUE:
                ret.append("--" + long_name)
            elif value not in BOOL_FALSE:
                t = "invalid boolean value %r for -%s"
                raise BadArgument(t % (value, name))
            continue

        if value is None:
            if n >= len(args):
                raise BadArgument("flag needs an argument: -%s" % (name,))
            value = args[n]
            n += 1

        ret.append("--%s=%s" % (long_name, value))

    if n < len(args):
        raise BadArgument("unexpected argument: %s" % (args[n],))

    return ret


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> None:  # type: ignore
        raise BadArgument(message)


class ArgvParser:
    """Parse command-line flags into RawOptions."""

    def __init__(self, log_func: Callable[[str, int], None], home: Optional[str] = None):
        """Initialize parser with logging function.

        Args:
            log_func: Function for logging messages (msg, level)
            home: Default for --path; the user's home directory if None
        """
        self.log = log_func
        self.home = home_dir() if home is None else home

    def build(self) -> argparse.ArgumentParser:
        ap = _ArgumentParser(prog="gofs", add_help=False, allow_abbrev=False)
        ap.add_argument("--version", dest="want_version", action="store_true")
        ap.add_argument("--url-prefix", metavar="PREFIX", default="")
        ap.add_argument("--scheme", choices=SCHEMES, default=DEF_SCHEME)
        ap.add_argument("--address", metavar="IP:PORT", default=DEF_ADDR)
        ap.add_argument("--path", metavar="PATH", default=self.home)
        return ap

    def parse(self, args: List[str]) -> RawOptions:
        """
        Parse flags into RawOptions.

        Args:
            args: Arguments without the program path

        Returns:
            RawOptions with defaults filled in

        Raises:
            BadArgument: On undefined flags, missing values, invalid scheme
                or stray positional arguments
        """
        try:
            ns = self.build().parse_args(canonicalize(args))
        except BadArgument as ex:
            self.log("invalid arguments: %s" % (ex,), 1)
            raise

        return RawOptions(
            scheme=ns.scheme,
            url_prefix=ns.url_prefix,
            path=ns.path,
            address=ns.address,
            want_help=wants_usage(args),
            want_version=ns.want_version,
        )

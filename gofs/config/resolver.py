"""Serving-plan resolution for gofs.

Turns RawOptions into a ResolvedConfig: stats the handling path once,
splits it into directory and filename, derives the url prefix and
builds the access url.
"""

import os
import stat
from typing import IO, Callable, List, Optional, Tuple

from .errors import HelpRequested, PathNotFound, PathUnusable, VersionRequested
from .options import EarlyExit, RawOptions, ResolvedConfig
from .parsers import ArgvParser, wants_usage
from .usage import show_usage, show_version

# the scheme option is accepted but the url is always plain http
URL_SCHEME = "http"


def normalize_prefix(prefix: str) -> str:
    """Strip one leading and one trailing slash.

    Not iterative; "//share//" becomes "/share/".
    """
    if prefix.startswith("/"):
        prefix = prefix[1:]
    if prefix.endswith("/"):
        prefix = prefix[:-1]
    return prefix


def build_url(addr: str, prefix: str, filename: str) -> str:
    return "%s://%s/%s/%s" % (URL_SCHEME, addr, prefix, filename)


class ConfigResolver:
    """Resolve command-line input into a serving configuration."""

    def __init__(
        self,
        log_func: Callable[[str, int], None],
        home: Optional[str] = None,
        fo: Optional[IO[str]] = None,
    ):
        """Initialize resolver with logging function.

        Args:
            log_func: Function for logging messages (msg, level)
            home: Default handling path; the user's home directory if None
            fo: Stream for usage and version text; stdout if None
        """
        self.log = log_func
        self.fo = fo
        self.parser = ArgvParser(log_func, home)

    def _check_early_exit(
        self, argv: List[str]
    ) -> Tuple[Optional[EarlyExit], Optional[RawOptions]]:
        if wants_usage(argv[1:]):
            show_usage(argv[0] if argv else "gofs", self.parser.home, self.fo)
            return EarlyExit.HELP, None

        opts = self.parser.parse(argv[1:])
        if opts.want_version:
            show_version(self.fo)
            return EarlyExit.VERSION, opts

        return None, opts

    def detect_early_exit(self, argv: List[str]) -> Optional[EarlyExit]:
        """Check argv for help or version requests.

        Help tokens are matched against the raw arguments before any flag
        parsing; the version flag is checked after parsing. Usage or
        version text is printed when detected.

        Args:
            argv: Full argument vector, program path first

        Returns:
            EarlyExit.HELP, EarlyExit.VERSION, or None to continue

        Raises:
            BadArgument: If flag parsing fails
        """
        return self._check_early_exit(argv)[0]

    def resolve(self, opts: RawOptions) -> ResolvedConfig:
        """Validate the handling path and derive the serving plan.

        Args:
            opts: Parsed command-line options

        Returns:
            ResolvedConfig ready for the server

        Raises:
            PathNotFound: If the handling path does not exist
            PathUnusable: If stat fails for any other reason
        """
        try:
            st = os.stat(opts.path)
        except (FileNotFoundError, NotADirectoryError):
            nf = PathNotFound(opts.path)
            self.log(str(nf), 1)
            raise nf
        except OSError as ex:
            pu = PathUnusable(opts.path, ex.strerror or repr(ex))
            self.log(str(pu), 1)
            raise pu from ex

        addr = opts.address
        ap = os.path.abspath(opts.path)
        if os.sep == "/" and ap.startswith("//"):
            # posix abspath keeps a leading "//"
            ap = "/" + ap.lstrip("/")
        if stat.S_ISDIR(st.st_mode):
            dir_, filename = ap, ""
        else:
            dir_, filename = os.path.split(ap)

        if opts.url_prefix:
            prefix = normalize_prefix(opts.url_prefix)
        else:
            prefix = os.path.basename(dir_)

        url = build_url(addr, prefix, filename)
        if opts.scheme != URL_SCHEME:
            t = "scheme %r was requested but the url is served over %s"
            self.log(t % (opts.scheme, URL_SCHEME), 3)

        return ResolvedConfig(addr, dir_, filename, prefix, url)

    def parse_args(self, argv: List[str]) -> ResolvedConfig:
        """Run the whole pipeline: early exits, parsing, resolution.

        Raises:
            HelpRequested: Usage was shown
            VersionRequested: Version was shown
            BadArgument: Flag parsing failed
            PathNotFound: The handling path does not exist
            PathUnusable: The handling path cannot be inspected
        """
        early, opts = self._check_early_exit(argv)
        if early is EarlyExit.HELP:
            raise HelpRequested()
        if early is EarlyExit.VERSION:
            raise VersionRequested()

        assert opts
        return self.resolve(opts)

# coding: utf-8
"""Logging and console output helpers for gofs.

Components take a ``log(msg, c)`` callable where ``c`` is an ANSI color
digit (1 = error, 3 = warning, 2 = ok, 6 = debug) or a raw escape string.
"""

import re
import sys
import time
from typing import IO, Optional, Union

from .__init__ import VT100

ansi_re = re.compile("\033\\[[^mK]*[mK]")


def uprint(msg: str, fo: Optional[IO[str]] = None) -> None:
    fo = sys.stdout if fo is None else fo
    try:
        fo.write(msg)
    except UnicodeEncodeError:
        try:
            fo.write(msg.encode("utf-8", "replace").decode())
        except (ValueError, TypeError, UnicodeDecodeError, IndexError):
            fo.write(msg.encode("ascii", "replace").decode())


def nuprint(msg: str, fo: Optional[IO[str]] = None) -> None:
    uprint("%s\n" % (msg,), fo)


class Logger(object):
    """Named log sink writing timestamped lines to stderr."""

    def __init__(
        self, src: str, fo: Optional[IO[str]] = None, color: Optional[bool] = None
    ) -> None:
        self.src = src
        self.fo = fo
        self.color = VT100 if color is None else color

    def __call__(self, msg: str, c: Union[int, str] = 0) -> None:
        now = time.time()
        ts = "%s.%03d" % (
            time.strftime("%H:%M:%S", time.localtime(now)),
            int(now * 1000) % 1000,
        )

        if not c:
            fmt = "\033[36m%s \033[33m%-8s\033[0m %s\033[0m"
        elif isinstance(c, int):
            fmt = "\033[36m%s \033[33m%-8s\033[0m \033[3" + str(c) + "m%s\033[0m"
        else:
            fmt = "\033[36m%s \033[33m%-8s\033[0m " + c + "%s\033[0m"

        ln = fmt % (ts, self.src, msg)
        if not self.color:
            ln = ansi_re.sub("", ln)

        nuprint(ln, sys.stderr if self.fo is None else self.fo)

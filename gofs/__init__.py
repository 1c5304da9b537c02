# coding: utf-8
import os
import sys

VT100 = (
    os.environ.get("NO_COLOR", "").lower() in ("", "0", "false")
    and sys.stderr is not None
    and sys.stderr.isatty()
)

__all__ = ["VT100"]

# coding: utf-8
"""gofs entry point: resolve the serving plan and hand it to the server."""

import sys
from typing import Callable, List, Optional

from .config import ConfigError, ConfigResolver, EarlyExitRequest, ResolvedConfig
from .util import Logger, nuprint


def main(
    argv: Optional[List[str]] = None,
    serve: Optional[Callable[[ResolvedConfig], None]] = None,
) -> int:
    argv = sys.argv if argv is None else argv
    log = Logger("gofs")

    try:
        cfg = ConfigResolver(log).parse_args(argv)
    except (EarlyExitRequest, ConfigError) as ex:
        return ex.code

    log("serving dir %r file %r on %s" % (cfg.dir, cfg.filename, cfg.addr), 6)
    nuprint(cfg.url)

    if serve:
        serve(cfg)

    return 0


if __name__ == "__main__":
    sys.exit(main())

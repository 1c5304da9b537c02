"""Configuration resolution for gofs.

Modules:
- options: RawOptions, ResolvedConfig and defaults
- parsers: argv -> RawOptions
- usage: usage and version text
- resolver: RawOptions -> ResolvedConfig
- errors: terminal outcomes and their exit codes
"""

from .errors import (
    BadArgument,
    ConfigError,
    EarlyExitRequest,
    HelpRequested,
    PathNotFound,
    PathUnusable,
    VersionRequested,
)
from .options import EarlyExit, RawOptions, ResolvedConfig
from .parsers import ArgvParser, wants_usage
from .resolver import ConfigResolver, build_url, normalize_prefix

__all__ = [
    "BadArgument",
    "ConfigError",
    "EarlyExitRequest",
    "HelpRequested",
    "PathNotFound",
    "PathUnusable",
    "VersionRequested",
    "EarlyExit",
    "RawOptions",
    "ResolvedConfig",
    "ArgvParser",
    "wants_usage",
    "ConfigResolver",
    "build_url",
    "normalize_prefix",
]

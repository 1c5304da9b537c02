"""Terminal outcomes of configuration resolution.

Every exception carries the process exit code its outcome maps to.
"""


class EarlyExitRequest(Exception):
    """Resolution stopped on purpose; not an error."""

    code = 0


class HelpRequested(EarlyExitRequest):
    def __init__(self) -> None:
        super(HelpRequested, self).__init__("just show usage")


class VersionRequested(EarlyExitRequest):
    def __init__(self) -> None:
        super(VersionRequested, self).__init__("just show version")


class ConfigError(Exception):
    """Resolution failed; no serving configuration was produced."""

    code = 1


class PathNotFound(ConfigError):
    def __init__(self, path: str) -> None:
        super(PathNotFound, self).__init__("No such file or directory: %s" % (path,))
        self.path = path

    def __repr__(self) -> str:
        return "PathNotFound({!r})".format(self.path)


class BadArgument(ConfigError):
    code = 2


class PathUnusable(ConfigError):
    """The handling path exists (or may exist) but cannot be inspected."""

    def __init__(self, path: str, reason: str) -> None:
        super(PathUnusable, self).__init__("Cannot access %s: %s" % (path, reason))
        self.path = path
        self.reason = reason

    def __repr__(self) -> str:
        return "PathUnusable({!r}, {!r})".format(self.path, self.reason)

"""Usage and version text for gofs."""

from typing import IO, Optional

import jinja2

from ..__version__ import VERSION_SERIAL
from ..util import nuprint, uprint
from .options import DEF_ADDR, DEF_SCHEME

USAGE_TMPL = """
USAGE:
    {{ app_path }} [-h] [-v] [--url-prefix <prefix>] [-s {http, https, ftp}] [-a <address>] [-p <path>]

OPTIONS:
    -h, --help
                    show usage
    -v, --version
                    show version
    --url-prefix <prefix>
                    url prefix
    -s {http, https, ftp}, --scheme {http, https, ftp}
                    scheme name (default: "{{ default_scheme }}")
    -a <ip:port>, --address <ip:port>
                    listening address (default: "{{ default_addr }}")
    -p </path/to/file>,\t--path </path/to/file>
                    handing path or directory (default: "{{ default_path }}")

EXAMPLES:
    {{ app_path }} -a 10.0.13.120:8080 -p /opt/share0/releases/
    {{ app_path }} --url-prefix /share/releases/ -a 10.0.13.120:8080 -p /opt/share0/releases/
    {{ app_path }} --url-prefix /share/releases/ -a=10.0.13.120:8080 -p=/opt/share0/releases/
    {{ app_path }} --url-prefix=/share/releases/ --address 10.0.13.120:8080 --path /opt/share0/releases/
    {{ app_path }} --url-prefix=/share/releases/ --address=10.0.13.120:8080 --path=/opt/share0/releases/
"""

_j2env = jinja2.Environment(keep_trailing_newline=True)
_usage_tpl = _j2env.from_string(USAGE_TMPL)


def render_usage(
    app_path: str,
    default_path: str,
    default_scheme: str = DEF_SCHEME,
    default_addr: str = DEF_ADDR,
) -> str:
    return _usage_tpl.render(
        app_path=app_path,
        default_path=default_path,
        default_scheme=default_scheme,
        default_addr=default_addr,
    )


def show_usage(app_path: str, default_path: str, fo: Optional[IO[str]] = None) -> None:
    uprint(render_usage(app_path, default_path), fo)


def show_version(fo: Optional[IO[str]] = None) -> None:
    nuprint(VERSION_SERIAL, fo)

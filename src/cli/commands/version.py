"""Version reporting for the result-table CLI."""

from __future__ import annotations

import platform
import sys
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as pkg_version

from serde_msgspec import dumps_json

_DEPENDENCIES = ("pyarrow", "msgspec", "sqlglot", "cyclopts", "rich")


def get_version() -> str:
    """Get the result-table package version string.

    Returns
    -------
    str
        Version string, or "0.0.0-dev" if not installed.
    """
    return _package_version("result-table") or "0.0.0-dev"


def get_version_info() -> dict[str, object]:
    """Get detailed version information.

    Returns
    -------
    dict[str, object]
        Structured version payload.
    """
    return {
        "result-table": get_version(),
        "python": sys.version.split()[0],
        "platform": platform.platform(),
        "dependencies": {name: _package_version(name) for name in _DEPENDENCIES},
    }


def version_command() -> int:
    """Show version and dependency information.

    Returns
    -------
    int
        Exit status code.
    """
    payload = dumps_json(get_version_info(), pretty=True)
    sys.stdout.write(payload.decode() + "\n")
    return 0


def _package_version(name: str) -> str | None:
    try:
        return pkg_version(name)
    except PackageNotFoundError:
        return None

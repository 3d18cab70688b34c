"""
Version helpers for account-address.

Keeps a static __version__ (PEP 440); when the package is installed the
distribution metadata wins so wheels and editable installs agree.
"""

from __future__ import annotations

DEFAULT_VERSION = "0.1.0"
DIST_NAME = "account-address"


def _dist_version() -> str:
    try:
        from importlib.metadata import PackageNotFoundError, version
    except ImportError:  # pragma: no cover
        return DEFAULT_VERSION
    try:
        return version(DIST_NAME)
    except PackageNotFoundError:
        return DEFAULT_VERSION


__version__ = _dist_version()


__all__ = ["__version__", "DEFAULT_VERSION", "DIST_NAME"]

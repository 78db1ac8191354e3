"""
Version string including build information when available.

``_build_info.py`` is generated by setup.py during a build from a git
checkout; source trees and sdists without git metadata do not have it.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("sigctl")
except PackageNotFoundError:
    __version__ = "0.1.0-dev"


def version_string(prog: str = "sigctl") -> str:
    """Return "<prog> <version>" plus the short commit hash of the build."""
    try:
        from . import _build_info  # type: ignore[attr-defined]
    except ImportError:
        return f"{prog} {__version__}"

    suffix = "*" if getattr(_build_info, "MODIFIED", False) else ""
    return f"{prog} {__version__} ({_build_info.COMMIT_SHORT}{suffix})"

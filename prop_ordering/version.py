from __future__ import annotations

from importlib import metadata


def tool_version() -> str:
    """
    Version of the installed distribution.
    Does not depend on other modules (to avoid cycles).
    """
    for dist in ("prop-ordering", "prop_ordering"):
        try:
            return metadata.version(dist)
        except metadata.PackageNotFoundError:
            continue
    return "0.0.0"

__all__ = ["tool_version"]

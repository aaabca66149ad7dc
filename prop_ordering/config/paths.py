from __future__ import annotations

from pathlib import Path
from typing import Optional

# Single source of truth for configuration file names, in lookup order.
CONFIG_FILES = ("prop-ordering.yaml", ".prop-ordering.yaml")


def find_config_file(root: Path) -> Optional[Path]:
    """First configuration file present in ``root``, or None."""
    for name in CONFIG_FILES:
        candidate = root / name
        if candidate.is_file():
            return candidate
    return None


__all__ = ["CONFIG_FILES", "find_config_file"]

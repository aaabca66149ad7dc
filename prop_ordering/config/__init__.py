from __future__ import annotations

from .model import Config, DEFAULT_EXTENSIONS
from .paths import CONFIG_FILES, find_config_file
from .typed import load_typed

__all__ = ["Config", "DEFAULT_EXTENSIONS", "CONFIG_FILES", "find_config_file", "load_typed"]

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from ..errors import ConfigError
from ..rules import get_rule_class
from ..rules.base import OrderingRule
from .model import Config, rule_options
from .paths import find_config_file
from .presets import preset_rules
from .typed import load_typed

logger = logging.getLogger(__name__)

_yaml = YAML(typ="safe")


def _read_yaml_map(path: Path) -> dict:
    """Read a YAML file that must hold a mapping (empty file → {})."""
    try:
        raw = _yaml.load(path.read_text(encoding="utf-8")) or {}
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e
    except YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    if not isinstance(raw, dict):
        raise ConfigError(f"YAML must be a mapping: {path}")
    return raw


def load_config(root: Path, config_path: Optional[Path] = None) -> Config:
    """
    Load the project configuration.

    Args:
        root: Project root, searched for a config file when ``config_path`` is None
        config_path: Explicit config file

    Returns:
        Config; defaults (recommended preset) when no file exists
    """
    path = config_path if config_path is not None else find_config_file(root)
    if path is None:
        logger.debug("No config file in %s; using defaults", root)
        return Config()
    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    logger.debug("Loading config from %s", path)
    return load_typed(Config, _read_yaml_map(path))


def resolve_rules(config: Config) -> List[OrderingRule]:
    """
    Activate the rules of a configuration: preset first, then the
    `rules:` section, entry by entry. Rules at severity `off` are dropped.

    Raises:
        ConfigError: Unknown rule or invalid options
    """
    settings = preset_rules(config.extends)
    for name, setting in config.rules.items():
        settings[name] = rule_options(setting)

    rules: List[OrderingRule] = []
    for name in sorted(settings):
        rule = get_rule_class(name).bind(settings[name])
        if rule.severity == "off":
            continue
        rules.append(rule)

    logger.debug("Active rules: %s", [r.name for r in rules])
    return rules


__all__ = ["load_config", "resolve_rules"]

"""Configuration loading and schema.

- YAML-first configuration under configs/*.yaml
- Strict ${ENV_VAR} expansion (missing/empty env vars are errors)
"""

from __future__ import annotations

from lisbon_guide.config.loader import load_config, resolve_profile_configs
from lisbon_guide.config.model import GuideConfig, UiStrings, parse_config
from lisbon_guide.core.errors import ConfigError

__all__ = [
    "ConfigError",
    "GuideConfig",
    "UiStrings",
    "load_config",
    "parse_config",
    "resolve_profile_configs",
]

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

from lisbon_guide.core.errors import ConfigError


_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass(frozen=True, slots=True)
class UiStrings:
    """User-facing text used by the console renderer."""

    categories_title: str = "Категории"
    not_found: str = "Место не найдено"
    empty_category: str = "В этой категории пока нет мест"
    rating_label: str = "Рейтинг"
    prompt: str = "> "


@dataclass(frozen=True, slots=True)
class GuideConfig:
    log_level: str = "INFO"
    seed_path: Path | None = None
    intent_queue_size: int = 64
    strings: UiStrings = field(default_factory=UiStrings)


def _section(raw: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    value = raw.get(key)
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigError("must be a mapping (dict)", path=key)
    return value


def _str(section: Mapping[str, Any], key: str, default: str, *, path: str) -> str:
    value = section.get(key, default)
    if not isinstance(value, str):
        raise ConfigError("must be a string", path=f"{path}.{key}")
    return value


def parse_config(raw: Mapping[str, Any], *, base_dir: Path | None = None) -> GuideConfig:
    """Build a typed config from the expanded YAML mapping.

    Relative `catalog.seed_path` values are resolved against `base_dir`.
    """

    base = GuideConfig()

    logging_raw = _section(raw, "logging")
    level = str(logging_raw.get("level", base.log_level)).upper()
    if level not in _LOG_LEVELS:
        raise ConfigError(f"unknown level {level!r}", path="logging.level")

    catalog_raw = _section(raw, "catalog")
    seed_path: Path | None = None
    seed_raw = catalog_raw.get("seed_path")
    if seed_raw is not None and seed_raw != "":
        if not isinstance(seed_raw, str):
            raise ConfigError("must be a string path", path="catalog.seed_path")
        seed_path = Path(seed_raw).expanduser()
        if not seed_path.is_absolute() and base_dir is not None:
            seed_path = base_dir / seed_path

    nav_raw = _section(raw, "navigation")
    try:
        queue_size = int(nav_raw.get("intent_queue_size", base.intent_queue_size))
    except (TypeError, ValueError) as e:
        raise ConfigError("must be an integer", path="navigation.intent_queue_size") from e
    if queue_size < 1:
        raise ConfigError("must be >= 1", path="navigation.intent_queue_size")

    ui_raw = _section(raw, "ui")
    defaults = base.strings
    strings = UiStrings(
        categories_title=_str(ui_raw, "categories_title", defaults.categories_title, path="ui"),
        not_found=_str(ui_raw, "not_found", defaults.not_found, path="ui"),
        empty_category=_str(ui_raw, "empty_category", defaults.empty_category, path="ui"),
        rating_label=_str(ui_raw, "rating_label", defaults.rating_label, path="ui"),
        prompt=_str(ui_raw, "prompt", defaults.prompt, path="ui"),
    )

    return GuideConfig(
        log_level=level,
        seed_path=seed_path,
        intent_queue_size=queue_size,
        strings=strings,
    )

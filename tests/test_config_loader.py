from __future__ import annotations

from pathlib import Path

import pytest

from lisbon_guide.config.loader import load_config, resolve_profile_configs
from lisbon_guide.core.errors import ConfigError


def test_load_config_expands_env_vars(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GUIDE_SEED", "/data/seed.yaml")

    cfg_path = tmp_path / "app.yaml"
    cfg_path.write_text(
        """
catalog:
  seed_path: ${GUIDE_SEED}
nested:
  arr:
    - at-${GUIDE_SEED}
""".lstrip(),
        encoding="utf-8",
    )

    cfg = load_config(cfg_path, load_dotenv_file=False)
    assert cfg["catalog"]["seed_path"] == "/data/seed.yaml"
    assert cfg["nested"]["arr"][0] == "at-/data/seed.yaml"


def test_load_config_missing_env_var_is_error(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("GUIDE_SEED", raising=False)

    cfg_path = tmp_path / "app.yaml"
    cfg_path.write_text("catalog:\n  seed_path: ${GUIDE_SEED}\n", encoding="utf-8")

    with pytest.raises(ConfigError) as ei:
        load_config(cfg_path, load_dotenv_file=False)

    msg = str(ei.value)
    assert "GUIDE_SEED" in msg
    assert "missing" in msg
    assert "catalog.seed_path" in msg


def test_load_config_empty_env_var_is_error(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GUIDE_SEED", "")

    cfg_path = tmp_path / "app.yaml"
    cfg_path.write_text("catalog:\n  seed_path: ${GUIDE_SEED}\n", encoding="utf-8")

    with pytest.raises(ConfigError) as ei:
        load_config(cfg_path, load_dotenv_file=False)

    assert "empty" in str(ei.value)


def test_load_config_dotenv_does_not_override(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GUIDE_TITLE", "from-env")
    dotenv = tmp_path / ".env"
    dotenv.write_text("GUIDE_TITLE=from-dotenv\n", encoding="utf-8")

    cfg_path = tmp_path / "app.yaml"
    cfg_path.write_text("ui:\n  categories_title: ${GUIDE_TITLE}\n", encoding="utf-8")

    cfg = load_config(cfg_path, dotenv_path=dotenv)
    assert cfg["ui"]["categories_title"] == "from-env"


def test_dev_profile_overlays_app(tmp_path: Path) -> None:
    (tmp_path / "app.yaml").write_text(
        "logging:\n  level: INFO\nui:\n  prompt: '> '\n  rating_label: Рейтинг\n",
        encoding="utf-8",
    )
    (tmp_path / "dev.yaml").write_text("logging:\n  level: DEBUG\nui:\n  prompt: 'dev> '\n", encoding="utf-8")

    paths = resolve_profile_configs(profile="dev", configs_dir=tmp_path)
    cfg = load_config(paths, load_dotenv_file=False)

    assert cfg["logging"]["level"] == "DEBUG"
    assert cfg["ui"] == {"prompt": "dev> ", "rating_label": "Рейтинг"}


def test_unknown_profile_is_error(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        resolve_profile_configs(profile="prod", configs_dir=tmp_path)


def test_missing_config_file_is_error(tmp_path: Path) -> None:
    with pytest.raises(ConfigError) as ei:
        load_config(tmp_path / "nope.yaml", load_dotenv_file=False)

    assert "not found" in str(ei.value)


def test_non_mapping_root_is_error(tmp_path: Path) -> None:
    cfg_path = tmp_path / "app.yaml"
    cfg_path.write_text("- a\n- b\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(cfg_path, load_dotenv_file=False)


def test_unresolved_env_error_names_source_files(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("GUIDE_PROMPT", raising=False)
    app_yaml = tmp_path / "app.yaml"
    dev_yaml = tmp_path / "dev.yaml"
    app_yaml.write_text("logging:\n  level: INFO\n", encoding="utf-8")
    dev_yaml.write_text("ui:\n  prompt: ${GUIDE_PROMPT}\n", encoding="utf-8")

    with pytest.raises(ConfigError) as ei:
        load_config([app_yaml, dev_yaml], load_dotenv_file=False)

    msg = str(ei.value)
    assert "GUIDE_PROMPT (missing) at ui.prompt" in msg
    assert str(dev_yaml) in msg

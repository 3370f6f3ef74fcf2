from __future__ import annotations

import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, MutableMapping, Sequence

import yaml
from dotenv import load_dotenv

from lisbon_guide.core.errors import ConfigError


_ENV_PLACEHOLDER_RE = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)\}")


@dataclass(frozen=True, slots=True)
class _UnresolvedEnvRef:
    var_name: str
    source_file: str
    key_path: str
    reason: str  # "missing" | "empty"


def _deep_merge(base: MutableMapping[str, Any], overlay: Mapping[str, Any]) -> MutableMapping[str, Any]:
    """Deep-merge two mappings: dicts merge recursively, other values are replaced."""

    for k, v in overlay.items():
        if isinstance(v, Mapping) and isinstance(base.get(k), Mapping):
            base[k] = _deep_merge(dict(base[k]), v)  # type: ignore[arg-type]
        else:
            base[k] = v
    return base


def _load_yaml(path: Path) -> Any:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    return yaml.safe_load(text)


def _expand_env_in_obj(
    obj: Any,
    *,
    source_file: str,
    key_path: str,
    unresolved: list[_UnresolvedEnvRef],
) -> Any:
    if isinstance(obj, str):
        def repl(match: re.Match[str]) -> str:
            name = match.group(1)
            value = os.getenv(name)
            if value is None or value == "":
                unresolved.append(
                    _UnresolvedEnvRef(
                        var_name=name,
                        source_file=source_file,
                        key_path=key_path,
                        reason="missing" if value is None else "empty",
                    )
                )
                return match.group(0)
            return value

        return _ENV_PLACEHOLDER_RE.sub(repl, obj)

    if isinstance(obj, Mapping):
        return {
            str(k): _expand_env_in_obj(
                v,
                source_file=source_file,
                key_path=f"{key_path}.{k}" if key_path else str(k),
                unresolved=unresolved,
            )
            for k, v in obj.items()
        }

    if isinstance(obj, list):
        return [
            _expand_env_in_obj(
                v,
                source_file=source_file,
                key_path=f"{key_path}[{i}]" if key_path else f"[{i}]",
                unresolved=unresolved,
            )
            for i, v in enumerate(obj)
        ]

    return obj


def load_config(
    paths: Path | Sequence[Path],
    *,
    load_dotenv_file: bool = True,
    dotenv_path: Path | None = None,
) -> dict[str, Any]:
    """Load YAML config files with strict ${ENV_VAR} expansion.

    Args:
        paths: One or more YAML files. When multiple are provided, they are merged
            (later files override earlier ones).
        load_dotenv_file: Whether to load a .env file before expansion.
        dotenv_path: Optional explicit .env path. When omitted, attempts to load
            a `.env` in the current working directory.

    Raises:
        ConfigError: If a file is missing, YAML is invalid, or env expansion is unresolved.
    """

    file_list: list[Path] = [paths] if isinstance(paths, Path) else list(paths)
    if not file_list:
        raise ConfigError("No config files provided")

    if load_dotenv_file:
        # Do not override already-set environment variables.
        load_dotenv(dotenv_path or Path.cwd() / ".env", override=False)

    merged: dict[str, Any] = {}
    for p in file_list:
        if not p.exists():
            raise ConfigError("Config file not found", path=str(p))
        try:
            fragment = _load_yaml(p)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Failed to read YAML config: {e}", path=str(p)) from e

        if fragment is None:
            fragment = {}
        if not isinstance(fragment, Mapping):
            raise ConfigError("Top-level YAML must be a mapping/dict", path=str(p))

        merged = dict(_deep_merge(merged, fragment))

    unresolved: list[_UnresolvedEnvRef] = []
    expanded = _expand_env_in_obj(
        merged,
        source_file=",".join(str(p) for p in file_list),
        key_path="",
        unresolved=unresolved,
    )

    if unresolved:
        lines: list[str] = ["Unresolved environment variables in config:"]
        for ref in unresolved:
            lines.append(f"- {ref.var_name} ({ref.reason}) at {ref.key_path or '<root>'} in {ref.source_file}")
        raise ConfigError("\n".join(lines))

    return expanded


def resolve_profile_configs(*, profile: str, configs_dir: Path) -> list[Path]:
    """Resolve config file list for a given profile.

    - profile=app -> [configs/app.yaml]
    - profile=dev -> [configs/app.yaml, configs/dev.yaml]
    """

    if profile == "app":
        return [configs_dir / "app.yaml"]
    if profile == "dev":
        return [configs_dir / "app.yaml", configs_dir / "dev.yaml"]
    raise ConfigError(f"Unknown profile: {profile}")

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Sequence, TextIO

from lisbon_guide.app import GuideApp, build_store
from lisbon_guide.config.loader import load_config, resolve_profile_configs
from lisbon_guide.config.model import GuideConfig, parse_config
from lisbon_guide.core.errors import GuideError
from lisbon_guide.observability.logging import configure_logging
from lisbon_guide.ui.console import GoBack, Invalid, Quit, SelectCategory, SelectPlace, parse_command, render_text


logger = logging.getLogger(__name__)

_COMMANDS = {"run", "show", "categories", "print-config"}
_GLOBAL_VALUE_OPTIONS = {"--log-level", "--config", "--profile"}
_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lisbon-guide",
        description="Browse places of interest in Lisbon by category",
    )

    parser.add_argument(
        "--log-level",
        default=None,
        type=str.upper,
        choices=_LOG_LEVELS,
        help="Logging level (e.g. DEBUG, INFO, WARNING); overrides logging.level from config",
    )

    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "--config",
        type=Path,
        help="Path to a YAML config file (skips profile resolution)",
    )
    group.add_argument(
        "--profile",
        choices=["app", "dev"],
        default="app",
        help="Config profile under ./configs (app loads app.yaml; dev overlays dev.yaml)",
    )

    sub = parser.add_subparsers(dest="command")

    run_p = sub.add_parser("run", help="Browse interactively on stdin/stdout")
    run_p.add_argument("--route", default=None, help="Start at a deep link, e.g. places/Парки or details/2")
    run_p.set_defaults(command="run")

    show_p = sub.add_parser("show", help="Print a single screen and exit")
    show_p.add_argument("route", help="categories | places/<category> | details/<id>")
    show_p.set_defaults(command="show")

    cat_p = sub.add_parser("categories", help="Print the category list")
    cat_p.set_defaults(command="categories")

    print_p = sub.add_parser("print-config", help="Load and print the expanded config")
    print_p.set_defaults(command="print-config")

    return parser


def _load_guide_config(ns: argparse.Namespace) -> tuple[dict[str, Any], GuideConfig]:
    configs_dir = Path.cwd() / "configs"
    if ns.config is not None:
        config_paths = [ns.config]
    elif configs_dir.exists():
        config_paths = resolve_profile_configs(profile=ns.profile, configs_dir=configs_dir)
    else:
        logger.info("config_defaults", extra={"reason": "no ./configs directory"})
        return {}, GuideConfig()

    raw = load_config(config_paths)
    cfg = parse_config(raw, base_dir=Path.cwd())
    logger.info("config_loaded", extra={"config_files": [str(p) for p in config_paths]})
    return raw, cfg


def _write(out: TextIO, lines: list[str]) -> None:
    out.write("\n".join(lines))
    out.write("\n")


def run_console(app: GuideApp, *, stdin: TextIO, stdout: TextIO) -> int:
    """Read commands line by line until EOF or quit, repainting after each one."""

    strings = app.config.strings
    app.subscribe(lambda state: _write(stdout, ["", *render_text(state, strings=strings)]))
    _write(stdout, render_text(app.render_state(), strings=strings))

    while True:
        stdout.write(strings.prompt)
        stdout.flush()
        line = stdin.readline()
        if not line:
            return 0

        cmd = parse_command(line, app.render_state())
        if isinstance(cmd, Quit):
            return 0
        if isinstance(cmd, GoBack):
            app.go_back()
        elif isinstance(cmd, SelectCategory):
            app.select_category(cmd.category)
        elif isinstance(cmd, SelectPlace):
            app.select_place(cmd.place_id)
        elif isinstance(cmd, Invalid):
            _write(stdout, [cmd.reason])


def _with_default_command(argv_list: list[str]) -> list[str]:
    """Insert `run` before the first token that is not a global option.

    Only that first positional token can name a subcommand; option values such
    as `--route categories` are skipped over.
    """

    i = 0
    while i < len(argv_list):
        tok = argv_list[i]
        if tok in {"-h", "--help"}:
            return argv_list
        if tok in _GLOBAL_VALUE_OPTIONS:
            i += 2
            continue
        if tok.startswith("--") and tok.split("=", 1)[0] in _GLOBAL_VALUE_OPTIONS:
            i += 1
            continue
        if not tok.startswith("-") and tok in _COMMANDS:
            return argv_list
        break
    return [*argv_list[:i], "run", *argv_list[i:]]


def main(argv: Sequence[str] | None = None, *, stdin: TextIO | None = None, stdout: TextIO | None = None) -> int:
    """CLI entrypoint referenced by pyproject.toml."""

    argv_list = list(argv) if argv is not None else sys.argv[1:]
    out = stdout or sys.stdout

    argv_list = _with_default_command(argv_list)

    parser = _build_parser()
    try:
        ns = parser.parse_args(argv_list)
    except SystemExit as e:
        # argparse has already printed help/usage to stdout/stderr.
        code = e.code
        return int(code) if isinstance(code, int) else 1

    configure_logging(level=ns.log_level or "INFO")

    try:
        raw, cfg = _load_guide_config(ns)
        if ns.log_level is None:
            configure_logging(level=cfg.log_level)

        if ns.command == "print-config":
            _write(out, [json.dumps(raw, ensure_ascii=False, indent=2)])
            return 0

        app = GuideApp(build_store(cfg), config=cfg)

        if ns.command == "categories":
            _write(out, list(app.categories.activate().categories))
            return 0

        if ns.command == "show":
            app.open_route(ns.route)
            _write(out, render_text(app.render_state(), strings=cfg.strings))
            return 0

        if ns.route:
            app.open_route(ns.route)
        return run_console(app, stdin=stdin or sys.stdin, stdout=out)

    except GuideError as e:
        logger.error("startup_error", extra={"error": str(e), "error_type": type(e).__name__})
        sys.stderr.write(f"{type(e).__name__}: {e}\n")
        return 2
    except Exception as e:  # noqa: BLE001
        logger.exception("fatal_error")
        sys.stderr.write(f"Fatal error: {e}\n")
        return 1

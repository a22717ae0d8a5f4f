"""Shared utilities for the dockcomp CLI."""

import logging
import os
import sys
from pathlib import Path

import yaml
from rich.console import Console

console = Console()

log = logging.getLogger("dockcomp")

DEFAULTS = {
    "docker_binary": "docker",
    "timeout": None,
    "log_level": "WARNING",
    "log_file": None,
}

ENV_VARS = {
    "docker_binary": "DOCKCOMP_DOCKER",
    "timeout": "DOCKCOMP_TIMEOUT",
    "log_level": "DOCKCOMP_LOG_LEVEL",
    "log_file": "DOCKCOMP_LOG_FILE",
}


def get_config_path() -> Path:
    """Read DOCKCOMP_CONFIG or fall back to ~/.config/dockcomp/config.yml."""
    env = os.environ.get("DOCKCOMP_CONFIG", "")
    if env:
        return Path(env).expanduser()
    return Path.home() / ".config" / "dockcomp" / "config.yml"


def load_config_file(path: Path | None = None) -> dict:
    """Load the YAML config file. Returns empty dict when missing or unusable."""
    path = path or get_config_path()
    if not path.is_file():
        return {}
    try:
        with open(path) as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        log.warning("Ignoring config %s: %s", path, e)
        return {}
    if not isinstance(data, dict):
        log.warning("Ignoring config %s: expected a mapping", path)
        return {}
    return data


def load_settings(path: Path | None = None) -> dict:
    """Merge defaults, the config file and environment overrides."""
    settings = dict(DEFAULTS)
    file_conf = load_config_file(path)
    for key in DEFAULTS:
        if file_conf.get(key) is not None:
            settings[key] = file_conf[key]
        env = os.environ.get(ENV_VARS[key], "")
        if env:
            settings[key] = env
    settings["timeout"] = _parse_timeout(settings["timeout"])
    return settings


def _parse_timeout(value):
    if value in (None, ""):
        return None
    try:
        timeout = float(value)
    except (TypeError, ValueError):
        log.warning("Ignoring invalid timeout %r", value)
        return None
    return timeout if timeout > 0 else None


def setup_logging(level: str = "WARNING", log_file: str | None = None) -> None:
    """Send log records to ``log_file`` or stderr; stdout carries candidates."""
    numeric = logging.getLevelName(str(level).upper())
    if not isinstance(numeric, int):
        numeric = logging.WARNING
    handler_args = {"filename": log_file} if log_file else {"stream": sys.stderr}
    logging.basicConfig(
        level=numeric,
        format="%(levelname)s: %(message)s",
        force=True,
        **handler_args,
    )

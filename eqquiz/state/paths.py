"""Managed path layout."""

from pathlib import Path

from eqquiz.constants import APP_NAME


def config_dir():
    return Path.home() / ".config" / APP_NAME


def state_dir():
    return Path.home() / ".local" / "state" / APP_NAME


def logs_dir():
    return state_dir() / "logs"


def renders_dir():
    return Path.home() / ".local" / "share" / APP_NAME / "renders"


def config_file():
    return config_dir() / "config.json"


def state_file():
    return state_dir() / "state.json"


def lock_file():
    return state_dir() / "lock"


def log_file():
    return logs_dir() / f"{APP_NAME}.log"


def ensure_dirs():
    for p in [config_dir(), state_dir(), logs_dir()]:
        p.mkdir(parents=True, exist_ok=True)

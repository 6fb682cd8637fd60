"""User settings stored as JSON under the config dir."""

import json
import logging

from eqquiz.state.paths import config_file

log = logging.getLogger(__name__)


def default_config():
    return {
        "strict_decoys": False,
        "max_attempts": None,
        "filter_q": 1.0,
    }


def _is_strict_decoys(value):
    return isinstance(value, bool)


def _is_max_attempts(value):
    if value is None:
        return True
    return isinstance(value, int) and not isinstance(value, bool) and value >= 1


def _is_filter_q(value):
    return isinstance(value, (int, float)) and not isinstance(value, bool) and value > 0


VALIDATORS = {
    "strict_decoys": _is_strict_decoys,
    "max_attempts": _is_max_attempts,
    "filter_q": _is_filter_q,
}


def load_config(path=None):
    cf = path or config_file()
    config = default_config()
    if not cf.exists():
        return config
    try:
        with cf.open("r") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as exc:
        log.warning("ignoring unreadable config %s (%s)", cf, exc)
        return config
    if not isinstance(data, dict):
        log.warning("ignoring config %s: expected a JSON object", cf)
        return config
    for key, valid in VALIDATORS.items():
        if key not in data:
            continue
        if not valid(data[key]):
            log.warning("ignoring config %s: bad value %r, using %r", key, data[key], config[key])
            continue
        config[key] = data[key]
    config["filter_q"] = float(config["filter_q"])
    return config

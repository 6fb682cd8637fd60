"""Persistent game state."""

from contextlib import contextmanager
from datetime import datetime, UTC
import fcntl
import json
import logging

from eqquiz.core.models import QuizRound
from eqquiz.state.paths import ensure_dirs, lock_file, state_file

log = logging.getLogger(__name__)


def _now_iso():
    return datetime.now(UTC).isoformat()


def default_state():
    return {
        "version": 1,
        "round": None,
        "resolved": False,
        "attempts": 0,
        "score": {
            "rounds": 0,
            "solved": 0,
            "wrong_guesses": 0,
        },
        "updated_at": _now_iso(),
    }


def load_state():
    ensure_dirs()
    sf = state_file()
    if not sf.exists():
        return default_state()
    try:
        with sf.open("r") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as exc:
        log.warning("unreadable state file %s (%s); starting fresh", sf, exc)
        return default_state()
    if not isinstance(data, dict):
        log.warning("ignoring state file %s: expected a JSON object", sf)
        return default_state()
    base = default_state()
    base.update(data)
    if not isinstance(base["score"], dict):
        base["score"] = default_state()["score"]
    return base


def _atomic_write_json(path, payload):
    tmp = path.with_suffix(".tmp")
    with tmp.open("w") as f:
        json.dump(payload, f, indent=2)
    tmp.replace(path)


def save_state(state):
    ensure_dirs()
    state = dict(state)
    state["updated_at"] = _now_iso()
    _atomic_write_json(state_file(), state)
    return state


@contextmanager
def locked_state():
    """Hold the state lock, yield the loaded state, save it on clean exit.

    Commands mutate the yielded dict in place. An exception inside the
    block leaves the stored state untouched.
    """
    ensure_dirs()
    with lock_file().open("a") as lf:
        fcntl.flock(lf.fileno(), fcntl.LOCK_EX)
        try:
            state = load_state()
            yield state
            save_state(state)
        finally:
            fcntl.flock(lf.fileno(), fcntl.LOCK_UN)


def current_round(state):
    data = state.get("round")
    if not data:
        return None
    try:
        return QuizRound.from_dict(data)
    except (KeyError, TypeError, ValueError) as exc:
        log.warning("discarding malformed stored round (%r)", exc)
        return None


def start_round(state, quiz_round):
    """Replace the stored round wholesale, updating ``state`` in place."""
    state["round"] = quiz_round.to_dict()
    state["resolved"] = False
    state["attempts"] = 0
    score = dict(state.get("score") or default_state()["score"])
    score["rounds"] = score.get("rounds", 0) + 1
    state["score"] = score
    return state

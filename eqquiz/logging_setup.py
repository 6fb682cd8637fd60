"""Logging setup for the CLI."""

import logging

from eqquiz.state.paths import log_file


def setup_logging(verbosity=0, to_file=True):
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG

    console = logging.StreamHandler()
    console.setLevel(level)
    console.setFormatter(
        logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s", datefmt="%H:%M:%S")
    )
    handlers = [console]

    if to_file:
        path = log_file()
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path, delay=True)
        file_handler.setLevel(logging.INFO)
        file_handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s"))
        handlers.append(file_handler)
        level = min(level, logging.INFO)

    logging.basicConfig(level=level, handlers=handlers, force=True)
    logging.debug("logging initialized with verbosity=%d", verbosity)

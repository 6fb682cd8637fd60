"""Render command: write the equalized (or original) track."""

import logging
from pathlib import Path
import wave

from eqquiz.config import load_config
from eqquiz.constants import BASELINE, ExitCode
from eqquiz.core.dsp import apply_equalization, read_wav, write_wav
from eqquiz.state.paths import renders_dir
from eqquiz.state.store import current_round, load_state

log = logging.getLogger(__name__)


def run(args):
    input_path = Path(args.input).expanduser()
    if not input_path.exists() or not input_path.is_file():
        print(f"error: audio file not found: {input_path}")
        return ExitCode.USAGE

    if args.original:
        levels = BASELINE
        suffix = "original"
    else:
        quiz_round = current_round(load_state())
        if quiz_round is None:
            print("error: no active round (run `eqquiz new`)")
            return ExitCode.NO_ROUND
        levels = quiz_round.target
        suffix = "eq"

    outdir = Path(args.outdir).expanduser() if args.outdir else renders_dir()
    outdir.mkdir(parents=True, exist_ok=True)
    out_path = outdir / f"{input_path.stem}_{suffix}.wav"

    config = load_config()
    try:
        samples, sample_rate = read_wav(input_path)
        equalized = apply_equalization(samples, sample_rate, levels, q=config["filter_q"])
        write_wav(out_path, equalized, sample_rate)
    except (OSError, ValueError, EOFError, wave.Error) as exc:
        print(f"error: render failed: {exc}")
        return ExitCode.RUNTIME_ERROR

    log.info("rendered %s (%s)", out_path, suffix)
    print(f"wrote {out_path}")
    return ExitCode.OK

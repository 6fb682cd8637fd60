"""Slider panel rendering and recovery.

Geometry mirrors the equalizer panel graphic: the 0 dB knob rests at
y=67 on a 90px track spanning -12..+12 dB, and the knob is drawn 5px
above its centre line.
"""

from eqquiz.constants import EQ_FREQUENCIES, GAIN_LEVELS
from eqquiz.core.models import as_vector

POSITION_Y0 = 67
TRACK_HEIGHT = 90
KNOB_OFFSET = 5
MAX_GAIN_DB = 12

_PX_PER_DB = TRACK_HEIGHT / 2 / MAX_GAIN_DB


def slider_position(level):
    return POSITION_Y0 - level * _PX_PER_DB - KNOB_OFFSET


def level_from_position(y):
    return int(round((POSITION_Y0 - KNOB_OFFSET - y) / _PX_PER_DB))


def band_label(freq):
    if freq >= 1000:
        return f"{freq // 1000}k"
    return str(freq)


def slider_state(equalization):
    """Knob attributes for each band, carrying the level for later recovery."""
    return [
        {"band": freq, "y": slider_position(level), "data-level": str(level)}
        for freq, level in zip(EQ_FREQUENCIES, equalization)
    ]


def equalization_from_slider_state(state):
    return as_vector(int(knob["data-level"]) for knob in state)


def render_panel(equalization, title=""):
    """Return a text panel with one column per band and one row per level.

    Knob rows are placed from their slider positions, so the panel shows
    exactly what the knob state encodes.
    """
    width = 4
    knobs = slider_state(equalization)
    lines = []
    if title:
        lines.append(title)
    lines.append("     " + "".join(band_label(k["band"]).rjust(width) for k in knobs))
    for row_level in sorted(GAIN_LEVELS, reverse=True):
        cells = []
        for knob in knobs:
            shown = level_from_position(knob["y"])
            cells.append(("o" if shown == row_level else "|").rjust(width))
        lines.append(f"{row_level:+4d} " + "".join(cells))
    return "\n".join(lines)

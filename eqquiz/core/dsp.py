"""DSP-related helpers: peaking filter chain and WAV I/O."""

import logging
import math
import wave

import numpy as np
from scipy import signal

from eqquiz.constants import BAND_COUNT, EQ_FREQUENCIES

log = logging.getLogger(__name__)

DEFAULT_Q = 1.0


def compute_preamp_db(levels, extra_headroom_db=1.0):
    """Return safety preamp from max positive band gain.

    Policy:
      preamp_db = -(max_positive_gain + extra_headroom_db)
    """
    if not levels:
        return 0.0
    max_gain = max(levels)
    if max_gain <= 0:
        return 0.0
    return -(max_gain + extra_headroom_db)


def peaking_sos(freq, gain_db, sample_rate, q=DEFAULT_Q):
    """Second-order section of an RBJ peaking filter.

    Bands at or above Nyquist collapse to an identity section.
    """
    if gain_db == 0 or freq >= sample_rate / 2:
        return np.array([1.0, 0.0, 0.0, 1.0, 0.0, 0.0])

    a = 10 ** (gain_db / 40.0)
    w0 = 2 * math.pi * freq / sample_rate
    alpha = math.sin(w0) / (2 * q)
    cos_w0 = math.cos(w0)

    b = [1 + alpha * a, -2 * cos_w0, 1 - alpha * a]
    den = [1 + alpha / a, -2 * cos_w0, 1 - alpha / a]
    return np.array([b[0], b[1], b[2], den[0], den[1], den[2]]) / den[0]


def equalizer_sos(levels, sample_rate, q=DEFAULT_Q):
    if len(levels) != BAND_COUNT:
        raise ValueError(f"expected {BAND_COUNT} band levels, got {len(levels)}")
    return np.vstack(
        [peaking_sos(freq, level, sample_rate, q) for freq, level in zip(EQ_FREQUENCIES, levels)]
    )


def apply_equalization(samples, sample_rate, levels, q=DEFAULT_Q, preamp=True):
    """Filter (frames, channels) float samples through the 10-band chain."""
    sos = equalizer_sos(levels, sample_rate, q)
    out = signal.sosfilt(sos, samples, axis=0)
    if preamp:
        out = out * 10 ** (compute_preamp_db(list(levels)) / 20.0)
    return out


def read_wav(filepath):
    """Read a 16-bit PCM WAV as (float samples[frames, channels], sample_rate)."""
    with wave.open(str(filepath), "rb") as w:
        if w.getsampwidth() != 2:
            raise ValueError(f"only 16-bit PCM WAV is supported; got {8 * w.getsampwidth()}-bit")
        channels = w.getnchannels()
        sample_rate = w.getframerate()
        raw = w.readframes(w.getnframes())
    data = np.frombuffer(raw, dtype="<i2").astype(np.float64) / 32768.0
    return data.reshape(-1, channels), sample_rate


def write_wav(filepath, samples, sample_rate):
    """Write (frames, channels) float samples as 16-bit WAV, clipping overs."""
    samples = np.asarray(samples, dtype=np.float64)
    if samples.ndim == 1:
        samples = samples[:, np.newaxis]
    clipped = int(np.count_nonzero(np.abs(samples) > 1.0))
    if clipped:
        log.warning("clipping %d samples while writing %s", clipped, filepath)
    ints = np.clip(np.round(samples * 32767), -32767, 32767).astype("<i2")
    with wave.open(str(filepath), "wb") as w:
        w.setnchannels(samples.shape[1])
        w.setsampwidth(2)
        w.setframerate(sample_rate)
        w.writeframes(ints.tobytes())

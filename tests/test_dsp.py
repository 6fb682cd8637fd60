import tempfile
import unittest
from pathlib import Path

import numpy as np
from scipy import signal

from eqquiz.constants import BASELINE
from eqquiz.core.dsp import (
    apply_equalization,
    compute_preamp_db,
    equalizer_sos,
    peaking_sos,
    read_wav,
    write_wav,
)


class PreampPolicyTests(unittest.TestCase):
    def test_max_positive_gain_plus_headroom(self):
        self.assertAlmostEqual(compute_preamp_db([0, 12, -12, 0]), -13.0)

    def test_no_positive_gain_returns_zero(self):
        self.assertEqual(compute_preamp_db([-12, 0, 0]), 0.0)
        self.assertEqual(compute_preamp_db([]), 0.0)


class PeakingFilterTests(unittest.TestCase):
    def test_zero_gain_is_identity(self):
        np.testing.assert_allclose(peaking_sos(1000, 0, 48000), [1, 0, 0, 1, 0, 0])

    def test_band_above_nyquist_is_identity(self):
        np.testing.assert_allclose(peaking_sos(16000, 12, 22050), [1, 0, 0, 1, 0, 0])

    def test_gain_at_centre_frequency(self):
        for gain in (12, -12):
            sos = peaking_sos(1000, gain, 48000)
            _, h = signal.sosfreqz(sos[np.newaxis, :], worN=[1000.0], fs=48000)
            self.assertAlmostEqual(20 * np.log10(abs(h[0])), gain, places=3)

    def test_chain_shape(self):
        self.assertEqual(equalizer_sos(BASELINE, 48000).shape, (10, 6))
        with self.assertRaises(ValueError):
            equalizer_sos([0] * 3, 48000)

    def test_flat_equalization_leaves_audio_unchanged(self):
        rng = np.random.default_rng(0)
        samples = rng.uniform(-0.5, 0.5, size=(2048, 2))
        out = apply_equalization(samples, 48000, BASELINE)
        np.testing.assert_allclose(out, samples)

    def test_boost_is_compensated_by_preamp(self):
        t = np.arange(48000) / 48000
        tone = 0.5 * np.sin(2 * np.pi * 1000 * t)[:, np.newaxis]
        levels = [0, 0, 0, 0, 0, 12, 0, 0, 0, 0]
        out = apply_equalization(tone, 48000, levels)
        self.assertLess(np.max(np.abs(out[4800:])), 0.5)


class WavTests(unittest.TestCase):
    def test_write_then_read(self):
        samples = np.array([[0.0, 0.5], [-0.5, 0.25], [0.999, -0.999]])
        with tempfile.TemporaryDirectory() as td:
            path = Path(td) / "x.wav"
            write_wav(path, samples, 44100)
            loaded, rate = read_wav(path)
        self.assertEqual(rate, 44100)
        self.assertEqual(loaded.shape, (3, 2))
        np.testing.assert_allclose(loaded, samples, atol=2 / 32767)

    def test_overs_are_clipped(self):
        with tempfile.TemporaryDirectory() as td:
            path = Path(td) / "loud.wav"
            with self.assertLogs("eqquiz.core.dsp", level="WARNING"):
                write_wav(path, np.array([2.0, -2.0, 0.0]), 8000)
            loaded, _ = read_wav(path)
        self.assertLessEqual(np.max(np.abs(loaded)), 1.0)


if __name__ == "__main__":
    unittest.main()

# =============================================================================
# sine_renderer.py - ToneEvent → int16 PCM
# =============================================================================
#
# For a tone (freq, duration_ms) the renderer produces
#
#     N = floor(sample_rate * duration_ms / 1000)          (13,230 at 300 ms)
#
# samples. Sample i of a pitched tone is
#
#     t = i / sample_rate
#     s = round(AMPLITUDE * sin(2π * freq * t))             clamped to int16
#
# and every sample of a rest (freq == 0) is 0.
#
# PHASE:
#   The reference output restarts the sine at phase 0 on every note. This is
#   audible as a click at note boundaries and it is what the test vectors
#   encode. RenderConfig(continuous_phase=True) carries the phase across notes
#   instead; rests leave the carried phase untouched.

from __future__ import annotations

import math
from typing import Iterable, Iterator

import numpy as np

from EMW.SMM.config import RenderConfig, DEFAULT_CONFIG
from EMW.SMM.constants import PCM_MAX, PCM_MIN
from EMW.SPM.lexer import ToneEvent

_TWO_PI = 2.0 * math.pi


class SineRenderer:
    """
    Renders ToneEvents to int16 sample arrays.

    Usage:
        r = SineRenderer()
        pcm = r.render_tone(ToneEvent(440.0, 300))     # 13,230 samples
        raw = to_pcm_bytes(pcm)
    """

    def __init__(self, config: RenderConfig = DEFAULT_CONFIG) -> None:
        self.config = config
        # Running phase in radians; only used with continuous_phase.
        self._phase = 0.0

    def reset(self) -> None:
        self._phase = 0.0

    def num_samples(self, tone: ToneEvent) -> int:
        return self.config.sample_rate * tone.duration_ms // 1000

    # ── Core renderer ───────────────────────────────────────────────────────

    def render_tone(self, tone: ToneEvent) -> np.ndarray:
        """
        Render one tone.

        Returns:
            numpy int16 array of num_samples(tone) samples.
        """
        n = self.num_samples(tone)
        if tone.frequency_hz == 0.0:
            return np.zeros(n, dtype=np.int16)

        sr = self.config.sample_rate
        t = np.arange(n, dtype=np.float64) / sr
        phase = _TWO_PI * tone.frequency_hz * t
        if self.config.continuous_phase:
            phase += self._phase
            self._phase = math.fmod(
                self._phase + _TWO_PI * tone.frequency_hz * n / sr, _TWO_PI)

        s = np.rint(self.config.amplitude * np.sin(phase))
        np.clip(s, PCM_MIN, PCM_MAX, out=s)
        return s.astype(np.int16)

    def render(self, tones: Iterable[ToneEvent]) -> Iterator[np.ndarray]:
        """Lazily render a tone stream, one array per tone."""
        for tone in tones:
            yield self.render_tone(tone)


def to_pcm_bytes(samples) -> bytes:
    """
    Pack int16 samples into raw little-endian bytes suitable for writing
    directly into a WAV data chunk (2 bytes per sample).
    """
    return np.asarray(samples, dtype="<i2").tobytes()

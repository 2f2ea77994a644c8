# =============================================================================
# wav_check.py - WAV read-back and pitch verification
# =============================================================================
#
# parse_header() walks the RIFF chunk list with struct so that it can check
# the raw header fields byte-for-byte. read_samples() goes through soundfile,
# which is what an external player would do.
#
# Pitch detection:
#   Hann window → |rfft| → peak bin → parabolic interpolation on the three
#   bins around the peak. One 300 ms note at 44.1 kHz gives 13,230 samples,
#   i.e. 3.33 Hz bins; A4 (440 Hz), A3, A2 and A5 all land exactly on a bin.
# =============================================================================

from __future__ import annotations

import io
import os
import struct
from typing import NamedTuple

import numpy as np
import soundfile as sf

from EMW.SMM.config import RenderConfig, DEFAULT_CONFIG


class WavInfo(NamedTuple):
    riff_size:       int
    audio_format:    int
    num_channels:    int
    sample_rate:     int
    byte_rate:       int
    block_align:     int
    bits_per_sample: int
    data_offset:     int    # byte offset of the first sample
    data_size:       int    # Subchunk2Size as written in the header

    @property
    def num_samples(self) -> int:
        return self.data_size // self.block_align if self.block_align else 0


class NoteSlot(NamedTuple):
    index:        int
    start_s:      float
    frequency_hz: float     # 0.0 = silent slot


def parse_header(data: bytes) -> WavInfo:
    """
    Parse the RIFF/WAVE header of a complete file image.

    Raises:
        ValueError: not RIFF/WAVE, truncated, or no fmt/data chunk.
    """
    try:
        return _walk_chunks(data)
    except struct.error as exc:
        raise ValueError("Truncated WAV header") from exc


def _walk_chunks(data: bytes) -> WavInfo:
    f = io.BytesIO(data)

    if f.read(4) != b"RIFF":
        raise ValueError("Not a RIFF file")
    riff_size = struct.unpack("<I", f.read(4))[0]
    if f.read(4) != b"WAVE":
        raise ValueError("RIFF type is not WAVE")

    fmt = None
    while f.tell() <= len(data) - 8:
        chunk_id   = f.read(4)
        chunk_size = struct.unpack("<I", f.read(4))[0]
        chunk_start = f.tell()

        if chunk_id == b"fmt ":
            fmt = struct.unpack("<HHIIHH", f.read(16))
            f.seek(chunk_start + chunk_size)
        elif chunk_id == b"data":
            if fmt is None:
                break
            return WavInfo(riff_size, *fmt, data_offset=chunk_start, data_size=chunk_size)
        else:
            f.seek(chunk_start + chunk_size)

    raise ValueError("Could not find fmt or data chunk in WAV")


def read_samples(path: str | os.PathLike) -> tuple[np.ndarray, int]:
    """Read a mono WAV as (int16 numpy array, sample_rate)."""
    data, sr = sf.read(os.fspath(path), dtype="int16")
    if data.ndim > 1:
        data = data[:, 0]
    return data, sr


def dominant_frequency(samples, sample_rate: int) -> float:
    """Strongest frequency in `samples` in Hz; 0.0 for silence or empty input."""
    x = np.asarray(samples, dtype=np.float64)
    if x.size < 3 or not np.any(x):
        return 0.0

    spectrum = np.abs(np.fft.rfft(x * np.hanning(x.size)))
    spectrum[0] = 0.0       # ignore DC
    k = int(np.argmax(spectrum))
    peak = float(k)
    if 0 < k < spectrum.size - 1:
        a, b, c = spectrum[k - 1], spectrum[k], spectrum[k + 1]
        denom = a - 2.0 * b + c
        if denom != 0.0:
            peak += 0.5 * (a - c) / denom
    return peak * sample_rate / x.size


def note_report(path: str | os.PathLike,
                config: RenderConfig = DEFAULT_CONFIG) -> list[NoteSlot]:
    """Split a rendered file into note-length slots and detect each slot's pitch."""
    samples, sr = read_samples(path)
    step = config.samples_per_note
    report = []
    for index, start in enumerate(range(0, len(samples), step)):
        chunk = samples[start:start + step]
        report.append(NoteSlot(index, start / sr, dominant_frequency(chunk, sr)))
    return report

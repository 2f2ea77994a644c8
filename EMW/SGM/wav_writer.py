# =============================================================================
# wav_writer.py - RIFF/WAVE container, PCM mono 16-bit
# =============================================================================
#
# Canonical 44-byte header, all integers little-endian:
#
#   off  size  field           value
#    0    4    ChunkID         "RIFF"
#    4    4    ChunkSize       36 + data_size
#    8    4    Format          "WAVE"
#   12    4    Subchunk1ID     "fmt "
#   16    4    Subchunk1Size   16
#   20    2    AudioFormat     1 (PCM)
#   22    2    NumChannels     1
#   24    4    SampleRate      44100
#   28    4    ByteRate        88200
#   32    2    BlockAlign      2
#   34    2    BitsPerSample   16
#   36    4    Subchunk2ID     "data"
#   40    4    Subchunk2Size   data_size = num_samples * 2
#
# Two write strategies, byte-identical output:
#   WavWriter    reserve 44 bytes, stream samples, seek(0), write header
#   encode_wav   everything in memory, header then data

from __future__ import annotations

import os
import struct

from EMW.SMM.config import RenderConfig, DEFAULT_CONFIG
from EMW.SMM.constants import (
    WAV_HEADER_SIZE, RIFF_SIZE_OFFSET, FMT_CHUNK_SIZE, WAVE_FORMAT_PCM,
)
from EMW.errors import IoError
from .sine_renderer import to_pcm_bytes

_HEADER = struct.Struct("<4sI4s4sIHHIIHH4sI")
assert _HEADER.size == WAV_HEADER_SIZE


def build_header(num_samples: int, config: RenderConfig = DEFAULT_CONFIG) -> bytes:
    """Return the 44-byte header for `num_samples` mono int16 samples."""
    data_size = num_samples * config.block_align
    return _HEADER.pack(
        b"RIFF", RIFF_SIZE_OFFSET + data_size, b"WAVE",
        b"fmt ", FMT_CHUNK_SIZE,
        WAVE_FORMAT_PCM,
        config.num_channels,
        config.sample_rate,
        config.byte_rate,
        config.block_align,
        config.bits_per_sample,
        b"data", data_size,
    )


def encode_wav(samples, config: RenderConfig = DEFAULT_CONFIG) -> bytes:
    """Buffered strategy: header + data for an in-memory sample array."""
    pcm = to_pcm_bytes(samples)
    return build_header(len(pcm) // config.block_align, config) + pcm


class WavWriter:
    """
    Streaming WAV writer. The header is back-patched on close once the final
    sample count is known.

    Usage:
        with WavWriter("output.wav") as w:
            for pcm in renderer.render(tones):
                w.write_samples(pcm)
        w.num_samples      # total written

    Any OSError from the file system surfaces as EMW.errors.IoError. If the
    block raises, the file is closed without a header; the partial file is
    left for the caller to delete.
    """

    def __init__(self, path: str | os.PathLike,
                 config: RenderConfig = DEFAULT_CONFIG) -> None:
        self.path = os.fspath(path)
        self.config = config
        self.num_samples = 0
        self._fh = None

    def open(self) -> "WavWriter":
        try:
            self._fh = open(self.path, "wb")
            # Reserve the header; patched in close()
            self._fh.write(b"\x00" * WAV_HEADER_SIZE)
        except OSError as exc:
            self._abandon()
            raise IoError(f"cannot open {self.path!r} for writing: {exc.strerror or exc}") from exc
        return self

    def write_samples(self, samples) -> None:
        if self._fh is None:
            raise ValueError("WavWriter is not open")
        pcm = to_pcm_bytes(samples)
        try:
            self._fh.write(pcm)
        except OSError as exc:
            raise IoError(f"write to {self.path!r} failed: {exc.strerror or exc}") from exc
        self.num_samples += len(pcm) // self.config.block_align

    def close(self) -> None:
        """Back-patch the header and close the file."""
        if self._fh is None:
            return
        try:
            self._fh.seek(0)
            self._fh.write(build_header(self.num_samples, self.config))
            self._fh.close()
        except OSError as exc:
            raise IoError(f"cannot finalise {self.path!r}: {exc.strerror or exc}") from exc
        finally:
            self._abandon()

    def _abandon(self) -> None:
        if self._fh is not None and not self._fh.closed:
            self._fh.close()
        self._fh = None

    def __enter__(self) -> "WavWriter":
        return self.open()

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is None:
            self.close()
        else:
            self._abandon()

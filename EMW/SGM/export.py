# =============================================================================
# export.py - payload → WAV
# =============================================================================
#
# Glue between SPM and SGM. Two entry points, same bytes:
#
#   write_melody(payload, path)      streaming, header back-patched
#   melody_to_wav_bytes(payload)     buffered, returns the whole file
#
# Both take the MELODY payload (the text after "MELODY:"), not the full file;
# use EMW.SPM.locate_melody first.

from __future__ import annotations

import os

import numpy as np

from EMW.SMM.config import RenderConfig, DEFAULT_CONFIG
from EMW.SPM.lexer import parse_melody
from .sine_renderer import SineRenderer
from .wav_writer import WavWriter, encode_wav


def write_melody(payload: str, path: str | os.PathLike,
                 config: RenderConfig = DEFAULT_CONFIG) -> int:
    """
    Parse, render and stream `payload` to a WAV file at `path`.

    Returns:
        Number of samples written to the data chunk.
    """
    renderer = SineRenderer(config)
    with WavWriter(path, config) as writer:
        for pcm in renderer.render(parse_melody(payload, config)):
            writer.write_samples(pcm)
    return writer.num_samples


def melody_to_wav_bytes(payload: str,
                        config: RenderConfig = DEFAULT_CONFIG) -> bytes:
    renderer = SineRenderer(config)
    chunks = list(renderer.render(parse_melody(payload, config)))
    samples = np.concatenate(chunks) if chunks else np.zeros(0, dtype=np.int16)
    return encode_wav(samples, config)

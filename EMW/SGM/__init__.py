# =============================================================================
# SGM - Signal Generation Module
# Subfolder of EMW (eMelody-to-WAV Engine)
# =============================================================================
#
# Renders ToneEvents to 16-bit PCM and wraps them in a RIFF/WAVE container.
#
# Modules:
#   sine_renderer.py  - ToneEvent → int16 sine samples (phase reset per note)
#   wav_writer.py     - 44-byte header, streaming WavWriter, buffered encode_wav
#   export.py         - payload → WAV file / bytes (parse + render + write)
#
# Constants live in EMW/SMM/constants.py
# Verification tools live in EMW/SVM/
# =============================================================================

from .sine_renderer import SineRenderer, to_pcm_bytes
from .wav_writer import WavWriter, build_header, encode_wav
from .export import write_melody, melody_to_wav_bytes

__all__ = [
    "SineRenderer", "to_pcm_bytes",
    "WavWriter", "build_header", "encode_wav",
    "write_melody", "melody_to_wav_bytes",
]

# =============================================================================
# SVM - Signal Verification Module
# =============================================================================
#
# Reads generated WAV files back and checks them against the SMM constants.
#
# Modules:
#   wav_check.py  - RIFF header parser, soundfile read-back, FFT pitch detector,
#                  per-note report (used by `emelody2wav --verify`)
#   validate.py   - self-validation suite:  python -m EMW.SVM.validate
# =============================================================================

from .wav_check import (
    WavInfo, NoteSlot, parse_header, read_samples, dominant_frequency, note_report,
)

__all__ = [
    "WavInfo", "NoteSlot",
    "parse_header", "read_samples", "dominant_frequency", "note_report",
]

# =============================================================================
# eMelody-to-WAV Engine (EMW)
# Converts an eMelody ringtone description into a PCM WAV file.
# =============================================================================
#
# ── PIPELINE ──────────────────────────────────────────────────────────────────
#
#   text file
#     → header locator   finds "MELODY:" and returns the payload slice
#     → lexer            payload → RaiseOctave / LowerOctave / Pitch / Rest
#     → octave tracker   tokens  → ToneEvent(frequency_hz, duration_ms)
#     → sine renderer    tone    → int16 samples at 44,100 Hz
#     → WAV writer       samples → RIFF/WAVE, PCM, mono, 16-bit LE
#
# Every stage is lazy: one note is parsed, rendered and written before the
# next character of the payload is read.
#
# ── OUTPUT FORMAT ─────────────────────────────────────────────────────────────
#   Sample rate : 44,100 Hz
#   Bit depth   : 16-bit signed little-endian
#   Channels    : 1
#   Note length : 300 ms = 13,230 samples per pitch or rest
#   Amplitude   : 30,000 (peak), phase reset at every note boundary
#
# ── Module layout ─────────────────────────────────────────────────────────────
#   SMM/   - constants and the RenderConfig record (single source of truth)
#   SPM/   - score parsing: header locator, lexer, octave tracker, pitch table
#   SGM/   - signal generation: sine renderer, WAV writer
#   SVM/   - signal verification: header parser, FFT pitch check, validate.py
#   cli.py     - `emelody2wav <file>` entry point
#   errors.py  - UsageError / MissingMelodyLine / IoError
# =============================================================================

__version__ = "1.0.0"

# =============================================================================
# SPM - Score Parsing Module
# =============================================================================
#
# Turns eMelody text into a lazy stream of ToneEvent(frequency_hz, duration_ms).
#
# Modules:
#   header.py  - locates the "MELODY:" payload inside the full input text
#   lexer.py   - payload → tagged tokens → ToneEvents (octave state machine)
#   pitch.py   - (letter, octave) → Hz, equal temperament, A4 = 440 Hz
#
# Constants live in EMW/SMM/constants.py
# =============================================================================

from .header import locate_melody
from .lexer import (
    RaiseOctave, LowerOctave, Pitch, Rest, ToneEvent,
    OctaveTracker, tokenize, parse_melody, count_events,
)
from .pitch import get_frequency, midi_number, note_name, nearest_note

__all__ = [
    "locate_melody",
    "RaiseOctave", "LowerOctave", "Pitch", "Rest", "ToneEvent",
    "OctaveTracker", "tokenize", "parse_melody", "count_events",
    "get_frequency", "midi_number", "note_name", "nearest_note",
]

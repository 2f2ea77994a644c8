# =============================================================================
# pitch.py - Equal-tempered pitch table
# =============================================================================
#
#   n  = 12 * (octave + 1) + semitone_offset      (C4 = 60, A4 = 69)
#   Hz = 440 * 2 ** ((n - 69) / 12)
#
# The rest letter 'p' and any unknown letter map to 0 Hz, which every
# downstream stage treats as silence.
#
# Octaves far outside 0-8 are not guarded: around octave +1000 the power
# overflows and get_frequency raises OverflowError; around octave -1000 it
# underflows to 0.0 Hz and the note renders as a rest.

from __future__ import annotations

import math

from EMW.SMM.constants import (
    A4_FREQUENCY, A4_MIDI, SEMITONES_PER_OCTAVE, SEMITONE_OFFSETS,
)

# semitone offset → natural letter; sharps are named from the letter below
_LETTER_AT = {offset: letter for letter, offset in SEMITONE_OFFSETS.items()}


def midi_number(letter: str, octave: int) -> int | None:
    """MIDI note number for a pitch letter, or None for a rest/unknown letter."""
    offset = SEMITONE_OFFSETS.get(letter)
    if offset is None:
        return None
    return SEMITONES_PER_OCTAVE * (octave + 1) + offset


def get_frequency(letter: str, octave: int) -> float:
    n = midi_number(letter, octave)
    if n is None:
        return 0.0
    return A4_FREQUENCY * 2.0 ** ((n - A4_MIDI) / SEMITONES_PER_OCTAVE)


def note_name(letter: str, octave: int, sharp: bool = False) -> str:
    """'a', 4 → 'A4'; 'c', 5, sharp=True → 'C#5'. Rests and unknown letters → 'rest'."""
    if letter not in SEMITONE_OFFSETS:
        return "rest"
    return f"{letter.upper()}{'#' if sharp else ''}{octave}"


def nearest_note(frequency_hz: float) -> str:
    """Name of the equal-tempered note closest to `frequency_hz`; 'rest' for <= 0 Hz."""
    if frequency_hz <= 0.0:
        return "rest"
    n = round(SEMITONES_PER_OCTAVE * math.log2(frequency_hz / A4_FREQUENCY)) + A4_MIDI
    octave, semitone = divmod(n, SEMITONES_PER_OCTAVE)
    octave -= 1
    if semitone in _LETTER_AT:
        return note_name(_LETTER_AT[semitone], octave)
    return note_name(_LETTER_AT[semitone - 1], octave, sharp=True)

# =============================================================================
# lexer.py - Note lexer and octave state machine
# =============================================================================
#
# Two stages, both lazy and strictly left-to-right (no look-ahead):
#
#   tokenize(payload)        one character → at most one token
#
#     '>'        RaiseOctave()
#     '<'        LowerOctave()
#     'a'..'g'   Pitch(letter)
#     'p'        Rest()
#     other      nothing  (digits, whitespace, '#', '.', '|', 'V', 'T', ...)
#
#   OctaveTracker.tones()    tokens → ToneEvent(frequency_hz, duration_ms)
#
#     RaiseOctave / LowerOctave update the register and emit nothing.
#     Pitch emits (get_frequency(letter, octave), note_duration_ms).
#     Rest emits (0.0, note_duration_ms).
#
# Duration numbers, dots, sharps, tempo and volume marks are not interpreted.
# Only lowercase letters are pitches; 'A'..'G' are ignored like any other byte.
# =============================================================================

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, NamedTuple, Union

from EMW.SMM.config import RenderConfig, DEFAULT_CONFIG
from EMW.SMM.constants import (
    OCTAVE_UP, OCTAVE_DOWN, REST_LETTER, PITCH_LETTERS,
)
from .pitch import get_frequency


# ── Tokens ──────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class RaiseOctave:
    pass


@dataclass(frozen=True)
class LowerOctave:
    pass


@dataclass(frozen=True)
class Pitch:
    letter: str     # one of 'a'..'g'


@dataclass(frozen=True)
class Rest:
    pass


Token = Union[RaiseOctave, LowerOctave, Pitch, Rest]


class ToneEvent(NamedTuple):
    frequency_hz: float     # 0.0 = rest
    duration_ms: int

    @property
    def is_rest(self) -> bool:
        return self.frequency_hz == 0.0


def tokenize(payload: str) -> Iterator[Token]:
    """Yield one token per recognised character of `payload`."""
    for ch in payload:
        if ch == OCTAVE_UP:
            yield RaiseOctave()
        elif ch == OCTAVE_DOWN:
            yield LowerOctave()
        elif ch in PITCH_LETTERS:
            yield Pitch(ch)
        elif ch == REST_LETTER:
            yield Rest()


def count_events(payload: str) -> int:
    """Number of pitch and rest events `payload` will produce."""
    return sum(1 for ch in payload if ch in PITCH_LETTERS or ch == REST_LETTER)


# ── Octave state machine ────────────────────────────────────────────────────

class OctaveTracker:
    """
    Holds the current-octave register and converts tokens to ToneEvents.

    The register is not clamped: octaves outside 0-8 are the input's problem
    and simply produce very low or very high frequencies.

    Usage:
        tracker = OctaveTracker()
        for tone in tracker.tones(tokenize(">a<c")):
            ...
    """

    def __init__(self, config: RenderConfig = DEFAULT_CONFIG) -> None:
        self.config = config
        self.octave = config.initial_octave

    def reset(self) -> None:
        self.octave = self.config.initial_octave

    def feed(self, token: Token) -> ToneEvent | None:
        """Apply one token. Returns the ToneEvent it emits, if any."""
        if isinstance(token, RaiseOctave):
            self.octave += 1
            return None
        if isinstance(token, LowerOctave):
            self.octave -= 1
            return None
        if isinstance(token, Pitch):
            return ToneEvent(get_frequency(token.letter, self.octave),
                             self.config.note_duration_ms)
        if isinstance(token, Rest):
            return ToneEvent(0.0, self.config.note_duration_ms)
        raise TypeError(f"not a melody token: {token!r}")

    def tones(self, tokens: Iterable[Token]) -> Iterator[ToneEvent]:
        for token in tokens:
            tone = self.feed(token)
            if tone is not None:
                yield tone


def parse_melody(payload: str,
                 config: RenderConfig = DEFAULT_CONFIG) -> Iterator[ToneEvent]:
    """Lazy ToneEvent stream for a MELODY payload, starting at the initial octave."""
    return OctaveTracker(config).tones(tokenize(payload))

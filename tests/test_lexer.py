import math

import pytest

from EMW.SMM.config import RenderConfig
from EMW.SPM.lexer import (
    RaiseOctave, LowerOctave, Pitch, Rest, ToneEvent,
    OctaveTracker, tokenize, parse_melody, count_events,
)


def test_tokenize_each_kind():
    assert list(tokenize("><ap")) == [RaiseOctave(), LowerOctave(), Pitch("a"), Rest()]


def test_tokens_of_different_kinds_are_not_equal():
    assert RaiseOctave() != LowerOctave()
    assert Rest() != RaiseOctave()


@pytest.mark.parametrize("ignored", "0123456789 #.|VT\n\r\tABCDEFGPxyz*")
def test_other_characters_produce_no_tokens(ignored):
    assert list(tokenize(ignored)) == []


def test_tokenize_is_lazy():
    it = tokenize("a" * 10)
    assert next(it) == Pitch("a")


def test_default_octave_is_4():
    (tone,) = parse_melody("a")
    assert tone == ToneEvent(440.0, 300)


def test_octave_shifts():
    tones = list(parse_melody(">a<<a<a"))
    assert [t.frequency_hz for t in tones] == pytest.approx([880.0, 220.0, 110.0])


def test_octave_persists_across_notes():
    tones = list(parse_melody(">cde"))
    assert tones[0].frequency_hz == pytest.approx(523.2511, abs=1e-3)
    assert tones[2].frequency_hz == pytest.approx(659.2551, abs=1e-3)


def test_octave_register_is_not_clamped():
    tracker = OctaveTracker()
    list(tracker.tones(tokenize(">>>>>>>")))
    assert tracker.octave == 11
    tracker.reset()
    list(tracker.tones(tokenize("<<<<<<")))
    assert tracker.octave == -2


def test_rest_emits_zero_frequency():
    (tone,) = parse_melody("p")
    assert tone.frequency_hz == 0.0
    assert tone.duration_ms == 300
    assert tone.is_rest


def test_octave_shift_does_not_affect_rest():
    assert list(parse_melody(">>p")) == [ToneEvent(0.0, 300)]


def test_feed_returns_none_for_octave_tokens():
    tracker = OctaveTracker()
    assert tracker.feed(RaiseOctave()) is None
    assert tracker.octave == 5
    assert tracker.feed(Pitch("a")) == ToneEvent(880.0, 300)


def test_feed_rejects_non_tokens():
    with pytest.raises(TypeError):
        OctaveTracker().feed("a")


def test_configured_duration_and_initial_octave():
    cfg = RenderConfig(note_duration_ms=125, initial_octave=3)
    (tone,) = parse_melody("a", cfg)
    assert tone == ToneEvent(220.0, 125)


def test_no_lookahead_for_duration_modifiers():
    # "a2." is one plain 300 ms a; the digit and dot are ignored
    assert list(parse_melody("a2.")) == list(parse_melody("a"))


@pytest.mark.parametrize("payload, expected", [
    ("", 0),
    ("a", 1),
    ("p", 1),
    ("cdefgab>c", 8),
    ("<<>> \n123", 0),
    ("aV5T2bp#.", 3),
    ("ABC", 0),
])
def test_count_events(payload, expected):
    assert count_events(payload) == expected
    assert len(list(parse_melody(payload))) == expected


def test_all_events_default_to_300ms():
    assert all(t.duration_ms == 300 for t in parse_melody("c>d<e p f"))


def test_frequencies_match_pitch_formula():
    for letter, offset in zip("cdefgab", (0, 2, 4, 5, 7, 9, 11)):
        (tone,) = parse_melody(letter)
        expected = 440.0 * 2 ** ((60 + offset - 69) / 12)
        assert math.isclose(tone.frequency_hz, expected)

#!/usr/bin/env python3
# =============================================================================
# validate.py - EMW Self-Validation Suite
# =============================================================================
#
# Run directly:  python -m EMW.SVM.validate
#
# Tests:
#   1. Constants integrity  - derived sizes agree with the PCM format
#   2. Pitch table          - A4 = 440 Hz, octave doubling, rests = 0 Hz
#   3. Lexer / octaves      - token stream and octave register
#   4. Sine renderer        - note length, A4 samples, silent rests
#   5. WAV container        - header fields, streaming == buffered bytes,
#                            soundfile read-back and FFT pitch check
# =============================================================================

import math
import os
import sys
import tempfile

import numpy as np

from EMW.SMM.config import DEFAULT_CONFIG
from EMW.SMM.constants import (
    SAMPLE_RATE, BITS_PER_SAMPLE, NUM_CHANNELS, BYTE_RATE, BLOCK_ALIGN,
    SAMPLES_PER_NOTE, AMPLITUDE, PCM_MAX, WAV_HEADER_SIZE, SEMITONE_OFFSETS,
)
from EMW.SPM import (
    RaiseOctave, LowerOctave, Pitch, Rest, ToneEvent,
    tokenize, parse_melody, get_frequency,
)
from EMW.SGM import SineRenderer, build_header, write_melody, melody_to_wav_bytes
from EMW.SVM.wav_check import parse_header, read_samples, dominant_frequency

PASS = "[PASS]"
FAIL = "[FAIL]"
INFO = "[INFO]"

failures = 0


def check(label: str, condition: bool, detail: str = "") -> bool:
    global failures
    if condition:
        print(f"  {PASS} {label}")
    else:
        print(f"  {FAIL} {label}{(' -- ' + detail) if detail else ''}")
        failures += 1
    return condition


def section(title: str) -> None:
    print("\n" + "=" * 60)
    print(title)
    print("=" * 60)


def check_constants() -> None:
    section("TEST 1: Constants Integrity")
    check("SAMPLE_RATE = 44100",            SAMPLE_RATE == 44_100)
    check("BITS_PER_SAMPLE = 16",           BITS_PER_SAMPLE == 16)
    check("NUM_CHANNELS = 1",               NUM_CHANNELS == 1)
    check("BYTE_RATE = 88200",              BYTE_RATE == 88_200, f"got {BYTE_RATE}")
    check("BLOCK_ALIGN = 2",                BLOCK_ALIGN == 2)
    check("SAMPLES_PER_NOTE = 13230",       SAMPLES_PER_NOTE == 13_230,
          f"got {SAMPLES_PER_NOTE}")
    check("SAMPLES_PER_NOTE is integer",    isinstance(SAMPLES_PER_NOTE, int))
    check("AMPLITUDE leaves headroom",      AMPLITUDE < PCM_MAX)
    check("Config agrees with constants",
          DEFAULT_CONFIG.samples_per_note == SAMPLES_PER_NOTE
          and DEFAULT_CONFIG.byte_rate == BYTE_RATE)


def check_pitch_table() -> None:
    section("TEST 2: Pitch Table")
    check("a4 = 440 Hz",    math.isclose(get_frequency("a", 4), 440.0))
    check("a5 = 880 Hz",    math.isclose(get_frequency("a", 5), 880.0))
    check("a2 = 110 Hz",    math.isclose(get_frequency("a", 2), 110.0))
    check("c4 = 261.63 Hz", abs(get_frequency("c", 4) - 261.6256) < 1e-3,
          f"got {get_frequency('c', 4):.4f}")
    check("p = 0 Hz (rest)",       get_frequency("p", 4) == 0.0)
    check("unknown letter = 0 Hz", get_frequency("x", 4) == 0.0)
    freqs = [get_frequency(letter, 4) for letter in sorted(SEMITONE_OFFSETS, key=SEMITONE_OFFSETS.get)]
    check("c..b ascending within octave", freqs == sorted(freqs))


def check_lexer() -> None:
    section("TEST 3: Lexer / Octave Register")
    tokens = list(tokenize(">a<p 1.#"))
    check("tokens for '>a<p 1.#'",
          tokens == [RaiseOctave(), Pitch("a"), LowerOctave(), Rest()],
          f"got {tokens}")
    check("uppercase letters ignored", list(tokenize("ABCDEFG")) == [])
    tones = list(parse_melody("<<a>>>a"))
    check("'<<a>>>a' → 110 Hz then 880 Hz",
          len(tones) == 2
          and math.isclose(tones[0].frequency_hz, 110.0)
          and math.isclose(tones[1].frequency_hz, 880.0),
          f"got {tones}")
    check("every event lasts 300 ms",
          all(t.duration_ms == 300 for t in parse_melody("cdefgabp")))


def check_renderer() -> None:
    section("TEST 4: Sine Renderer")
    r = SineRenderer()
    a4 = r.render_tone(ToneEvent(440.0, 300))
    check("A4 length = 13230", a4.size == SAMPLES_PER_NOTE, f"got {a4.size}")
    check("A4 dtype int16",    a4.dtype == np.int16)
    expected = [round(AMPLITUDE * math.sin(2 * math.pi * 440.0 * (i / SAMPLE_RATE)))
                for i in range(8)]
    check("A4 first samples match analytic sine",
          a4[:8].tolist() == expected, f"{a4[:8].tolist()} != {expected}")
    check("A4 peak <= AMPLITUDE", int(np.max(np.abs(a4))) <= AMPLITUDE)
    rest = r.render_tone(ToneEvent(0.0, 300))
    check("rest is silent", rest.size == SAMPLES_PER_NOTE and not np.any(rest))


def check_container() -> None:
    section("TEST 5: WAV Container")
    header = build_header(SAMPLES_PER_NOTE)
    check("header is 44 bytes", len(header) == WAV_HEADER_SIZE)
    info = parse_header(header)
    check("ChunkSize = 36 + 2N",    info.riff_size == 36 + 2 * SAMPLES_PER_NOTE)
    check("Subchunk2Size = 2N",     info.data_size == 2 * SAMPLES_PER_NOTE)
    check("PCM mono 16-bit 44.1k",
          (info.audio_format, info.num_channels, info.bits_per_sample, info.sample_rate)
          == (1, 1, 16, 44_100))

    with tempfile.TemporaryDirectory() as tmp:
        path = os.path.join(tmp, "validate.wav")
        n = write_melody("cdefgab>c", path)
        with open(path, "rb") as f:
            streamed = f.read()
        check("S3 sample count = 8 × 13230", n == 8 * SAMPLES_PER_NOTE, f"got {n}")
        check("S3 file size = 211724",       len(streamed) == 211_724,
              f"got {len(streamed)}")
        check("streaming == buffered bytes", streamed == melody_to_wav_bytes("cdefgab>c"))

        try:
            samples, sr = read_samples(path)
        except Exception as e:
            check("soundfile read-back", False, str(e))
            return
        check("soundfile reads 44.1 kHz", sr == SAMPLE_RATE)
        a4 = samples[5 * SAMPLES_PER_NOTE:6 * SAMPLES_PER_NOTE]
        peak = dominant_frequency(a4, sr)
        print(f"  {INFO} 6th tone dominant frequency: {peak:.2f} Hz")
        check("6th tone ≈ 440 Hz", abs(peak - 440.0) < 1.0)


def main() -> int:
    global failures
    failures = 0

    check_constants()
    check_pitch_table()
    check_lexer()
    check_renderer()
    check_container()

    print("\n" + "=" * 60)
    if failures == 0:
        print("  ALL TESTS PASSED")
    else:
        print(f"  {failures} TEST(S) FAILED")
    print("=" * 60 + "\n")
    return failures


if __name__ == "__main__":
    sys.exit(0 if main() == 0 else 1)

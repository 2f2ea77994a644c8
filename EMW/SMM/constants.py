# =============================================================================
# constants.py - SMM Signal Constants and Pitch Map
# =============================================================================
#
# These values define the reference output byte-for-byte. Changing any of
# them changes every test vector.

# -----------------------------------------------------------------------------
# PCM OUTPUT FORMAT
# -----------------------------------------------------------------------------

SAMPLE_RATE      = 44_100       # Hz
BITS_PER_SAMPLE  = 16           # signed, little-endian
NUM_CHANNELS     = 1            # mono
BYTES_PER_SAMPLE = BITS_PER_SAMPLE // 8                     # = 2
BLOCK_ALIGN      = NUM_CHANNELS * BYTES_PER_SAMPLE          # = 2
BYTE_RATE        = SAMPLE_RATE * BLOCK_ALIGN                # = 88,200

# int16 clamp limits
PCM_MAX =  32767
PCM_MIN = -32768

# Peak sine amplitude. Leaves ~7% headroom below PCM_MAX.
AMPLITUDE = 30_000


# -----------------------------------------------------------------------------
# NOTE TIMING
# -----------------------------------------------------------------------------

NOTE_DURATION_MS = 300
# floor(44100 * 300 / 1000) = 13,230. Integer division, never round().
SAMPLES_PER_NOTE = SAMPLE_RATE * NOTE_DURATION_MS // 1000


# -----------------------------------------------------------------------------
# RIFF / WAVE CONTAINER
# -----------------------------------------------------------------------------

WAV_HEADER_SIZE  = 44           # RIFF(12) + fmt(24) + data header(8)
RIFF_SIZE_OFFSET = 36           # ChunkSize = 36 + data_size
FMT_CHUNK_SIZE   = 16           # PCM fmt subchunk body
WAVE_FORMAT_PCM  = 1

DEFAULT_OUTPUT_NAME = "output.wav"


# -----------------------------------------------------------------------------
# eMELODY NOTATION
# -----------------------------------------------------------------------------

MELODY_MARKER   = "MELODY:"
# Characters skipped between the marker and the first payload character.
MARKER_PADDING  = " \n"

INITIAL_OCTAVE  = 4
OCTAVE_UP       = ">"
OCTAVE_DOWN     = "<"
REST_LETTER     = "p"

# Equal-tempered tuning reference
A4_FREQUENCY = 440.0            # Hz
A4_MIDI      = 69
SEMITONES_PER_OCTAVE = 12

# Pitch letter → semitone offset above C within one octave.
# 'a' is offset 9 so that 'a' at octave 4 is MIDI 69 = A4 = 440 Hz.
SEMITONE_OFFSETS = {
    "c": 0,
    "d": 2,
    "e": 4,
    "f": 5,
    "g": 7,
    "a": 9,
    "b": 11,
}

PITCH_LETTERS = frozenset(SEMITONE_OFFSETS)

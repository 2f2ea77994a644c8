# =============================================================================
# config.py - RenderConfig, the per-render configuration record
# =============================================================================
#
# Groups every knob of a render in one frozen record. The defaults reproduce
# the reference output exactly; nothing varies per invocation unless a caller
# builds its own RenderConfig.

from dataclasses import dataclass

from .constants import (
    SAMPLE_RATE, AMPLITUDE, NOTE_DURATION_MS, INITIAL_OCTAVE,
    BITS_PER_SAMPLE, NUM_CHANNELS,
)


@dataclass(frozen=True)
class RenderConfig:
    sample_rate: int = SAMPLE_RATE
    amplitude: int = AMPLITUDE
    note_duration_ms: int = NOTE_DURATION_MS
    initial_octave: int = INITIAL_OCTAVE
    # False = phase reset at every note (reference bytes)
    continuous_phase: bool = False

    def __post_init__(self) -> None:
        if self.sample_rate <= 0:
            raise ValueError(f"sample_rate must be positive, got {self.sample_rate!r}")
        if self.note_duration_ms <= 0:
            raise ValueError(
                f"note_duration_ms must be positive, got {self.note_duration_ms!r}"
            )

    @property
    def bits_per_sample(self) -> int:
        return BITS_PER_SAMPLE

    @property
    def num_channels(self) -> int:
        return NUM_CHANNELS

    @property
    def samples_per_note(self) -> int:
        """floor(sample_rate * note_duration_ms / 1000), e.g. 13,230."""
        return self.sample_rate * self.note_duration_ms // 1000

    @property
    def byte_rate(self) -> int:
        return self.sample_rate * self.num_channels * self.bits_per_sample // 8

    @property
    def block_align(self) -> int:
        return self.num_channels * self.bits_per_sample // 8


DEFAULT_CONFIG = RenderConfig()

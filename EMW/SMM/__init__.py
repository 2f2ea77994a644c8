# =============================================================================
# EMW/SMM/__init__.py - Signal Mapping Module
# =============================================================================
#
# The SMM is the single source of truth for the output signal standard:
# sample rate, bit depth, amplitude, note length and the pitch-letter map.
#
# All other EMW sub-modules (SPM, SGM, SVM) import exclusively from here.
# Never define signal constants outside this module.
#
# Sub-modules:
#   constants.py   - all timing constants and the semitone table
#   config.py      - RenderConfig, the per-render configuration record
# =============================================================================

from .config import RenderConfig, DEFAULT_CONFIG

__all__ = ["RenderConfig", "DEFAULT_CONFIG"]

# =============================================================================
# cli.py - `emelody2wav` command line entry point
# =============================================================================
#
# Usage:
#   emelody2wav <path-to-emelody-text-file>
#   emelody2wav <path> --verify      # read output.wav back, report note pitches and names
#   python -m EMW <path>
#
# Output always goes to ./output.wav.
#
# Exit codes:
#   0  success
#   1  UsageError         wrong argument count
#   2  MissingMelodyLine  no "MELODY:" in the input
#   3  IoError            input unreadable / output not writable
# =============================================================================

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from EMW import __version__
from EMW.SMM.config import DEFAULT_CONFIG
from EMW.SMM.constants import DEFAULT_OUTPUT_NAME
from EMW.SPM.header import locate_melody
from EMW.SPM.pitch import nearest_note
from EMW.SGM.export import write_melody
from EMW.errors import EMWError, UsageError, IoError

INFO = "[INFO]"
ERR  = "[!!]"


class _ArgumentParser(argparse.ArgumentParser):
    """argparse that raises UsageError instead of exiting with status 2."""

    def error(self, message: str) -> None:
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="emelody2wav",
        description=f"Render an eMelody ringtone to {DEFAULT_OUTPUT_NAME} "
                    "(PCM, mono, 16-bit, 44.1 kHz)",
    )
    parser.add_argument("melody_file", help="Path to an eMelody text file")
    parser.add_argument(
        "--verify", action="store_true",
        help="Read the WAV back and print the detected pitch of every note",
    )
    parser.add_argument(
        "-q", "--quiet", action="store_true",
        help="Only print errors",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def read_melody_text(path: str) -> str:
    """Read an input file. latin-1 maps every byte to exactly one character."""
    try:
        with open(path, "rb") as f:
            raw = f.read()
    except OSError as exc:
        raise IoError(f"cannot read {path!r}: {exc.strerror or exc}") from exc
    return raw.decode("latin-1")


def run(melody_file: str, verify: bool = False, quiet: bool = False) -> int:
    """Convert one file to output.wav. Returns the number of samples written."""
    payload = locate_melody(read_melody_text(melody_file))

    n = write_melody(payload, DEFAULT_OUTPUT_NAME, DEFAULT_CONFIG)
    if not quiet:
        print(f"WAV file created: {DEFAULT_OUTPUT_NAME}")
        print(f"  {INFO} {n // DEFAULT_CONFIG.samples_per_note} notes, "
              f"{n} samples, {n / DEFAULT_CONFIG.sample_rate:.2f} s")

    if verify:
        # Deferred: soundfile loads libsndfile on import
        from EMW.SVM.wav_check import note_report
        for slot in note_report(DEFAULT_OUTPUT_NAME, DEFAULT_CONFIG):
            if slot.frequency_hz == 0.0:
                label = "rest"
            else:
                label = f"{slot.frequency_hz:8.2f} Hz  {nearest_note(slot.frequency_hz)}"
            print(f"  {INFO} note {slot.index:3d}  t={slot.start_s:6.2f} s  {label}")
    return n


def main(argv: Sequence[str] | None = None) -> int:
    try:
        args = build_parser().parse_args(argv)
        run(args.melody_file, verify=args.verify, quiet=args.quiet)
    except EMWError as exc:
        print(f"{ERR} {exc.kind}: {exc}", file=sys.stderr)
        return exc.exit_code
    return 0


if __name__ == "__main__":
    sys.exit(main())

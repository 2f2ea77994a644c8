# =============================================================================
# errors.py - EMW error taxonomy
# =============================================================================
#
# Every failure is fatal. Library code raises; only EMW.cli.main catches
# EMWError, prints one diagnostic line and exits with `exit_code`.
#
#   UsageError         exit 1   - wrong argument count / missing argument
#   MissingMelodyLine  exit 2   - input has no "MELODY:" marker
#   IoError            exit 3   - input or output file cannot be opened/written


class EMWError(Exception):
    """Base class for all EMW failures."""

    exit_code = 1

    @property
    def kind(self) -> str:
        return type(self).__name__


class UsageError(EMWError):
    exit_code = 1


class MissingMelodyLine(EMWError):
    exit_code = 2

    def __init__(self, message: str = "Could not find MELODY line.") -> None:
        super().__init__(message)


class IoError(EMWError, OSError):
    exit_code = 3

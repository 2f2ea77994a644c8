# =============================================================================
# header.py - MELODY payload locator
# =============================================================================
#
# Only the MELODY field is consulted. NAME, COMPOSER, RHYTHM and every other
# eMelody header field are skipped over. The returned slice runs to the end
# of the input; the lexer ignores whatever it does not recognise.

from EMW.SMM.constants import MELODY_MARKER, MARKER_PADDING
from EMW.errors import MissingMelodyLine


def locate_melody(text: str) -> str:
    """
    Return the payload after the first "MELODY:" marker.

    Leading spaces and newlines after the colon are skipped.

    Raises:
        MissingMelodyLine: the marker does not occur anywhere in `text`.
    """
    start = text.find(MELODY_MARKER)
    if start < 0:
        raise MissingMelodyLine()
    return text[start + len(MELODY_MARKER):].lstrip(MARKER_PADDING)

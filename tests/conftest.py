import math

import pytest

from EMW.SMM.constants import SAMPLE_RATE, AMPLITUDE


IMELODY_TEMPLATE = (
    "BEGIN:IMELODY\n"
    "VERSION:1.2\n"
    "FORMAT:CLASS1.0\n"
    "NAME:Test Tune\n"
    "COMPOSER:Nobody\n"
    "BEAT:120\n"
    "MELODY:{melody}\n"
    "END:IMELODY\n"
)


def analytic_sample(freq: float, i: int) -> int:
    t = i / SAMPLE_RATE
    return round(AMPLITUDE * math.sin(2 * math.pi * freq * t))


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Run inside an empty directory so output.wav lands in tmp_path."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def melody_file(tmp_path):
    """Factory: write raw text to a file and return its path as str."""
    def _make(text: str, name: str = "tune.emy") -> str:
        path = tmp_path / name
        path.write_bytes(text.encode("latin-1"))
        return str(path)
    return _make

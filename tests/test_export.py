import numpy as np
import pytest

from EMW.SMM.config import RenderConfig
from EMW.SGM.export import write_melody, melody_to_wav_bytes

from conftest import analytic_sample

NOTE = 13_230


def read_pcm(data: bytes) -> np.ndarray:
    return np.frombuffer(data[44:], dtype="<i2")


@pytest.mark.parametrize("payload", ["a", "p", "cdefgab>c", "", "<<a>>p>b", "a1 b2. V7 T3 c#"])
def test_streaming_and_buffered_bytes_identical(tmp_path, payload):
    path = tmp_path / "out.wav"
    n = write_melody(payload, path)
    data = path.read_bytes()
    assert data == melody_to_wav_bytes(payload)
    assert len(data) == 44 + 2 * n


@pytest.mark.parametrize("payload, k", [
    ("a", 1),
    ("ap", 2),
    ("<<>>cdefgabp", 8),
    ("  c \n d \n", 2),
    ("", 0),
])
def test_duration_law(payload, k):
    data = melody_to_wav_bytes(payload)
    assert len(read_pcm(data)) == k * NOTE
    assert int.from_bytes(data[40:44], "little") == 2 * k * NOTE
    assert int.from_bytes(data[4:8], "little") == 36 + 2 * k * NOTE


def test_ignored_characters_do_not_change_output():
    reference = melody_to_wav_bytes("a")
    for payload in ["a1", "a.", "a V5", "a\n"]:
        assert melody_to_wav_bytes(payload) == reference


def test_scale_sixth_tone_is_a4():
    pcm = read_pcm(melody_to_wav_bytes("cdefgab>c"))
    sixth = pcm[5 * NOTE:6 * NOTE]
    assert sixth[1] == analytic_sample(440.0, 1)
    assert len(pcm) == 8 * NOTE


def test_rest_between_notes_is_silent():
    pcm = read_pcm(melody_to_wav_bytes("apa"))
    assert not pcm[NOTE:2 * NOTE].any()
    assert np.array_equal(pcm[:NOTE], pcm[2 * NOTE:])


def test_custom_config_note_length():
    cfg = RenderConfig(note_duration_ms=100)
    data = melody_to_wav_bytes("ab", cfg)
    assert len(data) == 44 + 2 * 2 * 4410

import struct

import numpy as np
import pytest

from EMW.SMM.config import RenderConfig
from EMW.SGM.wav_writer import WavWriter, build_header, encode_wav
from EMW.errors import IoError

CANONICAL = struct.Struct("<4sI4s4sIHHIIHH4sI")


def canonical_header(n: int) -> bytes:
    return CANONICAL.pack(b"RIFF", 36 + 2 * n, b"WAVE", b"fmt ", 16, 1, 1,
                          44100, 88200, 2, 16, b"data", 2 * n)


@pytest.mark.parametrize("n", [0, 1, 13_230, 8 * 13_230])
def test_header_matches_template(n):
    header = build_header(n)
    assert len(header) == 44
    assert header == canonical_header(n)


def test_header_byte_layout():
    h = build_header(13_230)
    assert h[0:4] == b"RIFF"
    assert h[4:8] == (36 + 26_460).to_bytes(4, "little")
    assert h[8:12] == b"WAVE"
    assert h[12:16] == b"fmt "
    assert h[16:20] == (16).to_bytes(4, "little")
    assert h[20:22] == b"\x01\x00"
    assert h[22:24] == b"\x01\x00"
    assert h[24:28] == (44100).to_bytes(4, "little")
    assert h[28:32] == (88200).to_bytes(4, "little")
    assert h[32:34] == b"\x02\x00"
    assert h[34:36] == b"\x10\x00"
    assert h[36:40] == b"data"
    assert h[40:44] == (26_460).to_bytes(4, "little")


def test_header_follows_configured_sample_rate():
    h = build_header(10, RenderConfig(sample_rate=8000))
    assert struct.unpack_from("<II", h, 24) == (8000, 16000)


def test_encode_wav_is_header_then_data():
    samples = np.array([0, 1, -1, 32767, -32768], dtype=np.int16)
    data = encode_wav(samples)
    assert data[:44] == canonical_header(5)
    assert data[44:] == samples.astype("<i2").tobytes()


def test_streaming_writer_back_patches_header(tmp_path):
    path = tmp_path / "out.wav"
    with WavWriter(path) as w:
        w.write_samples(np.array([1, 2, 3], dtype=np.int16))
        w.write_samples(np.array([-4], dtype=np.int16))
    assert w.num_samples == 4
    assert path.read_bytes() == encode_wav([1, 2, 3, -4])


def test_streaming_writer_with_no_samples(tmp_path):
    path = tmp_path / "empty.wav"
    with WavWriter(path):
        pass
    assert path.read_bytes() == canonical_header(0)


def test_writer_unopenable_path_raises_ioerror(tmp_path):
    with pytest.raises(IoError) as info:
        with WavWriter(tmp_path / "missing-dir" / "out.wav"):
            pass
    assert isinstance(info.value, OSError)
    assert info.value.exit_code == 3


def test_write_before_open_is_rejected(tmp_path):
    with pytest.raises(ValueError):
        WavWriter(tmp_path / "x.wav").write_samples([0])


def test_failure_inside_block_leaves_partial_file(tmp_path):
    path = tmp_path / "partial.wav"
    with pytest.raises(RuntimeError):
        with WavWriter(path) as w:
            w.write_samples([5, 5])
            raise RuntimeError("boom")
    data = path.read_bytes()
    assert data[:44] == b"\x00" * 44
    assert len(data) == 48

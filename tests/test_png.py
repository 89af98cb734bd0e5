import struct
import zlib

import pytest

from hdrshot.png import encode_png, save_rgb_png


def chunks(png):
    pos = 8
    while pos < len(png):
        (length,) = struct.unpack_from(">I", png, pos)
        kind = png[pos + 4:pos + 8]
        payload = png[pos + 8:pos + 8 + length]
        (crc,) = struct.unpack_from(">I", png, pos + 8 + length)
        yield kind, payload, crc
        pos += 12 + length


def decode(png):
    parts = list(chunks(png))
    width, height, depth, color, *_ = struct.unpack(">IIBBBBB", parts[0][1])
    raw = zlib.decompress(b"".join(p for k, p, _ in parts if k == b"IDAT"))
    row = width * 3 + 1
    pixels = b"".join(raw[y * row + 1:(y + 1) * row] for y in range(height))
    return width, height, pixels


def test_signature_and_chunk_order():
    png = encode_png(bytes(12), 2, 2)
    assert png[:8] == b"\x89PNG\r\n\x1a\n"
    assert [k for k, _, _ in chunks(png)] == [b"IHDR", b"IDAT", b"IEND"]


def test_ihdr_describes_rgb8():
    png = encode_png(bytes(3 * 6), 3, 2)
    ihdr = next(p for k, p, _ in chunks(png) if k == b"IHDR")
    assert struct.unpack(">IIBBBBB", ihdr) == (3, 2, 8, 2, 0, 0, 0)


def test_chunk_crcs_are_valid():
    png = encode_png(bytes(range(24)), 4, 2)
    for kind, payload, crc in chunks(png):
        assert zlib.crc32(kind + payload) & 0xFFFFFFFF == crc


@pytest.mark.parametrize("width,height", [(1, 1), (3, 2), (7, 5)])
def test_round_trip(width, height):
    rgb = bytes((i * 31) % 256 for i in range(width * height * 3))
    assert decode(encode_png(rgb, width, height)) == (width, height, rgb)


def test_save_writes_encoded_file(tmp_path):
    rgb = bytes(range(18))
    target = tmp_path / "shot.png"
    save_rgb_png(rgb, 3, 2, target)
    assert target.read_bytes() == encode_png(rgb, 3, 2)


def test_save_to_missing_directory_raises(tmp_path):
    with pytest.raises(OSError):
        save_rgb_png(bytes(3), 1, 1, tmp_path / "missing" / "shot.png")


@pytest.mark.parametrize("width,height", [(0, 1), (1, 0), (-2, 3)])
def test_empty_image_raises(width, height):
    with pytest.raises(ValueError):
        encode_png(b"", width, height)


def test_short_data_raises():
    with pytest.raises(ValueError):
        encode_png(bytes(5), 2, 1)
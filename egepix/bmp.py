"""Writing images as uncompressed 24-bit BMP files."""

from __future__ import annotations

import os
import struct

_FILE_HEADER_SIZE = 14
_INFO_HEADER_SIZE = 40


def _row_pitch(width):
    pitch = width * 3
    if pitch & 3:
        pitch = (pitch + 4) & ~3
    return pitch


def encode_bmp(image):
    """Encode an image as a bottom-up 24-bit BMP; the alpha byte is dropped."""
    width, height = image.width, image.height
    pitch = _row_pitch(width)
    padding = bytes(pitch - width * 3)
    offset = _FILE_HEADER_SIZE + _INFO_HEADER_SIZE
    image_size = pitch * height

    file_header = struct.pack("<2sIHHI", b"BM", offset + image_size, 0, 0, offset)
    info_header = struct.pack(
        "<IiiHHIIiiII",
        _INFO_HEADER_SIZE,
        width,
        height,
        1,
        24,
        0,
        image_size,
        0,
        0,
        0,
        0,
    )

    out = bytearray(file_header + info_header)
    pixels = image.pixels
    for y in reversed(range(height)):
        row = pixels[y * width:(y + 1) * width]
        out += bytes(
            byte
            for color in row
            for byte in (color & 0xFF, (color >> 8) & 0xFF, (color >> 16) & 0xFF)
        )
        out += padding
    return bytes(out)


def save_bmp(image, path):
    """Write an image to ``path`` as a 24-bit BMP file."""
    data = encode_bmp(image)
    with open(os.fspath(path), "wb") as fp:
        fp.write(data)
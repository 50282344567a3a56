"""Reading and writing PNG files, and saving by file suffix."""

from __future__ import annotations

import io
import os

from PIL import Image as PilImage

from .bmp import save_bmp

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


class ImageIOError(OSError):
    """The data is not a usable PNG image, or could not be encoded as one."""


def _to_bytes(pixels, alpha):
    if alpha:
        return bytes(
            byte
            for c in pixels
            for byte in ((c >> 16) & 0xFF, (c >> 8) & 0xFF, c & 0xFF, (c >> 24) & 0xFF)
        )
    return bytes(
        byte for c in pixels for byte in ((c >> 16) & 0xFF, (c >> 8) & 0xFF, c & 0xFF)
    )


def save_png(image, path, alpha=False):
    """Write an image as an 8-bit RGB PNG, or RGBA when ``alpha`` is true."""
    mode = "RGBA" if alpha else "RGB"
    try:
        pil = PilImage.frombytes(mode, (image.width, image.height), _to_bytes(image.pixels, alpha))
        buffer = io.BytesIO()
        pil.save(buffer, format="PNG")
    except (ValueError, SystemError, OSError) as exc:
        raise ImageIOError(f"cannot encode {image.width}x{image.height} image as PNG") from exc
    with open(os.fspath(path), "wb") as fp:
        fp.write(buffer.getvalue())


def _decode_into(image, data):
    try:
        pil = PilImage.open(io.BytesIO(data))
        pil.load()
    except (OSError, ValueError, SyntaxError) as exc:
        raise ImageIOError("corrupt PNG data") from exc

    mode = pil.mode
    if mode == "P" or (mode == "RGB" and "transparency" in pil.info):
        pil = pil.convert("RGBA" if "transparency" in pil.info else "RGB")
        mode = pil.mode

    image.resize_f(pil.width, pil.height)

    raw = pil.tobytes()
    if mode == "RGB":
        image.pixels = [
            (r << 16) | (g << 8) | b for r, g, b in zip(raw[0::3], raw[1::3], raw[2::3])
        ]
    elif mode == "RGBA":
        image.pixels = [
            ((a << 24) | (r << 16) | (g << 8) | b) if a else 0
            for r, g, b, a in zip(raw[0::4], raw[1::4], raw[2::4], raw[3::4])
        ]
    # Greyscale images are only resized; their pixels are not converted.


def load_png_bytes(image, data):
    """Load PNG data held in memory into ``image``, resizing it."""
    data = bytes(data)
    if len(data) < 8 or data[:8] != PNG_SIGNATURE:
        raise ImageIOError("not a PNG image")
    _decode_into(image, data)


def load_png(image, path):
    """Load a PNG file into ``image``, resizing it."""
    with open(os.fspath(path), "rb") as fp:
        header = fp.read(8)
        if header != PNG_SIGNATURE:
            raise ImageIOError(f"not a PNG file: {os.fspath(path)}")
        fp.seek(0)
        data = fp.read()
    _decode_into(image, data)


def has_suffix(suffix, text):
    """Case-insensitive test whether ``text`` ends with ``suffix``."""
    if len(text) < len(suffix) or len(text) == 0:
        return False
    return text[len(text) - len(suffix):].upper() == suffix.upper()


def save_image(image, path):
    """Save as BMP when the name ends in ``.bmp``, otherwise as PNG."""
    name = os.fspath(path)
    if has_suffix(".bmp", name):
        save_bmp(image, name)
    else:
        save_png(image, name)
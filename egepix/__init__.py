"""In-memory ARGB pixel images: blitting, blending, blurring, rotation, BMP/PNG files and a Mersenne Twister."""

__version__ = "0.1.0"

__all__ = [
    "blend",
    "blur",
    "bmp",
    "clip",
    "color",
    "image",
    "mtrandom",
    "png",
    "rotate",
    "triangle",
]
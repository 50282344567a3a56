"""Packed 32-bit ARGB colour helpers (0xAARRGGBB)."""

_MASK32 = 0xFFFFFFFF


def rgb(r, g, b):
    """Pack red, green and blue into a colour with a zero alpha byte."""
    return ((r & 0xFF) << 16) | ((g & 0xFF) << 8) | (b & 0xFF)


def rgba(r, g, b, a):
    """Pack red, green, blue and alpha into a colour."""
    return ((a & 0xFF) << 24) | rgb(r, g, b)


def get_a(color):
    """Alpha byte of a colour."""
    return (color >> 24) & 0xFF


def get_r(color):
    """Red byte of a colour."""
    return (color >> 16) & 0xFF


def get_g(color):
    """Green byte of a colour."""
    return (color >> 8) & 0xFF


def get_b(color):
    """Blue byte of a colour."""
    return color & 0xFF


def with_alpha(color, alpha):
    """The colour's RGB part combined with a new alpha byte."""
    return (color & 0x00FFFFFF) | ((alpha & 0xFF) << 24)


def swap_rb(color):
    """Exchange the red and blue bytes (ARGB <-> ABGR)."""
    color &= _MASK32
    return (color & 0xFF00FF00) | ((color & 0xFF) << 16) | ((color >> 16) & 0xFF)


def alphablend(dst, src, alpha):
    """Blend ``src`` over ``dst`` with a constant alpha in 0..255.

    Each channel becomes ``(d * (255 - alpha) >> 8) + (s * alpha >> 8)``;
    the alpha byte of ``dst`` is kept.
    """
    src_weight = alpha & 0xFF
    dst_weight = 0xFF - src_weight

    def channel(shift):
        d = (dst >> shift) & 0xFF
        s = (src >> shift) & 0xFF
        return ((d * dst_weight >> 8) + (s * src_weight >> 8)) << shift

    return (dst & 0xFF000000) | channel(16) | channel(8) | channel(0)
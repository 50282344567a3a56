"""Blits that combine source and destination pixels: colour keys and alpha."""

from __future__ import annotations

from .clip import clip_blit
from .color import alphablend, get_a, with_alpha


def _coordinates(dst, src, x, y, src_x, src_y, width, height):
    """Yield ``(dst_index, src_x, src_y)`` for every pixel of a clipped blit."""
    rect = clip_blit(dst.viewport, src.width, src.height, x, y, src_x, src_y, width, height)
    i_end = min(rect.width, src.width - rect.src_x, dst.width - rect.x)
    j_end = min(rect.height, src.height - rect.src_y, dst.height - rect.y)
    i_start = max(0, -rect.x, -rect.src_x)
    j_start = max(0, -rect.y, -rect.src_y)
    dst_width = dst.width
    for j in range(j_start, j_end):
        row = (rect.y + j) * dst_width + rect.x
        sy = rect.src_y + j
        for i in range(i_start, i_end):
            yield row + i, rect.src_x + i, sy


def _blit(dst, src, x, y, src_x, src_y, width, height, combine):
    source = src.pixels
    src_width = src.width
    target = dst.pixels
    for index, sx, sy in _coordinates(dst, src, x, y, src_x, src_y, width, height):
        result = combine(target[index], source[sy * src_width + sx], sx, sy)
        if result is not None:
            target[index] = result & 0xFFFFFFFF


def putimage_transparent(dst, src, x=0, y=0, transparent=0, src_x=0, src_y=0, width=0, height=0):
    """Copy ``src`` into ``dst``, skipping pixels whose RGB equals ``transparent``.

    Copied pixels keep the destination's alpha byte. A ``width`` of 0 copies
    the whole source.
    """
    key = transparent & 0x00FFFFFF

    def combine(d, s, sx, sy):
        if s & 0x00FFFFFF != key:
            return with_alpha(s, get_a(d))
        return None

    _blit(dst, src, x, y, src_x, src_y, width, height, combine)


def putimage_alphablend(dst, src, x=0, y=0, alpha=0xFF, src_x=0, src_y=0, width=0, height=0):
    """Blend ``src`` over ``dst`` with a constant alpha in 0..255."""
    alpha &= 0xFF
    _blit(dst, src, x, y, src_x, src_y, width, height, lambda d, s, sx, sy: alphablend(d, s, alpha))


def putimage_alphatransparent(
    dst, src, x=0, y=0, transparent=0, alpha=0xFF, src_x=0, src_y=0, width=0, height=0
):
    """Blend ``src`` over ``dst`` with a constant alpha, skipping the key colour."""
    key = transparent & 0x00FFFFFF
    alpha &= 0xFF

    def combine(d, s, sx, sy):
        if s & 0x00FFFFFF != key:
            return alphablend(d, s, alpha)
        return None

    _blit(dst, src, x, y, src_x, src_y, width, height, combine)


def putimage_withalpha(dst, src, x=0, y=0, src_x=0, src_y=0, width=0, height=0):
    """Blend ``src`` over ``dst`` using each source pixel's own alpha byte."""
    _blit(
        dst, src, x, y, src_x, src_y, width, height,
        lambda d, s, sx, sy: alphablend(d, s, get_a(s)),
    )


def putimage_alphafilter(dst, src, x=0, y=0, alpha_image=None, src_x=0, src_y=0, width=0, height=0):
    """Blend ``src`` over ``dst`` with per-pixel alpha from ``alpha_image``.

    The alpha is the low byte of the ``alpha_image`` pixel at the same source
    coordinates; pixels where that value is entirely zero are left alone.
    """
    if alpha_image is None:
        raise ValueError("alpha_image is required")
    mask = alpha_image.pixels
    mask_width, mask_height = alpha_image.width, alpha_image.height

    def combine(d, s, sx, sy):
        if not (sx < mask_width and sy < mask_height):
            return None
        value = mask[sy * mask_width + sx]
        if value:
            return alphablend(d, s, value & 0xFF)
        return None

    _blit(dst, src, x, y, src_x, src_y, width, height, combine)
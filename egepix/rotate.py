"""Rotated and zoomed blits built on textured triangles and per-pixel placement."""

from __future__ import annotations

import math

from .image import new_image
from .triangle import Triangle, float2int, putimage_triangle

FLOAT_EPS = 1e-6

_TEXTURE_TRIANGLES = (
    Triangle(((0.0, 0.0), (0.0, 1.0), (1.0, 1.0))),
    Triangle(((1.0, 1.0), (1.0, 0.0), (0.0, 0.0))),
)


def _dest_triangle(texture, tex_triangle, x, y, center_x, center_y, radian, zoom):
    cr = math.cos(radian)
    sr = -math.sin(radian)
    points = []
    for u, v in tex_triangle.points:
        px = (u - center_x) * texture.width
        py = (v - center_y) * texture.height
        dx = cr * px - sr * py
        dy = sr * px + cr * py
        points.append((
            float(float2int(dx * zoom + x + FLOAT_EPS)),
            float(float2int(dy * zoom + y + FLOAT_EPS)),
        ))
    return Triangle(tuple(points))


def _draw_rotated(dst, texture, x, y, center_x, center_y, radian, zoom, transparent, alpha, smooth):
    if dst is None:
        return
    for tex_triangle in _TEXTURE_TRIANGLES:
        dest = _dest_triangle(texture, tex_triangle, x, y, center_x, center_y, radian, zoom)
        putimage_triangle(dst, texture, dest, tex_triangle, transparent, alpha, smooth)


def putimage_rotate(
    dst, texture, x, y, center_x, center_y, radian, transparent=False, alpha=-1, smooth=False
):
    """Draw ``texture`` rotated by ``radian`` so that its centre lands on ``(x, y)``.

    ``center_x`` and ``center_y`` are fractions (0.0..1.0) of the texture's
    size. ``alpha`` in 0..255 blends; any other value copies.
    """
    _draw_rotated(dst, texture, x, y, center_x, center_y, radian, 1.0, transparent, alpha, smooth)


def putimage_rotatezoom(
    dst, texture, x, y, center_x, center_y, radian, zoom, transparent=False, alpha=-1, smooth=False
):
    """Like :func:`putimage_rotate`, additionally scaling the texture by ``zoom``."""
    _draw_rotated(dst, texture, x, y, center_x, center_y, radian, zoom, transparent, alpha, smooth)


def _put_pixel_keep_alpha(dst, x, y, color):
    vp = dst.viewport
    x = int(x) + vp.left
    y = int(y) + vp.top
    left = max(vp.left, 0)
    top = max(vp.top, 0)
    right = min(vp.right, dst.width)
    bottom = min(vp.bottom, dst.height)
    if left <= x < right and top <= y < bottom:
        index = y * dst.width + x
        dst.pixels[index] = (color & 0x00FFFFFF) | (dst.pixels[index] & 0xFF000000)


def putimage_rotatetransparent(
    dst,
    src,
    x_center_dest,
    y_center_dest,
    x_center_src,
    y_center_src,
    transparent,
    radian,
    zoom=1.0,
    src_rect=None,
):
    """Zoom a region of ``src``, rotate it about a centre and plot it into ``dst``.

    ``src_rect`` is ``(x, y, width, height)`` and defaults to the whole source.
    The source centre ``(x_center_src, y_center_src)`` is placed at
    ``(x_center_dest, y_center_dest)``. Pixels equal to ``transparent`` are
    skipped; plotted pixels keep the destination's alpha byte.
    """
    if src_rect is None:
        src_rect = (0, 0, src.width, src.height)
    src_x, src_y, src_width, src_height = src_rect

    zoomed_width = int(src_width * zoom)
    zoomed_height = int(src_height * zoom)
    center_x = int((x_center_src - src_x) * zoom)
    center_y = int((y_center_src - src_y) * zoom)

    zoomed = new_image(zoomed_width, zoomed_height)
    src.put_stretched(zoomed, 0, 0, zoomed_width, zoomed_height, src_x, src_y, src_width, src_height)

    cos_r = math.cos(radian)
    sin_r = math.sin(radian)
    for x in range(zoomed_width):
        for y in range(zoomed_height):
            color = zoomed.pixels[y * zoomed.width + x]
            if color == transparent:
                continue
            rx = x - center_x
            ry = y - center_y
            px = rx * cos_r - ry * sin_r + x_center_dest
            py = rx * sin_r + ry * cos_r + y_center_dest
            _put_pixel_keep_alpha(dst, px, py, color)
            _put_pixel_keep_alpha(dst, px + 0.5, py, color)
            _put_pixel_keep_alpha(dst, px, py + 0.5, color)
            _put_pixel_keep_alpha(dst, px + 0.5, py + 0.5, color)
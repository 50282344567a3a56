"""Rectangle clipping used by the blit and filter routines."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Viewport:
    """A drawing viewport: left/top inclusive, right/bottom exclusive."""

    left: int
    top: int
    right: int
    bottom: int


@dataclass(frozen=True)
class BlitRect:
    """A destination origin, a source origin and a shared size."""

    x: int
    y: int
    src_x: int
    src_y: int
    width: int
    height: int


def clip_blit(viewport, src_width, src_height, x, y, src_x, src_y, width, height):
    """Fit a source rectangle drawn at ``(x, y)`` into a destination viewport.

    ``x`` and ``y`` are relative to the viewport's top-left corner and come
    back as absolute destination coordinates. A ``width`` of 0 selects the
    whole source. The result may have a non-positive width or height when
    nothing is left to draw.
    """
    x += viewport.left
    y += viewport.top

    if width == 0:
        width = src_width
        height = src_height

    width = min(width, src_width)
    height = min(height, src_height)

    if src_x < 0:
        width += src_x
        x += src_x
        src_x = 0
    if src_y < 0:
        height += src_y
        y += src_y
        src_y = 0

    if x < viewport.left:
        dx = viewport.left - x
        x += dx
        src_x += dx
        width -= dx
    if y < viewport.top:
        dy = viewport.top - y
        y += dy
        src_y += dy
        height -= dy

    if x + width > viewport.right:
        width -= x + width - viewport.right
    if y + height > viewport.bottom:
        height -= y + height - viewport.bottom

    return BlitRect(x, y, src_x, src_y, width, height)


def clip_region(dst_width, dst_height, x, y, width, height):
    """Fit a region into an image of the given size.

    A zero width or height selects the full extent. A negative origin is moved
    to 0 without shrinking the size; the far edges are then cut to the image.
    Returns ``(x, y, width, height)``.
    """
    if width == 0:
        width = dst_width
    if height == 0:
        height = dst_height
    x = max(x, 0)
    y = max(y, 0)
    if x + width > dst_width:
        width -= x + width - dst_width
    if y + height > dst_height:
        height -= y + height - dst_height
    return x, y, width, height
"""Neighbourhood blur filter on a rectangular region of an image."""

from __future__ import annotations

from .clip import clip_region

_MASK32 = 0xFFFFFFFF


class InvalidRegionError(ValueError):
    """The region to filter is empty or too small."""


def _cdiv(a, b):
    """Integer division truncating toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def _cmod(a, b):
    return a - b * _cdiv(a, b)


def _weights(intensity, alpha, divisor):
    whole = _cdiv(intensity * alpha, divisor) >> 8
    frac = _cdiv(_cmod(intensity * alpha, divisor * alpha), divisor) if alpha else 0
    return whole, frac


def _mix(sum_rb, sum_g, center, weights, center_weight):
    whole, frac = weights
    rb = (
        sum_rb * whole
        + ((((sum_rb * frac) & _MASK32) >> 8) & 0xFF00FF)
        + (center & 0xFF00FF) * center_weight
    ) & _MASK32
    g = (
        sum_g * whole
        + (((sum_g * frac) & _MASK32) >> 8)
        + (center & 0xFF00) * center_weight
    ) & _MASK32
    return ((rb & 0xFF00FF00) | (g & 0xFF0000)) >> 8


def _sums(values):
    return sum(v & 0xFF00FF for v in values), sum(v & 0xFF00 for v in values)


_FOUR = ((0, -1), (-1, 0), (1, 0), (0, 1))
_EIGHT = ((-1, -1), (0, -1), (1, -1), (-1, 0), (1, 0), (-1, 1), (0, 1), (1, 1))


def _blur(image, intensity, alpha, x, y, width, height, offsets, divisors):
    center_weight = ((0xFF - intensity) * alpha) >> 8
    weights = {n: _weights(intensity, alpha, d) for n, d in divisors.items()}
    img_width = image.width
    original = list(image.pixels)
    pixels = image.pixels
    right, bottom = x + width - 1, y + height - 1
    eight = len(offsets) == 8

    def at(px, py):
        return original[py * img_width + px]

    for py in range(y, bottom + 1):
        for px in range(x, right + 1):
            center = at(px, py)
            if eight and px == right and y < py < bottom:
                # The last column of inner rows sums a slightly different set
                # of neighbours for the red/blue and the green channels.
                sum_rb = sum(v & 0xFF00FF for v in (
                    at(px - 1, py - 1), at(px, py - 1), at(px - 1, py),
                    at(px - 1, py - 1), at(px, py + 1),
                ))
                sum_g = sum(v & 0xFF00 for v in (
                    at(px - 1, py), at(px, py - 1), at(px - 1, py),
                    at(px - 1, py + 1), at(px, py + 1),
                ))
                chosen = weights[5]
            else:
                neighbours = [
                    at(px + dx, py + dy)
                    for dx, dy in offsets
                    if x <= px + dx <= right and y <= py + dy <= bottom
                ]
                sum_rb, sum_g = _sums(neighbours)
                chosen = weights[len(neighbours)]
            pixels[py * img_width + px] = _mix(sum_rb, sum_g, center, chosen, center_weight)


def imagefilter_blurring(image, intensity, alpha=0x100, x=0, y=0, width=0, height=0):
    """Blur a region of ``image`` in place.

    ``intensity`` up to 0x80 mixes in the four direct neighbours; above that
    the eight surrounding pixels are used. ``alpha`` (0..0x100, anything else
    means 0x100) scales the result. A zero width or height selects the full
    extent. The alpha byte of filtered pixels is cleared.
    """
    x, y, width, height = clip_region(image.width, image.height, x, y, width, height)
    if width <= 0 or height <= 0:
        raise InvalidRegionError("blur region is empty")
    if width < 2 or height < 2:
        raise InvalidRegionError("blur region must be at least 2x2 pixels")
    if alpha < 0 or alpha > 0x100:
        alpha = 0x100
    if intensity <= 0x80:
        _blur(image, intensity * 2, alpha, x, y, width, height, _FOUR, {2: 2, 3: 3, 4: 4})
    else:
        _blur(image, (intensity - 0x80) * 2, alpha, x, y, width, height, _EIGHT, {3: 3, 5: 5, 8: 8})
"""Texture-mapped triangle drawing with optional colour key, alpha and bilinear smoothing."""

from __future__ import annotations

import math
from dataclasses import dataclass

_MASK32 = 0xFFFFFFFF


@dataclass(frozen=True)
class Triangle:
    """Three ``(x, y)`` points and an optional colour."""

    points: tuple
    color: int = 0

    def __post_init__(self):
        points = tuple((float(x), float(y)) for x, y in self.points)
        if len(points) != 3:
            raise ValueError(f"a triangle needs 3 points, got {len(points)}")
        object.__setattr__(self, "points", points)


def float2int(value):
    """Round half away from zero to an int."""
    if value >= 0:
        return int(value + 0.5)
    return int(value - 0.5)


def _half_up(value):
    return int(value + 0.5)


def _fdiv(a, b):
    """Float division that yields inf or nan instead of raising on a zero divisor."""
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.inf if a > 0 else -math.inf
    return a / b


def _finite(*values):
    return all(math.isfinite(v) for v in values)


def _blend_nearest(d, s, sa):
    da = 0xFF - sa
    d = (((d & 0xFF00FF) * da) & 0xFF00FF00) | ((((d & 0xFF00) * da) >> 16) << 16)
    s = (((s & 0xFF00FF) * sa) & 0xFF00FF00) | ((((s & 0xFF00) * sa) >> 16) << 16)
    return (((d + s) & _MASK32) >> 8) & _MASK32


def _blend_smooth(d, s, sa):
    da = 0xFF - sa
    d = (((((d & 0xFF00FF) * da) & 0xFF00FF00) | (((d & 0xFF00) * da) & 0xFF0000)) >> 8)
    s = (((((s & 0xFF00FF) * sa) & 0xFF00FF00) | (((s & 0xFF00) * sa) & 0xFF0000)) >> 8)
    return (d + s) & _MASK32


def _bilinear(lt, rt, lb, rb, fx, fy):
    weight_a = int(fx * 0x100)
    weight_b = 0xFF - weight_a
    top_rb = ((((lt & 0xFF00FF) * weight_b + (rt & 0xFF00FF) * weight_a) & 0xFF00FF00) >> 8)
    top_g = ((((lt & 0xFF00) * weight_b + (rt & 0xFF00) * weight_a) & 0xFF0000) >> 8)
    bot_rb = ((((lb & 0xFF00FF) * weight_b + (rb & 0xFF00FF) * weight_a) & 0xFF00FF00) >> 8)
    bot_g = ((((lb & 0xFF00) * weight_b + (rb & 0xFF00) * weight_a) & 0xFF0000) >> 8)
    weight_a = int(fy * 0x100)
    weight_b = 0xFF - weight_a
    crb = (top_rb * weight_b + bot_rb * weight_a) & 0xFF00FF00
    cg = (top_g * weight_b + bot_g * weight_a) & 0xFF0000
    return ((crb | cg) >> 8) & _MASK32


def _nearest_sampler(src):
    pixels, width, height = src.pixels, src.width, src.height

    def sample(cx, cy):
        if not _finite(cx, cy):
            return None
        ix, iy = int(cx), int(cy)
        if 0 <= ix < width and 0 <= iy < height:
            return pixels[iy * width + ix]
        return None

    return sample


def _bilinear_sampler(src):
    pixels, width, height = src.pixels, src.width, src.height

    def sample(cx, cy):
        if not _finite(cx, cy):
            return None
        ix, iy = int(cx), int(cy)
        if not (0 <= ix < width and 0 <= iy < height):
            return None
        ix1 = min(ix + 1, width - 1)
        iy1 = min(iy + 1, height - 1)
        return _bilinear(
            pixels[iy * width + ix],
            pixels[iy * width + ix1],
            pixels[iy1 * width + ix],
            pixels[iy1 * width + ix1],
            cx - ix,
            cy - iy,
        )

    return sample


class _ScanlineDrawer:
    """Draws horizontal spans of a triangle, sampling the texture along a segment."""

    def __init__(self, dst, src, x1, x2, transparent, alpha, smooth):
        self.dst = dst
        self.x1 = x1
        self.x2 = x2
        self.smooth = smooth
        self.offset = 0.0 if smooth else 0.5
        self.sample = _bilinear_sampler(src) if smooth else _nearest_sampler(src)
        self.rounding = _half_up if (transparent and not smooth) else float2int

        use_alpha = 0 <= alpha < 0x100
        blend = _blend_smooth if smooth else _blend_nearest
        if use_alpha and transparent:
            self.combine = lambda d, c: blend(d, c, alpha) if c else None
        elif use_alpha:
            self.combine = lambda d, c: blend(d, c, alpha)
        elif transparent:
            self.combine = lambda d, c: c if c else None
        else:
            self.combine = lambda d, c: c

    def draw(self, vt, svt):
        (vx0, vy0), (vx1, _) = vt
        (sx0, sy0), (sx1, sy1) = svt
        if not _finite(vx0, vy0, vx1, sx0, sy0, sx1, sy1):
            return
        start = self.rounding(vx0)
        end = self.rounding(vx1)
        y = self.rounding(vy0)
        span = end - start
        if span <= 0:
            return
        dst = self.dst
        if not 0 <= y < dst.height:
            return

        dw = vx1 - vx0
        rw = sx1 - sx0
        sx0 += _fdiv((start - vx0) * rw, dw)
        sx1 += _fdiv((end - vx1) * rw, dw)

        cur_x = sx0 + self.offset
        cur_y = sy0 + self.offset
        step_x = (sx1 - sx0) / span
        step_y = (sy1 - sy0) / span

        begin = start
        start = max(start, self.x1)
        end = min(end, self.x2, dst.width)
        cur_x += (start - begin) * step_x
        cur_y += (start - begin) * step_y

        pixels = dst.pixels
        row = y * dst.width
        for i in range(max(start, 0), end):
            color = self.sample(cur_x, cur_y)
            if color is not None:
                result = self.combine(pixels[row + i], color)
                if result is not None:
                    pixels[row + i] = result & _MASK32
            cur_x += step_x
            cur_y += step_y


def _sorted_by_y(dest_points, tex_points):
    t2 = [list(p) for p in dest_points]
    t3 = [list(p) for p in tex_points]
    for a, b in ((1, 2), (0, 1), (1, 2)):
        if t2[a][1] > t2[b][1]:
            t2[a], t2[b] = t2[b], t2[a]
            t3[a], t3[b] = t3[b], t3[a]
    return t2, t3


def _draw_triangle(drawer, dest_points, tex_points, y1, y2):
    t2, t3 = _sorted_by_y(dest_points, tex_points)

    s = float2int(t2[0][1])
    e = float2int(t2[2][1])
    m = float2int(t2[1][1])

    pl = [t2[1][0] - t2[0][0], t2[1][1] - t2[0][1]]
    pr = [t2[2][0] - t2[0][0], t2[2][1] - t2[0][1]]
    spl = [t3[1][0] - t3[0][0], t3[1][1] - t3[0][1]]
    spr = [t3[2][0] - t3[0][0], t3[2][1] - t3[0][1]]
    h = m - s
    rs = s
    s = max(s, y1)
    if m >= y2:
        m = y2
    if pl[0] > pr[0]:
        pl, pr = pr, pl
        spl, spr = spr, spl
    lh = float2int(pl[1] + t2[0][1]) - float2int(t2[0][1])
    rh = float2int(pr[1] + t2[0][1]) - float2int(t2[0][1])
    if h > 0:
        for i in range(s, m):
            dlt = _fdiv(i - rs, lh)
            drt = _fdiv(i - rs, rh)
            vt = ((t2[0][0] + pl[0] * dlt, i), (t2[0][0] + pr[0] * drt, i))
            svt = (
                (t3[0][0] + spl[0] * dlt, t3[0][1] + spl[1] * dlt),
                (t3[0][0] + spr[0] * drt, t3[0][1] + spr[1] * drt),
            )
            drawer.draw(vt, svt)

    if pl[1] > pr[1]:
        dd = _fdiv(pr[1], pl[1])
        pl[0] *= dd
        spl[0] *= dd
        spl[1] *= dd
    else:
        dd = _fdiv(pl[1], pr[1])
        pr[0] *= dd
        spr[0] *= dd
        spr[1] *= dd
    if y1 <= m < y2 and m < e:
        vt = ((t2[0][0] + pl[0], m), (t2[0][0] + pr[0], m))
        svt = (
            (t3[0][0] + spl[0], t3[0][1] + spl[1]),
            (t3[0][0] + spr[0], t3[0][1] + spr[1]),
        )
        drawer.draw(vt, svt)

    pl = [t2[0][0] - t2[2][0], t2[0][1] - t2[2][1]]
    pr = [t2[1][0] - t2[2][0], t2[1][1] - t2[2][1]]
    spl = [t3[0][0] - t3[2][0], t3[0][1] - t3[2][1]]
    spr = [t3[1][0] - t3[2][0], t3[1][1] - t3[2][1]]
    h = e - m
    re = e
    if m < y1:
        m = y1 - 1
    if e >= y2:
        e = y2 - 1
    if pl[0] > pr[0]:
        pl, pr = pr, pl
        spl, spr = spr, spl
    lh = float2int(t2[2][1]) - float2int(pl[1] + t2[2][1])
    rh = float2int(t2[2][1]) - float2int(pr[1] + t2[2][1])
    if h > 0:
        for i in range(e, m, -1):
            dlt = _fdiv(re - i, lh)
            drt = _fdiv(re - i, rh)
            vt = ((t2[2][0] + pl[0] * dlt, i), (t2[2][0] + pr[0] * drt, i))
            svt = (
                (t3[2][0] + spl[0] * dlt, t3[2][1] + spl[1] * dlt),
                (t3[2][0] + spr[0] * drt, t3[2][1] + spr[1] * drt),
            )
            drawer.draw(vt, svt)


def _points(triangle):
    if isinstance(triangle, Triangle):
        return triangle.points
    return Triangle(tuple(triangle)).points


def putimage_triangle(
    dst, texture, dest_triangle, texture_triangle, transparent=False, alpha=-1, smooth=False
):
    """Draw a triangle of ``texture`` into ``dst``.

    ``dest_triangle`` holds pixel coordinates in ``dst``; ``texture_triangle``
    holds texture coordinates in 0.0..1.0. With ``transparent``, texels that
    are entirely zero are skipped. An ``alpha`` in 0..255 blends the texture
    over the destination; any other value copies. ``smooth`` samples with
    bilinear interpolation and needs a texture of at least 2 x 2 pixels.
    """
    if dst is None:
        return
    margin = 2 if smooth else 1
    tex_points = [
        (
            float(float2int(u * (texture.width - margin))),
            float(float2int(v * (texture.height - margin))),
        )
        for u, v in _points(texture_triangle)
    ]
    dest_points = _points(dest_triangle)

    if smooth and not (texture.width > 1 and texture.height > 1):
        return
    drawer = _ScanlineDrawer(dst, texture, 0, dst.width, transparent, alpha, smooth)
    _draw_triangle(drawer, dest_points, tex_points, 0, dst.height)
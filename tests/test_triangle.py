import pytest

from egepix.image import Image
from egepix.triangle import Triangle, float2int, putimage_triangle

SENTINEL = 0x12345678
TEX_COLOR = 0x00336699


def _filled(width, height, color):
    img = Image(width, height)
    img.pixels = [color] * (width * height)
    return img


def _big_triangle():
    return Triangle(((-50, -50), (200, -50), (-50, 200)))


def _tex_triangle():
    return Triangle(((0, 0), (1, 0), (0, 1)))


def test_float2int_rounds_half_away_from_zero():
    assert float2int(2.5) == 3
    assert float2int(-2.5) == -float2int(2.5)
    assert float2int(7.0) == 7


@pytest.mark.parametrize("value", [0.1, 0.49, 1.5, 3.7, 10.5, 123.456])
def test_float2int_is_symmetric(value):
    assert float2int(-value) == -float2int(value)


def test_triangle_requires_three_points():
    with pytest.raises(ValueError):
        Triangle(((0, 0), (1, 1)))


def test_triangle_points_become_floats():
    tri = Triangle(((0, 0), (1, 2), (3, 4)))
    assert tri.points == ((0.0, 0.0), (1.0, 2.0), (3.0, 4.0))


def test_large_triangle_fills_whole_image():
    dst = _filled(10, 10, SENTINEL)
    tex = _filled(4, 4, TEX_COLOR)
    putimage_triangle(dst, tex, _big_triangle(), _tex_triangle())
    assert set(dst.pixels) == {TEX_COLOR}


def test_drawing_stays_within_bounding_box():
    dst = _filled(10, 10, SENTINEL)
    tex = _filled(4, 4, TEX_COLOR)
    putimage_triangle(dst, tex, Triangle(((2, 2), (6, 2), (2, 6))), _tex_triangle())
    written = 0
    for y in range(10):
        for x in range(10):
            value = dst.get_pixel(x, y)
            if not (2 <= x <= 6 and 2 <= y <= 6):
                assert value == SENTINEL
            elif value != SENTINEL:
                assert value == TEX_COLOR
                written += 1
    assert written > 0


def test_written_pixels_come_from_texture():
    dst = _filled(12, 12, SENTINEL)
    tex = Image(4, 4)
    tex.pixels = [0x00010000 * (i + 1) for i in range(16)]
    putimage_triangle(dst, tex, Triangle(((1, 1), (10, 2), (3, 11))), _tex_triangle())
    written = [p for p in dst.pixels if p != SENTINEL]
    assert written
    assert set(written) <= set(tex.pixels)


def test_transparent_zero_texture_leaves_destination():
    dst = _filled(10, 10, SENTINEL)
    tex = _filled(4, 4, 0)
    putimage_triangle(dst, tex, _big_triangle(), _tex_triangle(), transparent=True)
    assert dst.pixels == [SENTINEL] * 100


def test_transparent_alpha_zero_texture_leaves_destination():
    dst = _filled(10, 10, SENTINEL)
    tex = _filled(4, 4, 0)
    putimage_triangle(dst, tex, _big_triangle(), _tex_triangle(), transparent=True, alpha=128)
    assert dst.pixels == [SENTINEL] * 100


def test_alpha_out_of_range_means_plain_copy():
    tex = _filled(4, 4, TEX_COLOR)
    a = _filled(10, 10, SENTINEL)
    b = _filled(10, 10, SENTINEL)
    putimage_triangle(a, tex, _big_triangle(), _tex_triangle(), alpha=0x100)
    putimage_triangle(b, tex, _big_triangle(), _tex_triangle(), alpha=-1)
    assert a.pixels == b.pixels


def test_alpha_blend_is_uniform_and_changes_destination():
    dst = _filled(10, 10, 0x00FFFFFF)
    tex = _filled(4, 4, TEX_COLOR)
    putimage_triangle(dst, tex, _big_triangle(), _tex_triangle(), alpha=128)
    values = set(dst.pixels)
    assert len(values) == 1
    assert values.isdisjoint({0x00FFFFFF})


def test_smooth_uniform_texture_gives_uniform_result():
    dst = _filled(10, 10, SENTINEL)
    tex = _filled(4, 4, TEX_COLOR)
    putimage_triangle(dst, tex, _big_triangle(), _tex_triangle(), smooth=True)
    values = set(dst.pixels)
    assert len(values) == 1
    assert SENTINEL not in values


def test_smooth_needs_two_by_two_texture():
    dst = _filled(6, 6, SENTINEL)
    tex = _filled(1, 4, TEX_COLOR)
    putimage_triangle(dst, tex, _big_triangle(), _tex_triangle(), smooth=True)
    assert dst.pixels == [SENTINEL] * 36


def test_triangle_outside_image_draws_nothing():
    dst = _filled(8, 8, SENTINEL)
    tex = _filled(4, 4, TEX_COLOR)
    putimage_triangle(dst, tex, Triangle(((20, 20), (30, 20), (20, 30))), _tex_triangle())
    assert dst.pixels == [SENTINEL] * 64


def test_plain_sequences_accepted_as_triangles():
    a = _filled(10, 10, SENTINEL)
    b = _filled(10, 10, SENTINEL)
    tex = _filled(4, 4, TEX_COLOR)
    putimage_triangle(a, tex, _big_triangle(), _tex_triangle())
    putimage_triangle(b, tex, [(-50, -50), (200, -50), (-50, 200)], [(0, 0), (1, 0), (0, 1)])
    assert a.pixels == b.pixels
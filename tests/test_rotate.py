import math

from egepix.image import Image
from egepix.rotate import (
    putimage_rotate,
    putimage_rotatetransparent,
    putimage_rotatezoom,
)

COLOR = 0x00123456


def _uniform(width, height, color):
    img = Image(width, height)
    img.pixels = [color] * (width * height)
    return img


def _drawn(img, background=0):
    return [
        (x, y)
        for y in range(img.height)
        for x in range(img.width)
        if img.get_pixel(x, y) != background
    ]


def test_rotate_zero_only_writes_texture_colour_near_origin():
    dst = Image(20, 20)
    tex = _uniform(4, 4, COLOR)
    putimage_rotate(dst, tex, 8, 8, 0.0, 0.0, 0.0)
    drawn = _drawn(dst)
    assert drawn
    assert all(dst.get_pixel(x, y) == COLOR for x, y in drawn)
    assert all(8 <= x <= 12 and 8 <= y <= 12 for x, y in drawn)


def test_rotate_quarter_turn_only_writes_texture_colour():
    dst = Image(20, 20)
    tex = _uniform(4, 4, COLOR)
    putimage_rotate(dst, tex, 10, 10, 0.5, 0.5, math.pi / 2)
    drawn = _drawn(dst)
    assert drawn
    assert {dst.get_pixel(x, y) for x, y in drawn} == {COLOR}
    assert all(7 <= x <= 13 and 7 <= y <= 13 for x, y in drawn)


def test_rotate_transparent_zero_texture_leaves_destination():
    dst = _uniform(10, 10, 0xFF0000FF)
    tex = _uniform(4, 4, 0)
    putimage_rotate(dst, tex, 5, 5, 0.5, 0.5, 0.3, transparent=True)
    assert dst.pixels == [0xFF0000FF] * 100


def test_rotatezoom_unit_zoom_matches_rotate():
    tex = Image(4, 4)
    tex.pixels = [(i * 0x010203 + 0x10) & 0xFFFFFF for i in range(16)]
    a = Image(16, 16)
    b = Image(16, 16)
    putimage_rotate(a, tex, 8, 8, 0.5, 0.5, 0.7)
    putimage_rotatezoom(b, tex, 8, 8, 0.5, 0.5, 0.7, 1.0)
    assert a.pixels == b.pixels


def test_rotatezoom_larger_zoom_covers_more():
    tex = _uniform(4, 4, COLOR)
    small = Image(30, 30)
    large = Image(30, 30)
    putimage_rotatezoom(small, tex, 15, 15, 0.5, 0.5, 0.0, 1.0)
    putimage_rotatezoom(large, tex, 15, 15, 0.5, 0.5, 0.0, 3.0)
    assert len(_drawn(large)) > len(_drawn(small))


def _distinct_source():
    src = Image(3, 3)
    src.pixels = [0x00100000 + i for i in range(9)]
    return src


def test_rotatetransparent_identity_places_pixels_and_keeps_alpha():
    src = _distinct_source()
    dst = _uniform(10, 10, 0xFF000000)
    putimage_rotatetransparent(dst, src, 5, 5, 0, 0, 0xFFFFFFFF, 0.0, 1.0)
    for y in range(3):
        for x in range(3):
            expected = (src.get_pixel(x, y) & 0x00FFFFFF) | 0xFF000000
            assert dst.get_pixel(5 + x, 5 + y) == expected
    assert dst.get_pixel(4, 4) == 0xFF000000
    assert dst.get_pixel(8, 8) == 0xFF000000


def test_rotatetransparent_skips_key_colour():
    src = _distinct_source()
    key = src.get_pixel(1, 1)
    dst = Image(10, 10)
    putimage_rotatetransparent(dst, src, 5, 5, 0, 0, key, 0.0, 1.0)
    assert dst.get_pixel(6, 6) == 0
    assert dst.get_pixel(5, 5) == src.get_pixel(0, 0)


def test_rotatetransparent_zoom_two_covers_square():
    src = _distinct_source()
    dst = Image(20, 20)
    putimage_rotatetransparent(dst, src, 5, 5, 0, 0, 0xFFFFFFFF, 0.0, 2.0)
    drawn = _drawn(dst)
    assert len(drawn) == 36
    assert dst.get_pixel(5, 5) == src.get_pixel(0, 0)
    assert dst.get_pixel(10, 10) == src.get_pixel(2, 2)


def test_rotatetransparent_src_rect_selects_region():
    src = _distinct_source()
    dst = Image(10, 10)
    putimage_rotatetransparent(
        dst, src, 2, 2, 1, 1, 0xFFFFFFFF, 0.0, 1.0, src_rect=(1, 1, 2, 2)
    )
    assert len(_drawn(dst)) == 4
    assert dst.get_pixel(2, 2) == src.get_pixel(1, 1)
    assert dst.get_pixel(3, 3) == src.get_pixel(2, 2)


def test_rotatetransparent_clips_outside_destination():
    src = _distinct_source()
    dst = Image(4, 4)
    putimage_rotatetransparent(dst, src, 3, 3, 0, 0, 0xFFFFFFFF, 0.0, 1.0)
    assert _drawn(dst) == [(3, 3)]
    assert dst.get_pixel(3, 3) == src.get_pixel(0, 0)
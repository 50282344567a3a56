import pytest

from egepix.blur import InvalidRegionError, imagefilter_blurring
from egepix.image import Image

WHITE = 0x00FFFFFF


def _spot(size=5):
    img = Image(size, size)
    img.set_pixel(size // 2, size // 2, WHITE)
    return img


def test_four_neighbour_blur_spreads_orthogonally():
    img = _spot()
    imagefilter_blurring(img, 0x40)
    center = img.get_pixel(2, 2)
    assert 0 < center & 0xFF < 0xFF
    assert img.get_pixel(2, 1) & 0xFF > 0
    assert img.get_pixel(1, 2) & 0xFF > 0
    assert img.get_pixel(1, 1) == 0


def test_eight_neighbour_blur_reaches_diagonals():
    img = _spot()
    imagefilter_blurring(img, 0xC0)
    assert img.get_pixel(1, 1) & 0xFF > 0
    assert img.get_pixel(2, 1) & 0xFF > 0


def test_four_neighbour_blur_is_mirror_symmetric():
    img = _spot()
    imagefilter_blurring(img, 0x40)
    for y in range(5):
        row = [img.get_pixel(x, y) for x in range(5)]
        assert row == row[::-1]


def test_black_stays_black():
    img = Image(4, 4)
    imagefilter_blurring(img, 0x40)
    assert img.pixels == [0] * 16


def test_pixels_outside_region_unchanged():
    img = Image(6, 6)
    img.pixels = [WHITE] * 36
    imagefilter_blurring(img, 0x40, 0x100, 3, 3, 3, 3)
    for y in range(6):
        for x in range(6):
            if x < 3 or y < 3:
                assert img.get_pixel(x, y) == WHITE
    assert img.get_pixel(4, 4) >> 24 == 0


def test_alpha_byte_is_cleared():
    img = Image(3, 3)
    img.pixels = [0xFF000000] * 9
    imagefilter_blurring(img, 0x40)
    assert img.pixels == [0] * 9


def test_empty_region_raises():
    with pytest.raises(InvalidRegionError):
        imagefilter_blurring(Image(4, 4), 0x40, 0x100, 10, 0, 2, 2)


def test_single_row_raises():
    with pytest.raises(InvalidRegionError):
        imagefilter_blurring(Image(4, 1), 0x40)


def test_out_of_range_alpha_treated_as_full():
    a = _spot()
    b = _spot()
    imagefilter_blurring(a, 0x40, 0x100)
    imagefilter_blurring(b, 0x40, 5000)
    assert a.pixels == b.pixels
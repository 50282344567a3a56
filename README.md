# egepix

egepix is a small library for 32-bit ARGB pixel images held in memory.
It needs no window and no display. It provides:

- `egepix.image`: `Image`, a row-major buffer of packed pixels with a
  viewport. It supports `get_pixel`, `set_pixel`, `resize`, `resize_f`,
  `clear`, `copy`, `copy_from` and `get_region`, plain blits with `put`, and
  nearest-pixel stretched blits with `put_stretched`. `new_image(width, height)`
  creates an image of at least 1 x 1 pixels.
- `egepix.clip`: the rectangle clipping the blits use. It provides
  `Viewport`, `BlitRect`, `clip_blit` and `clip_region`.
- `egepix.blend`: blits that combine pixels. `putimage_transparent` skips a
  key colour. `putimage_alphablend` blends with a constant alpha.
  `putimage_alphatransparent` does both. `putimage_withalpha` uses the alpha
  of each source pixel. `putimage_alphafilter` takes its alpha from a mask
  image.
- `egepix.blur`: `imagefilter_blurring`, a blur over a region. An intensity
  up to `0x80` uses the 4 direct neighbours. A higher intensity uses all 8
  surrounding pixels.
- `egepix.triangle`: `putimage_triangle` draws textured triangles, with an
  optional colour key, alpha and bilinear smoothing. `Triangle` and
  `float2int` are also here.
- `egepix.rotate`: `putimage_rotate`, `putimage_rotatezoom` and
  `putimage_rotatetransparent`.
- `egepix.bmp`: `encode_bmp` and `save_bmp` write 24-bit BMP. The alpha
  byte is dropped.
- `egepix.png`: `save_png` writes RGB or RGBA PNG. `load_png` and
  `load_png_bytes` read PNG. `save_image` chooses BMP or PNG from the file
  suffix.
- `egepix.color`: `rgb`, `rgba`, `get_a`, `get_r`, `get_g`, `get_b`,
  `with_alpha`, `swap_rb` and `alphablend`.
- `egepix.mtrandom`: an MT19937 generator, `MersenneTwister`. The
  module-level helpers are `mtsrand`, `mtirand`, `mtdrand`, `random`,
  `randomf` and `randomize`.

## Installation

```
pip install egepix
```

To run the tests:

```
pip install "egepix[test]"
pytest
```

## Example

```python
from egepix.color import rgb
from egepix.image import new_image
from egepix.blend import putimage_alphablend
from egepix.blur import imagefilter_blurring
from egepix.png import save_png

canvas = new_image(64, 64)
sprite = new_image(16, 16)
for y in range(16):
    for x in range(16):
        sprite.set_pixel(x, y, rgb(255, 128, 0))

putimage_alphablend(canvas, sprite, 10, 10, 128, 0, 0, 0, 0)
imagefilter_blurring(canvas, 0x40, 0x100, 0, 0, 0, 0)
save_png(canvas, "out.png", False)
```

## Behaviour notes

- Colours are plain integers of the form `0xAARRGGBB`.
- In the `egepix.blend` functions, a width of `0` means the whole source
  image.
- Data that is not PNG, or PNG that cannot be decoded or encoded, raises
  `egepix.png.ImageIOError`, which is a subclass of `OSError`. A file that
  cannot be opened raises the usual `OSError`.
- Greyscale PNGs are loaded at the right size, but their pixels are not
  converted.
- `imagefilter_blurring` raises `egepix.blur.InvalidRegionError` when the
  clipped region is empty or smaller than 2 x 2 pixels.

## What it does not do

- It does not open windows and does not show images on screen.
- It does not draw lines, shapes or text.
- The only format it can read is PNG.
- It has no vector or matrix maths beyond the rotation used for blits.
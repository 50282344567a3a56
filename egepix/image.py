"""In-memory 32-bit ARGB images with copy and stretch blits."""

from __future__ import annotations

from .clip import Viewport

BLACK = 0


class Image:
    """A width x height grid of packed 0xAARRGGBB pixels, row-major."""

    def __init__(self, width=1, height=1):
        width = max(width, 0)
        height = max(height, 0)
        self._width = width
        self._height = height
        self.pixels = [0] * (width * height)
        self.bk_color = BLACK
        self.viewport = Viewport(0, 0, width, height)

    @property
    def width(self):
        return self._width

    @property
    def height(self):
        return self._height

    def __repr__(self):
        return f"Image({self._width}, {self._height})"

    def _index(self, x, y):
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexError(f"pixel ({x}, {y}) outside {self._width}x{self._height} image")
        return y * self._width + x

    def get_pixel(self, x, y):
        """Colour at absolute coordinates."""
        return self.pixels[self._index(x, y)]

    def set_pixel(self, x, y, color):
        """Store a colour at absolute coordinates."""
        self.pixels[self._index(x, y)] = color & 0xFFFFFFFF

    def set_viewport(self, left, top, right, bottom):
        """Set the drawing viewport used as the origin and clip of blits into this image."""
        self.viewport = Viewport(left, top, right, bottom)

    def resize_f(self, width, height):
        """Change the size; the pixels are zeroed only if the size changes."""
        width = max(width, 0)
        height = max(height, 0)
        if width != self._width or height != self._height:
            self._width = width
            self._height = height
            self.pixels = [0] * (width * height)
        self.viewport = Viewport(0, 0, self._width, self._height)

    def resize(self, width, height):
        """Change the size and fill the image with the background colour."""
        self.resize_f(width, height)
        self.clear()

    def clear(self):
        """Fill every pixel with the background colour."""
        self.pixels = [self.bk_color & 0xFFFFFFFF] * (self._width * self._height)

    def copy(self):
        """A new image with the same size and pixels."""
        other = Image(self._width, self._height)
        other.pixels = list(self.pixels)
        return other

    def copy_from(self, src):
        """Become a copy of ``src``'s pixels."""
        self.get_region(src, 0, 0, src.width, src.height)

    def get_region(self, src, x, y, width, height):
        """Resize to ``width`` x ``height`` and copy that region of ``src`` from ``(x, y)``.

        Pixels whose source lies outside ``src`` are left as they were.
        """
        self.resize_f(width, height)
        src.put(self, 0, 0, width, height, x, y)

    def _dest_clip(self):
        vp = self.viewport
        return (
            max(vp.left, 0),
            max(vp.top, 0),
            min(vp.right, self._width),
            min(vp.bottom, self._height),
        )

    def put(self, dst, x=0, y=0, width=None, height=None, src_x=0, src_y=0):
        """Copy a region of this image into ``dst``.

        ``(x, y)`` is relative to ``dst``'s viewport, and drawing is clipped to
        that viewport and to both images. Without a size the whole image is used.
        """
        if width is None:
            width = self._width
        if height is None:
            height = self._height
        vp = dst.viewport
        dx0 = x + vp.left
        dy0 = y + vp.top
        left, top, right, bottom = dst._dest_clip()

        i0 = max(0, left - dx0, -src_x)
        i1 = min(width, right - dx0, self._width - src_x)
        j0 = max(0, top - dy0, -src_y)
        j1 = min(height, bottom - dy0, self._height - src_y)
        if i0 >= i1 or j0 >= j1:
            return

        source = list(self.pixels) if dst is self else self.pixels
        sw, dw = self._width, dst._width
        for j in range(j0, j1):
            s = (src_y + j) * sw + src_x
            d = (dy0 + j) * dw + dx0
            dst.pixels[d + i0:d + i1] = source[s + i0:s + i1]

    def put_stretched(self, dst, x, y, width, height, src_x, src_y, src_width, src_height):
        """Copy a source region into a destination region of another size.

        Nearest-pixel sampling; clipped like :meth:`put`. Non-positive sizes
        draw nothing.
        """
        if width <= 0 or height <= 0 or src_width <= 0 or src_height <= 0:
            return
        vp = dst.viewport
        dx0 = x + vp.left
        dy0 = y + vp.top
        left, top, right, bottom = dst._dest_clip()
        source = list(self.pixels) if dst is self else self.pixels
        sw, dw = self._width, dst._width

        for j in range(height):
            ty = dy0 + j
            sy = src_y + j * src_height // height
            if not (top <= ty < bottom and 0 <= sy < self._height):
                continue
            for i in range(width):
                tx = dx0 + i
                sx = src_x + i * src_width // width
                if left <= tx < right and 0 <= sx < sw:
                    dst.pixels[ty * dw + tx] = source[sy * sw + sx]


def new_image(width=1, height=1):
    """Create an image of at least 1 x 1 pixels."""
    return Image(max(width, 1), max(height, 1))
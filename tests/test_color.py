"""Unit tests for color emission."""

import io

import numpy as np

from core.vector import Color
from renderer.color import image_to_uint8, to_rgb8, write_color


class TestToRgb8:
    """Tests for linear color to 8-bit conversion."""

    def test_extremes(self):
        assert to_rgb8(Color(1, 1, 1)) == (255, 255, 255)
        assert to_rgb8(Color(0, 0, 0)) == (0, 0, 0)

    def test_truncates_without_gamma(self):
        assert to_rgb8(Color(0.5, 0.25, 0.1)) == (127, 63, 25)

    def test_clamps_out_of_range(self):
        assert to_rgb8(Color(2.0, -0.5, 1.0000001)) == (255, 0, 255)

    def test_divides_accumulated_sum(self):
        assert to_rgb8(Color(1.0, 2.0, 0.5), samples=2) == (127, 255, 63)


class TestWriteColor:
    """Tests for the text pixel writer."""

    def test_writes_one_line(self):
        out = io.StringIO()
        write_color(out, Color(1, 0, 0.5))
        write_color(out, Color(0, 4, 0), samples=4)
        assert out.getvalue() == "255 0 127\n0 255 0\n"


class TestImageToUint8:
    """Tests for the array conversion."""

    def test_matches_scalar_conversion(self):
        image = np.array([[[0.0, 0.5, 1.0], [1.5, -1.0, 0.25]]], dtype=np.float32)
        pixels = image_to_uint8(image)
        assert pixels.dtype == np.uint8
        assert pixels.shape == image.shape
        assert pixels.tolist() == [[[0, 127, 255], [255, 0, 63]]]

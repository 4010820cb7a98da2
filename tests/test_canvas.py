"""Tests for the canvas framebuffer and PPM serialization.

Tests cover:
- Canvas creation, pixel writes and bounds checking
- Band pasting used by the parallel renderer
- Channel quantisation
- P3 header, pixel data and line wrapping
"""

import numpy as np
import pytest

from src.raycaster.core.colour import BLACK, colour
from src.raycaster.preview.canvas import (
    PPM_MAX_LINE_LENGTH,
    Canvas,
    canvas_to_ppm,
    quantise,
    wrap_tokens,
)


class TestCanvas:
    """Test canvas storage."""

    def test_new_canvas_is_black(self):
        """Test every pixel starts black."""
        canvas = Canvas(10, 20)
        assert canvas.width == 10
        assert canvas.height == 20
        for y in range(canvas.height):
            for x in range(canvas.width):
                assert canvas.pixel_at(x, y) == BLACK

    def test_write_and_read_pixel(self):
        """Test a written colour reads back."""
        canvas = Canvas(10, 20)
        canvas.write_pixel(2, 3, colour(1, 0, 0))
        assert canvas.pixel_at(2, 3) == colour(1, 0, 0)

    def test_to_numpy_layout(self):
        """Test the array is (height, width, 3) and indexed [y, x]."""
        canvas = Canvas(4, 2)
        canvas.write_pixel(3, 1, colour(0.1, 0.2, 0.3))
        pixels = canvas.to_numpy()
        assert pixels.shape == (2, 4, 3)
        assert np.allclose(pixels[1, 3], [0.1, 0.2, 0.3])

    def test_to_numpy_is_a_copy(self):
        """Test mutating the exported array leaves the canvas unchanged."""
        canvas = Canvas(2, 2)
        canvas.to_numpy()[0, 0] = 1.0
        assert canvas.pixel_at(0, 0) == BLACK

    @pytest.mark.parametrize(("x", "y"), [(-1, 0), (0, -1), (10, 0), (0, 20)])
    def test_out_of_bounds_write_raises(self, x, y):
        """Test writes outside the canvas are rejected."""
        canvas = Canvas(10, 20)
        with pytest.raises(IndexError, match="out of range"):
            canvas.write_pixel(x, y, colour(1, 1, 1))

    def test_out_of_bounds_read_raises(self):
        """Test reads outside the canvas are rejected."""
        with pytest.raises(IndexError):
            Canvas(3, 3).pixel_at(3, 3)

    def test_negative_dimensions_rejected(self):
        """Test a negative size is a ValueError."""
        with pytest.raises(ValueError, match="non-negative"):
            Canvas(-1, 5)


class TestPaste:
    """Test band pasting."""

    def test_paste_band(self):
        """Test a band lands at its row offset."""
        canvas = Canvas(3, 4)
        band = Canvas(3, 2)
        band.write_pixel(1, 0, colour(1, 0, 0))
        band.write_pixel(2, 1, colour(0, 1, 0))
        canvas.paste(band, 2)
        assert canvas.pixel_at(1, 2) == colour(1, 0, 0)
        assert canvas.pixel_at(2, 3) == colour(0, 1, 0)
        assert canvas.pixel_at(1, 0) == BLACK

    def test_paste_width_mismatch(self):
        """Test bands must match the canvas width."""
        with pytest.raises(ValueError, match="width"):
            Canvas(3, 4).paste(Canvas(2, 1), 0)

    def test_paste_past_bottom(self):
        """Test bands must fit inside the canvas."""
        with pytest.raises(ValueError, match="does not fit"):
            Canvas(3, 4).paste(Canvas(3, 2), 3)


class TestQuantise:
    """Test conversion of linear channels to 0-255."""

    def test_clamps_and_scales(self):
        """Test out-of-range values clamp and 0.5 rounds up to 128."""
        values = np.array([-0.5, 0.0, 0.5, 1.0, 1.5])
        assert quantise(values).tolist() == [0, 0, 128, 255, 255]

    def test_rounds_to_nearest(self):
        """Test values are rounded to the nearest integer."""
        values = np.array([0.4 / 255, 0.6 / 255, 0.6, 0.8])
        assert quantise(values).tolist() == [0, 1, 153, 204]

    def test_returns_integers(self):
        """Test the output dtype is integral."""
        assert quantise(np.zeros((2, 2, 3))).dtype == np.int64


class TestWrapTokens:
    """Test greedy line packing."""

    def test_short_input_is_one_line(self):
        """Test tokens that fit stay on one line."""
        assert wrap_tokens(["1", "2", "3"]) == ["1 2 3"]

    def test_no_line_exceeds_limit(self):
        """Test lines are packed without exceeding the limit."""
        lines = wrap_tokens(["255"] * 40)
        assert all(len(line) <= PPM_MAX_LINE_LENGTH for line in lines)
        assert " ".join(lines).split() == ["255"] * 40

    def test_exact_fit(self):
        """Test a line of exactly max_length characters is allowed."""
        assert wrap_tokens(["abc", "def"], max_length=7) == ["abc def"]
        assert wrap_tokens(["abc", "defg"], max_length=7) == ["abc", "defg"]

    def test_empty(self):
        """Test no tokens gives no lines."""
        assert wrap_tokens([]) == []


class TestCanvasToPpm:
    """Test P3 serialization."""

    def test_header(self):
        """Test the first three lines are magic, size and max value."""
        lines = canvas_to_ppm(Canvas(5, 3)).splitlines()
        assert lines[:3] == ["P3", "5 3", "255"]

    def test_pixel_data(self):
        """Test channels are scaled, clamped and rounded."""
        canvas = Canvas(5, 3)
        canvas.write_pixel(0, 0, colour(1.5, 0, 0))
        canvas.write_pixel(2, 1, colour(0, 0.5, 0))
        canvas.write_pixel(4, 2, colour(-0.5, 0, 1))
        lines = canvas.to_ppm().splitlines()
        assert lines[3:6] == [
            "255 0 0 0 0 0 0 0 0 0 0 0 0 0 0",
            "0 0 0 0 0 0 0 128 0 0 0 0 0 0 0",
            "0 0 0 0 0 0 0 0 0 0 0 0 0 0 255",
        ]

    def test_long_lines_are_split(self):
        """Test rows longer than 70 characters wrap."""
        canvas = Canvas(10, 2)
        for y in range(2):
            for x in range(10):
                canvas.write_pixel(x, y, colour(1, 0.8, 0.6))
        lines = canvas.to_ppm().splitlines()
        assert lines[3:7] == [
            "255 204 153 255 204 153 255 204 153 255 204 153 255 204 153 255 204",
            "153 255 204 153 255 204 153 255 204 153 255 204 153",
            "255 204 153 255 204 153 255 204 153 255 204 153 255 204 153 255 204",
            "153 255 204 153 255 204 153 255 204 153 255 204 153",
        ]

    def test_ends_with_newline(self):
        """Test the output is newline-terminated."""
        assert Canvas(5, 3).to_ppm().endswith("\n")

    def test_each_row_starts_a_new_line(self):
        """Test a short row is not merged with the next one."""
        lines = Canvas(1, 2).to_ppm().splitlines()
        assert lines == ["P3", "1 2", "255", "0 0 0", "0 0 0"]

    def test_empty_canvas(self):
        """Test a zero-sized canvas has only the header."""
        assert canvas_to_ppm(Canvas(0, 0)) == "P3\n0 0\n255\n"

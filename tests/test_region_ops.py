"""
Unit tests for region_ops module.

Tests window and border selection: map_window and make_border.
"""

from PX_Libs.constants import COLOR_BLACK, COLOR_WHITE
from PX_Libs.ImageLib.image_models import RasterImage
from PX_Libs.ProcessingLib.effect_ops import invert_color
from PX_Libs.ProcessingLib.region_ops import make_border, map_window
from PX_Libs.ProcessingLib.traversal_ops import image_map


class TestMapWindow:
    """Tests for map_window function."""

    def test_keeps_dimensions(self):
        """Should return an image with the input's dimensions."""
        image = RasterImage.create(3, 3, COLOR_WHITE)

        result = map_window(image, [0, 2], [0, 2], lambda c: c)

        assert result.size == image.size

    def test_full_window_matches_image_map(self, gradient_image):
        """Should equal image_map when the window covers the whole image."""
        width, height = gradient_image.size

        result = map_window(gradient_image, [0, width - 1], [0, height - 1], invert_color)

        assert result == image_map(gradient_image, invert_color)

    def test_bounds_are_inclusive(self):
        """Should map pixels on the window edges and nothing outside."""
        image = RasterImage.create(5, 5, COLOR_BLACK)

        result = map_window(image, [1, 3], [2, 3], invert_color)

        for y in range(5):
            for x in range(5):
                inside = 1 <= x <= 3 and 2 <= y <= 3
                expected = COLOR_WHITE if inside else COLOR_BLACK
                assert result.get_pixel(x, y) == expected, (x, y)

    def test_does_not_mutate_input(self, gradient_image):
        """Should leave the input image unchanged."""
        before = gradient_image.copy()
        map_window(gradient_image, [0, 1], [0, 1], invert_color)
        assert gradient_image == before


class TestMakeBorder:
    """Tests for make_border function."""

    def test_does_not_modify_original(self):
        """Should leave every pixel of the input black."""
        image = RasterImage.create(4, 4, COLOR_BLACK)

        make_border(image, 1, invert_color)

        for x, y in [(0, 0), (3, 3), (1, 1), (2, 2)]:
            assert image.get_pixel(x, y) == COLOR_BLACK

    def test_maps_border_and_keeps_interior(self):
        """Should invert pixels within the thickness and copy the rest."""
        image = RasterImage.create(6, 5, COLOR_BLACK)
        thickness = 2

        result = make_border(image, thickness, invert_color)

        for y in range(5):
            for x in range(6):
                interior = thickness <= x < 6 - thickness and thickness <= y < 5 - thickness
                expected = COLOR_BLACK if interior else COLOR_WHITE
                assert result.get_pixel(x, y) == expected, (x, y)

    def test_reads_from_original_pixels(self, gradient_image):
        """Should apply the function to the source pixel values."""
        result = make_border(gradient_image, 1, invert_color)

        assert result.get_pixel(0, 0) == invert_color(gradient_image.get_pixel(0, 0))
        assert result.get_pixel(4, 3) == invert_color(gradient_image.get_pixel(4, 3))
        assert result.get_pixel(2, 2) == gradient_image.get_pixel(2, 2)

    def test_zero_thickness_changes_nothing(self, gradient_image):
        """Should copy the image unchanged with a zero-width border."""
        assert make_border(gradient_image, 0, invert_color) == gradient_image

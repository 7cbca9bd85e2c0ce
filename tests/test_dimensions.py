import pytest

from imageresizer.dimensions import (
    cover_and_crop,
    scale_to_height,
    scale_to_width,
    width_is_binding,
)
from imageresizer.exceptions import InvalidDimensionsError
from imageresizer.types import CropBox, TargetDimensions


class TestScaleToOneSide:
    def test_scale_to_width_keeps_ratio(self):
        assert scale_to_width(200, 100, 50) == TargetDimensions(width=50, height=25)

    def test_scale_to_width_truncates(self):
        result = scale_to_width(300, 200, 100)
        assert result.width == 100
        assert result.height == int(200 / 300 * 100)

    def test_scale_to_height_truncates(self):
        result = scale_to_height(300, 200, 7)
        assert result.height == 7
        assert result.width == int(300 / 200 * 7)

    def test_upscale_is_allowed(self):
        assert scale_to_width(20, 10, 400) == TargetDimensions(width=400, height=200)

    def test_result_never_drops_below_one_pixel(self):
        assert scale_to_width(1000, 1, 10) == TargetDimensions(width=10, height=1)

    @pytest.mark.parametrize("bad_value", [0, -3, 2.5, "100", True])
    def test_rejects_non_positive_or_non_integer(self, bad_value):
        with pytest.raises(InvalidDimensionsError):
            scale_to_width(200, 100, bad_value)


class TestWidthIsBinding:
    def test_wide_source_binds_on_width(self):
        assert width_is_binding(200, 100, 50, 50) is True

    def test_tall_source_binds_on_height(self):
        assert width_is_binding(100, 200, 50, 50) is False

    def test_tie_resolves_to_height(self):
        assert width_is_binding(200, 100, 100, 50) is False

    def test_rejects_non_positive_bounds(self):
        with pytest.raises(InvalidDimensionsError):
            width_is_binding(200, 100, 0, 50)


class TestCoverAndCrop:
    def test_wide_source_crops_horizontally(self):
        intermediate, crop_box = cover_and_crop(200, 100, 50, 50)
        assert intermediate == TargetDimensions(width=100, height=50)
        assert crop_box == CropBox(left=25, top=0, width=50, height=50)

    def test_tall_source_crops_vertically(self):
        intermediate, crop_box = cover_and_crop(100, 300, 40, 40)
        assert intermediate.width == 40
        assert intermediate.height == 120
        assert crop_box == CropBox(left=0, top=40, width=40, height=40)

    @pytest.mark.parametrize(
        "source_size,target",
        [
            ((200, 100), (50, 50)),
            ((300, 7), (7, 300)),
            ((123, 457), (61, 13)),
            ((10, 10), (333, 77)),
        ],
    )
    def test_crop_box_lies_inside_intermediate(self, source_size, target):
        intermediate, crop_box = cover_and_crop(*source_size, *target)
        left, top, right, bottom = crop_box.bounds
        assert (crop_box.width, crop_box.height) == target
        assert left >= 0 and top >= 0
        assert right <= intermediate.width
        assert bottom <= intermediate.height

"""Aspect-ratio arithmetic for the three resize strategies.

All fractional results are truncated toward zero and never drop below one
pixel.
"""

from __future__ import annotations

from imageresizer.exceptions import InvalidDimensionsError
from imageresizer.types import CropBox, TargetDimensions


def _require_positive(**dimensions: int) -> None:
    for dimension_name, dimension_value in dimensions.items():
        if isinstance(dimension_value, bool) or not isinstance(dimension_value, int):
            raise InvalidDimensionsError(
                f"{dimension_name} must be an integer, got {dimension_value!r}"
            )
        if dimension_value <= 0:
            raise InvalidDimensionsError(
                f"{dimension_name} must be a positive integer, got {dimension_value}"
            )


def _truncate(value: float) -> int:
    return max(1, int(value))


def scale_to_width(
    source_width: int, source_height: int, new_width: int
) -> TargetDimensions:
    _require_positive(new_width=new_width)
    ratio = source_height / source_width
    return TargetDimensions(width=new_width, height=_truncate(ratio * new_width))


def scale_to_height(
    source_width: int, source_height: int, new_height: int
) -> TargetDimensions:
    _require_positive(new_height=new_height)
    ratio = source_width / source_height
    return TargetDimensions(width=_truncate(ratio * new_height), height=new_height)


def width_is_binding(
    source_width: int, source_height: int, max_width: int, max_height: int
) -> bool:
    _require_positive(max_width=max_width, max_height=max_height)
    width_ratio = source_width / max_width
    height_ratio = source_height / max_height
    return width_ratio > height_ratio


def cover_and_crop(
    source_width: int, source_height: int, new_width: int, new_height: int
) -> tuple[TargetDimensions, CropBox]:
    """Scale the source to cover ``new_width x new_height`` and center a crop on it.

    Returns the intermediate (scaled) dimensions and the crop box inside
    them. The intermediate is never smaller than the crop box, so the box
    always lies within the scaled image.
    """
    _require_positive(new_width=new_width, new_height=new_height)
    width_ratio = source_width / new_width
    height_ratio = source_height / new_height

    if height_ratio < width_ratio:
        optimal_ratio = height_ratio
    else:
        optimal_ratio = width_ratio

    intermediate = TargetDimensions(
        width=max(new_width, _truncate(source_width / optimal_ratio)),
        height=max(new_height, _truncate(source_height / optimal_ratio)),
    )

    crop_left = int(intermediate.width / 2 - new_width / 2)
    crop_top = int(intermediate.height / 2 - new_height / 2)

    return intermediate, CropBox(
        left=crop_left, top=crop_top, width=new_width, height=new_height
    )

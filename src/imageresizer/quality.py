from __future__ import annotations

import warnings

from imageresizer.config import JPEG_QUALITY_RANGE, PNG_COMPRESSION_RANGE, ResizerConfig
from imageresizer.types import ImageFormat


def _clamp(value: int, bounds: tuple[int, int]) -> int:
    lower_bound, upper_bound = bounds
    return max(lower_bound, min(upper_bound, int(value)))


def resolve_quality(
    output_format: ImageFormat,
    quality: int | None,
    config: ResizerConfig,
) -> int | None:
    """Pick the encoder setting for ``output_format``.

    JPEG takes a 0-100 quality, PNG a 0-9 compression level. Out of range
    values are clamped, not rejected. GIF has no such setting and always
    resolves to ``None``.
    """
    if output_format is ImageFormat.GIF:
        if quality is not None:
            warnings.warn(
                "GIF output has no quality setting; the given quality is ignored.",
                UserWarning,
                stacklevel=3,
            )
        return None

    if output_format is ImageFormat.JPEG:
        requested = config.jpeg_quality if quality is None else quality
        return _clamp(requested, JPEG_QUALITY_RANGE)

    requested = config.png_compression if quality is None else quality
    return _clamp(requested, PNG_COMPRESSION_RANGE)

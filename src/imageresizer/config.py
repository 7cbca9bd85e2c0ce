from __future__ import annotations

from dataclasses import dataclass

JPEG_QUALITY_RANGE: tuple[int, int] = (0, 100)
PNG_COMPRESSION_RANGE: tuple[int, int] = (0, 9)

DEFAULT_JPEG_QUALITY = 80
DEFAULT_PNG_COMPRESSION = 9
DEFAULT_OUTPUT_SUFFIX = "_resized"


@dataclass(frozen=True, slots=True)
class ResizerConfig:
    jpeg_quality: int = DEFAULT_JPEG_QUALITY
    png_compression: int = DEFAULT_PNG_COMPRESSION

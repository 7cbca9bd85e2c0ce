from imageresizer._version import __version__
from imageresizer.batch import resize_files
from imageresizer.color import parse_hex_color
from imageresizer.config import (
    JPEG_QUALITY_RANGE,
    PNG_COMPRESSION_RANGE,
    ResizerConfig,
)
from imageresizer.exceptions import (
    CodecUnavailableError,
    DecodeError,
    EncodeError,
    ImageResizerError,
    InvalidColorError,
    InvalidDimensionsError,
    InvalidFormatError,
    UnsupportedFormatError,
)
from imageresizer.resizer import ImageResizer
from imageresizer.types import (
    SUPPORTED_FORMATS,
    BatchSummary,
    CropBox,
    FileResult,
    ImageFormat,
    ResizeMode,
    SourceImage,
    TargetDimensions,
)

__all__ = [
    "BatchSummary",
    "CodecUnavailableError",
    "CropBox",
    "DecodeError",
    "EncodeError",
    "FileResult",
    "ImageFormat",
    "ImageResizer",
    "ImageResizerError",
    "InvalidColorError",
    "InvalidDimensionsError",
    "InvalidFormatError",
    "JPEG_QUALITY_RANGE",
    "PNG_COMPRESSION_RANGE",
    "ResizeMode",
    "ResizerConfig",
    "SUPPORTED_FORMATS",
    "SourceImage",
    "TargetDimensions",
    "UnsupportedFormatError",
    "__version__",
    "parse_hex_color",
    "resize_files",
]

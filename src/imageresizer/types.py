from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from imageresizer.exceptions import InvalidFormatError

_FORMAT_ALIASES: dict[str, str] = {
    "jpg": "JPEG",
    "jpeg": "JPEG",
    "gif": "GIF",
    "png": "PNG",
}


class ImageFormat(Enum):
    JPEG = "JPEG"
    GIF = "GIF"
    PNG = "PNG"

    @property
    def extension(self) -> str:
        return _EXTENSIONS[self]

    @property
    def pil_format(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: ImageFormat | str) -> ImageFormat:
        if isinstance(value, ImageFormat):
            return value
        if isinstance(value, str):
            canonical_name = _FORMAT_ALIASES.get(value.strip().lower().lstrip("."))
            if canonical_name is not None:
                return cls(canonical_name)
        raise InvalidFormatError(
            f"Image format {value!r} is not supported. Use one of: JPEG, GIF, PNG."
        )


_EXTENSIONS: dict[ImageFormat, str] = {
    ImageFormat.JPEG: "jpg",
    ImageFormat.GIF: "gif",
    ImageFormat.PNG: "png",
}

SUPPORTED_FORMATS: tuple[ImageFormat, ...] = tuple(ImageFormat)


@dataclass(frozen=True, slots=True)
class SourceImage:
    format: ImageFormat
    width: int
    height: int


@dataclass(frozen=True, slots=True)
class TargetDimensions:
    width: int
    height: int

    @property
    def size(self) -> tuple[int, int]:
        return self.width, self.height


@dataclass(frozen=True, slots=True)
class CropBox:
    left: int
    top: int
    width: int
    height: int

    @property
    def bounds(self) -> tuple[int, int, int, int]:
        return self.left, self.top, self.left + self.width, self.top + self.height


class ResizeMode(Enum):
    WITHIN = "within"
    WIDTH = "width"
    HEIGHT = "height"
    FILL = "fill"


@dataclass(frozen=True, slots=True)
class FileResult:
    input_path: str
    output_path: str | None
    error: str | None = None


@dataclass(frozen=True, slots=True)
class BatchSummary:
    total_files: int
    saved: int
    errors: int
    results: tuple[FileResult, ...]

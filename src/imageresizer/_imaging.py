from __future__ import annotations

from pathlib import Path

import numpy as np
from PIL import Image, UnidentifiedImageError, features

from imageresizer.exceptions import DecodeError, UnsupportedFormatError
from imageresizer.types import CropBox, ImageFormat, TargetDimensions

RESAMPLING_FILTER = Image.Resampling.LANCZOS

_CODEC_FEATURES: dict[ImageFormat, str | None] = {
    ImageFormat.JPEG: "jpg",
    ImageFormat.PNG: "zlib",
    ImageFormat.GIF: None,
}

_ALPHA_MODES = ("RGBA", "LA", "PA")

# Multi-picture JPEGs from cameras are detected as MPO; the first frame is a JPEG.
_DETECTED_FORMAT_ALIASES: dict[str, str] = {"MPO": "JPEG"}

_FILE_SIGNATURES: tuple[tuple[bytes, ImageFormat], ...] = (
    (b"\x89PNG\r\n\x1a\n", ImageFormat.PNG),
    (b"\xff\xd8\xff", ImageFormat.JPEG),
    (b"GIF87a", ImageFormat.GIF),
    (b"GIF89a", ImageFormat.GIF),
)
_SIGNATURE_LENGTH = 8

_SIXTEEN_BIT_MODES = ("I;16", "I;16L", "I;16B", "I;16N", "I")


class ImageIO:
    @staticmethod
    def open_source(image_path: str | Path) -> tuple[Image.Image, ImageFormat]:
        try:
            opened_image = Image.open(image_path)
        except UnidentifiedImageError as original_error:
            signature_format = ImageIO.detect_signature(image_path)
            if signature_format is not None:
                raise DecodeError(
                    f"{signature_format.name} image {image_path} could not be opened: "
                    f"{original_error}"
                ) from original_error
            raise UnsupportedFormatError(
                f"Image type of {image_path} could not be detected."
            ) from original_error
        except Image.DecompressionBombError as original_error:
            raise DecodeError(
                f"Image {image_path} could not be opened: {original_error}"
            ) from original_error

        with opened_image:
            detected_format = _DETECTED_FORMAT_ALIASES.get(
                opened_image.format or "", opened_image.format
            )
            try:
                image_format = ImageFormat.parse(detected_format or "")
            except UnsupportedFormatError as original_error:
                raise UnsupportedFormatError(
                    f"Image type {detected_format} of {image_path} is not supported."
                ) from original_error

            try:
                opened_image.load()
                decoded_image = ImageIO._normalize_mode(opened_image)
            except (OSError, ValueError, SyntaxError) as original_error:
                raise DecodeError(
                    f"Image {image_path} could not be opened: {original_error}"
                ) from original_error

        return decoded_image, image_format

    @staticmethod
    def detect_signature(image_path: str | Path) -> ImageFormat | None:
        with open(image_path, "rb") as image_file:
            leading_bytes = image_file.read(_SIGNATURE_LENGTH)
        for signature, image_format in _FILE_SIGNATURES:
            if leading_bytes.startswith(signature):
                return image_format
        return None

    @staticmethod
    def _normalize_mode(image: Image.Image) -> Image.Image:
        if image.mode in _SIXTEEN_BIT_MODES:
            return ImageIO._reduce_to_eight_bits(image)
        has_transparency = image.mode in _ALPHA_MODES or "transparency" in image.info
        if has_transparency:
            return image.convert("RGBA")
        if image.mode == "RGB":
            return image.copy()
        return image.convert("RGB")

    @staticmethod
    def _reduce_to_eight_bits(image: Image.Image) -> Image.Image:
        """Scale 16-bit grayscale down to 8 bits instead of clipping it."""
        raw_pixels = np.clip(np.asarray(image, dtype=np.int64), 0, 65535)
        gray_pixels = (raw_pixels >> 8).astype(np.uint8)
        transparent_value = image.info.get("transparency")
        if not isinstance(transparent_value, int):
            return Image.fromarray(gray_pixels).convert("RGB")

        rgba_pixels = np.empty(gray_pixels.shape + (4,), dtype=np.uint8)
        rgba_pixels[..., :3] = gray_pixels[..., np.newaxis]
        rgba_pixels[..., 3] = np.where(raw_pixels == transparent_value, 0, 255)
        return Image.fromarray(rgba_pixels)

    @staticmethod
    def copy_unscaled(image: Image.Image) -> Image.Image:
        return image.copy()

    @staticmethod
    def resample(image: Image.Image, dimensions: TargetDimensions) -> Image.Image:
        return image.resize(dimensions.size, RESAMPLING_FILTER)

    @staticmethod
    def copy_region(image: Image.Image, crop_box: CropBox) -> Image.Image:
        return image.crop(crop_box.bounds)

    @staticmethod
    def flatten_onto_color(
        image: Image.Image, rgb_color: tuple[int, int, int]
    ) -> Image.Image:
        """Copy ``image`` onto an opaque canvas filled with ``rgb_color``.

        The copy does not blend: fully transparent pixels show the canvas
        color, every other pixel keeps its own color and becomes opaque.
        """
        canvas = Image.new("RGB", image.size, rgb_color)
        if image.mode not in _ALPHA_MODES:
            canvas.paste(image.convert("RGB"), (0, 0))
            return canvas

        rgba_pixels = np.asarray(image.convert("RGBA"))
        canvas_pixels = np.array(canvas, dtype=np.uint8)
        visible_mask = rgba_pixels[..., 3] > 0
        canvas_pixels[visible_mask] = rgba_pixels[visible_mask][:, :3]
        canvas.close()
        return Image.fromarray(canvas_pixels)

    @staticmethod
    def is_codec_available(image_format: ImageFormat) -> bool:
        Image.init()
        if image_format.pil_format not in Image.SAVE:
            return False
        codec_feature = _CODEC_FEATURES[image_format]
        if codec_feature is None:
            return True
        return bool(features.check_codec(codec_feature))

    @staticmethod
    def save(
        image: Image.Image,
        output_path: str | Path,
        output_format: ImageFormat,
        quality: int | None = None,
    ) -> None:
        if output_format is ImageFormat.JPEG:
            encoder_options = {} if quality is None else {"quality": quality}
            encodable_image = image if image.mode == "RGB" else image.convert("RGB")
            try:
                encodable_image.save(output_path, "JPEG", **encoder_options)
            finally:
                if encodable_image is not image:
                    encodable_image.close()
        elif output_format is ImageFormat.PNG:
            encoder_options = {} if quality is None else {"compress_level": quality}
            image.save(output_path, "PNG", **encoder_options)
        else:
            image.save(output_path, "GIF")

from __future__ import annotations

from pathlib import Path

from PIL import Image

from imageresizer._imaging import ImageIO
from imageresizer.color import parse_hex_color
from imageresizer.config import ResizerConfig
from imageresizer.dimensions import (
    cover_and_crop,
    scale_to_height,
    scale_to_width,
    width_is_binding,
)
from imageresizer.exceptions import CodecUnavailableError, EncodeError
from imageresizer.quality import resolve_quality
from imageresizer.types import ImageFormat, SourceImage, TargetDimensions


class ImageResizer:
    """Resize a single JPEG, GIF or PNG image and write it back to disk.

    The decoded source is never modified. Every resize reads the source and
    replaces the working (modified) image, releasing the previous one.
    Saving encodes the working image and releases it, so the next save
    without a resize writes an unscaled copy of the source again.

    Instances hold mutable state and must not be shared between threads
    without external locking.
    """

    def __init__(
        self,
        image_path: str | Path,
        *,
        config: ResizerConfig | None = None,
    ) -> None:
        self.config = config or ResizerConfig()
        self.image_path = Path(image_path)

        source_image, source_format = ImageIO.open_source(self.image_path)
        self._source_image: Image.Image | None = source_image
        source_width, source_height = source_image.size
        self._source = SourceImage(
            format=source_format, width=source_width, height=source_height
        )

        self._modified_image: Image.Image | None = None
        self._target_dimensions: TargetDimensions | None = None

    def __enter__(self) -> ImageResizer:
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()

    def __repr__(self) -> str:
        return (
            f"ImageResizer(path={str(self.image_path)!r}, "
            f"format={self._source.format.name}, "
            f"size={self._source.width}x{self._source.height})"
        )

    @property
    def source(self) -> SourceImage:
        return self._source

    @property
    def source_width(self) -> int:
        return self._source.width

    @property
    def source_height(self) -> int:
        return self._source.height

    @property
    def source_format(self) -> ImageFormat:
        return self._source.format

    @property
    def source_image(self) -> Image.Image:
        return self._require_source()

    @property
    def modified_image(self) -> Image.Image | None:
        return self._modified_image

    @property
    def target_dimensions(self) -> TargetDimensions | None:
        return self._target_dimensions

    def close(self) -> None:
        self._release_modified()
        if self._source_image is not None:
            self._source_image.close()
            self._source_image = None

    def resize_within_dimensions(self, max_width: int, max_height: int) -> None:
        """Fit inside ``max_width x max_height`` keeping the aspect ratio.

        Smaller images are upscaled. When the width ratio is larger the
        width is the binding side, otherwise (ties included) the height is.
        """
        if self._is_source_size(max_width, max_height):
            self._copy_without_resampling()
            return

        if width_is_binding(self.source_width, self.source_height, max_width, max_height):
            self.resize_by_width(max_width)
        else:
            self.resize_by_height(max_height)

    def resize_by_width(self, new_width: int) -> None:
        if new_width == self.source_width:
            self._copy_without_resampling()
            return

        target = scale_to_width(self.source_width, self.source_height, new_width)
        self._resample_into(target)

    def resize_by_height(self, new_height: int) -> None:
        if new_height == self.source_height:
            self._copy_without_resampling()
            return

        target = scale_to_height(self.source_width, self.source_height, new_height)
        self._resample_into(target)

    def resize_to_fill_dimensions_exactly(self, new_width: int, new_height: int) -> None:
        """Scale to cover ``new_width x new_height``, then crop the center."""
        if self._is_source_size(new_width, new_height):
            self._copy_without_resampling()
            return

        intermediate, crop_box = cover_and_crop(
            self.source_width, self.source_height, new_width, new_height
        )
        scaled_image = ImageIO.resample(self._require_source(), intermediate)
        try:
            cropped_image = ImageIO.copy_region(scaled_image, crop_box)
        finally:
            scaled_image.close()

        self._replace_modified(
            cropped_image, TargetDimensions(width=new_width, height=new_height)
        )

    def add_background_color(self, hex_color: str) -> None:
        """Flatten the working image onto a solid ``RRGGBB`` background.

        Fully transparent pixels take the background color. Any other pixel
        keeps its color and loses its alpha; nothing is blended.
        """
        rgb_color = parse_hex_color(hex_color)
        if self._modified_image is None:
            self._copy_without_resampling()

        assert self._modified_image is not None
        flattened_image = ImageIO.flatten_onto_color(self._modified_image, rgb_color)
        self._replace_modified(
            flattened_image,
            TargetDimensions(width=flattened_image.width, height=flattened_image.height),
        )

    def save_image_file(
        self,
        save_image_name: str | Path,
        extension: ImageFormat | str | None = None,
        quality: int | None = None,
        background_color: str | None = None,
    ) -> str:
        """Encode the working image to ``<save_image_name>.<ext>``.

        ``extension`` defaults to the source format. ``quality`` is a JPEG
        quality (0-100) or a PNG compression level (0-9); out of range
        values are clamped and GIF ignores it. Returns the written file
        name. The working image is released whether or not the write
        succeeds.
        """
        if self._modified_image is None:
            self._copy_without_resampling()

        try:
            if extension is None:
                output_format = self.source_format
            else:
                output_format = ImageFormat.parse(extension)

            if background_color is not None:
                self.add_background_color(background_color)

            encoder_setting = resolve_quality(output_format, quality, self.config)

            if not ImageIO.is_codec_available(output_format):
                raise CodecUnavailableError(
                    f"Installed Pillow build does not support writing "
                    f"{output_format.name} images."
                )

            image_file = f"{save_image_name}.{output_format.extension}"
            assert self._modified_image is not None
            try:
                ImageIO.save(
                    self._modified_image,
                    image_file,
                    output_format=output_format,
                    quality=encoder_setting,
                )
            except (OSError, ValueError) as original_error:
                raise EncodeError(
                    f"Image could not be saved to {image_file}: {original_error}"
                ) from original_error
        finally:
            self._release_modified()

        return image_file

    def _require_source(self) -> Image.Image:
        if self._source_image is None:
            raise ValueError("ImageResizer is closed.")
        return self._source_image

    def _is_source_size(self, width: int, height: int) -> bool:
        return width == self.source_width and height == self.source_height

    def _copy_without_resampling(self) -> None:
        copied_image = ImageIO.copy_unscaled(self._require_source())
        self._replace_modified(
            copied_image,
            TargetDimensions(width=self.source_width, height=self.source_height),
        )

    def _resample_into(self, target: TargetDimensions) -> None:
        resampled_image = ImageIO.resample(self._require_source(), target)
        self._replace_modified(resampled_image, target)

    def _replace_modified(
        self, new_image: Image.Image, dimensions: TargetDimensions
    ) -> None:
        self._release_modified()
        self._modified_image = new_image
        self._target_dimensions = dimensions

    def _release_modified(self) -> None:
        if self._modified_image is not None:
            self._modified_image.close()
            self._modified_image = None
        self._target_dimensions = None

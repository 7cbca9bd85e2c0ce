from __future__ import annotations

from pathlib import Path

from tqdm import tqdm

from imageresizer.config import DEFAULT_OUTPUT_SUFFIX, ResizerConfig
from imageresizer.exceptions import ImageResizerError, InvalidDimensionsError
from imageresizer.resizer import ImageResizer
from imageresizer.types import BatchSummary, FileResult, ImageFormat, ResizeMode

_REQUIRED_DIMENSIONS: dict[ResizeMode, tuple[str, ...]] = {
    ResizeMode.WITHIN: ("width", "height"),
    ResizeMode.WIDTH: ("width",),
    ResizeMode.HEIGHT: ("height",),
    ResizeMode.FILL: ("width", "height"),
}


def required_dimensions(mode: ResizeMode) -> tuple[str, ...]:
    return _REQUIRED_DIMENSIONS[mode]


def apply_resize(
    resizer: ImageResizer,
    mode: ResizeMode,
    width: int | None,
    height: int | None,
) -> None:
    provided = {"width": width, "height": height}
    missing = [name for name in required_dimensions(mode) if provided[name] is None]
    if missing:
        raise InvalidDimensionsError(
            f"Resize mode '{mode.value}' requires: {', '.join(missing)}"
        )

    if mode is ResizeMode.WITHIN:
        resizer.resize_within_dimensions(width, height)
    elif mode is ResizeMode.WIDTH:
        resizer.resize_by_width(width)
    elif mode is ResizeMode.HEIGHT:
        resizer.resize_by_height(height)
    else:
        resizer.resize_to_fill_dimensions_exactly(width, height)


def _build_output_name(
    input_path: Path, output_dir: Path | None, suffix: str
) -> Path:
    target_directory = output_dir if output_dir is not None else input_path.parent
    return target_directory / f"{input_path.stem}{suffix}"


def _resize_single_file(
    input_path: Path,
    mode: ResizeMode,
    width: int | None,
    height: int | None,
    output_dir: Path | None,
    suffix: str,
    output_format: ImageFormat | str | None,
    quality: int | None,
    background_color: str | None,
    config: ResizerConfig,
) -> FileResult:
    try:
        with ImageResizer(input_path, config=config) as resizer:
            apply_resize(resizer, mode, width, height)
            saved_file = resizer.save_image_file(
                _build_output_name(input_path, output_dir, suffix),
                extension=output_format,
                quality=quality,
                background_color=background_color,
            )
    except (ImageResizerError, OSError) as original_error:
        return FileResult(
            input_path=str(input_path),
            output_path=None,
            error=f"{type(original_error).__name__}: {original_error}",
        )

    return FileResult(input_path=str(input_path), output_path=saved_file)


def resize_files(
    input_paths: list[str | Path],
    *,
    mode: ResizeMode | str,
    width: int | None = None,
    height: int | None = None,
    output_dir: str | Path | None = None,
    suffix: str = DEFAULT_OUTPUT_SUFFIX,
    output_format: ImageFormat | str | None = None,
    quality: int | None = None,
    background_color: str | None = None,
    config: ResizerConfig | None = None,
    show_progress: bool = True,
) -> BatchSummary:
    """Resize every file in ``input_paths`` with one shared set of options.

    A failure on one file is recorded in its ``FileResult`` and does not
    stop the others.
    """
    effective_config = config or ResizerConfig()
    resize_mode = ResizeMode(mode)
    output_path = None
    if output_dir is not None:
        output_path = Path(output_dir)
        output_path.mkdir(parents=True, exist_ok=True)

    file_results: list[FileResult] = []
    progress_bar = tqdm(
        input_paths,
        desc="Resizing",
        unit="file",
        disable=not show_progress or len(input_paths) < 2,
    )
    for input_path in progress_bar:
        file_results.append(
            _resize_single_file(
                Path(input_path),
                resize_mode,
                width,
                height,
                output_path,
                suffix,
                output_format,
                quality,
                background_color,
                effective_config,
            )
        )

    error_count = sum(1 for result in file_results if result.error is not None)
    return BatchSummary(
        total_files=len(file_results),
        saved=len(file_results) - error_count,
        errors=error_count,
        results=tuple(file_results),
    )

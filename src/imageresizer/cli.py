from __future__ import annotations

import argparse
import sys
from pathlib import Path

from imageresizer._version import __version__
from imageresizer.batch import required_dimensions, resize_files
from imageresizer.config import (
    DEFAULT_JPEG_QUALITY,
    DEFAULT_OUTPUT_SUFFIX,
    DEFAULT_PNG_COMPRESSION,
    ResizerConfig,
)
from imageresizer.types import BatchSummary, ResizeMode


def _build_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="imageresizer",
        description="Resize JPEG, GIF and PNG images.",
    )
    parser.add_argument(
        "input_files",
        type=str,
        nargs="+",
        help="Image files to resize.",
    )
    parser.add_argument(
        "--mode", "-m",
        choices=[mode.value for mode in ResizeMode],
        default=ResizeMode.WITHIN.value,
        help=(
            "within: fit inside width x height; width/height: scale to one side; "
            "fill: cover width x height and crop the center. Default: within."
        ),
    )
    parser.add_argument(
        "--width", "-W",
        type=int,
        default=None,
        help="Target width in pixels.",
    )
    parser.add_argument(
        "--height", "-H",
        type=int,
        default=None,
        help="Target height in pixels.",
    )
    parser.add_argument(
        "--output-dir", "-o",
        type=str,
        default=None,
        help="Directory for resized images. Default: next to each input.",
    )
    parser.add_argument(
        "--suffix",
        type=str,
        default=DEFAULT_OUTPUT_SUFFIX,
        help=f"Appended to each output file name. Default: {DEFAULT_OUTPUT_SUFFIX}.",
    )
    parser.add_argument(
        "--format", "-f",
        choices=["jpeg", "jpg", "gif", "png"],
        default=None,
        dest="output_format",
        help="Output format. Default: same as the input.",
    )
    parser.add_argument(
        "--quality", "-q",
        type=int,
        default=None,
        help=(
            f"JPEG quality (0-100, default {DEFAULT_JPEG_QUALITY}) or PNG "
            f"compression level (0-9, default {DEFAULT_PNG_COMPRESSION})."
        ),
    )
    parser.add_argument(
        "--background", "-b",
        type=str,
        default=None,
        help="Flatten transparency onto this RRGGBB color, e.g. FFFFFF.",
    )
    parser.add_argument(
        "--no-progress",
        action="store_true",
        default=False,
        help="Do not show a progress bar.",
    )
    parser.add_argument(
        "--version", "-V",
        action="version",
        version=f"imageresizer {__version__}",
    )
    return parser


def _print_summary(summary: BatchSummary) -> None:
    for file_result in summary.results:
        if file_result.error is None:
            print(f"  {file_result.input_path} -> {file_result.output_path}")
        else:
            print(f"  {file_result.input_path}: {file_result.error}", file=sys.stderr)

    print(f"\n{'=' * 60}")
    print("  SUMMARY")
    print(f"{'=' * 60}")
    print(f"  Files:   {summary.total_files}")
    print(f"  Saved:   {summary.saved}")
    print(f"  Errors:  {summary.errors}")
    print(f"{'=' * 60}\n")


def main() -> None:
    parser = _build_argument_parser()
    arguments = parser.parse_args()

    resize_mode = ResizeMode(arguments.mode)
    provided = {"width": arguments.width, "height": arguments.height}
    for dimension_name in required_dimensions(resize_mode):
        if provided[dimension_name] is None:
            parser.error(f"--mode {resize_mode.value} requires --{dimension_name}")
        if provided[dimension_name] <= 0:
            parser.error(f"--{dimension_name} must be a positive integer")

    summary = resize_files(
        [Path(input_file) for input_file in arguments.input_files],
        mode=resize_mode,
        width=arguments.width,
        height=arguments.height,
        output_dir=arguments.output_dir,
        suffix=arguments.suffix,
        output_format=arguments.output_format,
        quality=arguments.quality,
        background_color=arguments.background,
        config=ResizerConfig(),
        show_progress=not arguments.no_progress,
    )

    _print_summary(summary)

    if summary.errors > 0:
        sys.exit(1)


if __name__ == "__main__":
    main()

from __future__ import annotations

import re

from imageresizer.exceptions import InvalidColorError

HEX_COLOR_PATTERN = re.compile(r"^[0-9A-Fa-f]{6}$")


def parse_hex_color(hex_color: str) -> tuple[int, int, int]:
    """Convert an ``RRGGBB`` string (no leading hash) to an RGB triple."""
    if not isinstance(hex_color, str) or not HEX_COLOR_PATTERN.match(hex_color):
        raise InvalidColorError(
            f"Background color must be a hexadecimal RGB value without hash, "
            f"for example FFFFFF. Got: {hex_color!r}"
        )
    return (
        int(hex_color[0:2], 16),
        int(hex_color[2:4], 16),
        int(hex_color[4:6], 16),
    )

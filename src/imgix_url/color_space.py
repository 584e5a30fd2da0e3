"""The `cs` parameter: color space of the output image."""

from __future__ import annotations

from enum import Enum


class ColorSpace(Enum):
    """Output color space. See https://docs.imgix.com/apis/url/format/cs."""

    SRGB = "srgb"
    ADOBE_RGB_1998 = "adobergb1998"
    # Smaller color profile metadata; may shift colors slightly.
    TINY_SRGB = "tinysrgb"
    # Drop color profile metadata entirely.
    STRIP = "strip"

    def __str__(self) -> str:
        return self.value

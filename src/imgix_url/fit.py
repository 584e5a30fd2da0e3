"""The `fit` parameter: how the output image fits its target dimensions."""

from __future__ import annotations

from enum import Enum


class Fit(Enum):
    """Resize/fill mode applied after the target dimensions are known.

    See https://docs.imgix.com/apis/url/size/fit.
    """

    # Fit within w/h, pad remaining space with extended edge pixels.
    CLAMP = "clamp"
    # Default. Fit within w/h without cropping or distorting.
    CLIP = "clip"
    # Fill w/h and crop any excess.
    CROP = "crop"
    # Zoom to the face area; pairs with faceindex and facepad.
    FACEAREA = "facearea"
    FILL = "fill"
    FILLMAX = "fillmax"
    # Like clip, but never upscales.
    MAX = "max"
    # Match the requested aspect ratio without exceeding original size.
    MIN = "min"
    # Stretch to exactly w/h.
    SCALE = "scale"

    def __str__(self) -> str:
        return self.value

"""The `crop` parameter: alignment used when `fit=crop`."""

from __future__ import annotations

from dataclasses import dataclass

from .flags import FlagSet, FlagSetBuilder


@dataclass(frozen=True, slots=True)
class Crop(FlagSet):
    """Crop alignment modes.

    Only meaningful together with `fit=crop` and explicit `w`/`h`; that
    combination is not checked here. See https://docs.imgix.com/apis/url/size/crop.
    """

    top: bool = False
    bottom: bool = False
    left: bool = False
    right: bool = False
    faces: bool = False
    focalpoint: bool = False
    edges: bool = False
    entropy: bool = False

    @classmethod
    def build(cls) -> CropBuilder:
        return CropBuilder(cls())


class CropBuilder(FlagSetBuilder[Crop]):
    """Chainable builder for `Crop`."""

    def top(self) -> CropBuilder:
        return self._set("top")

    def bottom(self) -> CropBuilder:
        return self._set("bottom")

    def left(self) -> CropBuilder:
        return self._set("left")

    def right(self) -> CropBuilder:
        return self._set("right")

    def faces(self) -> CropBuilder:
        return self._set("faces")

    def focalpoint(self) -> CropBuilder:
        return self._set("focalpoint")

    def edges(self) -> CropBuilder:
        return self._set("edges")

    def entropy(self) -> CropBuilder:
        return self._set("entropy")

"""Chainable builders for Imgix image URLs."""

from .auto import Auto, AutoBuilder
from .client_hints import ClientHints, ClientHintsBuilder
from .color_space import ColorSpace
from .crop import Crop, CropBuilder
from .fit import Fit
from .rect import Direction, Rect, X, Y
from .url import ImgixUrl, ImgixUrlBuilder

__all__ = [
    "Auto",
    "AutoBuilder",
    "ClientHints",
    "ClientHintsBuilder",
    "ColorSpace",
    "Crop",
    "CropBuilder",
    "Direction",
    "Fit",
    "ImgixUrl",
    "ImgixUrlBuilder",
    "Rect",
    "X",
    "Y",
]

"""Top-level Imgix URL builder.

Basic usage::

    url = ImgixUrl.build("https://example.com").blur(40).q(40).w(300).finish()
    assert url == "https://example.com/?blur=40&q=40&w=300"

The builder does not reject combinations Imgix would ignore, e.g. `ar`
without `fit=crop`. See https://docs.imgix.com/apis/url.
"""

from __future__ import annotations

from typing import Iterable
from urllib.parse import quote

from .auto import Auto
from .client_hints import ClientHints
from .color_space import ColorSpace
from .crop import Crop
from .fit import Fit
from .rect import Rect

# Characters left literal in values; Imgix expects `auto=compress,format` and `ar=9:1`.
_VALUE_SAFE = ",:"


def encode_query(params: Iterable[tuple[str, str]]) -> str:
    """Percent-encode `(name, value)` pairs into `name=value&...` in the given order."""
    return "&".join(
        f"{quote(name, safe='')}={quote(value, safe=_VALUE_SAFE)}" for name, value in params
    )


class ImgixUrl:
    """Entry point; call `ImgixUrl.build(base_url)` to start a URL."""

    @staticmethod
    def build(url: str) -> ImgixUrlBuilder:
        return ImgixUrlBuilder(url)


class ImgixUrlBuilder:
    """Accumulates query parameters for one base URL.

    Every setter appends; calling the same setter twice yields two entries.
    Values are stringified when set, so later changes to a sub-builder do not
    leak into this URL.
    """

    def __init__(self, url: str) -> None:
        self.url = url
        self._params: list[tuple[str, str]] = []

    @property
    def params(self) -> tuple[tuple[str, str], ...]:
        """Accumulated `(name, value)` pairs in insertion order."""
        return tuple(self._params)

    def finish(self) -> str:
        """Return `{url}/?{query}`. Safe to call repeatedly."""
        return f"{self.url}/?{encode_query(self._params)}"

    def _push(self, name: str, value: str) -> ImgixUrlBuilder:
        self._params.append((name, value))
        return self

    def q(self, val: int) -> ImgixUrlBuilder:
        """Output quality for lossy formats, nominally 0-100."""
        return self._push("q", str(val))

    def w(self, val: int) -> ImgixUrlBuilder:
        """Output width in pixels."""
        return self._push("w", str(val))

    def h(self, val: int) -> ImgixUrlBuilder:
        """Output height in pixels."""
        return self._push("h", str(val))

    def dpr(self, val: int) -> ImgixUrlBuilder:
        """Output device pixel ratio."""
        return self._push("dpr", str(val))

    def bg(self, val: str) -> ImgixUrlBuilder:
        """Fill color for transparent areas, passed through as given (`fff`, `80FF0000`)."""
        return self._push("bg", val)

    def blur(self, val: int) -> ImgixUrlBuilder:
        """Gaussian blur strength, nominally 0-2000."""
        return self._push("blur", str(val))

    def faceindex(self, val: int) -> ImgixUrlBuilder:
        """Face to center on when `fit=facearea`; 1-based."""
        return self._push("faceindex", str(val))

    def facepad(self, val: int) -> ImgixUrlBuilder:
        """Padding around each face when `fit=facearea`."""
        return self._push("facepad", str(val))

    def ar(self, w: int, h: int) -> ImgixUrlBuilder:
        """Aspect ratio `w:h`; only honored with `fit=crop`."""
        return self._push("ar", f"{w}:{h}")

    def auto(self, auto: Auto) -> ImgixUrlBuilder:
        return self._push("auto", str(auto))

    def rect(self, rect: Rect) -> ImgixUrlBuilder:
        return self._push("rect", str(rect))

    def fit(self, fit: Fit) -> ImgixUrlBuilder:
        return self._push("fit", str(fit))

    def crop(self, crop: Crop) -> ImgixUrlBuilder:
        return self._push("crop", str(crop))

    def cs(self, cs: ColorSpace) -> ImgixUrlBuilder:
        return self._push("cs", str(cs))

    def ch(self, ch: ClientHints) -> ImgixUrlBuilder:
        return self._push("ch", str(ch))

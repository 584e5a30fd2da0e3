"""The `ch` parameter: opt-in to Client Hints based resource selection."""

from __future__ import annotations

from dataclasses import dataclass, field

from .flags import FlagSet, FlagSetBuilder


@dataclass(frozen=True, slots=True)
class ClientHints(FlagSet):
    """Client Hints honored for an image.

    Resolution is driven by the browser's `Width`, `DPR` and `Save-Data`
    request headers. See https://docs.imgix.com/apis/url/format/ch.
    """

    width: bool = False
    dpr: bool = False
    save_data: bool = field(default=False, metadata={"token": "save-data"})

    @classmethod
    def build(cls) -> ClientHintsBuilder:
        return ClientHintsBuilder(cls())


class ClientHintsBuilder(FlagSetBuilder[ClientHints]):
    def width(self) -> ClientHintsBuilder:
        return self._set("width")

    def dpr(self) -> ClientHintsBuilder:
        return self._set("dpr")

    def save_data(self) -> ClientHintsBuilder:
        return self._set("save_data")

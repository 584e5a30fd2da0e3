"""The `auto` parameter: baseline automatic optimizations."""

from __future__ import annotations

from dataclasses import dataclass

from .flags import FlagSet, FlagSetBuilder


@dataclass(frozen=True, slots=True)
class Auto(FlagSet):
    """Automatic optimizations. See https://docs.imgix.com/apis/url/auto/auto."""

    compress: bool = False
    enhance: bool = False
    format: bool = False
    redeye: bool = False

    @classmethod
    def build(cls) -> AutoBuilder:
        return AutoBuilder(cls())


class AutoBuilder(FlagSetBuilder[Auto]):
    """Chainable builder for `Auto`."""

    def compress(self) -> AutoBuilder:
        return self._set("compress")

    def enhance(self) -> AutoBuilder:
        return self._set("enhance")

    def format(self) -> AutoBuilder:
        return self._set("format")

    def redeye(self) -> AutoBuilder:
        return self._set("redeye")

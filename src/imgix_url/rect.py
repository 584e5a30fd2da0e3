"""Sub-region rectangle used by the `rect` parameter."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class X(Enum):
    """Named horizontal anchor."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"

    def __str__(self) -> str:
        return self.value


class Y(Enum):
    """Named vertical anchor."""

    TOP = "top"
    MIDDLE = "middle"
    BOTTOM = "bottom"

    def __str__(self) -> str:
        return self.value


Direction = Union[int, X, Y]


def format_direction(direction: Direction) -> str:
    """Render a pixel offset as decimal text, or a named anchor as its token."""
    if isinstance(direction, (X, Y)):
        return direction.value
    return str(int(direction))


def parse_direction(text: str) -> Direction:
    """Parse offset text or an anchor token (`300`, `left`, `bottom`)."""
    value = text.strip()
    try:
        return int(value)
    except ValueError:
        pass
    lowered = value.lower()
    for enum_type in (X, Y):
        try:
            return enum_type(lowered)
        except ValueError:
            continue
    raise ValueError(f"rect 方向值无效: {text!r}（应为整数或 left/center/right/top/middle/bottom）")


@dataclass(frozen=True, slots=True)
class Rect:
    """Source sub-region selected before any resize is applied.

    See https://docs.imgix.com/apis/url/size/rect.
    """

    x: Direction
    y: Direction
    w: int
    h: int

    def __str__(self) -> str:
        return ",".join(
            [
                format_direction(self.x),
                format_direction(self.y),
                str(self.w),
                str(self.h),
            ]
        )

    @classmethod
    def parse(cls, text: str) -> Rect:
        """Parse `x,y,w,h` text such as `300,bottom,100,50`."""
        parts = [part.strip() for part in text.split(",")]
        if len(parts) != 4:
            raise ValueError(f"rect 必须是 x,y,w,h 四段: {text!r}")
        try:
            w = int(parts[2])
            h = int(parts[3])
        except ValueError:
            raise ValueError(f"rect 的 w/h 必须是整数: {text!r}") from None
        return cls(x=parse_direction(parts[0]), y=parse_direction(parts[1]), w=w, h=h)

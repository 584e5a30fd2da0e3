"""Configuration helpers for YAML presets and CLI input."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable

import yaml

from .auto import Auto
from .client_hints import ClientHints
from .color_space import ColorSpace
from .crop import Crop
from .fit import Fit
from .models import UrlPreset
from .rect import Rect, parse_direction
from .url import ImgixUrl, ImgixUrlBuilder

INT_PARAMS = ("q", "w", "h", "dpr", "blur", "faceindex", "facepad")
PARAM_NAMES = (
    "q",
    "w",
    "h",
    "dpr",
    "bg",
    "blur",
    "faceindex",
    "facepad",
    "ar",
    "auto",
    "rect",
    "fit",
    "crop",
    "cs",
    "ch",
)


def load_yaml_config(path: Path | None) -> dict[str, Any]:
    """Load YAML config or return empty dict when path is absent."""
    if path is None:
        return {}
    if not path.exists():
        raise FileNotFoundError(f"配置文件不存在: {path}")
    with path.open("r", encoding="utf-8") as fp:
        data = yaml.safe_load(fp) or {}
    if not isinstance(data, dict):
        raise ValueError("YAML 配置根节点必须是对象（mapping）。")
    return data


def build_preset(raw: dict[str, Any]) -> UrlPreset:
    """Construct UrlPreset from a `{base_url, params}` mapping.

    `params` is either a mapping (applied in key order) or a list of
    single-key mappings, which allows the same parameter more than once.
    """
    base_url = raw.get("base_url")
    if base_url is None or not str(base_url).strip():
        raise ValueError("base_url 不能为空。")
    builder = ImgixUrl.build(str(base_url))
    for name, value in param_items(raw.get("params")):
        apply_param(builder, name, value)
    return UrlPreset(base_url=builder.url, params=builder.params)


def build_url(raw: dict[str, Any]) -> str:
    """Shortcut: preset mapping straight to URL string."""
    return build_preset(raw).to_url()


def apply_param(builder: ImgixUrlBuilder, name: str, value: Any) -> ImgixUrlBuilder:
    """Convert one loosely typed value and feed it to the matching setter."""
    if name in INT_PARAMS:
        setter: Callable[[int], ImgixUrlBuilder] = getattr(builder, name)
        return setter(_as_int(name, value))
    handler = _HANDLERS.get(name)
    if handler is None:
        raise ValueError(f"不支持的参数: {name}（可选: {', '.join(PARAM_NAMES)}）")
    return handler(builder, value)


def parse_aspect_ratio(value: Any) -> tuple[int, int]:
    """Accept `"9:1"` or `[9, 1]`."""
    parts: list[Any] = []
    if isinstance(value, int) and not isinstance(value, bool):
        # YAML 1.1 reads an unquoted 16:9 as the base-60 integer 969.
        raise ValueError(
            f"ar 必须加引号或写成列表，例如 ar: \"16:9\" 或 [16, 9]（读到整数 {value}）"
        )
    elif isinstance(value, str):
        parts = value.split(":")
    elif isinstance(value, (list, tuple)):
        parts = list(value)
    if len(parts) != 2:
        raise ValueError(f"ar 必须是 W:H 形式: {value!r}")
    return _as_int("ar", parts[0]), _as_int("ar", parts[1])


def parse_rect(value: Any) -> Rect:
    """Accept `"x,y,w,h"`, a 4-item list, or a `{x, y, w, h}` mapping."""
    if isinstance(value, str):
        return Rect.parse(value)
    if isinstance(value, (list, tuple)):
        return Rect.parse(",".join(str(part) for part in value))
    if isinstance(value, dict):
        missing = [key for key in ("x", "y", "w", "h") if key not in value]
        if missing:
            raise ValueError(f"rect 缺少字段: {', '.join(missing)}")
        return Rect(
            x=parse_direction(str(value["x"])),
            y=parse_direction(str(value["y"])),
            w=_as_int("rect.w", value["w"]),
            h=_as_int("rect.h", value["h"]),
        )
    raise ValueError(f"rect 取值无效: {value!r}")


def split_tokens(value: Any) -> list[str]:
    """Accept `"a,b"` or `[a, b]`; blanks are dropped."""
    if value is None:
        return []
    if isinstance(value, str):
        items = value.split(",")
    elif isinstance(value, (list, tuple)):
        items = [str(item) for item in value]
    else:
        raise ValueError(f"标志取值必须是字符串或列表: {value!r}")
    return [item.strip().lower() for item in items if item.strip()]


def parse_fit(value: Any) -> Fit:
    try:
        return Fit(str(value).strip().lower())
    except ValueError:
        allowed = ", ".join(member.value for member in Fit)
        raise ValueError(f"fit 不支持的取值: {value!r}（可选: {allowed}）") from None


def parse_color_space(value: Any) -> ColorSpace:
    try:
        return ColorSpace(str(value).strip().lower())
    except ValueError:
        allowed = ", ".join(member.value for member in ColorSpace)
        raise ValueError(f"cs 不支持的取值: {value!r}（可选: {allowed}）") from None


def parse_bg(value: Any) -> str:
    """Require text; YAML turns unquoted 000000 into 0 and 010101 into octal 4161."""
    if not isinstance(value, str):
        raise ValueError(f"bg 必须是字符串，请加引号，例如 bg: \"000000\"（读到 {value!r}）")
    return value


def missing_crop_fit(params: tuple[tuple[str, str], ...]) -> bool:
    """True when `ar` is present but `fit=crop` is not; Imgix then ignores `ar`."""
    names = {name for name, _ in params}
    return "ar" in names and ("fit", Fit.CROP.value) not in params


def param_items(params: Any) -> list[tuple[str, Any]]:
    """Normalize `params` (mapping or list of single-key mappings) to ordered pairs."""
    if params is None:
        return []
    if isinstance(params, dict):
        return [(str(name), value) for name, value in params.items()]
    if isinstance(params, list):
        items: list[tuple[str, Any]] = []
        for entry in params:
            if not isinstance(entry, dict) or len(entry) != 1:
                raise ValueError("params 列表的每一项必须是单键对象，例如 {w: 300}。")
            ((name, value),) = entry.items()
            items.append((str(name), value))
        return items
    raise ValueError("params 必须是对象（mapping）或列表。")


def _as_int(name: str, value: Any) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{name} 必须是整数: {value!r}")
    try:
        return int(str(value).strip())
    except ValueError:
        raise ValueError(f"{name} 必须是整数: {value!r}") from None


_HANDLERS: dict[str, Callable[[ImgixUrlBuilder, Any], ImgixUrlBuilder]] = {
    "bg": lambda builder, value: builder.bg(parse_bg(value)),
    "ar": lambda builder, value: builder.ar(*parse_aspect_ratio(value)),
    "auto": lambda builder, value: builder.auto(Auto.from_tokens(split_tokens(value))),
    "rect": lambda builder, value: builder.rect(parse_rect(value)),
    "fit": lambda builder, value: builder.fit(parse_fit(value)),
    "crop": lambda builder, value: builder.crop(Crop.from_tokens(split_tokens(value))),
    "cs": lambda builder, value: builder.cs(parse_color_space(value)),
    "ch": lambda builder, value: builder.ch(ClientHints.from_tokens(split_tokens(value))),
}

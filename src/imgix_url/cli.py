"""Command-line interface for imgix-url."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any

from .auto import Auto
from .client_hints import ClientHints
from .color_space import ColorSpace
from .config import (
    INT_PARAMS,
    PARAM_NAMES,
    build_preset,
    load_yaml_config,
    missing_crop_fit,
    param_items,
)
from .crop import Crop
from .fit import Fit
from .rect import X, Y


def main() -> None:
    parser = _build_parser()
    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        return

    if args.command == "build":
        _handle_build(args)
    elif args.command == "tokens":
        _handle_tokens(args)
    else:
        parser.error(f"未知命令: {args.command}")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Imgix URL 构建器")
    subparsers = parser.add_subparsers(dest="command")

    build_parser = subparsers.add_parser("build", help="根据参数构建 Imgix URL。")
    build_parser.add_argument("--config", type=Path, default=None, help="YAML 预设文件路径。")
    build_parser.add_argument(
        "--base-url",
        dest="base_url",
        default=None,
        help="图片基础 URL，按原样拼接。",
    )
    for name in INT_PARAMS:
        build_parser.add_argument(f"--{name}", type=int, default=None, help=_INT_HELP[name])
    build_parser.add_argument("--bg", default=None, help="透明区域填充色，例如 fff。")
    build_parser.add_argument("--ar", default=None, help="宽高比 W:H，需配合 --fit crop。")
    build_parser.add_argument("--auto", default=None, help="自动优化标志，逗号分隔。")
    build_parser.add_argument("--rect", default=None, help="源图子区域 x,y,w,h。")
    build_parser.add_argument(
        "--fit",
        default=None,
        choices=[member.value for member in Fit],
        help="缩放适配模式。",
    )
    build_parser.add_argument("--crop", default=None, help="裁剪对齐标志，逗号分隔。")
    build_parser.add_argument(
        "--cs",
        default=None,
        choices=[member.value for member in ColorSpace],
        help="输出色彩空间。",
    )
    build_parser.add_argument("--ch", default=None, help="Client Hints 标志，逗号分隔。")

    subparsers.add_parser("tokens", help="列出所有可用的取值。")

    return parser


_INT_HELP = {
    "q": "输出质量（0-100）。",
    "w": "输出宽度（像素）。",
    "h": "输出高度（像素）。",
    "dpr": "设备像素比。",
    "blur": "模糊强度（0-2000）。",
    "faceindex": "fit=facearea 时选择的人脸序号。",
    "facepad": "fit=facearea 时人脸周围的留白。",
}


def _handle_build(args: argparse.Namespace) -> None:
    try:
        yaml_data = load_yaml_config(args.config)
    except (FileNotFoundError, ValueError) as exc:
        raise SystemExit(str(exc)) from exc
    merged = _merge_build_settings(args, yaml_data)

    if merged.get("base_url") is None:
        raise SystemExit("缺少必填项: --base-url（或 config.base_url）。")

    try:
        preset = build_preset(merged)
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc
    if missing_crop_fit(preset.params):
        print("警告: 设置了 ar 但未设置 fit=crop，Imgix 将忽略 ar。", file=sys.stderr)
    print(json.dumps(preset.as_dict(), ensure_ascii=False, indent=2))


def _handle_tokens(args: argparse.Namespace) -> None:
    _ = args
    payload = {
        "fit": [member.value for member in Fit],
        "cs": [member.value for member in ColorSpace],
        "auto": list(Auto.vocabulary()),
        "crop": list(Crop.vocabulary()),
        "ch": list(ClientHints.vocabulary()),
        "rect.x": [member.value for member in X],
        "rect.y": [member.value for member in Y],
    }
    print(json.dumps(payload, ensure_ascii=False, indent=2))


def _merge_build_settings(args: argparse.Namespace, yaml_data: dict[str, Any]) -> dict[str, Any]:
    """CLI values replace preset entries of the same name; the rest keep preset order."""
    cli_params = [
        (name, getattr(args, name)) for name in PARAM_NAMES if getattr(args, name) is not None
    ]
    overridden = {name for name, _ in cli_params}

    try:
        yaml_items = param_items(yaml_data.get("params"))
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc

    params: list[dict[str, Any]] = [
        {name: value} for name, value in yaml_items if name not in overridden
    ]
    params.extend({name: value} for name, value in cli_params)

    base_url = args.base_url if args.base_url is not None else yaml_data.get("base_url")
    return {"base_url": base_url, "params": params}


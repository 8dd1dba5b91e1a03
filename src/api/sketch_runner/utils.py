"""
どこで: `api.sketch_runner.utils`（純粋関数/小ヘルパ）。
何を: FPS・ウィンドウサイズ・背景色・初期深さ/サイズの解決（引数 > 設定ファイル > 既定）。
なぜ: `api.island_app` を薄く保ち、GL なしでテストできる部分を切り出すため。
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from common.settings import get as _get_settings
from common.types import RGBA
from util.color import normalize_color
from util.utils import config_section

logger = logging.getLogger(__name__)

DEFAULT_WINDOW = (960, 720)
DEFAULT_BACKGROUND: RGBA = (0.1, 0.1, 0.15, 1.0)


def resolve_fps(requested_fps: int | None, *, default: int = 60, cfg: Mapping[str, Any] | None = None) -> int:
    """FPS を解決して 1 以上の int を返す。

    - 明示指定があればそれを優先（<=0 は 1 に丸める）。
    - それ以外は設定 `window.fps`、数値化できなければ既定値。
    """
    if requested_fps is not None:
        return max(1, int(requested_fps))
    section = cfg if cfg is not None else config_section("window")
    try:
        return max(1, int(section.get("fps", default)))
    except (TypeError, ValueError):
        logger.warning("window.fps=%r が不正です。既定値 %d を使用します", section.get("fps"), default)
        return max(1, int(default))


def resolve_window_size(
    size: tuple[int, int] | None, *, cfg: Mapping[str, Any] | None = None
) -> tuple[int, int]:
    """ウィンドウサイズ [px] を解決する（正の整数であることを検証）。"""
    if size is None:
        section = cfg if cfg is not None else config_section("window")
        size = (
            section.get("width", DEFAULT_WINDOW[0]),
            section.get("height", DEFAULT_WINDOW[1]),
        )
    try:
        w, h = int(size[0]), int(size[1])
    except (TypeError, ValueError, IndexError) as e:
        raise ValueError(f"invalid window size: {size!r}") from e
    if w <= 0 or h <= 0:
        raise ValueError(f"window size must be positive, got: {(w, h)}")
    return w, h


def resolve_background(
    background: object | None, *, cfg: Mapping[str, Any] | None = None
) -> RGBA:
    """背景色を RGBA(0–1) で返す（引数 > 設定 `window.background` > 既定）。"""
    if background is None:
        section = cfg if cfg is not None else config_section("window")
        background = section.get("background")
    if background is None:
        return DEFAULT_BACKGROUND
    return normalize_color(background)


def resolve_depth(depth: int | None, *, cfg: Mapping[str, Any] | None = None) -> int:
    """初期深さを `[0, MAX_DEPTH]` で返す（引数 > 設定 `island.depth` > `MKI_DEFAULT_DEPTH`）。"""
    settings = _get_settings()
    if depth is None:
        section = cfg if cfg is not None else config_section("island")
        depth = section.get("depth", settings.DEFAULT_DEPTH)
    try:
        d = int(depth)  # type: ignore[arg-type]
    except (TypeError, ValueError) as e:
        raise ValueError(f"invalid depth: {depth!r}") from e
    if d < 0:
        raise ValueError(f"depth must be >= 0, got: {d}")
    return min(d, settings.MAX_DEPTH)


def resolve_island_size(
    size: float | None,
    viewport: tuple[int, int],
    *,
    cfg: Mapping[str, Any] | None = None,
) -> float:
    """初期の一辺 [px] を返す。省略時は `size_ratio × min(幅, 高さ)`。"""
    if size is not None:
        return float(size)
    section = cfg if cfg is not None else config_section("island")
    ratio = float(section.get("size_ratio", _get_settings().SIZE_RATIO))
    return ratio * min(viewport)


__all__ = [
    "resolve_fps",
    "resolve_window_size",
    "resolve_background",
    "resolve_depth",
    "resolve_island_size",
]

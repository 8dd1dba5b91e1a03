"""
どこで: `api.island_app`（実行ランナー）。
何を: ミンコフスキー島をウィンドウに描画し、キー操作で深さ変更・回転アニメーション・リセットを行う。
なぜ: 幾何生成（shapes/runtime）・状態（Animation）・描画（engine.render）を結線する唯一の入口とするため。

実行フロー（概要）:
1) 設定解決: FPS/ウィンドウサイズ/背景色/初期深さを引数 > `configs/default.yaml` > 既定 の順で確定。
2) 初期島: `Island(center=(0, 0), size, depth)` を `IslandBuffer` で生成（頂点は中心基準）。
3) `init_only=True` ならここで終了（GL/ウィンドウ依存を読み込まない）。
4) ウィンドウ/GL: `RenderWindow` と ModernGL コンテキスト、`IslandRenderer` を生成。
5) フレーム駆動: `FrameClock([animation, renderer])` を `pyglet.clock` で駆動。

キー操作:
- UP / DOWN : 深さ ±1（`[0, MAX_DEPTH]`）。変更のたびに全頂点を再生成して差し替える。
- SPACE     : アニメーション開始/停止（停止中は白線で静止描画）。
- R         : リセット（停止・深さを既定値へ・回転角 0）。
- ESC       : 終了。

ロギング:
- 初期化エラーは `logger.exception` で記録したうえで再送出する。
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from common.logging import setup_default_logging
from common.settings import get as _get_settings
from engine.core.animation import Animation
from engine.core.vector2 import ORIGIN
from engine.runtime.island import Island, IslandBuffer

from .sketch_runner.utils import (
    resolve_background,
    resolve_depth,
    resolve_fps,
    resolve_island_size,
    resolve_window_size,
)

logger = logging.getLogger(__name__)


@dataclass
class IslandController:
    """UI 入力（深さ変更/アニメーション/リセット）を島とアニメーションへ反映するコントローラ。

    GL に依存しないため、キー割り当てとは独立にテストできる。
    """

    buffer: IslandBuffer
    animation: Animation
    initial_depth: int = 1
    max_depth: int = field(default_factory=lambda: _get_settings().MAX_DEPTH)

    @property
    def island(self) -> Island:
        island = self.buffer.island
        if island is None:
            raise RuntimeError("IslandBuffer が未初期化です")
        return island

    def set_depth(self, depth: int) -> Island:
        """深さを `[0, max_depth]` にクランプして再生成する（変化がなければ何もしない）。"""
        d = max(0, min(self.max_depth, int(depth)))
        current = self.island
        if d == current.depth:
            return current
        logger.info("depth %d -> %d (%d vertices)", current.depth, d, current.with_depth(d).vertex_count)
        self.buffer.regenerate(current.with_depth(d))
        return self.island

    def step_depth(self, delta: int) -> Island:
        return self.set_depth(self.island.depth + delta)

    def set_size(self, size: float) -> Island:
        current = self.island
        if float(size) == current.size:
            return current
        self.buffer.regenerate(current.with_size(size))
        return self.island

    def toggle_animation(self) -> bool:
        self.animation.toggle()
        return self.animation.is_animating

    def reset(self) -> Island:
        self.animation.reset()
        return self.set_depth(self.initial_depth)


def run_island(
    *,
    depth: int | None = None,
    size: float | None = None,
    window_size: tuple[int, int] | None = None,
    fps: int | None = None,
    background: object | None = None,
    animate: bool = False,
    rotation_speed: float | None = None,
    log_level: int | str = "INFO",
    init_only: bool = False,
) -> IslandController | None:
    """ミンコフスキー島のビューアを起動する。

    Parameters
    ----------
    depth : int | None
        初期深さ。None で設定（`island.depth` → `MKI_DEFAULT_DEPTH`）。
    size : float | None
        初期正方形の一辺 [px]。None で `size_ratio × min(幅, 高さ)`。
    window_size : tuple[int, int] | None
        ウィンドウサイズ [px]。None で設定 `window.width/height`。
    fps : int | None
        描画更新レート。None で設定 `window.fps`。
    background : str | tuple | None
        背景色（RGBA 0–1 または #RRGGBB）。
    animate : bool, default False
        True で起動直後から回転アニメーションを開始。
    rotation_speed : float | None
        回転速度 [rad/s]。None で `MKI_ROTATION_SPEED`。
    init_only : bool, default False
        True で GL/ウィンドウを作らず、初期化済みのコントローラを返す。

    Returns
    -------
    IslandController | None
        `init_only=True` のときのみコントローラを返す。
    """
    setup_default_logging(log_level)
    settings = _get_settings()

    fps = resolve_fps(fps)
    width, height = resolve_window_size(window_size)
    bg = resolve_background(background)
    initial_depth = resolve_depth(depth)
    island_size = resolve_island_size(size, (width, height))

    speed = settings.ROTATION_SPEED if rotation_speed is None else float(rotation_speed)
    animation = Animation(rotation_speed=speed)
    island_buffer = IslandBuffer(Island(center=ORIGIN, size=island_size, depth=initial_depth))
    controller = IslandController(island_buffer, animation, initial_depth=initial_depth)
    if animate:
        animation.start()

    if init_only:
        return controller

    # 遅延インポート（ヘッドレス環境でのウィンドウ生成を避ける）
    import moderngl
    import pyglet
    from pyglet.window import key

    from engine.core.frame_clock import FrameClock
    from engine.core.render_window import RenderWindow
    from engine.render.renderer import IslandRenderer

    try:
        window = RenderWindow(width, height, bg_color=bg)
        mgl_ctx = moderngl.create_context()
    except Exception:
        logger.exception("ウィンドウ/GL コンテキストの初期化に失敗しました")
        raise

    renderer = IslandRenderer(
        mgl_ctx,
        island_buffer,
        animation,
        viewport_size=window.get_framebuffer_size,
        background=bg,
    )
    renderer.sync()
    window.add_draw_callback(renderer.draw)

    def on_key(symbol: int, modifiers: int) -> None:
        if symbol == key.UP:
            controller.step_depth(+1)
        elif symbol == key.DOWN:
            controller.step_depth(-1)
        elif symbol == key.SPACE:
            controller.toggle_animation()
        elif symbol == key.R:
            controller.reset()

    window.add_key_callback(on_key)

    frame_clock = FrameClock([animation, renderer])
    pyglet.clock.schedule_interval(frame_clock.tick, 1 / fps)

    @window.event
    def on_close() -> None:
        pyglet.clock.unschedule(frame_clock.tick)
        renderer.release()

    logger.info(
        "start: window=%dx%d fps=%d depth=%d size=%.1f",
        width,
        height,
        fps,
        initial_depth,
        island_size,
    )
    pyglet.app.run()
    return None


__all__ = ["IslandController", "run_island"]

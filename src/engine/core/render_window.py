"""
どこで: `engine.core` の描画ウィンドウ薄ラッパ。
何を: Pyglet Window（MSAA/背景クリア/リサイズ可）と描画・キー入力コールバック登録を提供。
なぜ: レンダラ/幾何層から GUI 依存を切り離し、最小インターフェイスで統一するため。

使用例:
    win = RenderWindow(1280, 720, bg_color=(0.1, 0.1, 0.15, 1.0))

    def draw_scene():
        renderer.draw(...)

    win.add_draw_callback(draw_scene)
    pyglet.app.run()
"""

from typing import Callable

import pyglet
from pyglet.gl import Config, glClearColor

KeyCallback = Callable[[int, int], None]


class RenderWindow(pyglet.window.Window):
    def __init__(
        self,
        width: int,
        height: int,
        *,
        caption: str = "Minkowski Island",
        bg_color: tuple[float, float, float, float] = (0.1, 0.1, 0.15, 1.0),
        resizable: bool = True,
    ):
        """ウィンドウを生成する。

        引数:
            width: ウィンドウ幅（ピクセル）。
            height: ウィンドウ高さ（ピクセル）。
            caption: タイトル。
            bg_color: 背景色 RGBA（0.0〜1.0）。
        """
        # 線描画を滑らかにするために MSAA を有効化
        config = Config(double_buffer=True, sample_buffers=1, samples=4, vsync=True)
        super().__init__(
            width=width, height=height, caption=caption, config=config, resizable=resizable
        )
        self._bg_color = bg_color
        self._draw_callbacks: list[Callable[[], None]] = []
        self._key_callbacks: list[KeyCallback] = []

    def add_draw_callback(self, func: Callable[[], None]) -> None:
        """
        `on_draw` 中に呼び出す描画関数を登録する。

        - 関数は引数を取らず、副作用で描画を行うこと。
        - 登録順に呼び出される。
        """
        self._draw_callbacks.append(func)

    def add_key_callback(self, func: KeyCallback) -> None:
        """`on_key_press(symbol, modifiers)` で呼び出す関数を登録する。"""
        self._key_callbacks.append(func)

    def on_draw(self):  # Pyglet 既定のイベント名
        """ウィンドウ描画イベントハンドラ。登録された描画コールバックを呼び出す。"""
        r, g, b, a = self._bg_color
        glClearColor(r, g, b, a)
        self.clear()
        for cb in self._draw_callbacks:
            cb()

    def on_key_press(self, symbol, modifiers):  # Pyglet 既定のイベント名
        # ESC の既定動作（close）は基底クラスに任せる
        super().on_key_press(symbol, modifiers)
        for cb in self._key_callbacks:
            cb(symbol, modifiers)

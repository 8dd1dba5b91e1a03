"""
どこで: `engine.core` の簡易フレームドライバ。
何を: `Tickable` の列を固定順序で呼び出す FrameClock（dt 測定とループ管理）。
なぜ: アニメーション → レンダラの順で毎フレーム更新し、回転角の反映を 1 フレーム遅らせないため。
"""

from __future__ import annotations

import time
from typing import Callable, Sequence

from .tickable import Tickable


class FrameClock:
    """登録された Tickable を固定順序で実行するだけの極小クラス。"""

    def __init__(
        self,
        tickables: Sequence[Tickable],
        *,
        timer: Callable[[], float] = time.perf_counter,
    ) -> None:
        self._tickables = tuple(tickables)
        self._timer = timer
        self._last_time = timer()

    # GUI フレームワークから schedule_interval で呼ばせる
    def tick(self, dt: float | None = None) -> None:
        if dt is None:  # pyglet は dt を渡してくれる
            now = self._timer()
            dt = now - self._last_time
            self._last_time = now

        for t in self._tickables:
            t.tick(dt)

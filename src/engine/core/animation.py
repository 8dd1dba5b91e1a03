"""
どこで: `engine.core` のアニメーション状態。
何を: `IDLE` / `ANIMATING` の 2 状態機械と、回転角・経過時間の積算、時間依存の線色。
なぜ: 回転や色の時間発展を幾何生成から切り離し、外部の開始/停止コマンドだけで駆動するため。

遷移:
    IDLE --start/toggle--> ANIMATING --stop/toggle--> IDLE
    reset: どの状態からでも IDLE へ戻し、角度を 0 にする。

`tick(dt)` は ANIMATING のときのみ角度と経過時間を進める（`FrameClock` から呼ばれる）。
"""

from __future__ import annotations

import enum
import logging
import math

from common.types import RGBA

from .tickable import Tickable

logger = logging.getLogger(__name__)

STATIC_COLOR: RGBA = (1.0, 1.0, 1.0, 1.0)


class AnimationState(enum.Enum):
    IDLE = "idle"
    ANIMATING = "animating"


def cycle_color(t: float) -> RGBA:
    """経過時間 `t` [sec] に対する周期的な線色（各成分 0–1）。"""
    r = math.cos(t * 0.6) * 0.5 + 0.5
    g = math.sin(t * 0.4) * 0.5 + 0.5
    b = math.cos(t * 0.8 + math.pi / 2) * 0.5 + 0.5
    return (r, g, b, 1.0)


class Animation(Tickable):
    """回転アニメーションの状態機械。"""

    def __init__(self, rotation_speed: float = 0.5) -> None:
        self.rotation_speed = float(rotation_speed)
        self.state = AnimationState.IDLE
        self.angle = 0.0
        self.elapsed = 0.0

    @property
    def is_animating(self) -> bool:
        return self.state is AnimationState.ANIMATING

    def start(self) -> None:
        if self.state is AnimationState.IDLE:
            logger.debug("animation start (angle=%.3f)", self.angle)
        self.state = AnimationState.ANIMATING

    def stop(self) -> None:
        if self.state is AnimationState.ANIMATING:
            logger.debug("animation stop (angle=%.3f)", self.angle)
        self.state = AnimationState.IDLE

    def toggle(self) -> AnimationState:
        if self.is_animating:
            self.stop()
        else:
            self.start()
        return self.state

    def reset(self) -> None:
        self.stop()
        self.angle = 0.0
        self.elapsed = 0.0

    def tick(self, dt: float) -> None:
        if not self.is_animating:
            return
        self.elapsed += dt
        self.angle += dt * self.rotation_speed

    def line_color(self) -> RGBA:
        """現在の線色。停止中は白、再生中は経過時間に応じた周期色。"""
        if not self.is_animating:
            return STATIC_COLOR
        return cycle_color(self.elapsed)


__all__ = ["AnimationState", "Animation", "cycle_color", "STATIC_COLOR"]

"""
どこで: `engine.core` の 2D ベクトル型。
何を: 不変の `Vector2`（点/ベクトル兼用）と、加算・減算・スカラー倍・回転（度）の純関数。
なぜ: 曲線生成（shapes.minkowski）から座標演算を切り離し、数値規約（回転の向き）を一箇所に固定するため。

回転の規約:
- 標準の 2D 回転行列 `x' = x cosθ − y sinθ`, `y' = x sinθ + y cosθ`。
- 角度は度で受け取り、内部でラジアンへ変換する。
- 正の角度は Y 上向き座標系での反時計回り。例: `rotate((1, 0), -90) == (0, -1)`。

NaN/∞ は IEEE-754 の規則どおりに伝搬させ、特別扱いしない。
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Sequence


@dataclass(frozen=True, slots=True)
class Vector2:
    """不変の 2D ベクトル。座標のみで同一性が決まる値型。"""

    x: float = 0.0
    y: float = 0.0

    # ── 生成 ─────────────────────────
    @classmethod
    def of(cls, value: "Vector2 | Sequence[float]") -> "Vector2":
        """`Vector2` または長さ 2 のシーケンスから `Vector2` を得る。

        例外:
            ValueError: 長さが 2 でない場合。
        """
        if isinstance(value, Vector2):
            return value
        if len(value) != 2:
            raise ValueError(f"2 要素の座標が必要です: got {value!r}")
        return cls(float(value[0]), float(value[1]))

    # ── 演算子 ───────────────────────
    def __add__(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, k: float) -> "Vector2":
        return Vector2(self.x * k, self.y * k)

    __rmul__ = __mul__

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    # ── メソッド ─────────────────────
    def rotate_deg(self, angle_deg: float) -> "Vector2":
        """原点回りに `angle_deg` 度回転したベクトルを返す。"""
        angle_rad = angle_deg * math.pi / 180
        cos_a = math.cos(angle_rad)
        sin_a = math.sin(angle_rad)
        return Vector2(
            self.x * cos_a - self.y * sin_a,
            self.x * sin_a + self.y * cos_a,
        )

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


# 関数形式（演算子版と同じ結果を返す）
def add(a: Vector2, b: Vector2) -> Vector2:
    return a + b


def sub(a: Vector2, b: Vector2) -> Vector2:
    return a - b


def scale(v: Vector2, k: float) -> Vector2:
    return v * k


def rotate(v: Vector2, angle_deg: float) -> Vector2:
    """`v` を `angle_deg` 度回転する（`Vector2.rotate_deg` に委譲）。"""
    return v.rotate_deg(angle_deg)


ORIGIN = Vector2(0.0, 0.0)


__all__ = ["Vector2", "ORIGIN", "add", "sub", "scale", "rotate"]

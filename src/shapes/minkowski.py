"""
どこで: `shapes.minkowski`（生成ステージの中核）。
何を: ミンコフスキー曲線 1 辺の再帰生成 `generate_side` と、正方形 4 辺を連結する `generate_island`。
なぜ: 頂点列の生成を描画から切り離し、純関数として検証可能にするため。

モチーフ（1 段の置換）:

    v = p2 - p1,  q = v / 4,  n = rotate(v, -90°) / 4

          D ─── E/F ─── G
          │      │      │
    p1 ── A      B      C ── p2        （図は n が上向きの場合）

    A = p1 + q,  B = p1 + q + q,  C = p1 + q + q + q
    D = A + n,   E = D + q,       F = B + n,  G = F + q
    8 本の部分線分: (p1,A) (A,D) (D,E) (E,B) (B,F) (F,G) (G,C) (C,p2)

- `E` と `F` は同じ点になる（B から垂直に出て戻る折り返しを含むモチーフ）。
- 各部分線分は始点のみを返し、終点は次の部分線分（または次の辺）の始点として供給される。
  よって深さ d の 1 辺は `8**d` 点、島全体は `4 * 8**d` 点。
- `-90°` の符号は反時計回りの正方形で突起が外側へ向く向き。固定値として保持する。

計算量:
- 頂点数は深さに対して指数的に増える（深さ 5 で 1 辺 32,768 点、島 131,072 点）。
  上限は `common.settings` の `MAX_DEPTH`（既定 6）で、公開入口 `generate_island` が検証する。
"""

from __future__ import annotations

import logging
from typing import Any, Sequence

import numpy as np

from common.settings import get as _get_settings
from engine.core.vector2 import Vector2

from .registry import shape

logger = logging.getLogger(__name__)

PERPENDICULAR_ANGLE_DEG = -90.0
BRANCHING = 8
CORNERS = 4


class DepthLimitError(ValueError):
    """深さが実用上限 (`MAX_DEPTH`) を越えた場合の例外。"""

    def __init__(self, depth: int, max_depth: int) -> None:
        super().__init__(
            f"depth={depth} は上限 {max_depth} を越えています"
            f"（頂点数 {island_vertex_count(depth):,}）"
        )
        self.depth = depth
        self.max_depth = max_depth


def side_vertex_count(depth: int) -> int:
    return BRANCHING**depth


def island_vertex_count(depth: int) -> int:
    return CORNERS * BRANCHING**depth


def validate_depth(depth: Any, *, max_depth: int | None = None) -> int:
    """深さを検証して int で返す。

    Raises
    ------
    TypeError
        整数でない場合（bool も拒否）。
    ValueError
        負の場合。
    DepthLimitError
        `max_depth`（省略時は設定値）を越える場合。
    """
    if isinstance(depth, bool) or not isinstance(depth, (int, np.integer)):
        raise TypeError(f"depth は整数である必要があります: got {depth!r}")
    d = int(depth)
    if d < 0:
        raise ValueError(f"depth は 0 以上である必要があります: got {d}")
    limit = _get_settings().MAX_DEPTH if max_depth is None else int(max_depth)
    if d > limit:
        raise DepthLimitError(d, limit)
    return d


def _motif(p1: Vector2, p2: Vector2) -> tuple[Vector2, ...]:
    """1 段分の置換で得られる 9 点 `(p1, A, D, E, B, F, G, C, p2)` を返す。"""
    v = p2 - p1
    perp = v.rotate_deg(PERPENDICULAR_ANGLE_DEG) * 0.25
    quarter = v * 0.25

    a = p1 + quarter
    b = p1 + quarter + quarter
    c = p1 + quarter + quarter + quarter

    d = a + perp
    e = d + quarter
    f = b + perp
    g = f + quarter
    return (p1, a, d, e, b, f, g, c, p2)


def generate_side(p1: Vector2, p2: Vector2, depth: int) -> list[Vector2]:
    """線分 `p1 → p2` を深さ `depth` のミンコフスキー曲線へ置換した点列を返す。

    Parameters
    ----------
    p1, p2 : Vector2
        始点と終点。
    depth : int
        再帰深さ（0 以上。呼び出し側で検証済みであること）。

    Returns
    -------
    list[Vector2]
        `8**depth` 点。`p2` は含まない（開いた点列）。
    """
    if depth <= 0:
        return [p1]
    pts = _motif(p1, p2)
    out: list[Vector2] = []
    for i in range(BRANCHING):
        out.extend(generate_side(pts[i], pts[i + 1], depth - 1))
    return out


def generate_side_iterative(p1: Vector2, p2: Vector2, depth: int) -> list[Vector2]:
    """`generate_side` の明示スタック版（再帰を使わない。結果は同一）。"""
    out: list[Vector2] = []
    stack: list[tuple[Vector2, Vector2, int]] = [(p1, p2, depth)]
    while stack:
        a, b, d = stack.pop()
        if d <= 0:
            out.append(a)
            continue
        pts = _motif(a, b)
        # 先頭の部分線分から処理されるよう逆順に積む
        for i in reversed(range(BRANCHING)):
            stack.append((pts[i], pts[i + 1], d - 1))
    return out


def square_corners(center: Vector2, size: float) -> tuple[Vector2, Vector2, Vector2, Vector2]:
    """中心 `center`・一辺 `size` の正方形の 4 隅（左下から反時計回り）。"""
    h = size / 2
    return (
        center + Vector2(-h, -h),
        center + Vector2(h, -h),
        center + Vector2(h, h),
        center + Vector2(-h, h),
    )


def island_points(center: Vector2, size: float, depth: int) -> list[Vector2]:
    """島全体の点列（4 辺を隅の順に連結。末尾から先頭へは暗黙に閉じる）。"""
    corners = square_corners(center, size)
    points: list[Vector2] = []
    for i in range(CORNERS):
        points.extend(generate_side(corners[i], corners[(i + 1) % CORNERS], depth))
    return points


def generate_island(
    center: Vector2 | Sequence[float], size: float, depth: int
) -> np.ndarray:
    """ミンコフスキー島の頂点を `[x0, y0, x1, y1, ...]` の float64 配列で返す。

    Parameters
    ----------
    center : Vector2 | Sequence[float]
        初期正方形の中心。座標はこの中心基準のまま返す（表示位置への移動は変換行列で行う）。
    size : float
        初期正方形の一辺。0 以下でも例外にはせず、退化した島を返す。
    depth : int
        再帰深さ。`validate_depth` で検証する。

    Returns
    -------
    np.ndarray
        形状 `(8 * 8**depth,)` の float64 配列。

    Raises
    ------
    TypeError, ValueError, DepthLimitError
        `validate_depth` を参照。
    """
    d = validate_depth(depth)
    c = Vector2.of(center)
    s = float(size)
    if s <= 0.0:
        logger.debug("size=%s は退化した島を生成します", s)
    points = island_points(c, s, d)
    flat = np.fromiter(
        (coord for p in points for coord in (p.x, p.y)),
        dtype=np.float64,
        count=2 * len(points),
    )
    return flat


@shape
def minkowski_island(
    *,
    size: float = 1.0,
    depth: int | float = 1,
    center: tuple[float, float] = (0.0, 0.0),
    **params: Any,
) -> np.ndarray:
    """ミンコフスキー島を `(N, 2)` の閉ループ頂点配列として生成します。

    引数:
        size: 初期正方形の一辺。
        depth: 再帰深さ（整数へ丸め、`[0, MAX_DEPTH]` にクランプ）。
        center: 初期正方形の中心。
    """
    d = int(round(float(depth)))
    d = max(0, min(_get_settings().MAX_DEPTH, d))
    return generate_island(center, size, d).reshape(-1, 2)


minkowski_island.__param_meta__ = {
    "size": {"type": "number", "min": 0.0, "max": 1000.0},
    "depth": {"type": "integer", "min": 0, "max": 6, "step": 1},
}


@shape
def minkowski_side(
    *,
    start: tuple[float, float] = (-0.5, 0.0),
    end: tuple[float, float] = (0.5, 0.0),
    depth: int = 1,
    **params: Any,
) -> np.ndarray:
    """1 辺分のミンコフスキー曲線を `(N + 1, 2)` の開いたポリラインとして生成します（終点を含む）。"""
    p1 = Vector2.of(start)
    p2 = Vector2.of(end)
    d = validate_depth(depth)
    pts = generate_side(p1, p2, d) + [p2]
    return np.array([p.as_tuple() for p in pts], dtype=np.float64)


minkowski_side.__param_meta__ = {
    "depth": {"type": "integer", "min": 0, "max": 6, "step": 1},
}


__all__ = [
    "PERPENDICULAR_ANGLE_DEG",
    "DepthLimitError",
    "side_vertex_count",
    "island_vertex_count",
    "validate_depth",
    "generate_side",
    "generate_side_iterative",
    "square_corners",
    "island_points",
    "generate_island",
    "minkowski_island",
    "minkowski_side",
]

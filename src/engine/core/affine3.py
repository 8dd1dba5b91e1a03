"""
どこで: `engine.core` の 2D アフィン変換（3×3 行列）。
何を: `identity/translation/rotation/scaling/multiply` と合成ヘルパ、点列への適用を提供。
なぜ: 描画側（engine.render）が毎フレーム「中心へ移動 ∘ 回転」を組み立てるための最小の行列層。

格納規約（GLSL `mat3` と同じ列優先）:
- フラット 9 要素 `m[col * 3 + row]`。GPU へは転置せずにそのまま渡す。
- `translation(tx, ty)` → `[1, 0, 0, 0, 1, 0, tx, ty, 1]`
- `rotation(a)`        → `[c, -s, 0, s, c, 0, 0, 0, 1]`
  （Y 上向きの数学座標では正の角度が時計回り。シェーダの Y 反転後の画面上では反時計回り）
- 点への適用は `M * vec3(x, y, 1)`。

合成規約:
- `multiply(a, b)` は「b を適用してから a を適用」を表す。
  例: `multiply(translation(...), rotation(...))` は回転 → 平行移動。
- 可換ではないため順序は厳密に保つこと。

使用例:
    m = frame_transform(800, 600, angle=0.3)
    xy = m.apply(vertices)  # (N, 2) もしくはフラット配列
"""

from __future__ import annotations

import math
from typing import Iterable, Sequence

import numpy as np


class Affine3:
    """不変の 3×3 アフィン行列。

    内部では数学的な (行, 列) 配置の float64 `ndarray(3, 3)` を読み取り専用で保持する。
    """

    __slots__ = ("_m",)

    def __init__(self, matrix: np.ndarray | Sequence[Sequence[float]]) -> None:
        m = np.array(matrix, dtype=np.float64)
        if m.shape != (3, 3):
            raise ValueError(f"3x3 行列が必要です: got shape {m.shape}")
        m.setflags(write=False)
        self._m = m

    # ── ファクトリ ───────────────────
    @classmethod
    def from_column_major(cls, values: Sequence[float]) -> "Affine3":
        """列優先のフラット 9 要素（WebGL の `mat3` 形式）から生成する。"""
        arr = np.asarray(values, dtype=np.float64)
        if arr.shape != (9,):
            raise ValueError(f"9 要素のフラット配列が必要です: got shape {arr.shape}")
        return cls(arr.reshape(3, 3).T)

    # ── 参照 ─────────────────────────
    @property
    def matrix(self) -> np.ndarray:
        """読み取り専用の (行, 列) 配置 3×3 配列。"""
        return self._m

    def to_column_major(self) -> list[float]:
        return [float(v) for v in self._m.T.ravel()]

    def to_bytes(self) -> bytes:
        """GPU 転送用（float32, 列優先）のバイト列。"""
        return np.ascontiguousarray(self._m.T, dtype=np.float32).tobytes()

    # ── 合成 ─────────────────────────
    def __matmul__(self, other: "Affine3") -> "Affine3":
        return multiply(self, other)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Affine3) and bool(np.array_equal(self._m, other._m))

    def __hash__(self) -> int:
        return hash(self._m.tobytes())

    def __repr__(self) -> str:
        return f"Affine3({self._m.tolist()!r})"

    def allclose(self, other: "Affine3", *, atol: float = 1e-9) -> bool:
        return bool(np.allclose(self._m, other._m, rtol=0.0, atol=atol))

    # ── 適用 ─────────────────────────
    def apply(self, points: np.ndarray | Sequence[float] | Sequence[Sequence[float]]) -> np.ndarray:
        """点列へ変換を適用する（頂点シェーダの `M * vec3(p, 1)` と同じ計算）。

        Parameters
        ----------
        points : array-like
            `(N, 2)` の座標配列、または `[x0, y0, x1, y1, ...]` のフラット配列。

        Returns
        -------
        np.ndarray
            入力と同じ形状の float64 配列。

        Raises
        ------
        ValueError
            `(N, 2)` にもフラット偶数長にも適合しない場合。
        """
        arr = np.asarray(points, dtype=np.float64)
        flat = arr.ndim == 1
        if flat:
            if arr.size % 2 != 0:
                raise ValueError("フラット入力の長さは偶数である必要があります（x, y の並び）")
            arr = arr.reshape(-1, 2)
        elif arr.ndim != 2 or arr.shape[1] != 2:
            raise ValueError(f"座標配列の形状が不正です: {arr.shape}")
        out = arr @ self._m[:2, :2].T + self._m[:2, 2]
        return out.ravel() if flat else out


def identity() -> Affine3:
    return Affine3(np.eye(3))


def translation(tx: float, ty: float) -> Affine3:
    return Affine3.from_column_major([1, 0, 0, 0, 1, 0, tx, ty, 1])


def rotation(angle_rad: float) -> Affine3:
    c = math.cos(angle_rad)
    s = math.sin(angle_rad)
    return Affine3.from_column_major([c, -s, 0, s, c, 0, 0, 0, 1])


def scaling(sx: float, sy: float) -> Affine3:
    return Affine3.from_column_major([sx, 0, 0, 0, sy, 0, 0, 0, 1])


def multiply(a: Affine3, b: Affine3) -> Affine3:
    """`b` を適用してから `a` を適用する合成行列を返す。"""
    return Affine3(a.matrix @ b.matrix)


# `m` に対して右から掛ける糖衣（ローカル座標系での追加変換）
def translate(m: Affine3, tx: float, ty: float) -> Affine3:
    return multiply(m, translation(tx, ty))


def rotate(m: Affine3, angle_rad: float) -> Affine3:
    return multiply(m, rotation(angle_rad))


def scale(m: Affine3, sx: float, sy: float) -> Affine3:
    return multiply(m, scaling(sx, sy))


def compose(*matrices: Affine3 | Iterable[Affine3]) -> Affine3:
    """左から順に掛け合わせた合成行列を返す。

    `compose(T, R)` は `multiply(T, R)` と等しい（R → T の順に適用）。
    引数なしは単位行列。
    """
    result = identity()
    for m in matrices:
        if isinstance(m, Affine3):
            result = multiply(result, m)
        else:
            for inner in m:
                result = multiply(result, inner)
    return result


def frame_transform(width: float, height: float, angle_rad: float) -> Affine3:
    """表示中心への平行移動 ∘ 原点回りの回転（毎フレームの描画行列）。"""
    return multiply(translation(width / 2, height / 2), rotation(angle_rad))


__all__ = [
    "Affine3",
    "identity",
    "translation",
    "rotation",
    "scaling",
    "multiply",
    "translate",
    "rotate",
    "scale",
    "compose",
    "frame_transform",
]

"""
どこで: `api` 入口（高レベル公開 API）。
何を: ベクトル/アフィン行列・ミンコフスキー曲線の生成関数・島モデル・ランナーを再輸出。
なぜ: 利用者が単一名前空間から生成 → 変換 → 表示まで完結できるようにするため。

Usage:
    from api import Vector2, generate_island, affine_compose, translation, rotation

    verts = generate_island(Vector2(0, 0), 300.0, depth=3)   # [x0, y0, x1, y1, ...]
    m = affine_compose(translation(400, 300), rotation(0.25))  # 回転 → 平行移動
    xy = m.apply(verts)
"""

from engine.core.affine3 import (
    Affine3,
    compose,
    frame_transform,
    identity,
    multiply,
    rotation,
    scaling,
    translation,
)
from engine.core.animation import Animation, AnimationState
from engine.core.vector2 import Vector2
from engine.runtime.island import Island, IslandBuffer
from shapes.minkowski import (
    DepthLimitError,
    generate_island,
    generate_side,
    island_vertex_count,
    side_vertex_count,
)
from shapes.registry import get_shape, list_shapes
from shapes.registry import shape as shape  # ユーザー拡張用デコレータ

from .island_app import IslandController
from .island_app import run_island as run
from .island_app import run_island as run_island

# 描画側が毎フレームの行列を組み立てる入口
affine_compose = compose

__all__ = [
    # 幾何
    "Vector2",
    "Affine3",
    "identity",
    "translation",
    "rotation",
    "scaling",
    "multiply",
    "affine_compose",
    "frame_transform",
    # 生成
    "generate_side",
    "generate_island",
    "side_vertex_count",
    "island_vertex_count",
    "DepthLimitError",
    "shape",
    "get_shape",
    "list_shapes",
    # 状態/実行
    "Island",
    "IslandBuffer",
    "Animation",
    "AnimationState",
    "IslandController",
    "run_island",
    "run",
]

__version__ = "2026.10"

"""
どこで: `shapes` パッケージ（関数登録）。
何を: ミンコフスキー曲線の生成関数を import 副作用で登録し、`get_shape` から解決できるようにする。
なぜ: 生成ステージの入口を一箇所に集約し、ランナー/テストから名前で再利用するため。
"""

# 関数版 shape 定義を import して登録（副作用）
from . import minkowski as _register_minkowski  # noqa: F401
from .minkowski import generate_island, generate_side
from .registry import get_shape, is_shape_registered, list_shapes, shape  # re-export

__all__ = [
    "shape",
    "get_shape",
    "list_shapes",
    "is_shape_registered",
    "generate_side",
    "generate_island",
]

"""
どこで: `shapes` のレジストリ層（関数専用）。
何を: `@shape` デコレータで形状生成関数を登録し、取得/一覧/検査を提供。
なぜ: 生成関数（ミンコフスキー島/辺）を名前で解決し、ランナーやテストから一貫して呼び出すため。

概要:
- 登録対象は「関数」のみ（頂点配列を返す）。
- デコレータは名前省略可（`@shape` / `@shape()`）と明示名指定をサポート。
"""

from __future__ import annotations

import inspect
from typing import Any, Callable, Mapping

from common.base_registry import BaseRegistry

ShapeFn = Callable[..., Any]

_shape_registry = BaseRegistry()


def shape(arg: Any | None = None, /, name: str | None = None):
    """形状関数をレジストリに登録するデコレータ。

    使用例:
    - `@shape` / `@shape()`                      → 関数名から自動推論。
    - `@shape("custom")` / `@shape(name="custom")` → 明示名で登録。

    例外:
    - TypeError: 関数以外を登録しようとした場合。
    """

    def _register_checked(obj: Any, resolved_name: str | None = None):
        if not inspect.isfunction(obj):
            raise TypeError(f"@shape は関数のみ登録可能です: got {obj!r}")
        return _shape_registry.register(resolved_name)(obj)

    # 直付け (@shape)
    if inspect.isfunction(arg) and name is None:
        return _register_checked(arg, None)

    # 位置引数で名前を渡した (@shape("name"))
    if isinstance(arg, str) and name is None:
        return lambda obj: _register_checked(obj, arg)

    # name キーワード引数、または引数なし
    return lambda obj: _register_checked(obj, name)


def get_shape(name: str) -> ShapeFn:
    """登録された形状関数を取得（未登録は KeyError）。"""
    return _shape_registry.get(name)


def list_shapes() -> list[str]:
    return sorted(_shape_registry.list_all())


def is_shape_registered(name: str) -> bool:
    return _shape_registry.is_registered(name)


def unregister(name: str) -> None:
    """名前を指定して登録を解除（存在しない場合は無視）。"""
    _shape_registry.unregister(name)


def get_registry() -> Mapping[str, Any]:
    """レジストリ辞書のコピーを返す。"""
    return _shape_registry.registry


__all__ = [
    "shape",
    "get_shape",
    "list_shapes",
    "is_shape_registered",
    "unregister",
    "get_registry",
]

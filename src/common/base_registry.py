"""
共通レジストリ基底クラス
shapes/ のレジストリ（`shapes.registry`）が使用する名前 → 関数の対応表
"""

import re
from typing import Any, Callable


class BaseRegistry:
    """名前付きレジストリ。

    - 文字列キーは正規化されます（大文字小文字・キャメル→スネーク・ハイフンを吸収）。
    - デコレータは名前省略可。省略時は関数名から自動推論します。
    """

    def __init__(self) -> None:
        self._registry: dict[str, Any] = {}

    # === 内部ユーティリティ ===
    @staticmethod
    def _camel_to_snake(name: str) -> str:
        s1 = re.sub(r"(.)([A-Z][a-z]+)", r"\1_\2", name)
        s2 = re.sub(r"([a-z0-9])([A-Z])", r"\1_\2", s1)
        return s2.lower()

    @classmethod
    def _normalize_key(cls, name: str) -> str:
        """レジストリキーの正規化（例: "MinkowskiIsland" -> "minkowski_island"）。"""
        if not isinstance(name, str):
            raise TypeError("レジストリキーは str である必要があります")
        if not name:
            raise ValueError("レジストリキーは空であってはなりません")
        key = cls._camel_to_snake(name) if any(c.isupper() for c in name) else name.lower()
        # "Minkowski-Island" -> "minkowski-_island" -> "minkowski_island"
        return re.sub(r"_+", "_", key.replace("-", "_"))

    def register(self, name: str | None = None) -> Callable[[Any], Any]:
        """関数をレジストリに登録するデコレータ。同名の別オブジェクトは `ValueError`。"""

        def decorator(obj: Any) -> Any:
            key = self._normalize_key(name) if name else self._normalize_key(obj.__name__)
            if key in self._registry and self._registry[key] is not obj:
                raise ValueError(f"'{key}' は既に登録されています")
            self._registry[key] = obj
            return obj

        return decorator

    def get(self, name: str) -> Any:
        key = self._normalize_key(name)
        if key not in self._registry:
            raise KeyError(f"'{name}' は登録されていません")
        return self._registry[key]

    def list_all(self) -> list[str]:
        """登録されているすべての名前（未ソート）。"""
        return list(self._registry.keys())

    def is_registered(self, name: str) -> bool:
        return self._normalize_key(name) in self._registry

    def unregister(self, name: str) -> None:
        """レジストリから削除（名前が存在しない場合は無視）。"""
        self._registry.pop(self._normalize_key(name), None)

    def clear(self) -> None:
        self._registry.clear()

    @property
    def registry(self) -> dict[str, Any]:
        """レジストリのコピー（読み取り専用アクセス）"""
        return self._registry.copy()

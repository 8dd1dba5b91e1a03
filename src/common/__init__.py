"""
どこで: `common` パッケージ。
何を: 設定・環境変数・ロギング・レジストリなど依存の最も内側にある共通基盤。
なぜ: shapes/engine/api から再利用する基盤を分離し、依存の向きを単純化するため。
"""

from .base_registry import BaseRegistry

__all__ = [
    "BaseRegistry",
]

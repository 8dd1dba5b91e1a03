"""
内部ヘルパ群（API 非公開）。

どこで: `api.sketch_runner`
何を: `api.island_app` の補助（設定解決の純粋関数）を分離し、`run_island` 本体を薄く保つ。
なぜ: GL/ウィンドウを起動せずに検証できる部分を小分割するため。
"""

from __future__ import annotations

__all__: list[str] = []

"""
どこで: `engine.runtime` の島モデル。
何を: 不変の `Island`（中心/一辺/深さ）と、頂点バッファを丸ごと差し替える `IslandBuffer`。
なぜ: 深さ/サイズ変更のたびに全頂点を作り直し、描画側へは完成したバッファだけを渡すため。

差し替えの規約:
- `IslandBuffer.regenerate()` は生成をロック内で直列化し、完成後に `(island, vertices, version)` を
  一括で置き換える。読み出し側は常に完全なスナップショットを得る（途中状態は見えない）。
- 生成に失敗した場合は直前のバッファを保持したまま例外を再送出する。
- 後から完了した再生成が常に勝つ。
"""

from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass, field, replace
from typing import NamedTuple

import numpy as np

from common.settings import HARD_MAX_DEPTH
from common.settings import get as _get_settings
from engine.core.vector2 import ORIGIN, Vector2
from shapes.minkowski import generate_island, island_vertex_count, validate_depth

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Island:
    """呼び出し側が所有する島のパラメータ（値型）。"""

    center: Vector2 = field(default=ORIGIN)
    size: float = 1.0
    depth: int = 1

    def __post_init__(self) -> None:
        object.__setattr__(self, "center", Vector2.of(self.center))
        object.__setattr__(self, "size", float(self.size))
        # 設定上の上限 (MAX_DEPTH) は生成時に検証する
        object.__setattr__(self, "depth", validate_depth(self.depth, max_depth=HARD_MAX_DEPTH))

    def with_depth(self, depth: int) -> "Island":
        return replace(self, depth=depth)

    def with_size(self, size: float) -> "Island":
        return replace(self, size=size)

    @property
    def vertex_count(self) -> int:
        return island_vertex_count(self.depth)

    def vertices(self) -> np.ndarray:
        """フラットな頂点配列 `[x0, y0, ...]` を生成する。"""
        return generate_island(self.center, self.size, self.depth)


class IslandSnapshot(NamedTuple):
    island: Island | None
    vertices: np.ndarray
    version: int

    @property
    def vertex_count(self) -> int:
        return int(self.vertices.size // 2)


_EMPTY = np.empty(0, dtype=np.float64)
_EMPTY.setflags(write=False)


class IslandBuffer:
    """最新の頂点バッファを保持し、再生成を直列化するホルダ。"""

    def __init__(self, island: Island | None = None) -> None:
        self._regen_lock = threading.Lock()
        self._snapshot = IslandSnapshot(None, _EMPTY, 0)
        if island is not None:
            self.regenerate(island)

    @property
    def version(self) -> int:
        return self._snapshot.version

    @property
    def island(self) -> Island | None:
        return self._snapshot.island

    def snapshot(self) -> IslandSnapshot:
        """現在の `(island, vertices, version)` を一括で返す（読み取り専用配列）。"""
        return self._snapshot

    def regenerate(self, island: Island) -> IslandSnapshot:
        """`island` の頂点を生成し、完成後にバッファを差し替える。"""
        debug = _get_settings().DEBUG_REGEN
        with self._regen_lock:
            t0 = time.perf_counter()
            vertices = island.vertices()
            vertices.setflags(write=False)
            snap = IslandSnapshot(island, vertices, self._snapshot.version + 1)
            self._snapshot = snap
            if debug:
                logger.info(
                    "regenerated depth=%d size=%.3f verts=%d in %.2f ms",
                    island.depth,
                    island.size,
                    snap.vertex_count,
                    (time.perf_counter() - t0) * 1000.0,
                )
        return snap


__all__ = ["Island", "IslandSnapshot", "IslandBuffer"]

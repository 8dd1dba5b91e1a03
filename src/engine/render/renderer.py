"""
どこで: `engine.render` の高レベル描画。
何を: `IslandBuffer` の頂点を ModernGL に転送し、毎フレームの変換行列と線色で閉ループを描画。
なぜ: 毎フレームのアップロード判定/ユニフォーム更新/描画/リソース寿命を一箇所に集約するため。

フレームごとの変換:
    M = translation(width / 2, height / 2) ∘ rotation(angle)
    （島の中心基準の頂点を原点回りに回転してから、表示中心へ移動する）
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Sequence

import moderngl as mgl

from common.types import RGBA
from engine.core.affine3 import Affine3, frame_transform
from engine.core.animation import Animation
from engine.runtime.island import IslandBuffer

from ..core.tickable import Tickable
from .line_mesh import LineMesh
from .shader import Shader

BACKGROUND: RGBA = (0.1, 0.1, 0.15, 1.0)


class IslandRenderer(Tickable):
    """
    IslandBuffer の最新スナップショットを GPU に送り、アニメーション状態に従って描画する。
    """

    def __init__(
        self,
        mgl_context: Any,
        island_buffer: IslandBuffer,
        animation: Animation,
        *,
        viewport_size: Callable[[], tuple[int, int]],
        background: RGBA = BACKGROUND,
    ):
        """
        island_buffer: 頂点の差し替え元（version が変わったときだけ再転送する）
        animation: 回転角と線色の供給元
        viewport_size: 現在の描画解像度 (width, height) を返す関数（リサイズ追従のため毎フレーム呼ぶ）
        """
        self.ctx = mgl_context
        self.island_buffer = island_buffer
        self.animation = animation
        self._viewport_size = viewport_size
        self.background = background
        self._logger = logging.getLogger(__name__)

        self.program = Shader.create_shader(mgl_context)
        self.gpu = LineMesh(ctx=mgl_context, program=self.program)
        self._uploaded_version: int = -1
        # HUD/ログ用: 直近アップロードの頂点数
        self._last_vertex_count: int = 0

    # --------------------------------------------------------------------- #
    # Tickable                                                               #
    # --------------------------------------------------------------------- #
    def tick(self, dt: float) -> None:
        """毎フレーム呼ばれ、IslandBuffer に新しい版があれば GPU へ転送。"""
        self.sync()

    def sync(self) -> bool:
        """未転送のスナップショットがあれば転送し、転送したかを返す。"""
        snap = self.island_buffer.snapshot()
        if snap.version == self._uploaded_version:
            return False
        self.gpu.upload(snap.vertices)
        self._uploaded_version = snap.version
        self._last_vertex_count = snap.vertex_count
        self._logger.debug("uploaded version=%d verts=%d", snap.version, snap.vertex_count)
        return True

    # --------------------------------------------------------------------- #
    # Public drawing API                                                    #
    # --------------------------------------------------------------------- #
    def current_transform(self) -> Affine3:
        width, height = self._viewport_size()
        return frame_transform(width, height, self.animation.angle)

    def draw(self) -> None:
        """転送済みの頂点を現在の角度/色で描画"""
        width, height = self._viewport_size()
        self.ctx.viewport = (0, 0, int(width), int(height))
        self.clear(self.background)
        self.program["u_resolution"].value = (float(width), float(height))
        self.program["u_transform"].write(self.current_transform().to_bytes())
        self.program["u_color"].value = self.animation.line_color()
        self.gpu.render(mgl.LINE_LOOP)

    def clear(self, color: Sequence[float]) -> None:
        """画面を指定色でクリア"""
        self.ctx.clear(*color)

    @property
    def vertex_count(self) -> int:
        return self._last_vertex_count

    def release(self) -> None:
        """GPU リソースを解放。"""
        self.gpu.release()

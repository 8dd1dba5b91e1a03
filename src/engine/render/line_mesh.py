"""
どこで: `engine.render` の低レベルメッシュ層。
何を: VBO/VAO の確保・更新・解放を担当し、島の閉ループを描画可能な LineMesh を管理。
なぜ: GPU 転送の詳細を Renderer から切り離し、再確保や VAO の張り直しを一元化するため。
"""

from __future__ import annotations

from typing import Any

import numpy as np


class LineMesh:
    """
    GPUに頂点データを送り込み、閉ループとして描画する作業を管理
    """

    def __init__(
        self,
        ctx: Any,
        program: Any,
        # 初期GPUメモリ確保量（既定: 1MB = 深さ 4 の島が収まる程度）。必要に応じて自動拡張。
        initial_reserve: int = 1024 * 1024,
    ):
        """
        ctx: moderngl コンテキスト
        program: 頂点属性 `in_vert`（vec2）を持つシェーダープログラム
        """
        self.ctx = ctx
        self.program = program
        self.initial_reserve = initial_reserve

        self.vbo = ctx.buffer(reserve=initial_reserve, dynamic=True)
        self.vao = ctx.simple_vertex_array(program, self.vbo, "in_vert")
        self.vertex_count: int = 0

    # ---------- バッファ操作 ----------
    def _ensure_capacity(self, nbytes: int) -> None:
        """データが大きくなったらGPUのバッファを再確保し、VAO を張り直す"""
        if nbytes <= self.vbo.size:
            return
        self.vbo.release()
        self.vao.release()
        self.vbo = self.ctx.buffer(reserve=max(nbytes, self.initial_reserve), dynamic=True)
        self.vao = self.ctx.simple_vertex_array(self.program, self.vbo, "in_vert")

    def upload(self, flat_vertices: np.ndarray) -> None:
        """`[x0, y0, x1, y1, ...]` を float32 に変換して VBO へ書き込む"""
        data = np.ascontiguousarray(flat_vertices, dtype=np.float32)
        if data.ndim != 1 or data.size % 2 != 0:
            raise ValueError(f"フラットな偶数長の頂点配列が必要です: got shape {data.shape}")
        self._ensure_capacity(data.nbytes)
        self.vbo.orphan()
        if data.size:
            self.vbo.write(data.tobytes())
        self.vertex_count = int(data.size // 2)

    def render(self, mode: int) -> None:
        if self.vertex_count > 0:
            self.vao.render(mode=mode, vertices=self.vertex_count)

    def release(self) -> None:
        """GPUのメモリを解放する（終了時に使う）"""
        self.vao.release()
        self.vbo.release()

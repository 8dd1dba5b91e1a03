"""
どこで: `engine.render` のシェーダ定義。
何を: ピクセル座標 → クリップ空間（Y 反転）の頂点シェーダと、単色の断片シェーダ。
なぜ: 頂点は島の中心基準のまま転送し、表示位置/回転は `u_transform`（3×3）だけで与えるため。
"""

from __future__ import annotations

from typing import Any

VERTEX_SHADER = """
#version 330
in vec2 in_vert;
uniform vec2 u_resolution;
uniform mat3 u_transform;

void main() {
    vec2 p = (u_transform * vec3(in_vert, 1.0)).xy;
    // ピクセル → 0..1 → 0..2 → -1..1
    vec2 clip = (p / u_resolution) * 2.0 - 1.0;
    gl_Position = vec4(clip * vec2(1.0, -1.0), 0.0, 1.0);
}
"""

FRAGMENT_SHADER = """
#version 330
uniform vec4 u_color;
out vec4 f_color;

void main() {
    f_color = u_color;
}
"""


class Shader:
    @staticmethod
    def create_shader(ctx: Any) -> Any:
        """ModernGL コンテキスト上に線描画用プログラムを生成する。"""
        return ctx.program(vertex_shader=VERTEX_SHADER, fragment_shader=FRAGMENT_SHADER)


__all__ = ["Shader", "VERTEX_SHADER", "FRAGMENT_SHADER"]

"""
どこで: `engine.render` サブパッケージ。
何を: 島の頂点バッファ → GPU 転送・描画の入口。IslandRenderer/LineMesh/Shader を提供。
なぜ: 幾何生成（shapes/runtime）と描画の責務を分離し、GPU リソース管理を局所化するため。
"""

"""
どこで: `engine.runtime` サブパッケージ。
何を: 島パラメータと頂点バッファの差し替え（`IslandBuffer`）を提供。
なぜ: 生成と描画の責務を分離し、描画側が完成済みバッファだけを扱えるようにするため。
"""

"""
どこで: `engine.core` サブパッケージ。
何を: 2D ベクトル・3×3 アフィン行列・アニメーション状態・フレーム駆動（Tickable/FrameClock）・描画ウィンドウ。
なぜ: 幾何と時間発展の基盤を構成し、上位層（shapes/runtime/render/api）から再利用可能にするため。
"""

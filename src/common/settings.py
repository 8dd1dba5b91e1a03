"""
どこで: `common.settings`
何を: 生成/アニメーションの調整値を環境変数から型付きで一元管理し、起動時に読み込む。
なぜ: `os.getenv` の散在を避け、既定値/型の一貫性とテスト容易性（`reload_from_env`）を保つため。

環境変数:
- `MKI_MAX_DEPTH`       再帰深さの上限（既定 6 → 4·8^6 = 1,048,576 頂点）
- `MKI_DEFAULT_DEPTH`   起動時/リセット時の深さ（既定 1）
- `MKI_ROTATION_SPEED`  アニメーションの回転速度 [rad/s]（既定 0.5）
- `MKI_SIZE_RATIO`      初期サイズ = 比率 × min(幅, 高さ)（既定 0.6）
- `MKI_DEBUG_REGEN`     再生成のたびに頂点数と所要時間をログ出力
"""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_bool, env_float, env_int

# 環境変数でも越えられない上限（深さ 8 で 1 辺 8^8 ≈ 16.7M 点）
HARD_MAX_DEPTH = 8


@dataclass
class _Settings:
    # 生成
    MAX_DEPTH: int = 6
    DEFAULT_DEPTH: int = 1

    # アニメーション / 表示
    ROTATION_SPEED: float = 0.5
    SIZE_RATIO: float = 0.6

    # Misc
    DEBUG_REGEN: bool = False


_settings = _Settings()


def reload_from_env() -> None:
    """環境変数から設定を再読込。

    - 上限深さは `[0, HARD_MAX_DEPTH]` に丸め、既定深さは上限を越えないようにする。
    - 比率/速度は下限 0 に丸める。
    """
    max_depth = env_int("MKI_MAX_DEPTH", 6, min_value=0, max_value=HARD_MAX_DEPTH)
    _settings.MAX_DEPTH = 6 if max_depth is None else max_depth
    default_depth = env_int("MKI_DEFAULT_DEPTH", 1, min_value=0)
    _settings.DEFAULT_DEPTH = min(1 if default_depth is None else default_depth, _settings.MAX_DEPTH)

    _settings.ROTATION_SPEED = env_float("MKI_ROTATION_SPEED", 0.5)
    _settings.SIZE_RATIO = env_float("MKI_SIZE_RATIO", 0.6, min_value=0.0)

    _settings.DEBUG_REGEN = env_bool("MKI_DEBUG_REGEN", False)


def get() -> _Settings:
    """現在の設定スナップショットを返す。"""
    return _settings


# 初期ロード
reload_from_env()


__all__ = ["get", "reload_from_env", "HARD_MAX_DEPTH", "_Settings"]

"""共通フィクスチャ。

- 環境変数設定の隔離（`common.settings` の再読込）
- 小さなベクトル/島の試料
"""

from __future__ import annotations

from typing import Iterator

import pytest

from common import settings as settings_mod
from engine.core.vector2 import Vector2

_MKI_ENV = (
    "MKI_MAX_DEPTH",
    "MKI_DEFAULT_DEPTH",
    "MKI_ROTATION_SPEED",
    "MKI_SIZE_RATIO",
    "MKI_DEBUG_REGEN",
)


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """各テストを既定の設定値で開始し、終了後に環境変数由来の設定を戻す。"""
    for name in _MKI_ENV:
        monkeypatch.delenv(name, raising=False)
    settings_mod.reload_from_env()
    yield
    monkeypatch.undo()
    settings_mod.reload_from_env()


@pytest.fixture()
def origin() -> Vector2:
    return Vector2(0.0, 0.0)


@pytest.fixture()
def seg_4x() -> tuple[Vector2, Vector2]:
    """x 軸上の長さ 4 の線分（1/4 が整数になる試料）。"""
    return Vector2(0.0, 0.0), Vector2(4.0, 0.0)


@pytest.fixture()
def seg_diagonal() -> tuple[Vector2, Vector2]:
    return Vector2(-1.5, 2.0), Vector2(3.25, -0.75)

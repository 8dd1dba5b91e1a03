"""
どこで: `util.utils`。
何を: YAML 設定の読込（`configs/default.yaml` を root の `config.yaml` で上書き）とセクション取得。
なぜ: ランナーのウィンドウ/FPS/背景色などをコード外で調整できるようにするため（読込失敗は空辞書）。
"""

import logging
from pathlib import Path
from typing import Any, Dict

import yaml

logger = logging.getLogger(__name__)


def _safe_load_yaml(path: Path) -> Dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.warning("設定ファイル %s を読み込めません: %s", path, e)
        return {}
    return data if isinstance(data, dict) else {}


def _find_project_root(start: Path) -> Path:
    """プロジェクトルートを推定して返す。

    - 上位に `.git` / `pyproject.toml` / `configs/` があるもっとも近いディレクトリ。
    - 見つからない場合は `start.parent.parent`（典型: <repo>/src/util -> <repo>）。
    """
    cur = start.resolve()
    for parent in [cur] + list(cur.parents):
        if (
            (parent / ".git").exists()
            or (parent / "pyproject.toml").exists()
            or (parent / "configs").exists()
        ):
            return parent
    return cur.parent.parent


def load_config(project_root: Path | None = None) -> Dict[str, Any]:
    """構成を読み込んで辞書で返す（フェイルソフト）。

    優先順:
    1) `configs/default.yaml`（ベース）
    2) ルート `config.yaml`（トップレベルのキー単位で上書き）
    """
    root = project_root if project_root is not None else _find_project_root(Path(__file__).parent)
    base: Dict[str, Any] = {}

    default_path = root / "configs" / "default.yaml"
    if default_path.exists():
        base.update(_safe_load_yaml(default_path))

    root_config_path = root / "config.yaml"
    if root_config_path.exists():
        base.update(_safe_load_yaml(root_config_path))

    return base


def config_section(name: str, cfg: Dict[str, Any] | None = None) -> Dict[str, Any]:
    """設定のサブセクション（辞書でなければ空辞書）を返す。"""
    data = load_config() if cfg is None else cfg
    section = data.get(name, {})
    return section if isinstance(section, dict) else {}

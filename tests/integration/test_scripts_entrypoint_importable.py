from __future__ import annotations

import importlib.util
from pathlib import Path

import pytest

SCRIPT = Path(__file__).resolve().parents[2] / "scripts" / "bench_island.py"


@pytest.mark.integration
def test_bench_island_entrypoint_importable_and_runs_small_depth():
    """scripts/bench_island.py は main()/bench() を公開し、浅い深さで計測できる。"""
    spec = importlib.util.spec_from_file_location("bench_island", SCRIPT)
    assert spec is not None and spec.loader is not None
    mod = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(mod)

    assert callable(mod.main)
    rec, it = mod.bench(1, 1)
    assert rec >= 0.0 and it >= 0.0

from __future__ import annotations

import math

import numpy as np


def test_api_import_and_min_flow() -> None:
    from api import (  # noqa: F401
        Affine3,
        Vector2,
        affine_compose,
        generate_island,
        island_vertex_count,
        rotation,
        run,
        translation,
    )

    verts = generate_island(Vector2(0, 0), 2.0, 1)
    assert verts.shape == (2 * island_vertex_count(1),)

    m = affine_compose(translation(400, 300), rotation(math.pi / 2))
    xy = m.apply(verts.reshape(-1, 2))
    assert xy.shape == (island_vertex_count(1), 2)
    # 中心基準の頂点は平行移動後に表示中心のまわりへ来る
    np.testing.assert_allclose(xy.mean(axis=0), (400.0, 300.0), atol=1.0)


def test_api_all_names_resolve() -> None:
    import api

    for name in api.__all__:
        assert hasattr(api, name), name
    assert isinstance(api.__version__, str)

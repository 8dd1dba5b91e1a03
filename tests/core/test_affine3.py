from __future__ import annotations

import math

import numpy as np
import pytest

from engine.core import affine3 as m3
from engine.core.affine3 import Affine3


def _reference_multiply(a: list[float], b: list[float]) -> list[float]:
    """列優先フラット 9 要素の積（b を先に適用）を素朴に展開した参照実装。"""
    a00, a01, a02, a10, a11, a12, a20, a21, a22 = a
    b00, b01, b02, b10, b11, b12, b20, b21, b22 = b
    return [
        b00 * a00 + b01 * a10 + b02 * a20,
        b00 * a01 + b01 * a11 + b02 * a21,
        b00 * a02 + b01 * a12 + b02 * a22,
        b10 * a00 + b11 * a10 + b12 * a20,
        b10 * a01 + b11 * a11 + b12 * a21,
        b10 * a02 + b11 * a12 + b12 * a22,
        b20 * a00 + b21 * a10 + b22 * a20,
        b20 * a01 + b21 * a11 + b22 * a21,
        b20 * a02 + b21 * a12 + b22 * a22,
    ]


def test_factories_use_column_major_layout() -> None:
    assert m3.identity().to_column_major() == [1, 0, 0, 0, 1, 0, 0, 0, 1]
    assert m3.translation(3.0, -2.0).to_column_major() == [1, 0, 0, 0, 1, 0, 3.0, -2.0, 1]
    assert m3.scaling(2.0, 5.0).to_column_major() == [2.0, 0, 0, 0, 5.0, 0, 0, 0, 1]
    c, s = math.cos(0.3), math.sin(0.3)
    assert m3.rotation(0.3).to_column_major() == pytest.approx([c, -s, 0, s, c, 0, 0, 0, 1])


def test_translation_moves_points() -> None:
    out = m3.translation(3.0, 4.0).apply([[1.0, 2.0], [0.0, 0.0]])
    np.testing.assert_allclose(out, [[4.0, 6.0], [3.0, 4.0]])


def test_rotation_direction_in_y_up_coordinates() -> None:
    # rotation(π/2) は Y 上向き座標で時計回り（画面の Y 反転後は反時計回り）
    out = m3.rotation(math.pi / 2).apply([[1.0, 0.0]])
    np.testing.assert_allclose(out, [[0.0, -1.0]], atol=1e-12)


def test_multiply_applies_right_operand_first() -> None:
    t = m3.translation(10.0, 0.0)
    r = m3.rotation(math.pi / 2)
    p = [[1.0, 0.0]]
    # 回転 → 平行移動
    np.testing.assert_allclose(m3.multiply(t, r).apply(p), [[10.0, -1.0]], atol=1e-12)
    # 平行移動 → 回転
    np.testing.assert_allclose(m3.multiply(r, t).apply(p), [[0.0, -11.0]], atol=1e-12)


def test_multiply_is_not_commutative() -> None:
    t = m3.translation(5.0, -2.0)
    r = m3.rotation(0.7)
    assert not m3.multiply(t, r).allclose(m3.multiply(r, t))


def test_multiply_matches_flat_reference_product() -> None:
    rng = np.random.default_rng(7)
    for _ in range(5):
        a = rng.normal(size=9).tolist()
        b = rng.normal(size=9).tolist()
        got = m3.multiply(Affine3.from_column_major(a), Affine3.from_column_major(b))
        assert got.to_column_major() == pytest.approx(_reference_multiply(a, b), rel=1e-12, abs=1e-12)


def test_multiply_is_associative_and_identity_neutral() -> None:
    a = m3.translation(1.0, 2.0)
    b = m3.rotation(0.4)
    c = m3.scaling(2.0, 0.5)
    left = m3.multiply(m3.multiply(a, b), c)
    right = m3.multiply(a, m3.multiply(b, c))
    assert left.allclose(right)
    assert m3.multiply(m3.identity(), b).allclose(b)
    assert m3.multiply(b, m3.identity()).allclose(b)


def test_helpers_post_multiply() -> None:
    base = m3.translation(4.0, 4.0)
    assert m3.rotate(base, 0.2) == m3.multiply(base, m3.rotation(0.2))
    assert m3.translate(base, 1.0, 0.0) == m3.multiply(base, m3.translation(1.0, 0.0))
    assert m3.scale(base, 3.0, 3.0) == m3.multiply(base, m3.scaling(3.0, 3.0))
    assert (base @ m3.rotation(0.2)) == m3.rotate(base, 0.2)


def test_compose_orders_left_to_right() -> None:
    t = m3.translation(10.0, 20.0)
    r = m3.rotation(1.1)
    s = m3.scaling(2.0, 3.0)
    assert m3.compose() == m3.identity()
    assert m3.compose(t, r) == m3.multiply(t, r)
    assert m3.compose(t, r, s).allclose(m3.multiply(m3.multiply(t, r), s))
    assert m3.compose([t, r]) == m3.multiply(t, r)


def test_frame_transform_centers_and_rotates() -> None:
    m = m3.frame_transform(800, 600, 0.0)
    np.testing.assert_allclose(m.apply([[0.0, 0.0], [10.0, 0.0]]), [[400.0, 300.0], [410.0, 300.0]])
    m = m3.frame_transform(800, 600, math.pi)
    np.testing.assert_allclose(m.apply([[10.0, 0.0]]), [[390.0, 300.0]], atol=1e-9)
    assert m.allclose(m3.multiply(m3.translation(400, 300), m3.rotation(math.pi)))


def test_apply_accepts_flat_buffers() -> None:
    m = m3.translation(1.0, -1.0)
    flat = np.array([0.0, 0.0, 2.0, 3.0])
    out = m.apply(flat)
    assert out.shape == (4,)
    np.testing.assert_allclose(out, [1.0, -1.0, 3.0, 2.0])
    with pytest.raises(ValueError):
        m.apply([1.0, 2.0, 3.0])
    with pytest.raises(ValueError):
        m.apply(np.zeros((2, 3)))


def test_to_bytes_is_float32_column_major() -> None:
    m = m3.translation(7.0, 9.0)
    raw = np.frombuffer(m.to_bytes(), dtype=np.float32)
    assert raw.size == 9
    np.testing.assert_array_equal(raw, np.array(m.to_column_major(), dtype=np.float32))


def test_affine3_is_read_only_and_validated() -> None:
    m = m3.identity()
    with pytest.raises(ValueError):
        m.matrix[0, 0] = 2.0
    with pytest.raises(ValueError):
        Affine3(np.eye(2))
    with pytest.raises(ValueError):
        Affine3.from_column_major([1.0, 2.0])

import numpy as np
import pytest

from geomtools import VectorOperations


def test_dot_and_norm(use_numba):
    vo = VectorOperations(use_numba=use_numba)
    a = np.array([1.0, 2.0, 2.0])
    b = np.array([3.0, -1.0, 0.5])

    assert np.isclose(vo.dot(a, b), 2.0)
    assert np.isclose(vo.norm(a), 3.0)
    assert vo.norm(np.zeros(3)) == 0.0


def test_norm_extreme_magnitudes(use_numba):
    vo = VectorOperations(use_numba=use_numba)
    huge = np.array([1e300, 1e300, 0.0])
    tiny = np.array([3e-300, 4e-300, 0.0])

    assert np.isclose(vo.norm(huge), np.sqrt(2.0) * 1e300)
    assert np.isclose(vo.norm(tiny), 5e-300, rtol=1e-12, atol=0.0)


def test_scale_in_place(use_numba):
    vo = VectorOperations(use_numba=use_numba)
    a = np.array([1.0, -2.0, 4.0])
    out = vo.scale(-0.5, a, out=a)

    assert out is a
    assert np.allclose(a, [-0.5, 1.0, -2.0])


def test_linear_combination_aliasing(use_numba):
    vo = VectorOperations(use_numba=use_numba)
    a = np.array([1.0, 0.0, 2.0])
    b = np.array([0.0, 1.0, -1.0])
    expected = 2.0 * a + 3.0 * b

    vo.linear_combination(2.0, a, 3.0, b, out=b)
    assert np.allclose(b, expected)

    a = np.array([1.0, 0.0, 2.0])
    b = np.array([0.0, 1.0, -1.0])
    vo.linear_combination(2.0, a, 3.0, b, out=a)
    assert np.allclose(a, expected)


def test_perpendicular_component(use_numba, rng):
    vo = VectorOperations(use_numba=use_numba)
    for _ in range(20):
        a = rng.normal(size=3)
        b = rng.normal(size=3)
        perp = vo.perpendicular_component(a, b)
        assert abs(np.dot(perp, b)) < 1e-12 * np.linalg.norm(a) * np.linalg.norm(b)
        # the removed part is parallel to b
        assert np.allclose(np.cross(a - perp, b), 0.0, atol=1e-12)


def test_perpendicular_component_zero_reference(use_numba):
    vo = VectorOperations(use_numba=use_numba)
    a = np.array([1.0, 2.0, 3.0])
    assert np.array_equal(vo.perpendicular_component(a, np.zeros(3)), a)
    assert np.array_equal(vo.perpendicular_component(np.zeros(3), a), np.zeros(3))


def test_field_variants(use_numba, rng):
    vo = VectorOperations(use_numba=use_numba)
    a = rng.normal(size=(3, 4, 5))
    b = rng.normal(size=(3, 4, 5))

    assert np.allclose(vo.dot(a, b), np.sum(a * b, axis=0))
    assert np.allclose(vo.norm(a), np.sqrt(np.sum(a * a, axis=0)))
    assert np.allclose(vo.linear_combination(1.5, a, -2.0, b), 1.5 * a - 2.0 * b)
    assert vo.norm(a).shape == (4, 5)


def test_bad_shapes():
    vo = VectorOperations()
    with pytest.raises(ValueError):
        vo.dot(np.ones(2), np.ones(2))
    with pytest.raises(ValueError):
        vo.linear_combination(1.0, np.ones(3), 1.0, np.ones((3, 2)))
    with pytest.raises(TypeError):
        vo.scale(2.0, np.ones(3), out=np.ones(3, dtype=np.float32))


def test_read_only_inputs(use_numba):
    vo = VectorOperations(use_numba=use_numba)
    a = np.array([1.0, 2.0, 2.0])
    b = np.array([0.0, 0.0, 1.0])
    a.flags.writeable = False
    b.flags.writeable = False

    assert np.isclose(vo.dot(a, b), 2.0)
    assert np.isclose(vo.norm(a), 3.0)
    assert np.allclose(vo.linear_combination(1.0, a, -2.0, b), [1.0, 2.0, 0.0])
    assert np.allclose(vo.perpendicular_component(a, b), [1.0, 2.0, 0.0])
    assert np.allclose(vo.dot(np.broadcast_to(a[:, np.newaxis], (3, 4)), np.ones((3, 4))), 5.0)

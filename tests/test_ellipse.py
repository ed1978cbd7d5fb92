import logging
import numpy as np
import pytest

from geomtools import EllipseOperations

ROOT2 = np.sqrt(2.0)


def sampled_norms(vec1, vec2, num=3601):
    theta = np.linspace(-np.pi, np.pi, num)
    points = np.cos(theta)[np.newaxis, :] * vec1[:, np.newaxis] + \
             np.sin(theta)[np.newaxis, :] * vec2[:, np.newaxis]
    return np.linalg.norm(points, axis=0)


def test_concrete_scenario(use_numba):
    eo = EllipseOperations(use_numba=use_numba)
    smajor, sminor = eo.semi_axes(np.array([1.0, 1.0, 1.0]),
                                  np.array([1.0, -1.0, 1.0]))

    assert np.allclose(smajor, [-ROOT2, 0.0, -ROOT2], atol=1e-14)
    assert np.allclose(sminor, [0.0, ROOT2, 0.0], atol=1e-14)


def test_orthogonal_and_extremal(use_numba, rng):
    eo = EllipseOperations(use_numba=use_numba)
    for _ in range(20):
        vec1 = rng.normal(size=3)
        vec2 = rng.normal(size=3)
        smajor, sminor = eo.semi_axes(vec1, vec2)

        major_len = np.linalg.norm(smajor)
        minor_len = np.linalg.norm(sminor)
        assert abs(np.dot(smajor, sminor)) < 1e-12 * major_len * max(major_len, 1.0)
        assert major_len >= minor_len

        norms = sampled_norms(vec1, vec2)
        tol = 1e-12 * major_len
        assert np.all(norms <= major_len + tol)
        assert np.all(norms >= minor_len - tol)
        # a 0.1 degree grid gets within 1e-3 * major of both extrema
        assert norms.max() >= major_len * (1.0 - 1e-3)
        assert norms.min() <= minor_len + 1e-3 * major_len


def test_axes_generate_same_ellipse(use_numba, rng):
    eo = EllipseOperations(use_numba=use_numba)
    vec1 = rng.normal(size=3)
    vec2 = rng.normal(size=3)
    smajor, sminor = eo.semi_axes(vec1, vec2)

    # both pairs span the same plane and share the same quadratic form
    gram_in = np.array([[vec1 @ vec1, vec1 @ vec2], [vec1 @ vec2, vec2 @ vec2]])
    gram_out = np.array([[smajor @ smajor, 0.0], [0.0, sminor @ sminor]])
    assert np.isclose(np.trace(gram_in), np.trace(gram_out))
    assert np.isclose(np.linalg.det(gram_in), np.linalg.det(gram_out))
    normal = np.cross(vec1, vec2)
    assert abs(np.dot(smajor, normal)) < 1e-12
    assert abs(np.dot(sminor, normal)) < 1e-12


def test_zero_input(use_numba):
    eo = EllipseOperations(use_numba=use_numba)
    smajor, sminor = eo.semi_axes(np.zeros(3), np.zeros(3))

    assert np.array_equal(smajor, np.zeros(3))
    assert np.array_equal(sminor, np.zeros(3))


def test_dependent_vectors(use_numba):
    eo = EllipseOperations(use_numba=use_numba)
    vec1 = np.array([1.0, 2.0, -1.0])
    smajor, sminor = eo.semi_axes(vec1, -3.0 * vec1)

    assert np.allclose(sminor, 0.0, atol=1e-14)
    assert np.isclose(np.linalg.norm(smajor), np.sqrt(10.0) * np.linalg.norm(vec1))
    assert np.allclose(np.cross(smajor, vec1), 0.0, atol=1e-12)


def test_one_zero_vector(use_numba):
    eo = EllipseOperations(use_numba=use_numba)
    vec2 = np.array([0.0, 0.0, 2.0])
    smajor, sminor = eo.semi_axes(np.zeros(3), vec2)

    assert np.allclose(np.abs(smajor), np.abs(vec2))
    assert np.array_equal(sminor, np.zeros(3))


@pytest.mark.parametrize("alias", ["major_is_vec1", "minor_is_vec1", "both_in_place"])
def test_aliased_outputs(use_numba, alias):
    eo = EllipseOperations(use_numba=use_numba)
    expected_major = np.array([-ROOT2, 0.0, -ROOT2])
    expected_minor = np.array([0.0, ROOT2, 0.0])
    vec1 = np.array([1.0, 1.0, 1.0])
    vec2 = np.array([1.0, -1.0, 1.0])

    if alias == "major_is_vec1":
        smajor, sminor = eo.semi_axes(vec1, vec2, smajor=vec1)
        assert smajor is vec1
    elif alias == "minor_is_vec1":
        smajor, sminor = eo.semi_axes(vec1, vec2, sminor=vec1)
        assert sminor is vec1
    else:
        smajor, sminor = eo.semi_axes(vec1, vec2, smajor=vec1, sminor=vec2)
        assert smajor is vec1 and sminor is vec2

    assert np.allclose(smajor, expected_major, atol=1e-14)
    assert np.allclose(sminor, expected_minor, atol=1e-14)


@pytest.mark.parametrize("factor", [1e-300, 1e-150, 1e150, 1e300])
def test_scale_invariance(use_numba, factor):
    eo = EllipseOperations(use_numba=use_numba)
    vec1 = np.array([0.3, -1.2, 0.7])
    vec2 = np.array([1.1, 0.4, -0.2])
    major, minor = eo.semi_axes(vec1, vec2)
    big_major, big_minor = eo.semi_axes(factor * vec1, factor * vec2)

    assert np.all(np.isfinite(big_major)) and np.all(np.isfinite(big_minor))
    assert np.allclose(big_major / factor, major, rtol=1e-12, atol=1e-13)
    assert np.allclose(big_minor / factor, minor, rtol=1e-12, atol=1e-13)


def test_field_matches_single(use_numba, rng):
    eo = EllipseOperations(use_numba=use_numba)
    single = EllipseOperations(use_numba=True)
    vec1_field = rng.normal(size=(3, 5, 2))
    vec2_field = rng.normal(size=(3, 5, 2))
    vec1_field[:, 0, 0] = 0.0
    vec2_field[:, 0, 0] = 0.0

    smajor, sminor = eo.semi_axes_field(vec1_field, vec2_field)
    assert smajor.shape == vec1_field.shape
    for i in range(5):
        for j in range(2):
            major, minor = single.semi_axes(vec1_field[:, i, j], vec2_field[:, i, j])
            assert np.allclose(smajor[:, i, j], major, atol=1e-13)
            assert np.allclose(sminor[:, i, j], minor, atol=1e-13)


def test_ellipse_points(use_numba):
    eo = EllipseOperations(use_numba=use_numba)
    vec1 = np.array([2.0, 0.0, 0.0])
    vec2 = np.array([0.0, 1.0, 0.0])
    center = np.array([0.0, 0.0, 5.0])
    points = eo.ellipse_points(vec1, vec2, [0.0, np.pi / 2, np.pi], center=center)

    assert points.shape == (3, 3)
    assert np.allclose(points[:, 0], [2.0, 0.0, 5.0])
    assert np.allclose(points[:, 1], [0.0, 1.0, 5.0])
    assert np.allclose(points[:, 2], [-2.0, 0.0, 5.0])


def test_project_onto_plane(use_numba):
    eo = EllipseOperations(use_numba=use_numba)
    center = np.array([1.0, 2.0, 3.0])
    vec1 = np.array([2.0, 0.0, 1.0])
    vec2 = np.array([0.0, 1.0, 4.0])

    proj_center, smajor, sminor = eo.project_onto_plane(
        center, vec1, vec2, normal=np.array([0.0, 0.0, 2.0]), constant=2.0)

    assert np.allclose(proj_center, [1.0, 2.0, 1.0])
    assert np.allclose(smajor, [2.0, 0.0, 0.0]) or np.allclose(smajor, [-2.0, 0.0, 0.0])
    assert np.allclose(np.abs(sminor), [0.0, 1.0, 0.0])


def test_project_edge_on(use_numba):
    eo = EllipseOperations(use_numba=use_numba)
    _, smajor, sminor = eo.project_onto_plane(
        np.zeros(3),
        np.array([1.0, 0.0, 0.0]),
        np.array([0.0, 0.0, 3.0]),
        normal=np.array([0.0, 1.0, 0.0]))

    # ellipse lying in the plane projects to itself
    assert np.isclose(np.linalg.norm(smajor), 3.0)
    assert np.isclose(np.linalg.norm(sminor), 1.0)

    _, smajor, sminor = eo.project_onto_plane(
        np.zeros(3),
        np.array([1.0, 0.0, 0.0]),
        np.array([0.0, 0.0, 3.0]),
        normal=np.array([1.0, 0.0, 0.0]))
    assert np.isclose(np.linalg.norm(smajor), 3.0)
    assert np.allclose(sminor, 0.0)


def test_invalid_input():
    eo = EllipseOperations()
    with pytest.raises(ValueError):
        eo.project_onto_plane(np.zeros(3), np.ones(3), np.ones(3), normal=np.zeros(3))
    with pytest.raises(ValueError):
        eo.semi_axes(np.ones((3, 2)), np.ones((3, 2)))


@pytest.mark.parametrize("factor", [-1.0, -1e-200, -1e200])
def test_negative_scale(use_numba, factor):
    eo = EllipseOperations(use_numba=use_numba)
    vec1 = np.array([0.3, -1.2, 0.7])
    vec2 = np.array([1.1, 0.4, -0.2])
    major, minor = eo.semi_axes(vec1, vec2)
    neg_major, neg_minor = eo.semi_axes(factor * vec1, factor * vec2)

    # same lengths, each axis only defined up to sign
    assert np.isclose(np.linalg.norm(neg_major), abs(factor) * np.linalg.norm(major), rtol=1e-12)
    assert np.isclose(np.linalg.norm(neg_minor), abs(factor) * np.linalg.norm(minor), rtol=1e-12)
    for neg, ref in ((neg_major, major), (neg_minor, minor)):
        scaled = neg / abs(factor)
        assert np.allclose(scaled, ref, atol=1e-13) or np.allclose(scaled, -ref, atol=1e-13)


def test_circle_first_axis_is_major(use_numba):
    eo = EllipseOperations(use_numba=use_numba)
    vec1 = np.array([1.0, 0.0, 0.0])
    vec2 = np.array([0.0, 1.0, 0.0])
    smajor, sminor = eo.semi_axes(vec1, vec2)

    assert np.array_equal(smajor, vec1)
    assert np.array_equal(sminor, vec2)


def test_read_only_inputs(use_numba):
    eo = EllipseOperations(use_numba=use_numba)
    vec1 = np.array([1.0, 1.0, 1.0])
    vec2 = np.array([1.0, -1.0, 1.0])
    vec1.flags.writeable = False
    vec2.flags.writeable = False

    smajor, sminor = eo.semi_axes(vec1, vec2)
    assert np.allclose(smajor, [-ROOT2, 0.0, -ROOT2], atol=1e-14)
    assert np.allclose(sminor, [0.0, ROOT2, 0.0], atol=1e-14)

    vec1_field = np.broadcast_to(vec1[:, np.newaxis], (3, 4))
    vec2_field = np.broadcast_to(vec2[:, np.newaxis], (3, 4))
    major_field, minor_field = eo.semi_axes_field(vec1_field, vec2_field)
    assert np.allclose(major_field, smajor[:, np.newaxis], atol=1e-14)
    assert np.allclose(minor_field, sminor[:, np.newaxis], atol=1e-14)


def test_debug_logs_path(use_numba, caplog):
    eo = EllipseOperations(use_numba=use_numba, debug=True)
    with caplog.at_level(logging.DEBUG, logger="geomtools.funcs.ellipse.operations"):
        eo.semi_axes(np.array([1.0, 0.0, 0.0]), np.array([0.0, 2.0, 0.0]))

    expected = "semi_axes: numba kernel" if use_numba else "semi_axes: numpy fallback"
    assert expected in caplog.text

import numpy as np
import pytest

from gaskit.scene import (
    SCALE,
    N_LINES_IN_CIRCLE,
    ViewState,
    box_vertices,
    controls_text,
    hole_circle,
    scene_lines,
)


def test_box_vertices_on_cube_corners():
    box = box_vertices()
    assert box.shape == (32, 3)
    assert np.allclose(np.abs(box), SCALE)


def test_box_segments_are_cube_edges():
    box = box_vertices()
    for start, end in zip(box[::2], box[1::2]):
        assert np.count_nonzero(~np.isclose(start, end)) == 1


def test_hole_circle_shape_and_plane():
    circle = hole_circle(0.2)
    assert circle.shape == (2 * N_LINES_IN_CIRCLE, 3)
    assert np.allclose(circle[:, 0], -SCALE)
    assert np.allclose(np.hypot(circle[:, 1], circle[:, 2]), 0.2, atol=1e-6)


def test_hole_circle_is_closed_chain():
    circle = hole_circle(0.3)
    assert np.array_equal(circle[0], circle[-1])
    assert np.allclose(circle[0], [-SCALE, 0.0, 0.3])
    for k in range(1, N_LINES_IN_CIRCLE):
        assert np.array_equal(circle[2 * k - 1], circle[2 * k])


def test_scene_lines_concatenates():
    lines = scene_lines(0.1)
    assert np.array_equal(lines[:32], box_vertices())
    assert np.array_equal(lines[32:], hole_circle(0.1))


def test_controls_text():
    text = controls_text()
    assert text.splitlines()[0] == "Quit:      Q"
    assert len(text.splitlines()) == 11


def test_rotation_keys_round_trip():
    view = ViewState()
    assert view.handle_key("z")
    assert view.handle_key("X")
    assert view.handle_key("c")
    assert (view.angle_x, view.angle_y, view.angle_z) == (1, 1, 1)
    for key in "asd":
        view.handle_key(key)
    assert (view.angle_x, view.angle_y, view.angle_z) == (0, 0, 0)


def test_zoom_and_radius_round_trip():
    view = ViewState()
    view.handle_key("=")
    assert view.scale > 0.5
    view.handle_key("-")
    assert view.scale == pytest.approx(0.5)
    view.handle_key("1")
    assert view.radius > 0.1
    view.handle_key("2")
    assert view.radius == pytest.approx(0.1)


def test_quit_and_unknown_key():
    view = ViewState()
    assert view.handle_key("w") is False
    assert view.should_close is False
    assert view.handle_key("q") is True
    assert view.should_close is True


def test_rotation_identity_at_rest():
    assert np.allclose(ViewState().rotation_matrix(), np.eye(4))


def test_rotation_is_orthonormal():
    view = ViewState(angle_x=30, angle_y=-45, angle_z=10)
    matrix = view.rotation_matrix().astype(np.float64)
    assert np.allclose(matrix @ matrix.T, np.eye(4), atol=1e-6)
    assert np.linalg.det(matrix) == pytest.approx(1.0, abs=1e-6)


def test_rotation_about_x_maps_y_to_z():
    matrix = ViewState(angle_x=90).rotation_matrix()
    rotated = matrix @ np.array([0.0, 1.0, 0.0, 1.0])
    assert np.allclose(rotated, [0.0, 0.0, 1.0, 1.0], atol=1e-6)
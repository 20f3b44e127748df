import numpy as np
import pytest

from fjetsim.camera import Camera, CameraRegistry
from fjetsim.fighter_jet import FighterJet
from fjetsim.masses import MASS_FRACTIONS
from fjetsim.meshes import line
from fjetsim.model import Model, ModelMesh
from fjetsim.state import AppState


def _make_model():
    meshes = [
        ModelMesh(name, line((0, 0, 0), (1, 0, 0), (1, 1, 1)),
                  np.array([i * 1.0, 0.5, -i * 0.25]))
        for i, name in enumerate(MASS_FRACTIONS)
    ]
    return Model(meshes, [])


@pytest.fixture
def state():
    return AppState(dt=0.1)


@pytest.fixture
def jet(state):
    return FighterJet(state, CameraRegistry(), _make_model(), 13000.0)


def test_first_camera_is_active(jet):
    assert jet.is_active()


def test_not_active_behind_other_camera(state):
    registry = CameraRegistry()
    Camera(state, registry, (0.0, 0.0, 0.0))
    jet = FighterJet(state, registry, _make_model(), 13000.0)
    assert not jet.is_active()
    registry.next_active()
    assert jet.is_active()


def test_initial_camera_placement(jet):
    assert jet.camera.position == pytest.approx(jet.body.position + 0.577 * 10.0)
    assert jet.camera.orientation == pytest.approx([-0.577, -0.577, -0.577])


def test_scroll_clamps(jet):
    jet.set_cam_distance(30.0)
    assert jet.cam_distance_max == 60.0
    jet.on_mouse_scroll((0.0, 5.0))
    assert jet.cam_distance == 25.0
    jet.on_mouse_scroll((0.0, 100.0))
    assert jet.cam_distance == 1.0
    jet.on_mouse_scroll((0.0, -100.0))
    assert jet.cam_distance == 60.0


def test_move_forward_applies_full_thrust(jet):
    jet.body.max_thrust = 210000.0
    jet.move_forward()
    assert jet.body.physics_core.force == pytest.approx([0.0, 0.0, -210000.0])


def test_mouse_at_centre_keeps_orientation(jet, state):
    before = jet.camera.orientation.copy()
    jet.on_mouse_move(state.window_center())
    assert jet.camera.orientation == pytest.approx(before)


def test_horizontal_mouse_turns_about_up(jet, state):
    before = jet.camera.orientation.copy()
    center = state.window_center()
    jet.on_mouse_move((center[0] + 100.0, center[1]))
    after = jet.camera.orientation
    assert not np.allclose(after, before)
    assert after[1] == pytest.approx(before[1])
    assert np.linalg.norm(after) == pytest.approx(np.linalg.norm(before))


def test_vertical_blocked_near_pole(jet, state):
    start = np.array([0.0, 1.0, 0.05])
    start /= np.linalg.norm(start)
    jet.camera.orientation = start.copy()
    center = state.window_center()
    jet.on_mouse_move((center[0], center[1] + 200.0))
    assert jet.camera.orientation == pytest.approx(start)


def test_setters(jet):
    jet.set_cam_sensitivity(100.0)
    jet.set_mesh_scale(0.01)
    assert jet.camera.sensitivity == 100.0
    assert jet.body.mesh_scale == 0.01


def test_update_keeps_camera_at_distance(jet):
    jet.update()
    offset = jet.camera.position - jet.body.position
    assert np.linalg.norm(offset) == pytest.approx(
        jet.cam_distance * np.linalg.norm(jet.camera.orientation))
    assert np.cross(offset, jet.camera.orientation) == pytest.approx([0.0, 0.0, 0.0], abs=1e-9)
# fjetsim

This package is a small flight model for a fighter jet. The aircraft is a point
mass with orientation and angular velocity. Gravity, thrust, quadratic drag on
each body axis and a spring-damper ground contact act on it. The package also
provides:

- a free-look camera
- a chase camera that follows the jet
- simple mesh data
- a light description
- a per-frame task timer
- keyboard and mouse input routing

All vector and matrix work uses numpy arrays. Quaternions are `[w, x, y, z]`.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

- `fjetsim.mathutils` has the vector, quaternion and 4x4 transform helpers:
  - `vec3`, `normalize`
  - `quat_identity`, `quat_from_axis_angle`, `quat_multiply`,
    `quat_conjugate`, `quat_normalize`, `quat_rotate`
  - `quat_to_mat3`, `quat_to_mat4`
  - `translation_matrix`, `scale_matrix`, `rotation_matrix`
  - `perspective`, `look_at`
- `fjetsim.state` defines `AppState`, the shared per-run values:
  - the frame time `dt` and the elapsed `time`
  - `window_size` and `cursor_pos`
  - the display toggles (`draw_wireframe`, `draw_global_axis`, `draw_normals`,
    `gui_focused`)
  - the panel toggles `toggle_config()` and `toggle_info()`

  It also has the axis and colour constants `RIGHT`/`RED`, `UP`/`GREEN` and
  `FORWARD`/`BLUE`.
- `fjetsim.transformable.Transformable` keeps translation, rotation and scale
  as separate matrices. Its `model` property is their product.
- `fjetsim.moveable.Moveable` is a position with yaw and pitch:
  - `move_forward()` and the other `move_*` methods move it by
    `speed * state.dt`.
  - `on_mouse_move()` turns it by the cursor's distance from the window centre.
  - `accelerate(boost)` switches between the default speed and the boosted
    speed.
- `fjetsim.camera` provides the camera types:
  - `Camera` computes its projection and view matrices in `update()`.
  - `CameraFlags` chooses which of a camera's axes `direction_lines()` returns.
  - `CameraRegistry` records every camera. The first camera registered becomes
    active, and `next_active()` cycles through the cameras.
- `fjetsim.mesh` defines the mesh data:
  - the vertex types `VertexP`, `VertexPC`, `VertexPT` and `VertexPCTN`
  - `DrawMode`
  - `Mesh`, which holds vertices, optional indices and a draw mode.

  `Mesh.load_obj(path)` reads a Wavefront OBJ file into an indexed triangle
  mesh. Polygons are split into triangle fans and repeated vertices are shared.
- `fjetsim.meshes` builds simple meshes: `line`, `axis`, `plane`,
  `grid_plane` and `circle`.
- `fjetsim.light.Light` is a point light. `uniforms()` returns its shader
  uniform values as a dict.
- `fjetsim.profiler` times named tasks within a frame:
  - `ProfilerManager.start_scoped_task()` returns a `ScopedTask`. The task is
    timed until `end()` is called or its `with` block ends.
  - At most 20 tasks can be timed per frame.
  - `color_bright` and `color_dim` give the palette colours.
- `fjetsim.model` defines `Model`, `ModelMesh` and `Socket`: the named part
  meshes and attachment points of an aircraft.
- `fjetsim.masses` holds `MASS_FRACTIONS`, the share of the total mass that
  each part carries, and `total_fraction()`.
- `fjetsim.point_mass.PointMass` is the rigid-body integrator.
- `fjetsim.aircraft` defines `AircraftPart` and `FighterJetBody`:
  - the parts and the physics core
  - the flaps and airbrake toggles and their deploy animation
  - ground contact
  - the world matrix of each part
- `fjetsim.fighter_jet.FighterJet` is the jet together with its orbiting chase
  camera.
- `fjetsim.inputs` routes input:
  - `Key` and `KeyAction` name the keys and key actions.
  - `InputsHandler.key_event()` handles key presses.
  - `scroll()` and `cursor_pos()` handle scroll and cursor events.
  - `process()` applies the held keys to the active entity. It returns whether
    Q asked to close.

## Example

```python
from fjetsim.camera import Camera, CameraRegistry
from fjetsim.fighter_jet import FighterJet
from fjetsim.inputs import InputsHandler, Key, KeyAction
from fjetsim.masses import MASS_FRACTIONS
from fjetsim.meshes import circle
from fjetsim.model import Model, ModelMesh
from fjetsim.state import AppState

# A stand-in model with one mesh for every part the jet needs.
model = Model(meshes=[ModelMesh(name, circle()) for name in MASS_FRACTIONS])

state = AppState()
registry = CameraRegistry()
spectator = Camera(state, registry, (85.0, 77.0, 76.0), -2.385, -0.582)

jet = FighterJet(state, registry, model, 13000.0)
jet.body.max_thrust = 210000.0

inputs = InputsHandler(state, registry, jet)
inputs.active_entity = jet
inputs.key_event(Key.F, KeyAction.PRESS)  # deploy flaps

state.dt = 1 / 90
inputs.process({Key.W})  # W held: full thrust on the jet
jet.update()
print(jet.body.position)
```

The model must contain a mesh for every part listed in `MASS_FRACTIONS`:
Fuselage, Nose, Cockpit, UpperFuselage, Engines, Wings, LeftAileron,
RightAileron, LeftFlap, RightFlap, LeftElevator, RightElevator, Rudders,
LeftRudder, RightRudder, Canopy and Airbrake. If one is missing,
`FighterJetBody` raises `KeyError`.

The sockets Afterburner1, Afterburner2, Hardpoint1 and Hardpoint2 are optional.
A missing socket defaults to the identity matrix.

## What it does not do

This package is the simulation only. It does not:

- open a window
- draw anything on screen
- compile shaders
- load textures
- show a GUI
- run a main loop

Meshes are plain vertex and index data, and `Light.uniforms()` only returns
values.

It also does not read FBX files. A `Model` has to be built by the caller, for
example from meshes loaded with `Mesh.load_obj`.

The profiler records task timings but does not draw graphs of them.

Input events must be passed in by the caller, using `Key` and `KeyAction`
values and the sets of held keys.
# zenith

`zenith` is the core of a small 3D scene engine built on NumPy. It holds the
parts of an engine that need neither a window nor a GPU: quaternions and
transforms, a perspective camera with a first-person controller, lights, RGBA
colours, material presets, draw-command ordering, uniform-buffer byte layouts,
scene and system management, and a frame loop.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Quick tour

### Transforms

```python
from zenith.transform import Transformable3D

cube = Transformable3D()
cube.translate((1.0, 0.0, 0.0))
cube.rotate(0.5, (0.0, 1.0, 0.0))
cube.scale_by(2.0)
print(cube.transform)   # 4x4 model matrix: translation, then rotation, then scale
```

`translate`, `rotate` and `scale_by` return the object, so calls can be
chained. `set_translation`, `set_rotation` (an angle and axis, or a
quaternion), `set_scale` (a number or a per-axis vector) and `set_transform`
replace a part outright; `set_transform` decomposes a 4x4 matrix back into
translation, rotation and scale. The `translation`, `rotation`, `scale` and
`transform` properties return copies.

`zenith.quaternion` holds the helpers used underneath, on `(w, x, y, z)`
arrays: `identity`, `from_axis_angle`, `multiply`, `normalize`, `conjugate`,
`to_matrix` and `from_matrix`.

### Camera and controller

```python
import math
from zenith.camera import PerspectiveCamera
from zenith.camera_controller import FpsCameraController

camera = PerspectiveCamera((0.0, 0.0, 5.0), (0.0, 0.0, -1.0), 16 / 9)
# or: PerspectiveCamera.from_yaw_pitch((0.0, 0.0, 5.0), -math.pi / 2, 0.0, 16 / 9, math.radians(45.0))
controller = FpsCameraController(camera)

pressed = {"W"}
controller.on_update(lambda key: key in pressed, (10.0, -4.0), 1 / 60)
print(camera.position, camera.yaw, camera.pitch)
print(camera.view_projection)
```

The controller moves with `"W"`, `"S"`, `"A"` and `"D"`, sprints with
`"LeftShift"`, and turns by the mouse delta times `sensitivity`, keeping the
pitch between -89 and 89 degrees. Keys are any hashable values; the
attributes `move_forward_key`, `sprint_key` and the others can be changed.
`look_at` and `perspective` build view and projection matrices directly.

### Lights, colours and materials

```python
from zenith.light import PointLight
from zenith import colors, materials

light = PointLight((0.0, 5.0, 5.0), (1.0, 1.0, 1.0))

materials.load_materials()
gold = materials.material("gold")
print(materials.materials().names())
materials.unload_materials()

print(colors.CYAN.rgb, colors.RED.with_alpha(0.5))
```

`Light` itself cannot be created; `PointLight` carries `color`, `ambient`,
`diffuse` and `specular`. `MaterialList` holds 25 presets in a fixed order,
reachable by index, by name with `get`, and by iteration.

### Rendering data

`zenith.draw_command.DrawCommand` orders draw requests by vertex array, then
material (by identity), ignoring the transform, so sorted commands fall into
batches. `zenith.gpu_layout` provides `RenderBatch` and packs
`CameraUboData`, `LightUboData`, `MaterialUboData` and
`InstanceBufferElement` into the padded little-endian byte layouts shaders
expect, with the binding indices `CAMERA_UBO_BINDING_INDEX`,
`LIGHT_UBO_BINDING_INDEX` and `MATERIAL_UBO_BINDING_INDEX`.

### Scenes, systems and the application loop

Subclass `zenith.scene.Scene` and override `on_load`, `on_update`,
`on_event` and `on_render`. `SceneManager.load_scene` activates a scene at
once if none is active, otherwise at the start of the next update.

`zenith.systems.SystemManager` starts systems in the order given, and if one
fails, shuts down the ones already started; `shut_down_systems` stops them in
reverse.

`zenith.application.Application` starts the given systems followed by its
scene manager. `run(max_frames=None)` handles queued events (`post_event`),
then updates and renders each frame, until `close()` is called or
`max_frames` frames have run, and returns the frame count. Use it as a
context manager or call `shut_down()`. `run_application(factory, max_frames)`
builds, runs and shuts down an application, prints errors to stderr (with the
recorded stack for a `zenith.errors.ZenithError`) and returns 0 or 1.

`zenith.errors.zth_assert` raises `AssertionFailure` when a condition is
false. `zenith.timer.Timer` is a stopwatch; `zenith.utility` has `Overload`
(dispatch to the first function whose parameters accept the arguments) and
`struct_arity`.

## Example programs

* `zenith.cube_game` – a 40 × 20 × 40 field of blocks with a first-person
  `Player`; Escape closes it.
* `zenith.sandbox` – a cube that spins faster as time passes; Escape closes
  it and Left Control toggles the cursor.
* `zenith.testbed` – `TransformTest`, whose cube transform, material preset
  and texture are edited through attributes and `select_material` /
  `select_texture`; the `Testbed` application logs window-resize and
  key-press events through `logging` (see `describe_event`).

The cube game can be started from the command line; `--frames` stops it
after that many frames:

```
zenith-cube-game --frames 100
```

## What this package does not do

There is no window, no GPU and no input device behind any of this. Nothing is
drawn to a screen: scenes fill a `draw_list` of (shape, material) pairs each
frame, and textures are only file paths with filter names. Input reaches the
example scenes through their `pressed_keys`, `mouse_delta` and `delta_time`
attributes, and events such as `KeyPressedEvent` and `WindowResizedEvent`
only arrive when posted with `Application.post_event`. Without `--frames`
the cube game runs until something closes it, which nothing from the
keyboard can do.
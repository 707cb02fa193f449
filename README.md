# shapeforms

Simple 2D shapes (triangles, quads and circles). Each shape holds its vertex
positions, per-vertex colours, triangle indices and a 4x4 transform matrix.
Drawing goes through a small encoder interface. Nothing here talks to a GPU,
so you can build, transform and inspect scenes anywhere numpy runs.

## Install

    pip install .

For the tests:

    pip install ".[test]"
    pytest

## Modules

- `shapeforms.common` contains `Vec4`, a frozen four-float vector that can be iterated and has length 4. It also holds the plain `Position`, `Color` and `Vertex` dataclasses and `degrees_to_radians(angle)`.
- `shapeforms.transform` contains `Transform`, which accumulates a 4x4 float32 matrix.
- `shapeforms.shaders` provides `find_shader_file(name, start=None)` and `read_shader_file(name, start=None)`.
- `shapeforms.primitive` contains `Primitive`, `Triangle`, `Quad`, `Circle`, `DrawCall` and `PrimitiveError`.
- `shapeforms.renderer` contains `RecordingEncoder`, `FrameTimer`, `Renderer`, `build_scene()` and the `main` command.

## Transforms

A `Transform` starts out as the identity. Each call multiplies a new matrix
onto the left of the current one, so the transformations take effect in the
order you call them. `set_rotation` normalises the axis before it rotates; a
zero axis is used unchanged. `matrix` is a read-only float32 array, and
`str(t)` prints the matrix as aligned rows.

```python
import math
from shapeforms.transform import Transform

t = Transform()
t.set_rotation(-math.pi, 0, 0, 1)
t.set_scale(0.5, 0.5, 0)
t.set_translation(0, -0.3, 0)
print(t)
t.reset()
```

## Primitives

```python
from shapeforms.common import Vec4
from shapeforms.primitive import Quad, Triangle, Circle

positions = [Vec4(-0.75, 0.75, 0, 1), Vec4(0, 0.75, 0, 1),
             Vec4(0, 0, 0, 1), Vec4(-0.75, 0, 0, 1)]
grey = [Vec4(0.5, 0.5, 0.5, 1)] * 4
quad = Quad(positions, grey)
quad.transform.set_scale(0.5, 0.5, 0)

Triangle()                       # default grey triangle
Quad()                           # default blue unit quad
Circle(radius=0.5, vertex_count=100)
```

Vertices and colours can be `Vec4` values or any four-number sequences.
`PrimitiveError` is raised in these cases:

- the vertex list or the colour list is empty;
- only one of the two lists is given;
- an entry does not have exactly four components.

`Circle` raises `ValueError` if `vertex_count` is below 1 or at least 65535.

The `vertices`, `colors` and `indices` properties return read-only numpy
arrays. `encode_render_commands(encoder)` binds the following to the encoder:

- the pipeline;
- the positions at buffer 0;
- the colours at buffer 1;
- the transform matrix, as column-major float32 bytes, at buffer 11.

`draw(encoder)` then issues an indexed triangle draw and returns a
`DrawCall`. A triangle draws 3 indices, a quad draws 6, and a circle draws
all of its indices.

## Rendering

`RecordingEncoder` records every command it receives in its `commands` list,
and `draw_count` tells you how many draws it has recorded.
`Renderer(primitives=None)` encodes and draws each primitive in order.
`render_frame(encoder)` returns the list of `DrawCall`s it issued. If you
give no primitives, it uses `build_scene()`, which returns a grey quad and a
red copy that is rotated by -pi about z and scaled by half.

`FrameTimer.tick(now=None)` returns the time since the previous tick. Its
`fps` field holds the number of frames counted since the last report; it is
set once each time a new whole second of total time is reached, and is
`None` otherwise.

```python
from shapeforms.renderer import Renderer, RecordingEncoder, build_scene

renderer = Renderer(build_scene())
encoder = RecordingEncoder()
calls = renderer.render_frame(encoder)
```

## Command line

    shapeforms [--frames N] [--log-fps]

This command renders the default scene into a recording encoder for `N`
frames (the default is 1). For each frame it prints the number of draws and
the total number of indices. With `--log-fps` it also prints the frame delta
times and the frames per second.

## What it does not do

This package opens no window and uses no graphics device. It does not compile
or run shaders. `read_shader_file` only finds a file by name and returns its
text. Rendering ends at the encoder interface: no pixels are produced.
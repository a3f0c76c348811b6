# vgengine

A small software 3D renderer in pure Python. It has its own vector,
quaternion and 4x4 matrix math, clips triangles against the view frustum,
and rasterizes them into an in-memory framebuffer with a depth buffer. The
core utilities it is built on are available too: bit arrays, bit flags, a
fixed-capacity open-addressing hash table, a slot pool, an xorshift random
generator, sorting routines and lenient number parsing.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Rendering a mesh

```python
from vgengine.camera import Camera
from vgengine.color import Color
from vgengine.framebuffer import Framebuffer
from vgengine.matrix import mvp_matrix, perspective_matrix, view_matrix
from vgengine.renderer import Mesh, fill_background, render_mesh
from vgengine.transform import Transform
from vgengine.vector import Vector3

framebuffer = Framebuffer(1280, 720)
fill_background(framebuffer)

camera = Camera.default()
view = view_matrix(camera)
proj = perspective_matrix(camera, 1280 / 720)

mesh = Mesh(
    vertices=[Vector3(-1, -1, -20), Vector3(1, -1, -20), Vector3(0, 1, -20)],
    indices=[0, 1, 2],
)
mvp = mvp_matrix(Transform.identity(), view, proj)
render_mesh(framebuffer, mesh, mvp, [Color(1.0, 0.0, 0.0)])

pixels = framebuffer.to_bytes()  # little-endian 0xAARRGGBB, top row first
```

Coordinates have y pointing up: `framebuffer.get_pixel(0, 0)` is the
bottom-left pixel. `render_mesh` takes one colour per triangle and keeps
the nearest fragment using the depth buffer; call
`framebuffer.reset_depth()` before drawing the next frame.

The pieces are usable on their own:

- `vgengine.vector`: immutable `Vector2`, `Vector3`, `Vector4` with
  arithmetic, `length`, `normalized`, `cross`, `lerp` and the direction
  helpers `up()`, `forward()` and so on (forward is negative Z).
- `vgengine.quaternion`: `Quaternion.from_euler`, `from_axis`, `rotate`,
  `conjugate`, and `chain(q1, q2)`, which applies `q1` first.
- `vgengine.matrix`: row-major `Matrix4` for row vectors, multiplied with
  `a @ b`; `compose`, `model_matrix`, `view_matrix`, `perspective_matrix`
  and `mvp_matrix`.
- `vgengine.renderer`: `clip_triangle`, `clip_to_raster_space`,
  `rasterize_triangle` and `bilinear_sample_premultiplied` for sampling
  32-bit texels out of a byte buffer.
- `vgengine.color`: `Color` with straight and premultiplied blending and
  packing to and from `0xAARRGGBB` integers.
- `vgengine.rect`, `vgengine.camera`, `vgengine.transform`: plain data
  types used by the above.
- `vgengine.input`: `InputState` holding held, pressed and released keys
  (`KeyCode`) and mouse buttons (`MouseKey`); the caller fills it in.

## Utilities

```python
from vgengine.bit_array import BitArray
from vgengine.hash_table import HashTable
from vgengine.pool import Pool
from vgengine.prng import Xorshift32
from vgengine.sort import quicksort
from vgengine.strings import parse_float

keys = BitArray(50)
keys.set(5)
assert keys[5] and keys.find_first_zero() == 0

table = HashTable(16)  # capacity must be a power of two; the table never grows
table.insert(42, "answer")
assert table[42] == "answer" and 42 in table

pool = Pool(4)
slot = pool.insert("item")
assert pool.is_occupied(slot)

rng = Xorshift32(0xA5A5A5A5)
roll = rng.randint(1, 6)

values = [3, 1, 2]
quicksort(values)
assert values == [1, 2, 3]

assert parse_float("-1.5") == -1.5
assert parse_float("abc") == 0.0  # invalid text gives zero rather than an error
```

## What it does not do

- It does not open a window or show anything on screen: the framebuffer
  lives in memory, and displaying `to_bytes()` is up to the caller.
- It does not load fonts or draw text.
- It does not read input devices; `InputState` is only a container.
- It has no command-line program.
# shapeworks

A small 3D modelling workspace kept in plain text files, with an
interactive editor shell and a set of geometry helpers.

## The workspace directory

A workspace directory holds four files, read in this order:

- `points.txt`: points (`Point`) and plane point groups (`PlanePoints`)
- `transformations.txt`: `Translate`, `Rotate` and `Scale`
- `shapes.txt`: shapes (`Sphere`), which may refer to transformations
- `animations.txt`: must be present; it may only hold blank lines

Each object is a class name and an identifier, followed by one
`function: argument` line per property, and closed by a blank line:

```
Point: tip
	x: 10
	y: 0
	z: -2.5

Translate: lift
	x: 0
	y: 5
	z: 0

Sphere: ball
	x: 0
	y: 0
	z: 0
	radius: 3
	visible: 1
	transformations: lift
```

Rules of the format:

- Class names, identifiers and function names are ASCII letters and
  digits; each word is at most 256 characters.
- Numbers are decimal with an optional leading sign (`-2.5`, `+4`);
  exponents are not accepted.
- `points`, `transformations` and `shapes` take comma-separated
  identifiers of objects defined earlier. `PlanePoints` only accepts
  points that come before it in `points.txt`.
- `type` on a `PlanePoints` is clamped to 0 (XY), 1 (XZ) or 2 (YZ).
- `Rotate` takes an `angle` in degrees about the axis `x`, `y`, `z`.
- An identifier may be declared only once per kind of object.

A malformed file raises `shapeworks.parser.ParseError`, whose message
gives the line and column where reading stopped, e.g.
`Line 3, column 4: Unrecognized function name.`

## Installing

```
pip install .
```

## The editor shell

```
shapeworks path/to/workspace
```

Without a directory the shell starts with an empty workspace; use
`load DIRECTORY` to open one. Commands (type `help` for the list):

- Workspace: `load DIRECTORY`, `save`, `backup` (writes to `backup/`
  inside the directory), `reset`, `quit`
- Objects: `new point|plane|sphere|translate|rotate|scale`,
  `mode points|shapes|transformations`, `next`, `previous`,
  `move DX DY DZ`, `size DX DY DZ`, `toggle`, `set FUNCTION VALUE`,
  `transform SHAPE TRANSFORMATION`, `attach_point POINT TARGET`,
  `attach_shape SHAPE TARGET`, `print`, `selected`
- Image calibration: `ratio X1 Y1 X2 Y2 MM`, `origin X Y`,
  `midpoint X1 Y1 X2 Y2`, `mm X1 Y1 X2 Y2`, `relative X Y`
- Geometry: `trig ANGLE`, `atan2 VERTICAL HORIZONTAL`,
  `distance X1 Y1 Z1 X2 Y2 Z2`, `vector X1 Y1 Z1 X2 Y2 Z2`,
  `angle X1 Y1 Z1 X2 Y2 Z2`, `cross X1 Y1 Z1 X2 Y2 Z2`,
  `rotation X1 Y1 Z1 X2 Y2 Z2`, `rotation3 FX FY FZ OX OY OZ TX TY TZ`

`save` and `backup` rewrite `points.txt`, `shapes.txt` and
`transformations.txt`, and create an empty `animations.txt` if there
is none.

## Using the library

```python
from shapeworks.workspace import Workspace
from shapeworks.parser import load_directory

workspace = Workspace()
load_directory(workspace, "path/to/workspace")
print(workspace.overview())
ball = workspace.find_shape("ball")
print(ball.model_matrix())
```

- `shapeworks.vectors.Vec3`: a mutable vector whose `add`, `multiply`,
  `cross` and `normalize` change it in place and return it.
- `shapeworks.matrices.Mat4`: an immutable 4x4 matrix with
  `translation`, `rotation`, `scaling`, `camera`, `perspective` and
  `@` for multiplication.
- `shapeworks.points`, `shapeworks.shapes`, `shapeworks.transformations`:
  the workspace objects; `Sphere.build_mesh()` returns its `Mesh`.
- `shapeworks.printer.WorkspacePrinter`: writes objects in the file
  format above.
- `shapeworks.solver`: `ImageCalibration` and the geometry helpers.

```python
from shapeworks.solver import distance_between_points, cross_product

distance_between_points((0, 0, 0), (3, 4, 0))   # 5.0
cross_product((1, 0, 0), (0, 1, 0))              # Vec3(x=0.0, y=0.0, z=1.0)
```

## What it does not do

- It draws nothing: there is no 3D view, grid or camera window. The
  matrices and sphere meshes are computed but not rendered.
- The only shape is `Sphere`; boxes, cones, cylinders, compound shapes
  and lofts are not available.
- Animation frames are not supported: any content in `animations.txt`
  other than blank lines is an error, and nothing is played.
- The workspace cannot be compiled to source code.

## Running the tests

```
pip install ".[test]"
pytest
```
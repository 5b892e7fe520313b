"""An interactive command shell for editing a workspace directory."""

from __future__ import annotations

import argparse
import cmd
import sys
from typing import Callable, Dict, List, Optional, Sequence, TextIO

from .functions import Function, FunctionKind
from .parser import ParseError, load_directory
from .points import PlanePoints, Point
from .shapes import Sphere
from .solver import (
    ImageCalibration,
    angle_between_vectors,
    cross_product,
    distance_between_points,
    four_quadrant_inverse_tangent,
    rotation_parameters,
    rotation_parameters_from_points,
    trigonometric_ratios,
    vector_between_points,
)
from .transformations import Rotate, Scale, Translate
from .vectors import Vec3
from .workspace import Mode, Workspace

_FACTORIES: Dict[str, Callable[[], object]] = {
    "point": Point,
    "plane": PlanePoints,
    "sphere": Sphere,
    "translate": Translate,
    "rotate": Rotate,
    "scale": Scale,
}


def _n(value: float) -> str:
    return f"{value:g}"


def _vector_text(vector: Vec3) -> str:
    return f"({_n(vector.x)}, {_n(vector.y)}, {_n(vector.z)})"


class _UsageError(ValueError):
    """A command was given the wrong arguments."""


def _floats(arg: str, count: int, usage: str) -> List[float]:
    words = arg.split()
    if len(words) != count:
        raise _UsageError(f"Usage: {usage}")
    try:
        return [float(word) for word in words]
    except ValueError:
        raise _UsageError(f"Usage: {usage}") from None


def _words(arg: str, count: int, usage: str) -> List[str]:
    words = arg.split()
    if len(words) != count:
        raise _UsageError(f"Usage: {usage}")
    return words


class EditorShell(cmd.Cmd):
    """Line commands that create, select, change, print and save workspace objects."""

    prompt = "shapeworks> "

    def __init__(
        self,
        workspace: Optional[Workspace] = None,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
    ) -> None:
        super().__init__(stdin=stdin, stdout=stdout)
        if stdin is not None:
            self.use_rawinput = False
        self.workspace = workspace if workspace is not None else Workspace()
        self.calibration = ImageCalibration()

    def _say(self, text: str) -> None:
        self.stdout.write(text + "\n")

    def onecmd(self, line: str) -> bool:
        try:
            return bool(super().onecmd(line))
        except _UsageError as error:
            self._say(str(error))
            return False

    def emptyline(self) -> bool:
        return False

    def default(self, line: str) -> bool:
        self._say(f"Unknown command: {line.split()[0] if line.split() else line}")
        return False

    # Workspace directory

    def load(self, directory: str) -> bool:
        """Load ``directory`` into the workspace; report the outcome."""
        try:
            load_directory(self.workspace, directory)
        except ParseError as error:
            self._say(str(error))
            self._say("\nParser has encountered an error.")
            return False
        self._say(
            f'\nParser has parsed directory "{directory}".\n'
            f"Allocated {len(self.workspace.points)} points, "
            f"{len(self.workspace.shapes)} shapes, and "
            f"{len(self.workspace.transformations)} transformations."
        )
        return True

    def do_load(self, arg: str) -> bool:
        """load DIRECTORY: change or reload the workspace directory."""
        (directory,) = _words(arg, 1, "load DIRECTORY")
        self.load(directory)
        return False

    def do_save(self, arg: str) -> bool:
        """save: write the workspace files to its directory."""
        written = self.workspace.save()
        self._say(f"Saved {len(written)} files." if written else "No workspace directory.")
        return False

    def do_backup(self, arg: str) -> bool:
        """backup: write the workspace files to the backup directory."""
        written = self.workspace.backup()
        self._say(f"Backed up {len(written)} files." if written else "No workspace directory.")
        return False

    def do_reset(self, arg: str) -> bool:
        """reset: remove every object from the workspace."""
        self.workspace.reset()
        return False

    # Creation and selection

    def do_new(self, arg: str) -> bool:
        """new KIND: add a point, plane, sphere, translate, rotate or scale."""
        (kind,) = _words(arg, 1, "new " + "|".join(_FACTORIES))
        factory = _FACTORIES.get(kind.lower())
        if factory is None:
            raise _UsageError("Usage: new " + "|".join(_FACTORIES))
        obj = factory()
        if isinstance(obj, Point):
            self.workspace.new_point(obj)
        elif isinstance(obj, Sphere):
            self.workspace.new_shape(obj)
        else:
            self.workspace.new_transformation(obj)  # type: ignore[arg-type]
        self._say(f"Created {obj.identifier}.")  # type: ignore[attr-defined]
        return False

    def do_mode(self, arg: str) -> bool:
        """mode points|shapes|transformations: choose what selection acts on."""
        usage = "mode points|shapes|transformations"
        (name,) = _words(arg, 1, usage)
        try:
            mode = Mode[name.upper()]
        except KeyError:
            raise _UsageError(f"Usage: {usage}") from None
        self.workspace.set_mode(mode)
        return False

    def do_next(self, arg: str) -> bool:
        """next: select the next object."""
        self.workspace.select_next()
        return False

    def do_previous(self, arg: str) -> bool:
        """previous: select the previous object."""
        self.workspace.select_previous()
        return False

    def do_move(self, arg: str) -> bool:
        """move DX DY DZ: move the selected object."""
        x, y, z = _floats(arg, 3, "move DX DY DZ")
        self.workspace.move_selected(Vec3(x, y, z))
        return False

    def do_size(self, arg: str) -> bool:
        """size DX DY DZ: grow the selected shape."""
        x, y, z = _floats(arg, 3, "size DX DY DZ")
        self.workspace.size_selected(Vec3(x, y, z))
        return False

    def do_toggle(self, arg: str) -> bool:
        """toggle: show or hide the selected shape."""
        self.workspace.toggle_selected_visibility()
        return False

    def do_set(self, arg: str) -> bool:
        """set FUNCTION VALUE: apply a numeric function to the selected object."""
        usage = "set FUNCTION VALUE"
        name, text = _words(arg, 2, usage)
        try:
            function = Function.from_word(name)
            value = float(text)
        except ValueError:
            raise _UsageError(f"Usage: {usage}") from None
        if function.kind is not FunctionKind.NUMERIC:
            raise _UsageError(f"{function.value} does not take a number.")
        if not self.workspace.apply_to_selected(function, value):
            self._say(f"{function.value} does not apply to the selection.")
        return False

    def _apply_identifiers(self, function: Function, arg: str, usage: str) -> None:
        first, second = _words(arg, 2, usage)
        if not self.workspace.apply_from_identifiers(function, first, second):
            self._say("Could not apply.")

    def do_transform(self, arg: str) -> bool:
        """transform SHAPE TRANSFORMATION: transform a shape with a transformation."""
        self._apply_identifiers(
            Function.TRANSFORMATIONS, arg, "transform SHAPE TRANSFORMATION"
        )
        return False

    def do_attach_shape(self, arg: str) -> bool:
        """attach_shape SHAPE TARGET: attach a shape to another shape."""
        self._apply_identifiers(Function.SHAPES, arg, "attach_shape SHAPE TARGET")
        return False

    def do_attach_point(self, arg: str) -> bool:
        """attach_point POINT TARGET: attach a point to a plane-point group."""
        self._apply_identifiers(Function.POINTS, arg, "attach_point POINT TARGET")
        return False

    # Printing

    def do_print(self, arg: str) -> bool:
        """print: print every object."""
        self.workspace.print_all(self.stdout)
        return False

    def do_selected(self, arg: str) -> bool:
        """selected: print the selected object."""
        self.workspace.print_selected(self.stdout)
        return False

    # Solver

    def do_ratio(self, arg: str) -> bool:
        """ratio X1 Y1 X2 Y2 MM: calibrate mm per pixel from a reference line."""
        values = _floats(arg, 5, "ratio X1 Y1 X2 Y2 MM")
        ratio = self.calibration.set_distance_ratio(*values)
        self._say("ratio = undefined mm/px" if ratio is None else f"ratio = {_n(ratio)} mm/px")
        return False

    def _report_origin(self) -> None:
        x, y = self.calibration.origin
        self._say(f"Set image origin to ({_n(x)} px, {_n(y)} px)")

    def do_origin(self, arg: str) -> bool:
        """origin X Y: set the image origin to absolute pixel coordinates."""
        self.calibration.set_origin(*_floats(arg, 2, "origin X Y"))
        self._report_origin()
        return False

    def do_midpoint(self, arg: str) -> bool:
        """midpoint X1 Y1 X2 Y2: set the image origin to the midpoint of a line."""
        self.calibration.set_origin_to_midpoint(*_floats(arg, 4, "midpoint X1 Y1 X2 Y2"))
        self._report_origin()
        return False

    def do_mm(self, arg: str) -> bool:
        """mm X1 Y1 X2 Y2: convert an image distance to millimetres."""
        values = _floats(arg, 4, "mm X1 Y1 X2 Y2")
        try:
            distance = self.calibration.distance_in_mm(*values)
        except ValueError:
            self._say("Please set the mm/px ratio.")
            return False
        self._say(f"The distance from (x1, y1) to (x2, y2) = {_n(distance)} mm")
        return False

    def do_relative(self, arg: str) -> bool:
        """relative X Y: image coordinates relative to the image origin."""
        x, y, unit = self.calibration.relative_coordinates(*_floats(arg, 2, "relative X Y"))
        self._say(f"The relative coordinate is ({_n(x)} {unit}, {_n(y)} {unit})")
        return False

    def do_trig(self, arg: str) -> bool:
        """trig ANGLE: trigonometric ratios of an angle in degrees."""
        (angle,) = _floats(arg, 1, "trig ANGLE")
        for name, value in trigonometric_ratios(angle).items():
            self._say(f"{name}({_n(angle)}) = {_n(value)}")
        return False

    def do_atan2(self, arg: str) -> bool:
        """atan2 VERTICAL HORIZONTAL: four-quadrant inverse tangent in degrees."""
        vertical, horizontal = _floats(arg, 2, "atan2 VERTICAL HORIZONTAL")
        angle = four_quadrant_inverse_tangent(vertical, horizontal)
        self._say(f"atan2({_n(vertical)}, {_n(horizontal)}) = {_n(angle)}")
        return False

    def do_distance(self, arg: str) -> bool:
        """distance X1 Y1 Z1 X2 Y2 Z2: distance between two points."""
        values = _floats(arg, 6, "distance X1 Y1 Z1 X2 Y2 Z2")
        self._say(f"distance = {_n(distance_between_points(values[:3], values[3:]))}")
        return False

    def do_vector(self, arg: str) -> bool:
        """vector X1 Y1 Z1 X2 Y2 Z2: vector from the first point to the second."""
        values = _floats(arg, 6, "vector X1 Y1 Z1 X2 Y2 Z2")
        vector = vector_between_points(values[:3], values[3:])
        self._say(
            "The vector originating from (x1, y1, z1) pointing towards (x2, y2, z2) = "
            + _vector_text(vector)
        )
        return False

    def do_angle(self, arg: str) -> bool:
        """angle X1 Y1 Z1 X2 Y2 Z2: angle between two vectors in degrees."""
        values = _floats(arg, 6, "angle X1 Y1 Z1 X2 Y2 Z2")
        self._say(f"angle = {_n(angle_between_vectors(values[:3], values[3:]))}")
        return False

    def do_cross(self, arg: str) -> bool:
        """cross X1 Y1 Z1 X2 Y2 Z2: cross product of two vectors."""
        values = _floats(arg, 6, "cross X1 Y1 Z1 X2 Y2 Z2")
        vector = cross_product(values[:3], values[3:])
        self._say(f"(x1, y1, z1) cross (x2, y2, z2) = {_vector_text(vector)}")
        return False

    def _report_rotation(self, angle: float, axis: Vec3) -> None:
        self._say(f"angle = {_n(angle)}")
        self._say(f"(x, y, z) = {_vector_text(axis)}")

    def do_rotation(self, arg: str) -> bool:
        """rotation X1 Y1 Z1 X2 Y2 Z2: rotation that turns one vector to another."""
        values = _floats(arg, 6, "rotation X1 Y1 Z1 X2 Y2 Z2")
        self._report_rotation(*rotation_parameters(values[:3], values[3:]))
        return False

    def do_rotation3(self, arg: str) -> bool:
        """rotation3 FROM(3) ORIGIN(3) TO(3): rotation defined by three points."""
        values = _floats(arg, 9, "rotation3 FX FY FZ OX OY OZ TX TY TZ")
        self._report_rotation(
            *rotation_parameters_from_points(values[:3], values[3:6], values[6:])
        )
        return False

    # Leaving

    def do_quit(self, arg: str) -> bool:
        """quit: leave the editor."""
        return True

    def do_EOF(self, arg: str) -> bool:
        """Leave the editor at the end of input."""
        return True


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the editor shell, optionally loading a workspace directory first."""
    parser = argparse.ArgumentParser(prog="shapeworks", description="Edit a workspace.")
    parser.add_argument("directory", nargs="?", help="workspace directory to load")
    args = parser.parse_args(argv)
    shell = EditorShell(stdin=sys.stdin, stdout=sys.stdout)
    if args.directory is not None:
        shell.load(args.directory)
    else:
        shell._say("Use 'load DIRECTORY' to open a workspace directory.")
    shell.cmdloop()
    return 0


if __name__ == "__main__":
    sys.exit(main())
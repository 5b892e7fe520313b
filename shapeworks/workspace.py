"""The collection of points, shapes and transformations being edited."""

from __future__ import annotations

import enum
import sys
from pathlib import Path
from typing import Dict, List, Optional, TextIO, Union

from .functions import Function
from .points import Point
from .printer import WorkspacePrinter
from .shapes import Shape
from .transformations import Transformation
from .vectors import Vec3

WorkspaceObject = Union[Point, Shape, Transformation]

POINTS_FILE = "points.txt"
SHAPES_FILE = "shapes.txt"
TRANSFORMATIONS_FILE = "transformations.txt"
ANIMATIONS_FILE = "animations.txt"
BACKUP_DIRECTORY = "backup"


class Mode(enum.IntEnum):
    """Which kind of object the selection commands act on."""

    POINTS = 0
    SHAPES = 1
    TRANSFORMATIONS = 2


class Workspace:
    """Holds every object of a workspace directory and the current selection."""

    def __init__(self) -> None:
        self.directory = ""
        self.points: List[Point] = []
        self.shapes: List[Shape] = []
        self.transformations: List[Transformation] = []
        self.points_by_identifier: Dict[str, Point] = {}
        self.shapes_by_identifier: Dict[str, Shape] = {}
        self.transformations_by_identifier: Dict[str, Transformation] = {}
        self.mode = Mode.POINTS
        self._indices: Dict[Mode, int] = {mode: 0 for mode in Mode}
        self._sequence: Dict[Mode, int] = {mode: 0 for mode in Mode}

    def __repr__(self) -> str:
        return f"Workspace({self.directory!r}, {self.overview()!r})"

    # Selection

    def set_mode(self, mode: int) -> Mode:
        """Switch the selection mode, clamping out-of-range values."""
        clamped = min(max(int(mode), Mode.POINTS), Mode.TRANSFORMATIONS)
        self.mode = Mode(clamped)
        return self.mode

    def _collection(self, mode: Mode) -> list:
        return {
            Mode.POINTS: self.points,
            Mode.SHAPES: self.shapes,
            Mode.TRANSFORMATIONS: self.transformations,
        }[mode]

    @property
    def selected_index(self) -> int:
        """Index of the selected object in the current mode's collection."""
        return self._indices[self.mode]

    def select_next(self) -> None:
        """Select the next object of the current kind, wrapping around."""
        size = len(self._collection(self.mode))
        if size > 0:
            self._indices[self.mode] = (self._indices[self.mode] + 1) % size

    def select_previous(self) -> None:
        """Select the previous object of the current kind, wrapping around."""
        size = len(self._collection(self.mode))
        if size > 0:
            self._indices[self.mode] = (self._indices[self.mode] - 1) % size

    def selected(self) -> Optional[WorkspaceObject]:
        """The selected object of the current kind, or None if there is none."""
        collection = self._collection(self.mode)
        if not collection:
            return None
        return collection[self._indices[self.mode]]

    def _selected_shape(self) -> Optional[Shape]:
        if self.mode is Mode.SHAPES and self.shapes:
            return self.shapes[self._indices[Mode.SHAPES]]
        return None

    def move_selected(self, offset: Vec3) -> None:
        """Move the selected object by ``offset``."""
        obj = self.selected()
        if obj is not None:
            obj.add_position(offset)

    def size_selected(self, amount: Vec3) -> None:
        """Grow the selected shape by ``amount``; only shapes have a size."""
        shape = self._selected_shape()
        if shape is not None:
            shape.add_size(amount)

    def toggle_selected_visibility(self) -> None:
        """Show the selected shape if hidden, hide it if shown."""
        shape = self._selected_shape()
        if shape is not None:
            shape.is_visible = not shape.is_visible

    def transform_selected_shape(self, transformation: Transformation) -> None:
        """Append ``transformation`` to the selected shape."""
        shape = self._selected_shape()
        if shape is not None:
            shape.add_transformation(transformation)

    # Lookup

    def find_point(self, identifier: str) -> Optional[Point]:
        return self.points_by_identifier.get(identifier)

    def find_shape(self, identifier: str) -> Optional[Shape]:
        return self.shapes_by_identifier.get(identifier)

    def find_transformation(self, identifier: str) -> Optional[Transformation]:
        return self.transformations_by_identifier.get(identifier)

    # Creation

    def _fix_identifier(self, obj: WorkspaceObject, registry: dict, mode: Mode) -> None:
        while True:
            self._sequence[mode] += 1
            obj.set_identifier_from_sequence(self._sequence[mode])
            if obj.identifier not in registry:
                return

    def new_point(self, point: Point) -> Point:
        """Add a point under a fresh identifier."""
        self._fix_identifier(point, self.points_by_identifier, Mode.POINTS)
        self.add_parsed_point(point)
        self.points_by_identifier[point.identifier] = point
        return point

    def new_shape(self, shape: Shape) -> Shape:
        """Add a shape under a fresh identifier."""
        self._fix_identifier(shape, self.shapes_by_identifier, Mode.SHAPES)
        self.add_parsed_shape(shape)
        self.shapes_by_identifier[shape.identifier] = shape
        return shape

    def new_transformation(self, transformation: Transformation) -> Transformation:
        """Add a transformation under a fresh identifier."""
        self._fix_identifier(
            transformation, self.transformations_by_identifier, Mode.TRANSFORMATIONS
        )
        self.transformations_by_identifier[transformation.identifier] = transformation
        self.transformations.append(transformation)
        return transformation

    def add_parsed_point(self, point: Point) -> None:
        """Append a point without registering its identifier."""
        point.workspace = self
        point.workspace_index = len(self.points)
        self.points.append(point)

    def add_parsed_shape(self, shape: Shape) -> None:
        """Append a shape without registering its identifier."""
        shape.workspace = self
        shape.workspace_index = len(self.shapes)
        self.shapes.append(shape)

    def add_parsed_transformation(self, transformation: Transformation) -> None:
        """Append a transformation without registering its identifier."""
        self.transformations.append(transformation)

    # Functions

    def apply_to_selected(self, function: Function, argument: float) -> bool:
        """Apply a numeric function to the selected object."""
        obj = self.selected()
        if obj is None:
            return False
        return obj.apply(function, argument)

    def apply_from_identifiers(self, function: Function, first: str, second: str) -> bool:
        """Apply a list function between two objects named by identifier.

        For ``points`` and ``shapes`` the element ``first`` is attached to the
        receiver ``second``; for ``transformations`` the shape ``first`` is
        transformed with ``second``.
        """
        if function is Function.POINTS:
            point = self.find_point(second)
            return point is not None and point.apply_list(function, first)
        if function is Function.SHAPES:
            shape = self.find_shape(second)
            return shape is not None and shape.apply_list(function, first)
        if function is Function.TRANSFORMATIONS:
            shape = self.find_shape(first)
            return shape is not None and shape.apply_list(function, second)
        return False

    # Files

    def _write_files(self, target: Path) -> List[Path]:
        target.mkdir(parents=True, exist_ok=True)
        written = []
        for name, objects in (
            (POINTS_FILE, self.points),
            (SHAPES_FILE, self.shapes),
            (TRANSFORMATIONS_FILE, self.transformations),
        ):
            path = target / name
            with path.open("w", encoding="utf-8") as handle:
                printer = WorkspacePrinter(handle)
                for obj in objects:
                    printer.print_object(obj)
            written.append(path)
        animations = target / ANIMATIONS_FILE
        if not animations.exists():
            animations.write_text("\n", encoding="utf-8")
            written.append(animations)
        return written

    def save(self) -> List[Path]:
        """Write the workspace files back to its directory; return the paths written."""
        if not self.directory:
            return []
        return self._write_files(Path(self.directory))

    def backup(self) -> List[Path]:
        """Write the workspace files to the backup subdirectory."""
        if not self.directory:
            return []
        return self._write_files(Path(self.directory) / BACKUP_DIRECTORY)

    # Printing

    def overview(self) -> str:
        """One line counting the objects of each kind."""
        return (
            f"// Workspace: {len(self.points)} points, {len(self.shapes)} shapes, "
            f"and {len(self.transformations)} transformations."
        )

    def print_all(self, stream: Optional[TextIO] = None) -> None:
        """Print the overview followed by every object."""
        out = stream if stream is not None else sys.stdout
        printer = WorkspacePrinter(out)
        out.write(self.overview() + "\n")
        for heading, objects in (
            ("Points", self.points),
            ("Transformations", self.transformations),
            ("Shapes", self.shapes),
        ):
            out.write(f"\n// {heading}\n")
            for obj in objects:
                printer.print_object(obj)

    def print_selected(self, stream: Optional[TextIO] = None) -> None:
        """Print the overview followed by the selected object."""
        out = stream if stream is not None else sys.stdout
        out.write(self.overview() + "\n")
        obj = self.selected()
        if obj is None:
            return
        heading = {
            Mode.POINTS: "Point",
            Mode.SHAPES: "Shape",
            Mode.TRANSFORMATIONS: "Transformation",
        }[self.mode]
        out.write(f"\n// {heading} [{self.selected_index}]\n")
        WorkspacePrinter(out).print_object(obj)

    def reset(self) -> None:
        """Remove every object and return the selection to its initial state."""
        self.points.clear()
        self.shapes.clear()
        self.transformations.clear()
        self.points_by_identifier.clear()
        self.shapes_by_identifier.clear()
        self.transformations_by_identifier.clear()
        self.mode = Mode.POINTS
        self._indices = {mode: 0 for mode in Mode}
        self._sequence = {mode: 0 for mode in Mode}
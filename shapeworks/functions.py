"""Names of the functions that workspace files apply to objects."""

from __future__ import annotations

import enum


class FunctionKind(enum.Enum):
    """What kind of argument a function takes."""

    NUMERIC = "numeric"
    LIST = "list"
    INTERPOLATION = "interpolation"


class Function(enum.Enum):
    """A function name, valued by the word that names it in workspace files."""

    X = "x"
    Y = "y"
    Z = "z"
    LENGTH = "length"
    WIDTH = "width"
    HEIGHT = "height"
    RADIUS = "radius"
    ANGLE = "angle"
    TIME = "time"
    TYPE = "type"
    VISIBLE = "visible"
    POINTS = "points"
    TRANSFORMATIONS = "transformations"
    SHAPES = "shapes"
    SET_TO = "setTo"
    LINEAR_TO = "linearTo"

    @property
    def kind(self) -> FunctionKind:
        """The kind of argument this function takes."""
        if self in _LIST_FUNCTIONS:
            return FunctionKind.LIST
        if self in _INTERPOLATION_FUNCTIONS:
            return FunctionKind.INTERPOLATION
        return FunctionKind.NUMERIC

    @classmethod
    def from_word(cls, word: str) -> Function:
        """Return the first function whose name starts ``word``."""
        for function in cls:
            if word.startswith(function.value):
                return function
        raise ValueError(f"unrecognized function name: {word!r}")


_LIST_FUNCTIONS = frozenset({Function.POINTS, Function.TRANSFORMATIONS, Function.SHAPES})
_INTERPOLATION_FUNCTIONS = frozenset({Function.SET_TO, Function.LINEAR_TO})
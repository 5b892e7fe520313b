"""Reads workspace directories of point, shape and transformation files."""

from __future__ import annotations

import enum
from pathlib import Path
from typing import Callable, Dict, Optional, Tuple, Union

from .functions import Function, FunctionKind
from .points import PlanePoints, Point
from .shapes import Shape, Sphere
from .transformations import Rotate, Scale, Transformation, Translate
from .workspace import (
    ANIMATIONS_FILE,
    POINTS_FILE,
    SHAPES_FILE,
    TRANSFORMATIONS_FILE,
    Workspace,
)

MAX_WORD_LENGTH = 256
"""Longest class name, identifier, function name or argument accepted."""

_WHITESPACE = frozenset(" \t\n\v\f\r")

ParsedObject = Union[Point, Shape, Transformation]


class ParseError(Exception):
    """A workspace file could not be read; carries the line and column."""

    def __init__(self, message: str, line: int = 0, column: int = 0) -> None:
        super().__init__(message)
        self.message = message
        self.line = line
        self.column = column

    def __str__(self) -> str:
        return f"Line {self.line}, column {self.column}: {self.message}"


class _State(enum.Enum):
    CLASS_NAME = enum.auto()
    IDENTIFIER = enum.auto()
    FUNCTION_NAME = enum.auto()
    FUNCTION_ARGUMENT = enum.auto()


class _Kind(enum.Enum):
    SHAPE = enum.auto()
    POINT = enum.auto()
    PLANE_POINTS = enum.auto()
    TRANSFORMATION = enum.auto()


_CLASSES: Tuple[Tuple[str, _Kind, Callable[[], ParsedObject]], ...] = (
    ("Sphere", _Kind.SHAPE, Sphere),
    ("Point", _Kind.POINT, Point),
    ("PlanePoints", _Kind.PLANE_POINTS, PlanePoints),
    ("Translate", _Kind.TRANSFORMATION, Translate),
    ("Rotate", _Kind.TRANSFORMATION, Rotate),
    ("Scale", _Kind.TRANSFORMATION, Scale),
)


def _is_alnum(char: str) -> bool:
    return char.isascii() and char.isalnum()


def parse_number(word: str) -> float:
    """Read a decimal number with an optional leading sign; no exponents.

    An empty word reads as zero.
    """
    whole = 0.0
    fraction = 0.0
    decimals = 1.0
    factor = 1.0
    seen_sign_or_digit = False
    seen_point = False
    for char in word:
        if char in "+-":
            if char == "-":
                factor = -factor
            if seen_sign_or_digit or seen_point:
                raise ValueError(f"misplaced sign in number: {word!r}")
            seen_sign_or_digit = True
        elif char == ".":
            if seen_point:
                raise ValueError(f"more than one decimal point in number: {word!r}")
            seen_point = True
        elif char.isascii() and char.isdigit():
            if seen_point:
                fraction = fraction * 10 + int(char)
                decimals *= 10
            else:
                whole = whole * 10 + int(char)
            seen_sign_or_digit = True
        else:
            raise ValueError(f"invalid character in number: {word!r}")
    return (whole + fraction / decimals) * factor


class Parser:
    """Fills a workspace from the text of its files."""

    def __init__(self, workspace: Workspace) -> None:
        self.workspace = workspace
        self._line = 1
        self._column = 0
        self._state = _State.CLASS_NAME
        self._word = ""
        self._kind: Optional[_Kind] = None
        self._current: Optional[ParsedObject] = None
        self._function: Optional[Function] = None

    # Entry points

    def parse_directory(self, directory: Union[str, Path]) -> Workspace:
        """Parse the points, transformations, shapes and animations files."""
        root = Path(directory)
        for name in (POINTS_FILE, TRANSFORMATIONS_FILE, SHAPES_FILE, ANIMATIONS_FILE):
            self.parse_file(root / name)
        self.workspace.directory = str(directory)
        return self.workspace

    def parse_file(self, path: Union[str, Path]) -> None:
        """Parse one workspace file."""
        try:
            data = Path(path).read_bytes()
        except OSError as exc:
            raise ParseError("File could not be opened.", 0, 0) from exc
        self.parse_text(data.decode("latin-1"))

    def parse_text(self, text: str) -> None:
        """Parse the contents of one workspace file."""
        self._line = 1
        self._column = 0
        self._state = _State.CLASS_NAME
        self._word = ""
        for char in text:
            if char == "\n":
                self._column = 0
                self._line += 1
            else:
                self._column += 1
            self._step(char)
        if self._state is _State.FUNCTION_NAME and not self._word:
            if not self._finalize_class():
                raise self._error("Can not finalize redeclaration.")

    # State machine

    def _error(self, message: str) -> ParseError:
        return ParseError(message, self._line, self._column)

    def _append(self, char: str, what: str) -> None:
        if len(self._word) >= MAX_WORD_LENGTH:
            raise self._error(f"{what} is too long.")
        self._word += char

    def _step(self, char: str) -> None:
        handler = {
            _State.CLASS_NAME: self._read_class_name,
            _State.IDENTIFIER: self._read_identifier,
            _State.FUNCTION_NAME: self._read_function_name,
            _State.FUNCTION_ARGUMENT: self._read_function_argument,
        }[self._state]
        handler(char)

    def _read_class_name(self, char: str) -> None:
        if _is_alnum(char):
            self._append(char, "Class name")
        elif char == ":":
            if not self._process_class_name():
                raise self._error("Unrecognized class name.")
            self._state = _State.IDENTIFIER
            self._word = ""
        elif char == "\n" and not self._word:
            self._word = ""
        else:
            raise self._error("Class name contains invalid character.")

    def _read_identifier(self, char: str) -> None:
        if _is_alnum(char):
            self._append(char, "Class identifier")
        elif char == "\n":
            self._process_identifier()
            self._state = _State.FUNCTION_NAME
            self._word = ""
        elif char in _WHITESPACE:
            if self._word:
                raise self._error("Identifier can not contain whitespace.")
        else:
            raise self._error("Class identifier contains invalid character.")

    def _read_function_name(self, char: str) -> None:
        if _is_alnum(char):
            self._append(char, "Function name")
        elif char == ":":
            try:
                self._function = Function.from_word(self._word)
            except ValueError:
                raise self._error("Unrecognized function name.") from None
            self._state = _State.FUNCTION_ARGUMENT
            self._word = ""
        elif char == "\n" and not self._word:
            if not self._finalize_class():
                raise self._error("Can not finalize redeclaration.")
            self._state = _State.CLASS_NAME
        elif char in _WHITESPACE:
            if self._word:
                raise self._error("Function name can not contain whitespace.")
        else:
            raise self._error("Function name contains invalid characters.")

    def _read_function_argument(self, char: str) -> None:
        kind = self._function.kind if self._function is not None else None
        if _is_alnum(char) or char in "+-.":
            self._append(char, "Function argument")
        elif char == "\n":
            if not self._process_function_argument():
                raise self._error("Invalid argument to function.")
            self._state = _State.FUNCTION_NAME
            self._word = ""
        elif char == "," and kind is FunctionKind.LIST:
            if not self._process_function_argument():
                raise self._error("Invalid argument to function.")
            self._word = ""
        elif char == "," and kind is FunctionKind.INTERPOLATION:
            self._append(char, "Function argument")
        elif char in _WHITESPACE:
            if self._word:
                raise self._error("Function argument can not contain whitespace.")
        else:
            raise self._error("Function argument contains invalid characters.")

    # Processing of complete words

    def _process_class_name(self) -> bool:
        for name, kind, factory in _CLASSES:
            if self._word.startswith(name):
                obj = factory()
                if kind is _Kind.SHAPE:
                    self.workspace.add_parsed_shape(obj)  # type: ignore[arg-type]
                elif kind is _Kind.TRANSFORMATION:
                    self.workspace.add_parsed_transformation(obj)  # type: ignore[arg-type]
                else:
                    self.workspace.add_parsed_point(obj)  # type: ignore[arg-type]
                self._kind = kind
                self._current = obj
                return True
        return False

    def _process_identifier(self) -> None:
        if self._current is not None:
            self._current.identifier = self._word

    def _process_function_argument(self) -> bool:
        if self._function is None or self._current is None:
            return False
        kind = self._function.kind
        if kind is FunctionKind.NUMERIC:
            try:
                value = parse_number(self._word)
            except ValueError:
                return False
            return self._current.apply(self._function, value)
        if kind is FunctionKind.LIST:
            if self._kind in (_Kind.SHAPE, _Kind.PLANE_POINTS):
                return self._current.apply_list(  # type: ignore[union-attr]
                    self._function, self._word
                )
            return False
        # Interpolation functions belong to animation frames, which are not read.
        return False

    def _registry(self) -> Optional[Dict[str, ParsedObject]]:
        if self._kind is _Kind.SHAPE:
            return self.workspace.shapes_by_identifier  # type: ignore[return-value]
        if self._kind in (_Kind.POINT, _Kind.PLANE_POINTS):
            return self.workspace.points_by_identifier  # type: ignore[return-value]
        if self._kind is _Kind.TRANSFORMATION:
            return self.workspace.transformations_by_identifier  # type: ignore[return-value]
        return None

    def _finalize_class(self) -> bool:
        registry = self._registry()
        if registry is None or self._current is None:
            return True
        identifier = self._current.identifier
        if identifier in registry:
            return False
        registry[identifier] = self._current
        return True


def load_directory(workspace: Workspace, directory: Union[str, Path]) -> Workspace:
    """Replace the workspace's contents with those of ``directory``.

    On a parse error the workspace is left empty and the error is raised.
    """
    workspace.reset()
    try:
        Parser(workspace).parse_directory(directory)
    except ParseError:
        workspace.directory = ""
        workspace.reset()
        raise
    return workspace
import math

import pytest

from shapeworks.functions import Function
from shapeworks.matrices import Mat4
from shapeworks.shapes import (
    DEFAULT_COLOR,
    DEFAULT_SELECTED_COLOR,
    Shape,
    Sphere,
)
from shapeworks.transformations import Scale, Translate
from shapeworks.vectors import Vec3


class _Workspace:
    def __init__(self, transformations):
        self._transformations = {t.identifier: t for t in transformations}

    def find_transformation(self, identifier):
        return self._transformations.get(identifier)


def _flat(matrix):
    return [value for row in matrix.rows for value in row]


def test_shape_is_abstract():
    with pytest.raises(TypeError):
        Shape()


def test_sphere_defaults_and_identifier():
    sphere = Sphere()
    assert sphere.radius == 1.0
    assert sphere.is_visible is True
    assert sphere.identifier == "shape"
    sphere.set_identifier_from_sequence(4)
    assert sphere.identifier == "sphere4"


def test_model_matrix_without_transformations_is_translation():
    sphere = Sphere(1.0, 2.0, 3.0)
    assert _flat(sphere.model_matrix()) == _flat(Mat4.translation(Vec3(1.0, 2.0, 3.0)))


def test_model_matrix_applies_transformations_in_order():
    sphere = Sphere(1.0, 0.0, 0.0)
    scale = Scale(2.0, 2.0, 2.0)
    move = Translate(0.0, 3.0, 0.0)
    sphere.add_transformation(scale)
    sphere.add_transformation(move)
    expected = Mat4.translation(Vec3(1.0, 0.0, 0.0)) @ scale.matrix @ move.matrix
    assert _flat(sphere.model_matrix()) == pytest.approx(_flat(expected))
    assert scale.reference_count == 1
    assert move.reference_count == 1


def test_visible_function():
    sphere = Sphere()
    assert sphere.apply(Function.VISIBLE, 0.0) is True
    assert sphere.is_visible is False
    sphere.apply(Function.VISIBLE, 1.0)
    assert sphere.is_visible is True
    sphere.hide()
    assert sphere.is_visible is False
    sphere.show()
    assert sphere.is_visible is True


def test_position_functions_and_unknown():
    sphere = Sphere()
    assert sphere.apply(Function.Z, 6.0) is True
    assert sphere.position.z == 6.0
    assert sphere.apply(Function.ANGLE, 6.0) is False


def test_add_position():
    sphere = Sphere(1.0, 1.0, 1.0)
    sphere.add_position(Vec3(1.0, 2.0, 3.0))
    assert tuple(sphere.position) == (2.0, 3.0, 4.0)


def test_transformations_from_workspace():
    move = Translate(1.0, 0.0, 0.0)
    move.identifier = "t"
    sphere = Sphere()
    sphere.workspace = _Workspace([move])
    assert sphere.apply_list(Function.TRANSFORMATIONS, "t") is True
    assert sphere.apply_list(Function.TRANSFORMATIONS, "missing") is False
    assert sphere.apply_list(Function.POINTS, "t") is False
    assert sphere.transformations == [move]


def test_transformation_from_workspace_without_workspace():
    sphere = Sphere()
    assert sphere.add_transformation_from_workspace("t") is False
    assert sphere.transformations == []


def test_sphere_mesh_sizes():
    sphere = Sphere(radius=2.0)
    mesh = sphere.mesh
    rings = Sphere.MAX_POINTS_CIRCLE * (2 * Sphere.MAX_LAYERS_CIRCLE + 1)
    assert len(mesh.vertices) == rings
    assert len(mesh.normals) == rings
    assert len(mesh.colors) == 2 * rings
    assert mesh.colors[0] == DEFAULT_COLOR
    assert mesh.colors[1] == DEFAULT_SELECTED_COLOR


def test_sphere_vertices_lie_on_surface():
    sphere = Sphere(radius=3.0)
    for vertex in sphere.mesh.vertices:
        assert math.sqrt(sum(c * c for c in vertex)) == pytest.approx(3.0, abs=1e-9)


def test_sphere_indices_in_range():
    mesh = Sphere().mesh
    count = len(mesh.vertices)
    assert mesh.indices
    assert all(0 <= index < count for triangle in mesh.indices for index in triangle)


def test_radius_function_rebuilds_mesh():
    sphere = Sphere(radius=1.0)
    assert sphere.apply(Function.RADIUS, 5.0) is True
    assert sphere.radius == 5.0
    assert max(abs(v[1]) for v in sphere.mesh.vertices) == pytest.approx(5.0)


def test_add_size_grows_radius():
    sphere = Sphere(radius=1.0)
    sphere.add_size(Vec3(2.0, 9.0, 9.0))
    assert sphere.radius == 3.0
    assert max(abs(v[0]) for v in sphere.mesh.vertices) == pytest.approx(3.0)
import pytest

from shapeworks.matrices import Mat4
from shapeworks.vectors import Vec3


def _flat(matrix):
    return [value for row in matrix.rows for value in row]


def _apply(matrix, point):
    column = (*point, 1.0)
    return tuple(sum(a * b for a, b in zip(row, column)) for row in matrix.rows)


def _sample():
    return Mat4(
        (
            (1.0, 2.0, 3.0, 4.0),
            (5.0, 6.0, 7.0, 8.0),
            (9.0, 10.0, 11.0, 12.0),
            (13.0, 14.0, 15.0, 16.0),
        )
    )


def test_default_equals_zero():
    assert Mat4() == Mat4.zero()
    assert all(value == 0.0 for value in _flat(Mat4.zero()))


def test_identity_is_neutral():
    m = _sample()
    assert m @ Mat4.identity() == m
    assert Mat4.identity().multiply(m) == m


def test_transpose_swaps_entries_and_round_trips():
    m = _sample()
    t = m.transposed()
    assert t[0, 3] == m[3, 0]
    assert t[2, 1] == m[1, 2]
    assert t.transposed() == m


def test_translation_moves_point():
    offset = Vec3(1.5, -2.0, 7.0)
    moved = _apply(Mat4.translation(offset), (0.0, 0.0, 0.0))
    assert moved == pytest.approx((1.5, -2.0, 7.0, 1.0))


def test_scaling_diagonal():
    m = Mat4.scaling(Vec3(2.0, 3.0, 4.0))
    assert (m[0, 0], m[1, 1], m[2, 2], m[3, 3]) == (2.0, 3.0, 4.0, 1.0)
    assert m[0, 1] == 0.0


def test_rotation_with_zero_axis_is_identity():
    assert Mat4.rotation(45.0, Vec3()) == Mat4.identity()


def test_rotation_by_zero_angle_is_identity():
    m = Mat4.rotation(0.0, Vec3(1.0, 2.0, 3.0))
    assert _flat(m) == pytest.approx(_flat(Mat4.identity()), abs=1e-9)


def test_rotation_about_z_quarter_turn():
    moved = _apply(Mat4.rotation(90.0, Vec3(0, 0, 1)), (1.0, 0.0, 0.0))
    assert moved == pytest.approx((0.0, 1.0, 0.0, 1.0), abs=1e-9)


@pytest.mark.parametrize("axis", [(1.0, 2.0, 3.0), (0.0, 1.0, 0.0), (-2.0, 0.5, -1.0)])
def test_rotation_is_orthogonal(axis):
    m = Mat4.rotation(37.0, Vec3(*axis))
    product = m @ m.transposed()
    assert _flat(product) == pytest.approx(_flat(Mat4.identity()), abs=1e-9)


@pytest.mark.parametrize("axis", [(1.0, 2.0, 3.0), (-2.0, 0.5, -1.0)])
def test_rotation_keeps_axis_fixed(axis):
    m = Mat4.rotation(71.0, Vec3(*axis))
    assert _apply(m, axis)[:3] == pytest.approx(axis, abs=1e-9)


def test_rotations_compose_by_adding_angles():
    axis = Vec3(1.0, -1.0, 2.0)
    combined = Mat4.rotation(20.0, axis) @ Mat4.rotation(50.0, axis)
    direct = Mat4.rotation(70.0, axis)
    assert _flat(combined) == pytest.approx(_flat(direct), abs=1e-9)


def test_basis_third_row_is_normalized_z():
    z = Vec3(3.0, -1.0, 2.0)
    basis = Mat4.basis_from_positive_z(z)
    assert basis.rows[2][:3] == pytest.approx(tuple(z.copy().normalize()))


def test_basis_is_orthonormal():
    basis = Mat4.basis_from_positive_z(Vec3(3.0, -1.0, 2.0))
    product = basis @ basis.transposed()
    assert _flat(product) == pytest.approx(_flat(Mat4.identity()), abs=1e-9)


def test_basis_of_zero_is_identity():
    assert Mat4.basis_from_positive_z(Vec3()) == Mat4.identity()


def test_camera_maps_position_to_origin():
    position = Vec3(10.0, -5.0, 3.0)
    m = Mat4.camera(position, Vec3(0.0, 0.0, -1.0), Vec3(0.0, 1.0, 0.0))
    assert _apply(m, tuple(position)) == pytest.approx((0.0, 0.0, 0.0, 1.0), abs=1e-9)


def test_camera_rejects_zero_look_at():
    with pytest.raises(ValueError):
        Mat4.camera(Vec3(), Vec3(), Vec3(0.0, 1.0, 0.0))


def test_perspective_bottom_row():
    m = Mat4.perspective(60.0, 1.5, 0.1, 100.0)
    assert m.rows[3] == (0.0, 0.0, -1.0, 0.0)
    assert m[0, 0] * 1.5 == pytest.approx(m[1, 1])
import math

import pytest

from shapeworks.solver import (
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
from shapeworks.vectors import Vec3


def test_distance_ratio_round_trip():
    calibration = ImageCalibration()
    ratio = calibration.set_distance_ratio(10.0, 20.0, 110.0, 95.0, 42.0)
    assert ratio == calibration.mm_per_px
    assert calibration.distance_in_mm(10.0, 20.0, 110.0, 95.0) == pytest.approx(42.0)


def test_negative_length_is_made_positive():
    calibration = ImageCalibration()
    calibration.set_distance_ratio(0.0, 0.0, 7.0, 0.0, -14.0)
    assert calibration.distance_in_mm(0.0, 0.0, 7.0, 0.0) == pytest.approx(14.0)


def test_zero_length_reference_line_leaves_ratio_undefined():
    calibration = ImageCalibration()
    assert calibration.set_distance_ratio(5.0, 5.0, 5.0, 5.0, 10.0) is None
    assert calibration.mm_per_px == 0.0
    with pytest.raises(ValueError):
        calibration.distance_in_mm(0.0, 0.0, 1.0, 1.0)


def test_distance_requires_calibration():
    with pytest.raises(ValueError):
        ImageCalibration().distance_in_mm(0.0, 0.0, 3.0, 4.0)


def test_relative_coordinates_in_pixels_without_ratio():
    calibration = ImageCalibration()
    calibration.set_origin(12.0, 30.0)
    x, y, unit = calibration.relative_coordinates(12.0, 30.0)
    assert (x, y) == (0.0, 0.0)
    assert unit == "px"


def test_relative_coordinates_in_mm_with_ratio():
    calibration = ImageCalibration()
    calibration.set_distance_ratio(0.0, 0.0, 50.0, 0.0, 25.0)
    calibration.set_origin(10.0, 10.0)
    x, y, unit = calibration.relative_coordinates(60.0, 10.0)
    assert unit == "mm"
    assert x == pytest.approx(25.0)
    assert y == pytest.approx(0.0)


def test_midpoint_origin_is_centred_between_endpoints():
    calibration = ImageCalibration()
    calibration.set_origin_to_midpoint(2.0, 8.0, 14.0, -6.0)
    ax, ay, _ = calibration.relative_coordinates(2.0, 8.0)
    bx, by, _ = calibration.relative_coordinates(14.0, -6.0)
    assert ax == pytest.approx(-bx)
    assert ay == pytest.approx(-by)


@pytest.mark.parametrize("angle", [10.0, 33.0, 120.0, 250.0])
def test_trigonometric_ratios_are_consistent(angle):
    ratios = trigonometric_ratios(angle)
    assert ratios["sin"] ** 2 + ratios["cos"] ** 2 == pytest.approx(1.0)
    assert ratios["tan"] == pytest.approx(ratios["sin"] / ratios["cos"])
    assert ratios["csc"] * ratios["sin"] == pytest.approx(1.0)
    assert ratios["sec"] * ratios["cos"] == pytest.approx(1.0)
    assert ratios["cot"] * ratios["tan"] == pytest.approx(1.0)


def test_trigonometric_ratios_omit_undefined_values():
    ratios = trigonometric_ratios(0.0)
    assert "csc" not in ratios
    assert "cot" not in ratios
    assert set(ratios) == {"sin", "cos", "tan", "sec"}


def test_inverse_tangent_straight_up():
    assert four_quadrant_inverse_tangent(1.0, 0.0) == pytest.approx(90.0)


def test_inverse_tangent_quadrants_are_symmetric():
    upper = four_quadrant_inverse_tangent(3.0, -2.0)
    lower = four_quadrant_inverse_tangent(-3.0, -2.0)
    assert upper == pytest.approx(-lower)
    assert upper > 90.0


def test_distance_matches_vector_length_and_is_symmetric():
    first = (1.0, -2.0, 4.0)
    second = (-3.0, 5.0, 0.5)
    distance = distance_between_points(first, second)
    assert distance == pytest.approx(distance_between_points(second, first))
    assert distance == pytest.approx(vector_between_points(first, second).length())


def test_vector_between_points_reaches_second_point():
    first = Vec3(1.0, 2.0, 3.0)
    second = Vec3(-4.0, 0.5, 9.0)
    vector = vector_between_points(first, second)
    assert tuple(first.copy().add(vector)) == pytest.approx(tuple(second))
    assert tuple(first) == (1.0, 2.0, 3.0)


def test_angle_between_parallel_and_opposite_vectors():
    assert angle_between_vectors((2.0, 0.0, 0.0), (5.0, 0.0, 0.0)) == pytest.approx(0.0)
    assert angle_between_vectors((1.0, 1.0, 0.0), (-3.0, -3.0, 0.0)) == pytest.approx(180.0)


def test_cross_product_is_orthogonal_to_inputs():
    u = (1.0, 2.0, 3.0)
    v = (-2.0, 0.5, 4.0)
    w = cross_product(u, v)
    assert sum(a * b for a, b in zip(w, u)) == pytest.approx(0.0)
    assert sum(a * b for a, b in zip(w, v)) == pytest.approx(0.0)
    assert tuple(cross_product(v, u)) == pytest.approx(tuple(-c for c in w))


def test_rotation_parameters_axis_is_unit_for_perpendicular_vectors():
    angle, axis = rotation_parameters((3.0, 0.0, 0.0), (0.0, 0.0, 7.0))
    assert angle == pytest.approx(angle_between_vectors((1.0, 0.0, 0.0), (0.0, 0.0, 1.0)))
    assert axis.length() == pytest.approx(1.0)


def test_rotation_parameters_from_points_match_vectors():
    origin = (1.0, 1.0, 1.0)
    start = (4.0, 1.0, 1.0)
    end = (1.0, 3.0, 2.0)
    angle, axis = rotation_parameters_from_points(start, origin, end)
    expected_angle, expected_axis = rotation_parameters(
        vector_between_points(origin, start), vector_between_points(origin, end)
    )
    assert angle == pytest.approx(expected_angle)
    assert tuple(axis) == pytest.approx(tuple(expected_axis))
    assert math.isclose(
        axis.length(), math.sin(math.radians(angle)), rel_tol=1e-9, abs_tol=1e-12
    )
# test_easing.py

import pytest

from easing import clamped_lerp, ease_in_out_cubic, ease_out_quart


def test_ease_in_out_cubic_fixed_points():
    assert ease_in_out_cubic(0.0) == 0.0
    assert ease_in_out_cubic(0.5) == 0.5
    assert ease_in_out_cubic(1.0) == 1.0


def test_ease_in_out_cubic_is_monotonic_and_symmetric():
    xs = [i / 100 for i in range(101)]
    values = [ease_in_out_cubic(x) for x in xs]
    assert all(b >= a for a, b in zip(values, values[1:]))
    for x in xs:
        assert ease_in_out_cubic(x) + ease_in_out_cubic(1.0 - x) == pytest.approx(1.0)


def test_ease_out_quart():
    assert ease_out_quart(0.0) == 0.0
    assert ease_out_quart(1.0) == 1.0
    assert ease_out_quart(0.5) == pytest.approx(0.9375)
    # Fast start: already past the linear ramp early on.
    assert ease_out_quart(0.2) > 0.2


def test_clamped_lerp_maps_inside_the_input_range():
    assert clamped_lerp(0.55, 0.3, 0.8, 0.0, 1.0) == pytest.approx(0.5)
    assert clamped_lerp(500.0, 0.0, 1000.0, 0.7, 1.0) == pytest.approx(0.85)
    assert clamped_lerp(0.9, 0.8, 1.0, 1.0, 0.0) == pytest.approx(0.5)


@pytest.mark.parametrize("x", [-1e9, -3.0, 0.0, 0.29, 0.81, 2.0, 1e9])
def test_clamped_lerp_stays_inside_the_output_range(x):
    value = clamped_lerp(x, 0.3, 0.8, 0.0, 1.0)
    assert 0.0 <= value <= 1.0

    reversed_value = clamped_lerp(x, 0.8, 1.0, 1.0, 0.0)
    assert 0.0 <= reversed_value <= 1.0


def test_clamped_lerp_saturates_at_the_ends():
    assert clamped_lerp(-5.0, 0.3, 0.8, 0.0, 1.0) == 0.0
    assert clamped_lerp(5.0, 0.3, 0.8, 0.0, 1.0) == 1.0
    assert clamped_lerp(1.0, 0.8, 1.0, 1.0, 0.0) == 0.0


def test_clamped_lerp_is_repeatable():
    first = clamped_lerp(0.42, 0.3, 0.8, 0.0, 1.0)
    assert clamped_lerp(0.42, 0.3, 0.8, 0.0, 1.0) == first


def test_clamped_lerp_with_empty_input_range_is_a_step():
    assert clamped_lerp(0.49, 0.5, 0.5, 0.0, 1.0) == 0.0
    assert clamped_lerp(0.5, 0.5, 0.5, 0.0, 1.0) == 1.0
    assert clamped_lerp(7.0, 0.5, 0.5, 0.0, 1.0) == 1.0

import pytest

from blockworld.mathutil import map_range


def test_lower_bound_maps_to_out_min():
    assert map_range(-1, -1, 1, 0, 1) == 0


def test_upper_bound_maps_to_out_max():
    assert map_range(1, -1, 1, 0, 1) == 1


def test_midpoint():
    assert map_range(0, -1, 1, 0, 1) == pytest.approx(0.5)


@pytest.mark.parametrize("val", [-1.0, -0.3, 0.0, 0.25, 0.9, 1.0])
def test_round_trip(val):
    mapped = map_range(val, -1, 1, 0, 1)
    assert map_range(mapped, 0, 1, -1, 1) == pytest.approx(val)


def test_monotonic():
    values = [map_range(v, -1, 1, 10, 20) for v in (-1, -0.5, 0, 0.5, 1)]
    assert values == sorted(values)


def test_equal_input_bounds_raise():
    with pytest.raises(ZeroDivisionError):
        map_range(3, 2, 2, 0, 1)
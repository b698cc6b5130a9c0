import pytest

from svart.coordinates import Bound, ConfidenceInterval, CoordinateSystem
from svart.errors import IllegalValueError


@pytest.mark.parametrize("bound, expected", [(Bound.OPEN, True), (Bound.CLOSED, False)])
def test_is_open(bound, expected):
    assert bound.is_open() is expected


@pytest.mark.parametrize("bound, expected", [(Bound.OPEN, False), (Bound.CLOSED, True)])
def test_is_closed(bound, expected):
    assert bound.is_closed() is expected


def test_baseness():
    assert CoordinateSystem.zero_based() is CoordinateSystem.LEFT_OPEN
    assert CoordinateSystem.one_based() is CoordinateSystem.FULLY_CLOSED


@pytest.mark.parametrize(
    "system, expected",
    [(CoordinateSystem.FULLY_CLOSED, True), (CoordinateSystem.LEFT_OPEN, False)],
)
def test_is_one_based(system, expected):
    assert system.is_one_based() is expected


@pytest.mark.parametrize(
    "system, expected",
    [(CoordinateSystem.FULLY_CLOSED, False), (CoordinateSystem.LEFT_OPEN, True)],
)
def test_is_zero_based(system, expected):
    assert system.is_zero_based() is expected


@pytest.mark.parametrize(
    "system, expected",
    [
        (CoordinateSystem.FULLY_CLOSED, Bound.CLOSED),
        (CoordinateSystem.LEFT_OPEN, Bound.OPEN),
        (CoordinateSystem.FULLY_OPEN, Bound.OPEN),
    ],
)
def test_start_bound(system, expected):
    assert system.start_bound() is expected


@pytest.mark.parametrize(
    "system, expected",
    [
        (CoordinateSystem.FULLY_CLOSED, Bound.CLOSED),
        (CoordinateSystem.LEFT_OPEN, Bound.CLOSED),
        (CoordinateSystem.FULLY_OPEN, Bound.OPEN),
    ],
)
def test_end_bound(system, expected):
    assert system.end_bound() is expected


@pytest.mark.parametrize(
    "current, target, expected",
    [
        (CoordinateSystem.FULLY_CLOSED, CoordinateSystem.FULLY_CLOSED, 0),
        (CoordinateSystem.FULLY_CLOSED, CoordinateSystem.LEFT_OPEN, -1),
        (CoordinateSystem.FULLY_CLOSED, CoordinateSystem.FULLY_OPEN, -1),
        (CoordinateSystem.LEFT_OPEN, CoordinateSystem.LEFT_OPEN, 0),
        (CoordinateSystem.LEFT_OPEN, CoordinateSystem.FULLY_CLOSED, 1),
    ],
)
def test_start_delta(current, target, expected):
    assert current.start_delta(target) == expected


@pytest.mark.parametrize(
    "current, target, expected",
    [
        (CoordinateSystem.FULLY_CLOSED, CoordinateSystem.FULLY_CLOSED, 0),
        (CoordinateSystem.FULLY_CLOSED, CoordinateSystem.LEFT_OPEN, 0),
        (CoordinateSystem.FULLY_CLOSED, CoordinateSystem.FULLY_OPEN, 1),
        (CoordinateSystem.FULLY_CLOSED, CoordinateSystem.RIGHT_OPEN, 1),
        (CoordinateSystem.LEFT_OPEN, CoordinateSystem.LEFT_OPEN, 0),
        (CoordinateSystem.LEFT_OPEN, CoordinateSystem.FULLY_CLOSED, 0),
        (CoordinateSystem.FULLY_OPEN, CoordinateSystem.FULLY_CLOSED, -1),
    ],
)
def test_end_delta(current, target, expected):
    assert current.end_delta(target) == expected


@pytest.mark.parametrize("current", list(CoordinateSystem))
@pytest.mark.parametrize("target", list(CoordinateSystem))
def test_deltas_are_antisymmetric(current, target):
    assert CoordinateSystem.start_delta(current, target) == -CoordinateSystem.start_delta(target, current)
    assert CoordinateSystem.end_delta(current, target) == -CoordinateSystem.end_delta(target, current)


def test_precise_interval():
    ci = ConfidenceInterval.precise()
    assert ci.is_precise() is True
    assert (ci.upper_bound, ci.lower_bound) == (0, 0)


def test_imprecise_interval_and_to_precise():
    ci = ConfidenceInterval.imprecise(5, 3)
    assert ci.upper_bound == 5
    assert ci.lower_bound == 3
    assert ci.is_precise() is False
    ci.to_precise()
    assert ci.is_precise() is True
    assert ci == ConfidenceInterval.precise()


def test_precise_instances_are_independent():
    first = ConfidenceInterval.precise()
    first.upper_bound = 4
    assert ConfidenceInterval.precise().is_precise() is True


def test_swap_and_invert():
    left = ConfidenceInterval.imprecise(5, 3)
    right = ConfidenceInterval.imprecise(7, 2)
    ConfidenceInterval.swap_and_invert(left, right)
    assert (left.upper_bound, left.lower_bound) == (2, 7)
    assert (right.upper_bound, right.lower_bound) == (3, 5)


def test_swap_and_invert_twice_restores():
    left = ConfidenceInterval.imprecise(5, 3)
    right = ConfidenceInterval.imprecise(7, 2)
    ConfidenceInterval.swap_and_invert(left, right)
    ConfidenceInterval.swap_and_invert(left, right)
    assert left == ConfidenceInterval.imprecise(5, 3)
    assert right == ConfidenceInterval.imprecise(7, 2)


def test_negative_bound_rejected():
    with pytest.raises(IllegalValueError):
        ConfidenceInterval.imprecise(-1, 0)
    with pytest.raises(IllegalValueError):
        ConfidenceInterval.imprecise(0, -1)
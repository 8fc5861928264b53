import pytest

from katabox.exercises import (
    CircleAction,
    GasStation,
    InvalidDateCodeError,
    Point,
    PointRecorder,
    Signature,
    Vehicle,
    bubble_sort,
    circle_action,
    decrement_rooms,
    make_sign,
    selection_sort,
)


def test_decrement_rooms_keeps_zero_and_lowers_others():
    rooms = [3, 0, 1, 0, 7]
    result = decrement_rooms(rooms)
    assert len(result) == len(rooms)
    for before, after in zip(rooms, result):
        if before == 0:
            assert after == 0
        else:
            assert after == before - 1


def test_decrement_rooms_leaves_input_untouched():
    rooms = [2, 0]
    decrement_rooms(rooms)
    assert rooms == [2, 0]


def test_point_recorder_lines_in_order():
    recorder = PointRecorder()
    recorder.add(Point(3, 4))
    recorder.add(Point(10, 20))
    assert list(recorder.button_lines()) == ["3 4", "10 20"]


def test_point_recorder_empty():
    assert list(PointRecorder().button_lines()) == []


def test_make_sign_sorts_by_date_code():
    signatures = [Signature(5, "KFC"), Signature(1, "JASON"), Signature(2, "LUCKY")]
    assert make_sign(signatures) == ["1 : JASON", "2 : LUCKY", "5 : KFC"]


@pytest.mark.parametrize("code", [0, 10, -3])
def test_make_sign_rejects_invalid_code(code):
    with pytest.raises(InvalidDateCodeError, match="Invalid dateCode"):
        make_sign([Signature(1, "JASON"), Signature(code, "BAD")])


def test_make_sign_empty():
    assert make_sign([]) == []


@pytest.mark.parametrize(
    "is_draw, is_outline, x, y, expected",
    [
        (True, True, 0, 0, CircleAction.NOTHING),
        (False, False, 0, 0, CircleAction.NOTHING),
        (True, True, 1, 2, CircleAction.DRAW_OUTLINED),
        (True, False, 0, 5, CircleAction.DRAW),
        (False, True, 5, 0, CircleAction.DELETE),
    ],
)
def test_circle_action(is_draw, is_outline, x, y, expected):
    assert circle_action(is_draw, is_outline, x, y) is expected


@pytest.mark.parametrize("sort", [bubble_sort, selection_sort])
@pytest.mark.parametrize(
    "values", [[4, 2, 1, 6, 8], [], [1], [3, 3, 1], [-2, 5, -7, 0, 5]]
)
def test_sorts_match_builtin(sort, values):
    original = list(values)
    assert sort(values) == sorted(original)
    assert values == original


def test_vehicle_accelerate_and_refuel():
    vehicle = Vehicle(5)
    assert vehicle.remaining_fuel == 5
    vehicle.accelerate()
    vehicle.accelerate()
    assert vehicle.remaining_fuel == 3
    GasStation(vehicle).refuel()
    assert vehicle.remaining_fuel == vehicle.max_fuel == 5
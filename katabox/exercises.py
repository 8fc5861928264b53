"""Small warm-up exercises: rooms, points, signatures, circles, sorting, fuel."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Iterator, List


def decrement_rooms(rooms: Iterable[int]) -> List[int]:
    """Decrement every non-zero count by one; zeros stay zero."""
    return [count - 1 if count != 0 else 0 for count in rooms]


@dataclass(frozen=True)
class Point:
    x: int
    y: int


@dataclass
class PointRecorder:
    """Collects points and renders them as 'x y' lines."""

    points: List[Point] = field(default_factory=list)

    def add(self, point: Point) -> None:
        self.points.append(point)

    def button_lines(self) -> Iterator[str]:
        """Yield one 'x y' line per recorded point, in insertion order."""
        for point in self.points:
            yield f"{point.x} {point.y}"


@dataclass(frozen=True)
class Signature:
    date_code: int
    name: str


class InvalidDateCodeError(ValueError):
    """A signature's date code is outside 1..9."""

    def __init__(self, message: str = "Invalid dateCode") -> None:
        super().__init__(message)


def make_sign(signatures: Iterable[Signature]) -> List[str]:
    """Sort signatures by date code and render them as 'code : name' lines.

    Raises InvalidDateCodeError if any date code is not between 1 and 9.
    """
    ordered = sorted(signatures, key=lambda signature: signature.date_code)
    if not all(0 < signature.date_code < 10 for signature in ordered):
        raise InvalidDateCodeError()
    return [f"{signature.date_code} : {signature.name}" for signature in ordered]


class CircleAction(Enum):
    """What drawing a circle at a position results in."""

    NOTHING = "nothing"
    DRAW = "draw"
    DRAW_OUTLINED = "draw_outlined"
    DELETE = "delete"


def circle_action(is_draw: bool, is_outline: bool, x: int, y: int) -> CircleAction:
    """Decide the circle action; the origin is silently ignored."""
    if x == 0 and y == 0:
        return CircleAction.NOTHING
    if not is_draw:
        return CircleAction.DELETE
    return CircleAction.DRAW_OUTLINED if is_outline else CircleAction.DRAW


def bubble_sort(values: Iterable[int]) -> List[int]:
    """Return the values sorted ascending using bubble sort."""
    items = list(values)
    for done in range(len(items)):
        for i in range(len(items) - done - 1):
            if items[i] > items[i + 1]:
                items[i], items[i + 1] = items[i + 1], items[i]
    return items


def selection_sort(values: Iterable[int]) -> List[int]:
    """Return the values sorted ascending by repeatedly fixing each position."""
    items = list(values)
    for i in range(len(items)):
        for j in range(i + 1, len(items)):
            if items[i] > items[j]:
                items[i], items[j] = items[j], items[i]
    return items


@dataclass
class Vehicle:
    """A vehicle that burns one unit of fuel per acceleration."""

    max_fuel: int
    remaining_fuel: int = field(init=False)

    def __post_init__(self) -> None:
        self.remaining_fuel = self.max_fuel

    def accelerate(self) -> None:
        self.remaining_fuel -= 1


@dataclass
class GasStation:
    """Refills a vehicle's tank."""

    vehicle: Vehicle

    def refuel(self) -> None:
        self.vehicle.remaining_fuel = self.vehicle.max_fuel
"""String exercises: summing dash-separated numbers and checking sums."""

from enum import Enum, auto

_DIGITS = frozenset("0123456789")


class Verdict(str, Enum):
    """Outcome of checking an equation of the form a+b=c."""

    @staticmethod
    def _generate_next_value_(name, start, count, last_values):
        return name

    PASS = auto()
    FAIL = auto()
    ERROR = auto()


def split_and_sum(text: str) -> int:
    """Sum the integers in a dash-separated string; an empty string sums to 0.

    Raises ValueError when a piece is not an integer.
    """
    if not text:
        return 0
    return sum(int(piece) for piece in text.split("-"))


def _is_digits(text: str) -> bool:
    return bool(text) and all(char in _DIGITS for char in text)


def check_equation(text: str) -> Verdict:
    """Check whether a text such as '25+61=86' is a correct sum."""
    if text.count("+") != 1 or text.count("=") != 1:
        return Verdict.ERROR
    plus = text.index("+")
    equal = text.index("=")
    if plus == 0:
        return Verdict.ERROR
    if equal == 0:
        # A leading '=' leaves the first operand non-numeric.
        return Verdict.FAIL
    if plus >= equal - 1 or equal >= len(text) - 1:
        return Verdict.ERROR

    operands = (text[:plus], text[plus + 1:equal], text[equal + 1:])
    if not all(_is_digits(part) for part in operands):
        return Verdict.FAIL
    first, second, total = (int(part) for part in operands)
    return Verdict.PASS if first + second == total else Verdict.FAIL
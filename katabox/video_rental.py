"""Video store rentals: charges, renter points and customer statements."""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterable, List


class PriceCode(IntEnum):
    """Pricing category of a movie."""

    REGULAR = 0
    NEW_RELEASE = 1
    CHILDREN = 2


@dataclass
class Movie:
    """A movie title with its pricing category."""

    title: str
    price_code: PriceCode


@dataclass
class Rental:
    """A movie rented for a number of days."""

    movie: Movie
    days_rented: int

    def charge(self) -> float:
        """Amount owed for this rental."""
        days = self.days_rented
        code = self.movie.price_code
        if code == PriceCode.REGULAR:
            return 2 + max(days - 2, 0) * 1.5
        if code == PriceCode.NEW_RELEASE:
            return float(days * 3)
        if code == PriceCode.CHILDREN:
            return 1.5 + max(days - 3, 0) * 1.5
        return 0.0

    def points(self) -> int:
        """Frequent renter points earned by this rental."""
        if self.movie.price_code == PriceCode.NEW_RELEASE and self.days_rented > 1:
            return 2
        return 1


def total_amount(rentals: Iterable[Rental]) -> float:
    """Sum of the charges of all rentals."""
    return sum((rental.charge() for rental in rentals), 0.0)


def frequent_renter_points(rentals: Iterable[Rental]) -> int:
    """Sum of the renter points of all rentals."""
    return sum(rental.points() for rental in rentals)


def _one_decimal(value: float) -> str:
    return f"{value:.1f}"


class StatementFormatter:
    """Renders a plain-text rental statement."""

    def format(self, rentals: List[Rental], customer_name: str) -> str:
        """Full statement: header, one line per rental, footer."""
        lines = [self.format_line(rental) for rental in rentals]
        return (
            self.format_header(customer_name)
            + "".join(lines)
            + self.format_footer(
                total_amount(rentals), frequent_renter_points(rentals)
            )
        )

    def format_header(self, customer_name: str) -> str:
        return f"Rental Record for {customer_name}\n"

    def format_footer(self, amount: float, points: int) -> str:
        return (
            f"Amount owed is {_one_decimal(amount)}\n"
            f"You earned {points} frequent renter points"
        )

    def format_line(self, rental: Rental) -> str:
        return f"\t{rental.movie.title}\t{_one_decimal(rental.charge())}\n"


@dataclass
class Customer:
    """A customer and the movies they have rented."""

    name: str
    rentals: List[Rental] = field(default_factory=list)
    formatter: StatementFormatter = field(default_factory=StatementFormatter)

    def add_rental(self, rental: Rental) -> None:
        self.rentals.append(rental)

    def statement(self) -> str:
        """The customer's rental statement."""
        return self.formatter.format(self.rentals, self.name)
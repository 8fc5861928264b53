"""Prize money for a Wheel of Fortune style letter-guessing round."""

from dataclasses import dataclass, field
from typing import Iterable, Optional

ROUND_LENGTH = 26
FIRST_LETTER_BONUS = 1000
CHANCE_BONUS = 2000
STREAK_UNIT = 100


@dataclass
class _Answer:
    cells: list = field(default_factory=list)
    first_found: bool = False
    chance: bool = False

    def has_hidden(self, letter: str) -> bool:
        return any(cell == letter for cell in self.cells)

    def reveal(self, letter: str) -> int:
        """Reveal every hidden copy of the letter; return the bonus earned."""
        bonus = 0
        for position, cell in enumerate(self.cells):
            if cell != letter:
                continue
            if not self.first_found:
                self.first_found = True
                if position == 0:
                    bonus += FIRST_LETTER_BONUS
                    self.chance = True
            self.cells[position] = None
        return bonus


def get_price(answers: Iterable[str], guesses: str) -> int:
    """Total prize won by guessing letters, one per turn, for 26 turns."""
    board = [_Answer(cells=list(answer)) for answer in answers]
    total = 0
    streak = 0

    for letter in guesses[:ROUND_LENGTH]:
        for answer in board:
            if answer.chance:
                if answer.has_hidden(letter):
                    total += CHANCE_BONUS
                answer.chance = False

        found = 0
        for answer in board:
            hidden_before = sum(1 for cell in answer.cells if cell == letter)
            total += answer.reveal(letter)
            found += hidden_before

        if found:
            streak += 1
            total += streak * STREAK_UNIT * found
        else:
            streak = 0
            for answer in board:
                answer.chance = False

    return total


def _hidden(cells: list) -> list:
    return [cell for cell in cells if cell is not None]


def remaining_letters(answers: Iterable[str], guesses: str) -> Optional[list]:
    """Letters of each answer still hidden after the round."""
    board = [list(answer) for answer in answers]
    guessed = set(guesses[:ROUND_LENGTH])
    return ["".join(c for c in cells if c not in guessed) for cells in board]
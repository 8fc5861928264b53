"""Score descriptions for a single tennis game."""

_POINT_NAMES = ("Love", "Fifteen", "Thirty", "Forty")
_EVEN_NAMES = ("Love-All", "Fifteen-All", "Thirty-All")


def _even_description(score: int) -> str:
    if 0 <= score < len(_EVEN_NAMES):
        return _EVEN_NAMES[score]
    return "Deuce"


def _point_name(score: int) -> str:
    if 0 <= score < len(_POINT_NAMES) - 1:
        return _POINT_NAMES[score]
    return _POINT_NAMES[-1]


def _advantage_or_win(player1: int, player2: int) -> str:
    difference = player1 - player2
    if difference == 1:
        return "Advantage player1"
    if difference == -1:
        return "Advantage player2"
    if difference >= 2:
        return "Win for player1"
    return "Win for player2"


def tennis_score(player1: int, player2: int) -> str:
    """Describe the score given the points won by each player."""
    if player1 == player2:
        return _even_description(player1)
    if player1 >= 4 or player2 >= 4:
        return _advantage_or_win(player1, player2)
    return f"{_point_name(player1)}-{_point_name(player2)}"
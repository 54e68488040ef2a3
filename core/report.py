"""Plain-text rendering of resolved rounds."""

from core.hand import HandResult
from core.round import RoundResult

ROUND_HEADER = "-- NEW TEST CASE --"


def format_hand(result: HandResult) -> str:
    """Render a hand as '<name> <value> <outcome>'."""
    return str(result)


def format_round(result: RoundResult) -> list[str]:
    """Render a round: header, dealer total, then one line per player."""
    lines = [ROUND_HEADER, f"{result.dealer.name} {result.dealer.display_value}"]
    lines.extend(format_hand(player) for player in result.players)
    return lines

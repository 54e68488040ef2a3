"""Resolve a dealer hand and every player hand against it."""

import logging
from dataclasses import dataclass
from typing import Iterator, Mapping, Sequence

from core.cards import Rank
from core.hand import HandResult, resolve_hand
from core.rules import HouseRules

logger = logging.getLogger(__name__)

DEALER = "Dealer"


@dataclass(frozen=True, slots=True)
class RoundResult:
    """Resolved dealer hand plus the player hands in table order."""

    dealer: HandResult
    players: tuple[HandResult, ...]

    def __iter__(self) -> Iterator[HandResult]:
        return iter(self.players)

    def __len__(self) -> int:
        return len(self.players)


def evaluate_round(
    hands: Mapping[str, Sequence[Rank]],
    dealer_key: str = DEALER,
    rules: HouseRules | None = None,
) -> RoundResult:
    """
    Resolve a round of hands.

    The dealer's hand is resolved first, then each other entry is resolved
    against it in the mapping's key order.

    Raises:
        ValueError: if ``hands`` has no entry under ``dealer_key``
    """
    if dealer_key not in hands:
        raise ValueError(f"No dealer hand under key {dealer_key!r}")

    rules = rules or HouseRules()
    dealer = resolve_hand(dealer_key, hands[dealer_key], rules=rules)
    logger.debug("Resolved dealer %s: %s", dealer_key, dealer.display_value)

    players = []
    for name, hand in hands.items():
        if name == dealer_key:
            continue
        result = resolve_hand(name, hand, dealer, rules)
        logger.debug(
            "Resolved %s: %s (%s)", name, result.display_value, result.outcome.value
        )
        players.append(result)

    return RoundResult(dealer=dealer, players=tuple(players))

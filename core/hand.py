"""Hand evaluation for blackjack."""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterable, Sequence

from core.cards import Rank, card_value
from core.rules import HouseRules


class Outcome(Enum):
    """Result of a hand measured against the dealer."""

    NONE = "none"
    FIVE_CARD_CHARLIE = "beats dealer (5 cards)"
    WIN = "beats dealer"
    LOSE = "loses"
    DRAW = "draw"

    @property
    def label(self) -> str:
        """Return the printable label (empty when no comparison was made)."""
        return "" if self is Outcome.NONE else self.value


@dataclass(frozen=True, slots=True)
class HandResult:
    """Immutable resolution of one participant's hand."""

    name: str
    cards: tuple[Rank, ...]
    value: int | None
    outcome: Outcome = Outcome.NONE
    bust_limit: int = 21

    @property
    def is_busted(self) -> bool:
        """Check if the value is over the bust limit."""
        return self.value is not None and self.value > self.bust_limit

    @property
    def is_five_card_charlie(self) -> bool:
        """Check if the hand won on card count rather than on points."""
        return self.value is None

    @property
    def display_value(self) -> str:
        """Return the value as printed ('-' for a five-card charlie)."""
        return "-" if self.value is None else str(self.value)

    def __str__(self) -> str:
        return " ".join(
            part for part in (self.name, self.display_value, self.outcome.label) if part
        )


def hand_total(hand: Iterable[Rank], high_aces: Iterable[bool] = ()) -> int:
    """
    Sum the card values of a hand.

    Args:
        hand: ranks in the hand
        high_aces: one flag per Ace, in hand order, selecting its high value.
            Aces without a flag count low.
    """
    flags = iter(high_aces)
    return sum(
        card_value(rank, high_ace=next(flags, False) if rank == Rank.ACE else False)
        for rank in hand
    )


def best_total(hand: Sequence[Rank], bust_limit: int = 21) -> int:
    """
    Calculate the best hand value.

    Each Ace counted high instead of low adds the same amount, so only the
    number of high Aces matters. The highest total that doesn't bust wins; a
    hand that busts even with all Aces low returns that lowest bust total.
    """
    num_aces = sum(1 for rank in hand if rank == Rank.ACE)
    lowest = hand_total(hand)
    step = Rank.ACE.high_value - Rank.ACE.low_value

    best = lowest
    for high_aces in range(1, num_aces + 1):
        total = lowest + step * high_aces
        if total > bust_limit:
            break
        best = total
    return best


def is_five_card_charlie(hand: Sequence[Rank], rules: HouseRules) -> bool:
    """Check if the hand wins automatically on card count."""
    return len(hand) == rules.charlie_cards and hand_total(hand) <= rules.bust_limit


def compare_hands(player: HandResult, dealer: HandResult, rules: HouseRules) -> Outcome:
    """Compare a resolved player hand with the resolved dealer hand."""
    if player.is_five_card_charlie:
        return Outcome.FIVE_CARD_CHARLIE

    # Player busts always loses
    if player.is_busted:
        return Outcome.LOSE

    if dealer.is_five_card_charlie:
        return Outcome.LOSE

    if rules.dealer_bust_pays and dealer.is_busted:
        return Outcome.WIN

    if dealer.value > player.value:
        return Outcome.LOSE
    if dealer.value == player.value:
        return Outcome.DRAW
    return Outcome.WIN


def resolve_hand(
    name: str,
    hand: Sequence[Rank],
    opponent: HandResult | None = None,
    rules: HouseRules | None = None,
) -> HandResult:
    """
    Resolve a hand's value and, when an opponent is given, its outcome.

    Args:
        name: owner of the hand
        hand: ranks in the hand, never modified
        opponent: the dealer's resolved hand, or None when resolving the dealer
        rules: house rules (standard table if omitted)
    """
    rules = rules or HouseRules()
    cards = tuple(hand)

    value = None if is_five_card_charlie(cards, rules) else best_total(cards, rules.bust_limit)
    result = HandResult(name, cards, value, bust_limit=rules.bust_limit)

    # The dealer's own hand has nothing to be compared with
    if opponent is None:
        return result

    return replace(result, outcome=compare_hands(result, opponent, rules))

"""House rules for hand evaluation."""

from dataclasses import dataclass

from config import config


@dataclass(frozen=True)
class HouseRules:
    """
    Thresholds used when resolving hands.

    The defaults are the standard table: a hand busts above 21 and five
    cards without busting win automatically.
    """

    # Highest total that does not bust
    bust_limit: int = 21

    # Number of cards that wins automatically (five-card charlie)
    charlie_cards: int = 5

    # A busted dealer pays every standing player
    dealer_bust_pays: bool = False

    def __post_init__(self) -> None:
        """Validate rule values."""
        if self.bust_limit < 1:
            raise ValueError("bust_limit must be at least 1")
        if self.charlie_cards < 2:
            raise ValueError("charlie_cards must be at least 2")

    @classmethod
    def from_config(cls) -> "HouseRules":
        """Rules configured through the environment."""
        return cls(
            bust_limit=config.evaluator.bust_limit,
            charlie_cards=config.evaluator.charlie_cards,
            dealer_bust_pays=config.evaluator.dealer_bust_pays,
        )

"""Card ranks and their blackjack point values."""

from enum import Enum


class InvalidRankError(ValueError):
    """Raised when text cannot be parsed into a card rank."""


class Rank(Enum):
    """Card ranks. Suits have no bearing on scoring and are not tracked."""

    ACE = "Ace"
    TWO = "Two"
    THREE = "Three"
    FOUR = "Four"
    FIVE = "Five"
    SIX = "Six"
    SEVEN = "Seven"
    EIGHT = "Eight"
    NINE = "Nine"
    TEN = "Ten"
    JACK = "Jack"
    QUEEN = "Queen"
    KING = "King"

    def __str__(self) -> str:
        return self.value

    @property
    def symbol(self) -> str:
        """Return the short symbol printed on the card face."""
        return _SYMBOLS[self]

    @property
    def low_value(self) -> int:
        """Return the point value with an Ace counted as 1."""
        return card_value(self)

    @property
    def high_value(self) -> int:
        """Return the point value with an Ace counted as 11."""
        return card_value(self, high_ace=True)

    @property
    def is_ace(self) -> bool:
        """Check if this rank is an Ace."""
        return self == Rank.ACE

    @classmethod
    def parse(cls, s: str) -> "Rank":
        """
        Create a rank from a string like 'Ace', 'queen', 'K' or '10'.

        Raises:
            InvalidRankError: if the string names no rank
        """
        key = s.strip().upper()
        if key in _LOOKUP:
            return _LOOKUP[key]
        raise InvalidRankError(f"Invalid rank: {s!r}")


_SYMBOLS = {
    Rank.ACE: "A",
    Rank.TWO: "2",
    Rank.THREE: "3",
    Rank.FOUR: "4",
    Rank.FIVE: "5",
    Rank.SIX: "6",
    Rank.SEVEN: "7",
    Rank.EIGHT: "8",
    Rank.NINE: "9",
    Rank.TEN: "10",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
}

_VALUES = {
    Rank.TWO: 2,
    Rank.THREE: 3,
    Rank.FOUR: 4,
    Rank.FIVE: 5,
    Rank.SIX: 6,
    Rank.SEVEN: 7,
    Rank.EIGHT: 8,
    Rank.NINE: 9,
    Rank.TEN: 10,
    Rank.JACK: 10,
    Rank.QUEEN: 10,
    Rank.KING: 10,
}

_LOOKUP: dict[str, Rank] = {}
for _rank in Rank:
    _LOOKUP[_rank.value.upper()] = _rank
    _LOOKUP[_rank.name] = _rank
    _LOOKUP[_SYMBOLS[_rank]] = _rank
_LOOKUP["T"] = Rank.TEN

ACE_LOW = 1
ACE_HIGH = 11


def card_value(rank: Rank, high_ace: bool = False) -> int:
    """
    Return the blackjack point value of a rank.

    Two to Nine score their face value, Ten and the face cards score 10, and
    an Ace scores 1, or 11 when ``high_ace`` is set. Anything that is not a
    Rank scores 0.
    """
    if rank is Rank.ACE:
        return ACE_HIGH if high_ace else ACE_LOW
    return _VALUES.get(rank, 0)

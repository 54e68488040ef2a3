"""Pytest fixtures for hand evaluation tests."""

import pytest
from hypothesis import strategies as st

from core.cards import Rank
from core.hand import resolve_hand
from core.round import DEALER
from core.rules import HouseRules


@pytest.fixture
def rules():
    """Standard house rules."""
    return HouseRules()


@pytest.fixture
def dealer_19():
    """Dealer standing on J-9."""
    return resolve_hand(DEALER, [Rank.JACK, Rank.NINE])


@pytest.fixture
def example_round():
    """Round with a dealer 15 and three ordinary player hands."""
    return {
        DEALER: [Rank.SIX, Rank.NINE],
        "Andrew": [Rank.NINE, Rank.SIX, Rank.JACK],
        "Billy": [Rank.QUEEN, Rank.KING],
        "Carla": [Rank.TWO, Rank.NINE, Rank.KING],
    }


@pytest.fixture
def test_case_round():
    """Round with multi-Ace, five-card and bust hands against a dealer 19."""
    return {
        DEALER: [Rank.JACK, Rank.NINE],
        "Lemmy": [Rank.ACE, Rank.SEVEN, Rank.ACE],
        "Andrew": [Rank.KING, Rank.FOUR, Rank.FOUR],
        "Billy": [Rank.TWO, Rank.TWO, Rank.TWO, Rank.FOUR, Rank.FIVE],
        "Carla": [Rank.QUEEN, Rank.SIX, Rank.NINE],
    }


# Hypothesis strategies for property-based testing
ranks = st.sampled_from(list(Rank))
non_ace_ranks = st.sampled_from([rank for rank in Rank if not rank.is_ace])


def hands(min_cards=1, max_cards=8, rank_strategy=ranks):
    """Generate a hand of ranks."""
    return st.lists(rank_strategy, min_size=min_cards, max_size=max_cards)

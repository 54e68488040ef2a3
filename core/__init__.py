"""Blackjack hand evaluation core - 100% UI-agnostic."""

from core.cards import InvalidRankError, Rank, card_value
from core.hand import HandResult, Outcome, best_total, resolve_hand
from core.report import format_hand, format_round
from core.round import DEALER, RoundResult, evaluate_round
from core.rules import HouseRules

__all__ = [
    "InvalidRankError",
    "Rank",
    "card_value",
    "HandResult",
    "Outcome",
    "best_total",
    "resolve_hand",
    "format_hand",
    "format_round",
    "DEALER",
    "RoundResult",
    "evaluate_round",
    "HouseRules",
]

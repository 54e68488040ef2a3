"""Pydantic schemas for API requests and responses."""

from typing import Annotated

from pydantic import BaseModel, Field

from config import config

# Largest accepted hand and table; a hand can hold at most one full deck
MAX_HAND_CARDS = 52
MAX_HANDS = 16


class HandRequest(BaseModel):
    """A named hand of card ranks."""

    name: str = Field(..., min_length=1, description="Owner of the hand")
    cards: list[str] = Field(
        ..., max_length=MAX_HAND_CARDS, description="Card ranks, e.g. 'Ace', 'K', '10'"
    )


class EvaluateHandRequest(HandRequest):
    """Request to resolve one hand, optionally against a dealer hand."""

    dealer: HandRequest | None = None


class EvaluateRoundRequest(BaseModel):
    """Request to resolve a dealer hand and the player hands against it."""

    hands: dict[str, Annotated[list[str], Field(max_length=MAX_HAND_CARDS)]] = Field(
        ...,
        max_length=MAX_HANDS,
        description="Hands keyed by participant, players in table order",
    )
    dealer_key: str = Field(default_factory=lambda: config.evaluator.dealer_key)


class HandResultResponse(BaseModel):
    """Resolved hand."""

    name: str
    cards: list[str]
    value: int | None
    outcome: str | None
    is_busted: bool
    is_five_card_charlie: bool


class RoundResultResponse(BaseModel):
    """Resolved round."""

    dealer: HandResultResponse
    players: list[HandResultResponse]
    report: list[str]

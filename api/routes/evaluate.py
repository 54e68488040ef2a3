"""Hand and round evaluation endpoints."""

import logging
from typing import Sequence

from fastapi import APIRouter, HTTPException, Request

from api.limiter import RATE_LIMIT, limiter
from api.schemas import (
    EvaluateHandRequest,
    EvaluateRoundRequest,
    HandResultResponse,
    RoundResultResponse,
)
from core.cards import InvalidRankError, Rank
from core.hand import HandResult, Outcome, resolve_hand
from core.report import format_round
from core.round import evaluate_round
from core.rules import HouseRules

logger = logging.getLogger(__name__)

router = APIRouter()


def _parse_hand(cards: Sequence[str]) -> list[Rank]:
    """Parse rank strings, rejecting unknown ranks."""
    try:
        return [Rank.parse(card) for card in cards]
    except InvalidRankError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e


def _result_to_response(result: HandResult) -> HandResultResponse:
    """Convert a HandResult to HandResultResponse."""
    return HandResultResponse(
        name=result.name,
        cards=[str(rank) for rank in result.cards],
        value=result.value,
        outcome=None if result.outcome is Outcome.NONE else result.outcome.value,
        is_busted=result.is_busted,
        is_five_card_charlie=result.is_five_card_charlie,
    )


@router.post("/hands/evaluate")
@limiter.limit(RATE_LIMIT)
async def evaluate_hand(
    request: Request,
    body: EvaluateHandRequest,
) -> HandResultResponse:
    """Resolve a single hand, comparing it with the dealer's when given."""
    rules = HouseRules.from_config()
    dealer = None
    if body.dealer is not None:
        dealer = resolve_hand(body.dealer.name, _parse_hand(body.dealer.cards), rules=rules)

    result = resolve_hand(body.name, _parse_hand(body.cards), dealer, rules)
    return _result_to_response(result)


@router.post("/rounds/evaluate")
@limiter.limit(RATE_LIMIT)
async def evaluate_round_endpoint(
    request: Request,
    body: EvaluateRoundRequest,
) -> RoundResultResponse:
    """Resolve the dealer's hand, then every player hand against it."""
    hands = {name: _parse_hand(cards) for name, cards in body.hands.items()}

    try:
        result = evaluate_round(hands, body.dealer_key, HouseRules.from_config())
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e

    logger.info(
        "Evaluated round of %d player(s) against %s", len(result), body.dealer_key
    )
    return RoundResultResponse(
        dealer=_result_to_response(result.dealer),
        players=[_result_to_response(player) for player in result.players],
        report=format_round(result),
    )

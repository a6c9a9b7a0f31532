"""Lead scoring endpoints for API v1."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from treeshop.core.dependencies import get_lead_scoring_service
from treeshop.schemas.leads import (
    LeadRankQuery,
    LeadScoreQuery,
    LeadScoreRequest,
    LeadScoreResponse,
    RankedLeadResponse,
)
from treeshop.services.lead_scoring_service import LeadRecord, LeadScoringService

router = APIRouter(prefix="/leads", tags=["leads"])


def _to_record(payload: LeadScoreRequest) -> LeadRecord:
    return LeadRecord(**payload.model_dump())


@router.post("/score", response_model=LeadScoreResponse)
def score_lead(
    payload: LeadScoreQuery,
    scoring: LeadScoringService = Depends(get_lead_scoring_service),
) -> LeadScoreResponse:
    score = scoring.score_lead(_to_record(payload.lead), now=payload.now)
    return LeadScoreResponse.model_validate(score)


@router.post("/rank", response_model=list[RankedLeadResponse])
def rank_leads(
    payload: LeadRankQuery,
    scoring: LeadScoringService = Depends(get_lead_scoring_service),
) -> list[RankedLeadResponse]:
    records = [_to_record(lead) for lead in payload.leads]
    payload_by_record = {id(record): lead for record, lead in zip(records, payload.leads)}
    ranked = scoring.rank_leads(records, now=payload.now)
    return [
        RankedLeadResponse(
            position=position,
            lead=payload_by_record[id(record)],
            score=LeadScoreResponse.model_validate(score),
        )
        for position, (record, score) in enumerate(ranked, start=1)
    ]

"""Pydantic schema package for API contracts."""

from treeshop.schemas.leads import (
    FactorScoresResponse,
    LeadRankQuery,
    LeadScoreQuery,
    LeadScoreRequest,
    LeadScoreResponse,
    RankedLeadResponse,
)
from treeshop.schemas.pricing import (
    LineItemResponse,
    PackageResponse,
    PaymentScheduleRequest,
    PaymentScheduleResponse,
    QuoteCreateRequest,
    QuoteResponse,
)

__all__ = [
    "FactorScoresResponse",
    "LeadRankQuery",
    "LeadScoreQuery",
    "LeadScoreRequest",
    "LeadScoreResponse",
    "LineItemResponse",
    "PackageResponse",
    "PaymentScheduleRequest",
    "PaymentScheduleResponse",
    "QuoteCreateRequest",
    "QuoteResponse",
    "RankedLeadResponse",
]

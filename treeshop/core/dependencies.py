"""Dependency providers for API handlers."""

from __future__ import annotations

from treeshop.services.lead_scoring_service import LeadScoringService
from treeshop.services.pricing_service import PricingService
from treeshop.services.rate_table import get_rate_table


def get_pricing_service() -> PricingService:
    return PricingService(rate_table=get_rate_table())


def get_lead_scoring_service() -> LeadScoringService:
    return LeadScoringService()

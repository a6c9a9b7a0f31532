"""Lead scoring request/response schemas for API contracts."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from treeshop.core.enums import LeadGrade


class LeadScoreRequest(BaseModel):
    created_at: datetime
    name: str | None = Field(default=None, max_length=255)
    email: str | None = Field(default=None, max_length=320)
    phone: str | None = Field(default=None, max_length=40)
    address: str | None = Field(default=None, max_length=500)
    acreage: float | None = Field(default=None, ge=0)
    selected_package: str | None = Field(default=None, max_length=64)
    estimated_total: float | None = Field(default=None, ge=0)
    notes: str | None = Field(default=None, max_length=5000)
    source: str | None = Field(default=None, max_length=120)
    time_on_site: float | None = Field(default=None, ge=0)
    pages_viewed: int | None = Field(default=None, ge=0)


class LeadScoreQuery(BaseModel):
    lead: LeadScoreRequest
    now: datetime | None = None


class LeadRankQuery(BaseModel):
    leads: list[LeadScoreRequest] = Field(max_length=500)
    now: datetime | None = None


class FactorScoresResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    contact_completeness: int
    project_quality: int
    engagement: int
    timing: int


class LeadScoreResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    total: int = Field(ge=0, le=100)
    grade: LeadGrade
    factors: FactorScoresResponse
    recommendations: list[str]


class RankedLeadResponse(BaseModel):
    position: int
    lead: LeadScoreRequest
    score: LeadScoreResponse

"""Deterministic lead scoring used to order sales follow-up."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Iterable, Mapping, NamedTuple

from treeshop.core.enums import PEAK_SEASONS, UNKNOWN_SOURCE, LeadGrade, LeadSource, Season
from treeshop.utils.tiers import (
    Tier,
    first_matching_tier,
    first_tier_within,
    validate_ascending_tiers,
    validate_tiers,
)
from treeshop.utils.validators import is_present

logger = logging.getLogger(__name__)

MAX_RECOMMENDATIONS = 5

HOT_LEAD = "🔥 HOT LEAD - Contact immediately!"
CONTACT_WITHIN_HOUR = "Contact within next hour"
COLD_LEAD = "⚠️ Cold lead - needs re-engagement"


class FreshnessTier(NamedTuple):
    """Timing points and follow-up advice for leads up to ``max_hours`` old.

    Urgent advice is placed right after the grade framing; the rest is
    appended after the data-gap advisories.
    """

    max_hours: float
    points: int
    advice: str
    urgent: bool = False


@dataclass(frozen=True)
class LeadScoringWeights:
    """Point table for every scoring factor. Bonus tiers run highest threshold first."""

    email: int = 8
    phone: int = 10
    address: int = 5
    name: int = 2

    acreage_known: int = 10
    acreage_tiers: tuple[Tier, ...] = ((5, 10), (2, 5), (1, 2))
    package_selected: int = 8
    value_tiers: tuple[Tier, ...] = ((50000, 7), (20000, 5), (10000, 3), (5000, 1))
    notes: int = 2

    source_points: Mapping[str, int] = field(
        default_factory=lambda: {
            LeadSource.REFERRAL.value: 12,
            LeadSource.DIRECT_SITE.value: 10,
            LeadSource.REGIONAL_SITE.value: 8,
        }
    )
    other_source: int = 5
    time_on_site_tiers: tuple[Tier, ...] = ((300, 5), (120, 3), (60, 1))
    pages_viewed_tiers: tuple[Tier, ...] = ((5, 3), (3, 2), (2, 1))

    # Youngest first; a lead older than every tier gets cold_lead_advice and no points.
    freshness_tiers: tuple[FreshnessTier, ...] = (
        FreshnessTier(1, 20, HOT_LEAD, urgent=True),
        FreshnessTier(4, 15, CONTACT_WITHIN_HOUR, urgent=True),
        FreshnessTier(24, 10, "Follow up today"),
        FreshnessTier(48, 5, "Follow up within 24 hours"),
        FreshnessTier(168, 2, "Lead cooling - contact ASAP"),
    )
    cold_lead_advice: str = COLD_LEAD
    peak_season_bonus: int = 2

    max_contact_completeness: int = 25
    max_project_quality: int = 35
    max_engagement: int = 20
    max_timing: int = 20

    grade_thresholds: tuple[tuple[int, LeadGrade], ...] = (
        (85, LeadGrade.A),
        (70, LeadGrade.B),
        (55, LeadGrade.C),
        (40, LeadGrade.D),
    )

    def __post_init__(self) -> None:
        for tiers in (self.acreage_tiers, self.value_tiers, self.time_on_site_tiers, self.pages_viewed_tiers):
            validate_tiers(tiers)
        validate_ascending_tiers(self.freshness_tiers)


GRADE_FRAMING = {
    LeadGrade.A: "⭐ Premium lead - prioritize!",
    LeadGrade.B: "Strong lead - follow up promptly",
    LeadGrade.C: "Average lead - standard follow-up",
    LeadGrade.D: "Needs nurturing",
    LeadGrade.F: "Low priority - automated follow-up",
}


@dataclass(frozen=True)
class LeadScoringFactors:
    """Flattened scoring inputs for a single lead."""

    has_email: bool = False
    has_phone: bool = False
    has_address: bool = False
    has_name: bool = False
    has_acreage: bool = False
    acreage_size: float | None = None
    has_package_selected: bool = False
    estimated_value: float | None = None
    has_notes: bool = False
    source: str = UNKNOWN_SOURCE
    time_on_site: float | None = None
    pages_viewed: int | None = None
    hours_since_submission: float = 0.0
    season: Season | None = None


@dataclass(frozen=True)
class LeadRecord:
    created_at: datetime
    name: str | None = None
    email: str | None = None
    phone: str | None = None
    address: str | None = None
    acreage: float | None = None
    selected_package: str | None = None
    estimated_total: float | None = None
    notes: str | None = None
    source: str | None = None
    time_on_site: float | None = None
    pages_viewed: int | None = None


@dataclass(frozen=True)
class FactorScores:
    contact_completeness: int
    project_quality: int
    engagement: int
    timing: int

    @property
    def total(self) -> int:
        return self.contact_completeness + self.project_quality + self.engagement + self.timing


@dataclass(frozen=True)
class LeadScore:
    total: int
    grade: LeadGrade
    factors: FactorScores
    recommendations: tuple[str, ...]


def season_for(moment: datetime) -> Season:
    month = moment.month
    if 3 <= month <= 5:
        return Season.SPRING
    if 6 <= month <= 8:
        return Season.SUMMER
    if 9 <= month <= 11:
        return Season.FALL
    return Season.WINTER


def _as_utc(moment: datetime) -> datetime:
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment


class LeadScoringService:
    """Scores leads on contact completeness, project quality, engagement and timing."""

    def __init__(self, weights: LeadScoringWeights | None = None) -> None:
        self.weights = weights or LeadScoringWeights()

    def _contact_completeness(self, factors: LeadScoringFactors, advisories: list[str]) -> int:
        w = self.weights
        points = 0
        checks = (
            (factors.has_email, w.email, "Request email address"),
            (factors.has_phone, w.phone, "Request phone number"),
            (factors.has_address, w.address, "Request property address"),
            (factors.has_name, w.name, "Request full name"),
        )
        for present, weight, advice in checks:
            if present:
                points += weight
            else:
                advisories.append(advice)
        return min(points, w.max_contact_completeness)

    def _project_quality(self, factors: LeadScoringFactors, advisories: list[str]) -> int:
        w = self.weights
        points = 0
        if factors.has_acreage:
            points += w.acreage_known + first_matching_tier(factors.acreage_size, w.acreage_tiers)
        else:
            advisories.append("Determine property size")

        if factors.has_package_selected:
            points += w.package_selected
        else:
            advisories.append("Discuss service package options")

        points += first_matching_tier(factors.estimated_value, w.value_tiers)
        if factors.has_notes:
            points += w.notes
        # The raw factor sum can reach 37; the documented ceiling is enforced here.
        return min(points, w.max_project_quality)

    def _engagement(self, factors: LeadScoringFactors) -> int:
        w = self.weights
        points = w.source_points.get(factors.source, w.other_source)
        points += first_matching_tier(factors.time_on_site, w.time_on_site_tiers)
        points += first_matching_tier(factors.pages_viewed, w.pages_viewed_tiers)
        return min(points, w.max_engagement)

    def _timing(self, factors: LeadScoringFactors, advisories: list[str]) -> tuple[int, str | None]:
        """Return timing points and the urgent framing line, if the lead is that fresh."""
        w = self.weights
        tier = first_tier_within(factors.hours_since_submission, w.freshness_tiers)
        urgent = None
        if tier is None:
            points = 0
            advisories.append(w.cold_lead_advice)
        else:
            _, points, advice, is_urgent = tier
            if is_urgent:
                urgent = advice
            else:
                advisories.append(advice)

        if factors.season in PEAK_SEASONS:
            points += w.peak_season_bonus
        return min(points, w.max_timing), urgent

    def grade_for(self, total: int) -> LeadGrade:
        for threshold, grade in self.weights.grade_thresholds:
            if total >= threshold:
                return grade
        return LeadGrade.F

    def calculate(self, factors: LeadScoringFactors) -> LeadScore:
        advisories: list[str] = []
        contact = self._contact_completeness(factors, advisories)
        project = self._project_quality(factors, advisories)
        engagement = self._engagement(factors)
        timing, urgent = self._timing(factors, advisories)

        scores = FactorScores(
            contact_completeness=contact,
            project_quality=project,
            engagement=engagement,
            timing=timing,
        )
        total = scores.total
        grade = self.grade_for(total)

        recommendations = [GRADE_FRAMING[grade]]
        if urgent:
            recommendations.append(urgent)
        recommendations.extend(advisories)

        return LeadScore(
            total=total,
            grade=grade,
            factors=scores,
            recommendations=tuple(recommendations[:MAX_RECOMMENDATIONS]),
        )

    @staticmethod
    def factors_from_record(record: LeadRecord, now: datetime | None = None) -> LeadScoringFactors:
        current = _as_utc(now or datetime.now(timezone.utc))
        elapsed = current - _as_utc(record.created_at)
        return LeadScoringFactors(
            has_email=is_present(record.email),
            has_phone=is_present(record.phone),
            has_address=is_present(record.address),
            has_name=is_present(record.name),
            has_acreage=bool(record.acreage),
            acreage_size=record.acreage,
            has_package_selected=is_present(record.selected_package),
            estimated_value=record.estimated_total,
            has_notes=is_present(record.notes),
            source=record.source or UNKNOWN_SOURCE,
            time_on_site=record.time_on_site,
            pages_viewed=record.pages_viewed,
            hours_since_submission=elapsed.total_seconds() / 3600,
            season=season_for(current),
        )

    def score_lead(self, record: LeadRecord, now: datetime | None = None) -> LeadScore:
        score = self.calculate(self.factors_from_record(record, now=now))
        logger.debug(
            "leads.scored",
            extra={"event": "leads.scored", "total": score.total, "grade": score.grade.value},
        )
        return score

    def rank_leads(
        self, records: Iterable[LeadRecord], now: datetime | None = None
    ) -> list[tuple[LeadRecord, LeadScore]]:
        """Score leads against one shared clock, best first; ties go to the oldest lead."""
        current = _as_utc(now or datetime.now(timezone.utc))
        scored = [(record, self.score_lead(record, now=current)) for record in records]
        scored.sort(key=lambda pair: (-pair[1].total, _as_utc(pair[0].created_at)))
        logger.info("leads.ranked", extra={"event": "leads.ranked", "count": len(scored)})
        return scored

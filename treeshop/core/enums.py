"""Enums for the TreeShop application."""

from enum import Enum


class ServiceType(Enum):
    """Priced service lines."""

    FORESTRY_MULCHING = "forestry-mulching"
    LAND_CLEARING = "land-clearing"


class LeadSource(Enum):
    """
    Known lead intake channels.

    Leads may arrive from channels not listed here; those score as "other".
    """

    DIRECT_SITE = "treeshop.app"
    REGIONAL_SITE = "fltreeshop.com"
    REFERRAL = "referral"
    SOCIAL = "social"
    YOUTUBE = "youtube"


class LeadGrade(Enum):
    """Letter grade assigned from a lead's total score."""

    A = "A"
    B = "B"
    C = "C"
    D = "D"
    F = "F"


class Season(Enum):
    SPRING = "spring"
    SUMMER = "summer"
    FALL = "fall"
    WINTER = "winter"


# Tree work peaks in spring and fall.
PEAK_SEASONS = frozenset({Season.SPRING, Season.FALL})

UNKNOWN_SOURCE = "unknown"

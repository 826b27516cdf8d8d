"""Slide plan manifest."""

from .slide_plan import (
    EXPECTED_SLIDE_COUNT,
    RANKED_LIST_BY_KIND,
    PlanSection,
    SlideKind,
    SlidePlan,
    SlidePlanEntry,
    batch_count,
    build_plan,
)

__all__ = [
    "EXPECTED_SLIDE_COUNT",
    "RANKED_LIST_BY_KIND",
    "PlanSection",
    "SlideKind",
    "SlidePlan",
    "SlidePlanEntry",
    "batch_count",
    "build_plan",
]

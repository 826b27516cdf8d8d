"""
Slide plan: the static manifest of report slides.

The plan partitions slide ids into named sections. Every section covers a
contiguous id range; sections are ordered and never overlap. All sections
except the shipment records section have a fixed size. The shipment records
section holds one slide per batch of records, so its size follows the record
count: ``ceil(transaction_count / batch_size)``.

Sections:
    foundation           1-8     overview slides
    importing_countries  9-23    per importing country (ranks 1-5 and 1-10)
    exporting_countries  24-39   overview + per exporting country
    supplier_buyer       40-62   overviews + top 10 suppliers + top 10 buyers
    pricing              63      pricing analysis
    shipment_records     67-     one slide per record batch
"""

import math
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum

from trade_report.shared.exceptions import StructureDeviationError

EXPECTED_SLIDE_COUNT = 297
DEFAULT_BATCH_SIZE = 10
DEFAULT_TRANSACTION_COUNT = 2340
SHIPMENT_START_ID = 67


class SlideKind(str, Enum):
    """Content kind of a slide; each kind has exactly one renderer."""

    TITLE_AGENDA = "title_agenda"
    TABLE_OF_CONTENTS = "table_of_contents"
    EXECUTIVE_SUMMARY = "executive_summary"
    PRODUCT_OVERVIEW = "product_overview"
    MARKET_SHARE_ANALYSIS = "market_share_analysis"
    GEOGRAPHY_INTELLIGENCE = "geography_intelligence"
    SUPPLIER_BUYER_RELATIONSHIPS = "supplier_buyer_relationships"
    TOP_IMPORTING_COUNTRIES = "top_importing_countries"
    IMPORTING_COUNTRY_SUPPLIERS = "importing_country_suppliers"
    IMPORTING_COUNTRY_COMPANIES = "importing_country_companies"
    TOP_EXPORTING_COUNTRIES = "top_exporting_countries"
    EXPORTING_COUNTRY_DESTINATIONS = "exporting_country_destinations"
    EXPORTING_COUNTRY_COMPANIES = "exporting_country_companies"
    SUPPLIER_BUYER_INTELLIGENCE = "supplier_buyer_intelligence"
    TOP_SUPPLIERS_ANALYSIS = "top_suppliers_analysis"
    SUPPLIER_DETAILED_ANALYSIS = "supplier_detailed_analysis"
    TOP_IMPORTERS_ANALYSIS = "top_importers_analysis"
    IMPORTER_DETAILED_ANALYSIS = "importer_detailed_analysis"
    PRICING_ANALYSIS = "pricing_analysis"
    SHIPMENT_RECORDS = "shipment_records"


# Ranked list each rank-parameterized kind resolves against
RANKED_LIST_BY_KIND: dict[SlideKind, str] = {
    SlideKind.IMPORTING_COUNTRY_SUPPLIERS: "importing_countries",
    SlideKind.IMPORTING_COUNTRY_COMPANIES: "importing_countries",
    SlideKind.EXPORTING_COUNTRY_DESTINATIONS: "exporting_countries",
    SlideKind.EXPORTING_COUNTRY_COMPANIES: "exporting_countries",
    SlideKind.SUPPLIER_DETAILED_ANALYSIS: "top_suppliers",
    SlideKind.IMPORTER_DETAILED_ANALYSIS: "top_buyers",
}


@dataclass(frozen=True)
class SlidePlanEntry:
    """One planned slide with its optional rank or record-range parameters."""

    id: int
    kind: SlideKind
    title: str
    section: str
    rank: int | None = None
    record_start: int | None = None
    record_end: int | None = None

    @property
    def rank_list(self) -> str | None:
        """Name of the ranked list this entry's rank refers to."""
        if self.rank is None:
            return None
        return RANKED_LIST_BY_KIND.get(self.kind)

    @property
    def record_count(self) -> int:
        if self.record_start is None or self.record_end is None:
            return 0
        return self.record_end - self.record_start + 1


@dataclass(frozen=True)
class PlanSection:
    """A named, contiguous range of slide ids."""

    name: str
    start_id: int
    end_id: int
    entries: tuple[SlidePlanEntry, ...] = field(default_factory=tuple)

    def __post_init__(self):
        expected_ids = list(range(self.start_id, self.end_id + 1))
        actual_ids = [entry.id for entry in self.entries]
        if actual_ids != expected_ids:
            raise ValueError(
                f"Section '{self.name}' ids must be contiguous "
                f"{self.start_id}-{self.end_id}, got {actual_ids}"
            )

    def __len__(self) -> int:
        return len(self.entries)

    @property
    def id_range(self) -> tuple[int, int]:
        return (self.start_id, self.end_id)


@dataclass(frozen=True)
class SlidePlan:
    """Ordered, immutable sequence of plan sections."""

    sections: tuple[PlanSection, ...]

    def __post_init__(self):
        previous_end = 0
        for section in self.sections:
            if section.entries and section.start_id <= previous_end:
                raise ValueError(
                    f"Section '{section.name}' starts at {section.start_id}, "
                    f"overlapping ids up to {previous_end}"
                )
            if section.entries:
                previous_end = section.end_id

    def total_entries(self) -> int:
        """Sum of all section lengths."""
        return sum(len(section) for section in self.sections)

    def entries(self) -> list[SlidePlanEntry]:
        """All entries in ascending id order."""
        return [entry for section in self.sections for entry in section.entries]

    def section(self, name: str) -> PlanSection:
        for section in self.sections:
            if section.name == name:
                return section
        raise KeyError(name)

    def kinds(self) -> set[SlideKind]:
        return {entry.kind for entry in self.entries()}

    def validate(self, expected: int = EXPECTED_SLIDE_COUNT) -> None:
        """
        Check the plan holds exactly ``expected`` slides.

        Raises:
            StructureDeviationError: If the total entry count differs
        """
        actual = self.total_entries()
        if actual != expected:
            raise StructureDeviationError(expected=expected, actual=actual)

    def rank_requirements(self) -> dict[str, int]:
        """Highest rank referenced per ranked list."""
        requirements: dict[str, int] = {}
        for entry in self.entries():
            list_name = entry.rank_list
            if list_name is None:
                continue
            requirements[list_name] = max(requirements.get(list_name, 0), entry.rank)
        return requirements

    def progress_report(self, rendered_ids: Iterable[int]) -> list[dict]:
        """Per-section expected vs generated counts for the given rendered slide ids."""
        rendered = set(rendered_ids)
        report = []
        for section in self.sections:
            expected = len(section)
            generated = sum(1 for entry in section.entries if entry.id in rendered)
            report.append(
                {
                    "name": section.name,
                    "range": list(section.id_range),
                    "expected": expected,
                    "generated": generated,
                    "status": "Complete" if generated == expected else "In Progress",
                }
            )
        return report


def _section(name: str, start_id: int, entries: list[SlidePlanEntry]) -> PlanSection:
    return PlanSection(
        name=name,
        start_id=start_id,
        end_id=start_id + len(entries) - 1,
        entries=tuple(entries),
    )


def _ranked_entries(
    start_id: int,
    count: int,
    kind: SlideKind,
    section: str,
    title: str,
) -> list[SlidePlanEntry]:
    return [
        SlidePlanEntry(
            id=start_id + i,
            kind=kind,
            title=title.format(rank=i + 1),
            section=section,
            rank=i + 1,
        )
        for i in range(count)
    ]


def _foundation_section() -> PlanSection:
    name = "foundation"
    slides = [
        (SlideKind.TITLE_AGENDA, "Title & Agenda"),
        (SlideKind.TABLE_OF_CONTENTS, "Table of Contents"),
        (SlideKind.EXECUTIVE_SUMMARY, "Executive Summary (Key Findings)"),
        (SlideKind.PRODUCT_OVERVIEW, "Product Overview"),
        (
            SlideKind.MARKET_SHARE_ANALYSIS,
            "Market share analysis - value, volume, import, export, countries",
        ),
        (
            SlideKind.GEOGRAPHY_INTELLIGENCE,
            "Geography Import Export Intelligence - top 10 value and volume",
        ),
        (
            SlideKind.SUPPLIER_BUYER_RELATIONSHIPS,
            "Supplier-Buyer Relationships with countries",
        ),
        (
            SlideKind.TOP_IMPORTING_COUNTRIES,
            "Top 10 Importing countries - name, market share and charts",
        ),
    ]
    entries = [
        SlidePlanEntry(id=1 + i, kind=kind, title=title, section=name)
        for i, (kind, title) in enumerate(slides)
    ]
    return _section(name, 1, entries)


def _importing_countries_section() -> PlanSection:
    name = "importing_countries"
    entries = _ranked_entries(
        9,
        5,
        SlideKind.IMPORTING_COUNTRY_SUPPLIERS,
        name,
        "Top {rank} Importing country - top 10 supplier countries",
    ) + _ranked_entries(
        14,
        10,
        SlideKind.IMPORTING_COUNTRY_COMPANIES,
        name,
        "Top {rank} Importing country - top 10 supplier companies",
    )
    return _section(name, 9, entries)


def _exporting_countries_section() -> PlanSection:
    name = "exporting_countries"
    entries = (
        [
            SlidePlanEntry(
                id=24,
                kind=SlideKind.TOP_EXPORTING_COUNTRIES,
                title="Top 10 Exporting countries - name, market share and charts",
                section=name,
            )
        ]
        + _ranked_entries(
            25,
            5,
            SlideKind.EXPORTING_COUNTRY_DESTINATIONS,
            name,
            "Top {rank} Exporting country - top 10 destination countries",
        )
        + _ranked_entries(
            30,
            10,
            SlideKind.EXPORTING_COUNTRY_COMPANIES,
            name,
            "Top {rank} Exporting country - top 10 importer companies",
        )
    )
    return _section(name, 24, entries)


def _supplier_buyer_section() -> PlanSection:
    name = "supplier_buyer"
    entries = (
        [
            SlidePlanEntry(
                id=40,
                kind=SlideKind.SUPPLIER_BUYER_INTELLIGENCE,
                title="Supplier & Buyer Intelligence",
                section=name,
            ),
            SlidePlanEntry(
                id=41,
                kind=SlideKind.TOP_SUPPLIERS_ANALYSIS,
                title="Top 15 Suppliers Analysis - market share, supplier countries and importers",
                section=name,
            ),
        ]
        + _ranked_entries(
            42,
            10,
            SlideKind.SUPPLIER_DETAILED_ANALYSIS,
            name,
            "Top {rank} Supplier detailed analysis",
        )
        + [
            SlidePlanEntry(
                id=52,
                kind=SlideKind.TOP_IMPORTERS_ANALYSIS,
                title="Top 15 Importers Analysis - market share, supplier countries and importers",
                section=name,
            )
        ]
        + _ranked_entries(
            53,
            10,
            SlideKind.IMPORTER_DETAILED_ANALYSIS,
            name,
            "Top {rank} Importer detailed analysis",
        )
    )
    return _section(name, 40, entries)


def _pricing_section() -> PlanSection:
    name = "pricing"
    entry = SlidePlanEntry(
        id=63,
        kind=SlideKind.PRICING_ANALYSIS,
        title="Pricing analysis (per unit)",
        section=name,
    )
    return _section(name, 63, [entry])


def batch_count(transaction_count: int, batch_size: int) -> int:
    """Number of record batches: ``ceil(transaction_count / batch_size)``."""
    if batch_size <= 0:
        raise ValueError("batch_size must be > 0")
    if transaction_count < 0:
        raise ValueError("transaction_count must be >= 0")
    return math.ceil(transaction_count / batch_size)


def _shipment_records_section(
    transaction_count: int, batch_size: int, start_id: int
) -> PlanSection:
    name = "shipment_records"
    entries = []
    for i in range(batch_count(transaction_count, batch_size)):
        record_start = i * batch_size + 1
        record_end = min((i + 1) * batch_size, transaction_count)
        entries.append(
            SlidePlanEntry(
                id=start_id + i,
                kind=SlideKind.SHIPMENT_RECORDS,
                title=f"Shipment Records {i + 1}",
                section=name,
                record_start=record_start,
                record_end=record_end,
            )
        )
    return _section(name, start_id, entries)


def build_plan(
    transaction_count: int = DEFAULT_TRANSACTION_COUNT,
    batch_size: int = DEFAULT_BATCH_SIZE,
    shipment_start_id: int = SHIPMENT_START_ID,
) -> SlidePlan:
    """
    Build the report's slide plan.

    Args:
        transaction_count: Number of shipment records to partition
        batch_size: Records per shipment slide
        shipment_start_id: Id of the first shipment records slide

    Returns:
        SlidePlan with the five fixed sections followed by one shipment
        records entry per batch. Batch ``i`` covers records
        ``[i*batch_size+1, min((i+1)*batch_size, transaction_count)]``.

    Raises:
        ValueError: If batch_size <= 0, transaction_count < 0, or the
            shipment section would overlap the fixed sections
    """
    return SlidePlan(
        sections=(
            _foundation_section(),
            _importing_countries_section(),
            _exporting_countries_section(),
            _supplier_buyer_section(),
            _pricing_section(),
            _shipment_records_section(transaction_count, batch_size, shipment_start_id),
        )
    )

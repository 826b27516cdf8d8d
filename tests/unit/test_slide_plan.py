"""Unit tests for the slide plan manifest."""

import pytest

_hyp = pytest.importorskip("hypothesis")
from hypothesis import given
from hypothesis import strategies as st

from trade_report.plan.slide_plan import (
    EXPECTED_SLIDE_COUNT,
    PlanSection,
    SlideKind,
    SlidePlanEntry,
    batch_count,
    build_plan,
)
from trade_report.shared.exceptions import StructureDeviationError


class TestDefaultPlan:
    """Test the default 297-slide plan."""

    def test_total_is_expected_slide_count(self):
        plan = build_plan()
        assert plan.total_entries() == EXPECTED_SLIDE_COUNT == 297
        plan.validate()  # Should not raise

    def test_section_sizes(self):
        plan = build_plan()
        sizes = {section.name: len(section) for section in plan.sections}
        assert sizes == {
            "foundation": 8,
            "importing_countries": 15,
            "exporting_countries": 16,
            "supplier_buyer": 23,
            "pricing": 1,
            "shipment_records": 234,
        }

    def test_section_id_ranges(self):
        plan = build_plan()
        assert plan.section("foundation").id_range == (1, 8)
        assert plan.section("importing_countries").id_range == (9, 23)
        assert plan.section("exporting_countries").id_range == (24, 39)
        assert plan.section("supplier_buyer").id_range == (40, 62)
        assert plan.section("pricing").id_range == (63, 63)
        assert plan.section("shipment_records").id_range == (67, 300)

    def test_ids_ascending_with_reserved_gap(self):
        ids = [entry.id for entry in build_plan().entries()]
        assert ids == sorted(ids)
        assert len(ids) == len(set(ids))
        assert not {64, 65, 66} & set(ids)

    def test_every_kind_is_used(self):
        assert build_plan().kinds() == set(SlideKind)

    def test_rank_requirements(self):
        assert build_plan().rank_requirements() == {
            "importing_countries": 10,
            "exporting_countries": 10,
            "top_suppliers": 10,
            "top_buyers": 10,
        }

    def test_ranked_entries(self):
        plan = build_plan()
        entries = {entry.id: entry for entry in plan.entries()}
        assert entries[9].kind == SlideKind.IMPORTING_COUNTRY_SUPPLIERS
        assert entries[9].rank == 1
        assert entries[13].rank == 5
        assert entries[14].kind == SlideKind.IMPORTING_COUNTRY_COMPANIES
        assert entries[23].rank == 10
        assert entries[42].rank_list == "top_suppliers"
        assert entries[62].kind == SlideKind.IMPORTER_DETAILED_ANALYSIS
        assert entries[62].rank == 10
        assert entries[1].rank_list is None

    def test_unknown_section(self):
        with pytest.raises(KeyError):
            build_plan().section("appendix")


class TestStructureValidation:
    def test_batch_count_change_fails_loudly(self):
        plan = build_plan(transaction_count=2350)
        with pytest.raises(StructureDeviationError) as exc_info:
            plan.validate(297)
        assert exc_info.value.expected == 297
        assert exc_info.value.actual == 298

    def test_smaller_batch_size_fails(self):
        with pytest.raises(StructureDeviationError, match="expected 297 slides, got 531"):
            build_plan(batch_size=5).validate()

    def test_shipment_section_overlap(self):
        with pytest.raises(ValueError, match="overlapping"):
            build_plan(shipment_start_id=60)

    def test_non_contiguous_section(self):
        entries = (
            SlidePlanEntry(id=1, kind=SlideKind.TITLE_AGENDA, title="a", section="s"),
            SlidePlanEntry(id=3, kind=SlideKind.TABLE_OF_CONTENTS, title="b", section="s"),
        )
        with pytest.raises(ValueError, match="contiguous"):
            PlanSection(name="s", start_id=1, end_id=2, entries=entries)


class TestShipmentBatches:
    def test_batch_count(self):
        assert batch_count(2340, 10) == 234
        assert batch_count(25, 10) == 3
        assert batch_count(0, 10) == 0

    def test_invalid_batch_arguments(self):
        with pytest.raises(ValueError):
            batch_count(10, 0)
        with pytest.raises(ValueError):
            batch_count(-1, 10)

    def test_short_final_batch(self):
        section = build_plan(transaction_count=25, batch_size=10).section("shipment_records")
        ranges = [(entry.record_start, entry.record_end) for entry in section.entries]
        assert ranges == [(1, 10), (11, 20), (21, 25)]
        assert [entry.record_count for entry in section.entries] == [10, 10, 5]

    def test_no_records(self):
        plan = build_plan(transaction_count=0)
        assert len(plan.section("shipment_records")) == 0
        assert plan.total_entries() == 63

    @given(
        transaction_count=st.integers(min_value=0, max_value=500),
        batch_size=st.integers(min_value=1, max_value=50),
    )
    def test_batches_partition_records(self, transaction_count, batch_size):
        section = build_plan(transaction_count, batch_size).section("shipment_records")
        covered = [
            record_id
            for entry in section.entries
            for record_id in range(entry.record_start, entry.record_end + 1)
        ]
        assert covered == list(range(1, transaction_count + 1))
        assert len(section) == batch_count(transaction_count, batch_size)


class TestProgressReport:
    def test_partial_progress(self):
        plan = build_plan()
        report = plan.progress_report(range(1, 9))
        by_name = {row["name"]: row for row in report}

        assert by_name["foundation"] == {
            "name": "foundation",
            "range": [1, 8],
            "expected": 8,
            "generated": 8,
            "status": "Complete",
        }
        assert by_name["pricing"]["generated"] == 0
        assert by_name["pricing"]["status"] == "In Progress"

    def test_complete_progress(self):
        plan = build_plan()
        report = plan.progress_report(entry.id for entry in plan.entries())
        assert all(row["status"] == "Complete" for row in report)

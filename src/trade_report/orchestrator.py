"""
Report orchestration.

ReportOrchestrator joins the slide plan and the normalized product view: it
validates both before anything is rendered, renders every planned slide in
ascending id order and assembles the ReportDocument. A run is a single linear
pass; any failure aborts it without a partial document.

State Transitions:
    not_started → generating (when generate() is called)
    generating → complete (all slides rendered and counted)
    generating → failed (any error, re-raised to the caller)
"""

import random
import time

from pydantic import BaseModel, ConfigDict

from trade_report.config.models import ReportConfig
from trade_report.plan.slide_plan import SlidePlan, build_plan
from trade_report.processing.aggregator import TradeDataProcessor
from trade_report.rendering.cosmetics import CosmeticMetrics
from trade_report.rendering.registry import RenderContext, RenderedSlide, RendererRegistry
from trade_report.rendering.slides import default_registry
from trade_report.shared.exceptions import StructureDeviationError
from trade_report.shared.logging_config import (
    apply_log_level,
    configure_structured_logging,
)
from trade_report.shared.logging_utils import get_structured_logger
from trade_report.shared.metrics import (
    generation_duration_seconds,
    report_runs_total,
    slides_rendered_total,
)
from trade_report.shared.models import NormalizedView, RawInput

logger = get_structured_logger(__name__)


def cosmetic_seed(seed: int | None) -> int | None:
    """Seed for decorative metrics, distinct from the record stream's seed."""
    return None if seed is None else seed + 1


class ReportDocument(BaseModel):
    """Ordered sequence of rendered slides for one product."""

    model_config = ConfigDict(frozen=True)

    title: str
    product_name: str
    total_slides: int
    slides: tuple[RenderedSlide, ...]


class ReportOrchestrator:
    """Drives one report run from raw product data to a ReportDocument."""

    STATE_NOT_STARTED = "not_started"
    STATE_GENERATING = "generating"
    STATE_COMPLETE = "complete"
    STATE_FAILED = "failed"

    def __init__(
        self,
        raw: RawInput,
        config: ReportConfig | None = None,
        renderers: RendererRegistry | None = None,
        cosmetics: CosmeticMetrics | None = None,
    ):
        """
        Initialize the orchestrator.

        Args:
            raw: Product dataset to report on
            config: Report configuration (record volume, expected slide count, seed);
                its log level is applied to the ``trade_report`` logger
            renderers: Renderer registry; defaults to one covering every SlideKind
            cosmetics: Source of decorative metrics; seeded from
                ``cosmetic_seed(config.seed)`` when not given
        """
        if config is not None:
            apply_log_level(config.logging)
        self.raw = raw
        self.config = config or ReportConfig()
        self.renderers = renderers or default_registry()
        self.cosmetics = cosmetics or CosmeticMetrics(seed=cosmetic_seed(self.config.seed))

        self.state = self.STATE_NOT_STARTED
        self.correlation_id: str | None = None
        self._plan: SlidePlan | None = None
        self._view: NormalizedView | None = None
        self._rendered_ids: list[int] = []

    @property
    def plan(self) -> SlidePlan | None:
        return self._plan

    @property
    def view(self) -> NormalizedView | None:
        return self._view

    def build_plan(self) -> SlidePlan:
        """Slide plan for the configured record count and batch size."""
        records = self.config.records
        return build_plan(
            transaction_count=records.transaction_count,
            batch_size=records.batch_size,
            shipment_start_id=self.config.plan.shipment_start_id,
        )

    def generate(self) -> ReportDocument:
        """
        Generate the complete report.

        Returns:
            ReportDocument with one slide per plan entry, ascending by id

        Raises:
            RuntimeError: If this orchestrator has already run
            StructureDeviationError: If the plan or the rendered slide count
                differs from the expected slide count
            InvalidInputError: If the product dataset is unusable
            RankNotFoundError: If a ranked list is too short for the plan
            UnknownSlideKindError: If the plan uses a kind with no renderer
        """
        if self.state != self.STATE_NOT_STARTED:
            raise RuntimeError(
                f"Report generation already {self.state}; create a new orchestrator"
            )

        self.state = self.STATE_GENERATING
        started = time.perf_counter()

        with logger.run(product=self.raw.name) as correlation_id:
            self.correlation_id = correlation_id
            try:
                document = self._run()
            except Exception as e:
                self.state = self.STATE_FAILED
                report_runs_total.labels(status="failed").inc()
                logger.error(
                    "Report generation failed",
                    error=str(e),
                    error_type=type(e).__name__,
                    rendered=len(self._rendered_ids),
                )
                raise

        generation_duration_seconds.observe(time.perf_counter() - started)
        report_runs_total.labels(status="complete").inc()
        self.state = self.STATE_COMPLETE
        return document

    def _run(self) -> ReportDocument:
        plan = self.build_plan()
        self._plan = plan

        expected = self.config.plan.expected_slides
        plan.validate(expected)
        entries = plan.entries()
        self.renderers.ensure_complete(entries)

        logger.info(
            "Starting report generation",
            expected_slides=expected,
            sections=[section.name for section in plan.sections],
        )

        processor = TradeDataProcessor(
            self.raw,
            config=self.config.records,
            rank_requirements=plan.rank_requirements(),
            rng=random.Random(self.config.seed),
        )
        self._view = processor.view
        context = RenderContext(view=processor.view, cosmetics=self.cosmetics, plan=plan)

        slides = []
        for entry in sorted(entries, key=lambda e: e.id):
            slide = self.renderers.render(entry, context)
            slides.append(slide)
            self._rendered_ids.append(entry.id)
            slides_rendered_total.labels(kind=entry.kind.value).inc()
            logger.debug("Rendered slide", slide_id=entry.id, kind=entry.kind.value)

        if len(slides) != plan.total_entries():
            raise StructureDeviationError(
                expected=plan.total_entries(), actual=len(slides), stage="render"
            )

        product_name = processor.view.product.name
        logger.info(
            "Report generation complete",
            product=product_name,
            total_slides=len(slides),
        )
        return ReportDocument(
            title=f"{product_name} Trade Intelligence Report",
            product_name=product_name,
            total_slides=len(slides),
            slides=tuple(slides),
        )

    def progress_report(self) -> list[dict]:
        """Per-section expected vs generated slide counts for the last run."""
        plan = self._plan or self.build_plan()
        return plan.progress_report(self._rendered_ids)


def generate_report(raw: RawInput, config: ReportConfig | None = None) -> ReportDocument:
    """
    Generate a report for ``raw`` with the default renderers.

    Writes the run's log entries as JSON lines at ``config.logging.level``.
    """
    config = config or ReportConfig()
    configure_structured_logging(config.logging)
    return ReportOrchestrator(raw, config=config).generate()

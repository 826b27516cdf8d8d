"""
Renderer registry and data-slice resolution.

A renderer turns one SlidePlanEntry plus the NormalizedView into a
RenderedSlide: the slide's id, kind, title and the data slice a document
exporter needs. Renderers are looked up by SlideKind; an unregistered kind is
an error, never a skipped slide.
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict

from trade_report.plan.slide_plan import SlideKind, SlidePlan, SlidePlanEntry
from trade_report.rendering.cosmetics import CosmeticMetrics
from trade_report.shared.exceptions import RankNotFoundError, UnknownSlideKindError
from trade_report.shared.models import NormalizedView, TransactionRecord


class RenderedSlide(BaseModel):
    """One rendered slide, in document order by ``id``."""

    model_config = ConfigDict(frozen=True)

    id: int
    kind: SlideKind
    title: str
    data: dict[str, Any]


@dataclass(frozen=True)
class RenderContext:
    """Everything a renderer may read."""

    view: NormalizedView
    cosmetics: CosmeticMetrics
    plan: SlidePlan | None = None

    def ranked_item(self, entry: SlidePlanEntry):
        """
        Resolve ``entry.rank`` against the ranked list its kind refers to.

        Raises:
            RankNotFoundError: If the rank is beyond the list (names slide id)
        """
        list_name = entry.rank_list
        if list_name is None:
            raise ValueError(f"Slide {entry.id} ({entry.kind.value}) has no rank parameter")
        items = self.view.ranked_list(list_name)
        if entry.rank < 1 or entry.rank > len(items):
            raise RankNotFoundError(
                list_name=list_name,
                rank=entry.rank,
                length=len(items),
                slide_id=entry.id,
            )
        return items[entry.rank - 1]

    def records_for(self, entry: SlidePlanEntry) -> tuple[TransactionRecord, ...]:
        """Records ``[record_start, record_end]`` (1-based, inclusive) for a batch entry."""
        if entry.record_start is None or entry.record_end is None:
            raise ValueError(f"Slide {entry.id} ({entry.kind.value}) has no record range")
        records = self.view.shipments.records
        if entry.record_end > len(records):
            raise RankNotFoundError(
                list_name="shipment_records",
                rank=entry.record_end,
                length=len(records),
                slide_id=entry.id,
            )
        return records[entry.record_start - 1 : entry.record_end]


Renderer = Callable[[SlidePlanEntry, RenderContext], RenderedSlide]


class RendererRegistry:
    """Maps each SlideKind to exactly one renderer."""

    def __init__(self, renderers: dict[SlideKind, Renderer] | None = None):
        self._renderers: dict[SlideKind, Renderer] = dict(renderers or {})

    def register(self, kind: SlideKind, renderer: Renderer) -> None:
        self._renderers[kind] = renderer

    def __contains__(self, kind: object) -> bool:
        return kind in self._renderers

    def kinds(self) -> set[SlideKind]:
        return set(self._renderers)

    def get(self, kind: SlideKind, slide_id: int | None = None) -> Renderer:
        """
        Look up the renderer for ``kind``.

        Raises:
            UnknownSlideKindError: If no renderer is registered
        """
        try:
            return self._renderers[kind]
        except KeyError:
            raise UnknownSlideKindError(kind, slide_id=slide_id) from None

    def ensure_complete(self, entries: Iterable[SlidePlanEntry]) -> None:
        """
        Check every entry's kind has a renderer before any rendering starts.

        Raises:
            UnknownSlideKindError: For the first entry whose kind is unregistered
        """
        for entry in entries:
            if entry.kind not in self._renderers:
                raise UnknownSlideKindError(entry.kind, slide_id=entry.id)

    def render(self, entry: SlidePlanEntry, context: RenderContext) -> RenderedSlide:
        return self.get(entry.kind, slide_id=entry.id)(entry, context)

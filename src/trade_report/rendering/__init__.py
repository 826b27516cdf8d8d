"""Slide renderers producing per-slide data slices."""

from .batch_summary import BatchSummary, records_to_frame, summarize_batch
from .cosmetics import CosmeticMetrics
from .registry import RenderContext, RenderedSlide, Renderer, RendererRegistry
from .slides import RENDERERS, default_registry

__all__ = [
    "BatchSummary",
    "CosmeticMetrics",
    "RENDERERS",
    "RenderContext",
    "RenderedSlide",
    "Renderer",
    "RendererRegistry",
    "default_registry",
    "records_to_frame",
    "summarize_batch",
]

"""Prometheus metrics for report generation."""
from prometheus_client import REGISTRY, CollectorRegistry, Counter, Histogram

# Collectors created here, keyed by (registry, name)
_registered: dict[tuple[CollectorRegistry, str], object] = {}


def _get_or_create_metric(
    metric_class,
    name: str,
    doc: str,
    labelnames=(),
    registry: CollectorRegistry = REGISTRY,
    **kwargs,
):
    """Return the collector registered under ``name``, creating it on first use."""
    key = (registry, name)
    metric = _registered.get(key)
    if metric is None:
        metric = metric_class(name, doc, labelnames=labelnames, registry=registry, **kwargs)
        _registered[key] = metric
    return metric


slides_rendered_total = _get_or_create_metric(
    Counter,
    "trade_report_slides_rendered",
    "Total number of slides rendered",
    ["kind"],
)

report_runs_total = _get_or_create_metric(
    Counter,
    "trade_report_runs",
    "Total number of report runs by outcome",
    ["status"],
)

records_generated_total = _get_or_create_metric(
    Counter,
    "trade_report_records_generated",
    "Total number of synthetic shipment records generated",
)

generation_duration_seconds = _get_or_create_metric(
    Histogram,
    "trade_report_generation_duration_seconds",
    "Time taken to generate a complete report",
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0],
)

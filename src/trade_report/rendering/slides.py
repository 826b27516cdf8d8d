"""
Slide renderers, one per SlideKind.

Each renderer reads the NormalizedView slice its plan entry points at and
returns the data a document exporter lays out. Raw numbers travel next to
their formatted strings so exporters can do further arithmetic.
"""

from collections.abc import Iterable, Sequence
from typing import Any

from pydantic import BaseModel

from trade_report.plan.slide_plan import SlideKind, SlidePlanEntry
from trade_report.rendering.batch_summary import summarize_batch
from trade_report.rendering.registry import RenderContext, RenderedSlide, RendererRegistry
from trade_report.shared.formatting import format_currency, format_percentage
from trade_report.shared.models import PricingBlock, RankedEntity

AGENDA = (
    "Market Overview",
    "Importing Countries Analysis",
    "Exporting Countries Analysis",
    "Supplier & Buyer Intelligence",
    "Pricing Analysis",
    "Shipment Records",
)

# Share of an importing country's value sourced from each supplier country
SUPPLIER_COUNTRY_SPLIT = (
    ("India", 0.35),
    ("United States", 0.25),
    ("Israel", 0.15),
    ("China", 0.10),
    ("Germany", 0.08),
    ("Others", 0.07),
)

# Share of an exporting country's value shipped to each destination
DESTINATION_COUNTRY_SPLIT = (
    ("United States", 0.32),
    ("Germany", 0.18),
    ("United Kingdom", 0.15),
    ("France", 0.12),
    ("Japan", 0.10),
    ("Canada", 0.08),
    ("Others", 0.05),
)

IMPORT_SUPPLIER_MULTIPLIERS: dict[str, dict[str, float]] = {
    "United States": {"India": 0.4, "USA": 0.3, "Israel": 0.2, "China": 0.1},
    "Germany": {"India": 0.35, "USA": 0.25, "Germany": 0.2, "Israel": 0.2},
    "United Kingdom": {"India": 0.4, "USA": 0.25, "Israel": 0.2, "Germany": 0.15},
}

EXPORT_BUYER_MULTIPLIERS: dict[str, dict[str, float]] = {
    "India": {"USA": 0.3, "Germany": 0.2, "UK": 0.15, "France": 0.1, "Japan": 0.1, "Canada": 0.1},
    "United States": {"USA": 0.4, "Germany": 0.2, "UK": 0.15, "Canada": 0.15, "Japan": 0.1},
    "Israel": {"USA": 0.4, "Germany": 0.25, "UK": 0.2, "France": 0.15},
}

DEFAULT_MULTIPLIER = 0.1
SIGNIFICANT_FLOW = 10_000_000


def _slide(entry: SlidePlanEntry, title: str, **data: Any) -> RenderedSlide:
    return RenderedSlide(id=entry.id, kind=entry.kind, title=title, data=data)


def _dump(items: Iterable[BaseModel]) -> list[dict]:
    return [item.model_dump() for item in items]


def _share_sum(items: Sequence[BaseModel | dict]) -> float:
    """Sum of ``raw_share`` over models or row dicts."""
    return sum(
        item["raw_share"] if isinstance(item, dict) else item.raw_share for item in items
    )


def _with_growth(context: RenderContext, items: Iterable[BaseModel]) -> list[dict]:
    rows = []
    for item in items:
        growth = context.cosmetics.growth()
        rows.append(
            {
                **item.model_dump(),
                "raw_growth": growth,
                "yoy_growth": context.cosmetics.format_trend(growth),
            }
        )
    return rows


def _split(base_value: float, split: Sequence[tuple[str, float]]) -> list[dict]:
    return [
        {
            "rank": index + 1,
            "country": country,
            "value": format_currency(base_value * fraction),
            "share": format_percentage(fraction * 100),
            "raw_value": base_value * fraction,
            "raw_share": fraction * 100,
        }
        for index, (country, fraction) in enumerate(split)
    ]


def _estimated_companies(
    context: RenderContext,
    base_value: float,
    companies: Sequence[RankedEntity],
    multipliers: dict[str, float],
) -> list[dict]:
    """Spread ``base_value`` over up to eight companies, largest first."""
    top = companies[:8]
    rows = []
    for index, company in enumerate(top):
        multiplier = multipliers.get(company.country, DEFAULT_MULTIPLIER)
        estimated = base_value * multiplier * (1 - index * 0.1) / 8
        share = estimated / base_value * 100 if base_value else 0.0
        growth = context.cosmetics.growth()
        rows.append(
            {
                "company": company.name,
                "country": company.country,
                "est_value": format_currency(estimated),
                "market_share": format_percentage(share),
                "yoy_growth": context.cosmetics.format_trend(growth),
                "raw_value": estimated,
                "raw_share": share,
                "raw_growth": growth,
            }
        )
    rows.sort(key=lambda row: row["raw_value"], reverse=True)
    for rank, row in enumerate(rows, start=1):
        row["rank"] = rank
    return rows


def _company_insights(rows: list[dict]) -> dict:
    return {
        "top3_share": _share_sum(rows[:3]),
        "leader": rows[0]["company"] if rows else None,
        "fastest_growing": next(
            (row["company"] for row in rows if row["raw_growth"] > 10), None
        ),
        "top_countries": list(dict.fromkeys(row["country"] for row in rows[:3])),
    }


def _flows(
    context: RenderContext,
    sources: Sequence[Any],
    targets: Sequence[Any],
    max_value: float,
    threshold: float = 0.0,
) -> list[dict]:
    flows = []
    for source in sources:
        for target in targets:
            value = context.cosmetics.flow_value(max_value)
            if value > threshold:
                flows.append({"source": source, "target": target, "value": value})
    return flows


# ================================
# FOUNDATION
# ================================


def render_title_agenda(entry: SlidePlanEntry, context: RenderContext) -> RenderedSlide:
    product = context.view.product
    return _slide(
        entry,
        f"{product.name} Trade Intelligence Report",
        product_name=product.name,
        category=product.category,
        date_range=context.view.market.date_range,
        agenda=list(AGENDA),
    )


def render_table_of_contents(entry: SlidePlanEntry, context: RenderContext) -> RenderedSlide:
    sections = []
    if context.plan is not None:
        sections = [
            {"name": section.name, "start_id": section.start_id, "end_id": section.end_id}
            for section in context.plan.sections
            if len(section)
        ]
    return _slide(entry, entry.title, sections=sections)


def render_executive_summary(entry: SlidePlanEntry, context: RenderContext) -> RenderedSlide:
    view = context.view
    importing = view.geography.importing_countries
    exporting = view.geography.exporting_countries
    suppliers = view.suppliers.top_suppliers
    buyers = view.buyers.top_buyers
    return _slide(
        entry,
        entry.title,
        market=view.market.model_dump(),
        top_importer=importing[0].model_dump() if importing else None,
        top_exporter=exporting[0].model_dump() if exporting else None,
        top_supplier=suppliers[0].model_dump() if suppliers else None,
        top_buyer=buyers[0].model_dump() if buyers else None,
        top3_supplier_share=format_percentage(_share_sum(suppliers[:3])),
        top3_import_share=format_percentage(_share_sum(importing[:3])),
    )


def render_product_overview(entry: SlidePlanEntry, context: RenderContext) -> RenderedSlide:
    view = context.view
    return _slide(
        entry,
        entry.title,
        product=view.product.model_dump(),
        price_range={"min": view.pricing.min_price, "max": view.pricing.max_price},
        total_records=view.market.total_records,
        total_value=view.market.total_value,
    )


def render_market_share_analysis(entry: SlidePlanEntry, context: RenderContext) -> RenderedSlide:
    view = context.view
    return _slide(
        entry,
        entry.title,
        top_suppliers=_dump(view.suppliers.top_suppliers[:5]),
        top_importing_countries=_dump(view.geography.importing_countries[:5]),
        top_exporting_countries=_dump(view.geography.exporting_countries[:5]),
    )


def render_geography_intelligence(entry: SlidePlanEntry, context: RenderContext) -> RenderedSlide:
    geography = context.view.geography
    return _slide(
        entry,
        entry.title,
        importing_countries=_dump(geography.importing_countries[:10]),
        exporting_countries=_dump(geography.exporting_countries[:10]),
    )


def render_supplier_buyer_relationships(
    entry: SlidePlanEntry, context: RenderContext
) -> RenderedSlide:
    geography = context.view.geography
    sources = [country.country for country in geography.exporting_countries[:5]]
    targets = [country.country for country in geography.importing_countries[:5]]
    return _slide(
        entry,
        entry.title,
        sources=sources,
        targets=targets,
        flows=_flows(context, sources, targets, max_value=1_000_000_000),
    )


def render_top_importing_countries(entry: SlidePlanEntry, context: RenderContext) -> RenderedSlide:
    view = context.view
    key_suppliers = [supplier.name for supplier in view.suppliers.top_suppliers[:2]]
    return _slide(
        entry,
        entry.title,
        countries=_with_growth(context, view.geography.importing_countries[:10]),
        key_suppliers=key_suppliers,
    )


# ================================
# IMPORTING / EXPORTING COUNTRIES
# ================================


def render_importing_country_suppliers(
    entry: SlidePlanEntry, context: RenderContext
) -> RenderedSlide:
    country = context.ranked_item(entry)
    return _slide(
        entry,
        f"{country.country}: Top Supplier Countries",
        country=country.model_dump(),
        supplier_countries=_split(country.raw_value, SUPPLIER_COUNTRY_SPLIT),
    )


def render_importing_country_companies(
    entry: SlidePlanEntry, context: RenderContext
) -> RenderedSlide:
    country = context.ranked_item(entry)
    rows = _estimated_companies(
        context,
        country.raw_value,
        context.view.suppliers.top_suppliers,
        IMPORT_SUPPLIER_MULTIPLIERS.get(country.country, {}),
    )
    return _slide(
        entry,
        f"{country.country}: Top Supplier Companies",
        country=country.model_dump(),
        companies=rows,
        insights=_company_insights(rows),
    )


def render_top_exporting_countries(entry: SlidePlanEntry, context: RenderContext) -> RenderedSlide:
    view = context.view
    destinations = [country.country for country in view.geography.importing_countries[:2]]
    return _slide(
        entry,
        entry.title,
        countries=_with_growth(context, view.geography.exporting_countries[:10]),
        main_destinations=destinations,
    )


def render_exporting_country_destinations(
    entry: SlidePlanEntry, context: RenderContext
) -> RenderedSlide:
    country = context.ranked_item(entry)
    return _slide(
        entry,
        f"{country.country}: Top Destination Countries",
        country=country.model_dump(),
        destination_countries=_split(country.raw_value, DESTINATION_COUNTRY_SPLIT),
    )


def render_exporting_country_companies(
    entry: SlidePlanEntry, context: RenderContext
) -> RenderedSlide:
    country = context.ranked_item(entry)
    rows = _estimated_companies(
        context,
        country.raw_value,
        context.view.buyers.top_buyers,
        EXPORT_BUYER_MULTIPLIERS.get(country.country, {}),
    )
    return _slide(
        entry,
        f"{country.country}: Top Importer Companies",
        country=country.model_dump(),
        companies=rows,
        insights=_company_insights(rows),
    )


# ================================
# SUPPLIER & BUYER
# ================================


def render_supplier_buyer_intelligence(
    entry: SlidePlanEntry, context: RenderContext
) -> RenderedSlide:
    view = context.view
    sources = [supplier.name for supplier in view.suppliers.top_suppliers[:8]]
    targets = [buyer.name for buyer in view.buyers.top_buyers[:8]]
    return _slide(
        entry,
        entry.title,
        sources=sources,
        targets=targets,
        flows=_flows(context, sources, targets, 50_000_000, threshold=SIGNIFICANT_FLOW),
    )


def _top_entities_summary(entities: Sequence[RankedEntity]) -> dict:
    top15 = entities[:15]
    return {
        "entities": _dump(top15),
        "combined_value": format_currency(sum(entity.raw_value for entity in top15)),
        "combined_share": format_percentage(_share_sum(top15)),
        "top5_share": format_percentage(_share_sum(entities[:5])),
        "countries": list(dict.fromkeys(entity.country for entity in top15)),
    }


def render_top_suppliers_analysis(entry: SlidePlanEntry, context: RenderContext) -> RenderedSlide:
    return _slide(
        entry, entry.title, **_top_entities_summary(context.view.suppliers.top_suppliers)
    )


def render_top_importers_analysis(entry: SlidePlanEntry, context: RenderContext) -> RenderedSlide:
    return _slide(entry, entry.title, **_top_entities_summary(context.view.buyers.top_buyers))


def render_supplier_detailed_analysis(
    entry: SlidePlanEntry, context: RenderContext
) -> RenderedSlide:
    supplier = context.ranked_item(entry)
    cosmetics = context.cosmetics
    growth = cosmetics.growth(30)
    estimated_quantity = cosmetics.ratio(500, 1500)
    destinations = [
        {"rank": country.rank, "country": country.country, "share": country.share}
        for country in context.view.geography.importing_countries[:6]
    ]
    return _slide(
        entry,
        f"{supplier.name} - Detailed Analysis",
        supplier=supplier.model_dump(),
        avg_price=format_currency(supplier.raw_value / estimated_quantity),
        destination_country_count=cosmetics.count(5, 19),
        destinations=destinations,
        performance={
            "yoy_growth": cosmetics.format_trend(growth),
            "reliability": format_percentage(cosmetics.reliability_score()),
            "quality_score": round(cosmetics.quality_score(), 1),
        },
    )


def render_importer_detailed_analysis(
    entry: SlidePlanEntry, context: RenderContext
) -> RenderedSlide:
    importer = context.ranked_item(entry)
    cosmetics = context.cosmetics
    growth = cosmetics.growth(25)
    estimated_quantity = cosmetics.ratio(400, 1200)
    sources = [
        {"rank": supplier.rank, "name": supplier.name, "country": supplier.country}
        for supplier in context.view.suppliers.top_suppliers[:6]
    ]
    return _slide(
        entry,
        f"{importer.name} - Detailed Analysis",
        importer=importer.model_dump(),
        avg_price=format_currency(importer.raw_value / estimated_quantity),
        supplier_country_count=cosmetics.count(3, 14),
        sources=sources,
        performance={
            "yoy_growth": cosmetics.format_trend(growth),
            "diversification": format_percentage(cosmetics.ratio(60, 90)),
            "cost_efficiency": format_percentage(cosmetics.ratio(75, 95)),
        },
    )


# ================================
# PRICING
# ================================


def price_stability_rating(volatility: float) -> str:
    if volatility < 10:
        return "Stable"
    if volatility < 25:
        return "Moderate"
    if volatility < 50:
        return "Volatile"
    return "Highly Volatile"


def price_spread(pricing: PricingBlock) -> float:
    """Max-min price range as a percentage of the current price (0 without a price)."""
    if not pricing.raw_current_price:
        return 0.0
    return (
        (pricing.raw_max_price - pricing.raw_min_price) / pricing.raw_current_price * 100
    )


def _price_trend(context: RenderContext, pricing: PricingBlock) -> list[dict]:
    if pricing.price_history:
        return [
            {"label": point.date, "value": point.raw_price}
            for point in pricing.price_history
        ]
    # No history supplied: +/-10% around the current price, cosmetic only
    return [
        {
            "label": f"M{month:02d}",
            "value": pricing.raw_current_price * (1 + context.cosmetics.growth(0.2)),
        }
        for month in range(1, 13)
    ]


def render_pricing_analysis(entry: SlidePlanEntry, context: RenderContext) -> RenderedSlide:
    pricing = context.view.pricing
    return _slide(
        entry,
        entry.title,
        pricing=pricing.model_dump(),
        price_spread=format_percentage(price_spread(pricing)),
        stability=price_stability_rating(pricing.raw_volatility),
        price_trend=_price_trend(context, pricing),
        price_by_country=_dump(pricing.price_by_country[:8]),
        date_range=context.view.market.date_range,
    )


# ================================
# SHIPMENT RECORDS
# ================================


def render_shipment_records(entry: SlidePlanEntry, context: RenderContext) -> RenderedSlide:
    records = context.records_for(entry)
    summary = summarize_batch(records)
    return _slide(
        entry,
        f"Shipment Records {entry.record_start}-{entry.record_end}",
        record_start=entry.record_start,
        record_end=entry.record_end,
        records=_dump(records),
        summary=summary.model_dump(),
        summary_display=summary.formatted(),
    )


RENDERERS = {
    SlideKind.TITLE_AGENDA: render_title_agenda,
    SlideKind.TABLE_OF_CONTENTS: render_table_of_contents,
    SlideKind.EXECUTIVE_SUMMARY: render_executive_summary,
    SlideKind.PRODUCT_OVERVIEW: render_product_overview,
    SlideKind.MARKET_SHARE_ANALYSIS: render_market_share_analysis,
    SlideKind.GEOGRAPHY_INTELLIGENCE: render_geography_intelligence,
    SlideKind.SUPPLIER_BUYER_RELATIONSHIPS: render_supplier_buyer_relationships,
    SlideKind.TOP_IMPORTING_COUNTRIES: render_top_importing_countries,
    SlideKind.IMPORTING_COUNTRY_SUPPLIERS: render_importing_country_suppliers,
    SlideKind.IMPORTING_COUNTRY_COMPANIES: render_importing_country_companies,
    SlideKind.TOP_EXPORTING_COUNTRIES: render_top_exporting_countries,
    SlideKind.EXPORTING_COUNTRY_DESTINATIONS: render_exporting_country_destinations,
    SlideKind.EXPORTING_COUNTRY_COMPANIES: render_exporting_country_companies,
    SlideKind.SUPPLIER_BUYER_INTELLIGENCE: render_supplier_buyer_intelligence,
    SlideKind.TOP_SUPPLIERS_ANALYSIS: render_top_suppliers_analysis,
    SlideKind.SUPPLIER_DETAILED_ANALYSIS: render_supplier_detailed_analysis,
    SlideKind.TOP_IMPORTERS_ANALYSIS: render_top_importers_analysis,
    SlideKind.IMPORTER_DETAILED_ANALYSIS: render_importer_detailed_analysis,
    SlideKind.PRICING_ANALYSIS: render_pricing_analysis,
    SlideKind.SHIPMENT_RECORDS: render_shipment_records,
}


def default_registry() -> RendererRegistry:
    """Registry with a renderer for every SlideKind."""
    return RendererRegistry(RENDERERS)

"""
Trade data aggregation.

Turns a RawInput into the NormalizedView every slide reads from: formatted
display strings next to the raw numbers, 1-based ranks, market shares and the
synthetic shipment records. The view is computed once and never mutated.
"""

import random
from collections.abc import Iterable, Mapping

from trade_report.config.models import RecordsConfig
from trade_report.generators.transactions import TransactionRecordGenerator
from trade_report.shared.exceptions import InvalidInputError, RankNotFoundError
from trade_report.shared.formatting import (
    compute_share,
    format_currency,
    format_number,
    format_percentage,
)
from trade_report.shared.logging_utils import get_structured_logger
from trade_report.shared.metrics import records_generated_total
from trade_report.shared.models import (
    BuyerBlock,
    CountryFlow,
    CountryPrice,
    FormattedPricePoint,
    GeographyBlock,
    MarketBlock,
    NormalizedView,
    PricingBlock,
    ProductBlock,
    RankedCountry,
    RankedEntity,
    RawInput,
    ShipmentBlock,
    SupplierBlock,
    TradeEntity,
)

logger = get_structured_logger(__name__)


def _rank_countries(countries: Iterable[CountryFlow]) -> tuple[RankedCountry, ...]:
    return tuple(
        RankedCountry(
            rank=index + 1,
            country=country.country,
            value=format_currency(country.value),
            share=format_percentage(country.share),
            raw_value=country.value,
            raw_share=country.share,
            shipments=country.shipments,
        )
        for index, country in enumerate(countries)
    )


def _rank_entities(
    entities: Iterable[TradeEntity], total_value: float
) -> tuple[RankedEntity, ...]:
    ranked = []
    for index, entity in enumerate(entities):
        share = compute_share(entity.value, total_value)
        ranked.append(
            RankedEntity(
                rank=index + 1,
                name=entity.name,
                country=entity.country,
                value=format_currency(entity.value),
                share=format_percentage(share),
                raw_value=entity.value,
                raw_share=share,
            )
        )
    return tuple(ranked)


def _group_by_country(
    entities: Iterable[RankedEntity],
) -> dict[str, tuple[RankedEntity, ...]]:
    grouped: dict[str, list[RankedEntity]] = {}
    for entity in entities:
        grouped.setdefault(entity.country, []).append(entity)
    return {country: tuple(members) for country, members in grouped.items()}


def validate_raw_input(
    raw: RawInput, rank_requirements: Mapping[str, int] | None = None
) -> None:
    """
    Fail fast on input that cannot produce a complete report.

    Args:
        raw: Product dataset
        rank_requirements: Highest rank the slide plan references per ranked
            list (see ``SlidePlan.rank_requirements``)

    Raises:
        InvalidInputError: If total_records <= 0
        RankNotFoundError: If a ranked list is shorter than its requirement
    """
    if raw.total_records <= 0:
        raise InvalidInputError(
            "total_records must be positive",
            field="total_records",
            invalid_value=raw.total_records,
        )

    for list_name, required_rank in (rank_requirements or {}).items():
        entries = getattr(raw, list_name, None)
        if entries is None:
            raise InvalidInputError(f"Unknown ranked list '{list_name}'", field=list_name)
        if len(entries) < required_rank:
            raise RankNotFoundError(
                list_name=list_name, rank=required_rank, length=len(entries)
            )


class TradeDataProcessor:
    """Normalizes one product dataset for report generation."""

    def __init__(
        self,
        raw: RawInput,
        config: RecordsConfig | None = None,
        rank_requirements: Mapping[str, int] | None = None,
        rng: random.Random | None = None,
    ):
        """
        Validate and normalize ``raw``.

        Args:
            raw: Product dataset
            config: Shipment record settings (count, batch size, value ranges)
            rank_requirements: Ranks the slide plan will look up, validated eagerly
            rng: Random source for shipment record fields

        Raises:
            InvalidInputError: If the dataset is unusable
            RankNotFoundError: If a ranked list is too short for the plan
        """
        self.raw = raw
        self.config = config or RecordsConfig()
        self._rng = rng if rng is not None else random.Random()

        validate_raw_input(raw, rank_requirements)
        self._view = self._process_all_data()

    @property
    def view(self) -> NormalizedView:
        return self._view

    def get_section_data(self, section_name: str) -> dict:
        """Return one top-level block of the view as a dict ({} if unknown)."""
        if section_name not in NormalizedView.model_fields:
            return {}
        return getattr(self._view, section_name).model_dump()

    def _process_all_data(self) -> NormalizedView:
        view = NormalizedView(
            product=self._process_product_info(),
            market=self._process_market_data(),
            geography=self._process_geographic_data(),
            suppliers=self._process_supplier_data(),
            buyers=self._process_buyer_data(),
            pricing=self._process_pricing_data(),
            shipments=self._process_shipment_data(),
        )
        logger.info(
            "Normalized product data",
            product=view.product.name,
            importing_countries=len(view.geography.importing_countries),
            exporting_countries=len(view.geography.exporting_countries),
            suppliers=len(view.suppliers.top_suppliers),
            buyers=len(view.buyers.top_buyers),
            shipment_records=view.shipments.total_shipments,
        )
        return view

    def _process_product_info(self) -> ProductBlock:
        raw = self.raw
        return ProductBlock(
            name=raw.name,
            description=raw.description,
            hs_code=raw.hs_code,
            category=raw.category,
            average_price=format_currency(raw.avg_price),
        )

    def _process_market_data(self) -> MarketBlock:
        raw = self.raw
        avg_transaction_value = (
            raw.total_value / raw.total_records if raw.total_records else 0.0
        )
        return MarketBlock(
            total_records=format_number(raw.total_records),
            total_value=format_currency(raw.total_value),
            avg_price=format_currency(raw.avg_price),
            avg_transaction_value=format_currency(avg_transaction_value),
            price_volatility=format_percentage(raw.price_volatility),
            unique_suppliers=format_number(raw.unique_suppliers),
            unique_buyers=format_number(raw.unique_buyers),
            supplier_diversity=format_percentage(raw.supplier_concentration),
            buyer_diversity=format_percentage(raw.buyer_concentration),
            market_growth=format_percentage(raw.market_growth),
            top_import_country=raw.top_import_country,
            top_export_country=raw.top_export_country,
            date_range=raw.date_range,
            raw_total_records=raw.total_records,
            raw_total_value=raw.total_value,
            raw_avg_transaction_value=avg_transaction_value,
        )

    def _process_geographic_data(self) -> GeographyBlock:
        return GeographyBlock(
            importing_countries=_rank_countries(self.raw.importing_countries),
            exporting_countries=_rank_countries(self.raw.exporting_countries),
        )

    def _process_supplier_data(self) -> SupplierBlock:
        suppliers = _rank_entities(self.raw.top_suppliers, self.raw.total_value)
        return SupplierBlock(
            top_suppliers=suppliers,
            suppliers_by_country=_group_by_country(suppliers),
        )

    def _process_buyer_data(self) -> BuyerBlock:
        buyers = _rank_entities(self.raw.top_buyers, self.raw.total_value)
        return BuyerBlock(
            top_buyers=buyers,
            buyers_by_country=_group_by_country(buyers),
        )

    def _process_pricing_data(self) -> PricingBlock:
        raw = self.raw
        price_by_country = []
        for country in raw.importing_countries:
            # Zero shipments counts as one
            price = country.value / (country.shipments or 1)
            price_by_country.append(
                CountryPrice(
                    country=country.country,
                    avg_price=format_currency(price),
                    raw_price=price,
                )
            )

        return PricingBlock(
            current_price=format_currency(raw.avg_price),
            min_price=format_currency(raw.min_price),
            max_price=format_currency(raw.max_price),
            volatility=format_percentage(raw.price_volatility),
            price_history=tuple(
                FormattedPricePoint(
                    date=point.date,
                    price=format_currency(point.price),
                    raw_price=point.price,
                )
                for point in raw.price_history
            ),
            price_by_country=tuple(price_by_country),
            raw_current_price=raw.avg_price,
            raw_min_price=raw.min_price,
            raw_max_price=raw.max_price,
            raw_volatility=raw.price_volatility,
        )

    def _process_shipment_data(self) -> ShipmentBlock:
        generator = TransactionRecordGenerator(self.raw, config=self.config, rng=self._rng)
        records = generator.generate()
        records_generated_total.inc(len(records))

        batch_size = self.config.batch_size
        return ShipmentBlock(
            total_shipments=len(records),
            records=records,
            records_per_batch=batch_size,
            total_batches=-(-len(records) // batch_size),
        )


def normalize(
    raw: RawInput,
    config: RecordsConfig | None = None,
    rank_requirements: Mapping[str, int] | None = None,
    rng: random.Random | None = None,
) -> NormalizedView:
    """Normalize ``raw`` into a NormalizedView."""
    return TradeDataProcessor(
        raw, config=config, rank_requirements=rank_requirements, rng=rng
    ).view

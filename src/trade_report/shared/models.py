"""
Core data models for the trade report generator.

This module contains the raw input models (the product/trade dataset handed
in by the data loader), the normalized view models derived from it, and the
synthetic transaction record model.
"""

from decimal import Decimal
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

# ================================
# RAW INPUT MODELS
# ================================


class _RawModel(BaseModel):
    """Base for raw input models: accepts camelCase keys and ignores extras."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class CountryFlow(_RawModel):
    """One entry of a ranked importing/exporting country list."""

    country: str = Field(..., min_length=1, description="Country name")
    value: float = Field(0.0, ge=0, description="Trade value in USD")
    share: float = Field(0.0, ge=0, description="Share of the global market (%)")
    shipments: int = Field(
        0,
        ge=0,
        validation_alias=AliasChoices("shipments", "shipmentCount", "shipment_count"),
        description="Number of shipments",
    )


class TradeEntity(_RawModel):
    """One entry of a ranked supplier or buyer list."""

    name: str = Field(..., min_length=1, description="Company name")
    country: str = Field(..., min_length=1, description="Company country")
    value: float = Field(0.0, ge=0, description="Trade value in USD")


class CountryCount(_RawModel):
    """Headline country with its shipment count."""

    country: str = Field("Unknown", description="Country name")
    count: int = Field(0, ge=0, description="Shipment count")


class PricePoint(_RawModel):
    """Monthly average unit price."""

    date: str = Field(..., min_length=1, description="Month in YYYY-MM format")
    price: float = Field(..., ge=0, description="Average unit price in USD")


class VolumePoint(_RawModel):
    """Monthly traded volume."""

    date: str = Field(..., min_length=1, description="Month in YYYY-MM format")
    volume: float = Field(..., ge=0, description="Traded volume")


class RawInput(_RawModel):
    """The product/trade dataset a report is generated from."""

    # Product identity
    name: str = Field("Unknown Product", description="Product name")
    description: str = Field(
        "Product description not available", description="Product description"
    )
    hs_code: str = Field(
        "N/A",
        validation_alias=AliasChoices("hs_code", "hsCode", "code"),
        description="Harmonized System code",
    )
    category: str = Field("General", description="Product category")
    avg_price: float = Field(
        0.0,
        ge=0,
        validation_alias=AliasChoices("avg_price", "avgPrice", "average_price"),
        description="Average unit price in USD",
    )

    # Market totals
    total_records: int = Field(
        0,
        validation_alias=AliasChoices("total_records", "totalRecords"),
        description="Number of trade records behind the totals",
    )
    total_value: float = Field(
        0.0,
        ge=0,
        validation_alias=AliasChoices("total_value", "totalValue"),
        description="Total traded value in USD",
    )
    price_volatility: float = Field(
        0.0,
        validation_alias=AliasChoices("price_volatility", "priceVolatility", "volatility"),
    )
    min_price: float = Field(
        0.0, ge=0, validation_alias=AliasChoices("min_price", "minPrice")
    )
    max_price: float = Field(
        0.0, ge=0, validation_alias=AliasChoices("max_price", "maxPrice")
    )
    unique_suppliers: int = Field(
        0, ge=0, validation_alias=AliasChoices("unique_suppliers", "uniqueSuppliers")
    )
    unique_buyers: int = Field(
        0, ge=0, validation_alias=AliasChoices("unique_buyers", "uniqueBuyers")
    )
    market_growth: float = Field(
        0.0, validation_alias=AliasChoices("market_growth", "marketGrowth")
    )
    supplier_concentration: float = Field(
        0.0,
        validation_alias=AliasChoices("supplier_concentration", "supplierConcentration"),
    )
    buyer_concentration: float = Field(
        0.0,
        validation_alias=AliasChoices("buyer_concentration", "buyerConcentration"),
    )
    date_range: str = Field(
        "N/A", validation_alias=AliasChoices("date_range", "dateRange")
    )
    top_import_country: CountryCount = Field(
        default_factory=CountryCount,
        validation_alias=AliasChoices("top_import_country", "topImportCountry"),
    )
    top_export_country: CountryCount = Field(
        default_factory=CountryCount,
        validation_alias=AliasChoices("top_export_country", "topExportCountry"),
    )

    # Ranked lists, pre-sorted descending by value
    importing_countries: list[CountryFlow] = Field(
        default_factory=list,
        validation_alias=AliasChoices("importing_countries", "importingCountries"),
    )
    exporting_countries: list[CountryFlow] = Field(
        default_factory=list,
        validation_alias=AliasChoices("exporting_countries", "exportingCountries"),
    )
    top_suppliers: list[TradeEntity] = Field(
        default_factory=list,
        validation_alias=AliasChoices("top_suppliers", "topSuppliers"),
    )
    top_buyers: list[TradeEntity] = Field(
        default_factory=list,
        validation_alias=AliasChoices("top_buyers", "topBuyers"),
    )

    # Time series
    price_history: list[PricePoint] = Field(
        default_factory=list,
        validation_alias=AliasChoices("price_history", "priceHistory"),
    )
    volume_history: list[VolumePoint] = Field(
        default_factory=list,
        validation_alias=AliasChoices("volume_history", "volumeHistory"),
    )

    @field_validator("name", "description", "hs_code", "category", mode="before")
    @classmethod
    def empty_to_default(cls, v: Any, info) -> Any:
        """Treat empty identity strings as missing so defaults apply."""
        if v is None or (isinstance(v, str) and v.strip() == ""):
            return cls.model_fields[info.field_name].default
        return v


# ================================
# NORMALIZED VIEW MODELS
# ================================


class _ViewModel(BaseModel):
    """Base for derived, read-only view models."""

    model_config = ConfigDict(frozen=True)


class ProductBlock(_ViewModel):
    """Formatted product identity."""

    name: str
    description: str
    hs_code: str
    category: str
    average_price: str


class MarketBlock(_ViewModel):
    """Formatted market totals with derived averages."""

    total_records: str
    total_value: str
    avg_price: str
    avg_transaction_value: str
    price_volatility: str
    unique_suppliers: str
    unique_buyers: str
    supplier_diversity: str
    buyer_diversity: str
    market_growth: str
    top_import_country: CountryCount
    top_export_country: CountryCount
    date_range: str

    raw_total_records: int
    raw_total_value: float
    raw_avg_transaction_value: float


class RankedCountry(_ViewModel):
    """Country entry annotated with its 1-based rank; keeps raw and formatted values."""

    rank: int = Field(..., ge=1)
    country: str
    value: str
    share: str
    raw_value: float
    raw_share: float
    shipments: int


class RankedEntity(_ViewModel):
    """Supplier or buyer annotated with rank and share of total market value."""

    rank: int = Field(..., ge=1)
    name: str
    country: str
    value: str
    share: str
    raw_value: float
    raw_share: float


class GeographyBlock(_ViewModel):
    importing_countries: tuple[RankedCountry, ...]
    exporting_countries: tuple[RankedCountry, ...]


class SupplierBlock(_ViewModel):
    top_suppliers: tuple[RankedEntity, ...]
    suppliers_by_country: dict[str, tuple[RankedEntity, ...]]


class BuyerBlock(_ViewModel):
    top_buyers: tuple[RankedEntity, ...]
    buyers_by_country: dict[str, tuple[RankedEntity, ...]]


class FormattedPricePoint(_ViewModel):
    date: str
    price: str
    raw_price: float


class CountryPrice(_ViewModel):
    """Average value per shipment for one importing country."""

    country: str
    avg_price: str
    raw_price: float


class PricingBlock(_ViewModel):
    current_price: str
    min_price: str
    max_price: str
    volatility: str
    price_history: tuple[FormattedPricePoint, ...]
    price_by_country: tuple[CountryPrice, ...]

    raw_current_price: float
    raw_min_price: float
    raw_max_price: float
    raw_volatility: float


class TransactionRecord(_ViewModel):
    """One synthetic shipment row."""

    id: int = Field(..., ge=1, description="1-based record number")
    date: str = Field(..., description="Shipment date (YYYY-MM-DD)")
    supplier_name: str
    supplier_country: str
    buyer_name: str
    buyer_country: str
    quantity: int = Field(..., ge=0)
    unit_price: Decimal = Field(..., ge=0)
    total_value: Decimal = Field(..., ge=0)
    hs_code: str
    loading_port: str
    discharge_port: str


class ShipmentBlock(_ViewModel):
    total_shipments: int
    records: tuple[TransactionRecord, ...]
    records_per_batch: int
    total_batches: int


class NormalizedView(_ViewModel):
    """Derived snapshot of a RawInput, computed once per processor."""

    product: ProductBlock
    market: MarketBlock
    geography: GeographyBlock
    suppliers: SupplierBlock
    buyers: BuyerBlock
    pricing: PricingBlock
    shipments: ShipmentBlock

    def ranked_list(self, list_name: str) -> tuple:
        """Return one of the four ranked lists by name."""
        lists = {
            "importing_countries": self.geography.importing_countries,
            "exporting_countries": self.geography.exporting_countries,
            "top_suppliers": self.suppliers.top_suppliers,
            "top_buyers": self.buyers.top_buyers,
        }
        try:
            return lists[list_name]
        except KeyError:
            raise ValueError(f"Unknown ranked list: {list_name}") from None

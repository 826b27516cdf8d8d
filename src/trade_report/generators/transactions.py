"""
Synthetic shipment record generation.

Records cycle through the ranked supplier and buyer lists by index, so every
top entity appears repeatedly in round-robin order. Dates, quantities, unit
prices and ports are drawn from a seeded random source. A record's total
value is always exactly ``quantity * unit_price``.
"""

import random
from datetime import date, timedelta
from decimal import ROUND_HALF_UP, Decimal

from trade_report.config.models import RecordsConfig
from trade_report.shared.exceptions import InvalidInputError
from trade_report.shared.models import RawInput, TradeEntity, TransactionRecord

UNKNOWN_PORT = "Unknown Port"

PORTS_BY_COUNTRY: dict[str, tuple[str, ...]] = {
    "USA": ("New York", "Los Angeles", "Miami", "Houston"),
    "India": ("Mumbai", "Chennai", "Kolkata", "Cochin"),
    "China": ("Shanghai", "Shenzhen", "Qingdao", "Tianjin"),
    "Germany": ("Hamburg", "Bremen", "Bremerhaven"),
    "UK": ("London", "Southampton", "Liverpool"),
    "France": ("Le Havre", "Marseille", "Dunkirk"),
}

_UNKNOWN_SUPPLIER = TradeEntity(name="Unknown Supplier", country="Unknown")
_UNKNOWN_BUYER = TradeEntity(name="Unknown Buyer", country="Unknown")
_CENTS = Decimal("0.01")


class TransactionRecordGenerator:
    """Generates synthetic shipment records for one product."""

    def __init__(
        self,
        raw: RawInput,
        config: RecordsConfig | None = None,
        rng: random.Random | None = None,
        seed: int | None = None,
    ):
        """
        Initialize the record generator.

        Args:
            raw: Product dataset providing suppliers, buyers, price and HS code
            config: Record volume and value ranges (defaults apply when None)
            rng: Random source; takes precedence over ``seed``
            seed: Seed for a private random source when ``rng`` is not given
        """
        self.raw = raw
        self.config = config or RecordsConfig()
        self._rng = rng if rng is not None else random.Random(seed)

        self._start_date = date.fromisoformat(self.config.start_date)
        self._date_span_days = (
            date.fromisoformat(self.config.end_date) - self._start_date
        ).days

    def generate_date(self) -> str:
        """Pick a shipment date within the configured range."""
        offset = self._rng.randint(0, self._date_span_days)
        return (self._start_date + timedelta(days=offset)).isoformat()

    def generate_quantity(self) -> int:
        return self._rng.randint(self.config.quantity_min, self.config.quantity_max)

    def generate_unit_price(self) -> Decimal:
        """Unit price within +/- half the configured variation around the average price."""
        base_price = self.raw.avg_price or self.config.fallback_unit_price
        variation = base_price * self.config.price_variation
        price = base_price + (self._rng.random() - 0.5) * variation
        return max(Decimal("0.00"), Decimal(str(price)).quantize(_CENTS, rounding=ROUND_HALF_UP))

    def generate_port(self, country: str) -> str:
        """Pick a port for the country, or ``Unknown Port`` when none is known."""
        ports = PORTS_BY_COUNTRY.get(country)
        if not ports:
            return UNKNOWN_PORT
        return self._rng.choice(ports)

    def generate_record(self, index: int) -> TransactionRecord:
        """
        Generate the record at 0-based ``index``.

        The supplier and buyer are ``list[index % len(list)]``.
        """
        suppliers = self.raw.top_suppliers
        buyers = self.raw.top_buyers
        supplier = suppliers[index % len(suppliers)] if suppliers else _UNKNOWN_SUPPLIER
        buyer = buyers[index % len(buyers)] if buyers else _UNKNOWN_BUYER

        quantity = self.generate_quantity()
        unit_price = self.generate_unit_price()

        return TransactionRecord(
            id=index + 1,
            date=self.generate_date(),
            supplier_name=supplier.name,
            supplier_country=supplier.country,
            buyer_name=buyer.name,
            buyer_country=buyer.country,
            quantity=quantity,
            unit_price=unit_price,
            total_value=unit_price * quantity,
            hs_code=self.raw.hs_code,
            loading_port=self.generate_port(supplier.country),
            discharge_port=self.generate_port(buyer.country),
        )

    def generate(self, count: int | None = None) -> tuple[TransactionRecord, ...]:
        """
        Generate exactly ``count`` records (the configured count when None).

        Raises:
            InvalidInputError: If count is negative
        """
        if count is None:
            count = self.config.transaction_count
        if count < 0:
            raise InvalidInputError(
                "Record count must be >= 0", field="count", invalid_value=count
            )
        return tuple(self.generate_record(i) for i in range(count))


def generate_transaction_records(
    raw: RawInput,
    count: int,
    rng: random.Random | None = None,
    config: RecordsConfig | None = None,
) -> tuple[TransactionRecord, ...]:
    """Generate ``count`` synthetic shipment records for ``raw``."""
    return TransactionRecordGenerator(raw, config=config, rng=rng).generate(count)

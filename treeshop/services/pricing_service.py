"""Quote pricing for forestry mulching and land clearing jobs."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, timedelta
from decimal import Decimal

from treeshop.core.enums import ServiceType
from treeshop.core.exceptions import ValidationError
from treeshop.services.rate_table import RateTable, get_rate_table
from treeshop.utils.money import ceil_whole, round_currency, to_decimal

logger = logging.getLogger(__name__)

QUARTER_ACRE = Decimal("0.25")


@dataclass(frozen=True)
class QuoteRequest:
    service_type: ServiceType
    acreage: float
    package_id: str | None = None
    include_hauling: bool = True


@dataclass(frozen=True)
class LineItem:
    item: str
    description: str
    quantity: float
    unit: str
    unit_price: float
    total: int


@dataclass(frozen=True)
class ServicePrice:
    """Labor/hauling split produced by a single service calculation."""

    labor: int
    hauling: int
    breakdown: tuple[LineItem, ...]

    @property
    def total(self) -> int:
        return self.labor + self.hauling


@dataclass(frozen=True)
class PricingResult:
    service_type: ServiceType
    acreage: float
    labor_cost: int
    hauling_cost: int
    total: int
    deposit: int
    breakdown: tuple[LineItem, ...]
    package_id: str | None = None
    package_name: str | None = None
    include_hauling: bool = False


@dataclass(frozen=True)
class PaymentSchedule:
    total: int
    deposit: int
    balance: int
    late_fee: int
    issued_on: date
    valid_until: date


class PricingService:
    """Prices quotes against a read-only rate table."""

    def __init__(self, rate_table: RateTable | None = None) -> None:
        self.rates = rate_table or get_rate_table()

    def land_clearing_days(self, acreage: float) -> int:
        # Billed in whole days; any fraction of a day rounds up.
        per_quarter = to_decimal(self.rates.land_clearing.days_per_quarter_acre)
        return ceil_whole(to_decimal(acreage) / QUARTER_ACRE * per_quarter)

    def compute_forestry_mulching_price(self, package_id: str, acreage: float) -> ServicePrice:
        """Greater of the package minimum or the per-acre rate."""
        package = self.rates.get_package(package_id)
        price = round_currency(max(to_decimal(package.base_price), to_decimal(package.price_per_acre) * to_decimal(acreage)))
        line = LineItem(
            item=package.name,
            description=f'Grind vegetation up to {package.max_dbh}" diameter',
            quantity=acreage,
            unit="acres",
            unit_price=package.price_per_acre,
            total=price,
        )
        return ServicePrice(labor=price, hauling=0, breakdown=(line,))

    def compute_land_clearing_price(self, acreage: float, include_hauling: bool = True) -> ServicePrice:
        rates = self.rates.land_clearing
        days = self.land_clearing_days(acreage)
        labor = round_currency(days * to_decimal(rates.equipment_rate))
        lines = [
            LineItem(
                item="Land Clearing & Grubbing",
                description="Complete removal with equipment and labor",
                quantity=days,
                unit="days",
                unit_price=rates.equipment_rate,
                total=labor,
            )
        ]

        hauling = 0
        if include_hauling:
            yards = to_decimal(acreage) * to_decimal(rates.average_debris_per_acre)
            hauling = round_currency(yards * to_decimal(rates.debris_haul_rate))
            lines.append(
                LineItem(
                    item="Debris Hauling",
                    description="Load and haul all cleared material",
                    quantity=round_currency(yards),
                    unit="cubic yards",
                    unit_price=rates.debris_haul_rate,
                    total=hauling,
                )
            )
        return ServicePrice(labor=labor, hauling=hauling, breakdown=tuple(lines))

    def compute_deposit(self, total: float) -> int:
        terms = self.rates.payment
        return max(
            round_currency(terms.minimum_deposit),
            round_currency(to_decimal(total) * to_decimal(terms.deposit_percent)),
        )

    def quote(self, request: QuoteRequest) -> PricingResult:
        if request.acreage is None or request.acreage <= 0:
            raise ValidationError("acreage must be greater than zero")

        package = None
        include_hauling = False
        if request.service_type is ServiceType.FORESTRY_MULCHING:
            if not request.package_id:
                raise ValidationError("forestry mulching quotes require a package_id")
            package = self.rates.get_package(request.package_id)
            price = self.compute_forestry_mulching_price(package.id, request.acreage)
        else:
            include_hauling = request.include_hauling
            price = self.compute_land_clearing_price(request.acreage, include_hauling)

        result = PricingResult(
            service_type=request.service_type,
            acreage=request.acreage,
            labor_cost=price.labor,
            hauling_cost=price.hauling,
            total=price.total,
            deposit=self.compute_deposit(price.total),
            breakdown=price.breakdown,
            package_id=package.id if package else None,
            package_name=package.name if package else None,
            include_hauling=include_hauling,
        )
        logger.info(
            "pricing.quote.computed",
            extra={
                "event": "pricing.quote.computed",
                "service_type": request.service_type.value,
                "acreage": request.acreage,
                "total": result.total,
            },
        )
        return result

    def build_payment_schedule(self, total: int, issued_on: date | None = None) -> PaymentSchedule:
        if total < 0:
            raise ValidationError("total must be non-negative")
        terms = self.rates.payment
        issued = issued_on or date.today()
        deposit = self.compute_deposit(total)
        return PaymentSchedule(
            total=total,
            deposit=deposit,
            balance=max(0, total - deposit),
            late_fee=round_currency(to_decimal(total) * to_decimal(terms.late_fee_rate)),
            issued_on=issued,
            valid_until=issued + timedelta(days=terms.validity_days),
        )

    def build_scope_of_work(self, result: PricingResult) -> str:
        templates = self.rates.templates
        acres = f"{result.acreage:g}"
        if result.service_type is ServiceType.FORESTRY_MULCHING:
            return (
                templates.forestry_mulching.replace("[ACRES]", acres)
                .replace("[PACKAGE]", result.package_name or "")
            )

        days = self.land_clearing_days(result.acreage)
        debris = "hauled off site" if result.include_hauling else "left on site"
        return (
            templates.land_clearing.replace("[RATE]", f"{self.rates.land_clearing.equipment_rate:,.0f}")
            .replace("[DAYS]", str(days))
            .replace("[DEBRIS_HANDLING]", debris)
            .replace("[ACRES]", acres)
        )

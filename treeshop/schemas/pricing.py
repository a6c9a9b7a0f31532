"""Pricing request/response schemas for API contracts."""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, Field, model_validator

from treeshop.core.enums import ServiceType


class QuoteCreateRequest(BaseModel):
    service_type: ServiceType
    acreage: float = Field(gt=0, le=10000)
    package_id: str | None = Field(default=None, max_length=64)
    include_hauling: bool = True

    @model_validator(mode="after")
    def package_required_for_mulching(self) -> "QuoteCreateRequest":
        if self.service_type is ServiceType.FORESTRY_MULCHING and not self.package_id:
            raise ValueError("package_id is required for forestry-mulching quotes")
        return self


class LineItemResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    item: str
    description: str
    quantity: float
    unit: str
    unit_price: float
    total: int


class QuoteResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    service_type: ServiceType
    acreage: float
    package_id: str | None = None
    package_name: str | None = None
    include_hauling: bool = False
    labor_cost: int
    hauling_cost: int
    total: int
    deposit: int
    breakdown: list[LineItemResponse]
    scope_of_work: str | None = None


class PackageResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    description: str
    base_price: float
    price_per_acre: float
    min_acres: float
    max_dbh: int


class PaymentScheduleRequest(BaseModel):
    total: int = Field(ge=0)
    issued_on: date | None = None


class PaymentScheduleResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    total: int
    deposit: int
    balance: int
    late_fee: int
    issued_on: date
    valid_until: date

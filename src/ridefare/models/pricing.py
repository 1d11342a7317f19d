from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Annotated, Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, field_serializer, field_validator, model_validator
from pydantic.alias_generators import to_camel


def _float_to_decimal(value: Any) -> Any:
    # Decimal(3.25) would carry the binary float error into every cent
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return Decimal(str(value))
    return value


def _enum_value(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


Amount = Annotated[Decimal, BeforeValidator(_float_to_decimal)]
VehicleKey = Annotated[str, BeforeValidator(_enum_value)]


class VehicleType(str, Enum):
    SEDAN = "SEDAN"
    SUV = "SUV"
    VAN = "VAN"


class VehicleRates(BaseModel):
    model_config = ConfigDict(frozen=True)

    display_name: str
    base_fare: Amount = Field(..., ge=0)
    min_fare: Amount = Field(..., ge=0)
    per_mile: Amount = Field(..., ge=0)
    per_minute: Amount = Field(..., ge=0)
    included_miles: Amount = Field(default=Decimal("0"), ge=0)
    included_minutes: Amount = Field(default=Decimal("0"), ge=0)


class LeadTimeBand(BaseModel):
    model_config = ConfigDict(frozen=True)

    max_hours: float
    multiplier: Amount = Field(..., gt=0)


class PricingConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    currency: str = Field(default="USD", min_length=3, max_length=3)
    tax_rate: Amount = Field(..., ge=0)
    airport_fee: Amount = Field(default=Decimal("0"), ge=0)
    free_wait_minutes: Amount = Field(default=Decimal("0"), ge=0)
    wait_per_minute: Amount = Field(default=Decimal("0"), ge=0)
    pickup_hour_multipliers: dict[int, Amount] = {}
    lead_time_multipliers: list[LeadTimeBand]
    vehicles: dict[VehicleKey, VehicleRates]
    timezone: str | None = None

    @field_validator("pickup_hour_multipliers")
    @classmethod
    def hours_in_range(cls, value: dict[int, Decimal]) -> dict[int, Decimal]:
        for hour, multiplier in value.items():
            if not 0 <= hour <= 23:
                raise ValueError(f"pickup hour {hour} outside 0-23")
            if multiplier <= 0:
                raise ValueError(f"pickup hour {hour} multiplier must be positive")
        return value

    @field_validator("timezone")
    @classmethod
    def known_timezone(cls, value: str | None) -> str | None:
        if value is not None:
            try:
                ZoneInfo(value)
            except (ZoneInfoNotFoundError, ValueError) as e:
                raise ValueError(f"unknown timezone {value!r}") from e
        return value

    @model_validator(mode="after")
    def bands_sorted(self) -> "PricingConfig":
        if not self.lead_time_multipliers:
            raise ValueError("lead_time_multipliers needs at least one band")
        limits = [band.max_hours for band in self.lead_time_multipliers]
        if any(later <= earlier for earlier, later in zip(limits, limits[1:])):
            raise ValueError("lead_time_multipliers must be sorted ascending by max_hours")
        return self


class PricingInput(BaseModel):
    model_config = ConfigDict(frozen=True)

    vehicle_type: VehicleKey
    distance_km: Amount
    duration_min: Amount
    pickup_at: datetime
    booking_lead_hours: float
    tolls: Amount = Decimal("0")
    wait_minutes: Amount = Decimal("0")
    tip_percent: Amount = Decimal("0")
    apply_airport_fee: bool = False


class PricingBreakdown(BaseModel):
    model_config = ConfigDict(frozen=True)

    currency: str
    vehicle: str
    base_fare: Decimal
    distance_fee: Decimal
    time_fee: Decimal
    pickup_time_multiplier: Decimal
    lead_time_multiplier: Decimal
    wait_fee: Decimal
    tolls: Decimal
    airport_fee: Decimal
    pre_tax_subtotal: Decimal
    tax: Decimal
    tip: Decimal
    total: Decimal
    min_fare_applied: bool
    notes: list[str] = []


class PricingSnapshot(BaseModel):
    """Stored copy of a quote; fields are optional because older rows may be partial."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    currency: str | None = None
    vehicle: str | None = None
    total: Amount | None = None
    base_fare: Amount | None = None
    distance_fee: Amount | None = None
    time_fee: Amount | None = None
    pickup_time_multiplier: Amount | None = None
    lead_time_multiplier: Amount | None = None
    wait_fee: Amount | None = None
    tolls: Amount | None = None
    airport_fee: Amount | None = None
    pre_tax_subtotal: Amount | None = None
    tax: Amount | None = None
    tip: Amount | None = None
    distance_mi: float | None = None
    duration_min: float | None = None

    @field_serializer(
        "total",
        "base_fare",
        "distance_fee",
        "time_fee",
        "pickup_time_multiplier",
        "lead_time_multiplier",
        "wait_fee",
        "tolls",
        "airport_fee",
        "pre_tax_subtotal",
        "tax",
        "tip",
        when_used="json",
    )
    def _amount_as_number(self, value: Decimal | None) -> float | None:
        """Stored rows keep amounts as JSON numbers."""
        return float(value) if value is not None else None

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field


class CouponKind(str, Enum):
    PERCENT = "percent"
    FIXED = "fixed"


class Coupon(BaseModel):
    code: str = Field(..., min_length=1)
    kind: str
    percent_off: float | None = Field(default=None, ge=0, le=100)
    value_cents: int | None = Field(default=None, ge=0)
    active: bool = True
    expires_at: datetime | None = None
    max_redemptions: int | None = None
    redemptions_used: int = Field(default=0, ge=0)


class CouponQuote(BaseModel):
    code: str
    kind: CouponKind
    percent_off: float | None = None
    value_cents: int | None = None
    discount_cents: int
    final_cents: int
    display: str

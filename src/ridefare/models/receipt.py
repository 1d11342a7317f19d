from pydantic import BaseModel

from ridefare.models.pricing import PricingSnapshot


class Receipt(BaseModel):
    booking_id: str
    customer_name: str
    customer_email: str | None = None
    customer_phone: str | None = None
    pickup_location: str
    dropoff_location: str
    pickup_time: str
    vehicle_type: str
    vehicle_name: str | None = None
    flight_number: str | None = None
    passengers: int | None = None
    pricing: PricingSnapshot | None = None
    payment_id: str


class LineItem(BaseModel):
    label: str
    amount: str

"""
Business services for RideFare.

- pricing.py: fare calculator and booking-derived pricing inputs
- coupon.py: coupon matching and discount arithmetic
- route_metrics.py: Distance Matrix lookups
- receipt.py: receipt line items and SMS text
"""

__all__: list[str] = []

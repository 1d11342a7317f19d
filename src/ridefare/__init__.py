"""
Fare quoting package for RideFare.

The calculator in services/pricing.py is pure; configuration, route lookups,
coupons and receipts sit around it as thin, separately testable helpers.
"""

__all__: list[str] = []

"""Shared test fixtures for RideFare."""

import sys
from datetime import datetime
from pathlib import Path

import pytest
from dotenv import load_dotenv

# Load .env file for test configuration
load_dotenv()

# Add src directory to Python path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))


@pytest.fixture
def sedan_input():
    """Sedan, 10 km / 20 min, 5 PM pickup booked an hour ahead."""
    from ridefare.models.pricing import PricingInput

    return PricingInput(
        vehicle_type="SEDAN",
        distance_km=10,
        duration_min=20,
        pickup_at=datetime(2026, 3, 13, 17, 0),
        booking_lead_hours=1,
    )


@pytest.fixture
def pricing_config_dict():
    """Plain-JSON pricing config, as it would arrive from a file or SSM."""
    return {
        "currency": "USD",
        "tax_rate": 0.08,
        "airport_fee": 7.5,
        "free_wait_minutes": 15,
        "wait_per_minute": 0.5,
        "pickup_hour_multipliers": {"7": 1.25},
        "lead_time_multipliers": [
            {"max_hours": 4, "multiplier": 1.5},
            {"max_hours": 100000, "multiplier": 1.0},
        ],
        "vehicles": {
            "SEDAN": {
                "display_name": "City Sedan",
                "base_fare": 5,
                "min_fare": 20,
                "per_mile": 2,
                "per_minute": 0.5,
            }
        },
    }

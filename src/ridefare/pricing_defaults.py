"""Default fare table. Override per deployment with PRICING_CONFIG_PATH or PRICING_CONFIG_PARAMETER."""

from ridefare.models.pricing import PricingConfig, VehicleType

DEFAULT_PRICING_CONFIG = PricingConfig.model_validate(
    {
        "currency": "USD",
        "tax_rate": "0.10",
        "airport_fee": "5",
        "free_wait_minutes": "30",
        "wait_per_minute": "1.00",
        # Early-morning and evening rush; other hours are 1.0
        "pickup_hour_multipliers": {
            5: "1.15",
            6: "1.15",
            7: "1.10",
            8: "1.10",
            17: "1.20",
            18: "1.20",
            19: "1.15",
            20: "1.10",
        },
        "lead_time_multipliers": [
            {"max_hours": 2, "multiplier": "1.20"},
            {"max_hours": 12, "multiplier": "1.10"},
            {"max_hours": 24, "multiplier": "1.05"},
            {"max_hours": 9999, "multiplier": "1.00"},
        ],
        "vehicles": {
            VehicleType.SEDAN.value: {
                "display_name": "Luxury Sedan",
                "base_fare": "10",
                "min_fare": "40",
                "per_mile": "3.25",
                "per_minute": "0.70",
            },
            VehicleType.SUV.value: {
                "display_name": "Premium SUV",
                "base_fare": "25",
                "min_fare": "45",
                "per_mile": "4.10",
                "per_minute": "0.85",
            },
            VehicleType.VAN.value: {
                "display_name": "Executive Van",
                "base_fare": "30",
                "min_fare": "95",
                "per_mile": "4.75",
                "per_minute": "1.00",
            },
        },
    }
)

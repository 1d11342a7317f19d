"""Pydantic models for route distance/duration lookups."""

from pydantic import BaseModel, Field


class RouteMetrics(BaseModel):
    distance_km: float = Field(..., ge=0)
    duration_min: float = Field(..., ge=0)

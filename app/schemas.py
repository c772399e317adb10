"""Pydantic schemas for reports read back by HTTP clients."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field


class ReportedSensor(BaseModel):
    """One ``<owd>`` record of a report."""

    name: str = Field(..., description="Sensor family label, always DS18B20.")
    rom_id: str = Field(..., description="One-wire ROM identifier of the probe.")
    celsius: float
    fahrenheit: float


class ReportDocument(BaseModel):
    """A full report as served by ``GET /details.xml``."""

    updated: str = Field(..., description="Local time the report was generated.")
    sensors: List[ReportedSensor] = Field(default_factory=list)

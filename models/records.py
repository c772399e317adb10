"""Domain models shared across services."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from datetime import datetime
from typing import List

_FLOAT32 = struct.Struct("<f")


def as_float32(value: float) -> float:
    """Round ``value`` to the nearest IEEE-754 single precision float."""
    return _FLOAT32.unpack(_FLOAT32.pack(value))[0]


@dataclass(slots=True)
class SensorReading:
    """A single temperature sample taken while building a report."""

    sensor_id: str
    celsius: float

    @property
    def fahrenheit(self) -> float:
        scaled = as_float32(as_float32(self.celsius * 9.0) / 5.0)
        return as_float32(scaled + 32.0)


@dataclass(slots=True)
class Report:
    """Readings collected from one enumeration, stamped with one timestamp."""

    updated: datetime
    readings: List[SensorReading] = field(default_factory=list)

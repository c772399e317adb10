from __future__ import annotations

from typing import Dict, List

from sensors.base import ContractViolation, SensorSource

FIXED_READINGS: Dict[str, float] = {
    "id1": 0.0,
    "id2": 100.0,
    "id3": -40.0,
}


class FixedSensorSource(SensorSource):
    """Deterministic stand-in covering freezing, boiling and -40 degrees."""

    def list_ids(self) -> List[str]:
        return list(FIXED_READINGS)

    def read_celsius(self, sensor_id: str) -> float:
        try:
            return FIXED_READINGS[sensor_id]
        except KeyError:
            raise ContractViolation(
                f"Stand-in sensor source has no sensor {sensor_id!r}."
            ) from None

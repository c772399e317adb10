"""Sensor source capability and its error taxonomy."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional


class SensorError(Exception):
    """Base class for failures while enumerating or reading sensors."""

    def __init__(self, message: str, path: Optional[str] = None) -> None:
        super().__init__(message)
        self.path = path


class SensorAccessError(SensorError):
    """A sensor file could not be opened or read."""


class SensorParseError(SensorError):
    """A sensor file did not have the expected two-line ``=`` layout."""


class ContractViolation(AssertionError):
    """A sensor source was asked about an id it never enumerated."""


class SensorSource(ABC):
    """Enumerates DS18B20 probes and reads their temperature in Celsius."""

    @abstractmethod
    def list_ids(self) -> List[str]:
        raise NotImplementedError

    @abstractmethod
    def read_celsius(self, sensor_id: str) -> float:
        raise NotImplementedError

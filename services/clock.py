"""Time sources used to stamp reports."""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime

TIMESTAMP_FORMAT = "%Y-%m-%d %H-%M"


class Clock(ABC):
    @abstractmethod
    def now(self) -> datetime:
        raise NotImplementedError


class SystemClock(Clock):
    """Local wall-clock time."""

    def now(self) -> datetime:
        return datetime.now()


class FixedClock(Clock):
    """Always returns the same moment, for reproducible reports."""

    def __init__(self, moment: datetime) -> None:
        self._moment = moment

    def now(self) -> datetime:
        return self._moment


def format_timestamp(moment: datetime) -> str:
    return moment.strftime(TIMESTAMP_FORMAT)

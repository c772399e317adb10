from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


_DEVICE_LIST_ENV = "W1_DEVICE_LIST_PATH"
_DEVICES_ROOT_ENV = "W1_DEVICES_ROOT"
_LOG_LEVEL_ENV = "LOG_LEVEL"
_HOST_ENV = "SERVER_HOST"
_PORT_ENV = "SERVER_PORT"
_TEST_MODE_ENV = "TEST_MODE"

DEFAULT_DEVICE_LIST_PATH = "/sys/devices/w1_bus_master1/w1_master_slaves"
DEFAULT_DEVICES_ROOT = "/sys/bus/w1/devices"


@dataclass(frozen=True)
class Settings:
    device_list_path: str
    devices_root: str
    log_level: str
    host: str
    port: int


def _read_str_env(name: str, default: str) -> str:
    value = os.getenv(name)
    if value is None:
        return default
    candidate = value.strip()
    return candidate or default


def _read_port(default: int) -> int:
    value = os.getenv(_PORT_ENV)
    if value is None:
        return default
    candidate = value.strip()
    if not candidate:
        return default
    try:
        parsed = int(candidate)
    except ValueError:
        return default
    return parsed if parsed > 0 else default


def _read_log_level(default: str) -> str:
    value = os.getenv(_LOG_LEVEL_ENV)
    if value is None:
        return default
    candidate = value.strip()
    if not candidate:
        return default
    return candidate.upper()


def read_test_mode() -> bool:
    """Return True when the stand-in sensors are selected.

    Not cached: the flag is re-read for every request.
    """
    return os.getenv(_TEST_MODE_ENV) == "1"


@lru_cache
def get_settings() -> Settings:
    return Settings(
        device_list_path=_read_str_env(_DEVICE_LIST_ENV, DEFAULT_DEVICE_LIST_PATH),
        devices_root=_read_str_env(_DEVICES_ROOT_ENV, DEFAULT_DEVICES_ROOT),
        log_level=_read_log_level("INFO"),
        host=_read_str_env(_HOST_ENV, "0.0.0.0"),
        port=_read_port(80),
    )

"""DS18B20 probes exposed by the kernel one-wire driver through sysfs."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import List, Union

from models.records import as_float32
from sensors.base import SensorAccessError, SensorParseError, SensorSource
from settings import DEFAULT_DEVICE_LIST_PATH, DEFAULT_DEVICES_ROOT

logger = logging.getLogger(__name__)

_MILLIDEGREES = re.compile(r"[+-]?[0-9]+")
_INT32_MIN, _INT32_MAX = -(2**31), 2**31 - 1

PathLike = Union[str, Path]


class W1SensorSource(SensorSource):
    """Reads the bus master's slave list and each slave's ``w1_slave`` file.

    A ``w1_slave`` file holds two lines: the CRC/status line, which is
    skipped without validation, and a data line ending in ``t=<millidegrees>``::

        72 01 4b 46 7f ff 0e 10 57 : crc=57 YES
        72 01 4b 46 7f ff 0e 10 57 t=23125
    """

    def __init__(
        self,
        device_list_path: PathLike = DEFAULT_DEVICE_LIST_PATH,
        devices_root: PathLike = DEFAULT_DEVICES_ROOT,
    ) -> None:
        self.device_list_path = Path(device_list_path)
        self.devices_root = Path(devices_root)

    def device_path(self, sensor_id: str) -> Path:
        return self.devices_root / sensor_id / "w1_slave"

    def list_ids(self) -> List[str]:
        try:
            with self.device_list_path.open("r", encoding="utf-8") as handle:
                ids = [line.rstrip() for line in handle]
        except (OSError, UnicodeDecodeError) as exc:
            raise SensorAccessError(
                f"Cannot read device list {self.device_list_path}: {exc}",
                path=str(self.device_list_path),
            ) from exc

        ids = [sensor_id for sensor_id in ids if sensor_id]
        logger.debug("Enumerated one-wire devices", extra={"sensor_count": len(ids)})
        return ids

    def read_celsius(self, sensor_id: str) -> float:
        path = self.device_path(sensor_id)
        try:
            with path.open("r", encoding="utf-8") as handle:
                crc_line = handle.readline()
                data_line = handle.readline()
        except (OSError, UnicodeDecodeError) as exc:
            raise SensorAccessError(
                f"Cannot read sensor {sensor_id}: {exc}", path=str(path)
            ) from exc

        if not crc_line:
            raise SensorParseError(f"Sensor {sensor_id}: missing crc line", path=str(path))
        if not data_line:
            raise SensorParseError(f"Sensor {sensor_id}: missing data line", path=str(path))

        millidegrees = self._parse_millidegrees(sensor_id, data_line, path)
        celsius = as_float32(as_float32(millidegrees) / 1000.0)
        logger.debug(
            "Read one-wire sensor",
            extra={"sensor_id": sensor_id, "path": str(path)},
        )
        return celsius

    @staticmethod
    def _parse_millidegrees(sensor_id: str, data_line: str, path: Path) -> int:
        if "=" not in data_line:
            raise SensorParseError(
                f"Sensor {sensor_id}: data line has no '=' delimiter", path=str(path)
            )
        token = data_line.rsplit("=", 1)[1].strip()
        if not token:
            raise SensorParseError(
                f"Sensor {sensor_id}: missing value after '='", path=str(path)
            )
        if not _MILLIDEGREES.fullmatch(token):
            raise SensorParseError(
                f"Sensor {sensor_id}: invalid temperature value {token!r}", path=str(path)
            )
        value = int(token)
        if not _INT32_MIN <= value <= _INT32_MAX:
            raise SensorParseError(
                f"Sensor {sensor_id}: temperature value {token!r} out of range", path=str(path)
            )
        return value

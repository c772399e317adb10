"""HTTP route definitions for the service."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Response, status

from sensors.base import SensorError, SensorSource
from sensors.fixed import FixedSensorSource
from sensors.w1 import W1SensorSource
from services.clock import Clock, SystemClock
from services.report import generate_report
from settings import get_settings, read_test_mode

logger = logging.getLogger(__name__)

XML_MEDIA_TYPE = "application/xml; charset=utf-8"

router = APIRouter()


def get_test_mode() -> bool:
    return read_test_mode()


def get_sensor_source(test_mode: bool = Depends(get_test_mode)) -> SensorSource:
    logger.debug("Selected sensor source", extra={"test_mode": test_mode})
    if test_mode:
        return FixedSensorSource()
    settings = get_settings()
    return W1SensorSource(
        device_list_path=settings.device_list_path,
        devices_root=settings.devices_root,
    )


def get_clock() -> Clock:
    return SystemClock()


@router.get("/details.xml", summary="Current readings of every one-wire probe.")
def details(
    sensors: SensorSource = Depends(get_sensor_source),
    clock: Clock = Depends(get_clock),
) -> Response:
    try:
        body = generate_report(clock, sensors)
    except SensorError as exc:
        logger.error(
            "Report generation failed",
            extra={"path": exc.path, "reason": str(exc)},
        )
        return Response(
            content=f"Error: {exc}",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            media_type=XML_MEDIA_TYPE,
        )
    return Response(content=body, media_type=XML_MEDIA_TYPE)

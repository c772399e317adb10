"""Report generation: reads every sensor once and renders the XML document."""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ElementTree

from app.schemas import ReportDocument, ReportedSensor
from models.records import Report, SensorReading
from sensors.base import SensorSource
from services.clock import Clock, format_timestamp

logger = logging.getLogger(__name__)

SENSOR_FAMILY = "DS18B20"


def collect_report(clock: Clock, sensors: SensorSource) -> Report:
    """Read all enumerated sensors in order; the first failure propagates."""
    report = Report(updated=clock.now())
    for sensor_id in sensors.list_ids():
        report.readings.append(
            SensorReading(sensor_id=sensor_id, celsius=sensors.read_celsius(sensor_id))
        )
    return report


def render_report(report: Report) -> str:
    # Sensor ids come from the kernel and are written unescaped.
    parts = [f"<a updated='{format_timestamp(report.updated)}'>\n"]
    for reading in report.readings:
        parts.append("<owd>\n")
        parts.append(f"<Name>{SENSOR_FAMILY}</Name>\n")
        parts.append(f"<ROMId>{reading.sensor_id}</ROMId>\n")
        parts.append(f"<Temperature>{reading.celsius:.1f}</Temperature>\n")
        parts.append(f"<TemperatureF>{reading.fahrenheit:.1f}</TemperatureF>\n")
        parts.append("</owd>\n")
    parts.append("</a>\n")
    return "".join(parts)


def generate_report(clock: Clock, sensors: SensorSource) -> str:
    report = collect_report(clock, sensors)
    body = render_report(report)
    logger.info("Generated report", extra={"sensor_count": len(report.readings)})
    logger.debug("%s", body)
    return body


def parse_report(text: str) -> ReportDocument:
    """Read a rendered report back into schema objects.

    Raises ``ValueError`` when the document is not a well-formed report.
    """
    try:
        root = ElementTree.fromstring(text)
    except ElementTree.ParseError as exc:
        raise ValueError(f"Report is not well-formed XML: {exc}") from exc

    updated = root.get("updated")
    if root.tag != "a" or updated is None:
        raise ValueError("Report root must be <a> with an 'updated' attribute.")

    sensors = []
    for record in root.findall("owd"):
        try:
            sensors.append(
                ReportedSensor(
                    name=_child_text(record, "Name"),
                    rom_id=_child_text(record, "ROMId"),
                    celsius=float(_child_text(record, "Temperature")),
                    fahrenheit=float(_child_text(record, "TemperatureF")),
                )
            )
        except ValueError as exc:
            raise ValueError(f"Invalid sensor record: {exc}") from exc
    return ReportDocument(updated=updated, sensors=sensors)


def _child_text(record: ElementTree.Element, tag: str) -> str:
    text = record.findtext(tag)
    if text is None:
        raise ValueError(f"missing <{tag}>")
    return text

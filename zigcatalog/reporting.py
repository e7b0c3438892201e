"""Helpers used by definition configure sequences.

The endpoint handles are owned by the runtime. They are expected to provide:

- ``await endpoint.bind(cluster, target)``
- ``await endpoint.configure_reporting(cluster, {attribute: (min, max, change)})``
- ``await endpoint.read(cluster, [attribute, ...])``
- ``endpoint.save_cluster_attribute_key_value(cluster, {attribute: value})``
"""

from __future__ import annotations

import logging
import typing

from zigcatalog.const import RepInterval
from zigcatalog.typing import EndpointHandle

_LOGGER = logging.getLogger(__name__)

ReportingOverrides = typing.Optional[typing.Mapping[str, int]]


async def bind(
    endpoint: EndpointHandle,
    target: EndpointHandle,
    clusters: typing.Iterable[str],
) -> None:
    """Bind each cluster of the endpoint to the target endpoint."""
    for cluster in clusters:
        _LOGGER.debug("Binding cluster %s of %s to %s", cluster, endpoint, target)
        await endpoint.bind(cluster, target)


async def _configure(
    endpoint: EndpointHandle,
    cluster: str,
    attribute: str,
    min_interval: int,
    max_interval: int,
    reportable_change: int,
    overrides: ReportingOverrides = None,
) -> None:
    overrides = overrides or {}
    config = (
        overrides.get("min", min_interval),
        overrides.get("max", max_interval),
        overrides.get("change", reportable_change),
    )
    _LOGGER.debug(
        "Configuring reporting of %s.%s on %s: %s", cluster, attribute, endpoint, config
    )
    await endpoint.configure_reporting(cluster, {attribute: config})


async def on_off(endpoint: EndpointHandle, overrides: ReportingOverrides = None):
    await _configure(
        endpoint, "genOnOff", "onOff", 0, RepInterval.HOUR, 0, overrides
    )


async def brightness(endpoint: EndpointHandle, overrides: ReportingOverrides = None):
    await _configure(
        endpoint, "genLevelCtrl", "currentLevel", 0, RepInterval.HOUR, 1, overrides
    )


async def battery_percentage_remaining(
    endpoint: EndpointHandle, overrides: ReportingOverrides = None
):
    await _configure(
        endpoint,
        "genPowerCfg",
        "batteryPercentageRemaining",
        RepInterval.HOUR,
        RepInterval.MAX,
        0,
        overrides,
    )


async def battery_voltage(
    endpoint: EndpointHandle, overrides: ReportingOverrides = None
):
    await _configure(
        endpoint,
        "genPowerCfg",
        "batteryVoltage",
        RepInterval.HOUR,
        RepInterval.MAX,
        0,
        overrides,
    )


async def current_position_lift_percentage(
    endpoint: EndpointHandle, overrides: ReportingOverrides = None
):
    await _configure(
        endpoint,
        "closuresWindowCovering",
        "currentPositionLiftPercentage",
        1,
        RepInterval.MAX,
        1,
        overrides,
    )


async def instantaneous_demand(
    endpoint: EndpointHandle, overrides: ReportingOverrides = None
):
    await _configure(
        endpoint, "seMetering", "instantaneousDemand", 5, RepInterval.HOUR, 1, overrides
    )


async def current_summ_delivered(
    endpoint: EndpointHandle, overrides: ReportingOverrides = None
):
    await _configure(
        endpoint,
        "seMetering",
        "currentSummDelivered",
        5,
        RepInterval.HOUR,
        257,
        overrides,
    )


async def current_summ_received(
    endpoint: EndpointHandle, overrides: ReportingOverrides = None
):
    await _configure(
        endpoint,
        "seMetering",
        "currentSummReceived",
        5,
        RepInterval.HOUR,
        257,
        overrides,
    )


async def active_power(endpoint: EndpointHandle, overrides: ReportingOverrides = None):
    await _configure(
        endpoint,
        "haElectricalMeasurement",
        "activePower",
        5,
        RepInterval.HOUR,
        1,
        overrides,
    )


async def rms_current(endpoint: EndpointHandle, overrides: ReportingOverrides = None):
    await _configure(
        endpoint,
        "haElectricalMeasurement",
        "rmsCurrent",
        5,
        RepInterval.HOUR,
        1,
        overrides,
    )


async def rms_voltage(endpoint: EndpointHandle, overrides: ReportingOverrides = None):
    await _configure(
        endpoint,
        "haElectricalMeasurement",
        "rmsVoltage",
        5,
        RepInterval.HOUR,
        1,
        overrides,
    )


async def temperature(endpoint: EndpointHandle, overrides: ReportingOverrides = None):
    await _configure(
        endpoint,
        "msTemperatureMeasurement",
        "measuredValue",
        10,
        RepInterval.HOUR,
        100,
        overrides,
    )


async def read_metering_multiplier_divisor(endpoint: EndpointHandle) -> None:
    await endpoint.read("seMetering", ["multiplier", "divisor"])


async def read_electrical_measurement_multiplier_divisors(
    endpoint: EndpointHandle,
) -> None:
    await endpoint.read(
        "haElectricalMeasurement",
        ["acVoltageMultiplier", "acVoltageDivisor", "acCurrentMultiplier"],
    )
    await endpoint.read(
        "haElectricalMeasurement",
        ["acCurrentDivisor", "acPowerMultiplier", "acPowerDivisor"],
    )

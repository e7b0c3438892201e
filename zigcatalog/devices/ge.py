"""GE (Jasco) switches, dimmers and plugs."""

from __future__ import annotations

from zigcatalog import exposes as e, presets, reporting
from zigcatalog.converters import from_zigbee as fz, to_zigbee as tz


async def _configure_on_off(device, coordinator_endpoint, logger):
    endpoint = device.get_endpoint(1)
    await reporting.bind(endpoint, coordinator_endpoint, ["genOnOff"])
    await reporting.on_off(endpoint)


async def _configure_45853(device, coordinator_endpoint, logger):
    endpoint = device.get_endpoint(1)
    await reporting.bind(endpoint, coordinator_endpoint, ["genOnOff", "seMetering"])
    await reporting.on_off(endpoint)
    await reporting.read_metering_multiplier_divisor(endpoint)
    await reporting.instantaneous_demand(endpoint, {"min": 10, "change": 2})


async def _configure_ptapt(device, coordinator_endpoint, logger):
    endpoint = device.get_endpoint(2)
    await reporting.bind(endpoint, coordinator_endpoint, ["genOnOff"])
    await reporting.on_off(endpoint)


DEFINITIONS = [
    {
        "zigbee_model": ["SoftWhite"],
        "model": "PSB19-SW27",
        "vendor": "GE",
        "description": "Link smart LED light bulb, A19 soft white (2700K)",
        "extend": presets.light_onoff_brightness(),
    },
    {
        "zigbee_model": ["ZLL Light"],
        "model": "22670",
        "vendor": "GE",
        "description": "Link smart LED light bulb, A19/BR30 soft white (2700K)",
        "extend": presets.light_onoff_brightness(),
    },
    {
        "zigbee_model": ["Daylight"],
        "model": "PQC19-DY01",
        "vendor": "GE",
        "description": "Link smart LED light bulb, A19/BR30 cold white (5000K)",
        "extend": presets.light_onoff_brightness(),
    },
    {
        "zigbee_model": ["45852"],
        "model": "45852GE",
        "vendor": "GE",
        "description": "ZigBee plug-in smart dimmer",
        "extend": presets.light_onoff_brightness(),
        "meta": {"configure_key": 1},
        "configure": _configure_on_off,
    },
    {
        "zigbee_model": ["45853"],
        "model": "45853GE",
        "vendor": "GE",
        "description": "Plug-in smart switch",
        "from_zigbee": [fz.on_off, fz.metering, fz.ignore_basic_report],
        "to_zigbee": [tz.on_off, tz.ignore_transition],
        "meta": {"configure_key": 4},
        "configure": _configure_45853,
        "exposes": [e.switch(), e.power(), e.energy()],
    },
    {
        "zigbee_model": ["45856"],
        "model": "45856GE",
        "vendor": "GE",
        "description": "In-wall smart switch",
        "extend": presets.switch(),
        "meta": {"configure_key": 1},
        "configure": _configure_on_off,
    },
    {
        "zigbee_model": ["45857"],
        "model": "45857GE",
        "vendor": "GE",
        "description": "ZigBee in-wall smart dimmer",
        "extend": presets.light_onoff_brightness(),
        "meta": {"configure_key": 1},
        "configure": _configure_on_off,
    },
    {
        "zigbee_model": ["Smart Switch"],
        "model": "PTAPT-WH02",
        "vendor": "GE",
        "description": "Quirky smart switch",
        "extend": presets.switch(),
        "endpoint": lambda device: {"default": 2},
        "meta": {"configure_key": 1},
        "configure": _configure_ptapt,
    },
    {
        "zigbee_model": ["ZHA Smart Plug"],
        "model": "POTLK-WH02",
        "vendor": "GE",
        "description": "Outlink smart remote outlet",
        "extend": presets.switch(),
    },
]

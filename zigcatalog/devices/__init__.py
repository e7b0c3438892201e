"""Device definition table.

Definitions are listed in authoring order, which is also the order in which
fingerprints are tried. Vendors with many products live in their own module.
"""

from __future__ import annotations

from zigcatalog import exposes as e, presets, reporting
from zigcatalog.const import (
    SIG_ENDPOINTS,
    SIG_EP_INPUT,
    SIG_EP_OUTPUT,
    SIG_EP_PROFILE,
    SIG_EP_TYPE,
    SIG_LOGICAL_TYPE,
    SIG_MANUFACTURER,
    SIG_MANUFACTURER_ID,
    SIG_MODEL,
    LogicalType,
)
from zigcatalog.converters import from_zigbee as fz, to_zigbee as tz
from zigcatalog.devices import ge, innr, lidl, robb
from zigcatalog.ota import OtaProvider


async def _configure_sm_so306ez_10(device, coordinator_endpoint, logger):
    for endpoint_id in (1, 2, 3, 4, 5):
        await reporting.bind(
            device.get_endpoint(endpoint_id), coordinator_endpoint, ["genOnOff"]
        )


async def _configure_psm_29zbsr(device, coordinator_endpoint, logger):
    endpoint = device.get_endpoint(1)
    await reporting.bind(endpoint, coordinator_endpoint, ["genOnOff", "seMetering"])
    await reporting.on_off(endpoint)
    await reporting.read_metering_multiplier_divisor(endpoint)
    await reporting.instantaneous_demand(endpoint, {"min": 10, "change": 2})


async def _configure_hse2905e(device, coordinator_endpoint, logger):
    endpoint = device.get_endpoint(1)
    await reporting.bind(
        endpoint,
        coordinator_endpoint,
        ["haElectricalMeasurement", "seMetering", "msTemperatureMeasurement"],
    )
    await reporting.read_electrical_measurement_multiplier_divisors(endpoint)
    await reporting.rms_voltage(endpoint)
    await reporting.rms_current(endpoint)
    await reporting.read_metering_multiplier_divisor(endpoint)
    await reporting.instantaneous_demand(endpoint)
    await reporting.current_summ_delivered(endpoint)
    await reporting.current_summ_received(endpoint)
    await reporting.temperature(endpoint)


def _setting(name: str, unit: str) -> e.Numeric:
    return e.Numeric(name=name, access=e.Access.STATE_SET, unit=unit)


_ALDI_RGBW = presets.light_onoff_brightness_colortemp_color(
    disable_color_temp_startup=True
)

_XBEE_ENDPOINT = {
    SIG_EP_PROFILE: 49413,
    SIG_EP_TYPE: 1,
    SIG_EP_INPUT: [],
    SIG_EP_OUTPUT: [],
}

_INLINE = [
    # UseeLink
    {
        "fingerprint": [{SIG_MODEL: "TS011F", SIG_MANUFACTURER: "_TZ3000_o005nuxx"}],
        "model": "SM-SO306EZ-10",
        "vendor": "UseeLink",
        "description": "4 gang switch, with USB",
        "exposes": [e.switch().with_endpoint(f"l{i}") for i in range(1, 6)],
        "extend": presets.switch(),
        "meta": {"configure_key": 1, "multi_endpoint": True},
        "configure": _configure_sm_so306ez_10,
        "endpoint": lambda device: {"l1": 1, "l2": 2, "l3": 3, "l4": 4, "l5": 5},
    },
    {
        "fingerprint": [{SIG_MODEL: "TS011F", SIG_MANUFACTURER: "_TZ3000_tvuarksa"}],
        "model": "SM-AZ713",
        "vendor": "UseeLink",
        "description": "Smart water/gas valve",
        "extend": presets.switch(),
    },
    # Brimate
    {
        "zigbee_model": ["FB56-BOT02HM1A5"],
        "model": "FZB8708HD-S1",
        "vendor": "Brimate",
        "description": "Smart motion sensor",
        "from_zigbee": [fz.ias_occupancy_alarm_1],
        "to_zigbee": [],
        "exposes": [e.occupancy(), e.battery_low()],
    },
    # Neo
    {
        "fingerprint": [{SIG_MODEL: "TS0601", SIG_MANUFACTURER: "_TZE200_d0yu2xgi"}],
        "zigbee_model": ["0yu2xgi"],
        "model": "NAS-AB02B0",
        "vendor": "Neo",
        "description": "Temperature & humidity sensor and alarm",
        "from_zigbee": [fz.neo_t_h_alarm, fz.ignore_basic_report],
        "to_zigbee": [tz.neo_t_h_alarm],
        "exposes": [
            e.temperature(),
            e.humidity(),
            e.Binary(name="humidity_alarm", access=e.Access.STATE_SET),
            e.battery_low(),
            e.Binary(name="temperature_alarm", access=e.Access.STATE_SET),
            e.Binary(name="alarm", access=e.Access.STATE_SET),
            e.Enum(
                name="melody",
                access=e.Access.STATE_SET,
                values=[str(melody) for melody in range(1, 19)],
            ),
            _setting("duration", "second"),
            _setting("temperature_min", "°C"),
            _setting("temperature_max", "°C"),
            _setting("humidity_min", "%"),
            _setting("humidity_max", "%"),
            e.Enum(
                name="volume",
                access=e.Access.STATE_SET,
                values=["low", "medium", "high"],
            ),
            e.Enum(
                name="power_type",
                access=e.Access.STATE,
                values=[
                    "battery_full",
                    "battery_high",
                    "battery_medium",
                    "battery_low",
                    "usb",
                ],
            ),
        ],
    },
    # Digi
    {
        "fingerprint": [
            {
                SIG_LOGICAL_TYPE: LogicalType.ROUTER,
                SIG_MANUFACTURER_ID: 4126,
                SIG_ENDPOINTS: {230: _XBEE_ENDPOINT, 232: _XBEE_ENDPOINT},
            }
        ],
        "model": "XBee",
        "vendor": "Digi",
        "description": "Router",
        "from_zigbee": [],
        "to_zigbee": [],
        "exposes": [],
    },
    # Climax
    {
        "zigbee_model": [
            "PSM_00.00.00.35TC",
            "PSMP5_00.00.02.02TC",
            "PSMP5_00.00.05.01TC",
            "PSMP5_00.00.05.10TC",
            "PSMP5_00.00.03.15TC",
            "PSMP5_00.00.03.16TC",
            "PSMP5_00.00.03.19TC",
        ],
        "model": "PSM-29ZBSR",
        "vendor": "Climax",
        "description": "Power plug",
        "from_zigbee": [fz.on_off, fz.metering, fz.ignore_basic_report],
        "to_zigbee": [tz.on_off, tz.ignore_transition],
        "meta": {"configure_key": 4},
        "configure": _configure_psm_29zbsr,
        "white_label": [{"vendor": "Blaupunkt", "model": "PSM-S1"}],
        "exposes": [e.switch(), e.power(), e.energy()],
    },
    # Datek
    {
        "zigbee_model": ["Meter Reader"],
        "model": "HSE2905E",
        "vendor": "Datek",
        "description": "Datek Eva AMS HAN power-meter sensor",
        "from_zigbee": [fz.metering, fz.electrical_measurement, fz.temperature],
        "to_zigbee": [],
        "ota": OtaProvider.ZIGBEE_OTA,
        "meta": {"configure_key": 3},
        "configure": _configure_hse2905e,
        "exposes": [e.power(), e.energy(), e.current(), e.voltage(), e.temperature()],
    },
    # Fantem
    {
        "fingerprint": [
            {SIG_MODEL: "TS0202", SIG_MANUFACTURER: "_TZ3210_rxqls8v0"},
            {SIG_MODEL: "TS0202", SIG_MANUFACTURER: "_TZ3210_zmy9hjay"},
        ],
        "model": "ZB003-X",
        "vendor": "Fantem",
        "description": "4 in 1 multi sensor",
        "from_zigbee": [fz.battery, fz.ignore_basic_report, fz.illuminance],
        "to_zigbee": [],
        "exposes": [
            e.occupancy(),
            e.tamper(),
            e.battery(),
            e.illuminance(),
            e.illuminance_lux(),
            e.temperature(),
            e.humidity(),
        ],
    },
    # Aldi
    {
        "fingerprint": [{SIG_MODEL: "TS0505B", SIG_MANUFACTURER: "_TZ3000_j0gtlepx"}],
        "model": "L122FF63H11A5.0W",
        "vendor": "Aldi",
        "description": "LIGHTWAY smart home LED-lamp - spot",
        "extend": _ALDI_RGBW,
        "meta": {"apply_red_fix": True},
    },
    {
        "fingerprint": [{SIG_MODEL: "TS0505B", SIG_MANUFACTURER: "_TZ3000_kohbva1f"}],
        "model": "L122CB63H11A9.0W",
        "vendor": "Aldi",
        "description": "LIGHTWAY smart home LED-lamp - bulb",
        "extend": _ALDI_RGBW,
        "meta": {"apply_red_fix": True},
    },
    {
        "fingerprint": [{SIG_MODEL: "TS0505B", SIG_MANUFACTURER: "_TZ3000_iivsrikg"}],
        "model": "L122AA63H11A6.5W",
        "vendor": "Aldi",
        "description": "LIGHTWAY smart home LED-lamp - candle",
        "extend": _ALDI_RGBW,
        "meta": {"apply_red_fix": True},
    },
    {
        "fingerprint": [{SIG_MODEL: "TS0502B", SIG_MANUFACTURER: "_TZ3000_g1glzzfk"}],
        "model": "F122SB62H22A4.5W",
        "vendor": "Aldi",
        "description": "LIGHTWAY smart home LED-lamp - filament",
        "extend": presets.light_onoff_brightness_colortemp(
            disable_color_temp_startup=True
        ),
    },
    {
        "fingerprint": [{SIG_MODEL: "TS0505B", SIG_MANUFACTURER: "_TZ3000_v1srfw9x"}],
        "model": "C422AC11D41H140.0W",
        "vendor": "Aldi",
        "description": "MEGOS LED panel RGB+CCT 40W 3600lm 62 x 62 cm",
        "extend": _ALDI_RGBW,
        "meta": {"apply_red_fix": True},
    },
    {
        "fingerprint": [{SIG_MODEL: "TS0505B", SIG_MANUFACTURER: "_TZ3000_gb5gaeca"}],
        "model": "C422AC14D41H140.0W",
        "vendor": "Aldi",
        "description": "MEGOS LED panel RGB+CCT 40W 3600lm 30 x 120 cm",
        "extend": _ALDI_RGBW,
        "meta": {"apply_red_fix": True},
    },
    {
        "fingerprint": [{SIG_MODEL: "TS1001", SIG_MANUFACTURER: "_TZ3000_ztrfrcsu"}],
        "model": "141L100RC",
        "vendor": "Aldi",
        "description": "MEGOS switch and dimming light remote control",
        "exposes": [
            e.action(
                [
                    "on",
                    "off",
                    "brightness_stop",
                    "brightness_step_up",
                    "brightness_step_down",
                    "brightness_move_up",
                    "brightness_move_down",
                ]
            )
        ],
        "from_zigbee": [
            fz.command_on,
            fz.command_off,
            fz.command_step,
            fz.command_move,
            fz.command_stop,
        ],
        "to_zigbee": [],
    },
    # SOHAN Electric
    {
        "fingerprint": [{SIG_MODEL: "TS0001", SIG_MANUFACTURER: "_TZ3000_bezfthwc"}],
        "model": "RDCBC/Z",
        "vendor": "SOHAN Electric",
        "description": "DIN circuit breaker (1 pole / 2 poles)",
        "extend": presets.switch(),
        "from_zigbee": [fz.on_off, fz.ignore_basic_report, fz.ignore_time_read],
    },
    # WETEN
    {
        "fingerprint": [{SIG_MODEL: "TS0001", SIG_MANUFACTURER: "_TZ3000_wrhhi5h2"}],
        "model": "1GNNTS",
        "vendor": "WETEN",
        "description": "1 gang no neutral touch wall switch",
        "extend": presets.switch(),
        "from_zigbee": [fz.on_off, fz.ignore_basic_report, fz.ignore_time_read],
    },
]

DEFINITIONS = (
    *_INLINE,
    *ge.DEFINITIONS,
    *innr.DEFINITIONS,
    *lidl.DEFINITIONS,
    *robb.DEFINITIONS,
)

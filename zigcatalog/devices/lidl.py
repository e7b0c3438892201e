"""Lidl Silvercrest and Livarno devices."""

from __future__ import annotations

from zigcatalog import exposes as e, presets, reporting
from zigcatalog.const import SIG_MANUFACTURER, SIG_MODEL
from zigcatalog.converters import from_zigbee as fz, to_zigbee as tz


def _tuya(model: str, manufacturer: str) -> dict:
    return {SIG_MODEL: model, SIG_MANUFACTURER: manufacturer}


async def _configure_hg06337(device, coordinator_endpoint, logger):
    endpoint = device.get_endpoint(11)
    await reporting.bind(endpoint, coordinator_endpoint, ["genOnOff"])
    await reporting.on_off(endpoint)


async def _configure_hg06668(device, coordinator_endpoint, logger):
    endpoint = device.get_endpoint(1)
    await reporting.bind(endpoint, coordinator_endpoint, ["genPowerCfg"])
    await reporting.battery_percentage_remaining(endpoint)


async def _configure_hg06335(device, coordinator_endpoint, logger):
    endpoint = device.get_endpoint(1)
    await reporting.bind(endpoint, coordinator_endpoint, ["genPowerCfg"])
    await reporting.battery_voltage(endpoint)
    await reporting.battery_percentage_remaining(endpoint)


async def _configure_hg06336(device, coordinator_endpoint, logger):
    endpoint = device.get_endpoint(1)
    await reporting.bind(endpoint, coordinator_endpoint, ["genPowerCfg"])


async def _configure_hg06338(device, coordinator_endpoint, logger):
    for endpoint_id in (1, 2, 3):
        await reporting.bind(
            device.get_endpoint(endpoint_id), coordinator_endpoint, ["genOnOff"]
        )


def _color_capabilities(capabilities: int):
    async def _configure(device, coordinator_endpoint, logger):
        device.get_endpoint(1).save_cluster_attribute_key_value(
            "lightingColorCtrl", {"colorCapabilities": capabilities}
        )

    return _configure


_configure_rgb = _color_capabilities(29)
_configure_cct = _color_capabilities(16)


def _livarno_rgb(manufacturer: str, model: str, description: str) -> dict:
    return {
        "fingerprint": [_tuya("TS0505A", manufacturer)],
        "model": model,
        "vendor": "Lidl",
        "description": description,
        **presets.light_onoff_brightness_colortemp_color(
            disable_color_temp_startup=True
        ),
        "meta": {"apply_red_fix": True, "enhanced_hue": False, "configure_key": 2},
        "configure": _configure_rgb,
    }


def _livarno_cct(manufacturer: str, model: str, description: str) -> dict:
    return {
        "fingerprint": [_tuya("TS0502A", manufacturer)],
        "model": model,
        "vendor": "Lidl",
        "description": description,
        **presets.light_onoff_brightness_colortemp(disable_color_temp_startup=True),
        "meta": {"configure_key": 1},
        "configure": _configure_cct,
    }


DEFINITIONS = [
    {
        "fingerprint": [
            {SIG_MANUFACTURER: "_TZ3000_kdi2o9m6"},  # EU
            _tuya("TS011F", "_TZ3000_plyvnuf5"),  # CH
            _tuya("TS011F", "_TZ3000_wamqdr3f"),  # FR
            _tuya("TS011F", "_TZ3000_00mk2xzy"),  # BS
            _tuya("TS011F", "_TZ3000_upjrsxh1"),  # DK
            {SIG_MANUFACTURER: "_TZ3000_00mk2xzy"},  # BS
        ],
        "model": "HG06337",
        "vendor": "Lidl",
        "description": "Silvercrest smart plug (EU, CH, FR, BS, DK)",
        "extend": presets.switch(),
        "meta": {"configure_key": 1},
        "configure": _configure_hg06337,
    },
    {
        "fingerprint": [_tuya("TS0211", "_TZ1800_ladpngdx")],
        "model": "HG06668",
        "vendor": "Lidl",
        "description": "Silvercrest smart wireless door bell",
        "from_zigbee": [fz.battery, fz.tuya_doorbell_button, fz.ignore_basic_report],
        "to_zigbee": [],
        "meta": {"configure_key": 1},
        "configure": _configure_hg06668,
        "exposes": [e.battery(), e.action(["pressed"]), e.battery_low(), e.tamper()],
    },
    {
        "fingerprint": [_tuya("TY0202", "_TZ1800_fcdjzz3s")],
        "model": "HG06335",
        "vendor": "Lidl",
        "description": "Silvercrest smart motion sensor",
        "from_zigbee": [fz.ias_occupancy_alarm_1, fz.battery],
        "to_zigbee": [],
        "exposes": [e.occupancy(), e.battery_low(), e.tamper(), e.battery()],
        "meta": {"configure_key": 1},
        "configure": _configure_hg06335,
    },
    {
        "fingerprint": [_tuya("TY0203", "_TZ1800_ejwkn2h2")],
        "model": "HG06336",
        "vendor": "Lidl",
        "description": "Silvercrest smart window and door sensor",
        "from_zigbee": [
            fz.ias_contact_alarm_1,
            fz.ias_contact_alarm_1_report,
            fz.battery,
        ],
        "to_zigbee": [],
        "exposes": [e.contact(), e.battery_low(), e.tamper(), e.battery()],
        "meta": {"configure_key": 1},
        "configure": _configure_hg06336,
    },
    {
        "fingerprint": [_tuya("TS1001", "_TYZB01_bngwdjsr")],
        "model": "FB20-002",
        "vendor": "Lidl",
        "description": "Livarno Lux switch and dimming light remote control",
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
    {
        "fingerprint": [
            _tuya("TS011F", "_TZ3000_wzauvbcs"),  # EU
            _tuya("TS011F", "_TZ3000_1obwwnmq"),
            _tuya("TS011F", "_TZ3000_4uf3d0ax"),  # FR
            _tuya("TS011F", "_TZ3000_vzopcetz"),  # CZ
            _tuya("TS011F", "_TZ3000_vmpbygs5"),  # BS
        ],
        "model": "HG06338",
        "vendor": "Lidl",
        "description": "Silvercrest 3 gang switch, with 4 USB (EU, FR, CZ, BS)",
        "exposes": [
            e.switch().with_endpoint("l1"),
            e.switch().with_endpoint("l2"),
            e.switch().with_endpoint("l3"),
        ],
        "extend": presets.switch(),
        "meta": {"configure_key": 1, "multi_endpoint": True},
        "configure": _configure_hg06338,
        "endpoint": lambda device: {"l1": 1, "l2": 2, "l3": 3},
    },
    {
        "fingerprint": [
            _tuya("TS0505A", "_TZ3000_riwp3k79"),
            {SIG_MANUFACTURER: "_TZ3000_riwp3k79"},
        ],
        "model": "HG06104A",
        "vendor": "Lidl",
        "description": "Livarno Lux smart LED light strip 2.5m",
        **presets.light_onoff_brightness_colortemp_color(
            disable_color_temp_startup=True
        ),
        "meta": {"apply_red_fix": True, "enhanced_hue": False, "configure_key": 2},
        "configure": _configure_rgb,
    },
    {
        "fingerprint": [_tuya("TS0601", "_TZE200_s8gkrkxk")],
        "model": "HG06467",
        "vendor": "Lidl",
        "description": "Melinera smart LED string lights",
        "to_zigbee": [tz.on_off, tz.silvercrest_smart_led_string],
        "from_zigbee": [fz.on_off, fz.silvercrest_smart_led_string],
        "exposes": [
            e.light_brightness_colorhs().set_access("brightness", e.Access.STATE_SET)
        ],
    },
    _livarno_rgb("_TZ3000_odygigth", "HG06106B", "Livarno Lux E14 candle RGB"),
    _livarno_rgb("_TZ3000_kdpxju99", "HG06106A", "Livarno Lux GU10 spot RGB"),
    _livarno_rgb("_TZ3000_dbou1ap4", "HG06106C", "Livarno Lux E27 bulb RGB"),
    _livarno_cct("_TZ3000_el5kt5im", "HG06492A", "Livarno Lux GU10 spot CCT"),
    _livarno_cct("_TZ3000_oborybow", "HG06492B", "Livarno Lux E14 candle CCT"),
    _livarno_cct("_TZ3000_49qchf10", "HG06492C", "Livarno Lux E27 bulb CCT"),
    _livarno_cct("_TZ3000_rylaozuc", "14147206L", "Livarno Lux ceiling light"),
    _livarno_rgb("_TZ3000_9cpuaca6", "14148906L", "Livarno Lux mood light RGB+CCT"),
    _livarno_rgb(
        "_TZ3000_gek6snaj",
        "14149505L/14149506L",
        "Livarno Lux light bar RGB+CCT (black/white)",
    ),
]

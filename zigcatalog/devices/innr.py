"""Innr lights and plugs."""

from __future__ import annotations

from zigcatalog import exposes as e, presets, reporting
from zigcatalog.converters import from_zigbee as fz, to_zigbee as tz

_COLOR_TEMP_RANGE = (153, 555)


def _rgbw(model: str, description: str, **meta) -> dict:
    return {
        "zigbee_model": [model],
        "model": model,
        "vendor": "Innr",
        "description": description,
        "extend": presets.light_onoff_brightness_colortemp_color(
            color_temp_range=_COLOR_TEMP_RANGE, supports_hs=True
        ),
        "meta": {"apply_red_fix": True, "turns_off_at_brightness1": True, **meta},
    }


def _dimmable(model: str, description: str) -> dict:
    return {
        "zigbee_model": [model],
        "model": model,
        "vendor": "Innr",
        "description": description,
        "extend": presets.light_onoff_brightness(),
        "meta": {"turns_off_at_brightness1": True},
    }


async def _configure_plug(device, coordinator_endpoint, logger):
    endpoint = device.get_endpoint(1)
    await reporting.bind(endpoint, coordinator_endpoint, ["genOnOff"])
    await reporting.on_off(endpoint)


async def _configure_sp_120(device, coordinator_endpoint, logger):
    endpoint = device.get_endpoint(1)
    await reporting.bind(
        endpoint,
        coordinator_endpoint,
        ["genOnOff", "haElectricalMeasurement", "seMetering"],
    )
    await reporting.on_off(endpoint)
    # Reading the divisors gives UNSUPPORTED_ATTRIBUTE
    endpoint.save_cluster_attribute_key_value(
        "haElectricalMeasurement", {"acCurrentDivisor": 1000, "acCurrentMultiplier": 1}
    )
    await reporting.active_power(endpoint)
    await reporting.rms_current(endpoint)
    await reporting.rms_voltage(endpoint)
    endpoint.save_cluster_attribute_key_value(
        "seMetering", {"multiplier": 1, "divisor": 100}
    )
    await reporting.current_summ_delivered(endpoint)


DEFINITIONS = [
    _rgbw("FL 140 C", "Color Flex LED strip 4m 1200lm"),
    _rgbw("FL 130 C", "Color Flex LED strip"),
    _rgbw("FL 120 C", "Color Flex LED strip"),
    _dimmable("BF 263", "B22 filament bulb dimmable"),
    _rgbw("RB 185 C", "E27 bulb RGBW"),
    _rgbw("BY 185 C", "B22 bulb RGBW"),
    _rgbw("RB 250 C", "E14 bulb RGBW", enhanced_hue=False),
    _dimmable("RB 265", "E27 bulb"),
    _dimmable("RF 265", "E27 bulb filament clear"),
    _dimmable("BF 265", "B22 bulb filament clear"),
    {
        "zigbee_model": ["RB 278 T"],
        "model": "RB 278 T",
        "vendor": "Innr",
        "description": "Smart bulb tunable white E27",
        "extend": presets.light_onoff_brightness_colortemp(
            color_temp_range=_COLOR_TEMP_RANGE
        ),
        "meta": {"apply_red_fix": True, "turns_off_at_brightness1": True},
    },
    _rgbw("RB 285 C", "E27 bulb RGBW", enhanced_hue=False),
    _rgbw("BY 285 C", "B22 bulb RGBW"),
    _dimmable("RB 165", "E27 bulb"),
    _dimmable("RB 162", "E27 bulb"),
    _rgbw("AE 280 C", "E26 bulb RGBW"),
    {
        "zigbee_model": ["SP 120"],
        "model": "SP 120",
        "vendor": "Innr",
        "description": "Smart plug",
        "from_zigbee": [
            fz.electrical_measurement,
            fz.on_off,
            fz.ignore_genLevelCtrl_report,
            fz.metering,
        ],
        "to_zigbee": [tz.on_off],
        "meta": {"configure_key": 6},
        "configure": _configure_sp_120,
        "exposes": [
            e.power(),
            e.current(),
            e.voltage().with_access(e.Access.STATE),
            e.switch(),
            e.energy(),
        ],
    },
    {
        "zigbee_model": ["SP 220"],
        "model": "SP 220",
        "vendor": "Innr",
        "description": "Smart plug",
        "extend": presets.switch(),
        "meta": {"configure_key": 1},
        "configure": _configure_plug,
    },
    {
        "zigbee_model": ["SP 222"],
        "model": "SP 222",
        "vendor": "Innr",
        "description": "Smart plug",
        "extend": presets.switch(),
        "meta": {"configure_key": 1},
        "configure": _configure_plug,
    },
    {
        "zigbee_model": ["SP 224"],
        "model": "SP 224",
        "vendor": "Innr",
        "description": "Smart plug",
        "extend": presets.switch(),
        "meta": {"configure_key": 2},
        "configure": _configure_plug,
    },
    {
        "zigbee_model": ["OFL 120 C"],
        "model": "OFL 120 C",
        "vendor": "Innr",
        "description": "Outdoor flex light colour LED strip 2m, 550lm, RGBW",
        "extend": presets.light_onoff_brightness_colortemp_color(supports_hs=True),
        "meta": {"apply_red_fix": True, "turns_off_at_brightness1": True},
    },
    {
        "zigbee_model": ["OFL 140 C"],
        "model": "OFL 140 C",
        "vendor": "Innr",
        "description": "Outdoor flex light colour LED strip 4m, 1000lm, RGBW",
        "extend": presets.light_onoff_brightness_colortemp_color(supports_hs=True),
        "meta": {"apply_red_fix": True, "turns_off_at_brightness1": True},
    },
    _rgbw("OSL 130 C", "Outdoor smart spot colour, 230lm/spot, RGBW"),
    _dimmable("BE 220", "E26/E24 white bulb"),
]

"""ROBB smarrt devices, mostly rebranded Sunricher hardware."""

from __future__ import annotations

from zigcatalog import exposes as e, presets, reporting
from zigcatalog.converters import from_zigbee as fz, to_zigbee as tz


async def _configure_dimmer(device, coordinator_endpoint, logger):
    endpoint = device.get_endpoint(1)
    await reporting.bind(endpoint, coordinator_endpoint, ["genOnOff", "genLevelCtrl"])
    await reporting.on_off(endpoint)


async def _configure_in_wall_switch(device, coordinator_endpoint, logger):
    # some firmwares expose the switch on endpoint 3 only
    endpoint = device.get_endpoint(1) or device.get_endpoint(3)
    await reporting.bind(endpoint, coordinator_endpoint, ["genOnOff"])
    await reporting.on_off(endpoint)


async def _configure_curtain(device, coordinator_endpoint, logger):
    endpoint = device.get_endpoint(1)
    await reporting.bind(endpoint, coordinator_endpoint, ["closuresWindowCovering"])
    await reporting.current_position_lift_percentage(endpoint)


def _button_actions(buttons: int, *, with_stop: bool) -> list[str]:
    actions = []
    for button in range(1, buttons + 1):
        names = ["on", "off"]
        if with_stop:
            names.append("stop")
        names += ["brightness_move_up", "brightness_move_down", "brightness_stop"]
        actions += [f"{name}_{button}" for name in names]
    return actions


DEFINITIONS = [
    {
        "zigbee_model": ["ROB_200-004-0"],
        "model": "ROB_200-004-0",
        "vendor": "ROBB",
        "description": "ZigBee AC phase-cut dimmer",
        "extend": presets.light_onoff_brightness(),
        "meta": {"configure_key": 2},
        "configure": _configure_dimmer,
    },
    {
        "zigbee_model": ["ROB_200-011-0"],
        "model": "ROB_200-011-0",
        "vendor": "ROBB",
        "description": "ZigBee AC phase-cut dimmer",
        "extend": presets.light_onoff_brightness(),
        "meta": {"configure_key": 2},
        "configure": _configure_dimmer,
    },
    {
        "zigbee_model": ["ROB_200-003-0"],
        "model": "ROB_200-003-0",
        "vendor": "ROBB",
        "description": "Zigbee AC in wall switch",
        "extend": presets.switch(),
        "meta": {"configure_key": 1},
        "configure": _configure_in_wall_switch,
    },
    {
        "zigbee_model": ["ROB_200-014-0"],
        "model": "ROB_200-014-0",
        "vendor": "ROBB",
        "description": "ZigBee AC phase-cut rotary dimmer",
        "extend": presets.light_onoff_brightness(),
        "meta": {"configure_key": 1},
        "configure": _configure_dimmer,
    },
    {
        "zigbee_model": ["ZG2833K8_EU05", "ROB_200-007-0"],
        "model": "ROB_200-007-0",
        "vendor": "ROBB",
        "description": "Zigbee 8 button wall switch",
        "from_zigbee": [
            fz.command_on,
            fz.command_off,
            fz.command_move,
            fz.command_stop,
            fz.battery,
            fz.ignore_genOta,
        ],
        "exposes": [e.battery(), e.action(_button_actions(4, with_stop=False))],
        "to_zigbee": [],
        "meta": {"multi_endpoint": True, "battery": {"dont_divide_percentage": True}},
        "white_label": [{"vendor": "Sunricher", "model": "SR-ZG9001K8-DIM"}],
    },
    {
        "zigbee_model": ["ZG2833K4_EU06", "ROB_200-008"],
        "model": "ROB_200-008-0",
        "vendor": "ROBB",
        "description": "Zigbee 4 button wall switch",
        "from_zigbee": [
            fz.command_on,
            fz.command_off,
            fz.command_move,
            fz.command_stop,
            fz.battery,
        ],
        "exposes": [e.battery(), e.action(_button_actions(2, with_stop=True))],
        "to_zigbee": [],
        "meta": {"multi_endpoint": True, "battery": {"dont_divide_percentage": True}},
        "white_label": [{"vendor": "Sunricher", "model": "SR-ZG9001K4-DIM2"}],
    },
    {
        "zigbee_model": ["Motor Controller", "ROB_200-010-0"],
        "model": "ROB_200-010-0",
        "vendor": "ROBB",
        "description": "Zigbee curtain motor controller",
        "meta": {"configure_key": 2, "cover_inverted": True},
        "from_zigbee": [fz.cover_position_tilt],
        "to_zigbee": [tz.cover_state, tz.cover_position_tilt],
        "configure": _configure_curtain,
        "exposes": [e.cover_position()],
    },
    {
        "zigbee_model": ["ROB_200-018-0"],
        "model": "ROB_200-018-0",
        "vendor": "ROBB",
        "description": "ZigBee knob smart dimmer",
        "from_zigbee": [
            fz.command_on,
            fz.command_off,
            fz.command_move_to_level,
            fz.command_move_to_color_temp,
        ],
        "exposes": [
            e.action(["on", "off", "brightness_move_to_level", "color_temperature_move"])
        ],
        "to_zigbee": [],
        "white_label": [{"vendor": "Sunricher", "model": "SR-ZG2835"}],
    },
]

"""Reusable definition templates.

Each preset returns a fresh template fragment meant to be used as the
``extend`` of a definition, or unpacked into it.
"""

from __future__ import annotations

from zigcatalog import exposes as e
from zigcatalog.const import (
    DEF_EXPOSES,
    DEF_FROM_ZIGBEE,
    DEF_META,
    DEF_TO_ZIGBEE,
    META_SUPPORTS_HUE_AND_SATURATION,
)
from zigcatalog.converters import from_zigbee as fz, to_zigbee as tz
from zigcatalog.typing import RawDefinition


def switch() -> RawDefinition:
    return {
        DEF_EXPOSES: [e.switch()],
        DEF_FROM_ZIGBEE: [fz.on_off, fz.ignore_basic_report],
        DEF_TO_ZIGBEE: [tz.on_off],
    }


def light_onoff_brightness(*, disable_effect: bool = False) -> RawDefinition:
    to_zigbee = [
        tz.light_onoff_brightness,
        tz.ignore_transition,
        tz.ignore_rate,
        tz.light_brightness_move,
        tz.light_brightness_step,
        tz.level_config,
        tz.power_on_behavior,
    ]
    if not disable_effect:
        to_zigbee.append(tz.effect)

    return {
        DEF_EXPOSES: [e.light_brightness()],
        DEF_FROM_ZIGBEE: [
            fz.on_off,
            fz.brightness,
            fz.level_config,
            fz.power_on_behavior,
            fz.ignore_basic_report,
        ],
        DEF_TO_ZIGBEE: to_zigbee,
    }


def light_onoff_brightness_colortemp(
    *,
    color_temp_range: tuple[int, int] | None = None,
    disable_effect: bool = False,
    disable_color_temp_startup: bool = False,
) -> RawDefinition:
    template = light_onoff_brightness(disable_effect=disable_effect)
    template[DEF_EXPOSES] = [e.light_brightness_colortemp(color_temp_range)]
    template[DEF_FROM_ZIGBEE].insert(-1, fz.color_colortemp)
    template[DEF_TO_ZIGBEE] += [
        tz.light_colortemp,
        tz.light_colortemp_move,
        tz.light_colortemp_step,
    ]
    if not disable_color_temp_startup:
        template[DEF_TO_ZIGBEE].append(tz.light_colortemp_startup)

    return template


def light_onoff_brightness_color(*, supports_hs: bool = False) -> RawDefinition:
    template = light_onoff_brightness()
    template[DEF_EXPOSES] = [
        e.light_brightness_colorhs() if supports_hs else e.light_brightness_colorxy()
    ]
    template[DEF_FROM_ZIGBEE].insert(-1, fz.color_colortemp)
    template[DEF_TO_ZIGBEE] += [
        tz.light_color,
        tz.light_hue_saturation_move,
        tz.light_hue_saturation_step,
    ]
    if supports_hs:
        template[DEF_META] = {META_SUPPORTS_HUE_AND_SATURATION: True}

    return template


def light_onoff_brightness_colortemp_color(
    *,
    color_temp_range: tuple[int, int] | None = None,
    supports_hs: bool = False,
    disable_effect: bool = False,
    disable_color_temp_startup: bool = False,
) -> RawDefinition:
    template = light_onoff_brightness_colortemp(
        color_temp_range=color_temp_range,
        disable_effect=disable_effect,
        disable_color_temp_startup=disable_color_temp_startup,
    )
    if supports_hs:
        template[DEF_EXPOSES] = [
            e.light_brightness_colortemp_colorhs(color_temp_range)
        ]
        template[DEF_META] = {META_SUPPORTS_HUE_AND_SATURATION: True}
    else:
        template[DEF_EXPOSES] = [
            e.light_brightness_colortemp_colorxy(color_temp_range)
        ]
    template[DEF_TO_ZIGBEE] += [
        tz.light_color,
        tz.light_color_colortemp,
        tz.light_hue_saturation_move,
        tz.light_hue_saturation_step,
    ]

    return template

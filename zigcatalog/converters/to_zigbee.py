"""Outbound converter references."""

from __future__ import annotations

from zigcatalog.converters import ToZigbeeConverter as _Tz

cover_position_tilt = _Tz(key="cover_position_tilt", keys=("position", "tilt"))
cover_state = _Tz(key="cover_state", keys="state")
effect = _Tz(key="effect", keys=("effect", "alert", "flash"))
ignore_rate = _Tz(key="ignore_rate", keys="rate")
ignore_transition = _Tz(key="ignore_transition", keys="transition")
level_config = _Tz(key="level_config", keys="level_config")
light_brightness_move = _Tz(
    key="light_brightness_move", keys=("brightness_move", "brightness_move_onoff")
)
light_brightness_step = _Tz(
    key="light_brightness_step", keys=("brightness_step", "brightness_step_onoff")
)
light_color = _Tz(key="light_color", keys=("color", "color_rgb"))
light_color_colortemp = _Tz(key="light_color_colortemp", keys=("color", "color_temp"))
light_colortemp = _Tz(key="light_colortemp", keys=("color_temp", "color_temp_percent"))
light_colortemp_move = _Tz(
    key="light_colortemp_move", keys=("colortemp_move", "color_temp_move")
)
light_colortemp_startup = _Tz(
    key="light_colortemp_startup", keys="color_temp_startup"
)
light_colortemp_step = _Tz(key="light_colortemp_step", keys="color_temp_step")
light_hue_saturation_move = _Tz(
    key="light_hue_saturation_move", keys=("hue_move", "saturation_move")
)
light_hue_saturation_step = _Tz(
    key="light_hue_saturation_step", keys=("hue_step", "saturation_step")
)
light_onoff_brightness = _Tz(
    key="light_onoff_brightness", keys=("state", "brightness", "brightness_percent")
)
neo_t_h_alarm = _Tz(
    key="neo_t_h_alarm",
    keys=(
        "alarm",
        "melody",
        "volume",
        "duration",
        "temperature_max",
        "temperature_min",
        "humidity_min",
        "humidity_max",
        "temperature_alarm",
        "humidity_alarm",
    ),
)
on_off = _Tz(key="on_off", keys=("state", "on_time", "off_wait_time"))
power_on_behavior = _Tz(key="power_on_behavior", keys="power_on_behavior")
silvercrest_smart_led_string = _Tz(
    key="silvercrest_smart_led_string", keys=("color", "brightness", "effect")
)

# Universal handlers, supported by every controllable device
scene_store = _Tz(key="scene_store", keys="scene_store")
scene_recall = _Tz(key="scene_recall", keys="scene_recall")
scene_add = _Tz(key="scene_add", keys="scene_add")
scene_remove = _Tz(key="scene_remove", keys="scene_remove")
scene_remove_all = _Tz(key="scene_remove_all", keys="scene_remove_all")
read = _Tz(key="read", keys="read")
write = _Tz(key="write", keys="write")

UNIVERSAL = (
    scene_store,
    scene_recall,
    scene_add,
    scene_remove,
    scene_remove_all,
    read,
    write,
)

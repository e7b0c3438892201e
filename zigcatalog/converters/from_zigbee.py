"""Inbound converter references."""

from __future__ import annotations

from zigcatalog.converters import FromZigbeeConverter as _Fz

battery = _Fz(key="battery", cluster="genPowerCfg")
brightness = _Fz(key="brightness", cluster="genLevelCtrl")
color_colortemp = _Fz(key="color_colortemp", cluster="lightingColorCtrl")
command_move = _Fz(key="command_move", cluster="genLevelCtrl", types="commandMove")
command_move_to_color_temp = _Fz(
    key="command_move_to_color_temp",
    cluster="lightingColorCtrl",
    types="commandMoveToColorTemp",
)
command_move_to_level = _Fz(
    key="command_move_to_level",
    cluster="genLevelCtrl",
    types=("commandMoveToLevel", "commandMoveToLevelWithOnOff"),
)
command_off = _Fz(key="command_off", cluster="genOnOff", types="commandOff")
command_on = _Fz(key="command_on", cluster="genOnOff", types="commandOn")
command_step = _Fz(key="command_step", cluster="genLevelCtrl", types="commandStep")
command_stop = _Fz(key="command_stop", cluster="genLevelCtrl", types="commandStop")
cover_position_tilt = _Fz(key="cover_position_tilt", cluster="closuresWindowCovering")
electrical_measurement = _Fz(
    key="electrical_measurement", cluster="haElectricalMeasurement"
)
ias_contact_alarm_1 = _Fz(
    key="ias_contact_alarm_1",
    cluster="ssIasZone",
    types="commandStatusChangeNotification",
)
ias_contact_alarm_1_report = _Fz(key="ias_contact_alarm_1_report", cluster="ssIasZone")
ias_occupancy_alarm_1 = _Fz(
    key="ias_occupancy_alarm_1",
    cluster="ssIasZone",
    types="commandStatusChangeNotification",
)
ignore_basic_report = _Fz(key="ignore_basic_report", cluster="genBasic")
ignore_genLevelCtrl_report = _Fz(
    key="ignore_genLevelCtrl_report", cluster="genLevelCtrl"
)
ignore_genOta = _Fz(key="ignore_genOta", cluster="genOta", types="commandQueryNextImageRequest")
ignore_time_read = _Fz(key="ignore_time_read", cluster="genTime", types="read")
illuminance = _Fz(key="illuminance", cluster="msIlluminanceMeasurement")
level_config = _Fz(key="level_config", cluster="genLevelCtrl")
metering = _Fz(key="metering", cluster="seMetering")
neo_t_h_alarm = _Fz(
    key="neo_t_h_alarm",
    cluster="manuSpecificTuya",
    types=("commandDataReport", "commandDataResponse"),
)
on_off = _Fz(key="on_off", cluster="genOnOff")
power_on_behavior = _Fz(key="power_on_behavior", cluster="genOnOff")
silvercrest_smart_led_string = _Fz(
    key="silvercrest_smart_led_string",
    cluster="manuSpecificTuya",
    types=("commandDataResponse", "commandDataReport"),
)
temperature = _Fz(key="temperature", cluster="msTemperatureMeasurement")
tuya_doorbell_button = _Fz(
    key="tuya_doorbell_button",
    cluster="ssIasZone",
    types="commandStatusChangeNotification",
)

"""zigcatalog constants."""

from __future__ import annotations

import enum

# Fingerprint keys
SIG_ENDPOINTS = "endpoints"
SIG_EP_INPUT = "input_clusters"
SIG_EP_OUTPUT = "output_clusters"
SIG_EP_PROFILE = "profile_id"
SIG_EP_TYPE = "device_type"
SIG_LOGICAL_TYPE = "logical_type"
SIG_MANUFACTURER = "manufacturer"
SIG_MANUFACTURER_ID = "manufacturer_id"
SIG_MODEL = "model"

# Definition keys
DEF_CONFIGURE = "configure"
DEF_DESCRIPTION = "description"
DEF_ENDPOINT = "endpoint"
DEF_EXPOSES = "exposes"
DEF_EXTEND = "extend"
DEF_FINGERPRINT = "fingerprint"
DEF_FROM_ZIGBEE = "from_zigbee"
DEF_META = "meta"
DEF_MODEL = "model"
DEF_ON_EVENT = "on_event"
DEF_OTA = "ota"
DEF_TO_ZIGBEE = "to_zigbee"
DEF_VENDOR = "vendor"
DEF_WHITE_LABEL = "white_label"
DEF_ZIGBEE_MODEL = "zigbee_model"

# Meta keys
META_APPLY_RED_FIX = "apply_red_fix"
META_BATTERY = "battery"
META_BATTERY_DONT_DIVIDE_PERCENTAGE = "dont_divide_percentage"
META_BATTERY_VOLTAGE_TO_PERCENTAGE = "voltage_to_percentage"
META_CONFIGURE_KEY = "configure_key"
META_COVER_INVERTED = "cover_inverted"
META_DISABLE_ACTION_GROUP = "disable_action_group"
META_DISABLE_DEFAULT_RESPONSE = "disable_default_response"
META_ENHANCED_HUE = "enhanced_hue"
META_MULTI_ENDPOINT = "multi_endpoint"
META_PIN_CODE_COUNT = "pin_code_count"
META_SUPPORTS_HUE_AND_SATURATION = "supports_hue_and_saturation"
META_TIMEOUT = "timeout"
META_TURNS_OFF_AT_BRIGHTNESS1 = "turns_off_at_brightness1"

LINKQUALITY = "linkquality"

ZDO_ENDPOINT = 0


class LogicalType(str, enum.Enum):
    """Node logical type as reported in the node descriptor."""

    COORDINATOR = "Coordinator"
    ROUTER = "Router"
    END_DEVICE = "EndDevice"


class RepInterval(enum.IntEnum):
    """Common attribute reporting intervals, in seconds."""

    MAX = 62000
    HOUR = 3600
    MINUTES_30 = 1800
    MINUTES_15 = 900
    MINUTES_10 = 600
    MINUTES_5 = 300
    MINUTE = 60

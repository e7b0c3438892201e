from __future__ import annotations

import voluptuous as vol

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
    ZDO_ENDPOINT,
    LogicalType,
)


def cv_boolean(value: bool | int | str) -> bool:
    """Validate and coerce a boolean value."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        value = value.lower().strip()
        if value in ("1", "true", "yes", "on", "enable"):
            return True
        if value in ("0", "false", "no", "off", "disable"):
            return False
    elif isinstance(value, int):
        return bool(value)
    raise vol.Invalid(f"invalid boolean '{value}' value")


def cv_hex(value: int | str) -> int:
    """Convert string with possible hex number into int."""
    if isinstance(value, bool):
        raise vol.Invalid(f"{value} is not a valid hex number")

    if isinstance(value, int):
        return value

    if not isinstance(value, str):
        raise vol.Invalid(f"{value} is not a valid hex number")

    try:
        if value.lower().startswith("0x"):
            value = int(value, base=16)
        else:
            value = int(value)
    except ValueError as err:
        raise vol.Invalid(f"Could not convert '{value}' to number") from err

    return value


def cv_uint16(value: int | str) -> int:
    """Validate a 16-bit identifier such as a profile, cluster or manufacturer id."""
    value = cv_hex(value)
    if not 0x0000 <= value <= 0xFFFF:
        raise vol.Invalid(f"{value:#x} is out of range for a 16-bit identifier")
    return value


def cv_endpoint_id(value: int | str) -> int:
    """Validate an application endpoint id."""
    value = cv_hex(value)
    if value == ZDO_ENDPOINT or not 1 <= value <= 240:
        raise vol.Invalid(f"{value} is not a valid application endpoint id")
    return value


def cv_cluster_list(value: list[int | str] | tuple | set | frozenset) -> frozenset:
    """Validate a list of cluster ids into a frozen set."""
    if isinstance(value, (str, bytes)) or not isinstance(
        value, (list, tuple, set, frozenset)
    ):
        raise vol.Invalid("cluster list must be a list of cluster ids")

    return frozenset(cv_uint16(cluster_id) for cluster_id in value)


def cv_logical_type(value: str | LogicalType) -> LogicalType:
    """Validate a node logical type."""
    try:
        return LogicalType(value)
    except ValueError as err:
        raise vol.Invalid(f"{value!r} is not a valid logical type") from err


SCHEMA_FINGERPRINT_ENDPOINT = vol.Schema(
    {
        vol.Optional(SIG_EP_PROFILE): cv_uint16,
        vol.Optional(SIG_EP_TYPE): cv_uint16,
        vol.Optional(SIG_EP_INPUT): cv_cluster_list,
        vol.Optional(SIG_EP_OUTPUT): cv_cluster_list,
    }
)

SCHEMA_FINGERPRINT = vol.Schema(
    vol.All(
        {
            vol.Optional(SIG_MODEL): str,
            vol.Optional(SIG_MANUFACTURER): str,
            vol.Optional(SIG_MANUFACTURER_ID): cv_uint16,
            vol.Optional(SIG_LOGICAL_TYPE): cv_logical_type,
            vol.Optional(SIG_ENDPOINTS): vol.All(
                {cv_endpoint_id: SCHEMA_FINGERPRINT_ENDPOINT},
                vol.Length(min=1, msg="endpoints must list at least one endpoint"),
            ),
        },
        vol.Length(min=1, msg="fingerprint must specify at least one field"),
    )
)


def cv_fingerprint(value: dict) -> dict:
    """Validate a fingerprint pattern."""
    if not isinstance(value, dict):
        raise vol.Invalid(f"fingerprint must be a mapping, got {type(value).__name__}")
    return SCHEMA_FINGERPRINT(value)


SCHEMA_WHITE_LABEL = vol.Schema(
    {
        vol.Required("vendor"): str,
        vol.Required("model"): str,
        vol.Optional("description"): str,
    }
)


def cv_white_label(value: dict) -> dict:
    """Validate a white label entry."""
    if not isinstance(value, dict):
        raise vol.Invalid("white label must be a mapping")
    return SCHEMA_WHITE_LABEL(value)

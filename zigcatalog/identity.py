"""Identity reported by a live device."""

from __future__ import annotations

import logging
import typing

import attrs
from frozendict import frozendict

from zigcatalog.const import ZDO_ENDPOINT, LogicalType
from zigcatalog.typing import DeviceHandle

_LOGGER = logging.getLogger(__name__)


def normalize_model_id(model: str | None) -> str | None:
    """Strip padding some devices append to the Basic cluster model string."""
    if model is None:
        return None
    return model.split("\x00", 1)[0].strip()


@attrs.define(frozen=True, kw_only=True, repr=True)
class EndpointIdentity:
    profile_id: int | None = attrs.field(default=None)
    device_type: int | None = attrs.field(default=None)
    input_clusters: frozenset[int] = attrs.field(factory=frozenset, converter=frozenset)
    output_clusters: frozenset[int] = attrs.field(
        factory=frozenset, converter=frozenset
    )


def _endpoints_converter(
    endpoints: typing.Mapping[int, EndpointIdentity],
) -> frozendict[int, EndpointIdentity]:
    return frozendict(
        {
            eid: ep
            if isinstance(ep, EndpointIdentity)
            else EndpointIdentity(**ep)
            for eid, ep in endpoints.items()
            if eid != ZDO_ENDPOINT
        }
    )


@attrs.define(frozen=True, kw_only=True, repr=True)
class DeviceIdentity:
    """Everything a device reports about itself that a fingerprint can match."""

    model: str | None = attrs.field(default=None, converter=normalize_model_id)
    manufacturer: str | None = attrs.field(default=None)
    manufacturer_id: int | None = attrs.field(default=None)
    logical_type: LogicalType | None = attrs.field(
        default=None, converter=attrs.converters.optional(LogicalType)
    )
    endpoints: frozendict[int, EndpointIdentity] = attrs.field(
        factory=frozendict, converter=_endpoints_converter
    )

    @classmethod
    def from_device(cls, device: DeviceHandle) -> DeviceIdentity:
        """Build the identity of a zigpy-style device object."""
        node_desc = getattr(device, "node_desc", None)
        logical_type = None
        manufacturer_id = None

        if node_desc is not None:
            manufacturer_id = getattr(node_desc, "manufacturer_code", None)
            node_type = getattr(node_desc, "logical_type", None)
            if node_type is not None:
                # zigpy's LogicalType enum names match ours, modulo casing
                name = getattr(node_type, "name", str(node_type))
                try:
                    logical_type = LogicalType[
                        "END_DEVICE" if name.lower() == "enddevice" else name.upper()
                    ]
                except KeyError:
                    _LOGGER.debug(
                        "Ignoring reserved logical type %r of %s", name, device
                    )

        endpoints = {}
        for eid, endpoint in device.endpoints.items():
            if eid == ZDO_ENDPOINT:
                continue
            endpoints[eid] = EndpointIdentity(
                profile_id=endpoint.profile_id,
                device_type=endpoint.device_type,
                input_clusters=endpoint.in_clusters.keys(),
                output_clusters=endpoint.out_clusters.keys(),
            )

        return cls(
            model=device.model,
            manufacturer=device.manufacturer,
            manufacturer_id=manufacturer_id,
            logical_type=logical_type,
            endpoints=endpoints,
        )

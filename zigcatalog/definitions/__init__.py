"""Resolved device definitions and fingerprint matching."""

from __future__ import annotations

import logging
import typing

import attrs
from frozendict import deepfreeze, frozendict

from zigcatalog.config import CLUSTER_MATCH_EXACT, CLUSTER_MATCH_SUBSET
from zigcatalog.const import (
    LINKQUALITY,
    META_CONFIGURE_KEY,
    META_MULTI_ENDPOINT,
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
from zigcatalog.converters import FromZigbeeConverter, ToZigbeeConverter
from zigcatalog.exposes import Expose
from zigcatalog.identity import DeviceIdentity
from zigcatalog.ota import OtaProvider
from zigcatalog.typing import (
    ConfigureCallable,
    DeviceHandle,
    EndpointMapCallable,
    OnEventCallable,
)

_LOGGER = logging.getLogger(__name__)

FilterType = typing.Callable[[DeviceIdentity], bool]


def _optional_frozenset(value: typing.Iterable[int] | None) -> frozenset[int] | None:
    return None if value is None else frozenset(value)


@attrs.define(frozen=True, kw_only=True, repr=True)
class EndpointFingerprint:
    """Pattern over one endpoint. Fields left as None are wildcards."""

    profile_id: int | None = attrs.field(default=None)
    device_type: int | None = attrs.field(default=None)
    input_clusters: frozenset[int] | None = attrs.field(
        default=None, converter=_optional_frozenset
    )
    output_clusters: frozenset[int] | None = attrs.field(
        default=None, converter=_optional_frozenset
    )

    @classmethod
    def from_dict(cls, data: typing.Mapping[str, typing.Any]) -> EndpointFingerprint:
        return cls(
            profile_id=data.get(SIG_EP_PROFILE),
            device_type=data.get(SIG_EP_TYPE),
            input_clusters=data.get(SIG_EP_INPUT),
            output_clusters=data.get(SIG_EP_OUTPUT),
        )


@attrs.define(frozen=True, kw_only=True, repr=True)
class Fingerprint:
    """Structural pattern over the identity of a device.

    Fields left as None are wildcards. Endpoints are keyed by endpoint id and
    only the listed endpoints are checked.
    """

    model: str | None = attrs.field(default=None)
    manufacturer: str | None = attrs.field(default=None)
    manufacturer_id: int | None = attrs.field(default=None)
    logical_type: LogicalType | None = attrs.field(
        default=None, converter=attrs.converters.optional(LogicalType)
    )
    endpoints: frozendict[int, EndpointFingerprint] | None = attrs.field(
        default=None,
        converter=attrs.converters.optional(frozendict),
        validator=attrs.validators.optional(attrs.validators.min_len(1)),
    )

    @classmethod
    def from_dict(cls, data: typing.Mapping[str, typing.Any]) -> Fingerprint:
        endpoints = data.get(SIG_ENDPOINTS)
        if endpoints is not None:
            endpoints = {
                eid: EndpointFingerprint.from_dict(ep) for eid, ep in endpoints.items()
            }

        return cls(
            model=data.get(SIG_MODEL),
            manufacturer=data.get(SIG_MANUFACTURER),
            manufacturer_id=data.get(SIG_MANUFACTURER_ID),
            logical_type=data.get(SIG_LOGICAL_TYPE),
            endpoints=endpoints,
        )


@attrs.define(frozen=True, kw_only=True, repr=True)
class WhiteLabel:
    """A rebranded product sharing the definition of its original."""

    vendor: str = attrs.field()
    model: str = attrs.field()
    description: str | None = attrs.field(default=None)


@attrs.define(frozen=True, kw_only=True, repr=True)
class Definition:
    """A fully resolved device definition."""

    model: str = attrs.field()
    vendor: str = attrs.field()
    description: str = attrs.field()
    zigbee_model: tuple[str, ...] = attrs.field(factory=tuple, converter=tuple)
    fingerprint: tuple[Fingerprint, ...] = attrs.field(factory=tuple, converter=tuple)
    exposes: tuple[Expose, ...] | None = attrs.field(
        default=None, converter=attrs.converters.optional(tuple)
    )
    from_zigbee: tuple[FromZigbeeConverter, ...] = attrs.field(
        factory=tuple, converter=tuple
    )
    to_zigbee: tuple[ToZigbeeConverter, ...] = attrs.field(
        factory=tuple, converter=tuple
    )
    configure: ConfigureCallable | None = attrs.field(default=None)
    meta: frozendict[str, typing.Any] = attrs.field(
        factory=frozendict, converter=deepfreeze
    )
    endpoint: EndpointMapCallable | None = attrs.field(default=None)
    ota: OtaProvider | None = attrs.field(default=None)
    on_event: OnEventCallable | None = attrs.field(default=None)
    white_label: tuple[WhiteLabel, ...] = attrs.field(factory=tuple, converter=tuple)

    @property
    def config_version(self) -> int | None:
        """Version of the configure sequence, None when there is nothing to run."""
        return self.meta.get(META_CONFIGURE_KEY)

    @property
    def multi_endpoint(self) -> bool:
        return bool(self.meta.get(META_MULTI_ENDPOINT, False))

    @property
    def white_label_models(self) -> tuple[str, ...]:
        return tuple(label.model for label in self.white_label)

    def needs_configure(self, last_config_version: int | None) -> bool:
        """Return True if the configure sequence has to run for a device.

        `last_config_version` is the version the runtime last applied to the
        device, None if it was never configured.
        """
        if self.configure is None:
            return False
        return last_config_version != self.config_version

    def endpoint_names(self, device: DeviceHandle) -> dict[str, int]:
        """Return the semantic endpoint name to endpoint id mapping."""
        if self.endpoint is None:
            return {}
        return dict(self.endpoint(device))

    def find_to_zigbee(self, key: str) -> ToZigbeeConverter | None:
        """Return the first outbound converter handling the capability key."""
        for converter in self.to_zigbee:
            if converter.handles(key):
                return converter
        return None

    @property
    def linkquality(self) -> Expose | None:
        for expose in self.exposes or ():
            if expose.name == LINKQUALITY:
                return expose
        return None


def fingerprint_matches(
    fingerprint: Fingerprint,
    *,
    cluster_match: str = CLUSTER_MATCH_EXACT,
    strict_endpoints: bool = False,
) -> FilterType:
    """Return a filter checking if a device identity matches the fingerprint."""

    if cluster_match == CLUSTER_MATCH_EXACT:

        def _clusters_match(expected: frozenset[int], actual: frozenset[int]) -> bool:
            return expected == actual

    elif cluster_match == CLUSTER_MATCH_SUBSET:

        def _clusters_match(expected: frozenset[int], actual: frozenset[int]) -> bool:
            return expected <= actual

    else:
        raise ValueError(f"Unknown cluster match policy: {cluster_match!r}")

    def _filter(identity: DeviceIdentity) -> bool:
        """Return True if device identity matches the fingerprint."""
        if fingerprint.model is not None and identity.model != fingerprint.model:
            _LOGGER.debug("Fail, because device model mismatch: '%s'", identity.model)
            return False

        if (
            fingerprint.manufacturer is not None
            and identity.manufacturer != fingerprint.manufacturer
        ):
            _LOGGER.debug(
                "Fail, because device manufacturer mismatch: '%s'",
                identity.manufacturer,
            )
            return False

        if (
            fingerprint.manufacturer_id is not None
            and identity.manufacturer_id != fingerprint.manufacturer_id
        ):
            _LOGGER.debug(
                "Fail, because manufacturer id mismatch: %s", identity.manufacturer_id
            )
            return False

        if (
            fingerprint.logical_type is not None
            and identity.logical_type != fingerprint.logical_type
        ):
            _LOGGER.debug(
                "Fail, because logical type mismatch: %s", identity.logical_type
            )
            return False

        sig = fingerprint.endpoints
        if sig is None:
            return True

        dev_ep = set(identity.endpoints)

        if strict_endpoints and set(sig) != dev_ep:
            _LOGGER.debug(
                "Fail because endpoint list mismatch: %s %s", set(sig), dev_ep
            )
            return False

        if not set(sig) <= dev_ep:
            _LOGGER.debug(
                "Fail because endpoints are missing: %s %s", set(sig), dev_ep
            )
            return False

        for eid, ep_sig in sig.items():
            endpoint = identity.endpoints[eid]

            if (
                ep_sig.profile_id is not None
                and endpoint.profile_id != ep_sig.profile_id
            ):
                _LOGGER.debug("Fail because profile_id mismatch on endpoint %s", eid)
                return False

            if (
                ep_sig.device_type is not None
                and endpoint.device_type != ep_sig.device_type
            ):
                _LOGGER.debug("Fail because device_type mismatch on endpoint %s", eid)
                return False

            if ep_sig.input_clusters is not None and not _clusters_match(
                ep_sig.input_clusters, endpoint.input_clusters
            ):
                _LOGGER.debug(
                    "Fail because input cluster mismatch on endpoint %s", eid
                )
                return False

            if ep_sig.output_clusters is not None and not _clusters_match(
                ep_sig.output_clusters, endpoint.output_clusters
            ):
                _LOGGER.debug(
                    "Fail because output cluster mismatch on endpoint %s", eid
                )
                return False

        return True

    return _filter

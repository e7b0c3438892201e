"""Sanity checks over the bundled device table."""

import logging
from unittest.mock import Mock, call

import pytest

from zigcatalog import exposes as e
from zigcatalog.const import LogicalType
from zigcatalog.converters import to_zigbee as tz
from zigcatalog.definitions.registry import build_registry
from zigcatalog.devices import DEFINITIONS
from zigcatalog.identity import DeviceIdentity, EndpointIdentity
from zigcatalog.ota import OtaProvider

from tests.conftest import XBEE_MANUFACTURER_ID, xbee_identity


@pytest.fixture(scope="module")
def registry():
    return build_registry()


def test_table_is_immutable():
    assert isinstance(DEFINITIONS, tuple)


def test_unique_models(registry):
    models = [definition.model for definition in registry]

    assert len(models) == len(set(models)) == len(DEFINITIONS)


def test_strict_build():
    registry = build_registry(config={"reject_duplicate_fingerprints": True})

    assert len(registry) == len(DEFINITIONS)


def test_every_definition_is_reachable(registry):
    for definition in registry:
        assert definition.zigbee_model or definition.fingerprint
        assert registry.get_by_model(definition.model) is definition


def test_zigbee_models_resolve(registry):
    for definition in registry:
        for zigbee_model in definition.zigbee_model:
            assert registry.lookup(DeviceIdentity(model=zigbee_model)) is definition


def test_fingerprints_resolve(registry):
    for definition in registry:
        for fingerprint in definition.fingerprint:
            if fingerprint.endpoints is not None or fingerprint.model is None:
                continue
            identity = DeviceIdentity(
                model=fingerprint.model, manufacturer=fingerprint.manufacturer
            )
            assert registry.lookup(identity) is definition


def test_exactly_one_linkquality(registry):
    for definition in registry:
        if definition.exposes is None:
            continue
        assert sum(e.is_linkquality(expose) for expose in definition.exposes) == 1


def test_universal_to_zigbee(registry):
    for definition in registry:
        if not definition.to_zigbee:
            continue
        for converter in tz.UNIVERSAL:
            assert definition.to_zigbee.count(converter) == 1


def test_configure_has_version(registry):
    for definition in registry:
        if definition.configure is not None:
            assert isinstance(definition.config_version, int)


def test_xbee(registry):
    definition = registry.lookup(xbee_identity())

    assert definition.model == "XBee"
    assert definition.vendor == "Digi"
    assert definition.exposes == (e.linkquality(),)
    assert definition.to_zigbee == ()


def test_xbee_with_clusters(registry):
    identity = xbee_identity(
        {230: EndpointIdentity(profile_id=49413, device_type=1, input_clusters={0x11})}
    )

    assert registry.lookup(identity) is None

    subset = build_registry(config={"cluster_match": "subset"})
    assert subset.lookup(identity).model == "XBee"


def test_xbee_requires_router():
    identity = DeviceIdentity(
        manufacturer_id=XBEE_MANUFACTURER_ID,
        logical_type=LogicalType.END_DEVICE,
        endpoints=xbee_identity().endpoints,
    )

    assert build_registry().lookup(identity) is None


def test_neo_zigbee_model_and_fingerprint(registry):
    by_model = registry.lookup(DeviceIdentity(model="0yu2xgi"))
    by_fingerprint = registry.lookup(
        DeviceIdentity(model="TS0601", manufacturer="_TZE200_d0yu2xgi")
    )

    assert by_model is by_fingerprint
    assert by_model.model == "NAS-AB02B0"


def test_lidl_manufacturer_only_fingerprint(registry):
    identity = DeviceIdentity(model="TS0121", manufacturer="_TZ3000_kdi2o9m6")

    assert registry.lookup(identity).model == "HG06337"


def test_unknown_tuya_device(registry, caplog):
    identity = DeviceIdentity(model="TS011F", manufacturer="_TZ3000_unknown")

    with caplog.at_level(logging.WARNING):
        assert registry.lookup(identity) is None

    assert not caplog.records


def test_white_label(registry):
    assert registry.get_by_model("PSM-S1").model == "PSM-29ZBSR"
    assert registry.get_by_model("SR-ZG2835").model == "ROB_200-018-0"


def test_multi_endpoint_names(registry):
    definition = registry.get_by_model("HG06338")

    assert definition.multi_endpoint
    assert definition.endpoint_names(Mock()) == {"l1": 1, "l2": 2, "l3": 3}
    assert registry.get_by_model("HG06337").endpoint_names(Mock()) == {}


def test_meta(registry):
    rgbw = registry.get_by_model("RB 250 C")
    assert rgbw.meta == {
        "supports_hue_and_saturation": True,
        "apply_red_fix": True,
        "turns_off_at_brightness1": True,
        "enhanced_hue": False,
    }

    remote = registry.get_by_model("ROB_200-007-0")
    assert remote.meta["battery"]["dont_divide_percentage"] is True


def test_ota(registry):
    assert registry.get_by_model("HSE2905E").ota is OtaProvider.ZIGBEE_OTA


def test_find_to_zigbee(registry):
    definition = registry.get_by_model("45853GE")

    assert definition.find_to_zigbee("state") is tz.on_off
    assert definition.find_to_zigbee("transition") is tz.ignore_transition
    assert definition.find_to_zigbee("color") is None


async def test_configure_plug(registry, device, endpoint, coordinator_endpoint):
    definition = registry.get_by_model("PSM-S1")

    await definition.configure(device, coordinator_endpoint, logging.getLogger())

    device.get_endpoint.assert_called_once_with(1)
    assert endpoint.bind.await_args_list == [
        call("genOnOff", coordinator_endpoint),
        call("seMetering", coordinator_endpoint),
    ]
    assert endpoint.configure_reporting.await_args_list == [
        call("genOnOff", {"onOff": (0, 3600, 0)}),
        call("seMetering", {"instantaneousDemand": (10, 3600, 2)}),
    ]
    endpoint.read.assert_awaited_once_with("seMetering", ["multiplier", "divisor"])


async def test_configure_endpoint_fallback(
    registry, device, endpoint, coordinator_endpoint
):
    device.get_endpoint.side_effect = lambda endpoint_id: (
        endpoint if endpoint_id == 3 else None
    )
    definition = registry.get_by_model("ROB_200-003-0")

    await definition.configure(device, coordinator_endpoint, logging.getLogger())

    assert device.get_endpoint.call_args_list == [call(1), call(3)]
    endpoint.bind.assert_awaited_once_with("genOnOff", coordinator_endpoint)


async def test_configure_saves_attributes(
    registry, device, endpoint, coordinator_endpoint
):
    definition = registry.get_by_model("HG06106B")

    await definition.configure(device, coordinator_endpoint, logging.getLogger())

    endpoint.save_cluster_attribute_key_value.assert_called_once_with(
        "lightingColorCtrl", {"colorCapabilities": 29}
    )
    endpoint.bind.assert_not_awaited()

import logging
from unittest.mock import Mock

import pytest

from zigcatalog.const import LogicalType
from zigcatalog.definitions import EndpointFingerprint, Fingerprint, fingerprint_matches
from zigcatalog.identity import DeviceIdentity, EndpointIdentity, normalize_model_id

from tests.conftest import XBEE_MANUFACTURER_ID, XBEE_PROFILE, xbee_identity

XBEE_FINGERPRINT = Fingerprint.from_dict(
    {
        "logical_type": "Router",
        "manufacturer_id": XBEE_MANUFACTURER_ID,
        "endpoints": {
            230: {
                "profile_id": XBEE_PROFILE,
                "device_type": 1,
                "input_clusters": [],
                "output_clusters": [],
            },
            232: {
                "profile_id": XBEE_PROFILE,
                "device_type": 1,
                "input_clusters": [],
                "output_clusters": [],
            },
        },
    }
)


@pytest.fixture(params=["exact", "subset"])
def cluster_match(request):
    return request.param


def test_xbee_matches(cluster_match):
    matches = fingerprint_matches(XBEE_FINGERPRINT, cluster_match=cluster_match)

    assert matches(xbee_identity())


def test_xbee_extra_clusters_exact():
    identity = DeviceIdentity(
        manufacturer_id=XBEE_MANUFACTURER_ID,
        logical_type=LogicalType.ROUTER,
        endpoints={
            230: EndpointIdentity(
                profile_id=XBEE_PROFILE, device_type=1, input_clusters=[0x0011]
            ),
            232: EndpointIdentity(profile_id=XBEE_PROFILE, device_type=1),
        },
    )

    assert not fingerprint_matches(XBEE_FINGERPRINT, cluster_match="exact")(identity)
    assert fingerprint_matches(XBEE_FINGERPRINT, cluster_match="subset")(identity)


def test_xbee_extra_endpoint(cluster_match):
    identity = xbee_identity(
        {1: EndpointIdentity(profile_id=0x0104, device_type=0x0100)}
    )

    assert fingerprint_matches(XBEE_FINGERPRINT, cluster_match=cluster_match)(
        identity
    )
    assert not fingerprint_matches(
        XBEE_FINGERPRINT, cluster_match=cluster_match, strict_endpoints=True
    )(identity)
    assert fingerprint_matches(
        XBEE_FINGERPRINT, cluster_match=cluster_match, strict_endpoints=True
    )(xbee_identity())


def test_xbee_missing_endpoint(cluster_match):
    identity = DeviceIdentity(
        manufacturer_id=XBEE_MANUFACTURER_ID,
        logical_type=LogicalType.ROUTER,
        endpoints={230: EndpointIdentity(profile_id=XBEE_PROFILE, device_type=1)},
    )

    assert not fingerprint_matches(XBEE_FINGERPRINT, cluster_match=cluster_match)(
        identity
    )


@pytest.mark.parametrize(
    "changes",
    [
        {"manufacturer_id": 0x1234},
        {"logical_type": LogicalType.END_DEVICE},
        {"logical_type": None},
    ],
)
def test_xbee_scalar_mismatch(changes, cluster_match):
    identity = DeviceIdentity(
        **{
            "manufacturer_id": XBEE_MANUFACTURER_ID,
            "logical_type": LogicalType.ROUTER,
            "endpoints": xbee_identity().endpoints,
            **changes,
        }
    )

    assert not fingerprint_matches(XBEE_FINGERPRINT, cluster_match=cluster_match)(
        identity
    )


@pytest.mark.parametrize(
    "endpoint",
    [
        EndpointIdentity(profile_id=0x0104, device_type=1),
        EndpointIdentity(profile_id=XBEE_PROFILE, device_type=2),
        EndpointIdentity(profile_id=XBEE_PROFILE, device_type=1, output_clusters=[6]),
    ],
)
def test_xbee_endpoint_mismatch(endpoint):
    identity = xbee_identity({232: endpoint})

    assert not fingerprint_matches(XBEE_FINGERPRINT, cluster_match="exact")(identity)


def test_subset_semantics_on_single_endpoint():
    fingerprint = Fingerprint(
        endpoints={1: EndpointFingerprint(input_clusters={0x0000, 0x0006})}
    )
    identity = DeviceIdentity(
        endpoints={
            1: EndpointIdentity(input_clusters={0x0000, 0x0003, 0x0006}),
            2: EndpointIdentity(input_clusters={0x0006}),
            3: EndpointIdentity(),
        }
    )

    assert fingerprint_matches(fingerprint, cluster_match="subset")(identity)
    assert not fingerprint_matches(fingerprint, cluster_match="exact")(identity)

    missing = DeviceIdentity(endpoints={1: EndpointIdentity(input_clusters={0x0006})})
    assert not fingerprint_matches(fingerprint, cluster_match="subset")(missing)


def test_unspecified_clusters_are_wildcards(cluster_match):
    fingerprint = Fingerprint(endpoints={1: EndpointFingerprint(profile_id=0x0104)})
    identity = DeviceIdentity(
        endpoints={
            1: EndpointIdentity(
                profile_id=0x0104, input_clusters={0, 6}, output_clusters={0x19}
            )
        }
    )

    assert fingerprint_matches(fingerprint, cluster_match=cluster_match)(identity)


def test_model_and_manufacturer():
    fingerprint = Fingerprint(model="TS011F", manufacturer="_TZ3000_o005nuxx")
    matches = fingerprint_matches(fingerprint)

    assert matches(DeviceIdentity(model="TS011F", manufacturer="_TZ3000_o005nuxx"))
    assert not matches(DeviceIdentity(model="TS011F", manufacturer="_TZ3000_other"))
    assert not matches(DeviceIdentity(model="TS0001", manufacturer="_TZ3000_o005nuxx"))
    assert not matches(DeviceIdentity())


def test_manufacturer_only_fingerprint():
    matches = fingerprint_matches(Fingerprint(manufacturer="_TZ3000_kdi2o9m6"))

    assert matches(DeviceIdentity(model="TS011F", manufacturer="_TZ3000_kdi2o9m6"))
    assert matches(DeviceIdentity(model=None, manufacturer="_TZ3000_kdi2o9m6"))


def test_unknown_cluster_match_policy():
    with pytest.raises(ValueError):
        fingerprint_matches(XBEE_FINGERPRINT, cluster_match="superset")


def test_mismatch_is_logged(caplog):
    fingerprint_matches(Fingerprint(model="TS011F"))(DeviceIdentity(model="TS0001"))

    assert "device model mismatch" in caplog.text


@pytest.mark.parametrize(
    "reported, expected",
    [
        ("TS011F", "TS011F"),
        ("TS011F\x00\x00\x00", "TS011F"),
        ("  lumi.plug  ", "lumi.plug"),
        ("Meter Reader\x00garbage", "Meter Reader"),
        (None, None),
    ],
)
def test_normalize_model_id(reported, expected):
    assert normalize_model_id(reported) == expected
    assert DeviceIdentity(model=reported).model == expected


def test_identity_drops_zdo_endpoint():
    identity = DeviceIdentity(
        endpoints={0: {"profile_id": 0}, 1: {"profile_id": 0x0104}}
    )

    assert set(identity.endpoints) == {1}
    assert identity.endpoints[1] == EndpointIdentity(profile_id=0x0104)


def _zigpy_endpoint(profile_id, device_type, in_clusters, out_clusters):
    endpoint = Mock()
    endpoint.profile_id = profile_id
    endpoint.device_type = device_type
    endpoint.in_clusters = {cluster_id: Mock() for cluster_id in in_clusters}
    endpoint.out_clusters = {cluster_id: Mock() for cluster_id in out_clusters}
    return endpoint


def test_identity_from_device():
    device = Mock()
    device.model = "TS011F\x00"
    device.manufacturer = "_TZ3000_o005nuxx"
    device.node_desc.manufacturer_code = 0x1002
    device.node_desc.logical_type = Mock()
    device.node_desc.logical_type.name = "Router"
    device.endpoints = {
        0: Mock(),
        1: _zigpy_endpoint(0x0104, 0x0051, [0x0000, 0x0006], [0x0019]),
    }

    identity = DeviceIdentity.from_device(device)

    assert identity == DeviceIdentity(
        model="TS011F",
        manufacturer="_TZ3000_o005nuxx",
        manufacturer_id=0x1002,
        logical_type=LogicalType.ROUTER,
        endpoints={
            1: EndpointIdentity(
                profile_id=0x0104,
                device_type=0x0051,
                input_clusters={0x0000, 0x0006},
                output_clusters={0x0019},
            )
        },
    )


@pytest.mark.parametrize(
    "name, logical_type",
    [
        ("Coordinator", LogicalType.COORDINATOR),
        ("Router", LogicalType.ROUTER),
        ("EndDevice", LogicalType.END_DEVICE),
    ],
)
def test_identity_from_device_logical_type(name, logical_type):
    device = Mock()
    device.model = None
    device.manufacturer = None
    device.node_desc.manufacturer_code = None
    device.node_desc.logical_type.name = name
    device.endpoints = {}

    assert DeviceIdentity.from_device(device).logical_type is logical_type


def test_identity_from_device_reserved_logical_type(caplog):
    device = Mock()
    device.model = "TS011F"
    device.manufacturer = "_TZ3000_kdi2o9m6"
    device.node_desc.manufacturer_code = 4098
    device.node_desc.logical_type.name = "undefined_0x03"
    device.endpoints = {}

    with caplog.at_level(logging.DEBUG):
        identity = DeviceIdentity.from_device(device)

    assert identity.logical_type is None
    assert identity.manufacturer_id == 4098
    assert "undefined_0x03" in caplog.text


def test_identity_from_device_without_node_descriptor():
    device = Mock()
    device.model = "Meter Reader"
    device.manufacturer = "Datek"
    device.node_desc = None
    device.endpoints = {}

    identity = DeviceIdentity.from_device(device)

    assert identity.manufacturer_id is None
    assert identity.logical_type is None

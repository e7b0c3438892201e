import logging

import pytest
import voluptuous as vol

from zigcatalog import presets
from zigcatalog.definitions.normalize import resolve_definitions
from zigcatalog.definitions.registry import DefinitionRegistry, build_registry
from zigcatalog.exceptions import (
    AmbiguousConfigureError,
    DefinitionError,
    DuplicateFingerprintError,
    DuplicateModelError,
)
from zigcatalog.identity import DeviceIdentity, EndpointIdentity

from tests.conftest import make_raw, make_switch

ON_OFF_ENDPOINT = {
    "profile_id": 0x0104,
    "device_type": 0x0100,
    "input_clusters": [0x0000, 0x0006],
    "output_clusters": [],
}


async def _configure(device, coordinator_endpoint, logger):
    pass


@pytest.fixture
def table():
    return [
        make_switch("legacy", zigbee_model=["legacy", "TS011F"]),
        make_switch(
            "by_endpoints",
            zigbee_model=[],
            fingerprint=[{"endpoints": {1: ON_OFF_ENDPOINT}}],
        ),
        make_switch(
            "by_manufacturer",
            zigbee_model=[],
            fingerprint=[
                {"model": "TS0001", "manufacturer": "_TZ3000_first"},
                {"model": "TS0001", "manufacturer": "_TZ3000_second"},
            ],
            white_label=[{"vendor": "Rebrand", "model": "RB-1"}],
        ),
        make_switch(
            "wildcard",
            zigbee_model=[],
            fingerprint=[{"manufacturer": "_TZ3000_second"}],
        ),
    ]


@pytest.fixture
def registry(table):
    return build_registry(table)


def _on_off_identity(model=None, manufacturer=None):
    return DeviceIdentity(
        model=model,
        manufacturer=manufacturer,
        endpoints={
            1: EndpointIdentity(
                profile_id=0x0104, device_type=0x0100, input_clusters={0x0000, 0x0006}
            )
        },
    )


def test_zigbee_model_lookup(registry):
    assert registry.lookup(DeviceIdentity(model="legacy")).model == "legacy"
    assert registry.lookup(DeviceIdentity(model="TS011F")).model == "legacy"


def test_zigbee_model_lookup_with_padding(registry):
    identity = DeviceIdentity(model="TS011F\x00\x00 ")

    assert registry.lookup(identity).model == "legacy"


def test_zigbee_model_precedes_fingerprint(registry):
    identity = _on_off_identity(model="TS011F")

    assert registry.lookup(identity).model == "legacy"
    assert registry.lookup(_on_off_identity(model="unknown")).model == "by_endpoints"


def test_fingerprint_lookup(registry):
    identity = DeviceIdentity(model="TS0001", manufacturer="_TZ3000_first")

    assert registry.lookup(identity).model == "by_manufacturer"


def test_no_match(registry):
    assert registry.lookup(DeviceIdentity(model="nope", manufacturer="nobody")) is None
    assert registry.lookup(DeviceIdentity()) is None


def test_lookup_rejects_other_types(registry):
    with pytest.raises(TypeError):
        registry.lookup({"model": "TS011F"})


def test_multiple_matches_first_wins(registry, caplog):
    identity = DeviceIdentity(model="TS0001", manufacturer="_TZ3000_second")

    with caplog.at_level(logging.WARNING):
        definition = registry.lookup(identity)

    assert definition.model == "by_manufacturer"
    assert "Multiple definitions match" in caplog.text
    assert "wildcard" in caplog.text


def test_authoring_order_across_buckets():
    registry = build_registry(
        [
            make_switch(
                "wildcard_first",
                zigbee_model=[],
                fingerprint=[{"manufacturer": "_TZ3000_abc"}],
            ),
            make_switch(
                "model_second",
                zigbee_model=[],
                fingerprint=[{"model": "TS011F", "manufacturer": "_TZ3000_abc"}],
            ),
        ]
    )

    identity = DeviceIdentity(model="TS011F", manufacturer="_TZ3000_abc")
    assert registry.lookup(identity).model == "wildcard_first"


def test_single_definition_matching_twice_is_not_ambiguous(caplog):
    registry = build_registry(
        [
            make_switch(
                "twice",
                zigbee_model=[],
                fingerprint=[
                    {"manufacturer": "_TZ3000_abc"},
                    {"model": "TS011F", "manufacturer": "_TZ3000_abc"},
                ],
            )
        ]
    )

    identity = DeviceIdentity(model="TS011F", manufacturer="_TZ3000_abc")
    assert registry.lookup(identity).model == "twice"
    assert "Multiple definitions match" not in caplog.text


def test_duplicate_zigbee_model_first_wins(caplog):
    registry = build_registry(
        [
            make_switch("first", zigbee_model=["shared"]),
            make_switch("second", zigbee_model=["shared"]),
        ]
    )

    assert registry.lookup(DeviceIdentity(model="shared")).model == "first"
    assert "is already claimed by 'first'" in caplog.text


def test_get_by_model(registry):
    assert registry.get_by_model("by_endpoints").model == "by_endpoints"
    assert registry.get_by_model("RB-1").model == "by_manufacturer"
    assert registry.get_by_model("TS011F") is None
    assert registry.get_by_model("missing") is None


def test_get_by_model_without_white_labels(table):
    registry = build_registry(table, {"index_white_labels": False})

    assert registry.get_by_model("RB-1") is None


def test_white_label_shadowing_model(caplog):
    registry = build_registry(
        [
            make_switch("base", white_label=[{"vendor": "Other", "model": "real"}]),
            make_switch("real"),
        ]
    )

    assert registry.get_by_model("real").model == "real"
    assert "shadows a definition model" in caplog.text


def test_collection_protocol(registry, table):
    assert len(registry) == len(table)
    assert [definition.model for definition in registry] == [
        raw["model"] for raw in table
    ]
    assert "wildcard" in registry
    assert "RB-1" not in registry
    assert registry.definitions == tuple(registry)


def test_build_failure_aborts(table):
    table.append(make_switch("legacy"))

    with pytest.raises(DuplicateModelError):
        build_registry(table)


def test_empty_endpoint_fingerprint_rejected(table):
    table.append(
        make_raw("catchall", zigbee_model=[], fingerprint=[{"endpoints": {}}])
    )

    with pytest.raises(DefinitionError, match="catchall"):
        build_registry(table)


def test_build_ambiguous_configure_aborts():
    raw = make_raw(
        "ambiguous",
        extend={**presets.switch(), "configure": _configure},
        configure=_configure,
        meta={"configure_key": 1},
    )

    with pytest.raises(AmbiguousConfigureError):
        build_registry([raw])


def test_build_duplicate_fingerprints(table):
    table.append(
        make_switch(
            "copycat",
            zigbee_model=[],
            fingerprint=[{"endpoints": {1: ON_OFF_ENDPOINT}}],
        )
    )

    assert len(build_registry(table)) == 5

    with pytest.raises(DuplicateFingerprintError):
        build_registry(table, {"reject_duplicate_fingerprints": True})


def test_subset_cluster_match(table):
    identity = DeviceIdentity(
        model="unknown",
        endpoints={
            1: EndpointIdentity(
                profile_id=0x0104,
                device_type=0x0100,
                input_clusters={0x0000, 0x0003, 0x0006},
            )
        },
    )

    assert build_registry(table).lookup(identity) is None

    registry = build_registry(table, {"cluster_match": "subset"})
    assert registry.lookup(identity).model == "by_endpoints"


def test_strict_endpoints(table):
    identity = DeviceIdentity(
        endpoints={
            **_on_off_identity().endpoints,
            242: EndpointIdentity(profile_id=0xA1E0, device_type=0x0061),
        }
    )

    assert build_registry(table).lookup(identity).model == "by_endpoints"
    assert build_registry(table, {"strict_endpoints": "on"}).lookup(identity) is None


def test_config_defaults(registry):
    assert registry.config == {
        "cluster_match": "exact",
        "strict_endpoints": False,
        "reject_duplicate_fingerprints": False,
        "index_white_labels": True,
    }


def test_invalid_config(table):
    with pytest.raises(vol.Invalid):
        build_registry(table, {"cluster_match": "superset"})

    with pytest.raises(vol.Invalid):
        build_registry(table, {"unknown_option": True})


def test_registry_from_resolved_definitions(table):
    registry = DefinitionRegistry(resolve_definitions(table))

    assert len(registry) == len(table)
    assert registry.lookup(DeviceIdentity(model="TS011F")).model == "legacy"

"""Common fixtures."""
from __future__ import annotations

import logging
from unittest.mock import AsyncMock, MagicMock, Mock

import pytest

from zigcatalog import presets
from zigcatalog.identity import DeviceIdentity, EndpointIdentity

XBEE_MANUFACTURER_ID = 4126
XBEE_PROFILE = 49413


class FailOnBadFormattingHandler(logging.Handler):
    def emit(self, record):
        try:
            record.msg % record.args
        except Exception as e:
            pytest.fail(
                f"Failed to format log message {record.msg!r} with {record.args!r}: {e}"
            )


@pytest.fixture(autouse=True)
def raise_on_bad_log_formatting():
    handler = FailOnBadFormattingHandler()

    root = logging.getLogger()
    root.addHandler(handler)
    root.setLevel(logging.DEBUG)

    try:
        yield
    finally:
        root.removeHandler(handler)


def make_raw(model, **kwargs):
    """Build a minimal valid raw definition."""
    raw = {
        "zigbee_model": [model],
        "model": model,
        "vendor": "Test",
        "description": f"Test device {model}",
    }
    raw.update(kwargs)
    return raw


def make_switch(model, **kwargs):
    return make_raw(model, extend=presets.switch(), **kwargs)


def xbee_identity(extra_endpoints=None) -> DeviceIdentity:
    endpoints = {
        230: EndpointIdentity(profile_id=XBEE_PROFILE, device_type=1),
        232: EndpointIdentity(profile_id=XBEE_PROFILE, device_type=1),
    }
    endpoints.update(extra_endpoints or {})

    return DeviceIdentity(
        model=None,
        manufacturer="Digi",
        manufacturer_id=XBEE_MANUFACTURER_ID,
        logical_type="Router",
        endpoints=endpoints,
    )


@pytest.fixture
def endpoint():
    ep = MagicMock()
    ep.bind = AsyncMock()
    ep.configure_reporting = AsyncMock()
    ep.read = AsyncMock()
    ep.save_cluster_attribute_key_value = Mock()
    return ep


@pytest.fixture
def coordinator_endpoint():
    return Mock(name="coordinator_endpoint")


@pytest.fixture
def device(endpoint):
    dev = Mock()
    dev.get_endpoint = Mock(return_value=endpoint)
    return dev

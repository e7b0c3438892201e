"""Typing helpers for zigcatalog."""

from __future__ import annotations

import logging
from typing import Any, Awaitable, Callable, Mapping

# Handles owned by the external Zigbee runtime. They are never inspected here,
# only handed to the callables carried by a definition.
DeviceHandle = Any
EndpointHandle = Any

ConfigureCallable = Callable[
    [DeviceHandle, EndpointHandle, logging.Logger], Awaitable[None]
]
EndpointMapCallable = Callable[[DeviceHandle], Mapping[str, int]]
OnEventCallable = Callable[[str, Mapping[str, Any], DeviceHandle], Awaitable[None]]

RawDefinition = dict[str, Any]
ConfigType = dict[str, Any]

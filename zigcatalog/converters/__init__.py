"""Converter references.

Converters translate between Zigbee messages and capability values. Their
implementation belongs to the runtime; definitions only carry references to
them, which are stored and forwarded but never invoked here.
"""

from __future__ import annotations

import attrs


def _as_tuple(value: str | tuple[str, ...] | list[str]) -> tuple[str, ...]:
    if isinstance(value, str):
        return (value,)
    return tuple(value)


@attrs.define(frozen=True, kw_only=True, repr=True)
class FromZigbeeConverter:
    """Reference to a converter applied to inbound messages of a cluster."""

    key: str = attrs.field()
    cluster: str = attrs.field()
    types: tuple[str, ...] = attrs.field(
        default=("attributeReport", "readResponse"), converter=_as_tuple
    )


@attrs.define(frozen=True, kw_only=True, repr=True)
class ToZigbeeConverter:
    """Reference to a converter handling writes/commands for capability keys."""

    key: str = attrs.field()
    keys: tuple[str, ...] = attrs.field(converter=_as_tuple)

    def handles(self, key: str) -> bool:
        return key in self.keys

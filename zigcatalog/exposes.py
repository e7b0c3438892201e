"""Capability descriptors ("exposes") published for a device."""

from __future__ import annotations

import enum
import typing

import attrs

from zigcatalog.const import LINKQUALITY


class Access(enum.IntFlag):
    """How a capability can be accessed.

    STATE: published by the device (read-only)
    SET: can be written (write-only)
    GET: can be actively read
    """

    STATE = 0b001
    SET = 0b010
    GET = 0b100
    STATE_SET = STATE | SET
    STATE_GET = STATE | GET
    ALL = STATE | SET | GET


@attrs.define(frozen=True, kw_only=True, repr=True)
class Expose:
    """A single capability of a device."""

    type: str = attrs.field()
    name: str | None = attrs.field(default=None)
    property: str | None = attrs.field(
        default=attrs.Factory(lambda self: self.name, takes_self=True)
    )
    access: Access = attrs.field(default=Access.STATE, converter=Access)
    endpoint: str | None = attrs.field(default=None)
    description: str | None = attrs.field(default=None)

    def with_endpoint(self, endpoint: str) -> Expose:
        """Return a copy bound to a named endpoint."""
        changes: dict[str, typing.Any] = {"endpoint": endpoint}
        if self.property is not None:
            changes["property"] = f"{self.property}_{endpoint}"
        return attrs.evolve(self, **changes)

    def with_access(self, access: Access) -> Expose:
        return attrs.evolve(self, access=access)

    def with_description(self, description: str) -> Expose:
        return attrs.evolve(self, description=description)


@attrs.define(frozen=True, kw_only=True, repr=True)
class Binary(Expose):
    type: str = attrs.field(default="binary")
    value_on: typing.Any = attrs.field(default=True)
    value_off: typing.Any = attrs.field(default=False)
    value_toggle: typing.Any = attrs.field(default=None)


@attrs.define(frozen=True, kw_only=True, repr=True)
class Numeric(Expose):
    type: str = attrs.field(default="numeric")
    unit: str | None = attrs.field(default=None)
    value_min: float | None = attrs.field(default=None)
    value_max: float | None = attrs.field(default=None)
    value_step: float | None = attrs.field(default=None)

    def with_unit(self, unit: str) -> Numeric:
        return attrs.evolve(self, unit=unit)

    def with_value_range(self, value_min: float, value_max: float) -> Numeric:
        if value_min > value_max:
            raise ValueError(f"Invalid range for {self.name}: {value_min} > {value_max}")
        return attrs.evolve(self, value_min=value_min, value_max=value_max)


@attrs.define(frozen=True, kw_only=True, repr=True)
class Enum(Expose):
    type: str = attrs.field(default="enum")
    values: tuple[str, ...] = attrs.field(factory=tuple, converter=tuple)


@attrs.define(frozen=True, kw_only=True, repr=True)
class Composite(Expose):
    """Capability grouping several features, e.g. a light or a switch."""

    type: str = attrs.field(default="composite")
    features: tuple[Expose, ...] = attrs.field(factory=tuple, converter=tuple)

    def with_endpoint(self, endpoint: str) -> Composite:
        composite = super().with_endpoint(endpoint)
        return attrs.evolve(
            composite,
            features=tuple(f.with_endpoint(endpoint) for f in self.features),
        )

    def feature(self, name: str) -> Expose:
        """Return the feature with the given name."""
        for feature in self.features:
            if feature.name == name:
                return feature
        raise KeyError(name)

    def evolve_feature(self, name: str, **changes: typing.Any) -> Composite:
        """Return a copy with one feature replaced by an evolved copy of it."""
        self.feature(name)
        return attrs.evolve(
            self,
            features=tuple(
                attrs.evolve(f, **changes) if f.name == name else f
                for f in self.features
            ),
        )

    def set_access(self, name: str, access: Access) -> Composite:
        return self.evolve_feature(name, access=access)


def is_linkquality(expose: Expose) -> bool:
    return expose.name == LINKQUALITY and expose.endpoint is None


# Presets


def switch() -> Composite:
    return Composite(
        type="switch",
        features=(
            Binary(
                name="state",
                access=Access.ALL,
                value_on="ON",
                value_off="OFF",
                value_toggle="TOGGLE",
                description="On/off state of the switch",
            ),
        ),
    )


def _light_state() -> Binary:
    return Binary(
        name="state",
        access=Access.ALL,
        value_on="ON",
        value_off="OFF",
        value_toggle="TOGGLE",
        description="On/off state of this light",
    )


def _brightness() -> Numeric:
    return Numeric(
        name="brightness",
        access=Access.ALL,
        value_min=0,
        value_max=254,
        description="Brightness of this light",
    )


def _color_temp(color_temp_range: tuple[int, int] | None = None) -> Numeric:
    value_min, value_max = color_temp_range or (150, 500)
    return Numeric(
        name="color_temp",
        access=Access.ALL,
        unit="mired",
        value_min=value_min,
        value_max=value_max,
        description="Color temperature of this light",
    )


def _color_xy() -> Composite:
    return Composite(
        name="color_xy",
        property="color",
        access=Access.ALL,
        features=(
            Numeric(name="x", access=Access.ALL),
            Numeric(name="y", access=Access.ALL),
        ),
        description="Color of this light in the CIE 1931 color space (x/y)",
    )


def _color_hs() -> Composite:
    return Composite(
        name="color_hs",
        property="color",
        access=Access.ALL,
        features=(
            Numeric(name="hue", access=Access.ALL),
            Numeric(name="saturation", access=Access.ALL),
        ),
        description="Color of this light expressed as hue/saturation",
    )


def light_brightness() -> Composite:
    return Composite(type="light", features=(_light_state(), _brightness()))


def light_brightness_colortemp(
    color_temp_range: tuple[int, int] | None = None,
) -> Composite:
    return Composite(
        type="light",
        features=(_light_state(), _brightness(), _color_temp(color_temp_range)),
    )


def light_brightness_colorxy() -> Composite:
    return Composite(type="light", features=(_light_state(), _brightness(), _color_xy()))


def light_brightness_colorhs() -> Composite:
    return Composite(type="light", features=(_light_state(), _brightness(), _color_hs()))


def light_brightness_colortemp_colorxy(
    color_temp_range: tuple[int, int] | None = None,
) -> Composite:
    return Composite(
        type="light",
        features=(
            _light_state(),
            _brightness(),
            _color_temp(color_temp_range),
            _color_xy(),
        ),
    )


def light_brightness_colortemp_colorhs(
    color_temp_range: tuple[int, int] | None = None,
) -> Composite:
    return Composite(
        type="light",
        features=(
            _light_state(),
            _brightness(),
            _color_temp(color_temp_range),
            _color_xy(),
            _color_hs(),
        ),
    )


def cover_position() -> Composite:
    return Composite(
        type="cover",
        features=(
            Enum(name="state", access=Access.STATE_SET, values=("OPEN", "CLOSE", "STOP")),
            Numeric(
                name="position",
                access=Access.ALL,
                unit="%",
                value_min=0,
                value_max=100,
                description="Position of this cover",
            ),
        ),
    )


def action(values: typing.Iterable[str]) -> Enum:
    return Enum(
        name="action",
        access=Access.STATE,
        values=tuple(values),
        description="Triggered action (e.g. a button click)",
    )


def battery() -> Numeric:
    return Numeric(
        name="battery",
        access=Access.STATE,
        unit="%",
        value_min=0,
        value_max=100,
        description="Remaining battery in %",
    )


def battery_low() -> Binary:
    return Binary(
        name="battery_low",
        access=Access.STATE,
        description="Indicates if the battery of this device is almost empty",
    )


def tamper() -> Binary:
    return Binary(
        name="tamper",
        access=Access.STATE,
        description="Indicates whether the device is tampered",
    )


def occupancy() -> Binary:
    return Binary(
        name="occupancy",
        access=Access.STATE,
        description="Indicates whether the device detected occupancy",
    )


def contact() -> Binary:
    return Binary(
        name="contact",
        access=Access.STATE,
        value_on=False,
        value_off=True,
        description="Indicates if the contact is closed (= true) or open (= false)",
    )


def power() -> Numeric:
    return Numeric(
        name="power",
        access=Access.STATE_GET,
        unit="W",
        description="Instantaneous measured power",
    )


def energy() -> Numeric:
    return Numeric(
        name="energy",
        access=Access.STATE_GET,
        unit="kWh",
        description="Sum of consumed energy",
    )


def current() -> Numeric:
    return Numeric(
        name="current",
        access=Access.STATE_GET,
        unit="A",
        description="Instantaneous measured electrical current",
    )


def voltage() -> Numeric:
    return Numeric(
        name="voltage",
        access=Access.STATE_GET,
        unit="V",
        description="Measured electrical potential value",
    )


def temperature() -> Numeric:
    return Numeric(
        name="temperature",
        access=Access.STATE,
        unit="°C",
        description="Measured temperature value",
    )


def humidity() -> Numeric:
    return Numeric(
        name="humidity",
        access=Access.STATE,
        unit="%",
        description="Measured relative humidity",
    )


def illuminance() -> Numeric:
    return Numeric(
        name="illuminance",
        access=Access.STATE,
        description="Raw measured illuminance",
    )


def illuminance_lux() -> Numeric:
    return Numeric(
        name="illuminance_lux",
        access=Access.STATE,
        unit="lx",
        description="Measured illuminance in lux",
    )


def linkquality() -> Numeric:
    return Numeric(
        name=LINKQUALITY,
        access=Access.STATE,
        unit="lqi",
        value_min=0,
        value_max=255,
        description="Link quality (signal strength)",
    )

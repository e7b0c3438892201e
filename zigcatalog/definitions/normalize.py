"""Resolution of authored definitions into self-contained definitions."""

from __future__ import annotations

import logging
import typing

import voluptuous as vol

from zigcatalog import exposes as e
from zigcatalog.config.validators import cv_fingerprint, cv_white_label
from zigcatalog.const import (
    DEF_CONFIGURE,
    DEF_DESCRIPTION,
    DEF_ENDPOINT,
    DEF_EXPOSES,
    DEF_EXTEND,
    DEF_FINGERPRINT,
    DEF_FROM_ZIGBEE,
    DEF_META,
    DEF_MODEL,
    DEF_ON_EVENT,
    DEF_OTA,
    DEF_TO_ZIGBEE,
    DEF_VENDOR,
    DEF_WHITE_LABEL,
    DEF_ZIGBEE_MODEL,
    META_APPLY_RED_FIX,
    META_BATTERY,
    META_BATTERY_DONT_DIVIDE_PERCENTAGE,
    META_BATTERY_VOLTAGE_TO_PERCENTAGE,
    META_CONFIGURE_KEY,
    META_COVER_INVERTED,
    META_DISABLE_ACTION_GROUP,
    META_DISABLE_DEFAULT_RESPONSE,
    META_ENHANCED_HUE,
    META_MULTI_ENDPOINT,
    META_PIN_CODE_COUNT,
    META_SUPPORTS_HUE_AND_SATURATION,
    META_TIMEOUT,
    META_TURNS_OFF_AT_BRIGHTNESS1,
)
from zigcatalog.converters import FromZigbeeConverter, ToZigbeeConverter, to_zigbee
from zigcatalog.definitions import Definition, Fingerprint, WhiteLabel
from zigcatalog.exceptions import (
    AmbiguousConfigureError,
    DefinitionError,
    DuplicateFingerprintError,
    DuplicateModelError,
)
from zigcatalog.ota import OtaProvider
from zigcatalog.typing import RawDefinition

_LOGGER = logging.getLogger(__name__)


def cv_sequence(value: typing.Any) -> list:
    """Accept any list or tuple, returning a list."""
    if not isinstance(value, (list, tuple)):
        raise vol.Invalid(f"expected a list, got {type(value).__name__}")
    return list(value)


def cv_mapping(value: typing.Any) -> dict:
    """Accept any mapping, returning a plain dict."""
    if not isinstance(value, typing.Mapping):
        raise vol.Invalid(f"expected a mapping, got {type(value).__name__}")
    return dict(value)


def cv_callable(value: typing.Any) -> typing.Callable:
    if not callable(value):
        raise vol.Invalid(f"{value!r} is not callable")
    return value


def cv_int(value: typing.Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise vol.Invalid(f"expected an integer, got {value!r}")
    return value


SCHEMA_BATTERY_META = vol.All(
    cv_mapping,
    vol.Schema(
        {
            vol.Optional(META_BATTERY_DONT_DIVIDE_PERCENTAGE): bool,
            vol.Optional(META_BATTERY_VOLTAGE_TO_PERCENTAGE): str,
        }
    ),
)

SCHEMA_META = vol.All(
    cv_mapping,
    vol.Schema(
        {
            vol.Optional(META_CONFIGURE_KEY): cv_int,
            vol.Optional(META_MULTI_ENDPOINT): bool,
            vol.Optional(META_DISABLE_DEFAULT_RESPONSE): bool,
            vol.Optional(META_APPLY_RED_FIX): bool,
            vol.Optional(META_ENHANCED_HUE): bool,
            vol.Optional(META_SUPPORTS_HUE_AND_SATURATION): bool,
            vol.Optional(META_TIMEOUT): vol.All(cv_int, vol.Range(min=0)),
            vol.Optional(META_COVER_INVERTED): bool,
            vol.Optional(META_TURNS_OFF_AT_BRIGHTNESS1): bool,
            vol.Optional(META_PIN_CODE_COUNT): vol.All(cv_int, vol.Range(min=0)),
            vol.Optional(META_DISABLE_ACTION_GROUP): bool,
            vol.Optional(META_BATTERY): SCHEMA_BATTERY_META,
        },
        extra=vol.ALLOW_EXTRA,
    ),
)

_FIELDS = {
    DEF_MODEL: str,
    DEF_VENDOR: str,
    DEF_DESCRIPTION: str,
    DEF_ZIGBEE_MODEL: vol.All(cv_sequence, [str]),
    DEF_FINGERPRINT: vol.All(cv_sequence, [vol.Any(Fingerprint, cv_fingerprint)]),
    DEF_EXPOSES: vol.Any(None, vol.All(cv_sequence, [e.Expose])),
    DEF_FROM_ZIGBEE: vol.All(cv_sequence, [FromZigbeeConverter]),
    DEF_TO_ZIGBEE: vol.All(cv_sequence, [ToZigbeeConverter]),
    DEF_CONFIGURE: vol.Any(None, cv_callable),
    DEF_META: SCHEMA_META,
    DEF_ENDPOINT: vol.Any(None, cv_callable),
    DEF_OTA: vol.Any(None, vol.Coerce(OtaProvider)),
    DEF_ON_EVENT: vol.Any(None, cv_callable),
    DEF_WHITE_LABEL: vol.All(cv_sequence, [vol.Any(WhiteLabel, cv_white_label)]),
}

_REQUIRED = (DEF_MODEL, DEF_VENDOR, DEF_DESCRIPTION)

SCHEMA_TEMPLATE = vol.Schema(
    {
        vol.Optional(key): validator
        for key, validator in _FIELDS.items()
        if key not in _REQUIRED
    }
)

SCHEMA_DEFINITION = vol.Schema(
    {
        **{
            (vol.Required(key) if key in _REQUIRED else vol.Optional(key)): validator
            for key, validator in _FIELDS.items()
        },
        vol.Optional(DEF_EXTEND): vol.All(cv_mapping, SCHEMA_TEMPLATE),
    }
)


def _defines(layer: RawDefinition, key: str) -> bool:
    return layer.get(key) is not None


def _merge(template: RawDefinition, own: RawDefinition, model: str) -> RawDefinition:
    """Merge a template with the definition's own fields.

    Own fields shallow-override template fields, `meta` is merged one level deep.
    """
    if _defines(template, DEF_CONFIGURE) and _defines(own, DEF_CONFIGURE):
        raise AmbiguousConfigureError(
            f"'{model}' has configure in extend and device, this is not allowed",
            model=model,
        )

    merged = {**template, **own}

    if DEF_META in template or DEF_META in own:
        merged[DEF_META] = {**template.get(DEF_META, {}), **own.get(DEF_META, {})}

    return merged


def _validate(raw: RawDefinition) -> RawDefinition:
    model = raw.get(DEF_MODEL) if isinstance(raw, typing.Mapping) else None

    try:
        return SCHEMA_DEFINITION(cv_mapping(raw))
    except vol.Invalid as exc:
        raise DefinitionError(
            f"Invalid definition '{model}': {exc}", model=model
        ) from exc


def resolve_definition(raw: RawDefinition) -> Definition:
    """Resolve an authored definition into a self-contained one.

    The template referenced by `extend` is merged in, universal outbound
    converters and the link quality capability are appended and the result is
    validated. `raw` is left untouched.
    """
    definition = _validate(raw)
    model = definition[DEF_MODEL]

    template = definition.pop(DEF_EXTEND, None)
    if template is not None:
        definition = _merge(template, definition, model)

    if not definition.get(DEF_ZIGBEE_MODEL) and not definition.get(DEF_FINGERPRINT):
        raise DefinitionError(
            f"'{model}' has neither a zigbee_model nor a fingerprint", model=model
        )

    to_zigbee_converters = list(definition.get(DEF_TO_ZIGBEE, ()))
    if to_zigbee_converters:
        to_zigbee_converters += [
            converter
            for converter in to_zigbee.UNIVERSAL
            if converter not in to_zigbee_converters
        ]

    exposes = definition.get(DEF_EXPOSES)
    if exposes is not None:
        exposes = [
            expose for expose in exposes if not e.is_linkquality(expose)
        ] + [e.linkquality()]

    meta = definition.get(DEF_META, {})
    if _defines(definition, DEF_CONFIGURE) and META_CONFIGURE_KEY not in meta:
        raise DefinitionError(
            f"'{model}' has a configure but no meta.{META_CONFIGURE_KEY}",
            model=model,
        )

    return Definition(
        model=model,
        vendor=definition[DEF_VENDOR],
        description=definition[DEF_DESCRIPTION],
        zigbee_model=definition.get(DEF_ZIGBEE_MODEL, ()),
        fingerprint=[
            fp if isinstance(fp, Fingerprint) else Fingerprint.from_dict(fp)
            for fp in definition.get(DEF_FINGERPRINT, ())
        ],
        exposes=exposes,
        from_zigbee=definition.get(DEF_FROM_ZIGBEE, ()),
        to_zigbee=to_zigbee_converters,
        configure=definition.get(DEF_CONFIGURE),
        meta=meta,
        endpoint=definition.get(DEF_ENDPOINT),
        ota=definition.get(DEF_OTA),
        on_event=definition.get(DEF_ON_EVENT),
        white_label=[
            label if isinstance(label, WhiteLabel) else WhiteLabel(**label)
            for label in definition.get(DEF_WHITE_LABEL, ())
        ],
    )


def resolve_definitions(
    raws: typing.Iterable[RawDefinition],
    *,
    reject_duplicate_fingerprints: bool = False,
) -> tuple[Definition, ...]:
    """Resolve a whole table, checking invariants spanning definitions."""
    resolved: list[Definition] = []
    models: set[str] = set()
    fingerprints: dict[Fingerprint, Definition] = {}

    for raw in raws:
        definition = resolve_definition(raw)

        if definition.model in models:
            raise DuplicateModelError(
                f"Duplicate definition for model '{definition.model}'",
                model=definition.model,
            )
        models.add(definition.model)

        for fingerprint in definition.fingerprint:
            other = fingerprints.setdefault(fingerprint, definition)
            if other is definition:
                continue

            if reject_duplicate_fingerprints:
                raise DuplicateFingerprintError(
                    f"'{definition.model}' declares a fingerprint already declared"
                    f" by '{other.model}': {fingerprint}",
                    model=definition.model,
                )
            _LOGGER.warning(
                "'%s' declares a fingerprint already declared by '%s', it will"
                " never be matched through it: %s",
                definition.model,
                other.model,
                fingerprint,
            )

        resolved.append(definition)

    return tuple(resolved)

"""Device definition registry."""

from __future__ import annotations

import collections
import heapq
import logging
import typing

from zigcatalog.config import (
    CONF_CLUSTER_MATCH,
    CONF_INDEX_WHITE_LABELS,
    CONF_REJECT_DUPLICATE_FINGERPRINTS,
    CONF_STRICT_ENDPOINTS,
    CONFIG_SCHEMA,
)
from zigcatalog.definitions import (
    Definition,
    FilterType,
    Fingerprint,
    fingerprint_matches,
)
from zigcatalog.definitions.normalize import resolve_definitions
from zigcatalog.identity import DeviceIdentity
from zigcatalog.typing import ConfigType, RawDefinition

_LOGGER = logging.getLogger(__name__)

# (authoring position, fingerprint, filter, definition)
FingerprintEntry = tuple[int, Fingerprint, FilterType, Definition]


class DefinitionRegistry:
    """Immutable registry of resolved device definitions."""

    def __init__(
        self,
        definitions: typing.Iterable[Definition],
        config: ConfigType | None = None,
    ) -> None:
        """Initialize the registry from already resolved definitions."""
        self._config: ConfigType = CONFIG_SCHEMA(config or {})
        self._definitions: tuple[Definition, ...] = tuple(definitions)
        self._by_zigbee_model: dict[str, Definition] = {}
        self._by_model: dict[str, Definition] = {}
        self._by_white_label: dict[str, Definition] = {}
        self._fingerprints: dict[str | None, list[FingerprintEntry]] = (
            collections.defaultdict(list)
        )

        position = 0
        for definition in self._definitions:
            self._by_model[definition.model] = definition

            for zigbee_model in definition.zigbee_model:
                other = self._by_zigbee_model.setdefault(zigbee_model, definition)
                if other is not definition:
                    _LOGGER.warning(
                        "Zigbee model '%s' of '%s' is already claimed by '%s'",
                        zigbee_model,
                        definition.model,
                        other.model,
                    )

            for fingerprint in definition.fingerprint:
                matcher = fingerprint_matches(
                    fingerprint,
                    cluster_match=self._config[CONF_CLUSTER_MATCH],
                    strict_endpoints=self._config[CONF_STRICT_ENDPOINTS],
                )
                self._fingerprints[fingerprint.model].append(
                    (position, fingerprint, matcher, definition)
                )
                position += 1

        if self._config[CONF_INDEX_WHITE_LABELS]:
            for definition in self._definitions:
                for label in definition.white_label:
                    if label.model in self._by_model:
                        _LOGGER.warning(
                            "White label '%s' of '%s' shadows a definition model",
                            label.model,
                            definition.model,
                        )
                        continue
                    self._by_white_label.setdefault(label.model, definition)

        self._fingerprints = dict(self._fingerprints)

    @property
    def config(self) -> ConfigType:
        return self._config

    @property
    def definitions(self) -> tuple[Definition, ...]:
        """Return resolved definitions in authoring order."""
        return self._definitions

    def _fingerprint_candidates(
        self, identity: DeviceIdentity
    ) -> typing.Iterator[FingerprintEntry]:
        buckets = [self._fingerprints.get(None, [])]
        if identity.model is not None:
            buckets.append(self._fingerprints.get(identity.model, []))

        # both buckets are sorted by authoring position already
        return heapq.merge(*buckets, key=lambda entry: entry[0])

    def lookup(self, identity: DeviceIdentity) -> Definition | None:
        """Return the definition governing the device, None if it is unknown."""
        if not isinstance(identity, DeviceIdentity):
            raise TypeError(f"Expected a DeviceIdentity, got {type(identity)!r}")

        _LOGGER.debug(
            "Looking up definition for %s %s", identity.manufacturer, identity.model
        )

        if identity.model is not None and identity.model in self._by_zigbee_model:
            definition = self._by_zigbee_model[identity.model]
            _LOGGER.debug("Zigbee model match for %s: %s", identity.model, definition.model)
            return definition

        matches: list[Definition] = []
        for _position, fingerprint, matcher, definition in self._fingerprint_candidates(
            identity
        ):
            _LOGGER.debug("Considering %s of %s", fingerprint, definition.model)
            if any(match is definition for match in matches):
                continue
            if not matcher(identity):
                continue
            matches.append(definition)

        if not matches:
            _LOGGER.debug("No definition found for %s", identity)
            return None

        if len(matches) > 1:
            _LOGGER.warning(
                "Multiple definitions match %s %s, using the first one: %s",
                identity.manufacturer,
                identity.model,
                [definition.model for definition in matches],
            )

        return matches[0]

    def get_by_model(self, model: str) -> Definition | None:
        """Return the definition for a catalogue or white label model name."""
        definition = self._by_model.get(model)
        if definition is not None:
            return definition
        return self._by_white_label.get(model)

    def __contains__(self, model: object) -> bool:
        return model in self._by_model

    def __iter__(self) -> typing.Iterator[Definition]:
        return iter(self._definitions)

    def __len__(self) -> int:
        return len(self._definitions)


def build_registry(
    definitions: typing.Iterable[RawDefinition] | None = None,
    config: ConfigType | None = None,
) -> DefinitionRegistry:
    """Resolve authored definitions and build a registry out of them.

    Defaults to the bundled device table. Any invalid definition aborts the
    build by raising a DefinitionError.
    """
    config = CONFIG_SCHEMA(config or {})

    if definitions is None:
        from zigcatalog.devices import DEFINITIONS

        definitions = DEFINITIONS

    resolved = resolve_definitions(
        definitions,
        reject_duplicate_fingerprints=config[CONF_REJECT_DUPLICATE_FINGERPRINTS],
    )
    _LOGGER.debug("Resolved %d definitions", len(resolved))

    return DefinitionRegistry(resolved, config)

"""Config schemas and validation."""

from __future__ import annotations

import voluptuous as vol

from zigcatalog.config.defaults import (
    CONF_CLUSTER_MATCH_DEFAULT,
    CONF_INDEX_WHITE_LABELS_DEFAULT,
    CONF_REJECT_DUPLICATE_FINGERPRINTS_DEFAULT,
    CONF_STRICT_ENDPOINTS_DEFAULT,
)
from zigcatalog.config.validators import cv_boolean

CONF_CLUSTER_MATCH = "cluster_match"
CONF_INDEX_WHITE_LABELS = "index_white_labels"
CONF_REJECT_DUPLICATE_FINGERPRINTS = "reject_duplicate_fingerprints"
CONF_STRICT_ENDPOINTS = "strict_endpoints"

CLUSTER_MATCH_EXACT = "exact"
CLUSTER_MATCH_SUBSET = "subset"

CONFIG_SCHEMA = vol.Schema(
    {
        vol.Optional(CONF_CLUSTER_MATCH, default=CONF_CLUSTER_MATCH_DEFAULT): vol.All(
            str, vol.Lower, vol.In((CLUSTER_MATCH_EXACT, CLUSTER_MATCH_SUBSET))
        ),
        vol.Optional(
            CONF_STRICT_ENDPOINTS, default=CONF_STRICT_ENDPOINTS_DEFAULT
        ): cv_boolean,
        vol.Optional(
            CONF_REJECT_DUPLICATE_FINGERPRINTS,
            default=CONF_REJECT_DUPLICATE_FINGERPRINTS_DEFAULT,
        ): cv_boolean,
        vol.Optional(
            CONF_INDEX_WHITE_LABELS, default=CONF_INDEX_WHITE_LABELS_DEFAULT
        ): cv_boolean,
    },
    extra=vol.PREVENT_EXTRA,
)

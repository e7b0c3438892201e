"""Default values for the registry configuration."""

from __future__ import annotations

CONF_CLUSTER_MATCH_DEFAULT = "exact"
CONF_INDEX_WHITE_LABELS_DEFAULT = True
CONF_REJECT_DUPLICATE_FINGERPRINTS_DEFAULT = False
CONF_STRICT_ENDPOINTS_DEFAULT = False

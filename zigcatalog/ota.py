"""OTA provider references.

A definition may name the firmware source a runtime should query for the
device. Image download and validation belong to the runtime.
"""

from __future__ import annotations

import enum


class OtaProvider(str, enum.Enum):
    """Known firmware image sources."""

    IKEA = "ikea"
    INOVELLI = "inovelli"
    LEDVANCE = "ledvance"
    SALUS = "salus"
    SONOFF = "sonoff"
    THIRDREALITY = "thirdreality"
    ZIGBEE_OTA = "zigbee_ota"

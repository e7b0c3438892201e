from __future__ import annotations

MAJOR_VERSION = 0
MINOR_VERSION = 3
PATCH_VERSION = "0.dev0"
__short_version__ = f"{MAJOR_VERSION}.{MINOR_VERSION}"
__version__ = f"{__short_version__}.{PATCH_VERSION}"
